"""
Tests for the Spanish rule table, including stem changes and pronominal verbs.
"""

import pytest

from modoshi.rules import DeinflectKind, StemChange
from modoshi.transforms.es import ES_TRANSFORMS, add_accent


class TestTable:
    """Shape of the rule table."""

    def test_transform_ids(self):
        assert list(ES_TRANSFORMS) == [
            "plural", "feminine adjective", "present indicative", "preterite",
            "imperfect", "progressive", "imperative", "conditional", "future",
            "present subjunctive", "imperfect subjunctive", "participle",
            "reflexive", "pronoun substitution", "pronominal",
        ]

    def test_stem_change_rules_are_anchored(self):
        kinds = (DeinflectKind.GENERIC_STEM_CHANGE, DeinflectKind.SPECIAL_CASED_STEM_CHANGE)
        for transform in ES_TRANSFORMS.values():
            for rule in transform.rules:
                if rule.deinflect_kind in kinds:
                    assert rule.pattern.endswith("$")
                    assert rule.rewrite.endswith("$")

    def test_add_accent(self):
        assert [add_accent(c) for c in "aeioux"] == ["á", "é", "í", "ó", "ú", "x"]


class TestStemChange:
    """StemChange picks the exceptional pair for its prefix."""

    def test_prefix_pair(self):
        change = StemChange("ue", "o", "jue", "ue", "u")
        assert change.select("juego") == ("ue", "u")
        assert change.select("muevo") == ("ue", "o")


CASES = [
    ("hablo", "hablar", "v", ["present indicative"]),
    ("hablas", "hablar", "v", ["present indicative"]),
    ("hablamos", "hablar", "v", ["present indicative"]),
    ("habláis", "hablar", "v", ["present indicative"]),
    ("como", "comer", "v", ["present indicative"]),
    ("coméis", "comer", "v", ["present indicative"]),
    ("piensa", "pensar", "v", ["present indicative"]),
    ("juega", "jugar", "v", ["present indicative"]),
    ("huele", "oler", "v", ["present indicative"]),
    ("durmió", "dormir", "v", ["preterite"]),
    ("hablé", "hablar", "v", ["preterite"]),
    ("hablaba", "hablar", "v", ["imperfect"]),
    ("hablando", "hablar", "v", ["progressive"]),
    ("hablaré", "hablar", "v", ["future"]),
    ("me despertar", "despertarse", "v", ["pronominal"]),
    ("me lavo", "lavarse", "v", ["pronominal", "present indicative"]),
    ("gatos", "gato", "ns", ["plural"]),
    ("lápices", "lápiz", "ns", ["plural"]),
    ("canciones", "canción", "ns", ["plural"]),
    ("bonita", "bonito", "adj", ["feminine adjective"]),
    ("francesa", "francés", "adj", ["feminine adjective"]),
]


class TestDeinflection:
    """Inflected forms reach their dictionary forms with the expected reasons."""

    @pytest.mark.parametrize("source,term,condition,reasons", CASES)
    def test_cases(self, es_transformer, term_reasons, source, term, condition, reasons):
        assert reasons in term_reasons(es_transformer, source, term, condition)

    def test_pronominal_conditions(self, es_transformer):
        v = es_transformer.get_condition_flags_from_single_condition_type("v")
        node = next(r for r in es_transformer.transform("me despertar") if r.text == "despertarse")
        assert node.conditions == v
