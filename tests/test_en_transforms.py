"""
Tests for the English rule table, including phrasal verbs.
"""

import re

import pytest

from modoshi.rules import DeinflectKind
from modoshi.transforms.en import (
    EN_TRANSFORMS,
    PHRASAL_VERB_WORD_DISJUNCTION,
    phrasal_verb_inflection,
    phrasal_verb_interposed_object_rule,
)


class TestTable:
    """Shape of the rule table."""

    def test_transform_ids(self):
        assert list(EN_TRANSFORMS) == [
            "plural", "possessive", "past", "ing", "3rd pers. sing. pres",
            "interposed object", "archaic", "adverb", "comparative", "superlative",
            "dropped g", "-y", "un-", "going-to future", "will future",
            "imperative negative", "-able",
        ]

    def test_verb_suffix_rules_have_phrasal_twins(self):
        rules = EN_TRANSFORMS["past"].rules
        plain = [r for r in rules if r.deinflect_kind is DeinflectKind.GENERIC_SUFFIX]
        phrasal = [r for r in rules if r.deinflect_kind is DeinflectKind.EN_PHRASAL_VERB_INFLECTION]
        assert len(plain) == len(phrasal)
        assert [r.inflected for r in plain] == [r.inflected for r in phrasal]

    def test_word_disjunction_has_no_duplicates(self):
        words = PHRASAL_VERB_WORD_DISJUNCTION.split("|")
        assert len(words) == len(set(words))
        assert "up" in words and "upon" in words

    def test_able_goes_from_adjective_to_verb(self):
        """-able rules accept an adjective and produce a verb."""
        for rule in EN_TRANSFORMS["-able"].rules:
            assert rule.conditions_in == ("adj",)
            assert rule.conditions_out == ("v",)


class TestPhrasalRules:
    """Phrasal verb rule construction."""

    def test_inflection_rule(self):
        rule = phrasal_verb_inflection("ed", "")
        assert re.search(rule.pattern, "looked up")
        assert not re.search(rule.pattern, "looked")
        assert rule.conditions_out == ("v_phr",)

    def test_interposed_object_rule(self):
        rule = phrasal_verb_interposed_object_rule()
        assert re.search(rule.pattern, "look it up")
        assert not re.search(rule.pattern, "look up")


CASES = [
    ("walked", "walk", "v", ["past"]),
    ("hoped", "hope", "v", ["past"]),
    ("tried", "try", "v", ["past"]),
    ("stopped", "stop", "v", ["past"]),
    ("walking", "walk", "v", ["ing"]),
    ("running", "run", "v", ["ing"]),
    ("walks", "walk", "v", ["3rd pers. sing. pres"]),
    ("looked up", "look up", "v_phr", ["past"]),
    ("looking up", "look up", "v_phr", ["ing"]),
    ("look it up", "look up", "v_phr", ["interposed object"]),
    ("looked it up", "look up", "v_phr", ["past", "interposed object"]),
    ("cats", "cat", "ns", ["plural"]),
    ("happily", "happy", "adj", ["adverb"]),
    ("unhappy", "happy", "adj", ["un-"]),
    ("faster", "fast", "adj", ["comparative"]),
    ("biggest", "big", "adj", ["superlative"]),
    ("walkin'", "walk", "v", ["ing", "dropped g"]),
    ("going to eat", "eat", "v", ["going-to future"]),
    ("will eat", "eat", "v", ["will future"]),
    ("don't eat", "eat", "v", ["imperative negative"]),
    ("readable", "read", "v", ["-able"]),
]


class TestDeinflection:
    """Inflected forms reach their dictionary forms with the expected reasons."""

    @pytest.mark.parametrize("source,term,condition,reasons", CASES)
    def test_cases(self, en_transformer, term_reasons, source, term, condition, reasons):
        assert reasons in term_reasons(en_transformer, source, term, condition)

    def test_walked_node(self, en_transformer):
        v = en_transformer.get_condition_flags_from_single_condition_type("v")
        walk = en_transformer.transform("walked")[1]
        assert (walk.text, walk.conditions) == ("walk", v)
        assert walk.trace[0].rule_index == 0
