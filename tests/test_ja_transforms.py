"""
Tests for the Japanese rule table.

Each case is (inflected source, dictionary term, expected condition,
reasons newest-first).
"""

import pytest

from modoshi.rules import DeinflectKind, RuleType
from modoshi.transforms.ja import JA_CONDITIONS, JA_TRANSFORMS


class TestTable:
    """Shape of the rule table."""

    def test_counts(self):
        assert len(JA_TRANSFORMS) == 53
        assert len(JA_CONDITIONS) == 22

    def test_rule_total(self):
        assert sum(len(t.rules) for t in JA_TRANSFORMS.values()) == 734

    def test_all_rules_are_suffix_rules(self):
        for transform in JA_TRANSFORMS.values():
            for rule in transform.rules:
                assert rule.rule_type is RuleType.SUFFIX
                assert rule.deinflect_kind is DeinflectKind.GENERIC_SUFFIX
                assert rule.pattern.endswith("$")

    def test_first_and_last_transforms(self):
        ids = list(JA_TRANSFORMS)
        assert ids[0] == "-ば"
        assert ids[-1] == "kansai-ben adjective negative"

    def test_conditions_reference_declared_names(self):
        for transform in JA_TRANSFORMS.values():
            for rule in transform.rules:
                for name in rule.conditions_in + rule.conditions_out:
                    assert name in JA_CONDITIONS

    def test_every_transform_has_japanese_name(self):
        for transform in JA_TRANSFORMS.values():
            assert transform.description
            assert any(i18n.language == "ja" for i18n in transform.i18n)


ADJECTIVE_CASES = [
    ("愛しそう", "愛しい", "adj-i", ["-そう"]),
    ("愛しすぎる", "愛しい", "adj-i", ["-すぎる"]),
    ("愛し過ぎる", "愛しい", "adj-i", ["-過ぎる"]),
    ("愛しかったら", "愛しい", "adj-i", ["-たら"]),
    ("愛しかったり", "愛しい", "adj-i", ["-たり"]),
    ("愛しくて", "愛しい", "adj-i", ["-て"]),
    ("愛しく", "愛しい", "adj-i", ["-く"]),
    ("愛しくない", "愛しい", "adj-i", ["negative"]),
    ("愛しさ", "愛しい", "adj-i", ["-さ"]),
    ("愛しかった", "愛しい", "adj-i", ["-た"]),
    ("愛しくありません", "愛しい", "adj-i", ["-ます", "negative"]),
    ("愛しくありませんでした", "愛しい", "adj-i", ["-ます", "negative", "-た"]),
    ("愛しき", "愛しい", "adj-i", ["-き"]),
    ("愛しげ", "愛しい", "adj-i", ["-げ"]),
    ("愛し気", "愛しい", "adj-i", ["-げ"]),
    ("愛しがる", "愛しい", "adj-i", ["-がる"]),
]

VERB_CASES = [
    ("買います", "買う", "v5", ["-ます"]),
    ("買った", "買う", "v5", ["-た"]),
    ("買いました", "買う", "v5", ["-ます", "-た"]),
    ("為ます", "為る", "vs", ["-ます"]),
    ("来ます", "来る", "vk", ["-ます"]),
    ("論じます", "論ずる", "vz", ["-ます"]),
    ("食べさせない", "食べる", "v1", ["causative", "negative"]),
    ("書かれた", "書く", "v5", ["passive", "-た"]),
    ("行って", "行く", "v5", ["-て"]),
    ("問うた", "問う", "v5", ["-た"]),
    ("読もう", "読む", "v5", ["volitional"]),
    ("食べろ", "食べる", "v1", ["imperative"]),
]

SLANG_CASES = [
    ("すげえ", "すごい", "adj-i", ["-え"]),
    ("すげぇ", "すごい", "adj-i", ["-え"]),
    ("食べちゃう", "食べる", "v1", ["-ちゃう"]),
]


class TestDeinflection:
    """Inflected forms reach their dictionary forms with the expected reasons."""

    @pytest.mark.parametrize("source,term,condition,reasons", ADJECTIVE_CASES)
    def test_adjectives(self, ja_transformer, term_reasons, source, term, condition, reasons):
        assert reasons in term_reasons(ja_transformer, source, term, condition)

    @pytest.mark.parametrize("source,term,condition,reasons", VERB_CASES)
    def test_verbs(self, ja_transformer, term_reasons, source, term, condition, reasons):
        assert reasons in term_reasons(ja_transformer, source, term, condition)

    @pytest.mark.parametrize("source,term,condition,reasons", SLANG_CASES)
    def test_slang(self, ja_transformer, term_reasons, source, term, condition, reasons):
        assert reasons in term_reasons(ja_transformer, source, term, condition)

    def test_wrong_condition_is_filtered(self, ja_transformer, term_reasons):
        """買う is a godan verb, so no ichidan reading of 買います reaches it."""
        assert term_reasons(ja_transformer, "買います", "買う", "v1") == []
