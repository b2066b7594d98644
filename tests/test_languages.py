"""
Tests for languages.py and multi_language.py - the language registry.
"""

import pytest

import modoshi
from modoshi.languages import (
    LANGUAGE_DESCRIPTORS,
    get_all_language_reading_normalizers,
    get_all_language_text_processors,
    get_all_language_transform_descriptors,
    get_language_summaries,
    is_text_lookup_worthy,
)
from modoshi.multi_language import MultiLanguageTransformer
from modoshi.transformer import InflectionRule, TransformedText


class TestRegistry:
    """Tests for the language descriptor registry."""

    def test_summaries(self):
        summaries = [(s.iso, s.iso639_3, s.name, s.example_text) for s in get_language_summaries()]
        assert summaries == [
            ("ja", "jpn", "Japanese", "読め"),
            ("en", "eng", "English", "read"),
            ("es", "spa", "Spanish", "leer"),
        ]

    def test_japanese_preprocessor_order(self):
        ids = [name for name, _ in LANGUAGE_DESCRIPTORS["ja"].preprocessors]
        assert ids == [
            "convert_half_width_characters",
            "alphabetic_to_hiragana",
            "normalize_combining_characters",
            "normalize_cjk_compatibility_characters",
            "normalize_radical_characters",
            "standardize_kanji",
            "alphanumeric_width_variants",
            "convert_hiragana_to_katakana",
            "collapse_emphatic_sequences",
        ]

    def test_text_processors(self):
        processors = {p.iso: [name for name, _ in p.preprocessors] for p in get_all_language_text_processors()}
        assert processors["en"] == ["decapitalize", "capitalize_first_letter"]
        assert processors["es"] == processors["en"]

    def test_transform_descriptors(self):
        entries = get_all_language_transform_descriptors()
        assert [(e.iso, e.descriptor.language) for e in entries] == [("ja", "ja"), ("en", "en"), ("es", "es")]

    def test_no_reading_normalizers(self):
        assert get_all_language_reading_normalizers() == []

    @pytest.mark.parametrize("text,language,expected", [
        ("読む", "ja", True),
        ("read", "ja", False),
        ("read", "en", True),
        ("leer", "es", True),
        ("read", "xx", False),
    ])
    def test_lookup_worthy(self, text, language, expected):
        assert is_text_lookup_worthy(text, language) is expected


class TestMultiLanguageTransformer:
    """Tests for routing calls by language."""

    def test_languages(self, multi_transformer):
        assert multi_transformer.languages == ["ja", "en", "es"]

    def test_each_language_has_own_flags(self, multi_transformer):
        assert multi_transformer.get_condition_flags_from_single_condition_type("ja", "v1") == 3
        assert multi_transformer.get_condition_flags_from_single_condition_type("en", "v") == 1
        assert multi_transformer.get_condition_flags_from_single_condition_type("es", "v") == 28

    def test_transform(self, multi_transformer):
        assert "流れる" in [r.text for r in multi_transformer.transform("ja", "流れて")]
        assert "bueno" == multi_transformer.transform("es", "bueno")[0].text

    def test_unknown_language(self, multi_transformer):
        assert multi_transformer.transform("xx", "text") == [TransformedText("text")]
        assert multi_transformer.get_condition_flags_from_parts_of_speech("xx", ["v"]) == 0
        assert multi_transformer.get_condition_flags_from_condition_types("xx", ["v"]) == 0
        assert multi_transformer.get_condition_flags_from_single_condition_type("xx", "v") == 0
        assert multi_transformer.get_user_facing_inflection_rules("xx", ["past"]) == [InflectionRule("past")]

    def test_user_facing_rules(self, multi_transformer):
        rules = multi_transformer.get_user_facing_inflection_rules("en", ["past"])
        assert rules == [InflectionRule("past", "Simple past tense of a verb")]

    def test_languages_installed_on_construction(self):
        fresh = MultiLanguageTransformer()
        assert fresh.languages == ["ja", "en", "es"]
        assert "walk" in [r.text for r in fresh.transform("en", "walked")]

    def test_cap_passed_to_each_language(self):
        capped = MultiLanguageTransformer(max_results=1)
        assert capped.transform("en", "walked") == [TransformedText("walked")]

    def test_get_language_transformer(self, multi_transformer):
        assert multi_transformer.get_language_transformer("en").languages == ["en"]
        assert multi_transformer.get_language_transformer("xx") is None


class TestPackageApi:
    """Tests for the top-level helpers."""

    def test_deinflect(self):
        assert [r.text for r in modoshi.deinflect("looked", "en")][:2] == ["looked", "look"]

    def test_shared_transformer(self):
        assert modoshi.get_transformer() is modoshi.get_transformer()

    def test_version(self):
        assert modoshi.__version__ == "0.1.0"
