"""
Tests for preprocessors.py - text processors and variant expansion.
"""

import pytest

from modoshi.preprocessors import (
    ALPHABETIC_TO_HIRAGANA,
    ALPHANUMERIC_WIDTH_VARIANTS,
    CAPITALIZE_FIRST_LETTER,
    COLLAPSE_EMPHATIC_SEQUENCES,
    CONVERT_HALF_WIDTH_CHARACTERS,
    CONVERT_HIRAGANA_TO_KATAKANA,
    DECAPITALIZE,
    NORMALIZE_CJK_COMPATIBILITY_CHARACTERS,
    NORMALIZE_COMBINING_CHARACTERS,
    NORMALIZE_RADICAL_CHARACTERS,
    REMOVE_ALPHABETIC_DIACRITICS,
    STANDARDIZE_KANJI,
    BidirectionalOption,
    EmphaticOption,
    get_text_variants,
)


class TestProcessorOptions:
    """Every processor rejects options it does not declare."""

    def test_boolean_rejects_enum(self):
        with pytest.raises(ValueError):
            DECAPITALIZE.process("Text", BidirectionalOption.DIRECT)

    def test_bidirectional_rejects_bool(self):
        with pytest.raises(ValueError):
            CONVERT_HIRAGANA_TO_KATAKANA.process("かな", True)

    def test_emphatic_rejects_string(self):
        with pytest.raises(ValueError):
            COLLAPSE_EMPHATIC_SEQUENCES.process("すっごい", "full")

    @pytest.mark.parametrize("processor", [
        CONVERT_HALF_WIDTH_CHARACTERS, ALPHABETIC_TO_HIRAGANA, NORMALIZE_COMBINING_CHARACTERS,
        NORMALIZE_CJK_COMPATIBILITY_CHARACTERS, NORMALIZE_RADICAL_CHARACTERS, STANDARDIZE_KANJI,
        DECAPITALIZE, CAPITALIZE_FIRST_LETTER, REMOVE_ALPHABETIC_DIACRITICS,
    ])
    def test_boolean_off_is_identity(self, processor):
        assert processor.options == (False, True)
        assert processor.process("ﾖﾐ yomi ⼀ 萬 Café", False) == "ﾖﾐ yomi ⼀ 萬 Café"


class TestProcessors:
    """Behaviour of each processor when enabled."""

    def test_half_width(self):
        assert CONVERT_HALF_WIDTH_CHARACTERS.process("ﾖﾐﾁｬﾝ", True) == "ヨミチャン"

    def test_alphabetic_to_hiragana(self):
        assert ALPHABETIC_TO_HIRAGANA.process("yomichan", True) == "よみちゃん"

    def test_alphanumeric_width(self):
        assert ALPHANUMERIC_WIDTH_VARIANTS.process("ｙｏｍｉｔａｎ", BidirectionalOption.DIRECT) == "yomitan"
        assert ALPHANUMERIC_WIDTH_VARIANTS.process("yomitan", BidirectionalOption.INVERSE) == "ｙｏｍｉｔａｎ"
        assert ALPHANUMERIC_WIDTH_VARIANTS.process("yomitan", BidirectionalOption.OFF) == "yomitan"

    def test_hiragana_katakana(self):
        assert CONVERT_HIRAGANA_TO_KATAKANA.process("よみちゃん", BidirectionalOption.DIRECT) == "ヨミチャン"
        assert CONVERT_HIRAGANA_TO_KATAKANA.process("ヨミチャン", BidirectionalOption.INVERSE) == "よみちゃん"

    def test_emphatic(self):
        assert COLLAPSE_EMPHATIC_SEQUENCES.process("すっっごーーい", EmphaticOption.OFF) == "すっっごーーい"
        assert COLLAPSE_EMPHATIC_SEQUENCES.process("すっっごーーい", EmphaticOption.PARTIAL) == "すっごーい"
        assert COLLAPSE_EMPHATIC_SEQUENCES.process("すっっごーーい", EmphaticOption.FULL) == "すごい"

    def test_capitalization(self):
        assert DECAPITALIZE.process("CAPITALIZED TEXT", True) == "capitalized text"
        assert CAPITALIZE_FIRST_LETTER.process("lowercase text", True) == "Lowercase text"
        assert CAPITALIZE_FIRST_LETTER.process("", True) == ""

    def test_remove_diacritics(self):
        assert REMOVE_ALPHABETIC_DIACRITICS.process("ἄήé", True) == "αηe"

    def test_standardize_kanji(self):
        assert STANDARDIZE_KANJI.process("萬", True) == "万"


class TestTextVariants:
    """Tests for get_text_variants."""

    def test_capitalization_variants(self):
        processors = [("decapitalize", DECAPITALIZE), ("capitalize_first_letter", CAPITALIZE_FIRST_LETTER)]
        assert get_text_variants("rEAD", processors) == ["rEAD", "READ", "read", "Read"]

    def test_no_processors(self):
        assert get_text_variants("読む", []) == ["読む"]

    def test_variants_are_unique(self):
        processors = [("decapitalize", DECAPITALIZE), ("decapitalize_again", DECAPITALIZE)]
        assert get_text_variants("read", processors) == ["read"]
