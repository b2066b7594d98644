"""
Tests for characters.py and cjk.py - kana tables and character conversion.
"""

import pytest

from modoshi.characters import (
    DiacriticType,
    PitchCategory,
    collapse_emphatic_sequences,
    convert_alphabetic_to_kana,
    convert_alphanumeric_to_fullwidth,
    convert_fullwidth_alphanumeric_to_normal,
    convert_halfwidth_kana_to_fullwidth,
    convert_hiragana_to_katakana,
    convert_katakana_to_hiragana,
    get_kana_diacritic_info,
    get_kana_mora_count,
    get_kana_morae,
    get_pitch_category,
    get_stem_length,
    is_code_point_japanese,
    is_code_point_kana,
    is_code_point_kanji,
    is_mora_pitch_high,
    is_string_entirely_kana,
    is_string_partially_japanese,
    normalize_combining_characters,
)
from modoshi.cjk import normalize_cjk_compatibility_characters, normalize_radicals, standardize_kanji


class TestCharacterClasses:
    """Tests for code point classification."""

    def test_kana(self):
        assert is_code_point_kana(ord("あ"))
        assert is_code_point_kana(ord("ア"))
        assert not is_code_point_kana(ord("漢"))

    def test_kanji(self):
        assert is_code_point_kanji(ord("漢"))
        assert is_code_point_kanji(0x20000)
        assert not is_code_point_kanji(ord("あ"))

    def test_japanese(self):
        assert is_code_point_japanese(ord("ｱ"))
        assert is_code_point_japanese(ord("Ａ"))
        assert is_code_point_japanese(ord("。"))
        assert not is_code_point_japanese(ord("A"))

    def test_string_predicates(self):
        assert is_string_entirely_kana("ひらがなカタカナ")
        assert not is_string_entirely_kana("漢字かな")
        assert not is_string_entirely_kana("")
        assert is_string_partially_japanese("read 読む")
        assert not is_string_partially_japanese("read")
        assert not is_string_partially_japanese("")

    def test_stem_length(self):
        assert get_stem_length("食べる", "食べた") == 2
        assert get_stem_length("abc", "xyz") == 0
        assert get_stem_length("同じ", "同じ") == 2


class TestKanaConversion:
    """Tests for hiragana/katakana conversion."""

    def test_katakana_to_hiragana(self):
        assert convert_katakana_to_hiragana("カタカナ") == "かたかな"

    def test_small_ka_ke_are_kept(self):
        assert convert_katakana_to_hiragana("ヵヶ") == "ヵヶ"

    @pytest.mark.parametrize("text,expected", [
        ("ラーメン", "らあめん"),
        ("スーパー", "すうぱあ"),
        ("コーヒー", "こうひい"),
        ("ケーキ", "けえき"),
        ("ー", "ー"),
    ])
    def test_prolonged_sound_mark(self, text, expected):
        assert convert_katakana_to_hiragana(text) == expected

    def test_keep_prolonged_sound_marks(self):
        assert convert_katakana_to_hiragana("ラーメン", keep_prolonged_sound_marks=True) == "らーめん"

    def test_hiragana_to_katakana(self):
        assert convert_hiragana_to_katakana("ひらがなー") == "ヒラガナー"


class TestWidthConversion:
    """Tests for half-width and full-width conversion."""

    def test_halfwidth_kana(self):
        assert convert_halfwidth_kana_to_fullwidth("ﾖﾐﾁｬﾝ") == "ヨミチャン"

    def test_halfwidth_voiced_marks(self):
        assert convert_halfwidth_kana_to_fullwidth("ｶﾞﾊﾟｳﾞ") == "ガパヴ"

    def test_halfwidth_mark_without_voiced_form_is_kept(self):
        assert convert_halfwidth_kana_to_fullwidth("ｱﾞ") == "アﾞ"

    def test_alphanumeric(self):
        assert convert_alphanumeric_to_fullwidth("yomi123") == "ｙｏｍｉ１２３"
        assert convert_fullwidth_alphanumeric_to_normal("ｙｏｍｉＴＡＮ１２３") == "yomiTAN123"


class TestCombiningCharacters:
    """Tests for composing combining (han)dakuten."""

    def test_dakuten(self):
        assert normalize_combining_characters("\u30c8\u3099") == "\u30c9"
        assert normalize_combining_characters("\u304b\u3099") == "\u304c"

    def test_handakuten(self):
        assert normalize_combining_characters("\u30cf\u309a") == "\u30d1"

    def test_not_allowed(self):
        assert normalize_combining_characters("\u30a2\u3099") == "\u30a2\u3099"
        assert normalize_combining_characters("\u304b\u309a") == "\u304b\u309a"


class TestEmphatic:
    """Tests for collapsing emphatic sequences."""

    def test_partial(self):
        assert collapse_emphatic_sequences("すっっごーーい", False) == "すっごーい"

    def test_full(self):
        assert collapse_emphatic_sequences("すっっごーーい", True) == "すごい"

    def test_edges_are_kept(self):
        assert collapse_emphatic_sequences("っかっっっかー", True) == "っかかー"
        assert collapse_emphatic_sequences("ーーー", False) == "ーーー"
        assert collapse_emphatic_sequences("", True) == ""


class TestRomaji:
    """Tests for romaji to hiragana conversion."""

    @pytest.mark.parametrize("text,expected", [
        ("yomichan", "よみちゃん"),
        ("kitte", "きって"),
        ("konnichiha", "こんにちは"),
        ("TOKYO", "ときょ"),
        ("ra-men", "らーめん"),
        ("x1", "x1"),
    ])
    def test_convert(self, text, expected):
        assert convert_alphabetic_to_kana(text) == expected


class TestMorae:
    """Tests for mora splitting and pitch helpers."""

    def test_morae(self):
        assert get_kana_morae("きょうと") == ["きょ", "う", "と"]
        assert get_kana_mora_count("きょうと") == 3
        assert get_kana_mora_count("ょ") == 1

    def test_pitch_high(self):
        assert [is_mora_pitch_high(i, 0) for i in range(3)] == [False, True, True]
        assert [is_mora_pitch_high(i, 1) for i in range(3)] == [True, False, False]
        assert [is_mora_pitch_high(i, 2) for i in range(3)] == [False, True, False]

    @pytest.mark.parametrize("text,position,verb,expected", [
        ("はし", 0, False, PitchCategory.HEIBAN),
        ("はし", 1, False, PitchCategory.ATAMADAKA),
        ("はし", 2, False, PitchCategory.ODAKA),
        ("たまご", 2, False, PitchCategory.NAKADAKA),
        ("たべる", 2, True, PitchCategory.KIFUKU),
    ])
    def test_pitch_category(self, text, position, verb, expected):
        assert get_pitch_category(text, position, verb) is expected

    def test_diacritic_info(self):
        info = get_kana_diacritic_info("ぱ")
        assert (info.character, info.type) == ("は", DiacriticType.HANDAKUTEN)
        assert get_kana_diacritic_info("ガ").type is DiacriticType.DAKUTEN
        assert get_kana_diacritic_info("あ") is None


class TestCJK:
    """Tests for CJK normalization."""

    def test_compatibility(self):
        assert normalize_cjk_compatibility_characters("\u3300") == "アパート"

    def test_radicals(self):
        assert normalize_radicals("\u2f00") == "\u4e00"

    def test_standardize_kanji(self):
        assert standardize_kanji("萬國") == "万国"
        assert standardize_kanji("日本") == "日本"
