"""
Tests for furigana.py - splitting readings over a term.
"""

from modoshi.furigana import FuriganaSegment, distribute_furigana, distribute_furigana_inflected


def _pairs(segments):
    return [(s.text, s.reading) for s in segments]


class TestDistributeFurigana:
    """Tests for distribute_furigana."""

    def test_reading_equals_term(self):
        assert _pairs(distribute_furigana("ひらがな", "ひらがな")) == [("ひらがな", None)]

    def test_okurigana(self):
        assert _pairs(distribute_furigana("食べる", "たべる")) == [("食", "た"), ("べる", None)]

    def test_kanji_between_kana(self):
        assert _pairs(distribute_furigana("お茶", "おちゃ")) == [("お", None), ("茶", "ちゃ")]

    def test_multiple_groups(self):
        assert _pairs(distribute_furigana("食べ物", "たべもの")) == [
            ("食", "た"), ("べ", None), ("物", "もの"),
        ]

    def test_katakana_term(self):
        assert _pairs(distribute_furigana("カタカナ", "かたかな")) == [("カタカナ", "かたかな")]

    def test_partial_katakana_match(self):
        assert _pairs(distribute_furigana("アか", "あか")) == [("ア", "あ"), ("か", None)]

    def test_all_kanji(self):
        assert _pairs(distribute_furigana("日本語", "にほんご")) == [("日本語", "にほんご")]

    def test_ambiguous_split_falls_back(self):
        """の can be covered by either kanji, so the term stays whole."""
        assert _pairs(distribute_furigana("木の葉", "きのはのは")) == [("木の葉", "きのはのは")]

    def test_mismatch_falls_back(self):
        assert _pairs(distribute_furigana("食べる", "のむ")) == [("食べる", "のむ")]

    def test_concatenation_is_term(self):
        for term, reading in [("食べ物", "たべもの"), ("お茶", "おちゃ"), ("見る", "みる")]:
            assert "".join(s.text for s in distribute_furigana(term, reading)) == term


class TestDistributeFuriganaInflected:
    """Tests for distribute_furigana_inflected."""

    def test_past(self):
        assert _pairs(distribute_furigana_inflected("食べる", "たべる", "食べた")) == [
            ("食", "た"), ("べた", None),
        ]

    def test_kana_source(self):
        assert _pairs(distribute_furigana_inflected("食べる", "たべる", "たべた")) == [("たべた", None)]

    def test_stem_cut_inside_segment(self):
        assert _pairs(distribute_furigana_inflected("来る", "くる", "来ない")) == [
            ("来", "く"), ("ない", None),
        ]

    def test_no_common_stem(self):
        assert _pairs(distribute_furigana_inflected("する", "する", "した")) == [("した", None)]


class TestSegment:
    """Tests for FuriganaSegment."""

    def test_empty_reading_is_none(self):
        assert FuriganaSegment("か", "").reading is None
