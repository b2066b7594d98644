"""
Furigana distribution for Modoshi.

Splits a term into segments and assigns each non-kana run the slice of the
reading that covers it:

    食べ物 / たべもの -> [食|た] [べ] [物|もの]

The partition is found by recursing over alternating kana and non-kana
groups of the term, trying the longest reading slice first for each
non-kana group. A term whose reading can be split in more than one way is
left unsplit.
"""

from dataclasses import dataclass
from typing import List, Optional

from modoshi.characters import (
    convert_katakana_to_hiragana,
    get_stem_length,
    is_code_point_kana,
)


@dataclass(frozen=True)
class FuriganaSegment:
    """A piece of a term with its reading, or None for plain kana."""
    text: str
    reading: Optional[str] = None

    def __post_init__(self):
        if self.reading == "":
            object.__setattr__(self, "reading", None)


@dataclass
class _FuriganaGroup:
    is_kana: bool
    text: str
    text_normalized: Optional[str] = None


def _group_term(term: str) -> List[_FuriganaGroup]:
    groups: List[_FuriganaGroup] = []
    for char in term:
        is_kana = is_code_point_kana(ord(char))
        if groups and groups[-1].is_kana == is_kana:
            groups[-1].text += char
        else:
            groups.append(_FuriganaGroup(is_kana, char))

    for group in groups:
        if group.is_kana:
            group.text_normalized = convert_katakana_to_hiragana(group.text)
    return groups


def _get_furigana_kana_segments(text: str, reading: str) -> List[FuriganaSegment]:
    # Split kana text wherever it starts or stops agreeing with the reading
    segments: List[FuriganaSegment] = []
    if not text:
        return segments

    start = 0
    state = text[0] == reading[0]
    for i in range(1, len(text)):
        new_state = text[i] == reading[i]
        if state == new_state:
            continue
        segments.append(FuriganaSegment(text[start:i], None if state else reading[start:i]))
        state = new_state
        start = i
    segments.append(FuriganaSegment(text[start:], None if state else reading[start:]))
    return segments


def _segmentize_furigana(
    reading: str,
    reading_normalized: str,
    groups: List[_FuriganaGroup],
    group_index: int,
) -> Optional[List[FuriganaSegment]]:
    if group_index >= len(groups):
        return [] if not reading else None

    group = groups[group_index]

    if group.is_kana:
        text_normalized = group.text_normalized or ""
        if not reading_normalized.startswith(text_normalized):
            return None

        n = len(text_normalized)
        segments = _segmentize_furigana(
            reading[n:], reading_normalized[n:], groups, group_index + 1
        )
        if segments is None:
            return None

        reading_prefix = reading[:n]
        if reading_prefix == group.text:
            segments.insert(0, FuriganaSegment(group.text, None))
        else:
            segments[0:0] = _get_furigana_kana_segments(group.text, reading_prefix)
        return segments

    result: Optional[List[FuriganaSegment]] = None
    for length in range(len(reading), len(group.text) - 1, -1):
        segments = _segmentize_furigana(
            reading[length:], reading_normalized[length:], groups, group_index + 1
        )
        if segments is None:
            continue
        if result is not None:
            # more than one way to split
            return None
        segments.insert(0, FuriganaSegment(group.text, reading[:length]))
        result = segments

        if group_index + 1 == len(groups):
            break
    return result


def distribute_furigana(term: str, reading: str) -> List[FuriganaSegment]:
    """
    Split a term into segments annotated with their readings.

    Args:
        term: Term as written, e.g. "食べ物".
        reading: Kana reading of the whole term, e.g. "たべもの".

    Returns:
        Segments whose texts concatenate to the term. When no unique split
        exists the whole term is returned as one segment carrying the
        whole reading.

    Example:
        >>> distribute_furigana("食べる", "たべる")
        [FuriganaSegment(text='食', reading='た'), FuriganaSegment(text='べる', reading=None)]
    """
    if reading == term:
        return [FuriganaSegment(term, None)]

    groups = _group_term(term)
    reading_normalized = convert_katakana_to_hiragana(reading)
    segments = _segmentize_furigana(reading, reading_normalized, groups, 0)
    if segments is not None:
        return segments
    return [FuriganaSegment(term, reading)]


def distribute_furigana_inflected(term: str, reading: str, source: str) -> List[FuriganaSegment]:
    """
    Distribute furigana over an inflected form of a term.

    The stem shared by the dictionary term and the inflected source keeps
    the term's furigana; the inflected tail is added as plain text.

    Args:
        term: Dictionary form, e.g. "食べる".
        reading: Reading of the dictionary form, e.g. "たべる".
        source: Inflected text as found, e.g. "食べた".

    Returns:
        Segments whose texts concatenate to the source.

    Example:
        >>> distribute_furigana_inflected("食べる", "たべる", "食べた")
        [FuriganaSegment(text='食', reading='た'), FuriganaSegment(text='べた', reading=None)]
    """
    term_normalized = convert_katakana_to_hiragana(term)
    reading_normalized = convert_katakana_to_hiragana(reading)
    source_normalized = convert_katakana_to_hiragana(source)

    main_text = term
    stem_length = get_stem_length(term_normalized, source_normalized)

    # Source written in kana that matches the reading
    reading_stem_length = get_stem_length(reading_normalized, source_normalized)
    if reading_stem_length > 0 and reading_stem_length >= stem_length:
        main_text = reading
        stem_length = reading_stem_length
        reading = source[:stem_length] + reading[stem_length:]

    segments: List[FuriganaSegment] = []
    if stem_length > 0:
        main_text = source[:stem_length] + main_text[stem_length:]
        consumed = 0
        for segment in distribute_furigana(main_text, reading):
            start = consumed
            consumed += len(segment.text)
            if consumed < stem_length:
                segments.append(segment)
            elif consumed == stem_length:
                segments.append(segment)
                break
            else:
                if start < stem_length:
                    segments.append(FuriganaSegment(main_text[start:stem_length], None))
                break

    if stem_length < len(source):
        remainder = source[stem_length:]
        if segments and segments[-1].reading is None:
            last = segments.pop()
            segments.append(FuriganaSegment(last.text + remainder, None))
        else:
            segments.append(FuriganaSegment(remainder, None))

    return segments
