"""
Text processors for Modoshi.

A text processor is a named, pure string function with a fixed set of
options. Lookups run every option of every processor over the input and
deinflect each distinct variant, so 'ﾖﾐﾁｬﾝ', 'よみちゃん' and 'yomichan'
all reach the same dictionary entries.
"""

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Sequence, Tuple

from modoshi.characters import (
    collapse_emphatic_sequences,
    convert_alphabetic_to_kana,
    convert_alphanumeric_to_fullwidth,
    convert_fullwidth_alphanumeric_to_normal,
    convert_halfwidth_kana_to_fullwidth,
    convert_hiragana_to_katakana,
    convert_katakana_to_hiragana,
    normalize_combining_characters,
)
from modoshi.cjk import normalize_cjk_compatibility_characters, normalize_radicals, standardize_kanji


# ============================================================================
# Options
# ============================================================================

class BidirectionalOption(Enum):
    OFF = "off"
    DIRECT = "direct"
    INVERSE = "inverse"


class EmphaticOption(Enum):
    OFF = "off"
    PARTIAL = "partial"
    FULL = "full"


BOOLEAN_OPTIONS: Tuple[bool, ...] = (False, True)
BIDIRECTIONAL_OPTIONS = tuple(BidirectionalOption)
EMPHATIC_OPTIONS = tuple(EmphaticOption)


@dataclass(frozen=True)
class TextProcessor:
    """
    A named text transformation.

    Attributes:
        name: Human-readable name.
        description: Short before/after example.
        options: Every option value `process` accepts.
        function: Implementation, called as function(text, option).
    """
    name: str
    description: str
    options: Tuple[Any, ...]
    function: Callable[[str, Any], str]

    def process(self, text: str, option: Any) -> str:
        """
        Apply the processor with one of its options.

        Raises:
            ValueError: If the option is not one of `options`.
        """
        if option not in self.options:
            raise ValueError(f"Invalid option {option!r} for '{self.name}'")
        return self.function(text, option)


# ============================================================================
# Processor Functions
# ============================================================================

def _when_enabled(convert: Callable[[str], str]) -> Callable[[str, bool], str]:
    def process(text: str, setting: bool) -> str:
        return convert(text) if setting else text
    return process


def _alphanumeric_width(text: str, setting: BidirectionalOption) -> str:
    if setting is BidirectionalOption.DIRECT:
        return convert_fullwidth_alphanumeric_to_normal(text)
    if setting is BidirectionalOption.INVERSE:
        return convert_alphanumeric_to_fullwidth(text)
    return text


def _hiragana_to_katakana(text: str, setting: BidirectionalOption) -> str:
    if setting is BidirectionalOption.DIRECT:
        return convert_hiragana_to_katakana(text)
    if setting is BidirectionalOption.INVERSE:
        return convert_katakana_to_hiragana(text)
    return text


def _collapse_emphatic(text: str, setting: EmphaticOption) -> str:
    if setting is EmphaticOption.OFF:
        return text
    return collapse_emphatic_sequences(text, setting is EmphaticOption.FULL)


def _decapitalize(text: str) -> str:
    return text.lower()


def _capitalize_first_letter(text: str) -> str:
    return text[:1].upper() + text[1:]


def _remove_alphabetic_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not 0x0300 <= ord(c) <= 0x036F)


# ============================================================================
# Japanese Processors
# ============================================================================

CONVERT_HALF_WIDTH_CHARACTERS = TextProcessor(
    name="Convert Half Width Characters to Full Width",
    description="ﾖﾐﾁｬﾝ → ヨミチャン",
    options=BOOLEAN_OPTIONS,
    function=_when_enabled(convert_halfwidth_kana_to_fullwidth),
)

ALPHABETIC_TO_HIRAGANA = TextProcessor(
    name="Convert Alphabetic Characters to Hiragana",
    description="yomichan → よみちゃん",
    options=BOOLEAN_OPTIONS,
    function=_when_enabled(convert_alphabetic_to_kana),
)

ALPHANUMERIC_WIDTH_VARIANTS = TextProcessor(
    name="Convert Between Alphabetic Width Variants",
    description="ｙｏｍｉｔａｎ → yomitan and vice versa",
    options=BIDIRECTIONAL_OPTIONS,
    function=_alphanumeric_width,
)

CONVERT_HIRAGANA_TO_KATAKANA = TextProcessor(
    name="Convert Hiragana to Katakana",
    description="よみちゃん → ヨミチャン and vice versa",
    options=BIDIRECTIONAL_OPTIONS,
    function=_hiragana_to_katakana,
)

COLLAPSE_EMPHATIC_SEQUENCES = TextProcessor(
    name="Collapse Emphatic Character Sequences",
    description="すっっごーーい → すっごーい / すごい",
    options=EMPHATIC_OPTIONS,
    function=_collapse_emphatic,
)

NORMALIZE_COMBINING_CHARACTERS = TextProcessor(
    name="Normalize Combining Characters",
    description="ド → ド (U+30C8 U+3099 → U+30C9)",
    options=BOOLEAN_OPTIONS,
    function=_when_enabled(normalize_combining_characters),
)

NORMALIZE_CJK_COMPATIBILITY_CHARACTERS = TextProcessor(
    name="Normalize CJK Compatibility Characters",
    description="㌀ → アパート",
    options=BOOLEAN_OPTIONS,
    function=_when_enabled(normalize_cjk_compatibility_characters),
)

STANDARDIZE_KANJI = TextProcessor(
    name="Convert kanji variants to their modern standard form",
    description="萬 → 万",
    options=BOOLEAN_OPTIONS,
    function=_when_enabled(standardize_kanji),
)


# ============================================================================
# Shared Processors
# ============================================================================

DECAPITALIZE = TextProcessor(
    name="Decapitalize Text",
    description="CAPITALIZED TEXT → capitalized text",
    options=BOOLEAN_OPTIONS,
    function=_when_enabled(_decapitalize),
)

CAPITALIZE_FIRST_LETTER = TextProcessor(
    name="Capitalize First Letter",
    description="lowercase text → Lowercase text",
    options=BOOLEAN_OPTIONS,
    function=_when_enabled(_capitalize_first_letter),
)

REMOVE_ALPHABETIC_DIACRITICS = TextProcessor(
    name="Remove Alphabetic Diacritics",
    description="ἄήé → αηe",
    options=BOOLEAN_OPTIONS,
    function=_when_enabled(_remove_alphabetic_diacritics),
)

NORMALIZE_RADICAL_CHARACTERS = TextProcessor(
    name="Normalize radical characters",
    description="⼀ → 一 (U+2F00 → U+4E00)",
    options=BOOLEAN_OPTIONS,
    function=_when_enabled(normalize_radicals),
)


# ============================================================================
# Variant Expansion
# ============================================================================

def get_text_variants(text: str, processors: Sequence[Tuple[str, TextProcessor]]) -> List[str]:
    """
    Run every option of every processor, in order, over a text.

    Each processor is applied with all of its options to every variant
    produced so far; duplicates are dropped, first occurrence wins.

    Args:
        text: Input text.
        processors: (id, processor) pairs in application order.

    Returns:
        Distinct variants, the unmodified text first.

    Example:
        >>> get_text_variants("Read", [("decapitalize", DECAPITALIZE)])
        ['Read', 'read']
    """
    variants = [text]
    for _, processor in processors:
        expanded = dict.fromkeys(
            processor.process(variant, option)
            for variant in variants
            for option in processor.options
        )
        variants = list(expanded)
    return variants
