"""
Language registry for Modoshi.

Each supported language is described once: its ISO codes, an example
word, the text processors applied before lookup, an optional reading
normalizer and its deinflection rules.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from modoshi.characters import is_string_partially_japanese
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
    STANDARDIZE_KANJI,
    TextProcessor,
)
from modoshi.rules import LanguageTransformDescriptor
from modoshi.transforms import (
    ENGLISH_TRANSFORMS_DESCRIPTOR,
    JAPANESE_TRANSFORMS_DESCRIPTOR,
    SPANISH_TRANSFORMS_DESCRIPTOR,
)

ProcessorList = Tuple[Tuple[str, TextProcessor], ...]


@dataclass(frozen=True)
class LanguageDescriptor:
    iso: str
    iso639_3: str
    name: str
    example_text: str
    is_text_lookup_worthy: Optional[Callable[[str], bool]] = None
    reading_normalizer: Optional[Callable[[str], str]] = None
    preprocessors: ProcessorList = ()
    postprocessors: ProcessorList = ()
    transforms: Optional[LanguageTransformDescriptor] = None


@dataclass(frozen=True)
class LanguageSummary:
    iso: str
    iso639_3: str
    name: str
    example_text: str


@dataclass(frozen=True)
class LanguageReadingNormalizer:
    iso: str
    reading_normalizer: Callable[[str], str]


@dataclass(frozen=True)
class LanguageTextProcessors:
    iso: str
    preprocessors: ProcessorList = ()
    postprocessors: ProcessorList = ()


@dataclass(frozen=True)
class LanguageTransforms:
    iso: str
    descriptor: LanguageTransformDescriptor = field(repr=False)


# ============================================================================
# Registry
# ============================================================================

CAPITALIZATION_PREPROCESSORS: ProcessorList = (
    ("decapitalize", DECAPITALIZE),
    ("capitalize_first_letter", CAPITALIZE_FIRST_LETTER),
)

JAPANESE_PREPROCESSORS: ProcessorList = (
    ("convert_half_width_characters", CONVERT_HALF_WIDTH_CHARACTERS),
    ("alphabetic_to_hiragana", ALPHABETIC_TO_HIRAGANA),
    ("normalize_combining_characters", NORMALIZE_COMBINING_CHARACTERS),
    ("normalize_cjk_compatibility_characters", NORMALIZE_CJK_COMPATIBILITY_CHARACTERS),
    ("normalize_radical_characters", NORMALIZE_RADICAL_CHARACTERS),
    ("standardize_kanji", STANDARDIZE_KANJI),
    ("alphanumeric_width_variants", ALPHANUMERIC_WIDTH_VARIANTS),
    ("convert_hiragana_to_katakana", CONVERT_HIRAGANA_TO_KATAKANA),
    ("collapse_emphatic_sequences", COLLAPSE_EMPHATIC_SEQUENCES),
)

LANGUAGE_DESCRIPTORS: Dict[str, LanguageDescriptor] = {
    "ja": LanguageDescriptor(
        iso="ja",
        iso639_3="jpn",
        name="Japanese",
        example_text="読め",
        is_text_lookup_worthy=is_string_partially_japanese,
        preprocessors=JAPANESE_PREPROCESSORS,
        transforms=JAPANESE_TRANSFORMS_DESCRIPTOR,
    ),
    "en": LanguageDescriptor(
        iso="en",
        iso639_3="eng",
        name="English",
        example_text="read",
        preprocessors=CAPITALIZATION_PREPROCESSORS,
        transforms=ENGLISH_TRANSFORMS_DESCRIPTOR,
    ),
    "es": LanguageDescriptor(
        iso="es",
        iso639_3="spa",
        name="Spanish",
        example_text="leer",
        preprocessors=CAPITALIZATION_PREPROCESSORS,
        transforms=SPANISH_TRANSFORMS_DESCRIPTOR,
    ),
}


# ============================================================================
# Queries
# ============================================================================

def get_language_descriptor(iso: str) -> Optional[LanguageDescriptor]:
    return LANGUAGE_DESCRIPTORS.get(iso)


def get_language_summaries() -> List[LanguageSummary]:
    return [
        LanguageSummary(d.iso, d.iso639_3, d.name, d.example_text)
        for d in LANGUAGE_DESCRIPTORS.values()
    ]


def get_all_language_reading_normalizers() -> List[LanguageReadingNormalizer]:
    """Languages that define a reading normalizer; none do yet."""
    return [
        LanguageReadingNormalizer(d.iso, d.reading_normalizer)
        for d in LANGUAGE_DESCRIPTORS.values()
        if d.reading_normalizer is not None
    ]


def get_all_language_text_processors() -> List[LanguageTextProcessors]:
    return [
        LanguageTextProcessors(d.iso, d.preprocessors, d.postprocessors)
        for d in LANGUAGE_DESCRIPTORS.values()
    ]


def get_all_language_transform_descriptors() -> List[LanguageTransforms]:
    return [
        LanguageTransforms(d.iso, d.transforms)
        for d in LANGUAGE_DESCRIPTORS.values()
        if d.transforms is not None
    ]


def is_text_lookup_worthy(text: str, language: str) -> bool:
    """
    Check whether a text is worth looking up in a language.

    Unknown languages are never worth it; languages without a predicate
    accept any text.

    Example:
        >>> is_text_lookup_worthy("読む", "ja"), is_text_lookup_worthy("read", "ja")
        (True, False)
    """
    descriptor = LANGUAGE_DESCRIPTORS.get(language)
    if descriptor is None:
        return False
    if descriptor.is_text_lookup_worthy is None:
        return True
    return descriptor.is_text_lookup_worthy(text)
