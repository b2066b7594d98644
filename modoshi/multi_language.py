"""
Multi-language transformer for Modoshi.

Holds one LanguageTransformer per registered language and routes each call
by language code. Every registered language is installed on construction. Calls for any
other language code behave as if that language had no rules at all.
"""

import logging
from typing import Dict, List, Optional, Sequence

from modoshi.languages import get_all_language_transform_descriptors
from modoshi.transformer import InflectionRule, LanguageTransformer, TransformedText

logger = logging.getLogger(__name__)


class MultiLanguageTransformer:
    """
    Registry of per-language transformers.

    Example:
        >>> mlt = MultiLanguageTransformer()
        >>> "walk" in [r.text for r in mlt.transform("en", "walked")]
        True
    """

    def __init__(self, max_results: Optional[int] = None):
        self.max_results = max_results
        self.language_transformers: Dict[str, LanguageTransformer] = {}
        self.prepare()

    def prepare(self) -> None:
        """(Re)build a transformer for every registered language."""
        for entry in get_all_language_transform_descriptors():
            transformer = LanguageTransformer(self.max_results)
            transformer.install(entry.descriptor)
            self.language_transformers[entry.iso] = transformer
        logger.debug(f"Prepared languages: {', '.join(self.language_transformers)}")

    @property
    def languages(self) -> List[str]:
        return list(self.language_transformers)

    def get_language_transformer(self, language: str) -> Optional[LanguageTransformer]:
        return self.language_transformers.get(language)

    def get_condition_flags_from_parts_of_speech(self, language: str, parts_of_speech: Sequence[str]) -> int:
        transformer = self.language_transformers.get(language)
        if transformer is None:
            return 0
        return transformer.get_condition_flags_from_parts_of_speech(parts_of_speech)

    def get_condition_flags_from_condition_types(self, language: str, condition_types: Sequence[str]) -> int:
        transformer = self.language_transformers.get(language)
        if transformer is None:
            return 0
        return transformer.get_condition_flags_from_condition_types(condition_types)

    def get_condition_flags_from_single_condition_type(self, language: str, condition_type: str) -> int:
        transformer = self.language_transformers.get(language)
        if transformer is None:
            return 0
        return transformer.get_condition_flags_from_single_condition_type(condition_type)

    def transform(self, language: str, source_text: str, max_results: Optional[int] = None) -> List[TransformedText]:
        """Deinflect a text with the rules of one language."""
        transformer = self.language_transformers.get(language)
        if transformer is None:
            return [TransformedText(source_text)]
        return transformer.transform(source_text, max_results)

    def get_user_facing_inflection_rules(self, language: str, inflection_rules: Sequence[str]) -> List[InflectionRule]:
        transformer = self.language_transformers.get(language)
        if transformer is None:
            return [InflectionRule(rule) for rule in inflection_rules]
        return transformer.get_user_facing_inflection_rules(inflection_rules)
