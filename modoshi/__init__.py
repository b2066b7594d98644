"""
Modoshi: multi-language deinflection engine
Rewrites inflected words back to their dictionary forms (Japanese, English, Spanish).
"""

from typing import List, Optional

__version__ = "0.1.0"

_TRANSFORMER = None


def get_transformer():
    """
    Return the process-wide MultiLanguageTransformer, building it on first use.

    Installing every rule table compiles a few thousand regular expressions,
    so the work is done once and shared.

    Example:
        >>> import modoshi
        >>> modoshi.get_transformer().languages
        ['ja', 'en', 'es']
    """
    global _TRANSFORMER
    if _TRANSFORMER is None:
        from modoshi.multi_language import MultiLanguageTransformer

        _TRANSFORMER = MultiLanguageTransformer()
    return _TRANSFORMER


def deinflect(text: str, language: str = "ja", max_results: Optional[int] = None) -> List:
    """
    Deinflect a word with the rules of one language.

    Args:
        text: Inflected word, e.g. "食べさせない".
        language: Language code ("ja", "en" or "es").
        max_results: Optional cap on the number of candidates.

    Returns:
        List of TransformedText candidates, the input itself first.

    Example:
        >>> import modoshi
        >>> [r.text for r in modoshi.deinflect("looked", "en")][:2]
        ['looked', 'look']
    """
    return get_transformer().transform(language, text, max_results)


__all__ = ["__version__", "deinflect", "get_transformer"]
