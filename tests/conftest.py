"""
Shared fixtures for modoshi tests.
"""

import pytest

from modoshi.multi_language import MultiLanguageTransformer
from modoshi.transformer import LanguageTransformer
from modoshi.transforms import (
    ENGLISH_TRANSFORMS_DESCRIPTOR,
    JAPANESE_TRANSFORMS_DESCRIPTOR,
    SPANISH_TRANSFORMS_DESCRIPTOR,
)


def _build(descriptor):
    transformer = LanguageTransformer()
    transformer.install(descriptor)
    return transformer


@pytest.fixture(scope="session")
def ja_transformer():
    """Transformer with the Japanese rules installed."""
    return _build(JAPANESE_TRANSFORMS_DESCRIPTOR)


@pytest.fixture(scope="session")
def en_transformer():
    """Transformer with the English rules installed."""
    return _build(ENGLISH_TRANSFORMS_DESCRIPTOR)


@pytest.fixture(scope="session")
def es_transformer():
    """Transformer with the Spanish rules installed."""
    return _build(SPANISH_TRANSFORMS_DESCRIPTOR)


@pytest.fixture(scope="session")
def multi_transformer():
    """MultiLanguageTransformer with every registered language prepared."""
    return MultiLanguageTransformer()


def _term_reasons(transformer, source, term, condition=None):
    """
    Reason lists of every candidate of `source` that reaches `term`.

    When `condition` is given, only candidates whose conditions match it
    are kept.
    """
    results = transformer.transform(source)
    expected = None
    if condition is not None:
        expected = transformer.get_condition_flags_from_single_condition_type(condition)
    return [
        r.reasons for r in results
        if r.text == term
        and (expected is None or transformer.conditions_match(r.conditions, expected))
    ]


@pytest.fixture(scope="session")
def term_reasons():
    """Helper collecting the reason lists that lead from a source to a term."""
    return _term_reasons
