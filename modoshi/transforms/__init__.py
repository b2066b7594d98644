"""
Per-language rule tables.
"""

from modoshi.transforms.en import ENGLISH_TRANSFORMS_DESCRIPTOR
from modoshi.transforms.es import SPANISH_TRANSFORMS_DESCRIPTOR
from modoshi.transforms.ja import JAPANESE_TRANSFORMS_DESCRIPTOR

__all__ = [
    "ENGLISH_TRANSFORMS_DESCRIPTOR",
    "JAPANESE_TRANSFORMS_DESCRIPTOR",
    "SPANISH_TRANSFORMS_DESCRIPTOR",
]
