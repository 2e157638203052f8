"""
Text primitives for OCR-to-catalog matching.

Example:
    >>> from itemscan.text import normalize_text, token_overlap_score
    >>> normalize_text("Thúy Lựu Thạch Giới Chỉ (cấp 5)")
    'thúy lựu thạch giới chỉ cấp 5'
    >>> token_overlap_score("Thuy Luu Thach", "Thúy Lựu Thạch")
    1.0
"""

from itemscan.text.normalize import (
    DIACRITIC_TABLE,
    fold_diacritics,
    normalize_text,
    tokenize,
)
from itemscan.text.similarity import edit_distance, token_overlap_score

__all__ = [
    "DIACRITIC_TABLE",
    "normalize_text",
    "fold_diacritics",
    "tokenize",
    "edit_distance",
    "token_overlap_score",
]
