"""
OCR line matching against an item catalog.

Example:
    >>> from itemscan.matching import ItemMatcher
    >>> matcher = ItemMatcher(["Thúy Lựu Thạch Giới Chỉ (cấp 5)"])
    >>> matcher.match_line("Thuy Luu Thach Gioi Chi (cap 5)").matched_entry
    'Thúy Lựu Thạch Giới Chỉ (cấp 5)'
"""

from itemscan.matching.matcher import ItemMatcher, match_text, split_ocr_lines
from itemscan.matching.strategies import (
    DEFAULT_STRATEGIES,
    Strategy,
    match_contains,
    match_exact,
    match_fuzzy,
    match_stripped,
    match_token_overlap,
)
from itemscan.matching.suggest import (
    ELEMENTS,
    is_catalog_ready,
    suggest_entries,
    suggest_entry,
)

__all__ = [
    # Matcher
    "ItemMatcher",
    "match_text",
    "split_ocr_lines",
    # Strategies
    "Strategy",
    "DEFAULT_STRATEGIES",
    "match_exact",
    "match_contains",
    "match_token_overlap",
    "match_stripped",
    "match_fuzzy",
    # Suggestions
    "ELEMENTS",
    "is_catalog_ready",
    "suggest_entry",
    "suggest_entries",
]
