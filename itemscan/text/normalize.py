"""
Text canonicalization for comparing OCR lines with catalog names.

This module provides:
1. normalize_text() - case, bracket, punctuation and dash cleanup
2. fold_diacritics() - Vietnamese accented letters to base Latin letters
3. tokenize() - word tokens of a normalized string

OCR engines regularly drop or mangle Vietnamese tone marks, so the
folded form is used as a separate, lower-precision comparison channel.
"""

from __future__ import annotations

import re

# =============================================================================
# CONSTANTS
# =============================================================================

BRACKET_PATTERN = re.compile(r"[()\[\]{}]")
PUNCTUATION_PATTERN = re.compile(r"[.,;:!?'\"]")
DASH_PATTERN = re.compile(r"[-–—]")  # hyphen, en dash, em dash
WHITESPACE_PATTERN = re.compile(r"\s+")

# Tokens this short carry no signal (tier digits, stray OCR marks)
MIN_TOKEN_LENGTH = 2

# Every accented lower-case letter of the Vietnamese alphabet, by base letter
_VIETNAMESE_LETTERS = {
    "a": "àáảãạ" "ăằắẳẵặ" "âầấẩẫậ",
    "d": "đ",
    "e": "èéẻẽẹ" "êềếểễệ",
    "i": "ìíỉĩị",
    "o": "òóỏõọ" "ôồốổỗộ" "ơờớởỡợ",
    "u": "ùúủũụ" "ưừứửữự",
    "y": "ỳýỷỹỵ",
}

DIACRITIC_TABLE = str.maketrans(
    {accented: base for base, letters in _VIETNAMESE_LETTERS.items() for accented in letters}
)


# =============================================================================
# PUBLIC API
# =============================================================================


def normalize_text(text: str) -> str:
    """
    Canonicalize a string for comparison.

    Lower-cases, removes brackets and sentence punctuation, turns dashes
    into spaces, then collapses whitespace runs and trims. Diacritics are
    kept. Applying it twice gives the same result as applying it once.

    Example:
        >>> normalize_text("  Kinh Bạch Ngọc Bội - Thổ (cấp 2) ")
        'kinh bạch ngọc bội thổ cấp 2'
    """
    text = text.lower()
    text = BRACKET_PATTERN.sub("", text)
    text = PUNCTUATION_PATTERN.sub("", text)
    text = DASH_PATTERN.sub(" ", text)
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def fold_diacritics(text: str) -> str:
    """
    Lower-case and map Vietnamese accented letters to their base letters.

    Characters outside the table (punctuation, other scripts) pass through.

    Example:
        >>> fold_diacritics("Thúy Lựu Thạch")
        'thuy luu thach'
    """
    return text.lower().translate(DIACRITIC_TABLE)


def tokenize(text: str) -> list[str]:
    """
    Split a string into comparable word tokens.

    Normalizes first, then splits on spaces and drops single-character
    tokens. Order is preserved and duplicates are kept.
    """
    return [token for token in normalize_text(text).split(" ") if len(token) >= MIN_TOKEN_LENGTH]
