"""
Silver amount extraction from inventory screenshots.

Silver is shown in units of ten thousand ("vạn"). OCR output is first
repaired for the digit confusions the game font causes, then searched
with strategies in order of confidence:

1. Keyword: a number after "Bạc" (silver)
2. Unit: a number followed by "vạn" / "van"
3. Fallback: the largest positive number in the text
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# (pattern, replacement) pairs applied in order before searching
DIGIT_FIXES = (
    (re.compile(r"[.,]"), ""),  # thousand separators: "1.234" -> "1234"
    (re.compile(r"[oO](?=\d)"), "0"),
    (re.compile(r"(?<=\d)[oO]"), "0"),
    (re.compile(r"[lI](?=\d)"), "1"),
    (re.compile(r"(?<=\d)[lI]"), "1"),
)

KEYWORD_PATTERN = re.compile(r"b[aạ][cs]\s*[:\s\-]*(\d+)", re.IGNORECASE)
UNIT_PATTERN = re.compile(r"(\d+)\s*v[aạ]n?", re.IGNORECASE)
NUMBER_PATTERN = re.compile(r"\d+")


@dataclass(frozen=True)
class SilverAmount:
    """Silver amount read from OCR text."""

    value: int  # in vạn
    source: str  # matched fragment of the repaired text
    method: str  # "keyword", "unit" or "largest"


def repair_digits(raw_text: str) -> str:
    """Drop thousand separators and fix letters misread inside numbers."""
    text = raw_text
    for pattern, replacement in DIGIT_FIXES:
        text = pattern.sub(replacement, text)
    return text


def extract_silver_amount(raw_text: str) -> SilverAmount | None:
    """
    Find the silver amount in OCR text.

    A strategy that finds zero gives way to the next one; None means no
    positive amount was found at all.

    Example:
        >>> extract_silver_amount("Bạc: 1.250")
        SilverAmount(value=1250, source='Bạc: 1250', method='keyword')
        >>> extract_silver_amount("Ngân lượng 35O vạn").value
        350
    """
    text = repair_digits(raw_text)

    for method, pattern in (("keyword", KEYWORD_PATTERN), ("unit", UNIT_PATTERN)):
        match = pattern.search(text)
        if match and int(match.group(1)) > 0:
            return SilverAmount(value=int(match.group(1)), source=match.group(0), method=method)

    numbers = [m for m in NUMBER_PATTERN.finditer(text) if int(m.group(0)) > 0]
    if numbers:
        largest = max(numbers, key=lambda m: int(m.group(0)))
        logger.debug("No silver keyword found, using largest number %s", largest.group(0))
        return SilverAmount(value=int(largest.group(0)), source=largest.group(0), method="largest")

    logger.debug("No silver amount found in OCR text")
    return None
