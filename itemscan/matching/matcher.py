"""
Item matcher: runs the strategy cascade for every OCR line.

Cascade (each later step runs only while the running best is weak):
1. Exact: normalized equality, stops the cascade
2. Contains: substring either way
3. Token: fuzzy word overlap
4. Stripped: containment with diacritics folded away
5. Fuzzy: Levenshtein distance within a length-based tolerance

Matching never raises. A line without a good enough candidate yields a
result with no matched entry, which callers route to the suggester.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from itemscan.catalog import Catalog
from itemscan.config import MatchConfig
from itemscan.matching.strategies import DEFAULT_STRATEGIES, Strategy
from itemscan.models import MatchCandidate, MatchReport, MatchResult, MatchStrategy

logger = logging.getLogger(__name__)


def split_ocr_lines(raw_text: str, min_length: int = 4) -> list[str]:
    """
    Split raw OCR output into trimmed lines worth matching.

    Args:
        raw_text: Text block returned by the OCR engine.
        min_length: Lines shorter than this (after trimming) are dropped.

    Returns:
        Lines in their original order.
    """
    lines = (line.strip() for line in raw_text.splitlines())
    return [line for line in lines if len(line) >= min_length]


class ItemMatcher:
    """Matches OCR text against a fixed catalog.

    The catalog and config are fixed for the matcher's lifetime; the
    matcher keeps no other state, so one instance can serve concurrent
    callers.

    Usage:
        catalog = load_catalog("vatpham.txt")
        matcher = ItemMatcher(catalog)
        report = matcher.match_text(raw_text)
        for result in report.matched:
            print(result.matched_entry, result.confidence_band.value)
        print(report.suggestion_block)
    """

    def __init__(
        self,
        catalog: Catalog | Iterable[str],
        config: MatchConfig | None = None,
        *,
        strategies: Sequence[Strategy] | None = None,
    ):
        """Initialize the matcher.

        Args:
            catalog: Catalog, or any iterable of item names.
            config: Matching thresholds (defaults if None).
            strategies: Strategy cascade override (default: all five, in order).
        """
        if not isinstance(catalog, Catalog):
            catalog = Catalog.from_entries(catalog)
        self.catalog = catalog
        self.config = config or MatchConfig()
        self.strategies = tuple(strategies) if strategies is not None else DEFAULT_STRATEGIES

    def match_line(self, line: str) -> MatchResult:
        """
        Match a single OCR line.

        Args:
            line: One line of OCR text.

        Returns:
            MatchResult for the line.
        """
        best: MatchCandidate | None = None

        for strategy in self.strategies:
            candidate = strategy(line, self.catalog, best, self.config)
            if candidate is not None and (best is None or candidate.score > best.score):
                best = candidate
            if best is not None and best.strategy is MatchStrategy.EXACT:
                break

        result = MatchResult.from_candidate(line, best, self.config.match_threshold)
        logger.debug(
            "Line %r -> %r (%s, score=%.3f)",
            line,
            result.matched_entry,
            result.strategy.value,
            result.score,
        )
        return result

    def match_lines(self, lines: Iterable[str]) -> list[MatchResult]:
        """Match already-split lines, one result per line, in order."""
        return [self.match_line(line) for line in lines]

    def match_text(self, raw_text: str, ocr_confidence: float | None = None) -> MatchReport:
        """
        Match a whole block of OCR output.

        Args:
            raw_text: Raw text from the OCR engine.
            ocr_confidence: Optional engine confidence (0-100) to carry
                into the report.

        Returns:
            MatchReport with one result per qualifying line.
        """
        lines = split_ocr_lines(raw_text, self.config.min_line_length)
        report = MatchReport(results=self.match_lines(lines), ocr_confidence=ocr_confidence)
        logger.debug("%s", report.summary())
        return report


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def match_text(
    raw_text: str,
    catalog: Catalog | Iterable[str],
    config: MatchConfig | None = None,
    ocr_confidence: float | None = None,
) -> MatchReport:
    """
    Match a block of OCR text against a catalog.

    Args:
        raw_text: Raw text from the OCR engine.
        catalog: Catalog, or any iterable of item names.
        config: Matching thresholds (defaults if None).
        ocr_confidence: Optional engine confidence (0-100).

    Returns:
        MatchReport with one result per qualifying line.
    """
    return ItemMatcher(catalog, config).match_text(raw_text, ocr_confidence)
