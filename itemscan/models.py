"""
Data models for itemscan.

These models represent the output of matching OCR text against a catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Score boundaries of the confidence bands (inclusive lower bounds)
EXACT_BAND_MIN = 0.9
HIGH_BAND_MIN = 0.7
MEDIUM_BAND_MIN = 0.5


class ConfidenceBand(Enum):
    """Coarse bucket summarizing a match score for display."""

    EXACT = "exact"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_score(cls, score: float) -> ConfidenceBand:
        """Bucket a score in [0, 1] into its band."""
        if score >= EXACT_BAND_MIN:
            return cls.EXACT
        if score >= HIGH_BAND_MIN:
            return cls.HIGH
        if score >= MEDIUM_BAND_MIN:
            return cls.MEDIUM
        return cls.LOW


class MatchStrategy(Enum):
    """Strategy that produced the winning score for a line."""

    EXACT = "exact"
    CONTAINS = "contains"
    TOKEN = "token"
    STRIPPED = "stripped"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclass(frozen=True)
class MatchCandidate:
    """Best catalog entry found so far while running the cascade."""

    entry: str
    score: float
    strategy: MatchStrategy


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of matching one OCR line against the catalog.

    ``matched_entry`` is set only when the score reaches the match
    threshold; ``confidence_band`` always reflects ``score``.

    Example:
        >>> result = matcher.match_line("Kinh Bach Ngoc Boi - Tho (cap 2)")
        >>> result.matched_entry
        'Kinh Bạch Ngọc Bội - Thổ (cấp 2)'
        >>> result.confidence_band
        <ConfidenceBand.EXACT: 'exact'>
    """

    source_text: str
    matched_entry: str | None
    confidence_band: ConfidenceBand
    score: float
    strategy: MatchStrategy

    @classmethod
    def from_candidate(
        cls,
        source_text: str,
        candidate: MatchCandidate | None,
        threshold: float,
    ) -> MatchResult:
        """
        Build the final result for a line from the cascade's best candidate.

        Args:
            source_text: The OCR line that was matched.
            candidate: Best candidate, or None if no strategy produced one.
            threshold: Minimum score for the entry to count as matched.
        """
        if candidate is None:
            return cls(
                source_text=source_text,
                matched_entry=None,
                confidence_band=ConfidenceBand.from_score(0.0),
                score=0.0,
                strategy=MatchStrategy.NONE,
            )

        return cls(
            source_text=source_text,
            matched_entry=candidate.entry if candidate.score >= threshold else None,
            confidence_band=ConfidenceBand.from_score(candidate.score),
            score=candidate.score,
            strategy=candidate.strategy,
        )

    @property
    def is_matched(self) -> bool:
        """Return True if a catalog entry was matched."""
        return self.matched_entry is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source_text": self.source_text,
            "matched_entry": self.matched_entry,
            "confidence_band": self.confidence_band.value,
            "score": round(self.score, 4),
            "strategy": self.strategy.value,
        }


@dataclass
class MatchReport:
    """
    All results for one block of OCR text.

    Example:
        >>> report = matcher.match_text(raw_text, ocr_confidence=87.5)
        >>> report.summary()
        'Matched 1/2 items (OCR: 88%)'
        >>> print(report.suggestion_block)
    """

    results: list[MatchResult] = field(default_factory=list)
    ocr_confidence: float | None = None  # 0-100, as reported by the OCR engine

    @property
    def matched(self) -> list[MatchResult]:
        """Results that carry a matched entry."""
        return [r for r in self.results if r.is_matched]

    @property
    def unmatched(self) -> list[MatchResult]:
        """Results with no matched entry."""
        return [r for r in self.results if not r.is_matched]

    @property
    def matched_count(self) -> int:
        return len(self.matched)

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def suggestion_block(self) -> str:
        """Copyable catalog entries for every unmatched line, newline-joined."""
        # Import here to avoid circular imports
        from itemscan.matching.suggest import suggest_entries

        return suggest_entries(r.source_text for r in self.unmatched)

    def summary(self) -> str:
        """One-line summary of how many lines matched."""
        text = f"Matched {self.matched_count}/{self.total_count} items"
        if self.ocr_confidence is not None:
            text += f" (OCR: {round(self.ocr_confidence)}%)"
        return text

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "results": [r.to_dict() for r in self.results],
            "matched_count": self.matched_count,
            "total_count": self.total_count,
            "ocr_confidence": self.ocr_confidence,
            "suggestions": self.suggestion_block,
        }
