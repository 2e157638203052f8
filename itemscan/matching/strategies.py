"""
Matching strategies, ordered from highest precision to highest recall.

Each strategy has the signature

    strategy(line, catalog, best, config) -> MatchCandidate | None

where ``best`` is the running best candidate (None if nothing matched
yet). A strategy returns a candidate only when it beats ``best``; the
later strategies also return None without comparing anything when
``best`` already clears their trigger threshold.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from itemscan.config import MatchConfig
from itemscan.models import MatchCandidate, MatchStrategy
from itemscan.text.normalize import fold_diacritics, normalize_text
from itemscan.text.similarity import edit_distance, token_overlap_score

Strategy = Callable[[str, Sequence[str], MatchCandidate | None, MatchConfig], MatchCandidate | None]


# =============================================================================
# HELPERS
# =============================================================================


def _length_ratio(line: str, entry: str) -> float:
    """Length of ``entry`` relative to the longer of the two strings."""
    longest = max(len(line), len(entry))
    return len(entry) / longest if longest else 0.0


def _overlaps(line: str, entry: str) -> bool:
    # An empty string is a substring of everything
    if not line or not entry:
        return False
    return entry in line or line in entry


def _needs_improvement(best: MatchCandidate | None, trigger: float) -> bool:
    """True when nothing matched yet or the best score is below ``trigger``."""
    return best is None or best.score < trigger


def _score_of(best: MatchCandidate | None) -> float:
    return best.score if best is not None else 0.0


# =============================================================================
# STRATEGIES
# =============================================================================


def match_exact(
    line: str,
    catalog: Sequence[str],
    best: MatchCandidate | None,
    config: MatchConfig,
) -> MatchCandidate | None:
    """Normalized equality. Score 1.0; the matcher stops the cascade on it."""
    normalized_line = normalize_text(line)
    for entry in catalog:
        if normalize_text(entry) == normalized_line:
            return MatchCandidate(entry, 1.0, MatchStrategy.EXACT)
    return None


def match_contains(
    line: str,
    catalog: Sequence[str],
    best: MatchCandidate | None,
    config: MatchConfig,
) -> MatchCandidate | None:
    """Normalized line contains an entry, or an entry contains the line."""
    normalized_line = normalize_text(line)
    found = None
    best_score = _score_of(best)

    for entry in catalog:
        normalized_entry = normalize_text(entry)
        if not _overlaps(normalized_line, normalized_entry):
            continue
        # Longer entries covering more of the line score higher
        score = _length_ratio(normalized_line, normalized_entry)
        if score > config.contains_min_score and score > best_score:
            found = MatchCandidate(entry, score, MatchStrategy.CONTAINS)
            best_score = score

    return found


def match_token_overlap(
    line: str,
    catalog: Sequence[str],
    best: MatchCandidate | None,
    config: MatchConfig,
) -> MatchCandidate | None:
    """Word-level overlap with one-edit tolerance per token."""
    if not _needs_improvement(best, config.token_trigger):
        return None

    found = None
    best_score = _score_of(best)

    for entry in catalog:
        score = token_overlap_score(line, entry)
        if score >= config.token_min_score and score > best_score:
            found = MatchCandidate(entry, score, MatchStrategy.TOKEN)
            best_score = score

    return found


def match_stripped(
    line: str,
    catalog: Sequence[str],
    best: MatchCandidate | None,
    config: MatchConfig,
) -> MatchCandidate | None:
    """
    Containment after folding diacritics, for engines that drop tone marks.

    The raw length ratio is compared against the running best; an accepted
    score is raised to ``config.stripped_floor``.
    """
    if not _needs_improvement(best, config.stripped_trigger):
        return None

    stripped_line = fold_diacritics(line)
    found = None
    best_score = _score_of(best)

    for entry in catalog:
        stripped_entry = fold_diacritics(entry)
        if not _overlaps(stripped_line, stripped_entry):
            continue
        raw_score = _length_ratio(stripped_line, stripped_entry)
        if raw_score > config.stripped_min_score and raw_score > best_score:
            score = max(config.stripped_floor, raw_score)
            found = MatchCandidate(entry, score, MatchStrategy.STRIPPED)
            best_score = score

    return found


def match_fuzzy(
    line: str,
    catalog: Sequence[str],
    best: MatchCandidate | None,
    config: MatchConfig,
) -> MatchCandidate | None:
    """
    Last resort: the entry at the smallest edit distance within tolerance.

    Tolerance per entry is max(fuzzy_min_distance, floor(fuzzy_distance_ratio
    * entry length)). Ties keep the earlier entry.
    """
    if not _needs_improvement(best, config.fuzzy_trigger):
        return None

    normalized_line = normalize_text(line)
    closest = None
    closest_distance = 0
    closest_length = 0

    for entry in catalog:
        normalized_entry = normalize_text(entry)
        allowed = max(
            config.fuzzy_min_distance,
            math.floor(config.fuzzy_distance_ratio * len(normalized_entry)),
        )
        distance = edit_distance(normalized_line, normalized_entry, allowed)
        if distance > allowed:
            continue
        if closest is None or distance < closest_distance:
            closest = entry
            closest_distance = distance
            closest_length = max(len(normalized_line), len(normalized_entry))

    if closest is None:
        return None

    score = 1 - closest_distance / closest_length if closest_length else 1.0
    if score > _score_of(best):
        return MatchCandidate(closest, score, MatchStrategy.FUZZY)
    return None


DEFAULT_STRATEGIES: tuple[Strategy, ...] = (
    match_exact,
    match_contains,
    match_token_overlap,
    match_stripped,
    match_fuzzy,
)
