"""
String similarity measures used by the matching cascade.

Edit distances are computed with rapidfuzz, which works on Unicode code
points and is case-sensitive: callers normalize beforehand.
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from itemscan.text.normalize import tokenize

# Two tokens this close count as the same word
MAX_TOKEN_DISTANCE = 1


def edit_distance(a: str, b: str, max_distance: int | None = None) -> int:
    """
    Levenshtein distance between two strings.

    Args:
        a: First string.
        b: Second string.
        max_distance: Optional cutoff. Distances above it are reported as
            ``max_distance + 1``, which lets rapidfuzz stop early.

    Returns:
        Minimum number of single-character insertions, deletions or
        substitutions turning ``a`` into ``b``.
    """
    return Levenshtein.distance(a, b, score_cutoff=max_distance)


def token_overlap_score(a: str, b: str) -> float:
    """
    Share of word tokens in ``a`` that have a near-equal token in ``b``.

    A token of ``a`` counts as matched on the first token of ``b`` that is
    equal to it or within edit distance 1. Tokens of ``b`` are not consumed,
    so one token of ``b`` may satisfy several tokens of ``a``.

    Returns:
        matched / max(len(tokens(a)), len(tokens(b))), or 0.0 when either
        side has no tokens.
    """
    tokens_a = tokenize(a)
    tokens_b = tokenize(b)
    if not tokens_a or not tokens_b:
        return 0.0

    matched = 0
    for token_a in tokens_a:
        for token_b in tokens_b:
            if token_a == token_b or edit_distance(token_a, token_b, MAX_TOKEN_DISTANCE) <= 1:
                matched += 1
                break

    return matched / max(len(tokens_a), len(tokens_b))
