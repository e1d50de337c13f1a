"""Fuzzy name matching built on the bounded edit distance."""

from __future__ import annotations

from collections.abc import Iterable

from levdist.modules.distance import bounded_levenshtein_distance, exceeds_bound

__all__ = [
    "find_similar_names",
    "score_candidates",
]


def score_candidates(
    target: str,
    candidates: Iterable[str],
    *,
    max_distance: int,
    case_sensitive: bool = False,
) -> list[tuple[str, int]]:
    """Pair each candidate within max_distance with its distance.

    Candidates further than max_distance are dropped. The bounded
    distance stops early on those, so long unrelated candidates are
    cheap to reject.

    Args:
        target: The string to match against.
        candidates: Possible matches.
        max_distance: Maximum edit distance to keep. Negative keeps all.
        case_sensitive: Compare without case folding.

    Returns:
        (candidate, distance) pairs in input order.
    """
    key = target if case_sensitive else target.casefold()

    scored = []
    for name in candidates:
        other = name if case_sensitive else name.casefold()
        dist = bounded_levenshtein_distance(key, other, max_distance)
        if exceeds_bound(dist, max_distance):
            continue
        scored.append((name, dist))
    return scored


def find_similar_names(
    target: str,
    candidates: list[str],
    *,
    max_distance: int = 3,
    max_suggestions: int = 3,
    case_sensitive: bool = False,
) -> list[str]:
    """Find similar names from a list of candidates.

    Args:
        target: The string to match against.
        candidates: List of possible matches.
        max_distance: Maximum edit distance to consider a match.
        max_suggestions: Maximum number of suggestions to return.
        case_sensitive: Compare without case folding.

    Returns:
        List of similar names, ordered by distance (closest first).
    """
    if not candidates:
        return []

    within_threshold = score_candidates(
        target,
        candidates,
        max_distance=max_distance,
        case_sensitive=case_sensitive,
    )

    # Sort by distance, then alphabetically for ties
    within_threshold.sort(key=lambda x: (x[1], x[0].lower()))

    return [name for name, _ in within_threshold[:max_suggestions]]
