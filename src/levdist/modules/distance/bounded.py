"""Levenshtein distance with an early exit once a bound is exceeded."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from levdist.modules.distance.validation import (
    require_max_distance,
    require_sequence,
)

__all__ = ["bounded_levenshtein_distance"]

logger = structlog.get_logger()


def bounded_levenshtein_distance(
    a: Sequence[Any], b: Sequence[Any], max_distance: int
) -> int:
    """Calculate the edit distance, giving up once it exceeds max_distance.

    If the distance is at most max_distance it is returned exactly.
    Otherwise the result is max_distance + 1, which only means "further
    than the bound"; the true distance may be larger. A negative
    max_distance disables the bound.

    When either sequence is empty the length of the other is returned
    without applying the bound.

    Args:
        a: Reference sequence.
        b: Candidate sequence.
        max_distance: Largest distance of interest, or negative for none.

    Returns:
        The exact distance, or max_distance + 1 if it is exceeded.

    Raises:
        InvalidArgumentError: If a sequence is None or not a sequence, or
            max_distance is not an int.
    """
    require_sequence(a, "a")
    require_sequence(b, "b")
    require_max_distance(max_distance)

    if a is b or a == b:
        return 0

    len1 = len(a)
    len2 = len(b)

    if len1 == 0:
        return len2
    if len2 == 0:
        return len1

    # Longer sequence drives the rows, so the cost row is the shorter one
    if len1 < len2:
        a, b = b, a
        len1, len2 = len2, len1

    bounded = max_distance >= 0
    cost = list(range(len2 + 1))

    for i in range(1, len1 + 1):
        cost[0] = i
        prv = i - 1
        row_min = prv
        item_a = a[i - 1]

        for j in range(1, len2 + 1):
            match = prv + (0 if item_a == b[j - 1] else 1)
            above = cost[j]
            cost[j] = min(1 + above, 1 + cost[j - 1], match)
            prv = above
            if prv < row_min:
                row_min = prv

        # Row minimum never decreases in later rows
        if bounded and row_min > max_distance:
            logger.debug(
                "bound_exceeded",
                row=i,
                rows=len1,
                row_min=row_min,
                max_distance=max_distance,
            )
            return max_distance + 1

    if bounded and cost[len2] > max_distance:
        return max_distance + 1

    return cost[len2]
