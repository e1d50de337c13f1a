"""Argument checks and error types shared by the distance functions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = [
    "DistanceError",
    "InvalidArgumentError",
    "exceeds_bound",
    "require_max_distance",
    "require_sequence",
]


class DistanceError(Exception):
    """Base exception for levdist operations."""

    pass


class InvalidArgumentError(DistanceError, ValueError):
    """Raised when a distance function receives malformed input."""

    pass


def require_sequence(value: Any, name: str) -> Sequence[Any]:
    """Ensure a value can be used as an edit-distance operand.

    Args:
        value: Object passed by the caller.
        name: Parameter name used in the error message.

    Returns:
        The value unchanged.

    Raises:
        InvalidArgumentError: If value is None or not an indexable sequence.
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if not isinstance(value, Sequence):
        raise InvalidArgumentError(
            f"{name} must be a sequence, got {type(value).__name__}"
        )
    return value


def require_max_distance(value: Any) -> int:
    """Ensure the bound is a plain integer.

    Negative values are valid and mean "unbounded".

    Raises:
        InvalidArgumentError: If value is not an int (bool is rejected).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"max_distance must be an int, got {type(value).__name__}"
        )
    return value


def exceeds_bound(result: int, max_distance: int) -> bool:
    """Check whether a bounded result is the "exceeded" sentinel.

    Args:
        result: Value returned by bounded_levenshtein_distance.
        max_distance: Bound passed to that call.

    Returns:
        True if bounding was active and the result is max_distance + 1.
    """
    return max_distance >= 0 and result > max_distance
