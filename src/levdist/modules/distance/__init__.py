"""Levenshtein distance computation."""

from levdist.modules.distance.bounded import bounded_levenshtein_distance
from levdist.modules.distance.exact import levenshtein_distance
from levdist.modules.distance.validation import (
    DistanceError,
    InvalidArgumentError,
    exceeds_bound,
)

__all__ = [
    "DistanceError",
    "InvalidArgumentError",
    "bounded_levenshtein_distance",
    "exceeds_bound",
    "levenshtein_distance",
]
