"""levdist: Levenshtein edit distance with optional early exit."""

from levdist.infrastructure.similarity import find_similar_names
from levdist.modules.distance import (
    DistanceError,
    InvalidArgumentError,
    bounded_levenshtein_distance,
    exceeds_bound,
    levenshtein_distance,
)

__version__ = "0.1.0"

__all__ = [
    "DistanceError",
    "InvalidArgumentError",
    "__version__",
    "bounded_levenshtein_distance",
    "exceeds_bound",
    "find_similar_names",
    "levenshtein_distance",
]
