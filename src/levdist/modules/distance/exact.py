"""Exact Levenshtein distance using two rolling rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from levdist.modules.distance.validation import require_sequence

__all__ = ["levenshtein_distance"]


def levenshtein_distance(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Calculate the Levenshtein (edit) distance between two sequences.

    The Levenshtein distance is the minimum number of single-element
    edits (insertions, deletions, substitutions) to transform a into b.
    Strings are compared per code point; any other sequence is compared
    element by element with ==.

    Only two rows of the dynamic-programming table are kept, each of
    length len(a) + 1, and they swap roles after every element of b.

    Args:
        a: Reference sequence.
        b: Candidate sequence.

    Returns:
        The edit distance, between 0 and max(len(a), len(b)).

    Raises:
        InvalidArgumentError: If either argument is None or not a sequence.
    """
    require_sequence(a, "a")
    require_sequence(b, "b")

    if a is b or a == b:
        return 0

    m = len(a)

    # Cost of deleting the first i elements of a
    row = list(range(m + 1))
    new_row = [0] * (m + 1)

    for j in range(1, len(b) + 1):
        # Cost of inserting the first j elements of b
        new_row[0] = j
        item_b = b[j - 1]

        for i in range(1, m + 1):
            match = 0 if a[i - 1] == item_b else 1
            new_row[i] = min(
                row[i] + 1,  # deletion
                new_row[i - 1] + 1,  # insertion
                row[i - 1] + match,  # substitution
            )

        row, new_row = new_row, row

    return row[m]
