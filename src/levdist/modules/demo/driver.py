"""Sample pairs run through both distance functions.

The driver only exercises the public functions and tallies how many
results match their expected values. Rendering is left to the CLI.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from levdist.modules.distance import (
    bounded_levenshtein_distance,
    levenshtein_distance,
)

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "SAMPLE_CASES",
    "CaseOutcome",
    "DemoCase",
    "DemoReport",
    "run_demo",
]

logger = structlog.get_logger()

DEFAULT_MAX_DISTANCE = 2


@dataclass(frozen=True)
class DemoCase:
    """A sample pair with its expected results.

    Attributes:
        reference: First string.
        candidate: Second string.
        expected: Expected exact distance.
        expected_bounded: Expected bounded result for DEFAULT_MAX_DISTANCE.
    """

    reference: str
    candidate: str
    expected: int
    expected_bounded: int


@dataclass(frozen=True)
class CaseOutcome:
    """Computed results for one DemoCase."""

    case: DemoCase
    distance: int
    bounded: int
    expected_bounded: int

    @property
    def exact_ok(self) -> bool:
        return self.distance == self.case.expected

    @property
    def bounded_ok(self) -> bool:
        return self.bounded == self.expected_bounded


@dataclass(frozen=True)
class DemoReport:
    """Outcome of a demo run."""

    max_distance: int
    outcomes: tuple[CaseOutcome, ...]

    @property
    def exact_accuracy(self) -> float:
        """Fraction of cases whose exact distance matched."""
        return _ratio(sum(o.exact_ok for o in self.outcomes), len(self.outcomes))

    @property
    def bounded_accuracy(self) -> float:
        """Fraction of cases whose bounded result matched."""
        return _ratio(sum(o.bounded_ok for o in self.outcomes), len(self.outcomes))

    @property
    def all_ok(self) -> bool:
        return all(o.exact_ok and o.bounded_ok for o in self.outcomes)


SAMPLE_CASES: tuple[DemoCase, ...] = (
    DemoCase("Cats", "Hats", expected=1, expected_bounded=1),
    DemoCase("Band", "Hands", expected=2, expected_bounded=2),
    DemoCase("Cats", "Kansas", expected=4, expected_bounded=3),
    DemoCase("International", "Internship", expected=6, expected_bounded=3),
)


def run_demo(
    cases: Sequence[DemoCase] = SAMPLE_CASES,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> DemoReport:
    """Run each case through both distance functions.

    The bounded expectation stored on a case applies to
    DEFAULT_MAX_DISTANCE. For any other bound it is derived from the
    exact expectation: the exact value when within the bound, otherwise
    max_distance + 1.

    Args:
        cases: Pairs to evaluate.
        max_distance: Bound for the bounded function.

    Returns:
        DemoReport with per-case outcomes and accuracy ratios.
    """
    outcomes = []
    for case in cases:
        if max_distance == DEFAULT_MAX_DISTANCE:
            expected_bounded = case.expected_bounded
        else:
            expected_bounded = _expected_bounded(case, max_distance)

        outcome = CaseOutcome(
            case=case,
            distance=levenshtein_distance(case.reference, case.candidate),
            bounded=bounded_levenshtein_distance(
                case.reference, case.candidate, max_distance
            ),
            expected_bounded=expected_bounded,
        )
        if not (outcome.exact_ok and outcome.bounded_ok):
            logger.warning(
                "demo_case_mismatch",
                reference=case.reference,
                candidate=case.candidate,
                distance=outcome.distance,
                bounded=outcome.bounded,
            )
        outcomes.append(outcome)

    report = DemoReport(max_distance=max_distance, outcomes=tuple(outcomes))
    logger.debug(
        "demo_finished",
        cases=len(outcomes),
        exact_accuracy=report.exact_accuracy,
        bounded_accuracy=report.bounded_accuracy,
    )
    return report


def _expected_bounded(case: DemoCase, max_distance: int) -> int:
    """Derive the bounded expectation for a non-default bound."""
    if max_distance < 0 or case.expected <= max_distance:
        return case.expected
    # Empty operands bypass the bound
    if not case.reference or not case.candidate:
        return case.expected
    return max_distance + 1


def _ratio(correct: int, total: int) -> float:
    if total == 0:
        return 0.0
    return correct / total
