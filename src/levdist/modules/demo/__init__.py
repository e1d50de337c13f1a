"""Demonstration driver for the distance functions."""

from levdist.modules.demo.driver import (
    SAMPLE_CASES,
    CaseOutcome,
    DemoCase,
    DemoReport,
    run_demo,
)

__all__ = [
    "SAMPLE_CASES",
    "CaseOutcome",
    "DemoCase",
    "DemoReport",
    "run_demo",
]
