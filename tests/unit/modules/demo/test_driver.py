"""Tests for the demonstration driver."""

from __future__ import annotations

from structlog.testing import capture_logs

from levdist.modules.demo import SAMPLE_CASES, DemoCase, run_demo


class TestRunDemo:
    """Tests for run_demo function."""

    def test_sample_cases_all_pass(self) -> None:
        """Both functions should be fully accurate on the samples."""
        report = run_demo()

        assert len(report.outcomes) == len(SAMPLE_CASES) == 4
        assert report.exact_accuracy == 1.0
        assert report.bounded_accuracy == 1.0
        assert report.all_ok is True

    def test_sample_results(self) -> None:
        """Computed values should match the known results."""
        report = run_demo()

        assert [o.distance for o in report.outcomes] == [1, 2, 4, 6]
        assert [o.bounded for o in report.outcomes] == [1, 2, 3, 3]

    def test_other_bound_derives_expectation(self) -> None:
        """A different bound should derive expectations from exact values."""
        report = run_demo(max_distance=4)

        assert [o.expected_bounded for o in report.outcomes] == [1, 2, 4, 5]
        assert report.bounded_accuracy == 1.0

    def test_unbounded_run(self) -> None:
        """A negative bound should expect exact distances."""
        report = run_demo(max_distance=-1)

        assert [o.bounded for o in report.outcomes] == [1, 2, 4, 6]
        assert report.all_ok is True

    def test_wrong_expectation_lowers_accuracy(self) -> None:
        """A case with a wrong expectation should count as a miss."""
        cases = [
            DemoCase("Cats", "Hats", expected=1, expected_bounded=1),
            DemoCase("Cats", "Kansas", expected=5, expected_bounded=3),
        ]

        with capture_logs() as logs:
            report = run_demo(cases)

        assert report.exact_accuracy == 0.5
        assert report.bounded_accuracy == 1.0
        assert report.all_ok is False
        assert [log["event"] for log in logs].count("demo_case_mismatch") == 1

    def test_empty_cases(self) -> None:
        """No cases should give zero accuracy rather than fail."""
        report = run_demo([])

        assert report.outcomes == ()
        assert report.exact_accuracy == 0.0
        assert report.bounded_accuracy == 0.0

    def test_empty_operand_expectation(self) -> None:
        """Empty operands keep their exact expectation under a bound."""
        cases = [DemoCase("", "abcdef", expected=6, expected_bounded=6)]

        report = run_demo(cases, max_distance=1)

        assert report.outcomes[0].expected_bounded == 6
        assert report.outcomes[0].bounded_ok is True
