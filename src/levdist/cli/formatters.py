"""Rich console output formatting utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from levdist.cli.context import CLIContext

if TYPE_CHECKING:
    from levdist.modules.demo import DemoReport

__all__ = [
    "console",
    "error_console",
    "format_accuracy",
    "print_demo_report",
    "print_distance",
    "print_error",
    "print_info",
    "print_suggestions",
    "print_warning",
]

# Shared console instance
console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {message}")


def print_distance(
    reference: str, candidate: str, distance: int, *, max_distance: int
) -> None:
    """Print the result of a distance computation.

    A bounded result that hit the sentinel is reported as exceeding the
    bound rather than as a distance.

    Args:
        reference: First string.
        candidate: Second string.
        distance: Computed (possibly bounded) distance.
        max_distance: Bound that was applied, negative if none.
    """
    pair = f"[cyan]{reference}[/cyan] → [cyan]{candidate}[/cyan]"
    if max_distance >= 0 and distance > max_distance:
        console.print(f"{pair}: [yellow]> {max_distance}[/yellow]")
        return
    console.print(f"{pair}: [bold]{distance}[/bold]")


def print_suggestions(target: str, suggestions: list[tuple[str, int]]) -> None:
    """Print a table of close candidates.

    Args:
        target: The string that was matched.
        suggestions: (candidate, distance) pairs, closest first.
    """
    table = Table(title=f"Closest to {target}")
    table.add_column("Candidate", style="cyan")
    table.add_column("Distance", justify="right")

    for name, dist in suggestions:
        table.add_row(name, str(dist))

    console.print(table)


def format_accuracy(value: float) -> str:
    """Format an accuracy ratio, e.g. 0.75 -> "0.75 (75%)"."""
    return f"{value:.2f} ({value:.0%})"


def _mark(ok: bool) -> str:
    return "[green]✓[/green]" if ok else "[red]✗[/red]"


def print_demo_report(report: DemoReport) -> None:
    """Print demo outcomes and the two accuracy ratios."""
    table = Table(title=f"Sample pairs (max distance {report.max_distance})")
    table.add_column("Reference", style="cyan")
    table.add_column("Candidate", style="cyan")
    table.add_column("Distance", justify="right")
    table.add_column("Expected", justify="right", style="dim")
    table.add_column("Bounded", justify="right")
    table.add_column("Expected", justify="right", style="dim")
    table.add_column("", justify="center")

    for outcome in report.outcomes:
        table.add_row(
            outcome.case.reference,
            outcome.case.candidate,
            str(outcome.distance),
            str(outcome.case.expected),
            str(outcome.bounded),
            str(outcome.expected_bounded),
            _mark(outcome.exact_ok and outcome.bounded_ok),
        )

    console.print(table)
    console.print()
    console.print(
        f"[bold]Accuracy of levenshtein distance:[/bold] "
        f"{format_accuracy(report.exact_accuracy)}"
    )
    console.print(
        f"[bold]Accuracy of bounded distance:[/bold] "
        f"{format_accuracy(report.bounded_accuracy)}"
    )
