"""Distance, suggestion and demo CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer

from levdist.cli.context import CLIContext
from levdist.cli.formatters import (
    print_demo_report,
    print_distance,
    print_error,
    print_info,
    print_suggestions,
    print_warning,
)
from levdist.infrastructure.similarity import score_candidates
from levdist.modules.demo import run_demo
from levdist.modules.demo.driver import DEFAULT_MAX_DISTANCE
from levdist.modules.distance import (
    DistanceError,
    bounded_levenshtein_distance,
    levenshtein_distance,
)


def distance(
    reference: Annotated[str, typer.Argument(help="First string")],
    candidate: Annotated[str, typer.Argument(help="Second string")],
    max_distance: Annotated[
        int | None,
        typer.Option(
            "--max",
            "-m",
            help="Stop once the distance exceeds this bound (negative: no bound)",
        ),
    ] = None,
) -> None:
    """Compute the Levenshtein distance between two strings.

    With --max, computation stops as soon as the distance is known to
    exceed the bound and the result is reported as "> N".

    \b
    Examples:
        levdist distance Cats Hats                  # 1
        levdist distance International Internship   # 6
        levdist distance Cats Kansas --max 2        # > 2
    """
    if max_distance is None:
        max_distance = CLIContext.get().get_config().default_max_distance

    try:
        if max_distance < 0:
            result = levenshtein_distance(reference, candidate)
        else:
            result = bounded_levenshtein_distance(reference, candidate, max_distance)
    except DistanceError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    print_distance(reference, candidate, result, max_distance=max_distance)


def suggest(
    target: Annotated[str, typer.Argument(help="String to match")],
    candidates: Annotated[
        list[str], typer.Argument(help="Candidate strings to search")
    ],
    max_distance: Annotated[
        int | None,
        typer.Option("--max-distance", "-d", help="Largest accepted distance"),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=1, help="Maximum suggestions to show"),
    ] = None,
    case_sensitive: Annotated[
        bool | None,
        typer.Option(
            "--case-sensitive/--ignore-case",
            help="Compare letter case (default from config)",
        ),
    ] = None,
) -> None:
    """Suggest the candidates closest to a target string.

    \b
    Examples:
        levdist suggest instal install uninstall list
        levdist suggest colour color colors -d 1
    """
    config = CLIContext.get().get_config()
    if max_distance is None:
        max_distance = config.suggestion_max_distance
    if limit is None:
        limit = config.max_suggestions
    if case_sensitive is None:
        case_sensitive = config.case_sensitive

    try:
        scored = score_candidates(
            target,
            candidates,
            max_distance=max_distance,
            case_sensitive=case_sensitive,
        )
    except DistanceError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if not scored:
        print_warning(f"No candidates within distance {max_distance} of '{target}'")
        raise typer.Exit(1)

    scored.sort(key=lambda x: (x[1], x[0].lower()))
    print_suggestions(target, scored[:limit])

    if len(scored) > limit:
        print_info(f"{len(scored) - limit} more within distance {max_distance}")


def demo(
    max_distance: Annotated[
        int,
        typer.Option("--max", "-m", help="Bound for the bounded distance"),
    ] = DEFAULT_MAX_DISTANCE,
) -> None:
    """Run the sample pairs through both distance functions.

    Prints each result next to its expected value and the accuracy of
    both functions. Exits with status 1 if any result is unexpected.
    """
    report = run_demo(max_distance=max_distance)
    print_demo_report(report)

    if not report.all_ok:
        print_error("Some results did not match their expected values")
        raise typer.Exit(1)
