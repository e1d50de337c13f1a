"""Main CLI application."""

from __future__ import annotations

import typer

from levdist import __version__
from levdist.cli import commands
from levdist.cli.context import CLIContext
from levdist.infrastructure.logging import configure_logging

# Main application
app = typer.Typer(
    name="levdist",
    help="Levenshtein edit distance with optional early exit.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("distance")(commands.distance)
app.command("suggest")(commands.suggest)
app.command("demo")(commands.demo)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"levdist {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress informational output.",
    ),
    log_json: bool = typer.Option(
        False,
        "--log-json",
        help="Emit logs as JSON lines on stderr.",
    ),
) -> None:
    """levdist: Levenshtein edit distance from the command line.

    Compute exact or bounded distances and find close matches.
    """
    ctx = CLIContext.get()
    ctx.verbose = verbose
    ctx.quiet = quiet

    configure_logging(debug=verbose, json_logs=log_json)
