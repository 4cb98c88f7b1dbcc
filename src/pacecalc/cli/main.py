#!/usr/bin/env python3
"""
pacecalc - running pace calculator CLI

Usage:
    pacecalc calc 5km in 25min          # Pace for a distance and time
    pacecalc calc 4:00 for 10min        # Distance covered at a pace
    pacecalc calc -i 6:00 for 1h        # Imperial paces and display
    pacecalc examples                   # Example expressions
"""

import logging

import typer
from rich.console import Console

from pacecalc.cli import __version__
from pacecalc.cli.commands import calc
from pacecalc.config import get_settings

# Create the main app
app = typer.Typer(
    name="pacecalc",
    help="Calculate running pace, speed, distance and duration.",
    no_args_is_help=True,
    add_completion=True,
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"pacecalc version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log tokenizer and evaluator steps"),
) -> None:
    """
    pacecalc - Calculate running pace, speed, distance and duration.

    Unit system defaults to PACECALC_UNIT_SYSTEM (metric if unset).
    """
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Register commands directly on the app
app.command(name="calc")(calc.calc)
app.command(name="examples")(calc.examples)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
