"""Calculation commands for the pacecalc CLI."""

import logging

import typer

from pacecalc.cli import display
from pacecalc.config import get_settings
from pacecalc.models import UnitSystem
from pacecalc.serialization import calculation_to_plain
from pacecalc.tokenizer import tokenize

logger = logging.getLogger(__name__)

EXAMPLES = [
    "5km in 25min",
    "4:25 for 20min 30s",
    "M in 3:40h",
    "HM in 72:30min",
    "6 min/mi for 10km",
    "12.5 km at 3:46 min/km",
    "4:30 for 12 min in 10 min",
]


def resolve_unit_system(imperial: bool | None) -> UnitSystem:
    """Use the flag if given, otherwise the configured unit system."""
    if imperial is None:
        return get_settings().unit_system
    return UnitSystem.IMPERIAL if imperial else UnitSystem.METRIC


def calc(
    expression: list[str] = typer.Argument(..., help="Expression, e.g. '5km in 25min'"),
    imperial: bool | None = typer.Option(
        None, "--imperial/--metric", "-i/-m", help="Unit system for paces and display"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Calculate the missing pace, speed, distance or duration."""
    text = " ".join(expression)
    unit_system = resolve_unit_system(imperial)
    calculation = tokenize(text, unit_system)
    logger.info(f"Tokenized {text!r} into {len(calculation.parts)} parts")

    if json_output:
        display.display_json(calculation_to_plain(calculation))
    else:
        display.display_calculation(text, calculation, unit_system)

    if calculation.is_error:
        raise typer.Exit(code=1)


def examples(
    imperial: bool | None = typer.Option(
        None, "--imperial/--metric", "-i/-m", help="Unit system for paces and display"
    ),
) -> None:
    """Show example expressions and their results."""
    unit_system = resolve_unit_system(imperial)
    rows = [(expression, tokenize(expression, unit_system)) for expression in EXAMPLES]
    display.display_examples(rows, unit_system)
