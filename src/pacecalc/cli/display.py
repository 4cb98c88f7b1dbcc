"""Display utilities for the pacecalc CLI with Rich formatting."""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pacecalc.models import Calculation, Kind, UnitSystem, Value

console = Console()

# Token colors by kind
KIND_STYLES = {
    Kind.ERROR: "red",
    Kind.PACE: "yellow",
    Kind.SPEED: "yellow",
    Kind.OPERATOR: "dim",
    Kind.DURATION: "blue",
    Kind.DISTANCE: "green",
    Kind.MARATHON: "bold green",
    Kind.HALF_MARATHON: "bold green",
    Kind.CONSTANT: "magenta",
}


def format_part(part: Value, unit_system: UnitSystem) -> str:
    """Render one token with Rich markup, colored by kind."""
    style = KIND_STYLES.get(part.kind, "white")
    return f"[{style}]{escape(part.render(unit_system))}[/{style}]"


def format_calculation(calculation: Calculation, unit_system: UnitSystem) -> str:
    """Render tokens with Rich markup, colored by kind."""
    return " ".join(format_part(part, unit_system) for part in calculation.parts)


def display_calculation(
    expression: str, calculation: Calculation, unit_system: UnitSystem
) -> None:
    """Display the tokens of a calculation and its result."""
    table = Table(title="Tokens", show_header=True, border_style="cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Value", justify="right")

    for index, part in enumerate(calculation.parts, start=1):
        table.add_row(str(index), part.kind.value, format_part(part, unit_system))

    console.print(table)

    result = calculation.render_result(unit_system)
    if calculation.is_error:
        message = result if result is not None else calculation.parts[-1].render(unit_system)
        display_error(f"Cannot calculate {escape(repr(expression))}: {escape(message)}")
    elif result is None:
        display_info("Nothing to calculate")
    else:
        console.print(
            Panel(
                f"[bold green]{result}[/bold green]",
                title=f"[bold cyan]{escape(expression)}[/bold cyan]",
                border_style="cyan",
            )
        )


def display_examples(rows: list[tuple[str, Calculation]], unit_system: UnitSystem) -> None:
    """Display example expressions with their results."""
    table = Table(title="Examples", show_header=True, border_style="cyan")
    table.add_column("Expression", style="cyan")
    table.add_column("Tokens")
    table.add_column("Result", justify="right", style="bold green")

    for expression, calculation in rows:
        table.add_row(
            expression,
            format_calculation(calculation, unit_system),
            calculation.render_result(unit_system) or "-",
        )

    console.print(table)


def display_json(data: Any) -> None:
    """Display data as highlighted JSON."""
    console.print_json(data=data, indent=2)


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {message}")


def display_info(message: str) -> None:
    """Display info message."""
    console.print(f"[dim]ℹ[/dim] {message}")
