"""CLI entry point for Grade Calculator."""

import logging
import math
from typing import Optional

import typer
from rich.console import Console

from .config import MAX_VALUE, MIN_VALUE
from .logging_config import setup_logging
from .output import format_json, format_table
from .scoring import ZeroWeightError, calculate_summary, remaining_weight_for

app = typer.Typer(
    name="grade-calculator",
    help="Calculate a weighted average grade and the grade needed on remaining work.",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["table", "json"]


def parse_item_count(raw: str) -> int | None:
    """Parse a positive integer item count. Returns None if invalid."""
    try:
        count = int(raw.strip())
    except ValueError:
        return None

    if count <= 0:
        return None
    return count


def parse_number(raw: str) -> float | None:
    """Parse a finite number. Returns None if non-numeric."""
    try:
        value = float(raw.strip())
    except ValueError:
        return None

    # float() accepts "nan" and "inf"
    if not math.isfinite(value):
        return None
    return value


def in_range(value: float, low: float = MIN_VALUE, high: float = MAX_VALUE) -> bool:
    """Check value lies within [low, high]."""
    return low <= value <= high


def prompt_item_count() -> int:
    """Prompt until a positive integer item count is entered."""
    while True:
        count = parse_item_count(console.input("Enter the number of assignments/quizzes: "))
        if count is not None:
            return count
        console.print("[red]Invalid input! Please enter a positive integer.[/red]")


def prompt_bounded(prompt: str, low: float = MIN_VALUE, high: float = MAX_VALUE) -> float:
    """Prompt until a number within [low, high] is entered."""
    while True:
        value = parse_number(console.input(prompt))
        if value is None:
            console.print("[red]Invalid input! Please enter a numeric value.[/red]")
        elif not in_range(value, low, high):
            console.print(f"[red]Invalid input! Please enter a value between {low} and {high}.[/red]")
        else:
            return value


@app.command()
def calculate(
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging on stderr",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Also write log records to this file",
    ),
) -> None:
    """Interactively enter graded items and calculate the average."""
    setup_logging(verbose=verbose, log_file=log_file)

    if output_format not in OUTPUT_FORMATS:
        console.print(f"[red]Invalid format: {output_format}[/red]")
        console.print(f"Available formats: {', '.join(OUTPUT_FORMATS)}")
        raise typer.Exit(1)

    console.print("[bold cyan]Welcome to the Average Grade Calculator![/bold cyan]")

    try:
        weights, grades, desired_average = _collect_session()
    except EOFError:
        console.print("\n[red]Input ended before all values were entered[/red]")
        raise typer.Exit(1)

    try:
        summary = calculate_summary(weights, grades, desired_average)
    except ZeroWeightError as e:
        logger.debug("Summary failed: %s", e)
        console.print("[red]Total weight is zero, so the average grade is undefined[/red]")
        raise typer.Exit(1)

    if output_format == "json":
        format_json(summary, console)
    else:
        console.print()
        format_table(summary, console)


def _collect_session() -> tuple[list[float], list[float], Optional[float]]:
    """Run the prompt sequence and return (weights, grades, desired_average)."""
    num_items = prompt_item_count()

    weights = []
    grades = []
    for i in range(1, num_items + 1):
        weights.append(prompt_bounded(f"Enter the weight for item {i} (0-100): "))
        grades.append(prompt_bounded(f"Enter the grade for item {i} (0-100): "))

    desired_average = None
    # Zero total weight fails in calculate_summary, so no target is asked for
    if sum(weights) > 0 and remaining_weight_for(weights) > 0:
        desired_average = prompt_bounded("Enter your desired overall average (0-100): ")

    logger.debug("Collected %d items, desired average %s", num_items, desired_average)
    return weights, grades, desired_average


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"grade-calculator version {__version__}")


if __name__ == "__main__":
    app()
