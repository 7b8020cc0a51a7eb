"""Output formatters for grade summaries."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


LETTER_COLORS = {
    "A": "green",
    "B": "green",
    "C": "yellow",
    "D": "yellow",
    "F": "red",
}


def format_table(summary: dict, console: Console) -> None:
    """Format and print a grade summary as rich panels and a table."""
    average = summary["average_grade"]
    letter = summary["letter_grade"]
    color = LETTER_COLORS.get(letter, "white")

    # Header panel
    header = Text()
    header.append("Average Grade Calculator\n", style="bold cyan")
    header.append(f"Average: {average:.2f}  |  CGPA: {summary['grade_point']:.1f}  |  Letter: ")
    header.append(letter, style=f"bold {color}")

    console.print(Panel(header, title="[bold]Results[/bold]", border_style="cyan"))
    console.print()

    # Items table
    table = Table(show_header=True, header_style="bold")
    table.add_column("Item", style="cyan", justify="right", width=6)
    table.add_column("Weight", justify="right", width=10)
    table.add_column("Grade", justify="right", width=10)

    for i, item in enumerate(summary.get("items", []), 1):
        table.add_row(str(i), _number(item["weight"]), _number(item["grade"]))

    console.print(table)
    console.print()

    console.print(f"Your current average grade is: {average:.2f}")
    console.print(f"Your current average grade in CGPA form is: {summary['grade_point']:.1f}")
    console.print(f"Your current average grade in letter grade form is: [{color}]{letter}[/{color}]")

    # Remaining target
    remaining_grade = summary.get("remaining_grade")
    if remaining_grade is None:
        return

    target_table = Table(show_header=False, box=None, padding=(0, 2))
    target_table.add_column("Key", style="dim")
    target_table.add_column("Value")

    target_table.add_row("Recorded Weight", _number(summary["total_weight"]))
    target_table.add_row("Remaining Weight", _number(summary["remaining_weight"]))
    target_table.add_row("Desired Average", _number(summary["desired_average"]))

    if summary.get("attainable"):
        target_table.add_row("Needed Average", f"[green]{remaining_grade:.2f}[/green]")
    else:
        target_table.add_row("Needed Average", f"[red]{remaining_grade:.2f} (unattainable)[/red]")

    console.print()
    console.print(Panel(target_table, title="[bold]Remaining Work[/bold]", border_style="dim"))

    if summary.get("attainable"):
        console.print(f"[green]You need an average of {remaining_grade:.2f} on the rest.[/green]")
    else:
        console.print("[red]The desired average is unattainable.[/red]")


def format_json(summary: dict, console: Console) -> None:
    """Format and print a grade summary as JSON."""
    console.print_json(json.dumps(summary, indent=2, default=str))


def _number(value: float) -> str:
    """Display whole numbers without a trailing .0."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"
