"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table

from pathutils.core import Curve
from pathutils.domain import Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def format_point(point: Point, precision: int) -> str:
    """Format a point as ``(x, y)``.

    Args:
        point: Point to format
        precision: Digits after the decimal point

    Returns:
        Formatted point
    """
    return f"({point.x:.{precision}f}, {point.y:.{precision}f})"


def format_parameter(value: float | None, precision: int) -> str:
    """Format an optional curve parameter, ``-`` for None."""
    if value is None:
        return "-"
    return f"{value:.{precision}f}"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]pathutils[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_value(label: str, value: str) -> None:
    """Print a labelled value on one line."""
    console.print(f"  {label:<14}{value}")


def print_point(label: str, point: Point, precision: int) -> None:
    """Print a labelled point."""
    print_value(label, format_point(point, precision))


def print_curve(label: str, curve: Curve, precision: int) -> None:
    """Print a curve's start, control and end points.

    Args:
        label: Heading for the curve
        curve: Curve to print
        precision: Digits after the decimal point
    """
    start, end = curve.endpoints
    console.print(f"  [bold]{label}[/bold]")
    print_point("  start", start, precision)
    print_point("  control", curve.control_point, precision)
    print_point("  end", end, precision)


def print_curve_table(title: str, curves: list[Curve], precision: int) -> None:
    """Print curves with their inflection parameters as a table.

    Args:
        title: Table title
        curves: Curves to list
        precision: Digits after the decimal point
    """
    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("start")
    table.add_column("control")
    table.add_column("end")
    table.add_column("t(x)", justify="right")
    table.add_column("t(y)", justify="right")

    for index, curve in enumerate(curves):
        tx, ty = curve.inflection_points()
        table.add_row(
            str(index),
            format_point(curve.endpoints[0], precision),
            format_point(curve.control_point, precision),
            format_point(curve.endpoints[1], precision),
            format_parameter(tx, precision),
            format_parameter(ty, precision),
        )

    console.print(table)


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
