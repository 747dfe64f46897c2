"""CLI application entry point for pathutils.

This module provides the CLI interface using Typer. Points are given as
``X,Y``; use ``--`` before arguments that start with a minus sign.
"""

import math
from pathlib import Path
from typing import Annotated

import typer

from pathutils import __version__
from pathutils.cli.output import (
    console,
    format_parameter,
    print_curve,
    print_curve_table,
    print_error,
    print_header,
    print_point,
    print_step,
    print_success,
    print_value,
)
from pathutils.config import LoggingConfig, OutputConfig, PathUtilsSettings
from pathutils.core import Curve, Intersect, Line
from pathutils.domain import Point
from pathutils.exceptions import PathUtilsError, PointParseError
from pathutils.io import GlyphOutlineReader
from pathutils.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="pathutils",
    help="Inspect quadratic Bezier curves: sample, subdivide, solve and intersect.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]pathutils[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_point(text: str) -> Point:
    """Parse ``X,Y`` into a point.

    Args:
        text: Point text, e.g. ``"10,-2.5"``

    Returns:
        Parsed point

    Raises:
        PointParseError: If the text is not two finite comma-separated numbers
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise PointParseError(text, "expected X,Y")

    try:
        x, y = float(parts[0]), float(parts[1])
    except ValueError as e:
        raise PointParseError(text, "coordinates must be numbers") from e

    if not (math.isfinite(x) and math.isfinite(y)):
        raise PointParseError(text, "coordinates must be finite")

    return Point(x, y)


def parse_points(text: str, count: int) -> list[Point]:
    """Parse ``count`` whitespace-separated points.

    Raises:
        PointParseError: If the number of points is wrong or one is invalid
    """
    parts = text.split()
    if len(parts) != count:
        raise PointParseError(text, f"expected {count} points separated by spaces")
    return [parse_point(part) for part in parts]


def _curve(start: str, control: str, end: str) -> Curve:
    return Curve.from_points(parse_point(start), parse_point(control), parse_point(end))


def _settings(ctx: typer.Context) -> PathUtilsSettings:
    if isinstance(ctx.obj, PathUtilsSettings):
        return ctx.obj
    return PathUtilsSettings()


StartArg = Annotated[str, typer.Argument(help="Start point X,Y", show_default=False)]
ControlArg = Annotated[str, typer.Argument(help="Control point X,Y", show_default=False)]
EndArg = Annotated[str, typer.Argument(help="End point X,Y", show_default=False)]


@app.callback()
def main_callback(
    ctx: typer.Context,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            help="Digits after the decimal point (0-9)",
            min=0,
            max=9,
        ),
    ] = 4,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect quadratic Bezier curves."""
    settings = PathUtilsSettings(
        output=OutputConfig(precision=precision),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = settings


@app.command()
def sample(
    ctx: typer.Context,
    start: StartArg,
    control: ControlArg,
    end: EndArg,
    t: Annotated[float, typer.Argument(help="Curve parameter (extrapolates outside 0-1)")],
) -> None:
    """Evaluate the curve at parameter T."""
    precision = _settings(ctx).output.precision
    try:
        curve = _curve(start, control, end)
    except PathUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_point(f"B({t})", curve.sample(t), precision)


@app.command()
def subdivide(
    ctx: typer.Context,
    start: StartArg,
    control: ControlArg,
    end: EndArg,
    t: Annotated[float, typer.Argument(help="Curve parameter to split at")],
) -> None:
    """Split the curve at parameter T with de Casteljau's algorithm."""
    precision = _settings(ctx).output.precision
    try:
        curve = _curve(start, control, end)
    except PathUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    first, second = curve.subdivide(t)
    print_curve("first", first, precision)
    print_curve("second", second, precision)


@app.command()
def solve(
    ctx: typer.Context,
    start: StartArg,
    control: ControlArg,
    end: EndArg,
    x: Annotated[float, typer.Argument(help="Target x coordinate")],
) -> None:
    """Find the parameter and y coordinate where the curve reaches X.

    The curve must be monotonic in x.
    """
    precision = _settings(ctx).output.precision
    try:
        curve = _curve(start, control, end)
    except PathUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_value("t", format_parameter(curve.solve_t_for_x(x), precision))
    print_value("y", format_parameter(curve.solve_y_for_x(x), precision))


@app.command()
def inflections(
    ctx: typer.Context,
    start: StartArg,
    control: ControlArg,
    end: EndArg,
) -> None:
    """Show where the curve changes direction in x and y, and its monotonic parts."""
    precision = _settings(ctx).output.precision
    try:
        curve = _curve(start, control, end)
    except PathUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    tx, ty = curve.inflection_points()
    print_value("t(x)", format_parameter(tx, precision))
    print_value("t(y)", format_parameter(ty, precision))

    for index, part in enumerate(curve.monotonic_parts()):
        print_curve(f"part {index}", part, precision)


@app.command()
def intersect(
    ctx: typer.Context,
    start: StartArg,
    control: ControlArg,
    end: EndArg,
    curve: Annotated[
        str | None,
        typer.Option(
            "--curve",
            "-c",
            help='Other curve as "X,Y X,Y X,Y"',
        ),
    ] = None,
    line: Annotated[
        str | None,
        typer.Option(
            "--line",
            "-l",
            help='Line as "X,Y X,Y"',
        ),
    ] = None,
) -> None:
    """Intersect the curve with another curve or a line.

    Both primitives must be monotonic in x.
    """
    settings = _settings(ctx)

    if (curve is None) == (line is None):
        print_error("Give exactly one of --curve or --line")
        raise typer.Exit(code=1)

    try:
        this = _curve(start, control, end)
        other: Intersect
        if curve is not None:
            other = Curve.from_points(*parse_points(curve, 3))
        else:
            other = Line.from_points(*parse_points(line or "", 2))
    except PathUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    point = this.intersect(other, settings.intersection)
    if point is None:
        console.print("  No intersection")
    else:
        print_point("intersection", point, settings.output.precision)


@app.command()
def glyph(
    ctx: typer.Context,
    font: Annotated[
        Path,
        typer.Argument(
            help="Path to TTF/OTF font file",
            show_default=False,
        ),
    ],
    name: Annotated[str, typer.Argument(help="Glyph name", show_default=False)],
) -> None:
    """List the quadratic curves of a glyph with their inflection points."""
    precision = _settings(ctx).output.precision
    print_header(__version__)
    print_step(f"Reading glyph '{name}'")

    try:
        with GlyphOutlineReader(font) as reader:
            curves = reader.get_curves(name)
    except PathUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_curve_table(name, curves, precision)
    plural = "curve" if len(curves) == 1 else "curves"
    print_success(f"{len(curves)} {plural}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
