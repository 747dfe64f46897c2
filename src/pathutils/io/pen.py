"""Converters between fonttools pens and path commands.

fonttools describes outlines as calls on a pen (moveTo, lineTo,
qCurveTo, closePath). This module replays path commands onto any pen and
turns a RecordingPen recording back into path commands and curves.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from fontTools.pens.basePen import AbstractPen

from pathutils.core import Curve
from pathutils.domain import ClosePath, CurveTo, LineTo, MoveTo, PathCommand, Point
from pathutils.exceptions import PathCommandError


def draw_commands(commands: Iterable[PathCommand], pen: AbstractPen) -> None:
    """Replay path commands onto a fonttools pen.

    A subpath that is not closed is ended with ``endPath`` before the next
    subpath starts and at the end of the commands.

    Args:
        commands: Path commands to draw
        pen: Any fonttools pen
    """
    open_subpath = False

    for command in commands:
        if isinstance(command, MoveTo):
            if open_subpath:
                pen.endPath()
            pen.moveTo(command.to.to_tuple())
            open_subpath = True

        elif isinstance(command, LineTo):
            pen.lineTo(command.to.to_tuple())

        elif isinstance(command, CurveTo):
            pen.qCurveTo(command.control.to_tuple(), command.to.to_tuple())

        elif isinstance(command, ClosePath):
            pen.closePath()
            open_subpath = False

    if open_subpath:
        pen.endPath()


def commands_from_recording(
    recording: Iterable[tuple[str, Sequence[Any]]],
) -> list[PathCommand]:
    """Convert a RecordingPen recording to path commands.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic
    - ('closePath', ())

    TrueType qCurveTo runs with several off-curve points are split at
    their implied on-curve midpoints, one CurveTo per off-curve point.

    Args:
        recording: Pen operations, e.g. ``RecordingPen().value``

    Returns:
        List of path commands

    Raises:
        PathCommandError: For cubic (curveTo) or unknown operations
    """
    commands: list[PathCommand] = []

    for operator, operands in recording:
        if operator == "moveTo":
            commands.append(MoveTo(Point(*operands[0])))

        elif operator == "lineTo":
            commands.append(LineTo(Point(*operands[0])))

        elif operator == "qCurveTo":
            commands.extend(_split_quadratic_run(operands))

        elif operator == "closePath":
            commands.append(ClosePath())

        elif operator == "endPath":
            continue

        elif operator == "curveTo":
            raise PathCommandError(operator, "cubic segments are not supported")

        else:
            raise PathCommandError(operator, "unknown pen operation")

    return commands


def curves_from_commands(commands: Iterable[PathCommand]) -> list[Curve]:
    """Collect the curve of every CurveTo, tracking the current point.

    Args:
        commands: Path commands

    Returns:
        Curves in drawing order

    Raises:
        PathCommandError: If a CurveTo appears before any MoveTo
    """
    curves: list[Curve] = []
    current: Point | None = None
    subpath_start: Point | None = None

    for command in commands:
        if isinstance(command, MoveTo):
            current = subpath_start = command.to

        elif isinstance(command, LineTo):
            current = command.to

        elif isinstance(command, CurveTo):
            if current is None:
                raise PathCommandError("CurveTo", "no current point")
            curves.append(Curve.from_path_segment(current, command))
            current = command.to

        elif isinstance(command, ClosePath):
            current = subpath_start

    return curves


def _split_quadratic_run(operands: Sequence[Any]) -> list[PathCommand]:
    *off_curve, on_curve = operands
    controls = [Point(*p) for p in off_curve]

    # TrueType contour without on-curve points: it starts and ends at the
    # implied point between the last and first controls.
    if on_curve is None:
        start = controls[-1].lerp(controls[0], 0.5)
        commands: list[PathCommand] = [MoveTo(start)]
        for i, control in enumerate(controls):
            following = controls[(i + 1) % len(controls)]
            commands.append(CurveTo(control, control.lerp(following, 0.5)))
        return commands

    end = Point(*on_curve)
    if not controls:
        return [LineTo(end)]

    commands = []
    for control, following in zip(controls, controls[1:]):
        commands.append(CurveTo(control, control.lerp(following, 0.5)))
    commands.append(CurveTo(controls[-1], end))
    return commands
