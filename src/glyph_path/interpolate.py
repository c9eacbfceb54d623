"""Flatten a command sequence into decimated sample points."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from .bbox.math import cubic_bezier, lerp, quadratic_bezier
from .commands import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    QuadTo,
    endpoint,
    unexpected_command,
)
from .constants import (
    DECIMATION_THRESHOLD,
    DEFAULT_CURVE_SAMPLES,
    DEFAULT_LINE_SAMPLES,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

    from .commands import Command

Point = tuple[float, float]


def _close_target(commands: Sequence[Command]) -> Point:
    """The point close commands draw back to.

    This is the end point of the very first command, not the start of the
    subpath being closed.
    """
    if not commands:
        return (0.0, 0.0)
    return endpoint(commands[0]) or (0.0, 0.0)


def sample_command(
    command: Command, start: Point, close_target: Point, t: float
) -> Point:
    """Evaluate a single command at t.

    Args:
        command: A line, curve or close command.
        start: The current point the command is drawn from.
        close_target: The point close commands are drawn to.
        t: The curve parameter in [0, 1].

    Raises:
        TypeError: If command is a move or not a path command at all.
    """
    x0, y0 = start

    if isinstance(command, LineTo):
        return lerp(t, x0, command.x), lerp(t, y0, command.y)

    if isinstance(command, QuadTo):
        return (
            quadratic_bezier(t, x0, command.x1, command.x),
            quadratic_bezier(t, y0, command.y1, command.y),
        )

    if isinstance(command, CurveTo):
        return (
            cubic_bezier(t, x0, command.x1, command.x2, command.x),
            cubic_bezier(t, y0, command.y1, command.y2, command.y),
        )

    if isinstance(command, ClosePath):
        return lerp(t, x0, close_target[0]), lerp(t, y0, close_target[1])

    raise unexpected_command(command)


def interpolate(
    commands: Sequence[Command],
    line_samples: int = DEFAULT_LINE_SAMPLES,
    curve_samples: int = DEFAULT_CURVE_SAMPLES,
) -> list[float]:
    """Approximate the commands by straight segments.

    Every segment is evaluated at ``samples + 1`` evenly spaced parameters.
    A sample is kept only if it is further than
    :data:`~glyph_path.constants.DECIMATION_THRESHOLD` from the last kept
    sample (or from the last move). Non-positive sample counts skip the
    segments they apply to.

    Args:
        commands: The commands in drawing order.
        line_samples: Samples per straight segment.
        curve_samples: Samples per quadratic or cubic segment.

    Returns:
        The kept samples as flat list ``[x0, y0, x1, y1, ...]``.

    Raises:
        TypeError: If an element of commands is not a path command.
    """
    points: list[float] = []

    close_target = _close_target(commands)
    pen: Point = (0.0, 0.0)
    last: Point = (0.0, 0.0)

    for command in commands:
        if isinstance(command, MoveTo):
            pen = last = (command.x, command.y)
            continue

        if isinstance(command, LineTo):
            samples = line_samples
        elif isinstance(command, (QuadTo, CurveTo)):
            samples = curve_samples
        elif isinstance(command, ClosePath):
            samples = 1
        else:
            raise unexpected_command(command)

        for i in range(samples + 1 if samples > 0 else 0):
            current = sample_command(command, pen, close_target, i / samples)
            distance = math.hypot(current[0] - last[0], current[1] - last[1])
            if distance > DECIMATION_THRESHOLD:
                points.extend(current)
                last = current

        pen = endpoint(command) or close_target

    return points


def interpolate_points(
    commands: Sequence[Command],
    line_samples: int = DEFAULT_LINE_SAMPLES,
    curve_samples: int = DEFAULT_CURVE_SAMPLES,
) -> NDArray[np.float64]:
    """Same as :func:`interpolate`, but as an array of shape (n, 2)."""
    flat = interpolate(commands, line_samples, curve_samples)
    return np.asarray(flat, dtype=np.float64).reshape(-1, 2)
