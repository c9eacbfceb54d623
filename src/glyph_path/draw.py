"""Replay commands on a 2D drawing surface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from .commands import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    QuadTo,
    unexpected_command,
)
from .constants import DEFAULT_FILL, DEFAULT_STROKE_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .commands import Command


class CanvasLike(Protocol):
    """A canvas-style drawing surface, e.g. an :mod:`ipycanvas` canvas."""

    fill_style: str
    stroke_style: str
    line_width: float

    def begin_path(self) -> None:
        """Start a new path."""

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath."""

    def line_to(self, x: float, y: float) -> None:
        """Add a straight segment."""

    def bezier_curve_to(  # noqa: PLR0913
        self, cp1x: float, cp1y: float, cp2x: float, cp2y: float, x: float, y: float
    ) -> None:
        """Add a cubic Bezier curve."""

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        """Add a quadratic Bezier curve."""

    def close_path(self) -> None:
        """Close the current subpath."""

    def fill(self) -> None:
        """Fill the path with the fill style."""

    def stroke(self) -> None:
        """Stroke the path with the stroke style and line width."""


def draw(
    commands: Iterable[Command],
    surface: CanvasLike,
    fill: str | None = DEFAULT_FILL,
    stroke: str | None = None,
    stroke_width: float = DEFAULT_STROKE_WIDTH,
) -> None:
    """Draw the commands on the surface.

    The path is filled if there is a fill color and stroked if there is a
    stroke color; both can happen.

    Raises:
        TypeError: If an element of commands is not a path command.
    """
    surface.begin_path()

    for command in commands:
        if isinstance(command, MoveTo):
            surface.move_to(command.x, command.y)
        elif isinstance(command, LineTo):
            surface.line_to(command.x, command.y)
        elif isinstance(command, CurveTo):
            surface.bezier_curve_to(
                command.x1, command.y1, command.x2, command.y2, command.x, command.y
            )
        elif isinstance(command, QuadTo):
            surface.quadratic_curve_to(command.x1, command.y1, command.x, command.y)
        elif isinstance(command, ClosePath):
            surface.close_path()
        else:
            raise unexpected_command(command)

    if fill:
        surface.fill_style = fill
        surface.fill()

    if stroke:
        surface.stroke_style = stroke
        surface.line_width = stroke_width
        surface.stroke()
