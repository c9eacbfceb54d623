"""Bounding box of a command sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, overload

from .bbox import BoundingBox, BoundingBoxLike
from .commands import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    QuadTo,
    unexpected_command,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .commands import Command

B = TypeVar("B", bound=BoundingBoxLike)


@overload
def get_bounding_box(commands: Iterable[Command], box: None = None) -> BoundingBox: ...


@overload
def get_bounding_box(commands: Iterable[Command], box: B) -> B: ...


def get_bounding_box(
    commands: Iterable[Command], box: BoundingBoxLike | None = None
) -> BoundingBoxLike:
    """Calculates the bounding box of the commands.

    The box covers every point the path visits, including the extrema of
    curves. The straight segment implied by a close command is not added,
    a close only moves the current point back to the start of its subpath.

    Args:
        commands: The commands in drawing order.
        box: The box to add the points to. Defaults to a new, empty
            :class:`BoundingBox`.

    Returns:
        The box, never empty. A path without any points yields the origin.

    Raises:
        TypeError: If an element of commands is not a path command.

    Example:
        >>> get_bounding_box([MoveTo(0, 0), CurveTo(0, 10, 10, 10, 10, 0)])
        BoundingBox(x1=0, y1=0, x2=10.0, y2=7.5)
    """
    if box is None:
        box = BoundingBox()

    start_x = start_y = 0.0
    prev_x = prev_y = 0.0

    for command in commands:
        if isinstance(command, MoveTo):
            box.add_point(command.x, command.y)
            start_x = prev_x = command.x
            start_y = prev_y = command.y

        elif isinstance(command, LineTo):
            box.add_point(command.x, command.y)
            prev_x, prev_y = command.x, command.y

        elif isinstance(command, QuadTo):
            box.add_quad(prev_x, prev_y, command.x1, command.y1, command.x, command.y)
            prev_x, prev_y = command.x, command.y

        elif isinstance(command, CurveTo):
            box.add_bezier(
                prev_x,
                prev_y,
                command.x1,
                command.y1,
                command.x2,
                command.y2,
                command.x,
                command.y,
            )
            prev_x, prev_y = command.x, command.y

        elif isinstance(command, ClosePath):
            prev_x, prev_y = start_x, start_y

        else:
            raise unexpected_command(command)

    if box.is_empty():
        box.add_point(0, 0)

    return box
