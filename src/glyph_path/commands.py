"""The drawing commands a path is made of."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias


@dataclass(frozen=True)
class MoveTo:
    """Start a new subpath at (x, y)."""

    letter: ClassVar[str] = "M"

    x: float
    y: float

    @property
    def values(self) -> tuple[float, ...]:
        """The arguments in path data order."""
        return (self.x, self.y)


@dataclass(frozen=True)
class LineTo:
    """Straight segment from the current point to (x, y)."""

    letter: ClassVar[str] = "L"

    x: float
    y: float

    @property
    def values(self) -> tuple[float, ...]:
        """The arguments in path data order."""
        return (self.x, self.y)


@dataclass(frozen=True)
class QuadTo:
    """Quadratic Bezier curve through (x1, y1) to (x, y)."""

    letter: ClassVar[str] = "Q"

    x1: float
    y1: float
    x: float
    y: float

    @property
    def values(self) -> tuple[float, ...]:
        """The arguments in path data order."""
        return (self.x1, self.y1, self.x, self.y)


@dataclass(frozen=True)
class CurveTo:
    """Cubic Bezier curve through (x1, y1) and (x2, y2) to (x, y)."""

    letter: ClassVar[str] = "C"

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    @property
    def values(self) -> tuple[float, ...]:
        """The arguments in path data order."""
        return (self.x1, self.y1, self.x2, self.y2, self.x, self.y)


@dataclass(frozen=True)
class ClosePath:
    """Straight segment back to the start of the current subpath."""

    letter: ClassVar[str] = "Z"

    @property
    def values(self) -> tuple[float, ...]:
        """Close takes no arguments."""
        return ()


Command: TypeAlias = "MoveTo | LineTo | QuadTo | CurveTo | ClosePath"
"""Any of the five drawing commands."""

COMMAND_TYPES = (MoveTo, LineTo, QuadTo, CurveTo, ClosePath)
"""The command classes, usable with ``isinstance``."""


def unexpected_command(command: object) -> TypeError:
    """The error raised when a traversal meets something that is no command."""
    return TypeError(f"Unexpected path command {command!r}")


def endpoint(command: Command) -> tuple[float, float] | None:
    """The point a command ends on, None for close commands.

    Raises:
        TypeError: If command is not a path command.
    """
    if isinstance(command, ClosePath):
        return None
    if isinstance(command, COMMAND_TYPES):
        return command.x, command.y
    raise unexpected_command(command)
