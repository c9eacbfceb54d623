"""A vector path of move, line, curve and close commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from typing_extensions import Self, override

from .bbox import BoundingBox
from .bounds import get_bounding_box
from .commands import ClosePath, CurveTo, LineTo, MoveTo, QuadTo
from .constants import (
    DEFAULT_CURVE_SAMPLES,
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_FILL,
    DEFAULT_LINE_SAMPLES,
    DEFAULT_STROKE_WIDTH,
)
from .draw import draw
from .interpolate import interpolate
from .parse import parse_path_data, parse_svg_element
from .serialize import to_dom_element, to_path_data, to_svg

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .commands import Command
    from .draw import CanvasLike
    from .serialize import SupportsCreateElementNS

logger = logging.getLogger(__name__)


class Path:
    """A path made of commands, similar to an SVG path.

    Commands are only ever appended; their order is the drawing order.
    Paths can be drawn on a canvas-like surface with :meth:`draw`.
    """

    def __init__(
        self,
        commands: Iterable[Command] | None = None,
        fill: str | None = DEFAULT_FILL,
        stroke: str | None = None,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
    ) -> None:
        """Initialize the path.

        Args:
            commands: Commands to start with.
            fill: The fill color, None for no fill.
            stroke: The stroke color, None for no stroke.
            stroke_width: The width of the stroke, if there is one.
        """
        self._commands: list[Command] = list(commands) if commands else []
        self.fill = fill
        self.stroke = stroke
        self.stroke_width = stroke_width

    @override
    def __repr__(self) -> str:
        n = len(self._commands)
        return f"Path({n} commands, fill={self.fill!r}, stroke={self.stroke!r})"

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(tuple(self._commands))

    @property
    def commands(self) -> tuple[Command, ...]:
        """A snapshot of the commands."""
        return tuple(self._commands)

    @classmethod
    def from_path_data(cls, d: str, **kwargs: Any) -> Self:
        """Create a path from SVG path data.

        Args:
            d: The path string.
            **kwargs: Passed on to the constructor, e.g. ``fill``.
        """
        return cls(parse_path_data(d), **kwargs)

    @classmethod
    def from_svg(cls, svg: str) -> Self:
        """Create a path from an SVG <path> element string.

        The ``fill``, ``stroke`` and ``stroke-width`` attributes are used,
        everything else is ignored.
        """
        commands, attr = parse_svg_element(svg)

        fill: str | None = attr.get("fill", DEFAULT_FILL)
        if fill == "none":
            fill = None

        stroke: str | None = attr.get("stroke")
        if stroke == "none":
            stroke = None

        stroke_width = float(attr.get("stroke-width", "1").removesuffix("px"))

        return cls(commands, fill=fill, stroke=stroke, stroke_width=stroke_width)

    def move_to(self, x: float, y: float) -> None:
        """Start a new subpath at (x, y)."""
        self._commands.append(MoveTo(x, y))

    def line_to(self, x: float, y: float) -> None:
        """Draw a straight line to (x, y)."""
        self._commands.append(LineTo(x, y))

    def curve_to(  # noqa: PLR0913
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        """Draw a cubic curve.

        Args:
            x1: x of control 1
            y1: y of control 1
            x2: x of control 2
            y2: y of control 2
            x: x of path point
            y: y of path point
        """
        self._commands.append(CurveTo(x1, y1, x2, y2, x, y))

    bezier_curve_to = curve_to

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        """Draw a quadratic curve.

        Args:
            x1: x of control
            y1: y of control
            x: x of path point
            y: y of path point
        """
        self._commands.append(QuadTo(x1, y1, x, y))

    quadratic_curve_to = quad_to

    def close(self) -> None:
        """Close the current subpath."""
        self._commands.append(ClosePath())

    close_path = close

    def extend(self, source: Path | BoundingBox | Iterable[Command]) -> None:
        """Add the commands of another path, a box outline or a list of commands.

        Anything with a ``commands`` attribute counts as a path. A box
        becomes a closed rectangle, starting at (x1, y1) and going through
        (x2, y1), (x2, y2) and (x1, y2).
        """
        if hasattr(source, "commands"):
            self._commands.extend(source.commands)
            return

        if isinstance(source, BoundingBox):
            if source.is_empty():
                logger.warning("Extending path with an empty bounding box")
            self.move_to(source.x1, source.y1)  # type: ignore[arg-type]
            self.line_to(source.x2, source.y1)  # type: ignore[arg-type]
            self.line_to(source.x2, source.y2)  # type: ignore[arg-type]
            self.line_to(source.x1, source.y2)  # type: ignore[arg-type]
            self.close()
            return

        commands = list(source)
        logger.debug("Extending path with %d commands", len(commands))
        self._commands.extend(commands)

    def get_bounding_box(self) -> BoundingBox:
        """Calculate the bounding box of the path."""
        return get_bounding_box(self._commands)

    def draw(self, surface: CanvasLike) -> None:
        """Draw the path to a canvas-like surface."""
        draw(self._commands, surface, self.fill, self.stroke, self.stroke_width)

    def to_path_data(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
        """Convert the path to a string of path data instructions."""
        return to_path_data(self._commands, decimal_places)

    def to_svg(self, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
        """Convert the path to an SVG <path> element, as a string."""
        return to_svg(
            self._commands, self.fill, self.stroke, self.stroke_width, decimal_places
        )

    def to_dom_element(
        self,
        decimal_places: int = DEFAULT_DECIMAL_PLACES,
        document: SupportsCreateElementNS | None = None,
    ) -> Any:
        """Convert the path to an SVG path node."""
        return to_dom_element(self._commands, decimal_places, document)

    def interpolate(
        self,
        line_samples: int = DEFAULT_LINE_SAMPLES,
        curve_samples: int = DEFAULT_CURVE_SAMPLES,
    ) -> list[float]:
        """Approximate the path by points, as flat list ``[x0, y0, x1, y1, ...]``."""
        return interpolate(self._commands, line_samples, curve_samples)
