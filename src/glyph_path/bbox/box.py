"""Accumulating axis-aligned bounding box."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from typing_extensions import Self, override

from .math import cubic_extrema, quadratic_extrema


@runtime_checkable
class BoundingBoxLike(Protocol):
    """Anything that can accumulate the points a path visits."""

    def is_empty(self) -> bool:
        """Whether no point has been added yet."""

    def add_x(self, x: float) -> None:
        """Add a single x coordinate."""

    def add_y(self, y: float) -> None:
        """Add a single y coordinate."""

    def add_point(self, x: float, y: float) -> None:
        """Add a single point."""

    def add_quad(
        self, x0: float, y0: float, x1: float, y1: float, x: float, y: float
    ) -> None:
        """Add a quadratic Bezier curve, including its extrema."""

    def add_bezier(  # noqa: PLR0913
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x: float,
        y: float,
    ) -> None:
        """Add a cubic Bezier curve, including its extrema."""


class BoundingBox:
    """A bounding box given by its corners (x1, y1) and (x2, y2).

    The box starts out empty; all corner coordinates are ``None`` until the
    first point is added. Afterwards ``x1 <= x2`` and ``y1 <= y2`` hold.
    """

    def __init__(self) -> None:
        """Initialize an empty box."""
        self.x1: float | None = None
        self.y1: float | None = None
        self.x2: float | None = None
        self.y2: float | None = None

    @override
    def __repr__(self) -> str:
        if self.is_empty():
            return "BoundingBox(empty)"
        return f"BoundingBox(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    __hash__ = None  # type: ignore[assignment]

    def is_empty(self) -> bool:
        """Whether no point has been added yet."""
        return self.x1 is None or self.y1 is None or self.x2 is None or self.y2 is None

    def as_tuple(self) -> tuple[float | None, float | None, float | None, float | None]:
        """The corners as (x1, y1, x2, y2)."""
        return self.x1, self.y1, self.x2, self.y2

    @property
    def width(self) -> float:
        """Width of the box, 0 if empty."""
        if self.x1 is None or self.x2 is None:
            return 0.0
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        """Height of the box, 0 if empty."""
        if self.y1 is None or self.y2 is None:
            return 0.0
        return self.y2 - self.y1

    def add_x(self, x: float) -> None:
        """Extend the box horizontally to include x."""
        if self.x1 is None or self.x2 is None:
            self.x1 = self.x2 = x
            return
        if x < self.x1:
            self.x1 = x
        if x > self.x2:
            self.x2 = x

    def add_y(self, y: float) -> None:
        """Extend the box vertically to include y."""
        if self.y1 is None or self.y2 is None:
            self.y1 = self.y2 = y
            return
        if y < self.y1:
            self.y1 = y
        if y > self.y2:
            self.y2 = y

    def add_point(self, x: float, y: float) -> None:
        """Extend the box to include the point (x, y)."""
        self.add_x(x)
        self.add_y(y)

    def add_quad(
        self, x0: float, y0: float, x1: float, y1: float, x: float, y: float
    ) -> None:
        """Extend the box with a quadratic Bezier curve.

        Args:
            x0: x of the start point.
            y0: y of the start point.
            x1: x of the control point.
            y1: y of the control point.
            x: x of the end point.
            y: y of the end point.
        """
        for value in quadratic_extrema(x0, x1, x):
            self.add_x(value)
        for value in quadratic_extrema(y0, y1, y):
            self.add_y(value)

    def add_bezier(  # noqa: PLR0913
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x: float,
        y: float,
    ) -> None:
        """Extend the box with a cubic Bezier curve.

        Only the start point, the end point and the points where the curve
        changes direction are added, the control points themselves are not.
        """
        for value in cubic_extrema(x0, x1, x2, x):
            self.add_x(value)
        for value in cubic_extrema(y0, y1, y2, y):
            self.add_y(value)

    def extend(self, other: BoundingBox) -> Self:
        """Extend the box to include another box. Modifies in place."""
        if other.is_empty():
            return self
        self.add_point(other.x1, other.y1)  # type: ignore[arg-type]
        self.add_point(other.x2, other.y2)  # type: ignore[arg-type]
        return self
