"""Convert commands to SVG path data and <path> elements."""

from __future__ import annotations

import math
from decimal import MAX_PREC, ROUND_HALF_UP, Context, Decimal
from typing import TYPE_CHECKING, Any, Protocol
from xml.etree import ElementTree as ET
from xml.sax.saxutils import quoteattr

from .commands import COMMAND_TYPES, unexpected_command
from .constants import (
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_FILL,
    DEFAULT_STROKE_WIDTH,
    SVG_NAMESPACE,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .commands import Command


class SupportsCreateElementNS(Protocol):
    """A DOM document, e.g. :class:`xml.dom.minidom.Document`."""

    def createElementNS(self, namespace_uri: str, qualified_name: str) -> Any:  # noqa: N802
        """Create an element in the given namespace."""


_ROUNDING = Context(prec=MAX_PREC, rounding=ROUND_HALF_UP)


def format_number(value: float, decimal_places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """Format a single value for path data.

    Fractions are rounded half away from zero, on the exact binary value of
    the float.

    Raises:
        ValueError: If decimal_places is negative.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(-2.5)
        '-2.50'
        >>> format_number(1 / 3, 3)
        '0.333'
        >>> format_number(0.125)
        '0.13'
    """
    if not math.isfinite(value):
        return str(float(value))

    if float(value).is_integer():
        return str(int(value))

    if decimal_places < 0:
        raise ValueError(f"decimal_places must not be negative, got {decimal_places}")

    exponent = Decimal(1).scaleb(-decimal_places)
    rounded = Decimal(value).quantize(exponent, context=_ROUNDING)
    return f"{rounded:f}"


def pack_values(
    values: Iterable[float], decimal_places: int = DEFAULT_DECIMAL_PLACES
) -> str:
    """Join the arguments of one command.

    A minus sign already separates two numbers, so a space is only put in
    front of non-negative values.

    Examples:
        >>> pack_values([1, -2, 3])
        '1-2 3'
    """
    packed = ""
    for i, value in enumerate(values):
        if value >= 0 and i > 0:
            packed += " "
        packed += format_number(value, decimal_places)
    return packed


def to_path_data(
    commands: Iterable[Command], decimal_places: int = DEFAULT_DECIMAL_PLACES
) -> str:
    """Convert commands to a string of path data instructions.

    See http://www.w3.org/TR/SVG/paths.html#PathData

    Args:
        commands: The commands in drawing order.
        decimal_places: Fractional digits for non-integral values.

    Raises:
        TypeError: If an element of commands is not a path command.

    Example:
        >>> to_path_data([MoveTo(0, 0), LineTo(10, 0), ClosePath()])
        'M0 0L10 0Z'
    """
    d: list[str] = []
    for command in commands:
        if not isinstance(command, COMMAND_TYPES):
            raise unexpected_command(command)
        d.append(command.letter + pack_values(command.values, decimal_places))
    return "".join(d)


def _format_attribute(value: float | str) -> str:
    """Format a presentation attribute, dropping the fraction of integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_svg(  # noqa: PLR0913
    commands: Iterable[Command],
    fill: str | None = DEFAULT_FILL,
    stroke: str | None = None,
    stroke_width: float = DEFAULT_STROKE_WIDTH,
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
) -> str:
    """Convert commands to a self-closing SVG <path> element.

    Args:
        commands: The commands in drawing order.
        fill: The fill color, None for no fill. Omitted if empty or the default.
        stroke: The stroke color, None for no stroke.
        stroke_width: Written only if there is a stroke.
        decimal_places: Fractional digits for non-integral values.
    """
    svg = f'<path d="{to_path_data(commands, decimal_places)}"'

    if fill is None:
        svg += ' fill="none"'
    elif fill and fill != DEFAULT_FILL:
        svg += f" fill={quoteattr(fill)}"

    if stroke:
        width = quoteattr(_format_attribute(stroke_width))
        svg += f" stroke={quoteattr(stroke)} stroke-width={width}"

    return svg + "/>"


def to_dom_element(
    commands: Iterable[Command],
    decimal_places: int = DEFAULT_DECIMAL_PLACES,
    document: SupportsCreateElementNS | None = None,
) -> Any:
    """Convert commands to an SVG path node.

    Args:
        commands: The commands in drawing order.
        decimal_places: Fractional digits for non-integral values.
        document: The DOM document that creates the node. Without one an
            :class:`xml.etree.ElementTree.Element` is returned.

    Returns:
        The path node with only its ``d`` attribute set.
    """
    d = to_path_data(commands, decimal_places)

    if document is None:
        return ET.Element(f"{{{SVG_NAMESPACE}}}path", {"d": d})

    node = document.createElementNS(SVG_NAMESPACE, "path")
    node.setAttribute("d", d)
    return node
