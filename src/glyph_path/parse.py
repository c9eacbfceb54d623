"""Parse SVG path data and <path> elements into commands."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from defusedxml.ElementTree import fromstring

from .commands import ClosePath, CurveTo, LineTo, MoveTo, QuadTo
from .constants import (
    ARG_COUNTS,
    COMMANDS,
    NUMBER_PATTERN,
    SEPARATOR_PATTERN,
    SUBCOMMAND_PATTERN,
    VALID_COMMANDS,
    ValidCommand,
)

if TYPE_CHECKING:
    from xml.etree import ElementTree as ET

    from .commands import Command

logger = logging.getLogger(__name__)


def _split_in_values(data: str) -> list[float]:
    """Split the data of a subcommand into numbers.

    Raises:
        ValueError: If anything but numbers and separators is found.
    """
    if SEPARATOR_PATTERN.fullmatch(NUMBER_PATTERN.sub(" ", data)) is None:
        raise ValueError(f"Invalid numbers in path data: {data.strip()!r}")

    return [float(x) for x in NUMBER_PATTERN.findall(data)]


def _split_in_subcommands(d: str) -> list[tuple[ValidCommand, bool, list[float]]]:
    """Split the path data into subcommands and their values.

    Raises:
        ValueError: If the path data does not start with a command.
        NotImplementedError: If arcs are found in the path data.
    """
    d = d.strip()
    if not d:
        return []

    if d[0] not in COMMANDS:
        raise ValueError(f"Path data has to start with a command: {d[:10]!r}")

    subcommands_with_data: list[tuple[str, str]] = SUBCOMMAND_PATTERN.findall(d)

    subcommands = {x.upper() for x, _ in subcommands_with_data}
    if unsupported := subcommands - VALID_COMMANDS:
        raise NotImplementedError(f"Subcommands not supported: {sorted(unsupported)}")

    return [
        (x.upper(), x.islower(), _split_in_values(y))  # type: ignore[misc]
        for x, y in subcommands_with_data
    ]


def _chunks(command: ValidCommand, values: list[float]) -> list[list[float]]:
    """Group the values of a subcommand by the number of arguments per command.

    Raises:
        ValueError: If the number of values does not fit the command.
    """
    count = ARG_COUNTS[command]

    if count == 0:
        if values:
            raise ValueError(f"{command} takes no values, got {len(values)}")
        return [[]]

    if not values or len(values) % count:
        raise ValueError(
            f"{command} expects a multiple of {count} values, got {len(values)}"
        )

    return [values[i : i + count] for i in range(0, len(values), count)]


def _to_points(values: list[float], is_rel: bool, curr_pos: complex) -> list[complex]:
    """Pair up the values into absolute points."""
    points = [complex(values[i], values[i + 1]) for i in range(0, len(values), 2)]

    if not is_rel:
        return points

    return [p + curr_pos for p in points]


def _parse_vertical_horizontal(
    command: ValidCommand, is_rel: bool, value: float, curr_pos: complex
) -> complex:
    """Parse vertical and horizontal commands."""
    if command == "V":
        if is_rel:
            return complex(curr_pos.real, curr_pos.imag + value)
        return complex(curr_pos.real, value)

    if is_rel:
        return complex(curr_pos.real + value, curr_pos.imag)

    return complex(value, curr_pos.imag)


def parse_path_data(d: str) -> list[Command]:  # noqa: C901, PLR0912
    """Parses SVG path data into commands.

    Relative commands are made absolute, horizontal and vertical lines become
    lines and smooth curves get their reflected control point.

    Args:
        d: The path string.

    Returns:
        The commands in drawing order. Empty for empty path data.

    Raises:
        ValueError: If the path data is malformed.
        NotImplementedError: If the path data contains arcs.

    Example:
        >>> parse_path_data("M 10 10 h 10 Z")
        [MoveTo(x=10.0, y=10.0), LineTo(x=20.0, y=10.0), ClosePath()]
    """
    commands: list[Command] = []

    curr_pos = complex(0, 0)
    start_pos = complex(0, 0)
    prev_control: complex | None = None
    prev_kind: ValidCommand | None = None

    for command, is_rel, values in _split_in_subcommands(d):
        for ix, chunk in enumerate(_chunks(command, values)):
            kind: ValidCommand | None = None

            if command == "Z":
                commands.append(ClosePath())
                curr_pos = start_pos

            elif command == "M" and ix == 0:
                curr_pos = start_pos = _to_points(chunk, is_rel, curr_pos)[0]
                commands.append(MoveTo(curr_pos.real, curr_pos.imag))

            # further pairs after a move are implicit lines
            elif command in {"M", "L"}:
                curr_pos = _to_points(chunk, is_rel, curr_pos)[0]
                commands.append(LineTo(curr_pos.real, curr_pos.imag))

            elif command == "V" or command == "H":  # noqa: PLR1714
                curr_pos = _parse_vertical_horizontal(
                    command, is_rel, chunk[0], curr_pos
                )
                commands.append(LineTo(curr_pos.real, curr_pos.imag))

            else:
                points = _to_points(chunk, is_rel, curr_pos)
                kind = "Q" if command in {"Q", "T"} else "C"

                if command == "T" or command == "S":  # noqa: PLR1714
                    if prev_control is not None and prev_kind == kind:
                        # Reflect previous control point
                        control = 2 * curr_pos - prev_control
                    else:
                        control = curr_pos
                    points = [control, *points]

                if kind == "Q":
                    c1, end = points
                    commands.append(QuadTo(c1.real, c1.imag, end.real, end.imag))
                    prev_control = c1
                else:
                    c1, c2, end = points
                    commands.append(
                        CurveTo(c1.real, c1.imag, c2.real, c2.imag, end.real, end.imag)
                    )
                    prev_control = c2

                curr_pos = end

            prev_kind = kind
            if kind is None:
                prev_control = None

    logger.debug("Parsed %d commands from path data", len(commands))
    return commands


def _fix_style(attrib: dict[str, str]) -> dict[str, str]:
    """Split the style attribute into separate attributes."""
    attrib = dict(attrib)
    style = attrib.pop("style", None)
    if not style:
        return attrib

    for item in style.split(";"):
        key, sep, value = item.partition(":")
        if sep:
            attrib[key.strip()] = value.strip()

    return attrib


def parse_svg_element(svg: str) -> tuple[list[Command], dict[str, str]]:
    """Parses a single SVG <path> element.

    Declarations in the ``style`` attribute are split into separate
    attributes, overriding the plain attributes of the same name.

    Args:
        svg: The element as string, e.g. ``<path d="M0 0L10 0Z"/>``.

    Returns:
        The commands of its ``d`` attribute and the remaining attributes.

    Raises:
        ValueError: If the element is not a path element.
    """
    elem: ET.Element = fromstring(svg)

    tag = re.sub(r"\{.*\}", "", elem.tag)
    if tag != "path":
        raise ValueError(f"Expected a path element, got {tag}")

    attrib = _fix_style(elem.attrib)
    commands = parse_path_data(attrib.pop("d", ""))

    return commands, attrib
