"""Constants for the path utilities."""

from __future__ import annotations

import re
from typing import Literal, TypeAlias

COMMANDS = r"MLQCZVHTSAmlqczvhtsa"
"""A string containing all the SVG path commands the parser recognizes."""

VALID_COMMANDS = set("MLQCZVHTS")
"""A set containing the upper case SVG path commands that can be parsed."""

ValidCommand: TypeAlias = Literal["M", "L", "Q", "C", "Z", "V", "H", "T", "S"]
"""A type alias for the parseable SVG path commands."""

SUBCOMMAND_PATTERN = re.compile(r"([" + COMMANDS + r"])([^" + COMMANDS + r"]*)")
"""A regex pattern to match SVG path subcommands."""

NUMBER_PATTERN = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
"""A regex pattern to match a single number, also in compact notation."""

SEPARATOR_PATTERN = re.compile(r"[,\s]*")
"""A regex pattern to match the separators between numbers."""

ARG_COUNTS: dict[ValidCommand, int] = {
    "M": 2,
    "L": 2,
    "Q": 4,
    "C": 6,
    "Z": 0,
    "V": 1,
    "H": 1,
    "T": 2,
    "S": 4,
}
"""The number of values expected for each SVG path command."""

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
"""The namespace of SVG elements."""

DEFAULT_FILL = "black"
"""The fill color a path has if nothing else is set."""

DEFAULT_STROKE_WIDTH = 1.0
"""The stroke width a path has if nothing else is set."""

DEFAULT_DECIMAL_PLACES = 2
"""Fractional digits written for non-integral values in path data."""

DEFAULT_LINE_SAMPLES = 5
"""Samples taken along a straight segment when flattening."""

DEFAULT_CURVE_SAMPLES = 10
"""Samples taken along a quadratic or cubic segment when flattening."""

DECIMATION_THRESHOLD = 5.0
"""Samples closer than this to the last accepted sample are dropped."""
