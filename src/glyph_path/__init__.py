"""Vector paths for glyph outlines: build, measure, serialize, sample, draw."""

from __future__ import annotations

from glyph_path.bbox import BoundingBox, BoundingBoxLike
from glyph_path.bounds import get_bounding_box
from glyph_path.commands import (
    ClosePath,
    Command,
    CurveTo,
    LineTo,
    MoveTo,
    QuadTo,
)
from glyph_path.draw import CanvasLike, draw
from glyph_path.interpolate import interpolate, interpolate_points
from glyph_path.parse import parse_path_data, parse_svg_element
from glyph_path.path import Path
from glyph_path.serialize import to_dom_element, to_path_data, to_svg

__all__ = [
    "BoundingBox",
    "BoundingBoxLike",
    "CanvasLike",
    "ClosePath",
    "Command",
    "CurveTo",
    "LineTo",
    "MoveTo",
    "Path",
    "QuadTo",
    "draw",
    "get_bounding_box",
    "interpolate",
    "interpolate_points",
    "parse_path_data",
    "parse_svg_element",
    "to_dom_element",
    "to_path_data",
    "to_svg",
]
