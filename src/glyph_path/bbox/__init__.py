"""Bounding boxes that account for the extrema of Bezier curves."""

from __future__ import annotations

from .box import BoundingBox, BoundingBoxLike

__all__ = ["BoundingBox", "BoundingBoxLike"]
