"""Tests flattening paths into sample points."""

from __future__ import annotations

import math

import numpy as np
import pytest

from glyph_path import (
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    Path,
    QuadTo,
    interpolate,
    interpolate_points,
)
from glyph_path.constants import DECIMATION_THRESHOLD
from glyph_path.interpolate import sample_command


def _pairs(flat: list[float]) -> list[tuple[float, float]]:
    return list(zip(flat[::2], flat[1::2]))


def _assert_decimated(flat: list[float], start: tuple[float, float]) -> None:
    """Every kept point is further than the threshold from the one before."""
    previous = start
    for point in _pairs(flat):
        assert math.dist(previous, point) > DECIMATION_THRESHOLD
        previous = point


def test_straight_line() -> None:
    path = Path([MoveTo(0, 0), LineTo(100, 0)])
    flat = path.interpolate()

    assert flat == pytest.approx([20, 0, 40, 0, 60, 0, 80, 0, 100, 0])
    assert _pairs(flat)[-1] == pytest.approx((100, 0))
    _assert_decimated(flat, (0, 0))


def test_line_without_move_starts_at_origin() -> None:
    assert interpolate([LineTo(100, 0)]) == pytest.approx(
        [20, 0, 40, 0, 60, 0, 80, 0, 100, 0]
    )


def test_more_line_samples() -> None:
    flat = interpolate([MoveTo(0, 0), LineTo(100, 0)], line_samples=10)
    assert len(flat) == 20
    _assert_decimated(flat, (0, 0))


def test_close_samples_are_dropped() -> None:
    # samples 3 units apart, only every second one is far enough from the
    # last accepted sample
    flat = interpolate([MoveTo(0, 0), LineTo(60, 0)], line_samples=20)
    assert flat == pytest.approx([v for k in range(1, 11) for v in (6 * k, 0)])


def test_threshold_is_exclusive() -> None:
    assert interpolate([MoveTo(0, 0), LineTo(5, 0)]) == []
    assert interpolate([MoveTo(0, 0), LineTo(4, 3)]) == []
    assert interpolate([MoveTo(0, 0), LineTo(6, 0)]) == pytest.approx([6, 0])


@pytest.mark.parametrize(
    "command",
    [QuadTo(50, 100, 100, 0), CurveTo(0, 100, 100, 100, 100, 0)],
)
def test_curves(command: QuadTo | CurveTo) -> None:
    flat = interpolate([MoveTo(0, 0), command])

    assert len(flat) % 2 == 0
    assert len(flat) > 2
    assert _pairs(flat)[-1] == pytest.approx((100, 0))
    _assert_decimated(flat, (0, 0))
    # the curves bulge above the chord
    assert max(flat[1::2]) > 40


def test_curve_samples() -> None:
    curve = [MoveTo(0, 0), CurveTo(0, 300, 300, 300, 300, 0)]
    assert len(interpolate(curve, curve_samples=20)) > len(
        interpolate(curve, curve_samples=5)
    )


def test_close_returns_to_first_point() -> None:
    path = Path([MoveTo(0, 0), LineTo(100, 0), LineTo(100, 100), ClosePath()])
    flat = path.interpolate()

    assert _pairs(flat)[-1] == pytest.approx((0, 0))
    _assert_decimated(flat, (0, 0))


def test_close_uses_first_point_of_whole_path() -> None:
    # The second subpath closes towards the start of the first one, not
    # towards (200, 200).
    flat = interpolate(
        [
            MoveTo(0, 0),
            LineTo(100, 0),
            MoveTo(200, 200),
            LineTo(300, 200),
            ClosePath(),
        ]
    )
    assert _pairs(flat)[-1] == pytest.approx((0, 0))


def test_move_emits_nothing() -> None:
    assert interpolate([]) == []
    assert interpolate([MoveTo(50, 50)]) == []
    assert interpolate([MoveTo(50, 50), MoveTo(500, 500)]) == []


def test_move_resets_reference() -> None:
    flat = interpolate([MoveTo(0, 0), LineTo(50, 0), MoveTo(1000, 0), LineTo(1003, 0)])
    # the last line is shorter than the threshold
    assert _pairs(flat)[-1] == pytest.approx((50, 0))


def test_non_positive_samples_skip_segments() -> None:
    commands = [MoveTo(0, 0), LineTo(100, 0), QuadTo(150, 50, 200, 0)]
    flat = interpolate(commands, line_samples=0)
    # the curve still starts at the end of the skipped line
    assert _pairs(flat)[0] == pytest.approx((100, 0))
    assert _pairs(flat)[-1] == pytest.approx((200, 0))

    assert interpolate(commands, line_samples=-1, curve_samples=0) == []


def test_first_command_close() -> None:
    assert interpolate([ClosePath(), LineTo(10, 0)]) == pytest.approx([6, 0])


def test_interpolate_points_shape() -> None:
    points = interpolate_points([MoveTo(0, 0), LineTo(100, 0)])
    assert points.shape == (5, 2)
    np.testing.assert_allclose(points[-1], [100, 0])

    assert interpolate_points([]).shape == (0, 2)


def test_sample_command() -> None:
    assert sample_command(LineTo(10, 20), (0, 0), (0, 0), 0.5) == pytest.approx(
        (5, 10)
    )
    assert sample_command(ClosePath(), (10, 10), (0, 20), 0.5) == pytest.approx(
        (5, 15)
    )
    assert sample_command(
        QuadTo(50, 100, 100, 0), (0, 0), (0, 0), 0.5
    ) == pytest.approx((50, 50))
    assert sample_command(
        CurveTo(0, 10, 10, 10, 10, 0), (0, 0), (0, 0), 0.5
    ) == pytest.approx((5, 7.5))


def test_unknown_command() -> None:
    with pytest.raises(TypeError, match="Unexpected path command"):
        interpolate([MoveTo(0, 0), object()])  # type: ignore[list-item]
