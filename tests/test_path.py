"""Tests building paths."""

from __future__ import annotations

import logging

import pytest

from glyph_path import (
    BoundingBox,
    ClosePath,
    CurveTo,
    LineTo,
    MoveTo,
    Path,
    QuadTo,
)
from glyph_path.commands import endpoint


def test_defaults() -> None:
    path = Path()
    assert path.commands == ()
    assert len(path) == 0
    assert path.fill == "black"
    assert path.stroke is None
    assert path.stroke_width == 1


def test_append_commands() -> None:
    path = Path()
    path.move_to(1, 2)
    path.line_to(3, 4)
    path.quad_to(5, 6, 7, 8)
    path.curve_to(9, 10, 11, 12, 13, 14)
    path.close()

    assert path.commands == (
        MoveTo(1, 2),
        LineTo(3, 4),
        QuadTo(5, 6, 7, 8),
        CurveTo(9, 10, 11, 12, 13, 14),
        ClosePath(),
    )
    assert list(path) == list(path.commands)


def test_aliases() -> None:
    path = Path()
    path.quadratic_curve_to(1, 2, 3, 4)
    path.bezier_curve_to(1, 2, 3, 4, 5, 6)
    path.close_path()

    assert path.commands == (
        QuadTo(1, 2, 3, 4),
        CurveTo(1, 2, 3, 4, 5, 6),
        ClosePath(),
    )


def test_commands_are_a_snapshot() -> None:
    path = Path([MoveTo(0, 0)])
    commands = path.commands
    path.line_to(1, 1)

    assert commands == (MoveTo(0, 0),)
    assert len(path) == 2


def test_commands_are_copied_on_init() -> None:
    commands = [MoveTo(0, 0)]
    path = Path(commands)
    commands.append(LineTo(1, 1))

    assert len(path) == 1


def test_values_are_not_validated() -> None:
    path = Path()
    path.line_to(float("nan"), float("inf"))
    path.close()
    path.close()

    assert len(path) == 3


def test_extend_with_path() -> None:
    other = Path([MoveTo(0, 0), LineTo(1, 1)])
    path = Path([MoveTo(5, 5)])
    path.extend(other)

    assert path.commands == (MoveTo(5, 5), MoveTo(0, 0), LineTo(1, 1))
    # the other path is unchanged
    assert len(other) == 2


def test_extend_with_path_like() -> None:
    class Outline:
        def __init__(self) -> None:
            self.commands = [MoveTo(0, 0), LineTo(2, 0), ClosePath()]

    path = Path([MoveTo(5, 5)])
    path.extend(Outline())  # type: ignore[arg-type]

    assert path.commands == (MoveTo(5, 5), MoveTo(0, 0), LineTo(2, 0), ClosePath())


def test_extend_with_commands() -> None:
    path = Path()
    path.extend([MoveTo(0, 0), LineTo(1, 1)])
    path.extend(iter([ClosePath()]))

    assert path.commands == (MoveTo(0, 0), LineTo(1, 1), ClosePath())


def test_extend_with_box() -> None:
    box = BoundingBox()
    box.add_point(1, 2)
    box.add_point(5, 8)

    path = Path()
    path.extend(box)

    assert path.commands == (
        MoveTo(1, 2),
        LineTo(5, 2),
        LineTo(5, 8),
        LineTo(1, 8),
        ClosePath(),
    )
    assert path.get_bounding_box() == box


def test_extend_with_empty_box(caplog: pytest.LogCaptureFixture) -> None:
    path = Path()
    with caplog.at_level(logging.WARNING, logger="glyph_path.path"):
        path.extend(BoundingBox())

    assert len(path) == 5
    assert "empty bounding box" in caplog.text


def test_endpoint() -> None:
    assert endpoint(MoveTo(1, 2)) == (1, 2)
    assert endpoint(CurveTo(1, 2, 3, 4, 5, 6)) == (5, 6)
    assert endpoint(ClosePath()) is None

    with pytest.raises(TypeError):
        endpoint("M")  # type: ignore[arg-type]


def test_command_values() -> None:
    assert QuadTo(1, 2, 3, 4).values == (1, 2, 3, 4)
    assert ClosePath().values == ()
    assert [c.letter for c in (MoveTo(0, 0), LineTo(0, 0), ClosePath())] == [
        "M",
        "L",
        "Z",
    ]


def test_from_svg() -> None:
    path = Path.from_svg(
        '<path d="M0 0L10 0Z" fill="none" stroke="red" stroke-width="2.5"/>'
    )

    assert path.commands == (MoveTo(0, 0), LineTo(10, 0), ClosePath())
    assert path.fill is None
    assert path.stroke == "red"
    assert path.stroke_width == 2.5


def test_svg_round_trip() -> None:
    path = Path(fill="#123456", stroke="blue", stroke_width=3)
    path.move_to(0.5, -1)
    path.quad_to(10, 20, 30, -40.25)
    path.close()

    copy = Path.from_svg(path.to_svg())

    assert copy.commands == path.commands
    assert copy.to_svg() == path.to_svg()


def test_from_path_data() -> None:
    path = Path.from_path_data("M0 0L10-5", stroke="red")
    assert path.commands == (MoveTo(0, 0), LineTo(10, -5))
    assert path.stroke == "red"
