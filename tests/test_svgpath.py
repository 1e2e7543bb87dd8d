"""Tests for SVG path data formatting and parsing."""

import pytest

from dots_regions.geometry import (
    Close,
    LineTo,
    MoveTo,
    PathSyntaxError,
    PlanePoint,
    QuadCurveTo,
    format_path,
    parse_path,
    round_corners,
)


class TestFormatPath:
    """Tests for rendering paths as path data."""

    def test_empty_path(self):
        assert format_path([]) == ""

    def test_rounded_square(self, square):
        d = format_path(round_corners(square, 2))
        assert d.startswith("M 0 2 Q 0 0 2 0 L 8 0 Q 10 0 10 2 ")
        assert d.endswith(" Z")

    def test_precision_and_trailing_zeros(self):
        path = [MoveTo(PlanePoint(252.5, 1 / 3)), LineTo(PlanePoint(7.0, -0.001)), Close()]
        assert format_path(path, precision=2) == "M 252.5 0.33 L 7 0 Z"

    def test_zero_precision(self):
        path = [MoveTo(PlanePoint(1.6, 2.4))]
        assert format_path(path, precision=0) == "M 2 2"


class TestParsePath:
    """Tests for reading path data from older engine revisions."""

    def test_engine_relative_outline(self):
        """Outlines sent as a start point followed by relative steps."""
        path = parse_path("M 12,12 l 24,0 l 0,24 Z")
        assert path == [
            MoveTo(PlanePoint(12.0, 12.0)),
            LineTo(PlanePoint(36.0, 12.0)),
            LineTo(PlanePoint(36.0, 36.0)),
            Close(),
        ]

    def test_implicit_lines_after_move(self):
        path = parse_path("M 0 0 10 0 10 10 z")
        assert path == [
            MoveTo(PlanePoint(0.0, 0.0)),
            LineTo(PlanePoint(10.0, 0.0)),
            LineTo(PlanePoint(10.0, 10.0)),
            Close(),
        ]

    def test_relative_quadratic(self):
        path = parse_path("m 1 1 q 1 0 2 2")
        assert path == [
            MoveTo(PlanePoint(1.0, 1.0)),
            QuadCurveTo(control=PlanePoint(2.0, 1.0), end=PlanePoint(3.0, 3.0)),
        ]

    def test_close_returns_to_subpath_start(self):
        path = parse_path("M 10 10 l 5 0 z l 0 5")
        assert path[-1] == LineTo(PlanePoint(10.0, 15.0))

    def test_compact_numbers(self):
        path = parse_path("M10-5L.5,1e1")
        assert path == [MoveTo(PlanePoint(10.0, -5.0)), LineTo(PlanePoint(0.5, 10.0))]

    def test_reads_formatted_path(self, square):
        path = round_corners(square, 2)
        assert parse_path(format_path(path)) == path

    @pytest.mark.parametrize(
        "d",
        [
            "M 0 0 A 1 1 0 0 1 5 5",  # arcs are not supported
            "10 10",  # no command
            "M 0",  # truncated pair
            "M 0 0 Q 1 1 L 2 2",  # command inside a coordinate group
            "M 0 0 Z 5",  # number after close
            "M 0 0 # 1",  # stray character
            "M 1e999,0 l 24,0 l 0,24 Z",  # overflows to infinity
            "M 0 0 l 1e308 0 l 1e308 0",  # relative sum overflows
            "M 0 0 Q 1 1 1e400 5",  # infinite end point
        ],
    )
    def test_malformed_path_data(self, d):
        with pytest.raises(PathSyntaxError):
            parse_path(d)

    def test_syntax_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_path("X")
