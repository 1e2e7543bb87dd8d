"""Region boundary geometry: mapping, corner rounding and outward offsets."""

from dots_regions.geometry.mapping import grid_to_plane, map_points
from dots_regions.geometry.offset import is_screen_clockwise, offset_outward, orient_screen_clockwise
from dots_regions.geometry.rounding import drop_repeated_points, round_corners
from dots_regions.geometry.svgpath import PathSyntaxError, format_path, parse_path
from dots_regions.geometry.types import (
    Close,
    GridPoint,
    LineTo,
    MoveTo,
    Path,
    PathCommand,
    PlanePoint,
    Polygon,
    QuadCurveTo,
)

__all__ = [
    "Close",
    "GridPoint",
    "LineTo",
    "MoveTo",
    "Path",
    "PathCommand",
    "PathSyntaxError",
    "PlanePoint",
    "Polygon",
    "QuadCurveTo",
    "drop_repeated_points",
    "format_path",
    "grid_to_plane",
    "is_screen_clockwise",
    "map_points",
    "offset_outward",
    "orient_screen_clockwise",
    "parse_path",
    "round_corners",
]
