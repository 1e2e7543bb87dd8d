"""Grid cell to drawing plane coordinate mapping."""

from collections.abc import Iterable

from dots_regions.geometry.types import GridPoint, PlanePoint


def grid_to_plane(point: GridPoint, cell_spacing: float) -> PlanePoint:
    """Map a grid cell to the center of its square in the drawing plane."""
    row, col = point
    return PlanePoint(
        x=(col + 0.5) * cell_spacing,
        y=(row + 0.5) * cell_spacing,
    )


def map_points(points: Iterable[GridPoint], cell_spacing: float) -> list[PlanePoint]:
    """Map a boundary of grid cells to plane points, preserving order."""
    return [grid_to_plane(p, cell_spacing) for p in points]
