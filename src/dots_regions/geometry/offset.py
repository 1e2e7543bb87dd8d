"""Outward offsetting of closed region boundaries (halo outlines).

The outward direction of an edge (dx, dy) is taken as (dy, -dx). That is
outward for loops running clockwise on a y-down screen, which is the same
as a positive shoelace area in raw coordinates. Loops of the opposite
winding are reoriented first unless ``normalize_winding`` is off.

Each vertex moves along the normalized sum of its two edge normals. This is
a local operation: concave or folded loops can produce overlapping output,
which is accepted for the small regions drawn on the board.
"""

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import LinearRing
from shapely.geometry import Polygon as ShapelyPolygon

from dots_regions.geometry.types import EPSILON, PlanePoint
from dots_regions.geometry.vectors import (
    as_array,
    edges_in,
    edges_out,
    perpendicular,
    to_points,
    unit_vectors,
)

logger = logging.getLogger(__name__)


def is_screen_clockwise(points: Sequence[PlanePoint] | NDArray[np.float64]) -> bool:
    """Check whether a loop runs clockwise on a y-down screen.

    Loops without area (fewer than 3 points, or all collinear) count as
    clockwise since there is nothing to reorient.
    """
    coords = as_array(points)
    if len(coords) < 3:
        return True
    ring = LinearRing(coords)
    if ShapelyPolygon(ring).area <= EPSILON:
        return True
    # Shapely's counter-clockwise is y-up; on a y-down screen it is clockwise.
    return ring.is_ccw


def orient_screen_clockwise(points: Sequence[PlanePoint]) -> list[PlanePoint]:
    """Return the loop in screen-clockwise order, reversing it if needed."""
    coords = as_array(points)
    if is_screen_clockwise(coords):
        return to_points(coords)
    return to_points(coords[::-1])


def offset_outward(
    points: Sequence[PlanePoint],
    distance: float,
    normalize_winding: bool = True,
) -> list[PlanePoint]:
    """Offset every vertex of a closed loop outward by ``distance``.

    Args:
        points: Closed vertex loop in drawing space.
        distance: Offset distance in drawing units.
        normalize_winding: Detect the loop's winding and offset away from its
            interior either way. When False the fixed (dy, -dx) convention is
            applied as is.

    Returns:
        A new loop with one point per input point, index-aligned with the
        input. Vertices whose normal is undefined (zero-length neighbours,
        antiparallel edges) stay where they are.
    """
    coords = as_array(points)
    if len(coords) < 3:
        return to_points(coords)

    if normalize_winding and not is_screen_clockwise(coords):
        logger.debug("Reversing counter-clockwise boundary of %d points for offset", len(coords))
        return to_points(_offset_array(coords[::-1], distance)[::-1])

    return to_points(_offset_array(coords, distance))


def _offset_array(coords: NDArray[np.float64], distance: float) -> NDArray[np.float64]:
    n_in = unit_vectors(perpendicular(edges_in(coords)))
    n_out = unit_vectors(perpendicular(edges_out(coords)))
    # Zero rows from degenerate edges drop out of the sum; a zero sum stays zero.
    normals = unit_vectors(n_in + n_out)
    return coords + normals * distance
