"""Corner rounding for closed region boundaries.

Each vertex is replaced by a quadratic curve whose control point is the
original vertex. The curve starts ``radius`` before the vertex along the
incoming edge and ends ``radius`` after it along the outgoing edge, with
straight runs joining consecutive corners.

The radius should stay below half of the shortest edge. Larger values make
neighbouring corners overlap and the path self-intersects; that is the
caller's responsibility and is not checked here.
"""

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from dots_regions.geometry.types import (
    EPSILON,
    Close,
    LineTo,
    MoveTo,
    Path,
    PlanePoint,
    QuadCurveTo,
)
from dots_regions.geometry.vectors import as_array, edges_in, edges_out, unit_vectors

logger = logging.getLogger(__name__)


def drop_repeated_points(
    points: Sequence[PlanePoint] | NDArray[np.float64],
    tolerance: float = EPSILON,
) -> NDArray[np.float64]:
    """Remove consecutive coincident vertices from a closed loop.

    The wrap-around pair (last, first) counts as consecutive, so a loop
    given with an explicit closing point loses it.
    """
    coords = as_array(points)
    if len(coords) == 0:
        return coords

    keep = [0]
    for i in range(1, len(coords)):
        if np.hypot(*(coords[i] - coords[keep[-1]])) > tolerance:
            keep.append(i)

    while len(keep) > 1 and np.hypot(*(coords[keep[-1]] - coords[keep[0]])) <= tolerance:
        keep.pop()

    return coords[keep]


def round_corners(points: Sequence[PlanePoint], radius: float) -> Path:
    """Build a closed path with rounded corners through ``points``.

    Args:
        points: Closed vertex loop in drawing space (no duplicate closing point).
        radius: Distance along each edge from a vertex at which its curve begins.

    Returns:
        MoveTo, then one curve per vertex with a LineTo before every curve
        after the first, then Close. Empty when fewer than 3 distinct
        vertices remain.
    """
    coords = drop_repeated_points(points)
    if len(coords) < 3:
        if len(points):
            logger.debug(
                "Skipping rounding of degenerate boundary: %d points, %d distinct",
                len(points),
                len(coords),
            )
        return []

    u_in = unit_vectors(edges_in(coords))
    u_out = unit_vectors(edges_out(coords))
    entries = coords - u_in * radius
    exits = coords + u_out * radius

    path: Path = []
    for i in range(len(coords)):
        entry = PlanePoint(float(entries[i, 0]), float(entries[i, 1]))
        path.append(MoveTo(entry) if i == 0 else LineTo(entry))
        path.append(
            QuadCurveTo(
                control=PlanePoint(float(coords[i, 0]), float(coords[i, 1])),
                end=PlanePoint(float(exits[i, 0]), float(exits[i, 1])),
            )
        )
    path.append(Close())
    return path
