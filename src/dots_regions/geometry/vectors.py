"""Vectorised helpers shared by the boundary algorithms."""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from dots_regions.geometry.types import EPSILON, PlanePoint


def as_array(points: Sequence[PlanePoint] | NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert a point sequence to an (N, 2) float array."""
    return np.asarray(points, dtype=np.float64).reshape(-1, 2)


def to_points(coords: NDArray[np.float64]) -> list[PlanePoint]:
    """Convert an (N, 2) array back to plane points of plain floats."""
    return [PlanePoint(float(x), float(y)) for x, y in coords]


def unit_vectors(vectors: NDArray[np.float64]) -> NDArray[np.float64]:
    """Normalize each row; rows shorter than EPSILON become zero vectors."""
    lengths = np.hypot(vectors[:, 0], vectors[:, 1])[:, np.newaxis]
    return np.divide(
        vectors,
        lengths,
        out=np.zeros_like(vectors),
        where=lengths > EPSILON,
    )


def perpendicular(vectors: NDArray[np.float64]) -> NDArray[np.float64]:
    """Rotate each row by 90 degrees: (dx, dy) -> (dy, -dx)."""
    return np.column_stack((vectors[:, 1], -vectors[:, 0]))


def edges_in(coords: NDArray[np.float64]) -> NDArray[np.float64]:
    """Vector from the previous vertex to each vertex of a closed loop."""
    return coords - np.roll(coords, 1, axis=0)


def edges_out(coords: NDArray[np.float64]) -> NDArray[np.float64]:
    """Vector from each vertex to the next vertex of a closed loop."""
    return np.roll(coords, -1, axis=0) - coords
