"""Type definitions for region boundary geometry."""

from dataclasses import dataclass
from typing import NamedTuple, TypeAlias

# Lengths below this are treated as zero.
EPSILON = 1e-9


class GridPoint(NamedTuple):
    """A cell coordinate on the board grid."""

    row: int
    col: int


class PlanePoint(NamedTuple):
    """A point in continuous drawing space."""

    x: float
    y: float


@dataclass(frozen=True)
class Polygon:
    """A captured region boundary as produced by the engine.

    Points describe a closed loop; the last point implicitly connects back
    to the first. A renderable boundary has at least 3 points.
    """

    id: int
    points: tuple[GridPoint, ...]
    owner: int


@dataclass(frozen=True)
class MoveTo:
    point: PlanePoint


@dataclass(frozen=True)
class LineTo:
    point: PlanePoint


@dataclass(frozen=True)
class QuadCurveTo:
    """Quadratic curve from the current point to ``end``."""

    control: PlanePoint
    end: PlanePoint


@dataclass(frozen=True)
class Close:
    pass


PathCommand: TypeAlias = MoveTo | LineTo | QuadCurveTo | Close
Path: TypeAlias = list[PathCommand]
