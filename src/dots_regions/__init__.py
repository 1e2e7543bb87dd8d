"""Region outline rendering for the Dots territory game."""

from dots_regions.engine import GameEngine, RegionDescriptor, SnapshotEngine
from dots_regions.geometry import GridPoint, PlanePoint, Polygon
from dots_regions.regions import RegionGeometry, Style, compose_region, style_for
from dots_regions.session import BoardFrame, GameSession

__version__ = "0.1.0"
__all__ = [
    "BoardFrame",
    "GameEngine",
    "GameSession",
    "GridPoint",
    "PlanePoint",
    "Polygon",
    "RegionDescriptor",
    "RegionGeometry",
    "SnapshotEngine",
    "Style",
    "compose_region",
    "style_for",
]
