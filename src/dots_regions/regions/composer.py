"""Region path composition.

Turns engine region boundaries into a rounded core outline, an outward halo
outline and a player style. Every region is composed independently and the
whole set is rebuilt from scratch whenever the board changes.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from dots_regions.config import Settings
from dots_regions.engine import RegionDescriptor
from dots_regions.geometry.mapping import map_points
from dots_regions.geometry.offset import offset_outward
from dots_regions.geometry.rounding import round_corners
from dots_regions.geometry.svgpath import PathSyntaxError, format_path, parse_path
from dots_regions.geometry.types import Path, Polygon
from dots_regions.regions.styles import Style, style_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegionGeometry:
    """Drawable outlines and style of one region."""

    region_id: int
    owner: int
    core_path: Path
    halo_path: Path
    style: Style

    def to_dict(self, precision: int = 2) -> dict[str, Any]:
        """Convert to a JSON-friendly dict with SVG path data strings."""
        return {
            "id": self.region_id,
            "owner": self.owner,
            "core_path": format_path(self.core_path, precision),
            "halo_path": format_path(self.halo_path, precision),
            "style": self.style.to_dict(),
        }


def compose_region(
    polygon: Polygon,
    cell_spacing: float,
    corner_radius: float,
    halo_distance: float,
    normalize_winding: bool = True,
) -> RegionGeometry:
    """Build the core and halo outlines of a region boundary.

    Args:
        polygon: Region boundary in grid cells.
        cell_spacing: Size of one cell in drawing units.
        corner_radius: Corner rounding radius for both outlines.
        halo_distance: How far the halo sits outside the core outline.
        normalize_winding: Passed to :func:`offset_outward`.

    Returns:
        The region's outlines and style. Both paths are empty for boundaries
        with fewer than 3 distinct points.
    """
    mapped = map_points(polygon.points, cell_spacing)
    core_path = round_corners(mapped, corner_radius)
    halo = offset_outward(mapped, halo_distance, normalize_winding=normalize_winding)
    halo_path = round_corners(halo, corner_radius)
    return RegionGeometry(
        region_id=polygon.id,
        owner=polygon.owner,
        core_path=core_path,
        halo_path=halo_path,
        style=style_for(polygon.owner),
    )


def compose_prerendered(region_id: int, owner: int, shape: str) -> RegionGeometry:
    """Wrap a region whose outline the engine already rendered as path data.

    The path is used as the core outline unchanged; no halo is produced.

    Raises:
        PathSyntaxError: If ``shape`` is not valid path data.
    """
    return RegionGeometry(
        region_id=region_id,
        owner=owner,
        core_path=parse_path(shape),
        halo_path=[],
        style=style_for(owner),
    )


def compose_regions(
    descriptors: Iterable[RegionDescriptor],
    settings: Settings,
) -> list[RegionGeometry]:
    """Compose every region reported by the engine, in engine order.

    A region's id is its position in ``descriptors``. A region whose
    pre-rendered shape cannot be parsed is kept with empty paths so the
    rest of the board still draws.
    """
    composed: list[RegionGeometry] = []
    for region_id, descriptor in enumerate(descriptors):
        if descriptor.boundary or descriptor.shape is None:
            polygon = Polygon(id=region_id, points=descriptor.boundary, owner=descriptor.owner)
            composed.append(
                compose_region(
                    polygon,
                    cell_spacing=settings.cell_spacing,
                    corner_radius=settings.corner_radius,
                    halo_distance=settings.halo_distance,
                    normalize_winding=settings.normalize_winding,
                )
            )
        else:
            try:
                composed.append(compose_prerendered(region_id, descriptor.owner, descriptor.shape))
            except PathSyntaxError as e:
                logger.warning("Region %d has unreadable shape, drawing nothing: %s", region_id, e)
                composed.append(
                    RegionGeometry(
                        region_id=region_id,
                        owner=descriptor.owner,
                        core_path=[],
                        halo_path=[],
                        style=style_for(descriptor.owner),
                    )
                )

    logger.debug("Composed %d regions", len(composed))
    return composed
