"""SVG rendering of composed regions."""

from collections.abc import Sequence

from dots_regions.config import Settings
from dots_regions.geometry.svgpath import format_path
from dots_regions.regions.composer import RegionGeometry
from dots_regions.regions.styles import FALLBACK_STYLE, PLAYER_STYLES

HALO_STROKE_WIDTH = 4
HALO_OPACITY = 0.7
CORE_STROKE_WIDTH = 2

# Pattern tiles keyed by fill pattern id.
PATTERN_DEFS: dict[str, str] = {
    PLAYER_STYLES[0].fill_pattern_id: (
        '<pattern id="{id}" patternUnits="userSpaceOnUse" width="16" height="16" '
        'patternTransform="rotate(45)">'
        '<rect width="16" height="16" fill="#fecaca"/>'
        '<circle cx="8" cy="8" r="4" fill="#ef4444"/>'
        "</pattern>"
    ),
    PLAYER_STYLES[1].fill_pattern_id: (
        '<pattern id="{id}" patternUnits="userSpaceOnUse" width="16" height="16">'
        '<rect width="16" height="16" fill="#dbeafe"/>'
        '<polygon points="8,4 12,8 8,12 4,8" fill="#3b82f6" opacity="0.7"/>'
        "</pattern>"
    ),
    FALLBACK_STYLE.fill_pattern_id: (
        '<pattern id="{id}" patternUnits="userSpaceOnUse" width="16" height="16">'
        '<rect width="16" height="16" fill="#e5e7eb"/>'
        "</pattern>"
    ),
}


def render_region(region: RegionGeometry, precision: int = 2) -> str:
    """Render one region as an SVG group, halo below the core outline."""
    stroke = region.style.stroke_color
    lines = [f'<g data-region="{region.region_id}">']
    if region.halo_path:
        lines.append(
            f'<path d="{format_path(region.halo_path, precision)}" fill="none" '
            f'stroke="{stroke}" stroke-width="{HALO_STROKE_WIDTH}" opacity="{HALO_OPACITY}"/>'
        )
    lines.append(
        f'<path d="{format_path(region.core_path, precision)}" '
        f'fill="url(#{region.style.fill_pattern_id})" '
        f'stroke="{stroke}" stroke-width="{CORE_STROKE_WIDTH}"/>'
    )
    lines.append("</g>")
    return "".join(lines)


def render_regions_svg(
    regions: Sequence[RegionGeometry],
    width: int,
    height: int,
    settings: Settings,
) -> str:
    """Render a board's regions as a standalone SVG document.

    Args:
        regions: Composed regions, drawn in order.
        width: Board width in cells.
        height: Board height in cells.
        settings: Provides cell spacing and path precision.
    """
    drawable = [r for r in regions if r.core_path]
    pattern_ids = sorted({r.style.fill_pattern_id for r in drawable})

    px_width = _number(width * settings.cell_spacing)
    px_height = _number(height * settings.cell_spacing)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{px_width}" height="{px_height}" '
        f'viewBox="0 0 {px_width} {px_height}">'
    ]
    if pattern_ids:
        lines.append("<defs>")
        lines.extend(PATTERN_DEFS[pid].format(id=pid) for pid in pattern_ids)
        lines.append("</defs>")
    lines.extend(render_region(r, settings.path_precision) for r in drawable)
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
