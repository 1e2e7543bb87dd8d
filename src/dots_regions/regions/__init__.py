"""Region composition: styles, outlines and SVG output."""

from dots_regions.regions.composer import (
    RegionGeometry,
    compose_prerendered,
    compose_region,
    compose_regions,
)
from dots_regions.regions.styles import FALLBACK_STYLE, PLAYER_STYLES, Style, style_for
from dots_regions.regions.svg import render_region, render_regions_svg

__all__ = [
    "FALLBACK_STYLE",
    "PLAYER_STYLES",
    "RegionGeometry",
    "Style",
    "compose_prerendered",
    "compose_region",
    "compose_regions",
    "render_region",
    "render_regions_svg",
    "style_for",
]
