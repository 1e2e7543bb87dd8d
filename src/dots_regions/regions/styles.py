"""Player to region style mapping."""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Style:
    """Fill pattern and stroke color of a region."""

    fill_pattern_id: str
    stroke_color: str

    def to_dict(self) -> dict[str, str]:
        return {
            "fill_pattern_id": self.fill_pattern_id,
            "stroke_color": self.stroke_color,
        }


PLAYER_STYLES: dict[int, Style] = {
    0: Style(fill_pattern_id="player-1-pattern", stroke_color="#ef4444"),  # red
    1: Style(fill_pattern_id="player-2-pattern", stroke_color="#3b82f6"),  # blue
}

# Used for owner tags outside PLAYER_STYLES so an unknown owner is never
# drawn in a real player's colors.
FALLBACK_STYLE = Style(fill_pattern_id="neutral-pattern", stroke_color="#9ca3af")


def style_for(owner: int) -> Style:
    """Return the style of a region owned by ``owner``.

    Owners 0 and 1 are the two players. Anything else gets FALLBACK_STYLE.
    """
    style = PLAYER_STYLES.get(owner)
    if style is None:
        logger.warning("No style for region owner %r, using neutral fallback", owner)
        return FALLBACK_STYLE
    return style
