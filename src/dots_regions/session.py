"""Game session: the engine handle and the region frames drawn from it."""

import logging
import time
from dataclasses import dataclass
from typing import Any

from dots_regions.config import Settings
from dots_regions.engine import PLAYERS, GameEngine
from dots_regions.regions.composer import RegionGeometry, compose_regions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardFrame:
    """Everything the board view needs to draw one turn."""

    turn: int
    width: int
    height: int
    field: tuple[int, ...]
    scores: dict[int, int]
    regions: list[RegionGeometry]

    def to_dict(self, precision: int = 2) -> dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "turn": self.turn,
            "width": self.width,
            "height": self.height,
            "field": list(self.field),
            "scores": {str(p): s for p, s in self.scores.items()},
            "regions": [r.to_dict(precision) for r in self.regions],
        }


class GameSession:
    """Plays turns on an engine and recomposes the regions after each one.

    The session is handed its engine at construction and is the only
    object that drives it. Region geometry is rebuilt from scratch after
    every turn; nothing is carried over from the previous frame.
    """

    def __init__(self, engine: GameEngine, settings: Settings | None = None) -> None:
        self._engine = engine
        self._settings = settings or Settings()
        self._turn = 0
        self._frame = self._compose(self._turn)

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def frame(self) -> BoardFrame:
        """The frame composed after the most recent turn."""
        return self._frame

    def play(self, index: int, player: int) -> BoardFrame:
        """Apply one turn and return the recomposed frame.

        Legality is checked by the engine; its exceptions propagate and
        leave the current frame and turn counter unchanged.
        """
        start = time.perf_counter()
        self._engine.apply_turn(index, player)
        self._frame = self._compose(self._turn + 1)
        self._turn = self._frame.turn
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Turn %d: player %d on cell %d, %d regions (%.1f ms)",
            self._turn,
            player,
            index,
            len(self._frame.regions),
            elapsed_ms,
        )
        return self._frame

    def _compose(self, turn: int) -> BoardFrame:
        engine = self._engine
        return BoardFrame(
            turn=turn,
            width=engine.width,
            height=engine.height,
            field=tuple(engine.field()),
            scores={p: engine.score(p) for p in PLAYERS},
            regions=compose_regions(engine.regions(), self._settings),
        )
