"""Interface to the game engine that owns turns, captures and scoring.

Geometry code only talks to the engine through :class:`GameEngine`, so a
native engine, the in-memory :class:`SnapshotEngine` or a test double can be
passed in interchangeably.
"""

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from dots_regions.geometry.types import GridPoint

logger = logging.getLogger(__name__)

# Owner tags in the field. Player n places tag n + 1.
EMPTY = 0
PLAYERS = (0, 1)


@dataclass(frozen=True)
class RegionDescriptor:
    """A captured region as reported by the engine.

    Current engines report the boundary cells; earlier revisions sent a
    pre-rendered SVG path string in ``shape`` instead.
    """

    owner: int
    boundary: tuple[GridPoint, ...] = ()
    shape: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RegionDescriptor":
        """Build a descriptor from its JSON form."""
        return cls(
            owner=int(data["owner"]),
            boundary=tuple(GridPoint(int(r), int(c)) for r, c in data.get("boundary", [])),
            shape=data.get("shape"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "owner": self.owner,
            "boundary": [list(p) for p in self.boundary],
        }
        if self.shape is not None:
            data["shape"] = self.shape
        return data


@runtime_checkable
class GameEngine(Protocol):
    """The snapshot interface consumed by the rendering side."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def field(self) -> Sequence[int]:
        """Owner tag per cell, row-major, ``height * width`` long."""
        ...

    def regions(self) -> Sequence[RegionDescriptor]:
        """Captured regions in engine order."""
        ...

    def score(self, player: int) -> int: ...

    def apply_turn(self, index: int, player: int) -> None:
        """Place ``player``'s marker on cell ``index``."""
        ...


class SnapshotEngine:
    """In-memory engine holding a fixed board snapshot.

    Markers can be placed, but captures and scores are not derived from
    them: regions and scores are whatever the snapshot (or
    :meth:`add_region` / :meth:`set_score`) provides.
    """

    def __init__(
        self,
        height: int,
        width: int,
        field: Sequence[int] | None = None,
        regions: Sequence[RegionDescriptor] = (),
        scores: dict[int, int] | None = None,
    ) -> None:
        if height <= 0 or width <= 0:
            raise ValueError(f"Board size must be positive, got {height}x{width}")
        size = height * width
        if field is None:
            field = [EMPTY] * size
        if len(field) != size:
            raise ValueError(f"Field has {len(field)} cells, expected {size}")

        self._height = height
        self._width = width
        self._field = list(field)
        self._regions = list(regions)
        self._scores = dict(scores or {})

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def field(self) -> Sequence[int]:
        return tuple(self._field)

    def regions(self) -> Sequence[RegionDescriptor]:
        return tuple(self._regions)

    def score(self, player: int) -> int:
        return self._scores.get(player, 0)

    def apply_turn(self, index: int, player: int) -> None:
        if not 0 <= index < len(self._field):
            raise IndexError(f"Cell {index} is outside the {self._height}x{self._width} board")
        if player not in PLAYERS:
            raise ValueError(f"Unknown player {player!r}")
        if self._field[index] != EMPTY:
            raise ValueError(f"Cell {index} is already taken")
        self._field[index] = player + 1

    def add_region(self, region: RegionDescriptor) -> None:
        """Record a captured region."""
        self._regions.append(region)

    def set_score(self, player: int, score: int) -> None:
        self._scores[player] = score

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SnapshotEngine":
        """Build an engine from a snapshot dict.

        Expected keys: ``height``, ``width`` and optionally ``field``,
        ``regions`` (list of descriptor dicts) and ``scores`` (player -> score;
        JSON object keys are accepted as strings).
        """
        return cls(
            height=int(data["height"]),
            width=int(data["width"]),
            field=data.get("field"),
            regions=[RegionDescriptor.from_dict(r) for r in data.get("regions", [])],
            scores={int(k): int(v) for k, v in data.get("scores", {}).items()},
        )

    @classmethod
    def load(cls, path: str | Path) -> "SnapshotEngine":
        """Load a snapshot from a JSON file."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        engine = cls.from_dict(data)
        logger.info(
            "Loaded %dx%d snapshot with %d regions from %s",
            engine.height,
            engine.width,
            len(engine._regions),
            path,
        )
        return engine

    def to_dict(self) -> dict[str, Any]:
        return {
            "height": self._height,
            "width": self._width,
            "field": list(self._field),
            "regions": [r.to_dict() for r in self._regions],
            "scores": {str(k): v for k, v in self._scores.items()},
        }
