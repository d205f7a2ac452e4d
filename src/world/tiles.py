"""Tile codes, the terrain roll table and the terrain asset table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Mapping

from core.errors import ConfigError
from textures.frame import Frame


class TileCode(IntEnum):
    # Values are the codes stored in the map grid.
    GROUND_B = 0
    GROUND_A = 1
    TREE_A = 2
    TREE_B = 3
    STUMP = 4
    GROUND_C = 5

    @property
    def is_prop(self) -> bool:
        return self in _PROPS

    @property
    def is_walkable(self) -> bool:
        return self not in _PROPS


_PROPS = frozenset({TileCode.TREE_A, TileCode.TREE_B, TileCode.STUMP})

GROUND_CODES = tuple(c for c in TileCode if not c.is_prop)
PROP_CODES = tuple(c for c in TileCode if c.is_prop)

# Order in which a 0..99 roll is matched against the cumulative weights.
ROLL_ORDER = (
    TileCode.GROUND_B,
    TileCode.GROUND_A,
    TileCode.GROUND_C,
    TileCode.TREE_A,
    TileCode.TREE_B,
    TileCode.STUMP,
)

SPAWN_CODE = TileCode.GROUND_A


class TerrainWeights:
    """Integer percentages per tile code, summing to exactly 100."""

    def __init__(self, weights: Mapping[TileCode, int]) -> None:
        missing = [c.name for c in ROLL_ORDER if c not in weights]
        if missing:
            raise ConfigError(f"terrain weights missing codes: {', '.join(missing)}")
        unknown = [repr(k) for k in weights if k not in ROLL_ORDER]
        if unknown:
            raise ConfigError(f"terrain weights hold unknown codes: {', '.join(unknown)}")
        values = {}
        for code in ROLL_ORDER:
            w = weights[code]
            if isinstance(w, bool) or not isinstance(w, int) or w < 0:
                raise ConfigError(f"weight for {code.name} must be a non-negative int, got {w!r}")
            values[code] = w
        total = sum(values.values())
        if total != 100:
            raise ConfigError(f"terrain weights must sum to 100, got {total}")
        self._weights = values

    @classmethod
    def default(cls) -> "TerrainWeights":
        return cls(
            {
                TileCode.GROUND_B: 15,
                TileCode.GROUND_A: 55,
                TileCode.GROUND_C: 15,
                TileCode.TREE_A: 8,
                TileCode.TREE_B: 5,
                TileCode.STUMP: 2,
            }
        )

    @classmethod
    def from_names(cls, weights: Mapping[str, int]) -> "TerrainWeights":
        """Build from a name-keyed mapping such as config.TERRAIN_WEIGHTS."""
        try:
            return cls({TileCode[name]: w for name, w in weights.items()})
        except KeyError as e:
            raise ConfigError(f"unknown tile code name in terrain weights: {e}") from e

    def __getitem__(self, code: TileCode) -> int:
        return self._weights[code]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TerrainWeights):
            return NotImplemented
        return self._weights == other._weights

    def __hash__(self) -> int:
        return hash(tuple(self._weights.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{c.name}={w}" for c, w in self._weights.items())
        return f"TerrainWeights({inner})"

    def thresholds(self) -> list[int]:
        """Cumulative upper bounds in ROLL_ORDER, e.g. [15, 70, 85, 93, 98, 100]."""
        out, acc = [], 0
        for code in ROLL_ORDER:
            acc += self._weights[code]
            out.append(acc)
        return out

    def fractions(self) -> dict[TileCode, float]:
        return {c: w / 100.0 for c, w in self._weights.items()}


@dataclass(frozen=True)
class TerrainTextures:
    """Frames used to draw each tile code.

    Prop cells are drawn on top of `prop_base` (the plain ground frame).
    """

    ground: Mapping[TileCode, Frame]
    props: Mapping[TileCode, Frame]
    prop_base: Frame

    def __post_init__(self) -> None:
        missing = [c.name for c in GROUND_CODES if c not in self.ground]
        missing += [c.name for c in PROP_CODES if c not in self.props]
        if missing:
            raise ConfigError(f"terrain textures missing frames for: {', '.join(missing)}")
