"""Procedural square tile maps.

A map is a read-only numpy grid of `TileCode` values. Generation draws the side
length, then rolls every cell independently against the terrain weights, then
forces the spawn cell (0, 0) to plain ground. Nothing else is validated: props
may still surround the spawn cell.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

import numpy as np

from core.errors import ConfigError
from world.tiles import ROLL_ORDER, SPAWN_CODE, TerrainWeights, TileCode

logger = logging.getLogger(__name__)

_ROLL_CODES = np.array([int(c) for c in ROLL_ORDER], dtype=np.uint8)


class TileMap:
    """Square, row-major, immutable grid of tile codes."""

    def __init__(self, codes: np.ndarray, seed: Optional[int] = None) -> None:
        grid = np.array(codes, dtype=np.uint8, copy=True)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1] or grid.shape[0] == 0:
            raise ConfigError(f"tile map must be a non-empty square grid, got shape {grid.shape}")
        valid = {int(c) for c in TileCode}
        if not set(np.unique(grid).tolist()) <= valid:
            raise ConfigError("tile map holds unknown tile codes")
        grid.setflags(write=False)
        self._grid = grid
        self.seed = seed

    @property
    def size(self) -> int:
        return int(self._grid.shape[0])

    @property
    def codes(self) -> np.ndarray:
        """Read-only view of the raw grid."""
        return self._grid

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, cell: tuple[int, int]) -> TileCode:
        row, col = cell
        return TileCode(int(self._grid[row, col]))

    def back_to_front(self) -> Iterator[tuple[int, int, TileCode]]:
        """Yield (row, col, code) from the last row to the first, and inside each
        row from the last column to the first."""
        n = self.size
        for row in range(n - 1, -1, -1):
            line = self._grid[row]
            for col in range(n - 1, -1, -1):
                yield row, col, TileCode(int(line[col]))

    def counts(self) -> dict[TileCode, int]:
        hist = np.bincount(self._grid.ravel(), minlength=len(TileCode))
        return {code: int(hist[int(code)]) for code in TileCode}

    def __repr__(self) -> str:
        return f"TileMap(size={self.size}, seed={self.seed})"


def _draw_size(rng: np.random.Generator, min_size: int, max_size: int) -> int:
    # Uniform over [0, max) with the floor clamped up to min_size.
    return max(min_size, int(rng.integers(0, max_size)))


def generate_tilemap(
    rng: np.random.Generator,
    *,
    size_range: tuple[int, int] = (10, 50),
    weights: Optional[TerrainWeights] = None,
    seed: Optional[int] = None,
) -> TileMap:
    """Draw one map from `rng`.

    Args:
        rng: numpy Generator; advanced by the draw
        size_range: (min, max) side length, max exclusive
        weights: per-code percentages; defaults to TerrainWeights.default()
        seed: recorded on the map for logging only

    Returns:
        A new TileMap; the caller decides whether to replace a previous one
    """
    min_size, max_size = size_range
    if min_size < 1 or max_size <= min_size:
        raise ConfigError(f"invalid map size range {size_range}")
    weights = weights or TerrainWeights.default()

    n = _draw_size(rng, min_size, max_size)
    rolls = rng.integers(0, 100, size=(n, n))
    # First threshold strictly above the roll picks the category.
    idx = np.searchsorted(np.asarray(weights.thresholds()), rolls, side="right")
    grid = _ROLL_CODES[idx]
    grid[0, 0] = int(SPAWN_CODE)
    return TileMap(grid, seed=seed)


class TileMapGenerator:
    """Produces successive maps from one seeded numpy Generator."""

    def __init__(
        self,
        size_range: tuple[int, int] = (10, 50),
        weights: Optional[TerrainWeights] = None,
        seed: Optional[int] = None,
    ) -> None:
        min_size, max_size = size_range
        if min_size < 1 or max_size <= min_size:
            raise ConfigError(f"invalid map size range {size_range}")
        self.size_range = (int(min_size), int(max_size))
        self.weights = weights or TerrainWeights.default()
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self._generated = 0

    def generate(self) -> TileMap:
        tile_map = generate_tilemap(
            self._rng, size_range=self.size_range, weights=self.weights, seed=self.seed
        )
        self._generated += 1
        if logger.isEnabledFor(logging.DEBUG):
            stats = ", ".join(f"{c.name}={n}" for c, n in tile_map.counts().items())
            logger.debug(
                "Generated map #%d: %dx%d (seed=%s) %s",
                self._generated,
                tile_map.size,
                tile_map.size,
                self.seed,
                stats,
            )
        return tile_map

    @property
    def generated_count(self) -> int:
        return self._generated
