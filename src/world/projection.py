"""Grid cell to screen position for the 2:1 isometric view.

x uses tile_width / 2 and y uses tile_height / 4: tiles are drawn at full tile
height and overlap by three quarters vertically. Screen y grows with row + col,
so walking the grid from the last row/column back to the first paints far cells
before near ones.
"""

from __future__ import annotations

from dataclasses import dataclass


def project(row: float, col: float, tile_width: float, tile_height: float) -> tuple[float, float]:
    x = (col - row) * (tile_width / 2.0)
    y = (col + row) * (tile_height / 4.0)
    return x, y


@dataclass(frozen=True)
class IsometricProjector:
    tile_width: float
    tile_height: float

    def project(self, row: float, col: float) -> tuple[float, float]:
        return project(row, col, self.tile_width, self.tile_height)

    def is_near(self, cell_x: float, cell_y: float, px: float, py: float) -> bool:
        """True when (px, py) lies within half a tile of a cell's projected origin."""
        return (
            abs(px - cell_x) < self.tile_width / 2.0
            and abs(py - cell_y) < self.tile_height / 2.0
        )
