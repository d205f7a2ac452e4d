"""World renderer: paints the tile map back to front and slots the player in.

There is no depth buffer. Draw order alone resolves occlusion: rows are walked
from last to first and, inside a row, columns from last to first, so projected
y only decreases along the walk and nearer cells paint over farther ones.

The player is drawn right after any cell whose projected origin lies within
half a tile of the player's position. This is an approximation: at some
positions the player is drawn twice or not at all. It is kept as is.

Map regeneration is requested at any time but applied only after a traversal
has finished, so a frame never sees a half-swapped map.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.drawable import Actor, SpriteSink
from world.projection import IsometricProjector
from world.tilemap import TileMap, TileMapGenerator
from world.tiles import TerrainTextures, TileCode

logger = logging.getLogger(__name__)


class WorldRenderer:
    def __init__(
        self,
        textures: TerrainTextures,
        generator: TileMapGenerator,
        *,
        tile_width: float = 64,
        tile_height: float = 64,
        prop_lift_ratio: float = 1 / 1.5,
        tree_extra_height: float = 30.0,
        stump_height_ratio: float = 0.5,
        tile_map: Optional[TileMap] = None,
    ) -> None:
        self.textures = textures
        self.generator = generator
        self.projector = IsometricProjector(tile_width, tile_height)
        self.tile_width = float(tile_width)
        self.tile_height = float(tile_height)
        self.prop_lift = self.tile_height * prop_lift_ratio
        self._prop_heights = {
            TileCode.TREE_A: self.tile_height + tree_extra_height,
            TileCode.TREE_B: self.tile_height + tree_extra_height,
            TileCode.STUMP: self.tile_height * stump_height_ratio,
        }
        self._tile_map = tile_map if tile_map is not None else generator.generate()
        self._regenerate_pending = False
        logger.info("World renderer ready with %r", self._tile_map)

    @property
    def tile_map(self) -> TileMap:
        return self._tile_map

    @property
    def regenerate_pending(self) -> bool:
        return self._regenerate_pending

    def request_regenerate(self) -> None:
        """Replace the map after the next traversal completes."""
        self._regenerate_pending = True

    def regenerate(self) -> TileMap:
        """Swap in a freshly generated map now. Call between frames only."""
        old = self._tile_map
        self._tile_map = self.generator.generate()
        self._regenerate_pending = False
        logger.info("Regenerated map: %r -> %r", old, self._tile_map)
        return self._tile_map

    # ------------------------------------------------------------------
    def _draw_cell(self, batch: SpriteSink, code: TileCode, x: float, y: float) -> None:
        tw, th = self.tile_width, self.tile_height
        if not code.is_prop:
            batch.draw(self.textures.ground[code], x, y, tw, th)
            return
        # Props stand on plain ground and are lifted off the tile.
        batch.draw(self.textures.prop_base, x, y, tw, th)
        batch.draw(
            self.textures.props[code], x, y + self.prop_lift, tw, self._prop_heights[code]
        )

    def draw_frame(self, batch: SpriteSink, player: Actor) -> None:
        tile_map = self._tile_map
        projector = self.projector
        px, py = player.iso_x, player.iso_y

        for row, col, code in tile_map.back_to_front():
            x, y = projector.project(row, col)
            self._draw_cell(batch, code, x, y)
            if projector.is_near(x, y, px, py):
                player.render(batch)

        if self._regenerate_pending:
            self.regenerate()
