"""World package: re-export common symbols for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import TileMapGenerator, WorldRenderer, TileCode

`WorldScene` lives in `world.worldscene` and is imported from there, since it
pulls in the settings and player layers that themselves depend on `world`.
"""

from .tiles import TileCode, TerrainWeights, TerrainTextures
from .tilemap import TileMap, TileMapGenerator, generate_tilemap
from .projection import IsometricProjector, project
from .renderer import WorldRenderer

__all__ = [
    "TileCode",
    "TerrainWeights",
    "TerrainTextures",
    "TileMap",
    "TileMapGenerator",
    "generate_tilemap",
    "IsometricProjector",
    "project",
    "WorldRenderer",
]
