"""Centralized asset loading for the world scene.

Builds the two tables the core consumes: `TerrainTextures` for the world
renderer and `ClipTable` for the player. Both are plain objects, so the core
never imports GL and tests can hand in fakes.

`frame_loader` defaults to the GL loader; any callable path -> Frame works.
A missing file raises AssetError from the loader and aborts construction.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from player.animation import AnimationClip
from player.clips import Activity, ClipTable
from player.direction import Direction
from textures.frame import Frame
from textures.resoucepath import (
    GRASS_TEXTURE_PATH,
    GRASS2_TEXTURE_PATH,
    GRASS3_TEXTURE_PATH,
    PLAYER_SPRITES_PATH,
    STUMP_TEXTURE_PATH,
    TREE1_TEXTURE_PATH,
    TREE2_TEXTURE_PATH,
    player_frame_path,
)
from world.tiles import TerrainTextures, TileCode

logger = logging.getLogger(__name__)

FrameLoader = Callable[[str], Frame]


def _default_loader() -> FrameLoader:
    from textures.texture_utils import load_frame

    return load_frame


def load_world_textures(frame_loader: Optional[FrameLoader] = None) -> TerrainTextures:
    """Load and return the terrain asset table."""
    load = frame_loader or _default_loader()
    grass = load(GRASS_TEXTURE_PATH)
    textures = TerrainTextures(
        ground={
            TileCode.GROUND_A: grass,
            TileCode.GROUND_B: load(GRASS2_TEXTURE_PATH),
            TileCode.GROUND_C: load(GRASS3_TEXTURE_PATH),
        },
        props={
            TileCode.TREE_A: load(TREE1_TEXTURE_PATH),
            TileCode.TREE_B: load(TREE2_TEXTURE_PATH),
            TileCode.STUMP: load(STUMP_TEXTURE_PATH),
        },
        prop_base=grass,
    )
    logger.debug("Terrain textures loaded")
    return textures


def load_player_clips(
    frame_count: int,
    frame_duration: float,
    frame_loader: Optional[FrameLoader] = None,
    root: str = PLAYER_SPRITES_PATH,
) -> ClipTable:
    """Load every (direction, activity) clip from the sprite_player tree."""
    load = frame_loader or _default_loader()
    clips = {}
    for direction in Direction:
        for activity in Activity:
            frames = [
                load(player_frame_path(direction, activity, i, root))
                for i in range(frame_count)
            ]
            clips[(direction, activity)] = AnimationClip(
                frames, frame_duration, loop=not activity.is_attack
            )
    logger.debug(
        "Loaded %d player clips (%d frames each, %.3fs/frame)",
        len(clips),
        frame_count,
        frame_duration,
    )
    return ClipTable(clips)
