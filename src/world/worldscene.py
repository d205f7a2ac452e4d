"""World scene: wires the map, the player, the camera, and the renderer.

The engine hands the scene one `(dt, InputState)` per frame and then asks it
to render. Asset tables are loaded here by default; pass `textures`, `clips`
and `batch` to run the scene without a GL context.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from pygame.math import Vector2

from config import CAMERA_START_OFFSET_X, CLEAR_COLOR, HEIGHT, WIDTH
from camera import Camera2D, CameraController
from core.drawable import SpriteSink
from core.input import Control, InputState
from core.scene import Scene
from core.settings import GameSettings
from player.clips import ClipTable
from player.controller import PlayerController
from world.renderer import WorldRenderer
from world.tilemap import TileMap, TileMapGenerator
from world.tiles import TerrainTextures

logger = logging.getLogger(__name__)


class WorldScene(Scene):
    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        *,
        textures: Optional[TerrainTextures] = None,
        clips: Optional[ClipTable] = None,
        batch: Optional[SpriteSink] = None,
        camera: Optional[Camera2D] = None,
        tile_map: Optional[TileMap] = None,
    ) -> None:
        start_time = time.perf_counter()
        settings = settings or GameSettings()
        cam = camera or Camera2D(
            WIDTH, HEIGHT, position=Vector2(WIDTH / 2 + CAMERA_START_OFFSET_X, HEIGHT / 2)
        )
        super().__init__(camera=cam)
        self.settings = settings

        if textures is None or clips is None:
            from textures.texture_manager import load_player_clips, load_world_textures

            if textures is None:
                textures = load_world_textures()
            if clips is None:
                clips = load_player_clips(settings.frame_count, settings.frame_duration)

        self.generator = TileMapGenerator(
            settings.map_size_range, settings.terrain_weights, settings.map_seed
        )
        self.world_renderer = WorldRenderer(
            textures,
            self.generator,
            tile_width=settings.tile_width,
            tile_height=settings.tile_height,
            prop_lift_ratio=settings.prop_lift_ratio,
            tree_extra_height=settings.tree_extra_height,
            stump_height_ratio=settings.stump_height_ratio,
            tile_map=tile_map,
        )
        self.player = PlayerController(
            clips,
            tile_width=settings.tile_width,
            tile_height=settings.tile_height,
            speed=settings.player_speed,
            combo_window=settings.combo_window,
            sprite_scale=settings.sprite_scale,
            baseline_offset=settings.sprite_baseline_offset,
        )
        self.camera_controller = CameraController(cam)
        if batch is None:
            from render.sprite_batch import SpriteBatch

            batch = SpriteBatch()
        self.batch = batch

        logger.info(
            "World scene ready in %.2f ms (map %dx%d)",
            (time.perf_counter() - start_time) * 1000.0,
            self.world_renderer.tile_map.size,
            self.world_renderer.tile_map.size,
        )

    @property
    def tile_map(self) -> TileMap:
        return self.world_renderer.tile_map

    def update(self, dt: float, inputs: InputState) -> None:
        if inputs.was_pressed(Control.REGENERATE):
            self.world_renderer.request_regenerate()
        self.camera_controller.update(inputs)
        self.player.update(dt, inputs)
        super().update(dt, inputs)

    def draw(self) -> None:
        """Submit one frame of sprites to the batch."""
        self.batch.begin(self.camera)
        self.world_renderer.draw_frame(self.batch, self.player)
        self.batch.end()

    def render(self) -> None:  # pragma: no cover - visual
        from OpenGL.GL import glClear, glClearColor, GL_COLOR_BUFFER_BIT

        glClearColor(*CLEAR_COLOR)
        glClear(GL_COLOR_BUFFER_BIT)
        self.draw()
