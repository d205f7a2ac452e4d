"""Tests for WorldScene wiring without a GL context."""

import numpy as np
import pytest

from core.input import Control, InputState
from core.settings import GameSettings
from player.states import Walking
from player.direction import Direction
from world.tilemap import TileMap
from world.worldscene import WorldScene


@pytest.fixture
def scene(terrain_textures, clip_table, batch) -> WorldScene:
    return WorldScene(
        GameSettings(map_seed=3),
        textures=terrain_textures,
        clips=clip_table,
        batch=batch,
        tile_map=TileMap(np.ones((4, 4), dtype=np.uint8)),
    )


class TestWorldScene:
    """Test per-frame update and draw."""

    def test_camera_start(self, scene: WorldScene) -> None:
        """Test the camera starts left of the screen centre."""
        assert (scene.camera.position.x, scene.camera.position.y) == (140.0, 360.0)

    def test_update_moves_player(self, scene: WorldScene) -> None:
        """Test inputs reach the player."""
        scene.update(0.1, InputState.of(held=[Control.MOVE_RIGHT]))
        assert scene.player.state == Walking(Direction.RIGHT)
        assert scene.player.iso_x == 2.0

    def test_update_drives_camera(self, scene: WorldScene) -> None:
        """Test inputs reach the camera controller."""
        zoom = scene.camera.zoom
        scene.update(0.1, InputState.of(held=[Control.ZOOM_OUT]))
        assert scene.camera.zoom > zoom

    def test_regenerate_waits_for_draw(self, scene: WorldScene, batch) -> None:
        """Test the map swaps only after the next frame is drawn."""
        old = scene.tile_map
        scene.update(0.1, InputState.of(pressed=[Control.REGENERATE]))
        assert scene.tile_map is old

        scene.draw()
        assert batch.begun == 1 and batch.ended == 1
        assert scene.tile_map is not old
        assert len(batch.calls) >= 16

    def test_extra_updaters_run(self, scene: WorldScene) -> None:
        """Test registered update callbacks receive dt and inputs."""
        seen = []
        scene.updaters.append(lambda dt, inputs: seen.append((dt, inputs)))
        scene.update(0.5, InputState())
        assert seen == [(0.5, InputState())]
