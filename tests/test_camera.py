"""Tests for the 2D camera and its controller."""

import pytest
from pygame.math import Vector2

from camera import Camera2D, CameraController
from core.input import Control, InputState


class TestCamera2D:
    """Test zoom clamping and the visible rectangle."""

    def test_default_centre(self) -> None:
        """Test the camera centres on the screen by default."""
        cam = Camera2D(1280, 720)
        assert cam.position == Vector2(640, 360)

    def test_zoom_clamped(self) -> None:
        """Test zoom stays inside its bounds."""
        cam = Camera2D(100, 100, zoom=1.0, min_zoom=0.5, max_zoom=2.0)
        cam.zoom_by(5.0)
        assert cam.zoom == 2.0
        cam.zoom_by(-10.0)
        assert cam.zoom == 0.5

    def test_bounds_scale_with_zoom(self) -> None:
        """Test a larger zoom shows more of the world."""
        cam = Camera2D(200, 100, position=Vector2(0, 0), zoom=2.0)
        assert cam.bounds() == (-200.0, 200.0, -100.0, 100.0)

    def test_screen_to_world_is_y_up(self) -> None:
        """Test the window's top-left maps to the world's top-left."""
        cam = Camera2D(200, 100, position=Vector2(0, 0))
        assert cam.screen_to_world(0, 0) == Vector2(-100, 50)
        assert cam.screen_to_world(200, 100) == Vector2(100, -50)


class TestCameraController:
    """Test zoom and pan controls."""

    def test_zoom_in_shrinks_view(self) -> None:
        """Test zoom in lowers the zoom factor."""
        cam = Camera2D(100, 100, zoom=1.0)
        CameraController(cam, zoom_step=0.25).update(InputState.of(held=[Control.ZOOM_IN]))
        assert cam.zoom == 0.75

    def test_zoom_out_grows_view(self) -> None:
        """Test zoom out raises the zoom factor."""
        cam = Camera2D(100, 100, zoom=1.0)
        CameraController(cam, zoom_step=0.25).update(InputState.of(held=[Control.ZOOM_OUT]))
        assert cam.zoom == 1.25

    def test_zoom_in_wins_when_both_held(self) -> None:
        """Test only one zoom step applies per frame."""
        cam = Camera2D(100, 100, zoom=1.0)
        held = [Control.ZOOM_OUT, Control.ZOOM_IN]
        CameraController(cam, zoom_step=0.25).update(InputState.of(held=held))
        assert cam.zoom == 0.75

    @pytest.mark.parametrize(
        "held,expected",
        [
            ([Control.PAN_LEFT, Control.PAN_UP], (-2.0, 0.0)),
            ([Control.PAN_RIGHT, Control.PAN_DOWN], (2.0, 0.0)),
            ([Control.PAN_UP, Control.PAN_DOWN], (0.0, -2.0)),
            ([Control.PAN_DOWN], (0.0, 2.0)),
        ],
    )
    def test_one_pan_direction_per_frame(self, held, expected) -> None:
        """Test pan priority left, right, up, down."""
        cam = Camera2D(100, 100, position=Vector2(0, 0))
        CameraController(cam, pan_speed=2.0).update(InputState.of(held=held))
        assert (cam.position.x, cam.position.y) == expected
