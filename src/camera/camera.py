"""Orthographic 2D camera for the isometric view.

`position` is the world point at the centre of the screen. `zoom` scales the
visible area: 1.0 shows one world unit per pixel, larger values show more of
the world. World y points up.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pygame.math import Vector2

from config import CAMERA_MAX_ZOOM, CAMERA_MIN_ZOOM


class Camera2D:
    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        position: Optional[Vector2] = None,
        zoom: float = 1.0,
        *,
        min_zoom: float = CAMERA_MIN_ZOOM,
        max_zoom: float = CAMERA_MAX_ZOOM,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.position = Vector2(position) if position is not None else Vector2(width / 2, height / 2)
        self.min_zoom = float(min_zoom)
        self.max_zoom = float(max_zoom)
        self.zoom = self._clamp(float(zoom))

    def _clamp(self, zoom: float) -> float:
        return max(self.min_zoom, min(self.max_zoom, zoom))

    def zoom_by(self, delta: float) -> float:
        self.zoom = self._clamp(self.zoom + delta)
        return self.zoom

    def pan(self, dx: float, dy: float) -> None:
        self.position.x += dx
        self.position.y += dy

    def bounds(self) -> Tuple[float, float, float, float]:
        """Visible world rectangle as (left, right, bottom, top)."""
        half_w = self.width * self.zoom / 2
        half_h = self.height * self.zoom / 2
        cx, cy = self.position.x, self.position.y
        return cx - half_w, cx + half_w, cy - half_h, cy + half_h

    def screen_to_world(self, sx: float, sy: float) -> Vector2:
        """Map a pygame window pixel (y-down) to world coordinates."""
        left, _, _, top = self.bounds()
        return Vector2(left + sx * self.zoom, top - sy * self.zoom)

    def apply(self) -> None:  # pragma: no cover - visual
        from OpenGL.GL import glOrtho

        left, right, bottom, top = self.bounds()
        glOrtho(left, right, bottom, top, -1, 1)
