"""CameraController: maps zoom and pan controls onto a Camera2D.

Zoom in shrinks the visible area, zoom out grows it; zoom in wins when both
are held. Only one pan direction applies per frame, checked in the order left,
right, up, down. Pan up moves the view centre toward negative y.
"""

from __future__ import annotations

from core.input import Control, InputState
from camera.camera import Camera2D
from config import CAMERA_PAN_SPEED, CAMERA_ZOOM_STEP

_PAN_ORDER = (
    (Control.PAN_LEFT, -1.0, 0.0),
    (Control.PAN_RIGHT, 1.0, 0.0),
    (Control.PAN_UP, 0.0, -1.0),
    (Control.PAN_DOWN, 0.0, 1.0),
)


class CameraController:
    def __init__(
        self,
        camera: Camera2D,
        *,
        zoom_step: float = CAMERA_ZOOM_STEP,
        pan_speed: float = CAMERA_PAN_SPEED,
    ) -> None:
        self.camera = camera
        self.zoom_step = float(zoom_step)
        self.pan_speed = float(pan_speed)

    def update(self, inputs: InputState) -> None:
        if inputs.is_held(Control.ZOOM_IN):
            self.camera.zoom_by(-self.zoom_step)
        elif inputs.is_held(Control.ZOOM_OUT):
            self.camera.zoom_by(self.zoom_step)

        for control, dx, dy in _PAN_ORDER:
            if inputs.is_held(control):
                self.camera.pan(dx * self.pan_speed, dy * self.pan_speed)
                break
