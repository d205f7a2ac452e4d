from .camera import Camera2D
from .cameracontroller import CameraController

__all__ = [
    "Camera2D",
    "CameraController",
]
