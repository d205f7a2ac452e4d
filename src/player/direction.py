from __future__ import annotations

import math
from enum import Enum


class Direction(Enum):
    # y-up world vectors
    UP = (0.0, 1.0)
    DOWN = (0.0, -1.0)
    LEFT = (-1.0, 0.0)
    RIGHT = (1.0, 0.0)

    def unit(self) -> tuple[float, float]:
        """Normalized direction vector."""
        x, y = self.value
        length = math.hypot(x, y)
        return x / length, y / length
