"""Drawable frame handle shared by terrain tables and animation clips.

Kept free of GL imports so generation, animation and the player state machine
can be exercised without a rendering context.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Frame:
    texture: int  # GL texture id (0 = none)
    width: int
    height: int
    name: str = ""

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height
