"""Time-indexed frame sequences.

A clip holds no playback time of its own: callers pass the elapsed time they
track, so one clip can serve any number of concurrent playbacks.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from core.errors import ConfigError
from textures.frame import Frame


@dataclass(frozen=True)
class AnimationClip:
    frames: tuple[Frame, ...]
    frame_duration: float
    loop: bool = True

    def __init__(self, frames: Sequence[Frame], frame_duration: float, loop: bool = True) -> None:
        object.__setattr__(self, "frames", tuple(frames))
        object.__setattr__(self, "frame_duration", float(frame_duration))
        object.__setattr__(self, "loop", bool(loop))
        if not self.frames:
            raise ConfigError("animation clip needs at least one frame")
        if not self.frame_duration > 0:
            raise ConfigError(f"frame duration must be positive, got {frame_duration}")

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def total_duration(self) -> float:
        return self.frame_count * self.frame_duration

    def frame_index(self, elapsed: float, loop: Optional[bool] = None) -> int:
        if loop is None:
            loop = self.loop
        index = math.floor(elapsed / self.frame_duration)
        if loop:
            return index % self.frame_count
        return min(max(index, 0), self.frame_count - 1)

    def frame_at(self, elapsed: float, loop: Optional[bool] = None) -> Frame:
        return self.frames[self.frame_index(elapsed, loop)]

    def is_finished(self, elapsed: float) -> bool:
        """One-shot playback is over once every frame has had its full duration."""
        return math.floor(elapsed / self.frame_duration) >= self.frame_count
