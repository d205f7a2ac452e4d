"""Animation clip lookup keyed by (direction, activity)."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Mapping

from core.errors import ConfigError
from player.animation import AnimationClip
from player.direction import Direction


class Activity(Enum):
    IDLE = "idle"
    WALK = "walk"
    ATTACK_ONE = "attack/one"
    ATTACK_TWO = "attack/two"

    @property
    def is_attack(self) -> bool:
        return self in (Activity.ATTACK_ONE, Activity.ATTACK_TWO)


class ClipTable:
    """Read-only mapping (Direction, Activity) -> AnimationClip.

    Construction fails unless every direction has every activity.
    """

    def __init__(self, clips: Mapping[tuple[Direction, Activity], AnimationClip]) -> None:
        missing = [
            f"{d.name.lower()}/{a.value}"
            for d in Direction
            for a in Activity
            if (d, a) not in clips
        ]
        if missing:
            raise ConfigError(f"clip table missing: {', '.join(missing)}")
        self._clips = dict(clips)

    def __getitem__(self, key: tuple[Direction, Activity]) -> AnimationClip:
        return self._clips[key]

    def get(self, direction: Direction, activity: Activity) -> AnimationClip:
        return self._clips[(direction, activity)]

    def __len__(self) -> int:
        return len(self._clips)

    def __iter__(self) -> Iterator[tuple[Direction, Activity]]:
        return iter(self._clips)
