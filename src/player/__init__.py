"""Player package: re-export common symbols for simpler imports.

    from player import PlayerController, AnimationClip, Direction
"""

from .animation import AnimationClip
from .clips import Activity, ClipTable
from .direction import Direction
from .states import Idle, Walking, Attacking, Transition, transition, movement_direction
from .controller import PlayerController

__all__ = [
    "AnimationClip",
    "Activity",
    "ClipTable",
    "Direction",
    "Idle",
    "Walking",
    "Attacking",
    "Transition",
    "transition",
    "movement_direction",
    "PlayerController",
]
