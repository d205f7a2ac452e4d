"""Player states and the per-frame transition table.

`transition()` is pure: it takes the current state plus this frame's decoded
input and returns the next state together with the side effects the controller
must apply (a movement step, a clip restart). Rendering and assets are not
involved, so the combo window can be exercised in isolation.

Priority per frame:

1. attacking   -> finish / upgrade to stage 2 / keep swinging; never moves
2. attack key  -> Attacking(1), facing any held direction, no step
3. movement    -> Walking(dir), one step along dir
4. otherwise   -> Idle(facing)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from core.input import Control, InputState
from player.clips import Activity
from player.direction import Direction


@dataclass(frozen=True)
class Idle:
    direction: Direction

    @property
    def activity(self) -> Activity:
        return Activity.IDLE


@dataclass(frozen=True)
class Walking:
    direction: Direction

    @property
    def activity(self) -> Activity:
        return Activity.WALK


@dataclass(frozen=True)
class Attacking:
    stage: int
    elapsed: float = 0.0  # time since this stage started

    def __post_init__(self) -> None:
        if self.stage not in (1, 2):
            raise ValueError(f"attack stage must be 1 or 2, got {self.stage}")

    @property
    def activity(self) -> Activity:
        return Activity.ATTACK_ONE if self.stage == 1 else Activity.ATTACK_TWO


PlayerState = Union[Idle, Walking, Attacking]


@dataclass(frozen=True)
class Transition:
    state: PlayerState
    facing: Direction
    step: Optional[Direction] = None  # move one speed unit along this direction
    reset_clip: bool = False


# Vertical before horizontal; the first held control wins.
_MOVE_PRIORITY = (
    (Control.MOVE_UP, Direction.UP),
    (Control.MOVE_DOWN, Direction.DOWN),
    (Control.MOVE_LEFT, Direction.LEFT),
    (Control.MOVE_RIGHT, Direction.RIGHT),
)


def movement_direction(inputs: InputState) -> Optional[Direction]:
    for control, direction in _MOVE_PRIORITY:
        if inputs.is_held(control):
            return direction
    return None


def transition(
    state: PlayerState,
    facing: Direction,
    direction: Optional[Direction],
    attack_pressed: bool,
    clip_finished: bool,
    dt: float,
    combo_window: float,
) -> Transition:
    """Compute the next state.

    Args:
        state: current state
        facing: last facing direction
        direction: movement decoded for this frame (None = no movement held)
        attack_pressed: attack control went down this frame
        clip_finished: the active clip's one-shot playback is over at the
            current clip time (only meaningful while attacking)
        dt: frame time in seconds
        combo_window: seconds after the first swing that accept a follow-up
    """
    if isinstance(state, Attacking):
        elapsed = state.elapsed + dt
        if clip_finished:
            if state.stage == 1 and elapsed > combo_window:
                return Transition(Idle(facing), facing)
            if state.stage == 2:
                return Transition(Idle(facing), facing)
        if state.stage == 1 and attack_pressed and elapsed <= combo_window:
            return Transition(Attacking(2, 0.0), facing, reset_clip=True)
        return Transition(Attacking(state.stage, elapsed), facing)

    if attack_pressed:
        # A held direction still turns the player, but the swing skips the step.
        turned = direction or facing
        return Transition(Attacking(1, 0.0), turned, reset_clip=True)

    if direction is not None:
        return Transition(Walking(direction), direction, step=direction)

    return Transition(Idle(facing), facing)
