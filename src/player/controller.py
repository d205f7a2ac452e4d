"""Player controller: owns position, facing, state and clip time.

Each frame `update()` decodes the input snapshot, asks `transition()` for the
next state and applies its side effects. `render()` draws the current clip
frame anchored to the tile under the player. Position is in projected (screen)
space, the same space the world renderer compares cell origins in.
"""

from __future__ import annotations

import logging
from typing import Optional

from pygame.math import Vector2

from core.drawable import SpriteSink
from core.input import Control, InputState
from player.animation import AnimationClip
from player.clips import ClipTable
from player.direction import Direction
from player.states import (
    Attacking,
    Idle,
    PlayerState,
    movement_direction,
    transition,
)

logger = logging.getLogger(__name__)


class PlayerController:
    def __init__(
        self,
        clips: ClipTable,
        *,
        tile_width: float,
        tile_height: float,
        speed: float = 2.0,
        combo_window: float = 0.4,
        sprite_scale: float = 1.5,
        baseline_offset: float = 25.0,
        position: Optional[tuple[float, float]] = None,
        facing: Direction = Direction.DOWN,
    ) -> None:
        self.clips = clips
        self.tile_width = float(tile_width)
        self.tile_height = float(tile_height)
        self.speed = float(speed)
        self.combo_window = float(combo_window)
        self.sprite_scale = float(sprite_scale)
        self.baseline_offset = float(baseline_offset)

        self._pos = Vector2(position or (0.0, 0.0))
        self._facing = facing
        self._state: PlayerState = Idle(facing)
        self._clip_elapsed = 0.0

    # ------------------------------------------------------------------
    @property
    def state(self) -> PlayerState:
        return self._state

    @property
    def facing(self) -> Direction:
        return self._facing

    @property
    def clip_elapsed(self) -> float:
        return self._clip_elapsed

    @property
    def position(self) -> Vector2:
        return Vector2(self._pos)

    @property
    def iso_x(self) -> float:
        return self._pos.x

    @property
    def iso_y(self) -> float:
        return self._pos.y

    @property
    def is_attacking(self) -> bool:
        return isinstance(self._state, Attacking)

    @property
    def current_clip(self) -> AnimationClip:
        return self.clips.get(self._facing, self._state.activity)

    # ------------------------------------------------------------------
    def update(self, dt: float, inputs: InputState) -> None:
        attacking = self.is_attacking
        clip_finished = attacking and self.current_clip.is_finished(self._clip_elapsed)

        result = transition(
            self._state,
            self._facing,
            None if attacking else movement_direction(inputs),
            inputs.was_pressed(Control.ATTACK),
            clip_finished,
            dt,
            self.combo_window,
        )

        if type(result.state) is not type(self._state) or (
            isinstance(result.state, Attacking) and result.reset_clip
        ):
            logger.debug("Player %s -> %s", self._state, result.state)

        self._state = result.state
        self._facing = result.facing

        if result.step is not None:
            ux, uy = result.step.unit()
            self._pos += Vector2(ux, uy) * self.speed

        if result.reset_clip:
            self._clip_elapsed = 0.0
        else:
            self._clip_elapsed += dt

    def render(self, batch: SpriteSink) -> None:
        # Attack clips play once, idle/walk loop.
        frame = self.current_clip.frame_at(self._clip_elapsed, loop=not self.is_attacking)

        sprite_w = frame.width * self.sprite_scale
        sprite_h = frame.height * self.sprite_scale

        draw_x = self._pos.x + (self.tile_width / 2.0) - (sprite_w / 2.0)
        draw_y = self._pos.y + self.tile_height - (sprite_h - self.baseline_offset)

        batch.draw(frame, draw_x, draw_y, sprite_w, sprite_h)
