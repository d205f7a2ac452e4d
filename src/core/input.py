"""Per-frame input snapshot.

The scene and the player never poll the keyboard themselves; the engine builds
one `InputState` per frame from pygame's key state and event queue and passes it
down. Tests build snapshots directly with `InputState.of(...)`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Mapping, Optional

import pygame


class Control(Enum):
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    ATTACK = auto()
    REGENERATE = auto()
    ZOOM_IN = auto()
    ZOOM_OUT = auto()
    PAN_UP = auto()
    PAN_DOWN = auto()
    PAN_LEFT = auto()
    PAN_RIGHT = auto()


DEFAULT_BINDINGS: dict[int, Control] = {
    pygame.K_w: Control.MOVE_UP,
    pygame.K_s: Control.MOVE_DOWN,
    pygame.K_a: Control.MOVE_LEFT,
    pygame.K_d: Control.MOVE_RIGHT,
    pygame.K_x: Control.ATTACK,
    pygame.K_g: Control.REGENERATE,
    pygame.K_q: Control.ZOOM_IN,
    pygame.K_e: Control.ZOOM_OUT,
    pygame.K_UP: Control.PAN_UP,
    pygame.K_DOWN: Control.PAN_DOWN,
    pygame.K_LEFT: Control.PAN_LEFT,
    pygame.K_RIGHT: Control.PAN_RIGHT,
}


@dataclass(frozen=True)
class InputState:
    """Controls currently held, and controls pressed during this frame."""

    held: frozenset[Control] = field(default_factory=frozenset)
    pressed: frozenset[Control] = field(default_factory=frozenset)

    @classmethod
    def of(
        cls,
        held: Iterable[Control] = (),
        pressed: Iterable[Control] = (),
    ) -> "InputState":
        return cls(frozenset(held), frozenset(pressed))

    def is_held(self, control: Control) -> bool:
        return control in self.held

    def was_pressed(self, control: Control) -> bool:
        return control in self.pressed


NO_INPUT = InputState()


class KeyboardInput:
    """Translate pygame key state + KEYDOWN events into an `InputState`."""

    def __init__(self, bindings: Optional[Mapping[int, Control]] = None) -> None:
        self.bindings = dict(bindings if bindings is not None else DEFAULT_BINDINGS)

    def snapshot(self, key_state, events: Iterable[pygame.event.Event]) -> InputState:
        """Build the frame snapshot.

        key_state: anything indexable by pygame key code (pygame.key.get_pressed()
            or a plain mapping in tests)
        events: this frame's events; only KEYDOWN events count as presses
        """
        held = {ctrl for key, ctrl in self.bindings.items() if key_state[key]}
        pressed = {
            self.bindings[ev.key]
            for ev in events
            if ev.type == pygame.KEYDOWN and ev.key in self.bindings
        }
        return InputState(frozenset(held), frozenset(pressed))

    def poll(self, events: Iterable[pygame.event.Event]) -> InputState:  # pragma: no cover - needs display
        return self.snapshot(pygame.key.get_pressed(), events)
