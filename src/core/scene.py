from typing import List, Callable, Optional
from dataclasses import dataclass, field

from core.input import InputState

UpdateFn = Callable[[float, InputState], None]


@dataclass
class Scene:
    # Camera is optional so non-world scenes (e.g., a menu) don't need one
    camera: Optional[object] = None
    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float, inputs: InputState) -> None:
        for fn in self.updaters:
            fn(dt, inputs)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    # Scenes own their full render pipeline (projection, batches, etc.)
    def render(self) -> None:  # pragma: no cover - visual
        pass
