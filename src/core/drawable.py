from typing import Protocol

from textures.frame import Frame


class SpriteSink(Protocol):
    """Anything that accepts sprite draw calls, in submission order."""

    def draw(
        self, frame: Frame, x: float, y: float, width: float, height: float
    ) -> None: ...  # noqa: D401


class Actor(Protocol):
    """What the world renderer needs from the player to interleave it."""

    @property
    def iso_x(self) -> float: ...  # noqa: D401

    @property
    def iso_y(self) -> float: ...  # noqa: D401

    def render(self, batch: SpriteSink) -> None: ...  # noqa: D401
