"""Shared fixtures: fake frames, clip tables and a recording sprite batch.

Nothing here needs a GL context; frames are plain handles with made-up
texture ids.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from player.animation import AnimationClip
from player.clips import Activity, ClipTable
from player.direction import Direction
from textures.frame import Frame
from world.tiles import TerrainTextures, TileCode


class RecordingBatch:
    """SpriteSink that remembers every draw call in submission order."""

    def __init__(self) -> None:
        self.calls: list[tuple[Frame, float, float, float, float]] = []
        self.begun = 0
        self.ended = 0

    def begin(self, camera: Any) -> None:
        self.begun += 1

    def draw(self, frame: Frame, x: float, y: float, width: float, height: float) -> None:
        self.calls.append((frame, x, y, width, height))

    def end(self) -> None:
        self.ended += 1

    @property
    def frames(self) -> list[Frame]:
        return [c[0] for c in self.calls]


GROUND_A = Frame(texture=1, width=64, height=64, name="grass_1")
GROUND_B = Frame(texture=2, width=64, height=64, name="grass_2")
GROUND_C = Frame(texture=3, width=64, height=64, name="grass_3")
TREE_A = Frame(texture=4, width=64, height=94, name="tree-1")
TREE_B = Frame(texture=5, width=64, height=94, name="tree-2")
STUMP = Frame(texture=6, width=64, height=32, name="tronco")


def make_clip_table(
    frame_count: int = 4,
    frame_duration: float = 0.125,
    size: tuple[int, int] = (32, 48),
) -> ClipTable:
    clips = {}
    tex = 100
    for direction in Direction:
        for activity in Activity:
            frames = []
            for i in range(frame_count):
                frames.append(
                    Frame(
                        texture=tex,
                        width=size[0],
                        height=size[1],
                        name=f"{direction.name.lower()}/{activity.value}/{i}",
                    )
                )
                tex += 1
            clips[(direction, activity)] = AnimationClip(
                frames, frame_duration, loop=not activity.is_attack
            )
    return ClipTable(clips)


@pytest.fixture
def batch() -> RecordingBatch:
    return RecordingBatch()


@pytest.fixture
def terrain_textures() -> TerrainTextures:
    return TerrainTextures(
        ground={
            TileCode.GROUND_A: GROUND_A,
            TileCode.GROUND_B: GROUND_B,
            TileCode.GROUND_C: GROUND_C,
        },
        props={
            TileCode.TREE_A: TREE_A,
            TileCode.TREE_B: TREE_B,
            TileCode.STUMP: STUMP,
        },
        prop_base=GROUND_A,
    )


@pytest.fixture
def clip_table() -> ClipTable:
    return make_clip_table()


@pytest.fixture
def clip_table_factory() -> Callable[..., ClipTable]:
    return make_clip_table
