"""Validated game tunables.

`config.py` holds the defaults as plain constants; `GameSettings` gathers them
into one immutable object that is checked once, at construction, so a bad value
fails before the first frame instead of in the middle of one.

A JSON file may override any subset of the fields::

    {"tile_width": 32, "terrain_weights": {"GROUND_A": 70, ...}}
"""

from __future__ import annotations

import json
import logging
import numbers
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Optional

import config
from core.errors import ConfigError
from world.tiles import TerrainWeights

logger = logging.getLogger(__name__)

_INT_FIELDS = ("tile_width", "tile_height", "map_size_min", "map_size_max", "frame_count")
_REAL_FIELDS = (
    "prop_lift_ratio",
    "tree_extra_height",
    "stump_height_ratio",
    "player_speed",
    "frame_duration",
    "combo_window",
    "sprite_scale",
    "sprite_baseline_offset",
)


def _check_type(name: str, value: Any, kind: type, label: str) -> None:
    # bool is an int subclass but never a valid tunable
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ConfigError(f"{name} must be {label}, got {value!r}")


def _default_weights() -> TerrainWeights:
    return TerrainWeights.from_names(config.TERRAIN_WEIGHTS)


@dataclass(frozen=True)
class GameSettings:
    tile_width: int = config.TILE_WIDTH
    tile_height: int = config.TILE_HEIGHT
    map_size_min: int = config.MAP_SIZE_MIN
    map_size_max: int = config.MAP_SIZE_MAX
    map_seed: Optional[int] = config.MAP_SEED
    terrain_weights: TerrainWeights = field(default_factory=_default_weights)
    prop_lift_ratio: float = config.PROP_LIFT_RATIO
    tree_extra_height: float = config.TREE_EXTRA_HEIGHT
    stump_height_ratio: float = config.STUMP_HEIGHT_RATIO
    player_speed: float = config.PLAYER_SPEED
    frame_duration: float = config.FRAME_DURATION
    frame_count: int = config.FRAME_COUNT
    combo_window: float = config.COMBO_WINDOW
    sprite_scale: float = config.SPRITE_SCALE
    sprite_baseline_offset: float = config.SPRITE_BASELINE_OFFSET

    def __post_init__(self) -> None:
        for name in _INT_FIELDS:
            _check_type(name, getattr(self, name), numbers.Integral, "an integer")
        for name in _REAL_FIELDS:
            _check_type(name, getattr(self, name), numbers.Real, "a number")
        if self.map_seed is not None:
            _check_type("map_seed", self.map_seed, numbers.Integral, "an integer or null")
        if self.tile_width <= 0 or self.tile_height <= 0:
            raise ConfigError(
                f"tile size must be positive, got {self.tile_width}x{self.tile_height}"
            )
        if self.map_size_min < 1:
            raise ConfigError(f"map_size_min must be >= 1, got {self.map_size_min}")
        if self.map_size_max <= self.map_size_min:
            raise ConfigError(
                f"map_size_max ({self.map_size_max}) must exceed "
                f"map_size_min ({self.map_size_min})"
            )
        if not isinstance(self.terrain_weights, TerrainWeights):
            raise ConfigError("terrain_weights must be a TerrainWeights instance")
        for name in ("player_speed", "frame_duration", "sprite_scale"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.frame_count < 1:
            raise ConfigError(f"frame_count must be >= 1, got {self.frame_count}")
        if self.combo_window < 0:
            raise ConfigError(f"combo_window must be >= 0, got {self.combo_window}")
        if self.prop_lift_ratio < 0 or self.stump_height_ratio <= 0:
            raise ConfigError("prop_lift_ratio and stump_height_ratio out of range")

    @property
    def map_size_range(self) -> tuple[int, int]:
        return self.map_size_min, self.map_size_max

    def with_overrides(self, overrides: dict[str, Any]) -> "GameSettings":
        """Return a copy with `overrides` applied (keys are field names)."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"unknown settings: {', '.join(unknown)}")
        values = dict(overrides)
        weights = values.get("terrain_weights")
        if isinstance(weights, dict):
            values["terrain_weights"] = TerrainWeights.from_names(weights)
        return replace(self, **values)

    @classmethod
    def from_json(cls, path: str | Path) -> "GameSettings":
        """Load overrides from a JSON object file on top of the defaults."""
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"settings file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"settings file {path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"settings file {path} must hold a JSON object")
        settings = cls().with_overrides(data)
        logger.info("Loaded settings overrides from %s: %s", path, sorted(data))
        return settings
