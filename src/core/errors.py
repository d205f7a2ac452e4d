"""Exceptions raised while building the world, the player or the asset tables.

Nothing in the per-frame path raises; every failure surfaces at construction.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base class for engine construction failures."""


class ConfigError(EngineError, ValueError):
    """A tunable, table or clip definition is malformed."""


class AssetError(EngineError):
    """An asset could not be found or decoded."""

    def __init__(self, path: str, reason: str = "not found") -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
