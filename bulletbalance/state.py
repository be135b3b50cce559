"""The game state shared across updates."""

from __future__ import annotations

from dataclasses import dataclass, field

from .registry import Registry
from .spatial_hash import SpatialHash


@dataclass(kw_only=True)
class State:
    """Tick counter, entity registry and spatial hash of one running game."""

    spatial_hash: SpatialHash
    tick: int = 0
    registry: Registry = field(default_factory=Registry)