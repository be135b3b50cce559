"""A fixed-size spatial hash over entity positions."""

from __future__ import annotations

import math
from itertools import accumulate

from .components import Position, Vector2
from .registry import Entity, Registry

_UINT64_MASK = (1 << 64) - 1
_X_PRIME = 92837111
_Y_PRIME = 689287499


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


class SpatialHash:
    """Buckets entities by grid cell so that neighbours can be found quickly."""

    def __init__(self, spacing: float, max_objects: int) -> None:
        if spacing <= 0:
            raise ValueError("spacing must be positive")
        if max_objects < 1:
            raise ValueError("max_objects must be at least 1")
        self.spacing = float(spacing)
        self.max_objects = max_objects
        self.size = max_objects * 2
        self.cell_starts: list[int] = [0] * (self.size + 1)
        self.cell_entities: list[Entity | None] = [None] * max_objects

    def hash_coordinates(self, x: int, y: int) -> int:
        """Hash integer cell coordinates into a table index."""
        combined = _wrap_int32(x * _X_PRIME) ^ _wrap_int32(y * _Y_PRIME)
        return (combined & _UINT64_MASK) % self.size

    def int_coordinate(self, coord: float) -> int:
        """Return the cell index along one axis."""
        return math.floor(coord / self.spacing)

    def hash_position(self, position: Vector2) -> int:
        return self.hash_coordinates(
            self.int_coordinate(position.x),
            self.int_coordinate(position.y),
        )

    def create(self, registry: Registry) -> None:
        """Rebuild the table from every entity that has a position."""
        hashed = [
            (entity, self.hash_position(position.value))
            for entity, position in registry.view(Position)
        ]
        if len(hashed) > self.max_objects:
            raise ValueError(
                f"{len(hashed)} entities exceed the capacity of {self.max_objects}"
            )

        counts = [0] * self.size
        for _, cell in hashed:
            counts[cell] += 1
        self.cell_starts = [*accumulate(counts), len(hashed)]

        self.cell_entities = [None] * self.max_objects
        for entity, cell in hashed:
            self.cell_starts[cell] -= 1
            self.cell_entities[self.cell_starts[cell]] = entity

    def query(self, position: Vector2, distance: float) -> list[Entity]:
        """Return entities in every cell touched by the square around ``position``."""
        x0 = self.int_coordinate(position.x - distance)
        y0 = self.int_coordinate(position.y - distance)
        x1 = self.int_coordinate(position.x + distance)
        y1 = self.int_coordinate(position.y + distance)

        found: list[Entity] = []
        for x in range(x0, x1 + 1):
            for y in range(y0, y1 + 1):
                cell = self.hash_coordinates(x, y)
                start, end = self.cell_starts[cell], self.cell_starts[cell + 1]
                found.extend(self.cell_entities[start:end])
        return found