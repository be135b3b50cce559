"""Vector and colour types, and the components attached to entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Vector2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def distance_sqr(self, other: Vector2) -> float:
        """Return the squared distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    GRAY: ClassVar[Color]
    YELLOW: ClassVar[Color]
    RAYWHITE: ClassVar[Color]
    BLACK: ClassVar[Color]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


Color.GRAY = Color(130, 130, 130, 255)
Color.YELLOW = Color(253, 249, 0, 255)
Color.RAYWHITE = Color(245, 245, 245, 255)
Color.BLACK = Color(0, 0, 0, 255)


@dataclass(slots=True)
class Position:
    value: Vector2


@dataclass(slots=True)
class Velocity:
    value: Vector2


@dataclass(slots=True)
class Radius:
    value: float


@dataclass(slots=True)
class DrawColor:
    value: Color