"""A mutable two-dimensional vector with the usual game-math helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(slots=True)
class Vector2:
    """A point or direction in 2D space."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

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

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other: Vector2) -> Vector2:
        """Multiply component-wise by another vector, in place."""
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x *= other.x
        self.y *= other.y
        return self

    def __itruediv__(self, other: Vector2) -> Vector2:
        """Divide component-wise by another vector, in place."""
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x /= other.x
        self.y /= other.y
        return self

    def scale(self, factor: float) -> Vector2:
        """Scale this vector in place and return it."""
        self.x *= factor
        self.y *= factor
        return self

    def normalize(self) -> Vector2:
        """Turn this vector into a unit vector in place; a zero vector is left alone."""
        length = math.hypot(self.x, self.y)
        if length != 0.0:
            self.x /= length
            self.y /= length
        return self

    def normalized(self) -> Vector2:
        """Return the unit vector in this direction, or a zero vector."""
        length = math.hypot(self.x, self.y)
        if length != 0.0:
            return Vector2(self.x / length, self.y / length)
        return Vector2(0.0, 0.0)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    @staticmethod
    def dot(lhs: Vector2, rhs: Vector2) -> float:
        return lhs.x * rhs.x + lhs.y * rhs.y

    @staticmethod
    def distance(a: Vector2, b: Vector2) -> float:
        return (a - b).magnitude()

    @staticmethod
    def lerp(a: Vector2, b: Vector2, t: float) -> Vector2:
        return Vector2(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


Vector2.zero = Vector2(0.0, 0.0)
Vector2.one = Vector2(1.0, 1.0)
Vector2.up = Vector2(0.0, 1.0)
Vector2.down = Vector2(0.0, -1.0)
Vector2.left = Vector2(-1.0, 0.0)
Vector2.right = Vector2(1.0, 0.0)