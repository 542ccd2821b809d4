"""Collider components and their overlap tests."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .component import MonoBehaviour
from .transform import Transform
from .vector2 import Vector2

PIXELS_PER_METER = 50.0


class Collider(MonoBehaviour, ABC):
    """A shape attached to a game object that can overlap other colliders."""

    def __init__(self) -> None:
        super().__init__()
        self._transform: Transform | None = None
        self.offset = Vector2(0.0, 0.0)
        self.is_trigger = True

    def awake(self) -> None:
        self._transform = self.get_component(Transform)

    def center(self) -> Vector2:
        """Owner position plus the collider offset."""
        if self._transform is None:
            raise RuntimeError("collider has no transform; call awake() first")
        return self._transform.position + self.offset

    @abstractmethod
    def is_collide(self, other: Collider) -> bool:
        """True if this collider overlaps other."""


class CircleCollider(Collider):
    """A circle whose radius is given in meters."""

    def __init__(self) -> None:
        super().__init__()
        self.radius = 1.0

    def is_collide(self, other: Collider) -> bool:
        if isinstance(other, CircleCollider):
            a, b = self.center(), other.center()
            length = math.hypot(a.x - b.x, a.y - b.y)
            return (other.radius + self.radius) * PIXELS_PER_METER >= length
        # Shapes without a defined test never collide.
        return False


class BoxCollider(Collider):
    """An axis-aligned box; its overlap test always reports a hit."""

    def __init__(self) -> None:
        super().__init__()
        self.size = Vector2(1.0, 1.0)

    def is_collide(self, other: Collider) -> bool:
        return True