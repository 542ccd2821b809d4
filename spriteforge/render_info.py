"""Plain records describing what to draw and collider shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .matrix import Matrix3x2


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle given by its edges."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def width(self) -> float:
        return self.right - self.left

    def height(self) -> float:
        return self.bottom - self.top


@dataclass(slots=True)
class RenderInfo:
    """Everything needed to draw one sprite."""

    bitmap: Any = None
    dest_rect: Rect = field(default_factory=Rect)
    src_rect: Rect = field(default_factory=Rect)
    is_flip: bool = False
    world_tm: Matrix3x2 = field(default_factory=Matrix3x2.identity)


class ColliderType(IntEnum):
    RECT = 1
    CIRCLE = 2


@dataclass(slots=True)
class RectInfo:
    """Debug-draw data for a box collider."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    world_tm: Matrix3x2 = field(default_factory=Matrix3x2.identity)
    type: ColliderType = ColliderType.RECT


@dataclass(slots=True)
class CircleInfo:
    """Debug-draw data for a circle collider."""

    radius: float = 0.0
    world_tm: Matrix3x2 = field(default_factory=Matrix3x2.identity)
    type: ColliderType = ColliderType.CIRCLE