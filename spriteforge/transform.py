"""Position, rotation and scale of a game object, with a parent/child hierarchy."""

from __future__ import annotations

import math
from enum import Enum, auto

from .component import Component
from .mathhelper import degree_to_radian
from .matrix import Matrix3x2, decompose_matrix, remove_pivot
from .vector2 import Vector2


class PivotPreset(Enum):
    """Named pivot positions relative to the sprite size."""

    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()
    CENTER = auto()


class Transform(Component):
    """Local placement of an object and the matrices derived from it."""

    def __init__(self) -> None:
        super().__init__()
        self._dirty = False
        self._position = Vector2(0.0, 0.0)
        self._rotation = 0.0
        self._scale = Vector2(1.0, 1.0)
        self._parent: Transform | None = None
        self._children: list[Transform] = []
        self._local = Matrix3x2.identity()
        self._world = Matrix3x2.identity()
        self._pivot = Vector2(0.0, 0.0)
        self._sprite_size = (0.0, 0.0)

    @property
    def position(self) -> Vector2:
        return Vector2(self._position.x, self._position.y)

    @position.setter
    def position(self, value: Vector2) -> None:
        self._position = Vector2(value.x, value.y)
        self._dirty = True

    @property
    def rotation(self) -> float:
        """Rotation in degrees."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = value
        self._dirty = True

    @property
    def scale(self) -> Vector2:
        return Vector2(self._scale.x, self._scale.y)

    @scale.setter
    def scale(self, value: Vector2) -> None:
        self._scale = Vector2(value.x, value.y)
        self._dirty = True

    @property
    def pivot(self) -> Vector2:
        return Vector2(self._pivot.x, self._pivot.y)

    @property
    def sprite_size(self) -> tuple[float, float]:
        return self._sprite_size

    @property
    def parent(self) -> Transform | None:
        return self._parent

    @property
    def children(self) -> tuple[Transform, ...]:
        return tuple(self._children)

    @property
    def forward(self) -> Vector2:
        """Unit vector pointing along the current rotation."""
        rad = degree_to_radian(self._rotation)
        return Vector2(math.cos(rad), math.sin(rad))

    def translate(self, x: Vector2 | float, y: float | None = None) -> None:
        """Move by a vector, or by x and y."""
        if y is None:
            dx, dy = x.x, x.y  # type: ignore[union-attr]
        else:
            dx, dy = x, y
        self._position = Vector2(self._position.x + dx, self._position.y + dy)
        self._set_dirty()

    def rotate(self, degree: float) -> None:
        self._rotation += degree
        self._set_dirty()

    def set_parent(self, parent: Transform) -> None:
        """Attach under parent, keeping the current world placement."""
        if parent is self:
            raise ValueError("a transform cannot be its own parent")
        if self._parent is not None:
            raise RuntimeError("transform already has a parent; detach it first")
        self._parent = parent
        parent.add_child(self)
        self._set_dirty()

    def detach_children(self) -> None:
        """Detach this transform from its parent, keeping the world placement."""
        if self._parent is None:
            return
        self._parent.remove_child(self)
        self._parent = None
        self._set_dirty()

    def local_matrix(self) -> Matrix3x2:
        if self._dirty:
            self._update_matrices()
        return self._local

    def world_matrix(self) -> Matrix3x2:
        if self._dirty:
            self._update_matrices()
        return self._world

    def inverse_world_matrix(self) -> Matrix3x2:
        return self.world_matrix().inverted()

    def set_pivot_preset(self, preset: PivotPreset) -> None:
        width, height = self._sprite_size
        pivots = {
            PivotPreset.TOP_LEFT: Vector2(0.0, 0.0),
            PivotPreset.TOP_RIGHT: Vector2(width, 0.0),
            PivotPreset.BOTTOM_LEFT: Vector2(0.0, -height),
            PivotPreset.BOTTOM_RIGHT: Vector2(width, -height),
            PivotPreset.CENTER: Vector2(width * 0.5, -(height * 0.5)),
        }
        self._pivot = pivots[preset]

    def set_sprite_size(self, width: float, height: float) -> None:
        self._sprite_size = (width, height)
        self._set_dirty()

    def add_child(self, child: Transform) -> None:
        """Adopt child, re-expressing its local placement in this transform's space."""
        local = child.local_matrix() @ self.inverse_world_matrix()
        child._adopt(remove_pivot(local, child._pivot))
        self._children.append(child)

    def remove_child(self, child: Transform) -> None:
        """Release child, re-expressing its local placement in world space."""
        local = child.local_matrix() @ self.world_matrix()
        child._adopt(remove_pivot(local, child._pivot))
        self._children = [c for c in self._children if c is not child]

    def _adopt(self, matrix: Matrix3x2) -> None:
        self._position, self._rotation, self._scale = decompose_matrix(matrix)

    def _set_dirty(self) -> None:
        self._dirty = True
        for child in self._children:
            child._set_dirty()

    def _update_matrices(self) -> None:
        pivot = self._pivot
        self._local = (
            Matrix3x2.translation(-pivot.x, -pivot.y)
            @ Matrix3x2.scaling(self._scale.x, self._scale.y)
            @ Matrix3x2.rotation(self._rotation)
            @ Matrix3x2.translation(pivot.x, pivot.y)
            @ Matrix3x2.translation(self._position.x, self._position.y)
        )
        if self._parent is not None:
            self._world = self._local @ self._parent.world_matrix()
        else:
            self._world = self._local
        self._dirty = False