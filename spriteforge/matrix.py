"""Affine 3x2 matrices in row-vector convention and transform helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from .mathhelper import degree_to_radian, radian_to_degree
from .vector2 import Vector2


class _Point(Protocol):
    x: float
    y: float


class _Rect(Protocol):
    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True, slots=True)
class Matrix3x2:
    """A 2D affine transform; points are row vectors multiplied on the left."""

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m31: float = 0.0
    m32: float = 0.0

    @staticmethod
    def identity() -> Matrix3x2:
        return Matrix3x2()

    @staticmethod
    def translation(x: float, y: float) -> Matrix3x2:
        return Matrix3x2(1.0, 0.0, 0.0, 1.0, x, y)

    @staticmethod
    def scaling(sx: float, sy: float) -> Matrix3x2:
        return Matrix3x2(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @staticmethod
    def rotation(angle: float) -> Matrix3x2:
        """Rotation about the origin by ``angle`` degrees."""
        rad = degree_to_radian(angle)
        c, s = math.cos(rad), math.sin(rad)
        return Matrix3x2(c, s, -s, c, 0.0, 0.0)

    def __matmul__(self, other: Matrix3x2) -> Matrix3x2:
        if not isinstance(other, Matrix3x2):
            return NotImplemented
        return Matrix3x2(
            self.m11 * other.m11 + self.m12 * other.m21,
            self.m11 * other.m12 + self.m12 * other.m22,
            self.m21 * other.m11 + self.m22 * other.m21,
            self.m21 * other.m12 + self.m22 * other.m22,
            self.m31 * other.m11 + self.m32 * other.m21 + other.m31,
            self.m31 * other.m12 + self.m32 * other.m22 + other.m32,
        )

    @property
    def determinant(self) -> float:
        return self.m11 * self.m22 - self.m12 * self.m21

    def inverted(self) -> Matrix3x2:
        """Return the inverse; raise ValueError if the matrix is singular."""
        det = self.determinant
        if det == 0.0:
            raise ValueError("matrix is not invertible")
        i11 = self.m22 / det
        i12 = -self.m12 / det
        i21 = -self.m21 / det
        i22 = self.m11 / det
        return Matrix3x2(
            i11,
            i12,
            i21,
            i22,
            -(self.m31 * i11 + self.m32 * i21),
            -(self.m31 * i12 + self.m32 * i22),
        )

    def transform_point(self, x: float, y: float) -> Vector2:
        return Vector2(
            x * self.m11 + y * self.m21 + self.m31,
            x * self.m12 + y * self.m22 + self.m32,
        )


def make_translation_matrix(width: float, height: float) -> Matrix3x2:
    return Matrix3x2(1.0, 0.0, 0.0, 1.0, width, height)


def make_rotation_matrix_origin(angle: float) -> Matrix3x2:
    rad = degree_to_radian(angle)
    return Matrix3x2(math.cos(rad), math.sin(rad), -math.sin(rad), math.cos(rad), 0.0, 0.0)


def make_scale_matrix_origin(width: float, height: float) -> Matrix3x2:
    return Matrix3x2(width, 0.0, 0.0, height, 0.0, 0.0)


def make_rotation_matrix(angle: float, center: Vector2 | None = None) -> Matrix3x2:
    """Rotation by ``angle`` degrees about ``center``."""
    center = center if center is not None else Vector2()
    return (
        make_translation_matrix(-center.x, -center.y)
        @ make_rotation_matrix_origin(angle)
        @ make_translation_matrix(center.x, center.y)
    )


def make_scale_matrix(width: float, height: float, center: Vector2 | None = None) -> Matrix3x2:
    """Scaling by (width, height) about ``center``."""
    center = center if center is not None else Vector2()
    return (
        make_translation_matrix(-center.x, -center.y)
        @ make_scale_matrix_origin(width, height)
        @ make_translation_matrix(center.x, center.y)
    )


def make_render_matrix(
    unity_coords: bool = False,
    mirror: bool = False,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
) -> Matrix3x2:
    """Matrix that flips an image for y-up coordinates and/or horizontal mirroring."""
    scale_y = -1.0 if unity_coords else 1.0
    scale_x = -1.0 if mirror else 1.0
    offset_x = offset_x if mirror else -offset_x
    offset_y = offset_y if unity_coords else -offset_y
    return Matrix3x2.scaling(scale_x, scale_y) @ Matrix3x2.translation(offset_x, offset_y)


def matrix_to_string(matrix: Matrix3x2) -> str:
    return (
        f"{matrix.m11:.2f}, {matrix.m12:.2f}\n"
        f"{matrix.m21:.2f}, {matrix.m22:.2f}\n"
        f"{matrix.m31:.2f}, {matrix.m32:.2f}\n"
    )


def decompose_matrix(matrix: Matrix3x2) -> tuple[Vector2, float, Vector2]:
    """Split into (translation, rotation in degrees, scale)."""
    translation = Vector2(matrix.m31, matrix.m32)
    scale = Vector2(math.hypot(matrix.m11, matrix.m12), math.hypot(matrix.m21, matrix.m22))
    rotation = radian_to_degree(math.atan2(matrix.m12, matrix.m11))
    return translation, rotation, scale


def remove_pivot(local: Matrix3x2, pivot: Vector2) -> Matrix3x2:
    """Undo the pivot offset baked into a local matrix."""
    to_origin = Matrix3x2.translation(-pivot.x, -pivot.y)
    back = Matrix3x2.translation(pivot.x, pivot.y)
    return back @ local @ to_origin


def is_point_in_rect(point: _Point, rect: _Rect) -> bool:
    """True if point lies inside rect, edges included; rect sides may be swapped."""
    left, right = sorted((rect.left, rect.right))
    top, bottom = sorted((rect.top, rect.bottom))
    return left <= point.x <= right and top <= point.y <= bottom