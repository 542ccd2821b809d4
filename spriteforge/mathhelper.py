"""Angle helpers, a small 2D vector and point-in-polygon tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, Sequence


class _Point(Protocol):
    x: float
    y: float


def degree_to_radian(deg: float) -> float:
    return deg * (math.pi / 180.0)


def radian_to_degree(rad: float) -> float:
    return rad * (180.0 / math.pi)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Limit value to the closed range [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


@dataclass(slots=True)
class Vector2F:
    """A plain 2D vector with arithmetic operators."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2F) -> Vector2F:
        return Vector2F(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2F) -> Vector2F:
        return Vector2F(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2F:
        return Vector2F(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2F:
        return Vector2F(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> float:
        """Scale to unit length in place and return the previous length."""
        length = self.length()
        if length > 0.0:
            inv = 1.0 / length
            self.x *= inv
            self.y *= inv
        return length

    def cross(self, other: Vector2F) -> float:
        return self.x * other.y - self.y * other.x


def is_left(p0: _Point, p1: _Point, p2: _Point) -> int:
    """Positive if p2 is left of the line p0->p1, zero if on it, negative if right."""
    return int((p1.x - p0.x) * (p2.y - p0.y) - (p2.x - p0.x) * (p1.y - p0.y))


def _edges(vertices: Sequence[_Point], n: int):
    return zip(vertices[:n], vertices[1 : n + 1])


def cn_pn_poly(point: _Point, vertices: Sequence[_Point], n: int) -> int:
    """Crossing-number test: 1 if point is inside the polygon, else 0.

    ``vertices`` holds n + 1 points with the last equal to the first.
    """
    crossings = 0
    for start, end in _edges(vertices, n):
        upward = start.y <= point.y < end.y
        downward = end.y <= point.y < start.y
        if upward or downward:
            vt = (point.y - start.y) / (end.y - start.y)
            if point.x < start.x + vt * (end.x - start.x):
                crossings += 1
    return crossings & 1


def wn_pn_poly(point: _Point, vertices: Sequence[_Point], n: int) -> int:
    """Winding-number test: zero only when point is outside the polygon.

    ``vertices`` holds n + 1 points with the last equal to the first.
    """
    winding = 0
    for start, end in _edges(vertices, n):
        if start.y <= point.y:
            if end.y > point.y and is_left(start, end, point) > 0:
                winding += 1
        elif end.y <= point.y and is_left(start, end, point) < 0:
            winding -= 1
    return winding


@dataclass(frozen=True, order=True)
class Edge:
    """An undirected edge between two vertex indices, stored with a <= b."""

    a: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        if self.a > self.b:
            low, high = self.b, self.a
            object.__setattr__(self, "a", low)
            object.__setattr__(self, "b", high)


@dataclass(frozen=True)
class Triangle:
    """A triangle given by three vertex indices."""

    a: int = 0
    b: int = 0
    c: int = 0


def is_circum(cur: Triangle, i: int, points: Sequence[Vector2F]) -> bool:
    """True if points[i] lies on or inside the circumcircle of cur."""
    pa, pb, pc, pd = points[cur.a], points[cur.b], points[cur.c], points[i]
    ccw = (pb - pa).cross(pc - pa)

    adx, ady = pa.x - pd.x, pa.y - pd.y
    bdx, bdy = pb.x - pd.x, pb.y - pd.y
    cdx, cdy = pc.x - pd.x, pc.y - pd.y

    alift = adx * adx + ady * ady
    blift = bdx * bdx + bdy * bdy
    clift = cdx * cdx + cdy * cdy

    det = (
        alift * (bdx * cdy - cdx * bdy)
        + blift * (cdx * ady - adx * cdy)
        + clift * (adx * bdy - bdx * ady)
    )
    if ccw > 0:
        return det >= 0
    return det <= 0