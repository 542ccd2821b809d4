import math

import pytest

from spriteforge.mathhelper import (
    Edge,
    Triangle,
    Vector2F,
    clamp,
    cn_pn_poly,
    degree_to_radian,
    is_circum,
    is_left,
    radian_to_degree,
    wn_pn_poly,
)

SQUARE = [
    Vector2F(0.0, 0.0),
    Vector2F(10.0, 0.0),
    Vector2F(10.0, 10.0),
    Vector2F(0.0, 10.0),
    Vector2F(0.0, 0.0),
]


def test_degree_to_radian_half_turn():
    assert degree_to_radian(180.0) == pytest.approx(math.pi)


@pytest.mark.parametrize("deg", [0.0, 45.0, -90.0, 270.0])
def test_angle_round_trip(deg):
    assert radian_to_degree(degree_to_radian(deg)) == pytest.approx(deg)


@pytest.mark.parametrize(
    "value, low, high, expected",
    [(5.0, 0.0, 10.0, 5.0), (-1.0, 0.0, 10.0, 0.0), (11.0, 0.0, 10.0, 10.0)],
)
def test_clamp(value, low, high, expected):
    assert clamp(value, low, high) == expected


def test_vector2f_add_sub_round_trip():
    a = Vector2F(1.0, 2.0)
    b = Vector2F(-3.5, 0.25)
    assert (a + b) - b == a


def test_vector2f_mul_div_round_trip():
    v = Vector2F(3.0, -6.0)
    assert (v * 4.0) / 4.0 == v


def test_vector2f_length():
    v = Vector2F(3.0, 4.0)
    assert v.length() == pytest.approx(5.0)
    assert v.length_squared() == pytest.approx(v.length() ** 2)


def test_vector2f_normalize_returns_old_length():
    v = Vector2F(6.0, -8.0)
    old = v.length()
    assert v.normalize() == pytest.approx(old)
    assert v.length() == pytest.approx(1.0)


def test_vector2f_normalize_zero():
    v = Vector2F()
    assert v.normalize() == 0.0
    assert v == Vector2F(0.0, 0.0)


def test_cross_is_antisymmetric():
    a = Vector2F(2.0, 7.0)
    b = Vector2F(-1.0, 3.0)
    assert a.cross(b) == -b.cross(a)
    assert a.cross(a) == 0.0


def test_is_left_sign():
    p0 = Vector2F(0.0, 0.0)
    p1 = Vector2F(0.0, 10.0)
    assert is_left(p0, p1, Vector2F(-5.0, 5.0)) > 0
    assert is_left(p0, p1, Vector2F(5.0, 5.0)) < 0
    assert is_left(p0, p1, Vector2F(0.0, 3.0)) == 0


def test_crossing_number_inside_and_outside():
    assert cn_pn_poly(Vector2F(5.0, 5.0), SQUARE, 4) == 1
    assert cn_pn_poly(Vector2F(15.0, 5.0), SQUARE, 4) == 0
    assert cn_pn_poly(Vector2F(5.0, -1.0), SQUARE, 4) == 0


def test_winding_number_inside_and_outside():
    inside = Vector2F(5.0, 5.0)
    assert wn_pn_poly(inside, SQUARE, 4) != 0
    assert wn_pn_poly(Vector2F(-3.0, 5.0), SQUARE, 4) == 0


def test_winding_number_flips_with_orientation():
    inside = Vector2F(5.0, 5.0)
    reversed_square = list(reversed(SQUARE))
    assert wn_pn_poly(inside, reversed_square, 4) == -wn_pn_poly(inside, SQUARE, 4)


def test_edge_is_normalised():
    e = Edge(5, 2)
    assert (e.a, e.b) == (2, 5)
    assert Edge(5, 2) == Edge(2, 5)


def test_edge_ordering():
    edges = sorted([Edge(3, 1), Edge(0, 4), Edge(1, 2)])
    assert edges == [Edge(0, 4), Edge(1, 2), Edge(1, 3)]


def test_triangle_equality():
    assert Triangle(0, 1, 2) == Triangle(0, 1, 2)
    assert Triangle(0, 1, 2) != Triangle(2, 1, 0)
    assert Triangle() == Triangle(0, 0, 0)


@pytest.mark.parametrize("tri", [Triangle(0, 1, 2), Triangle(0, 2, 1)])
def test_is_circum_either_orientation(tri):
    points = [
        Vector2F(0.0, 0.0),
        Vector2F(10.0, 0.0),
        Vector2F(0.0, 10.0),
        Vector2F(1.0, 1.0),
        Vector2F(100.0, 100.0),
    ]
    assert is_circum(tri, 3, points) is True
    assert is_circum(tri, 4, points) is False