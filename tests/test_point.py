import math

import pytest

from towerdefense.point import Point


def test_default_is_origin():
    assert Point() == Point(0, 0)


def test_equality_and_inequality():
    assert Point(1.5, -2.0) == Point(1.5, -2.0)
    assert not (Point(1.5, -2.0) != Point(1.5, -2.0))
    assert Point(1.5, -2.0) != Point(-2.0, 1.5)


def test_add_then_subtract_round_trip():
    a = Point(3.25, -7.5)
    b = Point(-1.0, 4.0)
    assert (a + b) - b == a


def test_subtract_self_is_zero():
    a = Point(9.0, -3.0)
    assert a - a == Point()


def test_scalar_multiplication_commutes():
    p = Point(2.0, -5.0)
    assert 3 * p == p * 3


def test_multiply_then_divide_round_trip():
    p = Point(6.0, -10.0)
    assert (p * 4) / 4 == p


def test_operations_return_new_points():
    p = Point(1.0, 2.0)
    _ = p + Point(1.0, 1.0)
    _ = p * 2
    assert p == Point(1.0, 2.0)


def test_magnitude_of_three_four():
    assert Point(3, 4).magnitude() == pytest.approx(5.0)


def test_magnitude_squared_matches_magnitude():
    p = Point(-2.5, 7.0)
    assert p.magnitude() ** 2 == pytest.approx(p.magnitude_squared())


def test_dot_with_self_is_magnitude_squared():
    p = Point(1.5, -4.0)
    assert p.dot(p) == pytest.approx(p.magnitude_squared())


def test_dot_of_perpendicular_vectors_is_zero():
    assert Point(2.0, 0.0).dot(Point(0.0, 9.0)) == 0


@pytest.mark.parametrize("p", [Point(3, 4), Point(-1, 0), Point(0.001, -20)])
def test_normalize_has_unit_length(p):
    assert p.normalize().magnitude() == pytest.approx(1.0)


def test_normalize_keeps_direction():
    p = Point(3, 4)
    n = p.normalize()
    assert math.atan2(n.y, n.x) == pytest.approx(math.atan2(p.y, p.x))


def test_normalize_zero_vector_is_zero():
    assert Point(0, 0).normalize() == Point()


def test_adding_non_point_raises():
    with pytest.raises(TypeError):
        Point(1, 2) + 3