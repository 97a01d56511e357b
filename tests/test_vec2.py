import math

import pytest

from shapewars.vec2 import Vec2


def test_default_is_origin():
    v = Vec2()
    assert (v.x, v.y) == (0.0, 0.0)


def test_add_then_sub_round_trip():
    a = Vec2(1.5, -2.25)
    b = Vec2(7.0, 3.5)
    assert (a + b) - b == a


def test_mul_then_div_round_trip():
    a = Vec2(3.0, -8.0)
    assert (a * 4) / 4 == a


def test_mul_equals_repeated_add():
    a = Vec2(1.25, 2.5)
    assert a * 3 == a + a + a
    assert 3 * a == a * 3


def test_eq_compares_components():
    assert Vec2(1, 2) == Vec2(1.0, 2.0)
    assert not (Vec2(1, 2) == Vec2(1, 3))


def test_ne_requires_both_components_to_differ():
    assert Vec2(1, 2) != Vec2(3, 4)
    assert not (Vec2(1, 2) != Vec2(1, 4))
    assert not (Vec2(1, 2) != Vec2(1, 2))


def test_iadd_mutates_in_place():
    a = Vec2(1, 1)
    original = a
    a += Vec2(2, 3)
    assert a is original
    assert a == Vec2(1, 1) + Vec2(2, 3)


def test_isub_mutates_in_place():
    a = Vec2(5, 5)
    original = a
    a -= Vec2(2, 3)
    assert a is original
    assert a == Vec2(5, 5) - Vec2(2, 3)


def test_imul_and_itruediv_are_componentwise_inverses():
    a = Vec2(6.0, -9.0)
    scale = Vec2(2.0, 4.0)
    a *= scale
    a /= scale
    assert a == Vec2(6.0, -9.0)


def test_itruediv_by_zero_component_raises():
    a = Vec2(1.0, 1.0)
    with pytest.raises(ZeroDivisionError):
        a /= Vec2(0.0, 1.0)


def test_dist_of_3_4_vector():
    assert Vec2(3, 4).dist() == pytest.approx(5.0)


def test_dist_no_sqrt_is_square_of_dist():
    v = Vec2(-2.5, 7.25)
    assert v.dist_no_sqrt() == pytest.approx(v.dist() ** 2)


def test_from_angle_zero_points_along_x():
    v = Vec2.from_angle(0)
    assert v == Vec2(1.0, 0.0)


@pytest.mark.parametrize("degrees", [0, 45, 90, 135, 180, 270, 315])
def test_from_angle_is_unit_length(degrees):
    assert Vec2.from_angle(degrees).dist() == pytest.approx(1.0)


def test_from_angle_matches_trigonometry():
    v = Vec2.from_angle(30)
    assert v.x == pytest.approx(math.cos(math.pi / 6))
    assert v.y == pytest.approx(math.sin(math.pi / 6))


def test_copy_is_independent():
    a = Vec2(1, 2)
    b = a.copy()
    b += Vec2(1, 1)
    assert a == Vec2(1, 2)
    assert b == a + Vec2(1, 1)


def test_unpacking():
    x, y = Vec2(4, 9)
    assert (x, y) == (4.0, 9.0)