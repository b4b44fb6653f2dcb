import pytest

from openempires.vec2d import Vec2d


def test_default_is_origin():
    assert Vec2d() == Vec2d(0, 0)


def test_add_and_subtract_are_inverse():
    a, b = Vec2d(3, -7), Vec2d(11, 5)
    assert a + b - b == a
    assert a + b == b + a


def test_multiply_then_divide_round_trips():
    a = Vec2d(-9, 14)
    assert (a * 3) / 3 == a
    assert 3 * a == a * 3


def test_division_truncates_toward_zero():
    assert Vec2d(-7, 7) / 2 == Vec2d(-3, 3)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2d(1, 1) / 0


def test_negation_twice_is_identity():
    a = Vec2d(4, -2)
    assert -(-a) == a
    assert a + (-a) == Vec2d()


def test_in_place_operators_rebind():
    a = Vec2d(2, 3)
    original = a
    a += Vec2d(1, 1)
    assert a == Vec2d(3, 4)
    a -= Vec2d(2, 1)
    assert a == Vec2d(1, 3)
    a *= 4
    assert a == Vec2d(4, 12)
    a /= 4
    assert a == Vec2d(1, 3)
    assert original == Vec2d(2, 3)


def test_dot_with_self_is_length_squared():
    a = Vec2d(6, -8)
    assert a.dot(a) == a.length_squared()


def test_dot_of_perpendicular_vectors_is_zero():
    assert Vec2d(2, 5).dot(Vec2d(-5, 2)) == 0


def test_ordering_is_lexicographic():
    assert Vec2d(1, 9) < Vec2d(2, 0)
    assert Vec2d(1, 1) < Vec2d(1, 2)
    assert sorted([Vec2d(2, 0), Vec2d(1, 9)]) == [Vec2d(1, 9), Vec2d(2, 0)]


def test_unpacking_and_str():
    x, y = Vec2d(1, 2)
    assert (x, y) == (1, 2)
    assert str(Vec2d(1, 2)) == "(1, 2)"


def test_hashable_and_equal_values_share_hash():
    points = {Vec2d(1, 2), Vec2d(1, 2), Vec2d(2, 1)}
    assert len(points) == 2


def test_is_immutable():
    a = Vec2d(1, 2)
    with pytest.raises(AttributeError):
        a.x = 5
    assert a.x == 1
    assert a == Vec2d(1, 2)