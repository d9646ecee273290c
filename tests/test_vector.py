import math

import pytest

from cornellray.vector import Vector3, inverse_rotate_y, rotate_y


A = Vector3(1.0, 2.0, 3.0)
B = Vector3(-4.0, 0.5, 2.0)


def test_add_then_sub_round_trip():
    assert (A + B) - B == A


def test_add_is_commutative():
    assert A + B == B + A


def test_neg_sums_to_zero():
    assert A + (-A) == Vector3(0.0, 0.0, 0.0)


def test_add_componentwise_values():
    assert A + B == Vector3(-3.0, 2.5, 5.0)


def test_sub_equals_add_of_negation():
    assert A - B == A + (-B)
    assert A - B == Vector3(5.0, 1.5, 1.0)


def test_scale_by_one_and_minus_one():
    assert A.scale(1.0) == A
    assert A.scale(-1.0) == -A


def test_hadamard_with_ones_is_identity():
    assert A.hadamard(Vector3(1.0, 1.0, 1.0)) == A


def test_dot_with_self_is_length_squared():
    assert math.isclose(A.dot(A), A.length() ** 2)


def test_cross_is_orthogonal_to_inputs():
    c = A.cross(B)
    assert math.isclose(c.dot(A), 0.0, abs_tol=1e-12)
    assert math.isclose(c.dot(B), 0.0, abs_tol=1e-12)


def test_cross_is_anticommutative():
    assert A.cross(B) == -B.cross(A)


def test_cross_of_axes():
    assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)


def test_normalized_has_unit_length_and_same_direction():
    n = A.normalized()
    assert math.isclose(n.length(), 1.0)
    assert math.isclose(n.dot(A), A.length())


def test_normalized_zero_is_nan():
    n = Vector3().normalized()
    assert [math.isnan(c) for c in n] == [True, True, True]


def test_iteration_yields_components():
    assert tuple(A) == (A.x, A.y, A.z)


def test_rotate_y_preserves_distance_to_center():
    center = Vector3(1.0, -1.0, 3.0)
    rotated = rotate_y(A, 0.7, center)
    assert math.isclose((rotated - center).length(), (A - center).length())
    assert rotated.y == A.y


def test_rotate_y_zero_angle_is_identity():
    assert tuple(rotate_y(A, 0.0, B)) == pytest.approx((1.0, 2.0, 3.0), abs=1e-9)


def test_rotate_then_inverse_about_origin_round_trip():
    origin = Vector3()
    result = inverse_rotate_y(rotate_y(A, 1.1, origin), 1.1)
    assert tuple(result) == pytest.approx((1.0, 2.0, 3.0), abs=1e-9)


def test_inverse_rotate_y_full_turn():
    result = inverse_rotate_y(A, 2 * math.pi)
    assert tuple(result) == pytest.approx((1.0, 2.0, 3.0), abs=1e-9)