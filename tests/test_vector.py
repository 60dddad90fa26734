import math

import pytest

from raysketch.vector import Vector3D


def test_add_method():
    v1 = Vector3D(1.0, 2.0, 0.0)
    v2 = Vector3D(3.0, -2.0, 1.0)
    assert v1.add(v2) == Vector3D(4.0, 0.0, 1.0)
    assert v2.add(v1) == Vector3D(4.0, 0.0, 1.0)


def test_add_operator():
    v1 = Vector3D(1.0, 2.0, 0.0)
    v2 = Vector3D(3.0, -2.0, 1.0)
    assert v1 + v2 == Vector3D(4.0, 0.0, 1.0)


def test_sub_method():
    v1 = Vector3D(1.0, 2.0, 0.0)
    v2 = Vector3D(3.0, -2.0, 1.0)
    assert v1.sub(v2) == Vector3D(-2.0, 4.0, -1.0)
    assert v2.sub(v1) == Vector3D(2.0, -4.0, 1.0)


def test_sub_operator():
    v1 = Vector3D(1.0, 2.0, 0.0)
    v2 = Vector3D(3.0, -2.0, 1.0)
    assert v1 - v2 == Vector3D(-2.0, 4.0, -1.0)


def test_mult_method_and_operator():
    v1 = Vector3D(1.0, 2.0, 0.0)
    v2 = Vector3D(3.0, -2.0, 1.0)
    assert v1.mult(v2) == Vector3D(3.0, -4.0, 0.0)
    assert v1 * v2 == Vector3D(3.0, -4.0, 0.0)


def test_scale_method():
    v1 = Vector3D(3.0, -2.0, 1.0)
    assert v1.scale(2.0) == Vector3D(6.0, -4.0, 2.0)
    assert v1.scale(-3.0) == Vector3D(-9.0, 6.0, -3.0)


def test_scale_operator():
    v1 = Vector3D(3.0, -2.0, 1.0)
    assert v1 * 2.0 == Vector3D(6.0, -4.0, 2.0)
    assert -3.0 * v1 == Vector3D(-9.0, 6.0, -3.0)


def test_magnitude():
    assert Vector3D(1.0, 2.0, 0.0).magnitude() == math.sqrt(5.0)
    assert Vector3D(3.0, -2.0, 1.0).magnitude() == math.sqrt(14.0)


def test_dot():
    v1 = Vector3D(1.0, 2.0, 0.0)
    v2 = Vector3D(3.0, -2.0, 1.0)
    v3 = Vector3D(8.0, 3.0, -8.0)
    v4 = Vector3D(1.0, 9.0, 2.0)
    assert v1.dot(v2) == -1.0
    assert v2.dot(v1) == -1.0
    assert v3.dot(v4) == 19.0
    assert v4.dot(v3) == 19.0


def test_cross():
    v1 = Vector3D(1.0, 2.0, 0.0)
    v2 = Vector3D(3.0, -2.0, 1.0)
    assert v1.cross(v2) == Vector3D(2.0, -1.0, -8.0)
    assert v2.cross(v1) == Vector3D(-2.0, 1.0, 8.0)


def test_normalize():
    v1 = Vector3D(1.0, 2.0, 0.0)
    v2 = Vector3D(3.0, -2.0, 1.0)
    s5 = math.sqrt(5.0)
    s14 = math.sqrt(14.0)
    assert v1.normalize() == Vector3D(1.0 / s5, 2.0 / s5, 0.0)
    assert v2.normalize() == Vector3D(3.0 / s14, -2.0 / s14, 1.0 / s14)


def test_normalize_zero_vector_is_nan():
    result = Vector3D(0.0, 0.0, 0.0).normalize()
    assert math.isnan(result.x) is True
    assert math.isnan(result.y) is True
    assert math.isnan(result.z) is True
    assert result.magnitude() != result.magnitude()


def test_str_integral_components():
    assert str(Vector3D(1.0, 2.0, 0.0)) == "[ 1, 2, 0 ]"
    assert str(Vector3D(-2.0, 4.0, -20.0)) == "[ -2, 4, -20 ]"


def test_str_fractional_components():
    assert str(Vector3D(0.5, -0.25, 10.0)) == "[ 0.5, -0.25, 10 ]"


def test_operator_with_unsupported_type():
    with pytest.raises(TypeError):
        Vector3D(1.0, 2.0, 3.0) + 1.0
    with pytest.raises(TypeError):
        Vector3D(1.0, 2.0, 3.0) * "x"


def test_immutable():
    v = Vector3D(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0
    assert v.x == 1.0
    assert v == Vector3D(1.0, 2.0, 3.0)