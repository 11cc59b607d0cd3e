#!/usr/bin/env python3
"""
Test Suite for the Vector Math Module

Tests cover:
1. Vector3D arithmetic (add, subtract, multiply, divide, negate)
2. Dot and cross products
3. Magnitude and normalization
4. Axis constructors and the canonical forward direction
5. Display conversions (km) and scalar clamping
"""

import math
import pytest

from shipnav.physics import (
    METERS_PER_KM,
    Vector3D,
    clamp,
)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def unit_x():
    """Unit vector in X direction (right)."""
    return Vector3D(1, 0, 0)


@pytest.fixture
def unit_y():
    """Unit vector in Y direction (up)."""
    return Vector3D(0, 1, 0)


# =============================================================================
# VECTOR3D TESTS
# =============================================================================

class TestVector3DBasicOperations:
    """Tests for basic Vector3D arithmetic operations."""

    @pytest.mark.parametrize("v1,v2,expected", [
        ((1, 2, 3), (4, 5, 6), (5, 7, 9)),
        ((0, 0, 0), (1, 1, 1), (1, 1, 1)),
        ((-1, -2, -3), (1, 2, 3), (0, 0, 0)),
    ])
    def test_vector_addition(self, v1, v2, expected):
        assert Vector3D(*v1) + Vector3D(*v2) == Vector3D(*expected)

    def test_vector_subtraction(self):
        assert Vector3D(5, 7, 9) - Vector3D(4, 5, 6) == Vector3D(1, 2, 3)

    @pytest.mark.parametrize("v,scalar,expected", [
        ((1, 2, 3), 2, (2, 4, 6)),
        ((1, 2, 3), 0, (0, 0, 0)),
        ((1, 2, 3), -1, (-1, -2, -3)),
    ])
    def test_scalar_multiplication(self, v, scalar, expected):
        """Test scalar multiplication (both left and right)."""
        vec = Vector3D(*v)
        assert vec * scalar == Vector3D(*expected)
        assert scalar * vec == Vector3D(*expected)

    def test_scalar_division(self):
        assert Vector3D(2, 4, 6) / 2 == Vector3D(1, 2, 3)

    def test_division_by_zero_raises_error(self):
        """Test that division by zero raises ValueError."""
        with pytest.raises(ValueError, match="Cannot divide vector by zero"):
            Vector3D(1, 2, 3) / 0

    def test_negation(self):
        assert -Vector3D(1, -2, 3) == Vector3D(-1, 2, -3)

    def test_equality_with_non_vector(self):
        assert Vector3D(1, 2, 3) != (1, 2, 3)


class TestVector3DProducts:
    """Tests for dot and cross products."""

    @pytest.mark.parametrize("v1,v2,expected", [
        ((1, 0, 0), (0, 1, 0), 0),  # Perpendicular
        ((1, 0, 0), (-1, 0, 0), -1),  # Parallel opposite
        ((1, 2, 3), (4, 5, 6), 32),  # 1*4 + 2*5 + 3*6
    ])
    def test_dot_product(self, v1, v2, expected):
        assert abs(Vector3D(*v1).dot(Vector3D(*v2)) - expected) < 1e-10

    @pytest.mark.parametrize("v1,v2,expected", [
        ((1, 0, 0), (0, 1, 0), (0, 0, 1)),  # i x j = k
        ((0, 1, 0), (0, 0, 1), (1, 0, 0)),  # j x k = i
        ((0, 0, 1), (1, 0, 0), (0, 1, 0)),  # k x i = j
        ((1, 0, 0), (1, 0, 0), (0, 0, 0)),  # Parallel vectors
    ])
    def test_cross_product(self, v1, v2, expected):
        assert Vector3D(*v1).cross(Vector3D(*v2)) == Vector3D(*expected)

    def test_right_cross_forward_is_up(self, unit_x, unit_y):
        """In the world frame, right x forward(-Z) gives up(+Y)."""
        assert unit_x.cross(Vector3D.canonical_forward()) == unit_y

    def test_cross_product_perpendicular_to_inputs(self):
        v1 = Vector3D(1, 2, 3)
        v2 = Vector3D(4, 5, 6)
        result = v1.cross(v2)
        assert abs(result.dot(v1)) < 1e-10
        assert abs(result.dot(v2)) < 1e-10


class TestVector3DMagnitude:
    """Tests for Vector3D magnitude and normalization."""

    @pytest.mark.parametrize("v,expected_mag", [
        ((3, 4, 0), 5),
        ((0, 0, 0), 0),
        ((1, 1, 1), math.sqrt(3)),
        ((2, 3, 6), 7),
    ])
    def test_magnitude(self, v, expected_mag):
        assert abs(Vector3D(*v).magnitude - expected_mag) < 1e-10

    def test_normalized_has_unit_magnitude(self):
        assert abs(Vector3D(1, 2, 3).normalized().magnitude - 1.0) < 1e-10

    def test_zero_vector_normalization(self):
        """Normalizing the zero vector returns the zero vector."""
        assert Vector3D(0, 0, 0).normalized() == Vector3D.zero()

    def test_normalized_preserves_direction(self):
        normalized = Vector3D(3, 4, 0).normalized()
        assert normalized == Vector3D(0.6, 0.8, 0.0)


class TestVector3DConstructors:
    """Tests for axis constructors and conversions."""

    def test_axes(self):
        assert Vector3D.zero() == Vector3D(0, 0, 0)
        assert Vector3D.unit_x() == Vector3D(1, 0, 0)
        assert Vector3D.unit_y() == Vector3D(0, 1, 0)
        assert Vector3D.unit_z() == Vector3D(0, 0, 1)

    def test_canonical_forward_is_negative_depth(self):
        assert Vector3D.canonical_forward() == -Vector3D.unit_z()

    def test_tuple_round_trip(self):
        vec = Vector3D.from_tuple((1, -2, 3.5))
        assert vec.to_tuple() == (1.0, -2.0, 3.5)

    def test_to_km(self):
        assert Vector3D(1500, -250, 0).to_km() == Vector3D(1.5, -0.25, 0)
        assert METERS_PER_KM == 1000.0

    def test_repr(self):
        assert repr(Vector3D(1, 2, 3)) == "Vector3D(1, 2, 3)"


@pytest.mark.parametrize("value,expected", [
    (0.5, 0.5),
    (1.5, 1.0),
    (-0.5, 0.0),
])
def test_clamp(value, expected):
    assert clamp(value, 0.0, 1.0) == expected
