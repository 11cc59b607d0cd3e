#!/usr/bin/env python3
"""
Vector Math Module for the shipnav navigation engine

Provides the 3D vector type shared by the engine, the controller and the
readout:
- Vector arithmetic (add, subtract, scale, negate)
- Dot and cross products
- Magnitude and normalization
- Unit vectors for the world frame axes
- Unit conversion constants for display

World frame convention (right-handed):
- X: right (lateral)
- Y: up (vertical)
- Z: depth; the canonical forward direction is -Z
"""

from __future__ import annotations
import math
from dataclasses import dataclass


# =============================================================================
# CONVERSION CONSTANTS
# =============================================================================

METERS_PER_KM = 1000.0

# Full turn in degrees, used by azimuth wrapping
FULL_TURN_DEG = 360.0


# =============================================================================
# VECTOR3D CLASS
# =============================================================================

@dataclass
class Vector3D:
    """
    3D vector for positions, velocities, accelerations and directions.

    Uses a right-handed coordinate system where:
    - X: right
    - Y: up
    - Z: depth (forward is -Z)

    All units in SI (meters, m/s, m/s^2) unless otherwise specified.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3D) -> Vector3D:
        """Vector addition."""
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        """Vector subtraction."""
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        """Scalar multiplication."""
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector3D:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3D:
        """Scalar division."""
        if scalar == 0:
            raise ValueError("Cannot divide vector by zero")
        return Vector3D(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        """Equality check with tolerance."""
        if not isinstance(other, Vector3D):
            return False
        eps = 1e-10
        return (abs(self.x - other.x) < eps and
                abs(self.y - other.y) < eps and
                abs(self.z - other.z) < eps)

    def dot(self, other: Vector3D) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        """Cross product."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    @property
    def magnitude(self) -> float:
        """Vector magnitude (length)."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Vector3D:
        """Return unit vector in same direction (zero stays zero)."""
        mag = self.magnitude
        if mag == 0:
            return Vector3D(0, 0, 0)
        return self / mag

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_km(self) -> Vector3D:
        """Convert a meter-valued vector to kilometers for display."""
        return self / METERS_PER_KM

    @classmethod
    def from_tuple(cls, t: tuple[float, float, float]) -> Vector3D:
        return cls(float(t[0]), float(t[1]), float(t[2]))

    @classmethod
    def zero(cls) -> Vector3D:
        """Zero vector."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector3D:
        """Unit vector in X direction (right)."""
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vector3D:
        """Unit vector in Y direction (up)."""
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vector3D:
        """Unit vector in Z direction (backward; forward is -Z)."""
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def canonical_forward(cls) -> Vector3D:
        """Forward direction of a ship at zero pitch and zero yaw."""
        return cls(0.0, 0.0, -1.0)

    def __repr__(self) -> str:
        return f"Vector3D({self.x:.6g}, {self.y:.6g}, {self.z:.6g})"


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a scalar into [low, high]."""
    return max(low, min(high, value))
