#!/usr/bin/env python3
"""
Navigation Engine for the shipnav instrument panel

Owns the complete physical and orientation state of a single ship:
- Ship state with position, velocity, transient acceleration and angles
- Thrust commands (forward and directional)
- Rate-limited pitch/yaw updates
- Semi-implicit Euler integration
- Direction vectors derived from the orientation angles
- Bearing and spherical-coordinate queries for display

Orientation is stored as two unbounded angles (pitch, yaw). Direction
vectors are recomputed from them on every query and never stored.

The engine never raises on numeric input: throttles and rates are
clamped, near-zero rates are skipped and the spherical conversion
short-circuits near the origin.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from .config import EngineConfig
from .physics import FULL_TURN_DEG, Vector3D, clamp

logger = logging.getLogger(__name__)


# =============================================================================
# QUERY RESULTS
# =============================================================================

class BearingAngles(NamedTuple):
    """Orientation angles in degrees, unwrapped."""
    pitch: float
    yaw: float


class SphericalCoordinates(NamedTuple):
    """
    Position relative to the origin in spherical form.

    Attributes:
        distance: Distance from origin (meters)
        azimuth: Horizontal angle atan2(z, x) in degrees, (-180, 180]
        elevation: Angle above the horizontal plane in degrees, [-90, 90]
    """
    distance: float
    azimuth: float
    elevation: float


def to_azimuth(angle_degrees: float) -> float:
    """
    Wrap any angle in degrees into [0, 360) for display.

    Negative inputs wrap to their positive equivalent (-45 -> 315).

    Args:
        angle_degrees: Angle in degrees, any real value

    Returns:
        Equivalent angle in [0, 360)
    """
    wrapped = ((angle_degrees % FULL_TURN_DEG) + FULL_TURN_DEG) % FULL_TURN_DEG
    # Float rounding can land exactly on the excluded upper bound
    if wrapped >= FULL_TURN_DEG:
        return 0.0
    return wrapped


# =============================================================================
# SHIP STATE CLASS
# =============================================================================

@dataclass
class ShipState:
    """
    Kinematic state of the ship.

    Attributes:
        position: World position relative to the origin (meters)
        velocity: World velocity (m/s)
        acceleration: Commanded acceleration for the current tick (m/s^2)
        pitch_angle: Accumulated pitch (radians, unbounded)
        yaw_angle: Accumulated yaw (radians, unbounded)
        display_thrust_accel: Throttle indicator for the UI (m/s^2)
    """
    position: Vector3D = field(default_factory=Vector3D.zero)
    velocity: Vector3D = field(default_factory=Vector3D.zero)
    acceleration: Vector3D = field(default_factory=Vector3D.zero)
    pitch_angle: float = 0.0
    yaw_angle: float = 0.0
    display_thrust_accel: float = 0.0

    def copy(self) -> ShipState:
        """Create a deep copy of the state."""
        return ShipState(
            position=Vector3D(self.position.x, self.position.y, self.position.z),
            velocity=Vector3D(self.velocity.x, self.velocity.y, self.velocity.z),
            acceleration=Vector3D(
                self.acceleration.x,
                self.acceleration.y,
                self.acceleration.z
            ),
            pitch_angle=self.pitch_angle,
            yaw_angle=self.yaw_angle,
            display_thrust_accel=self.display_thrust_accel
        )


# =============================================================================
# NAVIGATION ENGINE
# =============================================================================

class NavigationEngine:
    """
    Physics and orientation engine for a single ship.

    The host drives it once per fixed tick: commands first (apply_thrust,
    rotate), then integrate(dt). Queries are side-effect free and may be
    called at any cadence.
    """

    to_azimuth = staticmethod(to_azimuth)

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.state = ShipState()
        logger.debug(
            "Navigation engine created (max_thrust_accel=%.3f, max_rotation_rate=%.3f)",
            self.config.max_thrust_accel, self.config.max_rotation_rate
        )

    # -------------------------------------------------------------------------
    # Integration
    # -------------------------------------------------------------------------

    def integrate(self, dt: float) -> None:
        """
        Advance the ship by one physics step (semi-implicit Euler).

        Velocity is updated from acceleration before position is updated
        from the new velocity. Acceleration is cleared afterwards and the
        display throttle decays at twice the full-throttle rate.

        Args:
            dt: Time step in seconds (negative values are treated as 0)
        """
        dt = max(0.0, dt)
        state = self.state

        state.velocity = state.velocity + state.acceleration * dt
        state.position = state.position + state.velocity * dt
        state.acceleration = Vector3D.zero()

        decay = self.config.max_thrust_accel * dt * self.config.display_decay_factor
        state.display_thrust_accel = max(0.0, state.display_thrust_accel - decay)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def _thrust_magnitude(self, throttle: float) -> float:
        return self.config.max_thrust_accel * clamp(throttle, 0.0, 1.0)

    def apply_thrust(self, throttle: float) -> None:
        """
        Add main-engine thrust along the current forward vector.

        Args:
            throttle: Throttle fraction, clamped into [0, 1]
        """
        magnitude = self._thrust_magnitude(throttle)
        self.state.display_thrust_accel = magnitude
        self.state.acceleration = (
            self.state.acceleration + self.forward_vector() * magnitude
        )

    def apply_directional_thrust(self, direction: Vector3D, throttle: float) -> None:
        """
        Add thrust along an arbitrary world direction (auxiliary thrusters).

        Args:
            direction: Thrust direction, normalized internally; a zero
                vector contributes no acceleration
            throttle: Throttle fraction, clamped into [0, 1]
        """
        magnitude = self._thrust_magnitude(throttle)
        self.state.display_thrust_accel = magnitude
        self.state.acceleration = (
            self.state.acceleration + direction.normalized() * magnitude
        )

    def rotate(self, pitch_rate: float, yaw_rate: float, dt: float) -> None:
        """
        Integrate commanded pitch and yaw rates over one step.

        Each rate is clamped to the configured maximum. Rates whose
        magnitude does not exceed the rotation epsilon are skipped so
        near-zero commands do not accumulate floating-point noise.

        Args:
            pitch_rate: Desired pitch rate (rad/s)
            yaw_rate: Desired yaw rate (rad/s)
            dt: Time step in seconds
        """
        limit = self.config.max_rotation_rate
        eps = self.config.rotation_epsilon

        pitch_rate = clamp(pitch_rate, -limit, limit)
        yaw_rate = clamp(yaw_rate, -limit, limit)

        if abs(pitch_rate) > eps:
            self.state.pitch_angle += pitch_rate * dt
        if abs(yaw_rate) > eps:
            self.state.yaw_angle += yaw_rate * dt

    # -------------------------------------------------------------------------
    # Direction vectors
    # -------------------------------------------------------------------------

    def forward_vector(self) -> Vector3D:
        """Unit vector the ship's nose points along."""
        pitch = self.state.pitch_angle
        yaw = self.state.yaw_angle
        return Vector3D(
            -math.sin(yaw) * math.cos(pitch),
            math.sin(pitch),
            -math.cos(yaw) * math.cos(pitch)
        ).normalized()

    def right_vector(self) -> Vector3D:
        """Horizontal right vector; depends on yaw only."""
        yaw = self.state.yaw_angle
        return Vector3D(math.cos(yaw), 0.0, math.sin(yaw)).normalized()

    def up_vector(self) -> Vector3D:
        """
        Approximate up vector, right x forward.

        Only orthogonal to forward at zero pitch, since the right vector
        ignores pitch. Use for display only.
        """
        return self.right_vector().cross(self.forward_vector()).normalized()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def bearing_angles(self) -> BearingAngles:
        """Pitch and yaw in degrees, unwrapped."""
        return BearingAngles(
            pitch=math.degrees(self.state.pitch_angle),
            yaw=math.degrees(self.state.yaw_angle)
        )

    def spherical_coordinates(self) -> SphericalCoordinates:
        """
        Convert the current position into distance, azimuth and elevation.

        Returns:
            SphericalCoordinates; all zero when within origin_epsilon of
            the origin
        """
        position = self.state.position
        r = position.magnitude
        if r < self.config.origin_epsilon:
            return SphericalCoordinates(0.0, 0.0, 0.0)

        azimuth = math.degrees(math.atan2(position.z, position.x))
        if azimuth <= -180.0:
            azimuth = 180.0
        elevation = math.degrees(math.asin(clamp(position.y / r, -1.0, 1.0)))

        return SphericalCoordinates(distance=r, azimuth=azimuth, elevation=elevation)

    def distance_to_origin(self) -> float:
        return self.state.position.magnitude

    def within_radius(self, radius: float) -> bool:
        """True if the ship is no farther than radius meters from the origin."""
        return self.distance_to_origin() <= radius

    def speed(self) -> float:
        """Velocity magnitude (m/s)."""
        return self.state.velocity.magnitude

    def snapshot(self) -> ShipState:
        """Independent copy of the current state."""
        return self.state.copy()

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """Return to the post-construction state: origin, at rest, identity orientation."""
        self.state = ShipState()
        logger.debug("Navigation engine reset")
