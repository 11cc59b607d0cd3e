"""
Text readouts for the navigation instrument panel.

Two formats are provided:
- format_readout: multi-section panel (position, spherical, velocity,
  bearing, forward vector, thrust)
- format_status: compact single line

Both are pure views over a NavigationEngine. Units: positions and
distances in km, velocities in m/s, angles in degrees. Azimuth, pitch and
yaw are wrapped into [0, 360) here and only here.
"""

from __future__ import annotations

from dataclasses import dataclass

from .navigation import NavigationEngine, to_azimuth
from .physics import FULL_TURN_DEG, METERS_PER_KM


READOUT_TEMPLATE = """\
=== NAVIGATION ===
POSITION (km)
  X: {pos_x_km:>14.3f}
  Y: {pos_y_km:>14.3f}
  Z: {pos_z_km:>14.3f}
SPHERICAL
  Distance:  {distance_km:>11.3f} km
  Azimuth:   {azimuth_deg:>11.1f} deg
  Elevation: {elevation_deg:>11.1f} deg
VELOCITY (m/s)
  Speed: {speed_ms:>12.2f}
  VX:    {vel_x_ms:>12.2f}
  VY:    {vel_y_ms:>12.2f}
  VZ:    {vel_z_ms:>12.2f}
BEARING (deg)
  Pitch: {pitch_deg:>8.1f}
  Yaw:   {yaw_deg:>8.1f}
FORWARD
  X: {fwd_x:>7.3f}
  Y: {fwd_y:>7.3f}
  Z: {fwd_z:>7.3f}
THRUST
  Accel: {thrust_accel:>6.2f} m/s^2"""

STATUS_TEMPLATE = (
    "DIST {distance_km:.3f} km | VEL {speed_ms:.1f} m/s | "
    "PITCH {pitch:d} | YAW {yaw:d}"
)


def whole_degrees(angle_degrees: float) -> int:
    """Wrap into [0, 360) and round to whole degrees (359.6 shows as 0)."""
    return int(round(to_azimuth(angle_degrees))) % int(FULL_TURN_DEG)


@dataclass
class ReadoutFields:
    """Display-ready values for one readout, already converted to display units."""
    pos_x_km: float
    pos_y_km: float
    pos_z_km: float
    distance_km: float
    azimuth_deg: float
    elevation_deg: float
    speed_ms: float
    vel_x_ms: float
    vel_y_ms: float
    vel_z_ms: float
    pitch_deg: float
    yaw_deg: float
    fwd_x: float
    fwd_y: float
    fwd_z: float
    thrust_accel: float

    @classmethod
    def from_engine(cls, engine: NavigationEngine) -> ReadoutFields:
        """Collect all readout values from an engine without mutating it."""
        state = engine.state
        position_km = state.position.to_km()
        spherical = engine.spherical_coordinates()
        bearing = engine.bearing_angles()
        forward = engine.forward_vector()

        return cls(
            pos_x_km=position_km.x,
            pos_y_km=position_km.y,
            pos_z_km=position_km.z,
            distance_km=spherical.distance / METERS_PER_KM,
            azimuth_deg=to_azimuth(spherical.azimuth),
            elevation_deg=spherical.elevation,
            speed_ms=engine.speed(),
            vel_x_ms=state.velocity.x,
            vel_y_ms=state.velocity.y,
            vel_z_ms=state.velocity.z,
            pitch_deg=to_azimuth(bearing.pitch),
            yaw_deg=to_azimuth(bearing.yaw),
            fwd_x=forward.x + 0.0,  # drop negative zero
            fwd_y=forward.y + 0.0,
            fwd_z=forward.z + 0.0,
            thrust_accel=state.display_thrust_accel,
        )

    def to_text(self) -> str:
        return READOUT_TEMPLATE.format(**vars(self))


def format_readout(engine: NavigationEngine) -> str:
    """Full multi-section navigation readout."""
    return ReadoutFields.from_engine(engine).to_text()


def format_status(engine: NavigationEngine) -> str:
    """
    Compact one-line status.

    Args:
        engine: Engine to describe

    Returns:
        e.g. "DIST 1.250 km | VEL 50.0 m/s | PITCH 15 | YAW 300"
    """
    bearing = engine.bearing_angles()
    return STATUS_TEMPLATE.format(
        distance_km=engine.distance_to_origin() / METERS_PER_KM,
        speed_ms=engine.speed(),
        pitch=whole_degrees(bearing.pitch),
        yaw=whole_degrees(bearing.yaw),
    )
