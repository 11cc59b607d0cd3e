"""shipnav single-ship navigation engine package."""

from .config import EngineConfig

from .physics import (
    Vector3D,
    METERS_PER_KM,
    FULL_TURN_DEG,
)

from .navigation import (
    # State types
    ShipState,
    BearingAngles,
    SphericalCoordinates,
    # Engine
    NavigationEngine,
    # Conversions
    to_azimuth,
)

from .controller import (
    HelmCommand,
    ShipController,
)

from .readout import (
    ReadoutFields,
    format_readout,
    format_status,
)

__all__ = [
    # Config module
    "EngineConfig",
    # Physics module
    "Vector3D",
    "METERS_PER_KM",
    "FULL_TURN_DEG",
    # Navigation module - State types
    "ShipState",
    "BearingAngles",
    "SphericalCoordinates",
    # Navigation module - Engine
    "NavigationEngine",
    # Navigation module - Conversions
    "to_azimuth",
    # Controller module
    "HelmCommand",
    "ShipController",
    # Readout module
    "ReadoutFields",
    "format_readout",
    "format_status",
]
