"""
Engine configuration for the shipnav navigation engine.

Holds the tunable constants of the engine and the driver cadences:
- Thrust and rotation limits
- Numerical guards (rotation epsilon, origin epsilon)
- Physics and display rates

Configuration can come from defaults, a dict, a JSON file, or environment
variables (a local .env file is honoured via python-dotenv).
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


DEFAULT_MAX_THRUST_ACCEL = 10.0  # m/s^2 at full throttle
DEFAULT_MAX_ROTATION_RATE = 1.0  # rad/s, per axis
DEFAULT_ROTATION_EPSILON = 1e-3  # rad/s, rates at or below are not integrated
DEFAULT_ORIGIN_EPSILON = 1e-3  # m, spherical coords short-circuit below this
DEFAULT_DISPLAY_DECAY_FACTOR = 2.0
DEFAULT_PHYSICS_HZ = 60.0
DEFAULT_DISPLAY_HZ = 10.0

ENV_PREFIX = "SHIPNAV_"


@dataclass
class EngineConfig:
    """Constants consumed by NavigationEngine and ShipController."""
    max_thrust_accel: float = DEFAULT_MAX_THRUST_ACCEL
    max_rotation_rate: float = DEFAULT_MAX_ROTATION_RATE
    rotation_epsilon: float = DEFAULT_ROTATION_EPSILON
    origin_epsilon: float = DEFAULT_ORIGIN_EPSILON
    display_decay_factor: float = DEFAULT_DISPLAY_DECAY_FACTOR
    physics_hz: float = DEFAULT_PHYSICS_HZ
    display_hz: float = DEFAULT_DISPLAY_HZ

    def __post_init__(self) -> None:
        """Validate configuration values."""
        for name in ("max_thrust_accel", "max_rotation_rate", "physics_hz", "display_hz"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("rotation_epsilon", "origin_epsilon", "display_decay_factor"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @property
    def physics_dt(self) -> float:
        """Fixed physics step in seconds."""
        return 1.0 / self.physics_hz

    @property
    def display_interval(self) -> float:
        """Seconds between display refreshes."""
        return 1.0 / self.display_hz

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EngineConfig':
        """Create configuration from dictionary."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**{key: float(value) for key, value in data.items()})

    @classmethod
    def from_json(cls, path: str) -> 'EngineConfig':
        """Load configuration from JSON file."""
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Engine config not found: {path}")

        with open(config_path) as f:
            data = json.load(f)

        logger.info("Loaded engine config from %s", config_path)
        return cls.from_dict(data)

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        dotenv_path: Optional[str] = None
    ) -> 'EngineConfig':
        """
        Build configuration from environment variables.

        Each field maps to an upper-cased variable with the prefix, e.g.
        SHIPNAV_MAX_THRUST_ACCEL. Fields without a variable keep defaults.

        Args:
            prefix: Environment variable prefix
            dotenv_path: Optional .env file to load first

        Returns:
            Configured EngineConfig
        """
        load_dotenv(dotenv_path)

        data = {}
        for f in fields(cls):
            raw = os.environ.get(f"{prefix}{f.name.upper()}")
            if raw is not None:
                data[f.name] = raw

        if data:
            logger.info("Engine config overrides from environment: %s", sorted(data))
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
