"""
Fixed-step controller that drives a NavigationEngine.

The controller owns the helm inputs set by the UI (throttle fraction,
pitch rate, yaw rate) and runs each physics tick in the required order:
commands first, then integration. Wall-clock time handed to advance()
is accumulated and consumed in whole fixed steps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from .config import EngineConfig
from .navigation import NavigationEngine
from .readout import format_readout, format_status

logger = logging.getLogger(__name__)

# Cap on ticks per advance() call; time beyond this is dropped
DEFAULT_MAX_STEPS_PER_ADVANCE = 240


@dataclass
class HelmCommand:
    """Helm inputs applied every tick until changed."""
    throttle: float = 0.0  # fraction 0..1
    pitch_rate: float = 0.0  # rad/s
    yaw_rate: float = 0.0  # rad/s


TickCallback = Callable[["ShipController"], None]


class ShipController:
    """
    Drives one engine at a fixed physics rate.

    Attributes:
        engine: The engine being driven
        physics_dt: Fixed step length in seconds
        tick_count: Ticks run since construction or reset_clock()
        sim_time: Simulated seconds since construction or reset_clock()
    """

    def __init__(
        self,
        engine: Optional[NavigationEngine] = None,
        physics_dt: Optional[float] = None,
        max_steps_per_advance: int = DEFAULT_MAX_STEPS_PER_ADVANCE
    ):
        self.engine = engine or NavigationEngine()
        if physics_dt is None:
            physics_dt = self.engine.config.physics_dt
        if physics_dt <= 0:
            raise ValueError("physics_dt must be positive")
        if max_steps_per_advance < 1:
            raise ValueError("max_steps_per_advance must be at least 1")

        self.physics_dt = physics_dt
        self.max_steps_per_advance = max_steps_per_advance
        self._helm = HelmCommand()
        self._accumulator = 0.0
        self._tick_callbacks: List[TickCallback] = []
        self.tick_count = 0
        self.sim_time = 0.0

    @classmethod
    def from_config(cls, config: EngineConfig) -> ShipController:
        """Build an engine and controller from one configuration."""
        return cls(NavigationEngine(config), physics_dt=config.physics_dt)

    # -------------------------------------------------------------------------
    # Helm inputs
    # -------------------------------------------------------------------------

    def set_throttle_fraction(self, value: float) -> None:
        self._helm.throttle = value

    def set_pitch_rate(self, value: float) -> None:
        self._helm.pitch_rate = value

    def set_yaw_rate(self, value: float) -> None:
        self._helm.yaw_rate = value

    def all_stop(self) -> None:
        """Zero all helm inputs. The ship keeps coasting."""
        self._helm = HelmCommand()

    @property
    def helm(self) -> HelmCommand:
        """Copy of the current helm inputs."""
        return replace(self._helm)

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def add_tick_callback(self, callback: TickCallback) -> None:
        """Register a callback run after every tick."""
        self._tick_callbacks.append(callback)

    def tick(self) -> None:
        """Run one physics step: thrust, rotate, then integrate."""
        dt = self.physics_dt
        helm = self._helm

        self.engine.apply_thrust(helm.throttle)
        self.engine.rotate(helm.pitch_rate, helm.yaw_rate, dt)
        self.engine.integrate(dt)

        self.tick_count += 1
        self.sim_time += dt

        for callback in self._tick_callbacks:
            try:
                callback(self)
            except Exception:
                logger.exception("Tick callback failed at tick %d", self.tick_count)

    def advance(self, elapsed_s: float) -> int:
        """
        Consume wall-clock time in whole physics steps.

        Leftover time smaller than one step carries over to the next call.
        If more than max_steps_per_advance steps are due, the excess time
        is dropped.

        Args:
            elapsed_s: Wall-clock seconds since the previous call

        Returns:
            Number of ticks run
        """
        if elapsed_s <= 0:
            return 0

        self._accumulator += elapsed_s
        steps = 0
        while self._accumulator >= self.physics_dt and steps < self.max_steps_per_advance:
            self.tick()
            self._accumulator -= self.physics_dt
            steps += 1

        if self._accumulator >= self.physics_dt:
            logger.warning(
                "Dropping %.3f s of simulation time after %d steps",
                self._accumulator, steps
            )
            self._accumulator = 0.0

        return steps

    def run_for(self, duration_s: float) -> int:
        """Run whole ticks covering duration_s of simulated time."""
        steps = int(round(duration_s / self.physics_dt))
        for _ in range(steps):
            self.tick()
        return steps

    def reset_clock(self) -> None:
        self._accumulator = 0.0
        self.tick_count = 0
        self.sim_time = 0.0

    # -------------------------------------------------------------------------
    # Presentation
    # -------------------------------------------------------------------------

    def readout(self) -> str:
        return format_readout(self.engine)

    def status_line(self) -> str:
        return format_status(self.engine)
