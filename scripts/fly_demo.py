#!/usr/bin/env python3
"""
Fly Demo CLI - Run a scripted flight and print the navigation panel.

Usage:
    # Full throttle straight ahead for 10 seconds
    python scripts/fly_demo.py --seconds 10 --throttle 1.0

    # Climbing left turn with compact status lines
    python scripts/fly_demo.py --pitch-rate 0.1 --yaw-rate 0.2 --compact

    # Engine constants from a JSON file
    python scripts/fly_demo.py --config data/engine_config.json

Physics runs at the configured fixed rate (60 Hz by default) while the
panel is printed at the display rate (10 Hz by default).
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shipnav.config import EngineConfig
from shipnav.controller import ShipController


def run_demo(
    config: EngineConfig,
    seconds: float,
    throttle: float,
    pitch_rate: float,
    yaw_rate: float,
    compact: bool = False,
    quiet: bool = False
) -> ShipController:
    """Fly with constant helm inputs and print the panel at the display rate."""
    controller = ShipController.from_config(config)
    controller.set_throttle_fraction(throttle)
    controller.set_pitch_rate(pitch_rate)
    controller.set_yaw_rate(yaw_rate)

    ticks_per_display = max(1, int(round(config.physics_hz / config.display_hz)))
    total_ticks = int(round(seconds * config.physics_hz))

    for _ in range(total_ticks):
        controller.tick()
        if quiet or controller.tick_count % ticks_per_display:
            continue
        if compact:
            print(f"[t={controller.sim_time:7.2f}s] {controller.status_line()}")
        else:
            print(f"\n[t={controller.sim_time:.2f}s]")
            print(controller.readout())

    print(f"\n{'='*60}")
    print("FINAL STATE")
    print(f"{'='*60}")
    print(controller.readout())
    return controller


def main():
    parser = argparse.ArgumentParser(
        description="Fly Demo CLI - Run a scripted flight on the navigation engine"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to engine configuration JSON file (default: environment/.env)",
    )
    parser.add_argument(
        "--seconds",
        type=float,
        default=5.0,
        help="Simulated flight time in seconds (default: 5)",
    )
    parser.add_argument(
        "--throttle",
        type=float,
        default=1.0,
        help="Throttle fraction 0..1 (default: 1.0)",
    )
    parser.add_argument(
        "--pitch-rate",
        type=float,
        default=0.0,
        help="Pitch rate in rad/s (default: 0)",
    )
    parser.add_argument(
        "--yaw-rate",
        type=float,
        default=0.0,
        help="Yaw rate in rad/s (default: 0)",
    )
    parser.add_argument(
        "--display-hz",
        type=float,
        help="Panel refresh rate in Hz (overrides config)",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print one-line status instead of the full panel",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the final state",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.config:
            config = EngineConfig.from_json(args.config)
        else:
            config = EngineConfig.from_env()
        if args.display_hz is not None:
            config = EngineConfig.from_dict({**config.to_dict(), "display_hz": args.display_hz})
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    run_demo(
        config,
        seconds=args.seconds,
        throttle=args.throttle,
        pitch_rate=args.pitch_rate,
        yaw_rate=args.yaw_rate,
        compact=args.compact,
        quiet=args.quiet,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
