"""Print maximum safe curve speeds for a list of radii."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import fields, replace
from pathlib import Path

from curvelimit.analysis.export import export_sweep_csv, export_sweep_json
from curvelimit.analysis.plots import plot_speed_vs_radius
from curvelimit.analysis.report import format_speed_table
from curvelimit.simulation.config import (
    DEFAULT_SPEED_TOLERANCE,
    DEFAULT_TIME_STEPS,
    DEFAULT_UPPER_SPEED,
    build_search_config,
)
from curvelimit.simulation.sweep import DEFAULT_TEST_RADII, sweep_curve_radii
from curvelimit.utils.exceptions import ConfigurationError, DomainError
from curvelimit.utils.logging import configure_logging
from curvelimit.vehicle.params import VehicleParameters

EXIT_INVALID_INPUT = 2

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse CLI arguments.

    Args:
        argv: Argument list without the program name. ``None`` reads
            ``sys.argv``.

    Returns:
        Parsed command-line namespace.
    """
    parser = argparse.ArgumentParser(prog="curvelimit", description=__doc__)
    parser.add_argument(
        "--radii",
        type=float,
        nargs="+",
        default=list(DEFAULT_TEST_RADII),
        help="Curve radii to evaluate [m].",
    )
    vehicle_group = parser.add_argument_group("vehicle and environment")
    for item in fields(VehicleParameters):
        if item.name == "curve_radius":
            continue
        vehicle_group.add_argument(
            f"--{item.name.replace('_', '-')}",
            dest=item.name,
            type=float,
            default=None,
            help=f"Override {item.name} (default: {item.default}).",
        )
    numerics_group = parser.add_argument_group("numerics")
    numerics_group.add_argument("--time-steps", type=int, default=DEFAULT_TIME_STEPS)
    numerics_group.add_argument("--upper-speed", type=float, default=DEFAULT_UPPER_SPEED)
    numerics_group.add_argument("--tolerance", type=float, default=DEFAULT_SPEED_TOLERANCE)
    numerics_group.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Solve radii concurrently with this many threads.",
    )
    output_group = parser.add_argument_group("output")
    output_group.add_argument("--json", type=Path, default=None, help="Write results as JSON.")
    output_group.add_argument("--csv", type=Path, default=None, help="Write results as CSV.")
    output_group.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Write a speed-vs-radius plot to this base path (PNG and PDF).",
    )
    output_group.add_argument("--progress", action="store_true", help="Show a progress bar.")
    output_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser.parse_args(argv)


def _vehicle_from_args(args: argparse.Namespace) -> VehicleParameters:
    """Apply command-line overrides to the reference vehicle.

    Args:
        args: Parsed command-line namespace.

    Returns:
        Vehicle parameter set with overrides applied.
    """
    overrides = {
        item.name: getattr(args, item.name)
        for item in fields(VehicleParameters)
        if item.name != "curve_radius" and getattr(args, item.name) is not None
    }
    return replace(VehicleParameters(), **overrides)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a radius sweep and print the speed table.

    Args:
        argv: Argument list without the program name.

    Returns:
        Process exit code: ``0`` on success, ``2`` for invalid input or
        impossible curve geometry.
    """
    args = _parse_args(argv)
    configure_logging(args.log_level)

    try:
        vehicle = _vehicle_from_args(args)
        config = build_search_config(
            time_steps=args.time_steps,
            upper_speed=args.upper_speed,
            tolerance=args.tolerance,
        )
        sweep = sweep_curve_radii(
            vehicle,
            args.radii,
            config,
            max_workers=args.workers,
            progress_prefix="curvelimit" if args.progress else None,
        )
    except ConfigurationError as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except DomainError as exc:
        print(f"impossible curve geometry: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(format_speed_table(sweep), end="")

    if args.json is not None:
        export_sweep_json(sweep, args.json)
        logger.info("Wrote %s", args.json)
    if args.csv is not None:
        export_sweep_csv(sweep, args.csv)
        logger.info("Wrote %s", args.csv)
    if args.plot is not None:
        for path in plot_speed_vs_radius(sweep, args.plot):
            logger.info("Wrote %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
