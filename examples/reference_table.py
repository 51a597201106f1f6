"""Print the maximum safe speed table for the reference heavy vehicle."""

from __future__ import annotations

import logging
from pathlib import Path

from curvelimit.analysis import export_sweep_json, format_speed_table, plot_speed_vs_radius
from curvelimit.simulation import sweep_curve_radii
from curvelimit.utils import configure_logging
from curvelimit.vehicle import default_vehicle_parameters


def output_root() -> Path:
    """Return the output directory for example artifacts.

    Returns:
        Path to ``examples/output/reference``.
    """
    return Path(__file__).resolve().parent / "output" / "reference"


def main() -> None:
    """Solve the reference radius sweep, print it and export artifacts."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("reference_table_example")

    sweep = sweep_curve_radii(default_vehicle_parameters(), progress_prefix="radii")
    print(format_speed_table(sweep), end="")

    out_dir = output_root()
    export_sweep_json(sweep, out_dir / "sweep.json")
    plot_speed_vs_radius(sweep, out_dir / "speed_vs_radius")

    for result in sweep.results:
        logger.info(
            "R=%6.1f m | %s | limited by %s",
            result.curve_radius,
            "no solution" if result.max_speed_kph is None else f"{result.max_speed_kph:.2f} km/h",
            result.limiting_mode,
        )


if __name__ == "__main__":
    main()
