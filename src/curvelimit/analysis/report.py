"""Plain-text report of maximum safe speeds per curve radius."""

from __future__ import annotations

from curvelimit.simulation.sweep import DEFAULT_TEST_RADII, RadiusSweepResult
from curvelimit.utils.constants import MPS_TO_KPH

NO_SOLUTION_LABEL = "No solution"
TABLE_HEADER = "Radius (m) | Max Safe Speed (km/h)"
TABLE_SEPARATOR = "-----------|-----------------"
RADIUS_COLUMN_WIDTH = 10

__all__ = [
    "DEFAULT_TEST_RADII",
    "NO_SOLUTION_LABEL",
    "format_speed_table",
    "mps_to_kph",
]


def mps_to_kph(speed: float) -> float:
    """Convert a speed from m/s to km/h."""
    return speed * MPS_TO_KPH


def format_speed_table(sweep: RadiusSweepResult) -> str:
    """Format sweep results as a two-column text table.

    Radii are right-aligned in a ten-character column and printed with up to
    fifteen significant digits, so whole-metre radii stay in plain notation.

    Args:
        sweep: Radius sweep result.

    Returns:
        Table with one row per radius, speeds in km/h with two decimals or
        ``No solution`` for infeasible radii. Ends with a newline.
    """
    lines = [TABLE_HEADER, TABLE_SEPARATOR]
    for result in sweep.results:
        if result.max_speed is None:
            value = NO_SOLUTION_LABEL
        else:
            value = f"{mps_to_kph(result.max_speed):.2f}"
        radius = format(result.curve_radius, ".15g").rjust(RADIUS_COLUMN_WIDTH)
        lines.append(f"{radius} | {value}")
    return "\n".join(lines) + "\n"
