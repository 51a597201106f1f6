"""Show how crosswind speed and direction lower the safe speed of an 80 m curve."""

from __future__ import annotations

import logging
import math
from dataclasses import replace

import numpy as np

from curvelimit.simulation import build_search_config, find_max_safe_speed
from curvelimit.utils import configure_logging
from curvelimit.vehicle import default_vehicle_parameters

WIND_VELOCITIES = np.arange(0.0, 35.0, 5.0)
WIND_ANGLES = (0.0, math.pi / 4.0, math.pi / 2.0, math.pi)


def main() -> None:
    """Solve the maximum safe speed over a grid of wind conditions."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("wind_sensitivity_example")

    base = default_vehicle_parameters().with_curve_radius(80.0)
    config = build_search_config(tolerance=1e-6)

    header = "wind [m/s] | " + " | ".join(f"{math.degrees(a):>6.0f} deg" for a in WIND_ANGLES)
    print(header)
    for wind_velocity in WIND_VELOCITIES:
        cells = []
        for wind_angle in WIND_ANGLES:
            vehicle = replace(base, wind_velocity=float(wind_velocity), wind_angle=wind_angle)
            result = find_max_safe_speed(vehicle, config)
            if result.max_speed_kph is None:
                cells.append(f"{'n/a':>10}")
            else:
                cells.append(f"{result.max_speed_kph:>10.2f}")
        print(f"{wind_velocity:>10.1f} | " + " | ".join(cells))
    logger.info("Solved %d wind conditions", WIND_VELOCITIES.size * len(WIND_ANGLES))


if __name__ == "__main__":
    main()
