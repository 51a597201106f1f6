"""Maximum safe speed over a list of curve radii."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TextIO

import numpy as np

from curvelimit.simulation._progress import SweepProgress
from curvelimit.simulation.config import SearchConfig, build_search_config
from curvelimit.simulation.search import SafeSpeedResult, find_max_safe_speed
from curvelimit.utils.exceptions import ConfigurationError
from curvelimit.vehicle.params import VehicleParameters

logger = logging.getLogger(__name__)

DEFAULT_TEST_RADII: tuple[float, ...] = (15.0, 30.0, 50.0, 80.0, 120.0, 230.0, 380.0, 570.0)


@dataclass(frozen=True)
class RadiusSweepResult:
    """Search results for an ordered list of curve radii.

    Args:
        vehicle: Base vehicle parameter set; its own ``curve_radius`` is
            ignored by the sweep.
        results: One search result per radius, in input order.
    """

    vehicle: VehicleParameters
    results: tuple[SafeSpeedResult, ...]

    @property
    def radii(self) -> np.ndarray:
        """Curve radii of the sweep [m]."""
        return np.array([result.curve_radius for result in self.results], dtype=float)

    @property
    def max_speeds(self) -> np.ndarray:
        """Maximum safe speeds [m/s], ``nan`` where no solution exists."""
        return np.array(
            [np.nan if result.max_speed is None else result.max_speed for result in self.results],
            dtype=float,
        )


def sweep_curve_radii(
    vehicle: VehicleParameters,
    radii: Sequence[float] = DEFAULT_TEST_RADII,
    config: SearchConfig | None = None,
    *,
    max_workers: int | None = None,
    progress_prefix: str | None = None,
    progress_stream: TextIO | None = None,
) -> RadiusSweepResult:
    """Solve the maximum safe speed for every radius in ``radii``.

    Each radius is solved on its own copy of ``vehicle``, so radii can be
    evaluated concurrently without sharing state.

    Args:
        vehicle: Base vehicle parameter set.
        radii: Curve radii to evaluate [m].
        config: Search configuration. Defaults to :func:`build_search_config`.
        max_workers: Number of worker threads. ``None`` or ``1`` solves the
            radii sequentially.
        progress_prefix: Prefix for a progress bar; ``None`` disables it.
        progress_stream: Output stream for the progress bar. Defaults to
            stderr.

    Returns:
        Search results in the order of ``radii``.

    Raises:
        curvelimit.utils.exceptions.ConfigurationError: If the radius list,
            worker count, vehicle parameters or search settings are invalid.
        curvelimit.utils.exceptions.DomainError: If a radius is too tight for
            the wheelbase.
    """
    if len(radii) == 0:
        msg = "radii must contain at least one curve radius"
        raise ConfigurationError(msg)
    if max_workers is not None and max_workers < 1:
        msg = "max_workers must be at least 1"
        raise ConfigurationError(msg)
    if config is None:
        config = build_search_config()

    variants = [vehicle.with_curve_radius(radius) for radius in radii]
    total = len(variants)
    progress = SweepProgress(progress_prefix, total, stream=progress_stream)
    logger.info("Sweeping %d curve radii", total)

    if max_workers is None or max_workers == 1:
        results = []
        for variant in variants:
            results.append(find_max_safe_speed(variant, config))
            progress.advance(variant.curve_radius)
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [pool.submit(find_max_safe_speed, variant, config) for variant in variants]
            results = []
            for variant, future in zip(variants, futures):
                results.append(future.result())
                progress.advance(variant.curve_radius)

    return RadiusSweepResult(vehicle=vehicle, results=tuple(results))
