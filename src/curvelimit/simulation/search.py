"""Bisection search for the maximum stable curve speed."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from curvelimit.simulation.config import SearchConfig, build_search_config
from curvelimit.simulation.stability import StabilityEvaluator, StabilityReport
from curvelimit.utils.constants import MPS_TO_KPH
from curvelimit.utils.exceptions import SearchCancelledError
from curvelimit.vehicle.params import VehicleParameters

logger = logging.getLogger(__name__)

NO_SOLUTION = None
TIP_OVER = "tip-over"
SLIDE_OUT = "slide-out"


@dataclass(frozen=True)
class SafeSpeedResult:
    """Outcome of a maximum-safe-speed search for one curve radius.

    Args:
        curve_radius: Curve radius the search was run for [m].
        max_speed: Maximum stable speed [m/s], or ``NO_SOLUTION`` (``None``)
            if the vehicle is unstable even at the bottom of the bracket.
        iterations: Number of bisection iterations performed.
        limiting_report: Stability report at the converged lower bracket end.
    """

    curve_radius: float
    max_speed: float | None
    iterations: int
    limiting_report: StabilityReport

    @property
    def is_feasible(self) -> bool:
        """Whether any stable speed exists for this curve."""
        return self.max_speed is not NO_SOLUTION

    @property
    def max_speed_kph(self) -> float | None:
        """Maximum stable speed in km/h, or ``None`` if infeasible."""
        if self.max_speed is None:
            return None
        return self.max_speed * MPS_TO_KPH

    @property
    def limiting_mode(self) -> str | None:
        """Failure mode that bounds the speed (``tip-over`` or ``slide-out``).

        Returns:
            Mode with the higher utilization at the converged speed, or
            ``None`` if the curve is infeasible.
        """
        if not self.is_feasible:
            return None
        report = self.limiting_report
        if report.torque_utilization >= report.force_utilization:
            return TIP_OVER
        return SLIDE_OUT


def find_max_safe_speed(
    vehicle: VehicleParameters,
    config: SearchConfig | None = None,
    *,
    should_cancel: Callable[[], bool] | None = None,
) -> SafeSpeedResult:
    """Find the highest speed at which the vehicle neither tips nor slides.

    Bisection relies on the instability predicate being monotone in speed:
    once unstable, the vehicle stays unstable at every higher speed. After
    convergence the lower bracket end is checked again so that a curve that
    is unstable already at the bracket floor reports ``NO_SOLUTION``.

    Args:
        vehicle: Vehicle parameter set including the curve radius.
        config: Search configuration. Defaults to :func:`build_search_config`.
        should_cancel: Optional callable polled between bisection iterations.

    Returns:
        Search result with the maximum stable speed or ``NO_SOLUTION``.

    Raises:
        curvelimit.utils.exceptions.ConfigurationError: If vehicle parameters
            or search settings are invalid.
        curvelimit.utils.exceptions.DomainError: If the curve is too tight for
            the wheelbase.
        curvelimit.utils.exceptions.SearchCancelledError: If ``should_cancel``
            returns ``True``.
    """
    if config is None:
        config = build_search_config()
    else:
        config.validate()

    evaluator = StabilityEvaluator(vehicle, config.stability)
    left = config.search.lower_speed
    right = config.search.upper_speed
    tolerance = config.search.tolerance
    logger.debug(
        "radius=%g bracket=[%g, %g] expected_iterations=%d",
        vehicle.curve_radius,
        left,
        right,
        config.search.max_iterations,
    )

    iterations = 0
    while right - left > tolerance:
        if should_cancel is not None and should_cancel():
            msg = (
                f"speed search for curve_radius={vehicle.curve_radius} cancelled "
                f"after {iterations} iterations"
            )
            raise SearchCancelledError(msg)
        mid = (left + right) / 2.0
        if evaluator.exceeds_limits(mid):
            right = mid
        else:
            left = mid
        iterations += 1
        logger.debug(
            "radius=%g iteration=%d bracket=[%.12f, %.12f]",
            vehicle.curve_radius,
            iterations,
            left,
            right,
        )

    report = evaluator.evaluate(left)
    if report.exceeds_limits:
        logger.info("radius=%g m: no stable speed", vehicle.curve_radius)
        max_speed = NO_SOLUTION
    else:
        logger.info("radius=%g m: max safe speed %.6f m/s", vehicle.curve_radius, left)
        max_speed = left

    return SafeSpeedResult(
        curve_radius=vehicle.curve_radius,
        max_speed=max_speed,
        iterations=iterations,
        limiting_report=report,
    )
