"""Search and simulation configuration dataclasses."""

from __future__ import annotations

import math
from dataclasses import dataclass

from curvelimit.utils.exceptions import ConfigurationError

DEFAULT_TIME_STEPS = 10_000
DEFAULT_LOWER_SPEED = 0.0
DEFAULT_UPPER_SPEED = 10_000.0
DEFAULT_SPEED_TOLERANCE = 1e-9


@dataclass(frozen=True)
class StabilityNumerics:
    """Discretization controls for the curve traversal simulation.

    Args:
        time_steps: Number of equal time steps used to sample the traversal
            from curve entry to the quarter-turn point.
    """

    time_steps: int = DEFAULT_TIME_STEPS

    def validate(self) -> None:
        """Validate traversal discretization.

        Raises:
            curvelimit.utils.exceptions.ConfigurationError: If the step count
                is not a positive integer.
        """
        if isinstance(self.time_steps, bool) or not isinstance(self.time_steps, int):
            msg = f"time_steps must be an integer, got: {self.time_steps!r}"
            raise ConfigurationError(msg)
        if self.time_steps < 1:
            msg = "time_steps must be at least 1"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class SearchNumerics:
    """Bracket and stopping controls for the bisection speed search.

    The stability predicate is assumed monotone in speed inside the bracket.

    Args:
        lower_speed: Lower end of the search bracket [m/s].
        upper_speed: Upper end of the search bracket [m/s].
        tolerance: Bracket width at which bisection stops [m/s].
    """

    lower_speed: float = DEFAULT_LOWER_SPEED
    upper_speed: float = DEFAULT_UPPER_SPEED
    tolerance: float = DEFAULT_SPEED_TOLERANCE

    def validate(self) -> None:
        """Validate the search bracket.

        Raises:
            curvelimit.utils.exceptions.ConfigurationError: If bracket bounds
                or tolerance are non-finite or inconsistent.
        """
        for name in ("lower_speed", "upper_speed", "tolerance"):
            if not math.isfinite(getattr(self, name)):
                msg = f"{name} must be finite"
                raise ConfigurationError(msg)
        if self.lower_speed < 0.0:
            msg = "lower_speed must be non-negative"
            raise ConfigurationError(msg)
        if self.upper_speed <= self.lower_speed:
            msg = "upper_speed must be greater than lower_speed"
            raise ConfigurationError(msg)
        if self.tolerance <= 0.0:
            msg = "tolerance must be positive"
            raise ConfigurationError(msg)

    @property
    def max_iterations(self) -> int:
        """Number of halvings needed to shrink the bracket below tolerance.

        Returns:
            Iteration count of the bisection loop.
        """
        width = self.upper_speed - self.lower_speed
        if width <= self.tolerance:
            return 0
        return math.ceil(math.log2(width / self.tolerance))


@dataclass(frozen=True)
class SearchConfig:
    """Top-level solver config composed of simulation and search numerics.

    Args:
        stability: Traversal discretization controls.
        search: Bisection bracket and stopping controls.
    """

    stability: StabilityNumerics
    search: SearchNumerics

    def validate(self) -> None:
        """Validate combined solver settings.

        Raises:
            curvelimit.utils.exceptions.ConfigurationError: If any nested
                configuration value violates its bounds.
        """
        self.stability.validate()
        self.search.validate()


def build_search_config(
    time_steps: int = DEFAULT_TIME_STEPS,
    lower_speed: float = DEFAULT_LOWER_SPEED,
    upper_speed: float = DEFAULT_UPPER_SPEED,
    tolerance: float = DEFAULT_SPEED_TOLERANCE,
) -> SearchConfig:
    """Build a validated search config with reference defaults.

    Args:
        time_steps: Number of traversal time steps per stability check.
        lower_speed: Lower end of the search bracket [m/s].
        upper_speed: Upper end of the search bracket [m/s].
        tolerance: Bracket width at which bisection stops [m/s].

    Returns:
        Fully validated search configuration.

    Raises:
        curvelimit.utils.exceptions.ConfigurationError: If assembled settings
            are inconsistent.
    """
    config = SearchConfig(
        stability=StabilityNumerics(time_steps=time_steps),
        search=SearchNumerics(
            lower_speed=lower_speed,
            upper_speed=upper_speed,
            tolerance=tolerance,
        ),
    )
    config.validate()
    return config
