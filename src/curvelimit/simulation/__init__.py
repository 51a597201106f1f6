"""Stability simulation, speed search and radius sweeps."""

from curvelimit.simulation.config import (
    SearchConfig,
    SearchNumerics,
    StabilityNumerics,
    build_search_config,
)
from curvelimit.simulation.search import NO_SOLUTION, SafeSpeedResult, find_max_safe_speed
from curvelimit.simulation.stability import StabilityEvaluator, StabilityReport, exceeds_limits
from curvelimit.simulation.sweep import DEFAULT_TEST_RADII, RadiusSweepResult, sweep_curve_radii

__all__ = [
    "DEFAULT_TEST_RADII",
    "NO_SOLUTION",
    "RadiusSweepResult",
    "SafeSpeedResult",
    "SearchConfig",
    "SearchNumerics",
    "StabilityEvaluator",
    "StabilityNumerics",
    "StabilityReport",
    "build_search_config",
    "exceeds_limits",
    "find_max_safe_speed",
    "sweep_curve_radii",
]
