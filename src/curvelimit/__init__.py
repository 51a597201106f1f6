"""Maximum safe curve speed of heavy vehicles under crosswind."""

from curvelimit.simulation.search import NO_SOLUTION, SafeSpeedResult, find_max_safe_speed
from curvelimit.simulation.stability import StabilityEvaluator, StabilityReport
from curvelimit.simulation.sweep import RadiusSweepResult, sweep_curve_radii
from curvelimit.vehicle.params import VehicleParameters, default_vehicle_parameters

__all__ = [
    "NO_SOLUTION",
    "RadiusSweepResult",
    "SafeSpeedResult",
    "StabilityEvaluator",
    "StabilityReport",
    "VehicleParameters",
    "default_vehicle_parameters",
    "find_max_safe_speed",
    "sweep_curve_radii",
]
