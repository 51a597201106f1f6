"""Shared test helpers."""

from __future__ import annotations

import math

from curvelimit.simulation.config import SearchConfig, build_search_config
from curvelimit.utils.constants import GRAVITY
from curvelimit.vehicle.geometry import curve_geometry
from curvelimit.vehicle.params import VehicleParameters

REFERENCE_MAX_SPEED_KPH = {
    15.0: 23.16,
    30.0: 31.36,
    50.0: 39.83,
    80.0: 49.82,
    120.0: 60.50,
    230.0: 82.52,
    380.0: 104.57,
    570.0: 126.27,
}
REFERENCE_MAX_SPEED_MPS_RADIUS_30 = 8.712136971099


def sample_vehicle_parameters(curve_radius: float = 30.0) -> VehicleParameters:
    """Create the reference heavy vehicle for a given curve radius.

    Returns:
        Vehicle parameter set used by unit and integration tests.
    """
    return VehicleParameters(
        height=3.8,
        length=12.0,
        width=2.39,
        wheelbase=9.0,
        wheel_width=0.3,
        mass=12500.0,
        curve_radius=curve_radius,
        air_pressure=101330.0,
        temperature=313.0,
        wind_velocity=25.0,
        wind_angle=math.pi / 2.0,
        friction_coefficient=0.4,
    )


def calm_vehicle_parameters(curve_radius: float = 30.0) -> VehicleParameters:
    """Create a vehicle without wind and without aerodynamic load.

    Returns:
        Vehicle whose stability limit has a closed-form solution.
    """
    return VehicleParameters(
        curve_radius=curve_radius,
        wind_velocity=0.0,
        drag_coefficient=0.0,
    )


def calm_boundary_speed(vehicle: VehicleParameters) -> float:
    """Closed-form stability boundary of a vehicle without aerodynamic load.

    Without aerodynamic force the peak lateral force is the centripetal
    force and the peak torque is ``height / 2`` times its component normal to
    the support line, so both limits reduce to a bound on ``v^2``.

    Args:
        vehicle: Vehicle with zero wind and zero drag coefficient.

    Returns:
        Speed at which the first limit is reached [m/s].
    """
    geometry = curve_geometry(vehicle)
    weight_torque = (
        vehicle.mass
        * GRAVITY
        * (vehicle.width + vehicle.wheel_width * math.cos(geometry.tire_angle))
        / 2.0
    )
    friction_limit = vehicle.mass * GRAVITY * vehicle.friction_coefficient
    tip_force = 2.0 * weight_torque / (vehicle.height * math.cos(geometry.support_angle))
    centripetal_limit = min(friction_limit, tip_force)
    return math.sqrt(centripetal_limit * (vehicle.curve_radius + vehicle.width) / vehicle.mass)


def coarse_search_config() -> SearchConfig:
    """Search config with a coarse traversal grid for fast tests.

    Returns:
        Validated search configuration.
    """
    return build_search_config(time_steps=500, tolerance=1e-6)
