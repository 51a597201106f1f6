"""Aerodynamic side-load calculations."""

from __future__ import annotations

import numpy as np

from curvelimit.utils.constants import GAS_CONSTANT
from curvelimit.vehicle.params import VehicleParameters


def cross_sectional_area(
    vehicle: VehicleParameters,
    relative_bearing: np.ndarray | float,
) -> np.ndarray:
    """Projected vehicle silhouette facing the relative wind.

    Args:
        vehicle: Vehicle parameter set providing body dimensions.
        relative_bearing: Relative wind bearing minus curve position angle
            ``lambda - phi`` [rad].

    Returns:
        Projected area [m^2].
    """
    bearing = np.asarray(relative_bearing, dtype=float)
    return vehicle.height * (
        np.abs(vehicle.width * np.cos(bearing)) + np.abs(vehicle.length * np.sin(bearing))
    )


def aerodynamic_force(
    vehicle: VehicleParameters,
    area: np.ndarray | float,
    relative_velocity: np.ndarray | float,
) -> np.ndarray:
    """Drag-style force of the relative wind acting on the projected area.

    Air density follows from pressure and temperature via the ideal-gas
    relation; the product is kept in pressure form for reproducibility.

    Args:
        vehicle: Vehicle parameter set providing shape factor and ambient air.
        area: Projected area facing the relative wind [m^2].
        relative_velocity: Magnitude of the relative wind [m/s].

    Returns:
        Aerodynamic force [N].
    """
    area = np.asarray(area, dtype=float)
    relative_velocity = np.asarray(relative_velocity, dtype=float)
    return (
        vehicle.drag_coefficient * vehicle.air_pressure * area * relative_velocity**2
    ) / (GAS_CONSTANT * vehicle.temperature)
