"""Turning geometry derived from curve radius and wheel layout."""

from __future__ import annotations

import math
from dataclasses import dataclass

from curvelimit.utils.exceptions import ConfigurationError, DomainError
from curvelimit.vehicle.params import VehicleParameters


@dataclass(frozen=True)
class CurveGeometry:
    """Vehicle attitude angles for a given curve.

    Args:
        tire_angle: Steer angle of the front tires relative to the body [rad].
        support_angle: Angle of the outer support line between wheel contact
            points [rad].
    """

    tire_angle: float
    support_angle: float

    @property
    def sweep_angle(self) -> float:
        """Heading change from curve entry to the quarter-turn point.

        Returns:
            Swept angle ``pi/2 - tire_angle`` [rad].
        """
        return math.pi / 2.0 - self.tire_angle


def min_curve_radius(vehicle: VehicleParameters) -> float:
    """Smallest curve radius for which a tire angle exists.

    Args:
        vehicle: Vehicle parameter set providing the wheelbase.

    Returns:
        Minimum admissible curve radius ``wheelbase / 2`` [m].
    """
    return vehicle.wheelbase / 2.0


def curve_geometry(vehicle: VehicleParameters) -> CurveGeometry:
    """Compute tire and support angles for the vehicle's curve radius.

    Args:
        vehicle: Vehicle parameter set including ``curve_radius``.

    Returns:
        Tire and support angles [rad].

    Raises:
        curvelimit.utils.exceptions.ConfigurationError: If the curve radius is
            not positive.
        curvelimit.utils.exceptions.DomainError: If the wheelbase does not fit
            the curve, i.e. ``wheelbase / (2 * curve_radius) > 1``.
    """
    if vehicle.curve_radius <= 0.0:
        msg = "curve_radius must be positive"
        raise ConfigurationError(msg)

    ratio = vehicle.wheelbase / (2.0 * vehicle.curve_radius)
    if ratio > 1.0:
        msg = (
            f"curve_radius {vehicle.curve_radius} m is too small for wheelbase "
            f"{vehicle.wheelbase} m; minimum radius is {min_curve_radius(vehicle)} m"
        )
        raise DomainError(msg)

    tire_angle = abs(math.asin(ratio))
    support_angle = math.atan(
        (vehicle.wheel_width * math.cos(tire_angle))
        / (vehicle.wheelbase * (1.0 + 0.5 * math.sin(tire_angle)))
    )
    return CurveGeometry(tire_angle=tire_angle, support_angle=support_angle)
