"""Tip-over and slide-out checks for a vehicle traversing a curve."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from curvelimit.simulation.config import StabilityNumerics
from curvelimit.utils.constants import GRAVITY
from curvelimit.utils.exceptions import ConfigurationError
from curvelimit.vehicle.aero import aerodynamic_force, cross_sectional_area
from curvelimit.vehicle.geometry import CurveGeometry, curve_geometry
from curvelimit.vehicle.params import VehicleParameters


@dataclass(frozen=True)
class StabilityReport:
    """Worst-case loads of one curve traversal and the matching thresholds.

    Args:
        speed: Forward speed of the traversal [m/s].
        max_force: Peak lateral tire force over front and rear axle [N].
        max_torque: Peak overturning torque about the outer contact line [N*m].
        weight_torque: Restoring torque of the vehicle weight [N*m].
        friction_limit: Lateral force the tires can transmit [N].
        peak_force_time: Traversal time at which ``max_force`` occurs [s].
        peak_torque_time: Traversal time at which ``max_torque`` occurs [s].
    """

    speed: float
    max_force: float
    max_torque: float
    weight_torque: float
    friction_limit: float
    peak_force_time: float
    peak_torque_time: float

    @property
    def tips_over(self) -> bool:
        """Whether the overturning torque reaches the restoring torque."""
        return self.max_torque >= self.weight_torque

    @property
    def slides_out(self) -> bool:
        """Whether the lateral tire force reaches the friction limit."""
        return self.max_force >= self.friction_limit

    @property
    def exceeds_limits(self) -> bool:
        """Whether either failure mode occurs at this speed."""
        return self.tips_over or self.slides_out

    @property
    def torque_utilization(self) -> float:
        """Peak torque as a fraction of the restoring torque."""
        return self.max_torque / self.weight_torque

    @property
    def force_utilization(self) -> float:
        """Peak lateral force as a fraction of the friction limit."""
        return self.max_force / self.friction_limit


class StabilityEvaluator:
    """Simulate the traversal of a curve and compare peak loads to limits.

    The vehicle sweeps from curve entry to the quarter-turn point. The
    traversal is sampled at equally spaced times; relative wind, projected
    area, aerodynamic side force, axle lateral forces and overturning torque
    are evaluated for all samples at once.
    """

    def __init__(
        self,
        vehicle: VehicleParameters,
        numerics: StabilityNumerics | None = None,
    ) -> None:
        """Validate inputs and precompute speed-independent quantities.

        Args:
            vehicle: Vehicle parameter set including the curve radius.
            numerics: Traversal discretization. Defaults to
                :class:`StabilityNumerics`.

        Raises:
            curvelimit.utils.exceptions.ConfigurationError: If vehicle
                parameters or numerics are invalid.
            curvelimit.utils.exceptions.DomainError: If the curve is too
                tight for the wheelbase.
        """
        vehicle.validate()
        self.numerics = numerics or StabilityNumerics()
        self.numerics.validate()
        self.vehicle = vehicle
        self.geometry: CurveGeometry = curve_geometry(vehicle)

        theta = self.geometry.tire_angle
        self.weight_torque = (
            vehicle.mass * GRAVITY * (vehicle.width + vehicle.wheel_width * math.cos(theta))
        ) / 2.0
        self.friction_limit = vehicle.mass * GRAVITY * vehicle.friction_coefficient

        self._wind_vertical = vehicle.wind_velocity * math.cos(vehicle.wind_angle)
        self._wind_horizontal = vehicle.wind_velocity * math.sin(vehicle.wind_angle)

    def _sample_times(self, speed: float) -> np.ndarray:
        """Build traversal sample times over ``[0, time_max)``.

        A stationary vehicle does not traverse the curve. Neither does any
        vehicle on a curve of radius ``wheelbase / 2``: the tire angle is a
        right angle, the sweep angle is zero and so is ``time_max``. Both
        cases are checked in the entry pose alone rather than on an empty
        interval, which would report no load at all.

        Args:
            speed: Forward speed [m/s].

        Returns:
            Sample times [s], or the single entry time ``0`` when no
            traversal happens.
        """
        if speed == 0.0 or self.geometry.sweep_angle <= 0.0:
            return np.zeros(1)
        time_max = (self.vehicle.curve_radius * self.geometry.sweep_angle) / speed
        if not math.isfinite(time_max):
            return np.zeros(1)
        time_step = time_max / self.numerics.time_steps
        return np.arange(self.numerics.time_steps, dtype=float) * time_step

    def evaluate(self, speed: float) -> StabilityReport:
        """Compute worst-case loads for one traversal at constant speed.

        Args:
            speed: Forward speed [m/s].

        Returns:
            Peak loads, thresholds and times of the peaks.

        Raises:
            curvelimit.utils.exceptions.ConfigurationError: If ``speed`` is
                negative or non-finite.
        """
        speed = float(speed)
        if not math.isfinite(speed) or speed < 0.0:
            msg = f"speed must be finite and non-negative, got: {speed!r}"
            raise ConfigurationError(msg)

        vehicle = self.vehicle
        theta = self.geometry.tire_angle
        alpha = self.geometry.support_angle

        time = self._sample_times(speed)
        phi = (speed * time) / vehicle.curve_radius
        heading = phi + theta

        vertical = speed * np.cos(heading) + self._wind_vertical
        horizontal = speed * np.sin(heading) + self._wind_horizontal
        relative_velocity = np.hypot(vertical, horizontal)
        wind_bearing = np.arctan2(horizontal, vertical)
        relative_bearing = wind_bearing - phi

        area = cross_sectional_area(vehicle, relative_bearing)
        aero = aerodynamic_force(vehicle, area, relative_velocity)

        centripetal = (vehicle.mass * speed**2) / (vehicle.curve_radius + vehicle.width)
        modified_centripetal = centripetal * math.cos(alpha)

        front = centripetal + aero * np.sin(relative_bearing - theta)
        rear = centripetal * math.cos(theta) + aero * np.sin(relative_bearing)
        lateral = np.maximum(front, rear)
        torque = np.abs(
            (vehicle.height / 2.0)
            * (aero * np.sin(relative_bearing - alpha) + modified_centripetal)
        )

        force_idx = int(np.argmax(lateral))
        torque_idx = int(np.argmax(torque))
        return StabilityReport(
            speed=speed,
            max_force=max(0.0, float(lateral[force_idx])),
            max_torque=max(0.0, float(torque[torque_idx])),
            weight_torque=self.weight_torque,
            friction_limit=self.friction_limit,
            peak_force_time=float(time[force_idx]),
            peak_torque_time=float(time[torque_idx]),
        )

    def exceeds_limits(self, speed: float) -> bool:
        """Check whether the vehicle tips over or slides out at ``speed``.

        Args:
            speed: Forward speed [m/s].

        Returns:
            ``True`` if peak torque or peak lateral force reaches its limit.
        """
        return self.evaluate(speed).exceeds_limits


def exceeds_limits(
    vehicle: VehicleParameters,
    speed: float,
    numerics: StabilityNumerics | None = None,
) -> bool:
    """Check a single speed without keeping an evaluator around.

    Args:
        vehicle: Vehicle parameter set including the curve radius.
        speed: Forward speed [m/s].
        numerics: Traversal discretization.

    Returns:
        ``True`` if the vehicle tips over or slides out.
    """
    return StabilityEvaluator(vehicle, numerics).exceeds_limits(speed)
