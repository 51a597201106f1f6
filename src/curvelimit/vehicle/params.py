"""Vehicle and environment parameter definitions for curve stability checks."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace

from curvelimit.utils.constants import DRAG_COEFFICIENT, GAS_CONSTANT
from curvelimit.utils.exceptions import ConfigurationError

DEFAULT_HEIGHT = 3.8
DEFAULT_LENGTH = 12.0
DEFAULT_WIDTH = 2.39
DEFAULT_WHEELBASE = 9.0
DEFAULT_WHEEL_WIDTH = 0.3
DEFAULT_MASS = 12500.0
DEFAULT_CURVE_RADIUS = 30.0
DEFAULT_AIR_PRESSURE = 101330.0
DEFAULT_TEMPERATURE = 313.0
DEFAULT_WIND_VELOCITY = 25.0
DEFAULT_WIND_ANGLE = math.pi / 2.0
DEFAULT_FRICTION_COEFFICIENT = 0.4

_STRICTLY_POSITIVE_FIELDS = (
    "height",
    "length",
    "width",
    "wheelbase",
    "wheel_width",
    "mass",
    "curve_radius",
    "air_pressure",
    "temperature",
    "friction_coefficient",
)


@dataclass(frozen=True)
class VehicleParameters:
    """Geometry, mass and operating conditions of a heavy vehicle in a curve.

    Defaults describe a worst-case articulated truck in hot weather with a
    strong crosswind.

    Args:
        height: Vehicle body height [m].
        length: Vehicle body length [m].
        width: Vehicle body width [m].
        wheelbase: Distance between front and rear wheel contact points [m].
        wheel_width: Tire contact width [m].
        mass: Vehicle mass [kg].
        curve_radius: Radius of the curve being traversed [m].
        air_pressure: Ambient air pressure [Pa].
        temperature: Ambient air temperature [K].
        wind_velocity: Ambient wind speed [m/s].
        wind_angle: Ambient wind bearing [rad].
        friction_coefficient: Static tire/road friction coefficient [-].
        drag_coefficient: Aerodynamic side-load shape factor [-].
    """

    height: float = DEFAULT_HEIGHT
    length: float = DEFAULT_LENGTH
    width: float = DEFAULT_WIDTH
    wheelbase: float = DEFAULT_WHEELBASE
    wheel_width: float = DEFAULT_WHEEL_WIDTH
    mass: float = DEFAULT_MASS
    curve_radius: float = DEFAULT_CURVE_RADIUS
    air_pressure: float = DEFAULT_AIR_PRESSURE
    temperature: float = DEFAULT_TEMPERATURE
    wind_velocity: float = DEFAULT_WIND_VELOCITY
    wind_angle: float = DEFAULT_WIND_ANGLE
    friction_coefficient: float = DEFAULT_FRICTION_COEFFICIENT
    drag_coefficient: float = DRAG_COEFFICIENT

    @property
    def air_density(self) -> float:
        """Air density from the ideal-gas relation.

        Returns:
            Air density [kg/m^3].
        """
        return self.air_pressure / (GAS_CONSTANT * self.temperature)

    def with_curve_radius(self, curve_radius: float) -> VehicleParameters:
        """Return a copy of this parameter set for another curve radius.

        Args:
            curve_radius: Radius of the curve being traversed [m].

        Returns:
            New parameter set that differs only in ``curve_radius``.
        """
        return replace(self, curve_radius=float(curve_radius))

    def validate(self) -> None:
        """Validate parameter values before evaluation.

        Raises:
            curvelimit.utils.exceptions.ConfigurationError: If any parameter
                is non-finite or violates its defined bound.
        """
        for item in fields(self):
            value = getattr(self, item.name)
            if not math.isfinite(value):
                msg = f"{item.name} must be finite, got: {value!r}"
                raise ConfigurationError(msg)
        for name in _STRICTLY_POSITIVE_FIELDS:
            if getattr(self, name) <= 0.0:
                msg = f"{name} must be positive"
                raise ConfigurationError(msg)
        if self.wind_velocity < 0.0:
            msg = "wind_velocity must be non-negative"
            raise ConfigurationError(msg)
        if self.drag_coefficient < 0.0:
            msg = "drag_coefficient must be non-negative"
            raise ConfigurationError(msg)


def default_vehicle_parameters() -> VehicleParameters:
    """Create the reference heavy-vehicle scenario.

    Returns:
        Vehicle parameter set with all reference defaults.
    """
    return VehicleParameters()
