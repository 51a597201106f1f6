"""Vehicle parameters, turning geometry and aerodynamic loads."""

from curvelimit.vehicle.aero import aerodynamic_force, cross_sectional_area
from curvelimit.vehicle.geometry import CurveGeometry, curve_geometry, min_curve_radius
from curvelimit.vehicle.params import VehicleParameters, default_vehicle_parameters

__all__ = [
    "CurveGeometry",
    "VehicleParameters",
    "aerodynamic_force",
    "cross_sectional_area",
    "curve_geometry",
    "default_vehicle_parameters",
    "min_curve_radius",
]
