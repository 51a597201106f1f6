"""Tests for turning geometry and aerodynamic load primitives."""

from __future__ import annotations

import math
import unittest

import numpy as np

from curvelimit.utils.exceptions import ConfigurationError, DomainError
from curvelimit.vehicle.aero import aerodynamic_force, cross_sectional_area
from curvelimit.vehicle.geometry import curve_geometry, min_curve_radius
from curvelimit.vehicle.params import VehicleParameters
from tests.helpers import sample_vehicle_parameters


class CurveGeometryTests(unittest.TestCase):
    """Unit tests for tire and support angles."""

    def test_angles_for_reference_curve(self) -> None:
        """Match tire and support angle formulas for a 30 m curve."""
        geometry = curve_geometry(sample_vehicle_parameters(30.0))
        tire_angle = math.asin(9.0 / 60.0)
        support_angle = math.atan(
            (0.3 * math.cos(tire_angle)) / (9.0 * (1.0 + 0.5 * math.sin(tire_angle)))
        )

        self.assertAlmostEqual(geometry.tire_angle, tire_angle, places=15)
        self.assertAlmostEqual(geometry.support_angle, support_angle, places=15)
        self.assertAlmostEqual(geometry.sweep_angle, math.pi / 2.0 - tire_angle, places=15)

    def test_tire_angle_shrinks_with_radius(self) -> None:
        """Approach straight-ahead steering on wide curves."""
        tight = curve_geometry(sample_vehicle_parameters(15.0))
        wide = curve_geometry(sample_vehicle_parameters(570.0))
        self.assertGreater(tight.tire_angle, wide.tire_angle)
        self.assertGreater(wide.tire_angle, 0.0)

    def test_radius_below_half_wheelbase_raises_domain_error(self) -> None:
        """Fail explicitly instead of propagating NaN from asin."""
        vehicle = sample_vehicle_parameters(4.4)
        self.assertEqual(min_curve_radius(vehicle), 4.5)
        with self.assertRaises(DomainError):
            curve_geometry(vehicle)

    def test_radius_equal_to_half_wheelbase_is_admissible(self) -> None:
        """Allow the limiting geometry with a right-angle tire angle."""
        geometry = curve_geometry(sample_vehicle_parameters(4.5))
        self.assertAlmostEqual(geometry.tire_angle, math.pi / 2.0)
        self.assertAlmostEqual(geometry.sweep_angle, 0.0)

    def test_non_positive_radius_raises_configuration_error(self) -> None:
        """Treat non-positive radii as invalid input, not as a domain problem."""
        with self.assertRaises(ConfigurationError):
            curve_geometry(VehicleParameters(curve_radius=0.0))
        with self.assertRaises(ConfigurationError):
            curve_geometry(VehicleParameters(curve_radius=-30.0))


class AerodynamicLoadTests(unittest.TestCase):
    """Unit tests for projected area and aerodynamic side force."""

    def test_projected_area_for_head_and_side_wind(self) -> None:
        """Expose the front face head-on and the full side to a crosswind."""
        vehicle = sample_vehicle_parameters()
        area = cross_sectional_area(vehicle, np.array([0.0, math.pi / 2.0, math.pi]))
        np.testing.assert_allclose(area, [3.8 * 2.39, 3.8 * 12.0, 3.8 * 2.39], rtol=1e-12)

    def test_projected_area_combines_faces_for_oblique_wind(self) -> None:
        """Combine front and side faces for oblique relative wind."""
        vehicle = sample_vehicle_parameters()
        oblique = float(cross_sectional_area(vehicle, math.pi / 4.0))
        front = float(cross_sectional_area(vehicle, 0.0))

        self.assertGreater(oblique, front)
        self.assertAlmostEqual(oblique, 3.8 * (2.39 + 12.0) * math.sqrt(2.0) / 2.0, places=9)

    def test_projected_area_peaks_at_body_diagonal(self) -> None:
        """Expose the largest silhouette when the wind runs along the diagonal."""
        vehicle = sample_vehicle_parameters()
        diagonal = math.atan(12.0 / 2.39)
        peak = float(cross_sectional_area(vehicle, diagonal))
        bearings = np.linspace(0.0, math.pi, 721)

        self.assertAlmostEqual(peak, 3.8 * math.hypot(2.39, 12.0), places=9)
        self.assertGreater(peak, float(cross_sectional_area(vehicle, math.pi / 2.0)))
        self.assertLessEqual(float(np.max(cross_sectional_area(vehicle, bearings))), peak + 1e-9)

    def test_aerodynamic_force_formula(self) -> None:
        """Scale with area and the square of the relative wind speed."""
        vehicle = sample_vehicle_parameters()
        force = aerodynamic_force(vehicle, np.array([1.0, 2.0]), np.array([10.0, 20.0]))
        expected = 0.525 * 101330.0 * 100.0 / (287.05 * 313.0)

        self.assertAlmostEqual(float(force[0]), expected, places=9)
        self.assertAlmostEqual(float(force[1]), 8.0 * expected, places=6)

    def test_zero_drag_coefficient_removes_aerodynamic_force(self) -> None:
        """Produce no side force when the shape factor is zero."""
        vehicle = VehicleParameters(drag_coefficient=0.0)
        self.assertEqual(float(aerodynamic_force(vehicle, 45.6, 30.0)), 0.0)


if __name__ == "__main__":
    unittest.main()
