"""Tests for package export surfaces."""

from __future__ import annotations

import unittest

import curvelimit
import curvelimit.analysis as analysis_pkg
import curvelimit.simulation as simulation_pkg
import curvelimit.utils as utils_pkg
import curvelimit.vehicle as vehicle_pkg


class PackageExportTests(unittest.TestCase):
    """Validate that every name listed in ``__all__`` resolves."""

    def test_all_exports_resolve(self) -> None:
        """Resolve each public name of each package."""
        for package in (curvelimit, analysis_pkg, simulation_pkg, utils_pkg, vehicle_pkg):
            for name in package.__all__:
                with self.subTest(package=package.__name__, name=name):
                    self.assertTrue(hasattr(package, name))

    def test_top_level_surface(self) -> None:
        """Expose the core calculator from the package root."""
        self.assertIsNotNone(curvelimit.VehicleParameters)
        self.assertIsNotNone(curvelimit.find_max_safe_speed)
        self.assertIsNotNone(curvelimit.sweep_curve_radii)
        self.assertIsNone(curvelimit.NO_SOLUTION)

    def test_constants(self) -> None:
        """Keep the physical constants of the model."""
        self.assertEqual(utils_pkg.GRAVITY, 9.80665)
        self.assertEqual(utils_pkg.GAS_CONSTANT, 287.05)
        self.assertEqual(utils_pkg.DRAG_COEFFICIENT, 0.525)


if __name__ == "__main__":
    unittest.main()
