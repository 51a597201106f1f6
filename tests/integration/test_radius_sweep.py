"""End-to-end tests of the reference radius sweep."""

from __future__ import annotations

import io
import unittest

import numpy as np

from curvelimit.analysis.report import format_speed_table
from curvelimit.simulation.sweep import DEFAULT_TEST_RADII, sweep_curve_radii
from curvelimit.utils.exceptions import ConfigurationError, DomainError
from curvelimit.vehicle.params import VehicleParameters, default_vehicle_parameters
from tests.helpers import REFERENCE_MAX_SPEED_KPH, coarse_search_config, sample_vehicle_parameters


class ReferenceSweepTests(unittest.TestCase):
    """Regression tests against the golden reference table."""

    @classmethod
    def setUpClass(cls) -> None:
        """Solve the reference sweep once for all tests."""
        cls.sweep = sweep_curve_radii(default_vehicle_parameters())

    def test_default_radii(self) -> None:
        """Evaluate the eight reference radii in order."""
        self.assertEqual(DEFAULT_TEST_RADII, (15.0, 30.0, 50.0, 80.0, 120.0, 230.0, 380.0, 570.0))
        np.testing.assert_array_equal(self.sweep.radii, np.array(DEFAULT_TEST_RADII))

    def test_speeds_match_golden_values(self) -> None:
        """Reproduce the reference km/h table to two decimals."""
        for result in self.sweep.results:
            with self.subTest(radius=result.curve_radius):
                self.assertTrue(result.is_feasible)
                self.assertAlmostEqual(
                    result.max_speed_kph or 0.0,
                    REFERENCE_MAX_SPEED_KPH[result.curve_radius],
                    delta=0.005,
                )

    def test_report_matches_golden_table(self) -> None:
        """Format the reference report exactly."""
        self.assertEqual(
            format_speed_table(self.sweep),
            "Radius (m) | Max Safe Speed (km/h)\n"
            "-----------|-----------------\n"
            "        15 | 23.16\n"
            "        30 | 31.36\n"
            "        50 | 39.83\n"
            "        80 | 49.82\n"
            "       120 | 60.50\n"
            "       230 | 82.52\n"
            "       380 | 104.57\n"
            "       570 | 126.27\n",
        )

    def test_radius_30_is_a_realistic_heavy_vehicle_speed(self) -> None:
        """Stay well below the search ceiling and within 10 to 100 km/h."""
        result = self.sweep.results[1]
        assert result.max_speed is not None
        self.assertGreater(result.max_speed, 0.0)
        self.assertLess(result.max_speed, 10_000.0)
        self.assertGreater(result.max_speed_kph or 0.0, 10.0)
        self.assertLess(result.max_speed_kph or 0.0, 100.0)


class SweepBehaviourTests(unittest.TestCase):
    """Validate sweep orchestration options."""

    def test_threaded_sweep_matches_sequential_sweep(self) -> None:
        """Produce identical results regardless of worker count."""
        vehicle = sample_vehicle_parameters()
        radii = (15.0, 80.0, 570.0, 30.0)
        config = coarse_search_config()

        sequential = sweep_curve_radii(vehicle, radii, config)
        threaded = sweep_curve_radii(vehicle, radii, config, max_workers=3)

        self.assertEqual(sequential.results, threaded.results)
        np.testing.assert_array_equal(threaded.radii, np.array(radii))

    def test_sweep_leaves_base_vehicle_untouched(self) -> None:
        """Solve each radius on its own copy of the vehicle."""
        vehicle = sample_vehicle_parameters(30.0)
        sweep = sweep_curve_radii(vehicle, (50.0, 120.0), coarse_search_config())
        self.assertEqual(vehicle.curve_radius, 30.0)
        self.assertIs(sweep.vehicle, vehicle)

    def test_progress_output_reaches_completion(self) -> None:
        """Emit a final progress line after the last radius."""
        stream = io.StringIO()
        sweep_curve_radii(
            sample_vehicle_parameters(),
            (30.0, 50.0),
            coarse_search_config(),
            progress_prefix="sweep",
            progress_stream=stream,
        )
        self.assertTrue(stream.getvalue().endswith("radius 2/2 (R=50 m)\n"))

    def test_infeasible_radius_yields_nan_speed(self) -> None:
        """Mark infeasible radii with NaN in the speed array."""
        vehicle = VehicleParameters(friction_coefficient=0.05)
        sweep = sweep_curve_radii(vehicle, (4.6, 30.0), coarse_search_config())
        self.assertTrue(np.all(np.isnan(sweep.max_speeds)))

    def test_invalid_sweeps_raise(self) -> None:
        """Reject empty radius lists, bad worker counts and impossible radii."""
        vehicle = sample_vehicle_parameters()
        with self.assertRaises(ConfigurationError):
            sweep_curve_radii(vehicle, ())
        with self.assertRaises(ConfigurationError):
            sweep_curve_radii(vehicle, (30.0,), max_workers=0)
        with self.assertRaises(DomainError):
            sweep_curve_radii(vehicle, (30.0, 4.0), coarse_search_config())


if __name__ == "__main__":
    unittest.main()
