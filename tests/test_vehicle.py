"""
Unit tests for fghil/vehicle.py (tick handling and sample-rate monitoring).

Run with: pytest tests/test_vehicle.py -v
"""

import io
import math
import unittest
from contextlib import redirect_stdout

import numpy as np

from fghil.noise import NoiseConfig
from fghil.records import ActuatorCommand
from fghil.vehicle import SampleRateMonitor, VehicleState
from sample_data import make_sample


class TestSampleRateMonitor(unittest.TestCase):

    def test_first_sample_suppressed(self) -> None:
        self.assertIsNone(SampleRateMonitor().update(3.0))

    def test_rate(self) -> None:
        monitor = SampleRateMonitor()
        monitor.update(1.0)
        self.assertAlmostEqual(monitor.update(1.01), 100.0, places=6)

    def test_equal_timestamps(self) -> None:
        monitor = SampleRateMonitor()
        monitor.update(2.0)
        out = io.StringIO()
        with redirect_stdout(out):
            rate = monitor.update(2.0)
        self.assertIsNone(rate)
        self.assertIn("Non-increasing", out.getvalue())

    def test_time_going_backwards_resyncs(self) -> None:
        monitor = SampleRateMonitor()
        monitor.update(5.0)
        with redirect_stdout(io.StringIO()):
            self.assertIsNone(monitor.update(1.0))
        self.assertAlmostEqual(monitor.update(1.5), 2.0)

    def test_low_rate_warns_but_reports(self) -> None:
        monitor = SampleRateMonitor(warn_below_hz=20.0)
        monitor.update(0.0)
        out = io.StringIO()
        with redirect_stdout(out):
            rate = monitor.update(0.1)
        self.assertAlmostEqual(rate, 10.0)
        self.assertIn("Low sample rate", out.getvalue())


class TestVehicleState(unittest.TestCase):

    def setUp(self) -> None:
        self.vehicle = VehicleState.create(noise_config=NoiseConfig.zero())

    def test_tick(self) -> None:
        result = self.vehicle.set_fdm_sample(make_sample())

        self.assertIsNone(result.rate_hz)
        self.assertEqual(result.sensor.time_usec, 12_500_000)
        self.assertEqual(result.position.time_usec, 12_500_000)

    def test_equal_timestamps_still_synthesize(self) -> None:
        sample = make_sample(speed_north_fps=10.0)
        first = self.vehicle.set_fdm_sample(sample)
        with redirect_stdout(io.StringIO()):
            second = self.vehicle.set_fdm_sample(sample)

        self.assertTrue(second.rate_hz is None or math.isfinite(second.rate_hz))
        self.assertEqual(second.position, first.position)
        np.testing.assert_array_equal(second.sensor.acc, first.sensor.acc)

    def test_rate_across_ticks(self) -> None:
        self.vehicle.set_fdm_sample(make_sample(elapsed_sec=1.0))
        result = self.vehicle.set_fdm_sample(make_sample(elapsed_sec=1.02))
        self.assertAlmostEqual(result.rate_hz, 50.0, places=6)

    def test_actuator_command(self) -> None:
        np.testing.assert_array_equal(self.vehicle.controls, np.zeros(4))

        armed = ActuatorCommand(armed=True, controls=(0.1, 0.2, 0.3, 0.9))
        out = self.vehicle.set_actuator_command(armed)
        np.testing.assert_array_almost_equal(out, [0.1, -0.2, 0.3, 0.9])
        np.testing.assert_array_equal(self.vehicle.controls, out)

        self.vehicle.set_actuator_command(ActuatorCommand(armed=False, controls=(0.1, 0.2, 0.3, 0.9)))
        np.testing.assert_array_equal(self.vehicle.controls, np.zeros(4))

    def test_seeded_pipelines_agree(self) -> None:
        a = VehicleState.create(seed=99).set_fdm_sample(make_sample())
        b = VehicleState.create(seed=99).set_fdm_sample(make_sample())
        np.testing.assert_array_equal(a.sensor.gyro, b.sensor.gyro)
        self.assertEqual(a.sensor.temperature, b.sensor.temperature)


if __name__ == "__main__":
    unittest.main()
