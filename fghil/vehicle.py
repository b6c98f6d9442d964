"""
Vehicle State
=============
Per-tick glue between FlightGear and PX4.  One instance per simulation
thread: it owns the noise generator (through its SensorSynthesizer) and the
last FlightGear timestamp.
"""

from typing import NamedTuple

import numpy as np

from . import config as cfg
from .actuators import ActuatorMapper
from .noise import NoiseConfig, NoiseModel
from .records import PositionReading, SensorReading
from .sensors import PositionVelocitySynthesizer, SensorSynthesizer


class SampleRateMonitor:
    """
    Estimates the FlightGear update rate from consecutive timestamps.

    ``update`` returns None instead of a rate on the first sample and when
    time did not advance (pause, reset, duplicated packet).
    """

    def __init__(self, warn_below_hz: float = cfg.MIN_SAMPLE_RATE_HZ):
        self.warn_below_hz = warn_below_hz
        self.last_time = None

    def update(self, elapsed_sec: float) -> float | None:
        last, self.last_time = self.last_time, elapsed_sec
        if last is None:
            return None

        dt = elapsed_sec - last
        if dt <= 0:
            print(f"[VehicleState] Non-increasing timestamp "
                  f"({last:.6f} s → {elapsed_sec:.6f} s), rate check skipped")
            return None

        freq = 1.0 / dt
        if freq < self.warn_below_hz:
            print(f"[VehicleState] Low sample rate: {freq:.1f} Hz")
        return freq


class TickResult(NamedTuple):
    sensor: SensorReading
    position: PositionReading
    rate_hz: float | None


class VehicleState:

    def __init__(self, sensor_synth: SensorSynthesizer,
                 position_synth: PositionVelocitySynthesizer,
                 mapper: ActuatorMapper,
                 rate_monitor: SampleRateMonitor | None = None):
        self.sensor_synth = sensor_synth
        self.position_synth = position_synth
        self.mapper = mapper
        self.rate_monitor = rate_monitor if rate_monitor is not None else SampleRateMonitor()
        self.controls = np.zeros(len(mapper))

    @classmethod
    def create(cls, seed: int | None = None, noise_config: NoiseConfig | None = None,
               geomag=None, index=cfg.CONTROL_INDEX, scale=cfg.CONTROL_SCALE):
        """Wire up one pipeline with its own noise generator."""
        sensor_synth = SensorSynthesizer(geomag=geomag, noise=NoiseModel(seed),
                                         noise_config=noise_config)
        return cls(sensor_synth, PositionVelocitySynthesizer(),
                   ActuatorMapper(index, scale))

    def set_fdm_sample(self, sample) -> TickResult:
        rate_hz = self.rate_monitor.update(sample.elapsed_sec)
        return TickResult(
            sensor=self.sensor_synth.synthesize(sample),
            position=self.position_synth.synthesize(sample),
            rate_hz=rate_hz,
        )

    def set_actuator_command(self, command) -> np.ndarray:
        self.controls = self.mapper.map(command)
        return self.controls
