"""
Sensor Noise
============
Zero-mean Gaussian measurement noise.  Each synthesis pipeline owns one
``NoiseModel``; pass ``seed`` for repeatable runs.  Not thread-safe.
"""

from dataclasses import dataclass

import numpy as np

from . import config as cfg


@dataclass(frozen=True)
class NoiseConfig:
    """Per-channel standard deviations (units of the output channel)."""

    acc: float = cfg.ACC_NOISE
    gyro: float = cfg.GYRO_NOISE
    mag: float = cfg.MAG_NOISE
    temperature: float = cfg.TEMP_NOISE
    abs_pressure: float = cfg.ABS_PRESSURE_NOISE
    diff_pressure: float = cfg.DIFF_PRESSURE_NOISE
    baro_alt: float = cfg.BARO_ALT_NOISE

    @classmethod
    def zero(cls) -> "NoiseConfig":
        return cls(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


class NoiseModel:

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def sample(self) -> float:
        """One standard-normal sample."""
        return float(self._rng.standard_normal())

    def scaled(self, sigma: float) -> float:
        return sigma * self.sample()
