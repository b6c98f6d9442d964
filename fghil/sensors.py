"""
Sensor Generation from FlightGear State
=========================================
Turns a FlightGear FDM sample into the HIL_SENSOR and HIL_GPS payloads PX4
expects.

Coordinate frames
-----------------
Earth (NED):    X-north, Y-east, Z-down
Body:           X-fwd,   Y-right, Z-down

Earth → body uses RotationFrame.rotate_inverse (heading * pitch * roll).
"""

import math

import numpy as np

from . import config as cfg
from .geomag import ConstantGeomagneticModel, body_field
from .noise import NoiseConfig, NoiseModel
from .records import PositionReading, SensorReading
from .rotation import RotationFrame
from .units import ft_to_m, inhg_to_hpa


def time_usec(elapsed_sec: float) -> int:
    return int(elapsed_sec * 1e6)


class SensorSynthesizer:
    """IMU, magnetometer and air-data readings with additive noise."""

    def __init__(self, geomag=None, noise: NoiseModel | None = None,
                 noise_config: NoiseConfig | None = None):
        self.geomag = geomag if geomag is not None else ConstantGeomagneticModel()
        self.noise = noise if noise is not None else NoiseModel()
        self.noise_config = noise_config if noise_config is not None else NoiseConfig()

    def _noisy(self, values, sigma: float) -> np.ndarray:
        return np.array([v + self.noise.scaled(sigma) for v in values])

    def synthesize(self, sample) -> SensorReading:
        nc = self.noise_config
        frame = RotationFrame.from_sample(sample)

        acc = self._noisy((ft_to_m(sample.accel_x_fpss),
                           ft_to_m(sample.accel_y_fpss),
                           ft_to_m(sample.accel_z_fpss)), nc.acc)

        gyro = self._noisy(frame.body_rates(sample.roll_rate_dps,
                                            sample.pitch_rate_dps,
                                            sample.yaw_rate_dps), nc.gyro)

        mag = self._noisy(body_field(self.geomag, sample.latitude_deg,
                                     sample.longitude_deg, frame), nc.mag)

        temperature = sample.temperature_degc + self.noise.scaled(nc.temperature)
        abs_pressure = inhg_to_hpa(sample.pressure_inhg) + self.noise.scaled(nc.abs_pressure)
        pressure_alt = ft_to_m(sample.pressure_alt_ft) + self.noise.scaled(nc.baro_alt)
        diff_pressure = (inhg_to_hpa(sample.total_pressure_inhg - sample.pressure_inhg)
                         + self.noise.scaled(nc.diff_pressure))

        return SensorReading(
            time_usec=time_usec(sample.elapsed_sec),
            acc=acc,
            gyro=gyro,
            mag=mag,
            temperature=temperature,
            abs_pressure=abs_pressure,
            diff_pressure=diff_pressure,
            pressure_alt=pressure_alt,
            fields_updated=cfg.HIL_SENSOR_FIELDS_ALL,
        )


class PositionVelocitySynthesizer:
    """Idealised GPS: exact position and velocity, fixed quality figures."""

    def synthesize(self, sample) -> PositionReading:
        vn = round(ft_to_m(sample.speed_north_fps) * 100)
        ve = round(ft_to_m(sample.speed_east_fps) * 100)
        vd = round(ft_to_m(sample.speed_down_fps) * 100)

        return PositionReading(
            time_usec=time_usec(sample.elapsed_sec),
            fix_type=cfg.GPS_FIX_TYPE_3D,
            lat=int(sample.latitude_deg * 1e7),
            lon=int(sample.longitude_deg * 1e7),
            alt=int(ft_to_m(sample.altitude_ft) * 1000),
            eph=cfg.GPS_EPH,
            epv=cfg.GPS_EPV,
            vel=round(math.sqrt(vn * vn + ve * ve)),
            vn=vn,
            ve=ve,
            vd=vd,
            cog=course_over_ground(vn, ve),
            satellites_visible=cfg.GPS_SATELLITES,
        )


def course_over_ground(vn: float, ve: float) -> int:
    """
    Compass bearing of the horizontal velocity in centidegrees.

    atan2(vn, ve) is measured from east, counter-clockwise; negate and add
    90° to get north-referenced, clockwise.
    """
    cog = -math.degrees(math.atan2(vn, ve)) + 90.0
    if cog < 0:
        cog += 360.0
    return round(cog * 100) % 36000
