"""
Typed records exchanged between FlightGear, the sensor model and PX4.
"""

from dataclasses import dataclass, fields

import numpy as np


@dataclass
class FlightDynamicsSample:
    """One FlightGear FDM update, in FlightGear's own units."""

    elapsed_sec: float
    latitude_deg: float
    longitude_deg: float
    altitude_ft: float
    roll_deg: float
    pitch_deg: float
    heading_deg: float
    roll_rate_dps: float
    pitch_rate_dps: float
    yaw_rate_dps: float
    accel_x_fpss: float
    accel_y_fpss: float
    accel_z_fpss: float
    pressure_inhg: float
    total_pressure_inhg: float
    pressure_alt_ft: float
    temperature_degc: float
    speed_north_fps: float
    speed_east_fps: float
    speed_down_fps: float

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))


@dataclass
class SensorReading:
    """HIL_SENSOR payload: body frame, SI units, pressures in hPa."""

    time_usec: int
    acc: np.ndarray           # m/s²
    gyro: np.ndarray          # rad/s
    mag: np.ndarray           # gauss
    temperature: float        # °C
    abs_pressure: float       # hPa
    diff_pressure: float      # hPa
    pressure_alt: float       # m
    fields_updated: int


@dataclass
class PositionReading:
    """HIL_GPS payload, already scaled to MAVLink integer units."""

    time_usec: int
    fix_type: int
    lat: int                  # deg × 1e7
    lon: int                  # deg × 1e7
    alt: int                  # mm
    eph: int
    epv: int
    vel: int                  # cm/s
    vn: int                   # cm/s
    ve: int
    vd: int
    cog: int                  # cdeg, 0..35999
    satellites_visible: int


@dataclass
class ActuatorCommand:
    armed: bool
    controls: tuple
