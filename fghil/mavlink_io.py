"""
PX4 MAVLink Link
================
HIL_SENSOR / HIL_GPS out, HIL_ACTUATOR_CONTROLS in.

Message contract
----------------
  TRANSMIT:
    HIL_SENSOR             (msg 107)  — SensorReading
    HIL_GPS                (msg 113)  — PositionReading
    HEARTBEAT              (msg   0)  — MAV_TYPE_GENERIC, MAV_AUTOPILOT_INVALID

  RECEIVE:
    HIL_ACTUATOR_CONTROLS  (msg  93)  — controls[16], mode (armed flag)
"""

from pymavlink import mavutil

from . import config as cfg
from .records import ActuatorCommand


def sensor_message(mav, reading):
    """Build a HIL_SENSOR message on the MAVLink instance ``mav``."""
    return mav.hil_sensor_encode(
        reading.time_usec,
        float(reading.acc[0]), float(reading.acc[1]), float(reading.acc[2]),
        float(reading.gyro[0]), float(reading.gyro[1]), float(reading.gyro[2]),
        float(reading.mag[0]), float(reading.mag[1]), float(reading.mag[2]),
        reading.abs_pressure,
        reading.diff_pressure,
        reading.pressure_alt,
        reading.temperature,
        reading.fields_updated,
    )


def gps_message(mav, reading):
    """Build a HIL_GPS message on the MAVLink instance ``mav``."""
    return mav.hil_gps_encode(
        reading.time_usec,
        reading.fix_type,
        reading.lat,
        reading.lon,
        reading.alt,
        reading.eph,
        reading.epv,
        reading.vel,
        reading.vn,
        reading.ve,
        reading.vd,
        reading.cog,
        reading.satellites_visible,
    )


def actuator_command(msg) -> ActuatorCommand:
    """HIL_ACTUATOR_CONTROLS → ActuatorCommand."""
    armed = bool(msg.mode & mavutil.mavlink.MAV_MODE_FLAG_SAFETY_ARMED)
    return ActuatorCommand(armed=armed, controls=tuple(msg.controls))


class PX4Link:
    """PX4 connects to us on the simulator port; we speak HIL messages."""

    def __init__(self, uri: str = cfg.PX4_URI):
        self.mav = mavutil.mavlink_connection(
            uri,
            source_system=cfg.BRIDGE_SYSID,
            source_component=cfg.BRIDGE_COMPID,
            dialect="common",
        )
        self.last_command = None
        self.heartbeat_ok = False

    def poll(self) -> ActuatorCommand | None:
        """Non-blocking drain; returns the newest actuator command, if any."""
        command = None
        while True:
            msg = self.mav.recv_match(blocking=False)
            if msg is None:
                break
            mtype = msg.get_type()
            if mtype == "HIL_ACTUATOR_CONTROLS":
                command = actuator_command(msg)
            elif mtype == "HEARTBEAT":
                self.heartbeat_ok = True
        if command is not None:
            self.last_command = command
        return command

    def send_sensor(self, reading):
        self.mav.mav.send(sensor_message(self.mav.mav, reading))

    def send_gps(self, reading):
        self.mav.mav.send(gps_message(self.mav.mav, reading))

    def send_heartbeat(self):
        self.mav.mav.heartbeat_send(
            mavutil.mavlink.MAV_TYPE_GENERIC,
            mavutil.mavlink.MAV_AUTOPILOT_INVALID,
            0, 0, 0,
        )

    def close(self):
        self.mav.close()
