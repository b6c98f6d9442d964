"""
FlightGear ⇄ PX4 HIL Bridge
============================
Sensor and actuator model that lets a PX4 autopilot in hardware-in-the-loop
mode fly a FlightGear airframe.

Modules
-------
config      Shared constants (MAVLink IDs, ports, noise, actuator mapping)
units       Imperial → SI conversions
rotation    Quaternions and the heading * pitch * roll body frame
geomag      Geomagnetic field → body-frame magnetometer vector
noise       Seedable Gaussian sensor noise
records     FDM sample, HIL_SENSOR / HIL_GPS payloads, actuator command
sensors     Sensor and GPS synthesis from FlightGear state
actuators   HIL_ACTUATOR_CONTROLS → FlightGear control mapping
vehicle     Per-tick glue and sample-rate monitoring
flightgear  FlightGear generic-protocol codec and UDP link
mavlink_io  PX4 HIL MAVLink encoding and link
bridge      Main entry point
"""
