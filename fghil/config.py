"""
FlightGear ⇄ PX4 HIL Bridge — Shared Configuration
====================================================
Constants shared by the sensor model, the FlightGear codec and the bridge.
The FlightGear generic-protocol XML must mirror FDM_FIELDS / CONTROL_FIELDS
in flightgear.py; PX4 must run its HIL simulator link on PX4_URI.
"""

# ═══════════════════════════════════════════════════════════════════════════════
#  MAVLink System / Component IDs
# ═══════════════════════════════════════════════════════════════════════════════
BRIDGE_SYSID     = 1   # PX4 simulator link expects the simulator as sysid 1
BRIDGE_COMPID    = 51

# ═══════════════════════════════════════════════════════════════════════════════
#  Network Endpoints
# ═══════════════════════════════════════════════════════════════════════════════
# FlightGear generic protocol (UDP, both directions)
FG_HOST             = "127.0.0.1"
FG_IN_PORT          = 15200     # Bridge binds; FlightGear sends FDM state here
FG_OUT_PORT         = 15300     # FlightGear binds; Bridge sends controls here

# PX4 simulator MAVLink port (PX4 connects out to the simulator)
PX4_URI             = "tcpin:0.0.0.0:4560"

# ═══════════════════════════════════════════════════════════════════════════════
#  Timing
# ═══════════════════════════════════════════════════════════════════════════════
FG_RECV_TIMEOUT_S   = 0.1       # Block this long waiting for a FlightGear packet
HEARTBEAT_INTERVAL_S = 1.0
PERF_LOG_INTERVAL_S = 5.0

# Below this FlightGear update rate a warning is printed (never fatal)
MIN_SAMPLE_RATE_HZ  = 20.0

# ═══════════════════════════════════════════════════════════════════════════════
#  Sensor Noise  (standard deviation, output units)
# ═══════════════════════════════════════════════════════════════════════════════
ACC_NOISE           = 0.0001    # m/s²
GYRO_NOISE          = 0.001     # rad/s
MAG_NOISE           = 0.001     # gauss
TEMP_NOISE          = 0.01      # °C
ABS_PRESSURE_NOISE  = 0.05      # hPa
DIFF_PRESSURE_NOISE = 0.01      # hPa
BARO_ALT_NOISE      = 0.01      # m

# HIL_SENSOR fields_updated: bits 0..12 (acc, gyro, mag, baro, diff, alt, temp)
HIL_SENSOR_FIELDS_ALL = 0x1FFF

# ═══════════════════════════════════════════════════════════════════════════════
#  Idealised GPS
# ═══════════════════════════════════════════════════════════════════════════════
GPS_FIX_TYPE_3D     = 3
GPS_EPH             = 100       # cm (HDOP × 100)
GPS_EPV             = 100
GPS_SATELLITES      = 10

# ═══════════════════════════════════════════════════════════════════════════════
#  Geomagnetic Field  (used by ConstantGeomagneticModel)
#  Prague area, WMM2020: ~0.49 G total, 4.5° E declination, 66.5° dip
# ═══════════════════════════════════════════════════════════════════════════════
GEOMAG_STRENGTH_GAUSS   = 0.49
GEOMAG_DECLINATION_DEG  = 4.5
GEOMAG_INCLINATION_DEG  = 66.5

# ═══════════════════════════════════════════════════════════════════════════════
#  Actuator Mapping  (HIL_ACTUATOR_CONTROLS → FlightGear controls)
#
#  Output          Raw channel   Scale
#  ──────────────────────────────────────
#  aileron            0           1.0
#  elevator           1          -1.0      (PX4 pitch-up positive, FG stick-back negative)
#  rudder             2           1.0
#  throttle           3           1.0
# ═══════════════════════════════════════════════════════════════════════════════
CONTROL_INDEX       = (0, 1, 2, 3)
CONTROL_SCALE       = (1.0, -1.0, 1.0, 1.0)
