"""
Body Rotation Frame
===================
Quaternion helpers plus the roll/pitch/heading orientation used to move
earth-frame vectors (NED) into the vehicle body frame.

Quaternions are numpy arrays ``[w, x, y, z]``.

Orientation
-----------
    body = heading * pitch * roll          (heading applied last)

    rotate_forward(v)  = q v q*
    rotate_inverse(v)  = q* v q            (earth → body)

The order is not interchangeable; swapping any two factors gives a
different body frame.
"""

import math

import numpy as np

from .units import deg_to_rad

AXIS_X = np.array([1.0, 0.0, 0.0])
AXIS_Y = np.array([0.0, 1.0, 0.0])
AXIS_Z = np.array([0.0, 0.0, 1.0])


# ═══════════════════════════════════════════════════════════════════════════════
#  Quaternion primitives
# ═══════════════════════════════════════════════════════════════════════════════
def from_axis_angle(axis, angle_rad: float) -> np.ndarray:
    """Unit quaternion rotating ``angle_rad`` about ``axis``."""
    axis = np.asarray(axis, dtype=np.float64)
    axis = axis / np.linalg.norm(axis)
    half = 0.5 * angle_rad
    s = math.sin(half)
    return np.array([math.cos(half), axis[0] * s, axis[1] * s, axis[2] * s])


def multiply(q1, q0) -> np.ndarray:
    """Hamilton product ``q1 * q0`` (q0 is applied first)."""
    w0, x0, y0, z0 = q0
    w1, x1, y1, z1 = q1
    return np.array([-x1*x0 - y1*y0 - z1*z0 + w1*w0,
                     x1*w0 + y1*z0 - z1*y0 + w1*x0,
                     -x1*z0 + y1*w0 + z1*x0 + w1*y0,
                     x1*y0 - y1*x0 + z1*w0 + w1*z0], dtype=np.float64)


def conjugate(q) -> np.ndarray:
    return np.array([q[0], -q[1], -q[2], -q[3]], dtype=np.float64)


def rotate_vector(q, v) -> np.ndarray:
    """q v q*"""
    p = np.array([0.0, v[0], v[1], v[2]])
    return multiply(multiply(q, p), conjugate(q))[1:4]


def rotate_vector_reverse(q, v) -> np.ndarray:
    """q* v q"""
    p = np.array([0.0, v[0], v[1], v[2]])
    return multiply(multiply(conjugate(q), p), q)[1:4]


# ═══════════════════════════════════════════════════════════════════════════════
#  Vehicle orientation
# ═══════════════════════════════════════════════════════════════════════════════
class RotationFrame:
    """Orientation built from roll, pitch and heading given in degrees."""

    def __init__(self, roll_deg: float, pitch_deg: float, heading_deg: float):
        self.roll = from_axis_angle(AXIS_X, deg_to_rad(roll_deg))
        self.pitch = from_axis_angle(AXIS_Y, deg_to_rad(pitch_deg))
        self.heading = from_axis_angle(AXIS_Z, deg_to_rad(heading_deg))
        self.body = multiply(multiply(self.heading, self.pitch), self.roll)

    @classmethod
    def from_sample(cls, sample) -> "RotationFrame":
        return cls(sample.roll_deg, sample.pitch_deg, sample.heading_deg)

    def rotate_forward(self, v) -> np.ndarray:
        return rotate_vector(self.body, v)

    def rotate_inverse(self, v) -> np.ndarray:
        return rotate_vector_reverse(self.body, v)

    def body_rates(self, roll_rate_dps: float, pitch_rate_dps: float,
                   yaw_rate_dps: float) -> np.ndarray:
        """
        Body angular rate [p, q, r] in rad/s from the simulator's
        per-axis rates.

        - roll rate is already about body X
        - pitch rate lives on the heading-only frame's Y axis: rotate it by
          heading, then bring it into the body frame
        - yaw rate lives on earth Z: bring it into the body frame
        """
        roll_rate = np.array([deg_to_rad(roll_rate_dps), 0.0, 0.0])

        pitch_rate = np.array([0.0, deg_to_rad(pitch_rate_dps), 0.0])
        pitch_rate = self.rotate_inverse(rotate_vector(self.heading, pitch_rate))

        heading_rate = np.array([0.0, 0.0, deg_to_rad(yaw_rate_dps)])
        heading_rate = self.rotate_inverse(heading_rate)

        return roll_rate + pitch_rate + heading_rate
