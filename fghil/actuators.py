"""
Actuator Mapping
================
PX4 HIL_ACTUATOR_CONTROLS channels → FlightGear control surfaces.

    out[i] = scale[i] * raw[index[i]]     when armed
    out[i] = 0                            when disarmed

``index`` may skip or repeat raw channels.
"""

import numpy as np

from . import config as cfg


class ActuatorMapper:

    def __init__(self, index=cfg.CONTROL_INDEX, scale=cfg.CONTROL_SCALE):
        if len(index) != len(scale):
            raise ValueError(
                f"index has {len(index)} entries but scale has {len(scale)}")

        self.index = np.array(index, dtype=np.intp)
        self.scale = np.array(scale, dtype=np.float64)
        self.index.flags.writeable = False
        self.scale.flags.writeable = False

    def __len__(self) -> int:
        return len(self.index)

    def map(self, command) -> np.ndarray:
        if not command.armed:
            return np.zeros(len(self.index))
        raw = np.asarray(command.controls, dtype=np.float64)
        return self.scale * raw[self.index]
