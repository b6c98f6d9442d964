"""
Geomagnetic Field
=================
The field lookup itself (WMM / IGRF table) is supplied from outside.  A
model is any object with::

    field(latitude_deg, longitude_deg) -> (strength_gauss,
                                           declination_deg,
                                           inclination_deg)

Components follow http://geomag.nrcan.gc.ca/mag_fld/comp-en.php:

    H = F cos(I)      Z = H tan(I)
    X = H cos(D)      Y = H sin(D)
"""

import math

import numpy as np

from . import config as cfg
from .units import deg_to_rad


class ConstantGeomagneticModel:
    """Same field everywhere.  Good enough for a small flying area."""

    def __init__(self, strength_gauss: float = cfg.GEOMAG_STRENGTH_GAUSS,
                 declination_deg: float = cfg.GEOMAG_DECLINATION_DEG,
                 inclination_deg: float = cfg.GEOMAG_INCLINATION_DEG):
        self.strength_gauss = strength_gauss
        self.declination_deg = declination_deg
        self.inclination_deg = inclination_deg

    def field(self, latitude_deg: float, longitude_deg: float) -> tuple:
        return self.strength_gauss, self.declination_deg, self.inclination_deg


def earth_field(model, latitude_deg: float, longitude_deg: float) -> np.ndarray:
    """Field vector [X north, Y east, Z down] in gauss."""
    strength, declination_deg, inclination_deg = model.field(latitude_deg, longitude_deg)
    declination = deg_to_rad(declination_deg)
    inclination = deg_to_rad(inclination_deg)

    h = strength * math.cos(inclination)
    z = h * math.tan(inclination)
    x = h * math.cos(declination)
    y = h * math.sin(declination)
    return np.array([x, y, z])


def body_field(model, latitude_deg: float, longitude_deg: float, frame) -> np.ndarray:
    """Field vector as the magnetometer sees it, in the body frame."""
    return frame.rotate_inverse(earth_field(model, latitude_deg, longitude_deg))
