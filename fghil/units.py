"""
Unit Conversions
================
FlightGear reports imperial units; PX4 expects SI (and hPa for pressure).
All conversions are plain linear scalings.
"""

import math

FT_TO_M = 0.3048
INHG_TO_HPA = 3386.39 / 100.0   # 1 inHg = 3386.39 Pa


def ft_to_m(ft: float) -> float:
    return ft * FT_TO_M


def m_to_ft(m: float) -> float:
    return m / FT_TO_M


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def rad_to_deg(rad: float) -> float:
    return rad * 180.0 / math.pi


def inhg_to_hpa(inhg: float) -> float:
    """Pressure in inches of mercury → hectopascal (millibar)."""
    return inhg * INHG_TO_HPA
