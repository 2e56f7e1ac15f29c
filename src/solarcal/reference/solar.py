# reference/solar.py
"""
Low-precision solar elements (NOAA / Bostock "Solar Calculator").

Every function takes t, the fraction of Julian centuries since J2000.0
(see solarcal.core.time.century), and returns degrees unless stated otherwise.
Accuracy is about one minute of time for sunrise/sunset purposes.
"""

from __future__ import annotations

import math

from .angles import degrees, modulo, radians
from ..core.types import OrbitalElements


def _omega_rad(t: float) -> float:
    """Longitude of the Moon's ascending node (radians)."""
    return radians(125.04 - 1934.136 * t)


def mean_longitude(t: float) -> float:
    """Geometric mean longitude of the Sun, in [0, 360)."""
    l0 = modulo(280.46646 + t * (36000.76983 + t * 0.0003032), 360)
    if l0 < 0:
        l0 += 360
    return l0


def mean_anomaly(t: float) -> float:
    # not range-reduced; only ever used inside sin/cos
    return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def orbit_eccentricity(t: float) -> float:
    """Eccentricity of Earth's orbit (unitless)."""
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def equation_of_center(t: float) -> float:
    m = radians(mean_anomaly(t))
    return (
        math.sin(m) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + math.sin(m * 2) * (0.019993 - 0.000101 * t)
        + math.sin(m * 3) * 0.000289
    )


def true_longitude(t: float) -> float:
    return mean_longitude(t) + equation_of_center(t)


def apparent_longitude(t: float) -> float:
    """True longitude corrected for aberration and the leading nutation term."""
    return true_longitude(t) - 0.00569 - 0.00478 * math.sin(_omega_rad(t))


def obliquity_of_ecliptic(t: float) -> float:
    """Mean obliquity plus the nutation-in-obliquity correction."""
    e0 = 23 + (26 + (21.448 - t * (46.815 + t * (0.00059 - t * 0.001813))) / 60) / 60
    return e0 + 0.00256 * math.cos(_omega_rad(t))


def declination(t: float) -> float:
    sin_delta = math.sin(radians(obliquity_of_ecliptic(t))) * math.sin(radians(apparent_longitude(t)))
    return degrees(math.asin(sin_delta))


def equation_of_time(t: float) -> float:
    """
    Equation of time in minutes (apparent minus mean solar time).

    4 minutes of time per degree of Earth rotation.
    """
    epsilon = obliquity_of_ecliptic(t)
    l0 = mean_longitude(t)
    e = orbit_eccentricity(t)
    m = mean_anomaly(t)

    y = math.tan(radians(epsilon) / 2) ** 2
    sin2l0 = math.sin(2 * radians(l0))
    cos2l0 = math.cos(2 * radians(l0))
    sin4l0 = math.sin(4 * radians(l0))
    sinm = math.sin(radians(m))
    sin2m = math.sin(2 * radians(m))

    etime = (
        y * sin2l0
        - 2 * e * sinm
        + 4 * e * y * sinm * cos2l0
        - 0.5 * y * y * sin4l0
        - 1.25 * e * e * sin2m
    )
    return degrees(etime) * 4


def orbital_elements(t: float) -> OrbitalElements:
    """All of the above for one t (for display and diagnostics)."""
    return OrbitalElements(
        t=t,
        mean_longitude=mean_longitude(t),
        mean_anomaly=mean_anomaly(t),
        eccentricity=orbit_eccentricity(t),
        equation_of_center=equation_of_center(t),
        true_longitude=true_longitude(t),
        apparent_longitude=apparent_longitude(t),
        obliquity=obliquity_of_ecliptic(t),
        declination=declination(t),
        equation_of_time=equation_of_time(t),
    )
