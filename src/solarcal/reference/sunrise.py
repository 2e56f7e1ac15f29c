"""
solarcal.reference.sunrise
--------------------------
Solar noon, sunrise/sunset and daylight duration on UNIX millisecond timestamps.

All inputs and outputs are UTC instants; latitude and longitude are degrees
(positive North / East) and are not range-checked.

The hour angle is returned as a two-variant value, HourAngle or DomainError.
rise_ms/set_ms propagate a DomainError to the caller unchanged, while hours() treats
it as the polar day/night branch and answers 24 h or 0 h from the declination.
"""

from __future__ import annotations

import logging
import math
from datetime import timedelta

from .angles import degrees, radians
from .solar import declination, equation_of_time
from ..core.time import century
from ..core.types import DomainError, HourAngle, HourAngleResult, SunEventResult

logger = logging.getLogger(__name__)

# Sun's centre at sunrise/sunset: 90° plus refraction and apparent radius
ZENITH_DEG = 90.833
TWILIGHT_DECLINATION_DEG = 0.833

_MS_PER_HOUR = 3_600_000


def noon(timestamp: int, longitude: float) -> int:
    """
    UNIX ms of local solar noon for the UTC day starting at `timestamp`.

    Two fixed corrections of an initial guess by the equation of time.
    The second re-evaluates EoT at the instant found by the first; no further
    iteration is done.
    """
    # First approximation
    t = century(timestamp + (12 - longitude * 24 / 360) * _MS_PER_HOUR)

    # Minutes after midnight UTC
    o1 = 720 - longitude * 4 - equation_of_time(t - longitude / (360 * 36525))
    o2 = 720 - longitude * 4 - equation_of_time(t + o1 / (1440 * 36525))

    return round(timestamp + o2 * 1000 * 60)


def hour_angle(timestamp: int, latitude: float, *, zenith_deg: float = ZENITH_DEG) -> HourAngleResult:
    """
    Hour angle of sunrise (degrees, negative) at the declination of `timestamp`.

    Returns DomainError(ratio) when cos H falls outside (-1, 1), i.e. the sun
    stays above (ratio <= -1) or below (ratio >= 1) the horizon all day.
    """
    phi = radians(latitude)
    theta = radians(declination(century(timestamp)))

    ratio = math.cos(radians(zenith_deg)) / (math.cos(phi) * math.cos(theta)) - math.tan(phi) * math.tan(theta)

    if -1 < ratio < 1:
        return HourAngle(-degrees(math.acos(ratio)))

    logger.debug("no hour angle at latitude %s for timestamp %s: ratio %s", latitude, timestamp, ratio)
    return DomainError(ratio)


def rise_ms(timestamp: int, latitude: float, longitude: float, *, zenith_deg: float = ZENITH_DEG) -> SunEventResult:
    """UNIX ms of sunrise, or the DomainError of the hour angle."""
    solar_noon = noon(timestamp, longitude)
    h = hour_angle(solar_noon, latitude, zenith_deg=zenith_deg)
    if isinstance(h, DomainError):
        return h
    return round(solar_noon + h.degrees * 4 * 1000 * 60)


def set_ms(timestamp: int, latitude: float, longitude: float, *, zenith_deg: float = ZENITH_DEG) -> SunEventResult:
    """UNIX ms of sunset, or the DomainError of the hour angle."""
    solar_noon = noon(timestamp, longitude)
    h = hour_angle(solar_noon, latitude, zenith_deg=zenith_deg)
    if isinstance(h, DomainError):
        return h
    return round(solar_noon - h.degrees * 4 * 1000 * 60)


def hours(timestamp: int, latitude: float, longitude: float = 0.0) -> timedelta:
    """
    Daylight between sunrise and sunset, rounded to whole minutes.

    The hour angle is taken at `timestamp` itself (midnight of the date), not
    at solar noon. `longitude` does not enter the result.
    Where the sun does not rise or set, returns exactly 24 h or 0 h.
    """
    h = hour_angle(timestamp, latitude)
    if isinstance(h, HourAngle):
        # 4 min per degree, twice for rise -> set
        return timedelta(minutes=round(8 * -h.degrees))

    delta = declination(century(timestamp))
    if latitude >= 0:
        polar_day = delta > -TWILIGHT_DECLINATION_DEG
    else:
        polar_day = delta < TWILIGHT_DECLINATION_DEG

    logger.debug(
        "daylight fallback at latitude %s: declination %s -> %s",
        latitude, delta, "polar day" if polar_day else "polar night",
    )
    return timedelta(hours=24) if polar_day else timedelta(0)
