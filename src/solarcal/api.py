from __future__ import annotations

from datetime import timedelta

from .core.errors import SunEventUndefinedError
from .core.time import When, timestamp_ms
from .core.types import DomainError, SunEventResult, SunTimes
from .reference import sunrise as sr
from .reference.sunrise import ZENITH_DEG


def solar_noon(when: When, longitude: float) -> int:
    """
    UNIX ms of local solar noon.

    `when` is a date (midnight UTC), an aware datetime or an int ms timestamp.

        >>> solar_noon(1483228800000, 14.3251989)
        1483268794183
    """
    return sr.noon(timestamp_ms(when), longitude)


def sunrise(when: When, latitude: float, longitude: float, *, zenith_deg: float = ZENITH_DEG) -> SunEventResult:
    """UNIX ms of sunrise, or DomainError where the sun does not rise or set."""
    return sr.rise_ms(timestamp_ms(when), latitude, longitude, zenith_deg=zenith_deg)


def sunset(when: When, latitude: float, longitude: float, *, zenith_deg: float = ZENITH_DEG) -> SunEventResult:
    """UNIX ms of sunset, or DomainError where the sun does not rise or set."""
    return sr.set_ms(timestamp_ms(when), latitude, longitude, zenith_deg=zenith_deg)


def daylight_hours(when: When, latitude: float, longitude: float) -> timedelta:
    """Length of the day; exactly 24 h or 0 h during polar day / polar night."""
    return sr.hours(timestamp_ms(when), latitude, longitude)


def unwrap(result: SunEventResult) -> int:
    """Return the timestamp of a sunrise/sunset result or raise SunEventUndefinedError."""
    if isinstance(result, DomainError):
        raise SunEventUndefinedError(result.ratio)
    return result


def sun_times(when: When, latitude: float, longitude: float) -> SunTimes:
    ts = timestamp_ms(when)
    return SunTimes(
        noon=sr.noon(ts, longitude),
        rise=sr.rise_ms(ts, latitude, longitude),
        set=sr.set_ms(ts, latitude, longitude),
        daylight=sr.hours(ts, latitude, longitude),
    )
