"""solarcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    solar_noon,
    sunrise,
    sunset,
    daylight_hours,
    sun_times,
    unwrap,
)
from .core.errors import SolarcalError, SunEventUndefinedError
from .core.time import century, to_datetime_utc
from .core.types import DomainError, HourAngle, SunTimes

__all__ = [
    "solar_noon",
    "sunrise",
    "sunset",
    "daylight_hours",
    "sun_times",
    "unwrap",
    "century",
    "to_datetime_utc",
    "DomainError",
    "HourAngle",
    "SunTimes",
    "SolarcalError",
    "SunEventUndefinedError",
]
