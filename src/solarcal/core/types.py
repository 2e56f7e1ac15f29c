from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Union

from .time import to_datetime_utc

@dataclass(frozen=True)
class HourAngle:
    """Hour angle of sunrise in degrees (negative: before noon)."""
    degrees: float

@dataclass(frozen=True)
class DomainError:
    """The hour-angle cosine ratio fell outside (-1, 1): no sunrise or sunset that day."""
    ratio: float

    @property
    def reason(self) -> str:
        return f"acos not defined for {self.ratio}"

HourAngleResult = Union[HourAngle, DomainError]
SunEventResult = Union[int, DomainError]

@dataclass(frozen=True)
class OrbitalElements:
    """Solar elements for one century fraction t (degrees, EoT in minutes)."""
    t: float
    mean_longitude: float
    mean_anomaly: float
    eccentricity: float
    equation_of_center: float
    true_longitude: float
    apparent_longitude: float
    obliquity: float
    declination: float
    equation_of_time: float

@dataclass(frozen=True)
class SunTimes:
    """Noon, rise, set (UNIX ms) and daylight for one day and place."""
    noon: int
    rise: SunEventResult
    set: SunEventResult
    daylight: timedelta

    @property
    def noon_utc(self) -> datetime:
        return to_datetime_utc(self.noon)

    @property
    def rise_utc(self) -> Optional[datetime]:
        if isinstance(self.rise, DomainError):
            return None
        return to_datetime_utc(self.rise)

    @property
    def set_utc(self) -> Optional[datetime]:
        if isinstance(self.set, DomainError):
            return None
        return to_datetime_utc(self.set)
