from __future__ import annotations
from datetime import date, datetime, timedelta, timezone
import numbers
from typing import Union

# 2000-01-01T12:00:00Z in UNIX milliseconds
J2000_UNIX_MS = 946_728_000_000
# 36525 days
MS_PER_CENTURY = 3_155_760_000_000
MS_PER_DAY = 86_400_000

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

When = Union[date, datetime, int]


def date_to_ms(d: date) -> int:
    """Midnight UTC of a civil date, in UNIX milliseconds."""
    return (d.toordinal() - _UNIX_EPOCH.toordinal()) * MS_PER_DAY


def datetime_to_ms(dt: datetime) -> int:
    """Timezone-aware datetime -> UNIX milliseconds (UTC)."""
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware (UTC)")
    delta = dt.astimezone(timezone.utc) - _UNIX_EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def timestamp_ms(when: When) -> int:
    """
    Normalize a date, aware datetime or integer timestamp to UNIX milliseconds.

    A plain date means midnight UTC of that day.
    """
    # datetime is a subclass of date; test it first
    if isinstance(when, datetime):
        return datetime_to_ms(when)
    if isinstance(when, date):
        return date_to_ms(when)
    # numpy integers included; bool is Integral too but not a timestamp
    if isinstance(when, numbers.Integral) and not isinstance(when, bool):
        return int(when)
    raise TypeError(f"expected date, datetime or int milliseconds, got {type(when).__name__}")


def to_datetime_utc(ms: int) -> datetime:
    """UNIX milliseconds -> timezone-aware datetime in UTC."""
    return _UNIX_EPOCH + timedelta(milliseconds=ms)


def century(timestamp: Union[int, float]) -> float:
    """
    Julian centuries since J2000.0 (2000-01-01T12:00:00Z) for a UNIX ms timestamp.

    Float timestamps are rounded to the nearest millisecond first.
    """
    if isinstance(timestamp, float):
        timestamp = round(timestamp)
    return (timestamp - J2000_UNIX_MS) / MS_PER_CENTURY
