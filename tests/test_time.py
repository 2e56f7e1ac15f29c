# tests/test_time.py

import pytest
from datetime import date, datetime, timedelta, timezone

from solarcal.core import time as st


def test_century_reference_value():
    assert st.century(1483228800000) == pytest.approx(0.17000684462696783, abs=1e-12)

def test_century_rounds_float_timestamps():
    assert st.century(1483228800000.4) == st.century(1483228800000)
    assert st.century(1483228800000.0) == pytest.approx(0.17000684462696783, abs=1e-12)

def test_century_zero_at_j2000():
    assert st.century(st.J2000_UNIX_MS) == 0.0
    # one Julian century later
    assert st.century(st.J2000_UNIX_MS + 36525 * st.MS_PER_DAY) == 1.0

def test_date_is_midnight_utc():
    assert st.date_to_ms(date(1970, 1, 1)) == 0
    assert st.date_to_ms(date(2017, 1, 1)) == 1483228800000
    assert st.date_to_ms(date(1969, 12, 31)) == -st.MS_PER_DAY

def test_datetime_to_ms():
    dt = datetime(2017, 1, 1, 11, 6, 34, 183000, tzinfo=timezone.utc)
    assert st.datetime_to_ms(dt) == 1483268794183

    # same instant expressed at UTC+2
    dt2 = datetime(2017, 1, 1, 13, 6, 34, 183000, tzinfo=timezone(timedelta(hours=2)))
    assert st.datetime_to_ms(dt2) == 1483268794183

def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        st.datetime_to_ms(datetime(2017, 1, 1, 12, 0))

def test_timestamp_ms_dispatch():
    assert st.timestamp_ms(date(2017, 1, 1)) == 1483228800000
    assert st.timestamp_ms(datetime(2017, 1, 1, tzinfo=timezone.utc)) == 1483228800000
    assert st.timestamp_ms(1483228800000) == 1483228800000
    with pytest.raises(TypeError):
        st.timestamp_ms("2017-01-01")
    with pytest.raises(TypeError):
        st.timestamp_ms(True)

def test_to_datetime_utc():
    dt = st.to_datetime_utc(1483268794183)
    assert dt == datetime(2017, 1, 1, 11, 6, 34, 183000, tzinfo=timezone.utc)
    assert dt.tzinfo is timezone.utc

def test_timestamp_ms_accepts_integral_types():
    """numpy integers (e.g. from the diagnostics arrays) are timestamps too."""
    np = pytest.importorskip("numpy")
    ms = st.timestamp_ms(np.int64(1483228800000))
    assert ms == 1483228800000
    assert type(ms) is int
