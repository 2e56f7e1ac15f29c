# tests/test_cli.py

import logging

import pytest

from solarcal import cli


def test_noon(capsys):
    assert cli.main(["noon", "2017-01-01", "--lon", "14.3251989"]) == 0
    assert capsys.readouterr().out.strip() == "2017-01-01T11:06:34.183+00:00"

def test_rise_and_set(capsys):
    cli.main(["rise", "2017-01-01", "--lat", "50.0598054", "--lon", "14.3251989"])
    cli.main(["set", "2017-01-01", "--lat", "50.0598054", "--lon", "14.3251989"])
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("2017-01-01T07:01:40.")
    assert out[1].startswith("2017-01-01T15:11:28.")

def test_rise_with_zenith(capsys):
    cli.main(["rise", "2017-01-01", "--zenith", "96"])
    out = capsys.readouterr().out.strip()
    # civil dawn is well before 07:01
    assert out.startswith("2017-01-01T06:")

def test_polar_rise(capsys):
    cli.main(["rise", "2017-06-14", "--lat", "70.9200386", "--lon", "25.3832065"])
    assert capsys.readouterr().out.strip() == "Sun does not rise or set."

def test_hours(capsys):
    cli.main(["hours", "2017-06-13"])
    assert capsys.readouterr().out.strip() == "16h 20m (16.3333 h)"

def test_hours_polar_day(capsys):
    cli.main(["hours", "2017-06-14", "--lat", "70.9200386", "--lon", "25.3832065"])
    assert capsys.readouterr().out.strip() == "24h 00m (24.0000 h)"

def test_negative_longitude(capsys):
    cli.main(["noon", "2017-01-01", "--lon", "-105.1786"])
    # roughly 12h + 105/15 h = 19:01Z, shifted by EoT
    assert capsys.readouterr().out.startswith("2017-01-01T19:")

def test_day_shorthand(capsys):
    assert cli.main(["2017-01-01"]) == 0
    out = capsys.readouterr().out
    assert "Sunrise  : 2017-01-01T07:01:40." in out
    assert "Noon     : 2017-01-01T11:06:34.183+00:00" in out
    assert "Sunset   : 2017-01-01T15:11:28." in out

def test_day_polar_night(capsys):
    cli.main(["day", "2016-12-14", "--lat", "70.9200386", "--lon", "25.3832065"])
    out = capsys.readouterr().out
    assert "Sunrise  : Sun does not rise or set." in out
    assert "Daylight : 0h 00m" in out

def test_elements(capsys):
    cli.main(["elements", "--timestamp", "1483228800000"])
    out = capsys.readouterr().out
    assert "T (centuries)  = 0.170006844627" in out
    assert "EOT (minutes)" in out

def test_elements_default_is_j2000(capsys):
    cli.main(["elements"])
    out = capsys.readouterr().out
    assert "2000-01-01T12:00:00.000+00:00" in out
    assert "T (centuries)  = 0.000000000000" in out

def test_bad_date():
    with pytest.raises(SystemExit):
        cli.main(["noon", "2017-02-30"])

def test_verbose_enables_debug(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    cli.main(["-v", "hours", "2017-06-14", "--lat", "70.9200386"])
    assert calls and calls[0]["level"] == logging.DEBUG

def test_verbose_after_subcommand(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    assert cli.main(["hours", "2017-06-14", "--lat", "70.9200386", "-v"]) == 0
    assert calls and calls[0]["level"] == logging.DEBUG
    assert capsys.readouterr().out.strip() == "24h 00m (24.0000 h)"

def test_verbose_on_day_shorthand(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    cli.main(["2017-01-01", "--verbose"])
    assert calls
    assert "Noon     : 2017-01-01T11:06:34.183+00:00" in capsys.readouterr().out

def test_fmt_instant():
    from solarcal.core.types import DomainError

    assert cli._fmt_instant(1483268794183) == "2017-01-01T11:06:34.183+00:00"
    assert cli._fmt_instant(DomainError(1.2)) == "Sun does not rise or set."
