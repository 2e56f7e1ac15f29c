from __future__ import annotations

import argparse
from datetime import date, timedelta
import logging
import sys
import re
import importlib
import inspect

from solarcal.core.time import to_datetime_utc
from solarcal.core.types import DomainError, SunEventResult


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Prague
_DEFAULT_LAT = 50.0598054
_DEFAULT_LON = 14.3251989


def _parse_ymd(s: str) -> date:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    try:
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _add_verbose(p: argparse.ArgumentParser) -> None:
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def _fmt_instant(value: SunEventResult) -> str:
    """ISO-8601 UTC for a UNIX ms instant; polar message for a DomainError."""
    if isinstance(value, DomainError):
        return "Sun does not rise or set."
    return to_datetime_utc(value).isoformat(timespec="milliseconds")


def _fmt_duration(td: timedelta) -> str:
    minutes = int(td.total_seconds() // 60)
    return f"{minutes // 60:d}h {minutes % 60:02d}m ({td.total_seconds() / 3600:.4f} h)"


def _place_parser(prog: str, description: str, *, with_lat: bool = True, with_zenith: bool = False) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD (midnight UTC)")
    if with_lat:
        p.add_argument("--lat", type=float, default=_DEFAULT_LAT, help="Observer latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, default=_DEFAULT_LON, help="Observer longitude in degrees (positive East)")
    if with_zenith:
        p.add_argument("--zenith", type=float, default=None, help="Zenith angle of the event in degrees (default 90.833)")
    _add_verbose(p)
    return p


def cmd_noon(argv: list[str]) -> int:
    import solarcal

    p = _place_parser("solarcal noon", "Time of local solar noon (UTC).", with_lat=False)
    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    print(_fmt_instant(solarcal.solar_noon(args.date, args.lon)))
    return 0


def _cmd_event(argv: list[str], which: str) -> int:
    import solarcal

    p = _place_parser(f"solarcal {which}", f"Time of {which} (UTC).", with_zenith=True)
    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    fn = solarcal.sunrise if which == "rise" else solarcal.sunset
    kwargs = {} if args.zenith is None else {"zenith_deg": args.zenith}
    print(_fmt_instant(fn(args.date, args.lat, args.lon, **kwargs)))
    return 0


def cmd_rise(argv: list[str]) -> int:
    return _cmd_event(argv, "rise")


def cmd_set(argv: list[str]) -> int:
    return _cmd_event(argv, "set")


def cmd_hours(argv: list[str]) -> int:
    import solarcal

    p = _place_parser("solarcal hours", "Daylight duration between sunrise and sunset.")
    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    print(_fmt_duration(solarcal.daylight_hours(args.date, args.lat, args.lon)))
    return 0


def cmd_day(argv: list[str]) -> int:
    import solarcal

    p = _place_parser("solarcal day", "Solar noon, sunrise, sunset and daylight for one date.")
    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    st = solarcal.sun_times(args.date, args.lat, args.lon)
    print(f"Date: {args.date.isoformat()}  lat={args.lat:g}  lon={args.lon:g}")
    print(f"  Sunrise  : {_fmt_instant(st.rise)}")
    print(f"  Noon     : {_fmt_instant(st.noon)}")
    print(f"  Sunset   : {_fmt_instant(st.set)}")
    print(f"  Daylight : {_fmt_duration(st.daylight)}")
    return 0


def cmd_elements(argv: list[str]) -> int:
    from solarcal.core import time as st
    from solarcal.reference import solar

    p = argparse.ArgumentParser(prog="solarcal elements", description="Print solar orbital elements at a given instant.")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--date", type=_parse_ymd, help="YYYY-MM-DD (midnight UTC)")
    g.add_argument("--timestamp", type=int, help="UNIX time in milliseconds")
    _add_verbose(p)
    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    if args.timestamp is not None:
        ms = args.timestamp
    elif args.date is not None:
        ms = st.timestamp_ms(args.date)
    else:
        ms = st.J2000_UNIX_MS
    el = solar.orbital_elements(st.century(ms))

    print(f"Time Input:")
    print(f"  UTC            = {_fmt_instant(ms)}")
    print(f"  T (centuries)  = {el.t:.12f}")
    print()
    print("Solar elements (degrees):")
    print(f"  Mean Longitude     (L0)    = {el.mean_longitude:.6f}")
    print(f"  Mean Anomaly       (M)     = {el.mean_anomaly:.6f}")
    print(f"  Equation of Center (C)     = {el.equation_of_center:.6f}")
    print(f"  True Longitude             = {el.true_longitude:.6f}")
    print(f"  Apparent Longitude         = {el.apparent_longitude:.6f}")
    print(f"  Obliquity          (eps)   = {el.obliquity:.6f}")
    print(f"  Declination        (delta) = {el.declination:.6f}")
    print(f"  Orbit Eccentricity (e)     = {el.eccentricity:.9f}")
    print()
    print(f"Equation of Time:")
    print(f"  EOT (minutes) = {el.equation_of_time:.4f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `solarcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="solarcal", description="Solar noon, sunrise, sunset and daylight calculator.")
    _add_verbose(p)
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("noon", help="Time of local solar noon (UTC)")
    sub.add_parser("rise", help="Time of sunrise (UTC)")
    sub.add_parser("set", help="Time of sunset (UTC)")
    sub.add_parser("hours", help="Daylight duration")
    sub.add_parser("day", help="Noon, sunrise, sunset and daylight for one date")
    sub.add_parser("elements", help="Print solar orbital elements at a given instant")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (need the diagnostics extra)")
    p_diag.add_argument("tool", choices=["daylight-curve"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    _configure_logging(args.verbose)

    commands = {
        "noon": cmd_noon,
        "rise": cmd_rise,
        "set": cmd_set,
        "hours": cmd_hours,
        "day": cmd_day,
        "elements": cmd_elements,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "diag":
        tool_map = {
            "daylight-curve": "solarcal.diagnostics.daylight_curve",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
