#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Tuple

import argparse

import solarcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "solarcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solarcal[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    linestyle: str = "-"


def build_series(np, year: int, latitude: float, longitude: float = 0.0) -> Tuple["np.ndarray", "np.ndarray"]:
    """Day-of-year (Jan 1 = 1) and daylight hours for every day of `year`."""
    start = date(year, 1, 1)
    n = (date(year + 1, 1, 1) - start).days

    doy = np.arange(1, n + 1, dtype=int)
    hours = np.empty(n, dtype=float)
    for i in range(n):
        d = start + timedelta(days=i)
        hours[i] = solarcal.daylight_hours(d, latitude, longitude).total_seconds() / 3600.0

    return doy, hours


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot daylight hours over one year for several latitudes.")
    p.add_argument("--year", type=int, default=2017)
    p.add_argument(
        "--lat",
        type=float,
        action="append",
        default=None,
        help="Latitude in degrees (repeatable; default: 0, 50.06, 70.92, -67.80)",
    )
    p.add_argument("--outbase", default="daylight_curve", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    lats = args.lat or [0.0, 50.0598054, 70.9200386, -67.796058]
    colors = ["tab:blue", "tab:orange", "tab:red", "tab:purple", "tab:green", "0.45"]
    styles = [Style(f"{lat:+.2f}°", colors[i % len(colors)]) for i, lat in enumerate(lats)]

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Day of year")
    ax.set_ylabel("Daylight (hours)")
    ax.set_ylim(-0.5, 24.5)
    ax.set_title(f"Daylight duration, {args.year}")

    for lat, st in zip(lats, styles):
        x, y = build_series(np, args.year, lat)
        ax.plot(x, y, color=st.color, linestyle=st.linestyle, linewidth=1.6, label=st.label)
        polar = int(np.count_nonzero((y == 0.0) | (y == 24.0)))
        print(f"lat {lat:+9.4f}: min {y.min():6.3f} h  max {y.max():6.3f} h  polar days/nights {polar}")

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=150)
    plt.close(fig)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
