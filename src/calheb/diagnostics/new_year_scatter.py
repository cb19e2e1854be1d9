#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import calheb


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calheb[plot]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calheb[plot]"') from e


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def days_since_equinox(d: date) -> int:
    """Days since the (nominal) autumn equinox, with Sep 22 = 0."""
    return (d - date(d.year, 9, 22)).days


def rolling_median(np, y, win: int = 19):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """Gregorian year, metric value and leap flag of 1 Tishri for each Hebrew year."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    x = np.empty_like(years, dtype=float)
    y = np.empty_like(years, dtype=float)
    leap = np.empty_like(years, dtype=bool)

    for i, Y in enumerate(years):
        d = calheb.new_year_day(int(Y))["date"]
        if d is None:
            raise ValueError(f"1 Tishri {Y} precedes 0001-01-01")
        x[i] = float(d.year)
        if metric == "doy":
            y[i] = float(day_of_year(d))
        elif metric == "since-equinox":
            y[i] = float(days_since_equinox(d))
        else:
            raise ValueError("metric must be 'doy' or 'since-equinox'")
        leap[i] = calheb.is_leap_year(int(Y))

    return x, y, leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of 1 Tishri (Rosh Hashanah) Gregorian dates.")
    p.add_argument("--from-year", type=int, default=5600)
    p.add_argument("--to-year", type=int, default=6000)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=19, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="new_year_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("since-equinox", "doy"),
        default="since-equinox",
        help="Y-axis metric (default: days since Sep 22).",
    )
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y, leap = build_series(np, args.from_year, args.to_year, metric=args.metric)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days since Sep 22")
    ax.set_title("Rosh Hashanah dates")

    ax.scatter(x[~leap], y[~leap], s=12, c="tab:blue", alpha=0.45, label="common year")
    ax.scatter(x[leap], y[leap], s=12, c="tab:red", alpha=0.45, label="leap year")

    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="0.30", linewidth=1.8)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
