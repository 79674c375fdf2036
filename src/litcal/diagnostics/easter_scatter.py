#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

from litcal.core.types import CalendarDate
from litcal.engines.season import compute_easter


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "litcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "litcal[diagnostics]"') from e


def days_after_march_21(d: CalendarDate) -> int:
    """Days after the ecclesiastical equinox, with Mar 22 = 1 (earliest Easter)."""
    return d.days_since(CalendarDate(d.year, 3, 21))


def rolling_median(np, y, win: int = 11):
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


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(days_after_march_21(compute_easter(int(Y))))
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Easter dates across Gregorian years.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.minorticks_off()

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Days after March 21 (Mar 22 = 1)")
    ax.set_title("Western Easter dates")

    x, y = build_series(np, args.start_year, args.end_year)
    ax.scatter(x, y, s=12, marker="o", c="tab:blue", linewidths=0.0, alpha=0.45, label="Easter")

    if args.show_trend:
        ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color="tab:red", linewidth=1.8)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
