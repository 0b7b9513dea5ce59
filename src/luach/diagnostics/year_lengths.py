#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import luach

LEGAL_LENGTHS = (353, 354, 355, 383, 384, 385)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "luach[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "luach[diagnostics]"') from e


def collect(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    lengths = np.array([luach.days_in_year_hebrew(int(Y)) for Y in years], dtype=int)
    leaps = np.array([luach.is_leap_year_hebrew(int(Y)) for Y in years], dtype=int)
    return years, lengths, leaps


def leap_window_counts(np, leaps: "np.ndarray", window: int = 19) -> "np.ndarray":
    """Number of leap years in every run of `window` consecutive years."""
    if len(leaps) < window:
        return np.array([], dtype=int)
    return np.convolve(leaps, np.ones(window, dtype=int), mode="valid")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Distribution of Hebrew year lengths and Metonic leap density over a range of years."
    )
    p.add_argument("--start-year", type=int, default=5600)
    p.add_argument("--end-year", type=int, default=6000)
    p.add_argument("--out", default="", help="If given, save a bar chart of the distribution to this file.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")
    if args.start_year < 1:
        raise SystemExit("--start-year must be >= 1")

    np = _need_numpy()
    years, lengths, leaps = collect(np, args.start_year, args.end_year)

    values, counts = np.unique(lengths, return_counts=True)
    total = int(counts.sum())
    print(f"Hebrew years {args.start_year}..{args.end_year} ({total} years)")
    print("Length  Count   Share")
    for v, c in zip(values, counts):
        print(f"{int(v):<7d} {int(c):<7d} {c / total:6.2%}")

    bad = sorted(set(int(v) for v in values) - set(LEGAL_LENGTHS))
    windows = leap_window_counts(np, leaps)
    bad_windows = int(np.count_nonzero(windows != 7))

    print()
    print(f"Illegal lengths: {bad if bad else 'none'}")
    print(f"19-year windows without exactly 7 leap years: {bad_windows}")

    if args.out:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(7, 3.6))
        ax.bar([str(int(v)) for v in values], counts, color="0.35")
        ax.set_xlabel("Year length (days)")
        ax.set_ylabel("Years")
        ax.set_title(f"Hebrew year lengths {args.start_year}-{args.end_year}")
        fig.tight_layout()
        fig.savefig(args.out, dpi=200)
        print(f"Saved: {args.out}")

    return 1 if (bad or bad_windows) else 0


if __name__ == "__main__":
    raise SystemExit(main())
