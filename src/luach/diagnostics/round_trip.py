from __future__ import annotations

import argparse
import random
from typing import List, Optional

import luach
from luach.core.types import GregorianDate


def parse_ymd(s: str) -> GregorianDate:
    sign = -1 if s.startswith("-") else 1
    y, m, d = s.lstrip("-").split("-")
    return GregorianDate(sign * int(y), int(m), int(d))


def roundtrip_test(lo: int, hi: int, N: int, seed: int, *, max_failures: int) -> int:
    """Check absolute -> hebrew -> absolute and absolute -> gregorian -> absolute on N random days."""
    random.seed(seed)
    failures = 0
    first_day = luach.get_calendar().first_day

    for _ in range(N):
        n = random.randint(lo, hi)

        g = luach.absolute_to_gregorian(n)
        back_g = luach.gregorian_to_absolute(g.year, g.month, g.day)
        if back_g != n:
            failures += 1
            print(f"\nFAIL (gregorian) n={n} -> {g} -> {back_g}")

        if n >= first_day:
            h = luach.absolute_to_hebrew(n)
            back_h = luach.hebrew_to_absolute(h.year, h.month, h.day)
            if back_h != n:
                failures += 1
                print(f"\nFAIL (hebrew) n={n} -> {h} -> {back_h}")

        if failures >= max_failures:
            break

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: absolute day -> calendar date -> absolute day.")
    p.add_argument("--N", type=int, default=5000, help="Number of trials.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD (leading '-' for BCE).")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_ymd(args.start)
    end = parse_ymd(args.end)
    lo = luach.gregorian_to_absolute(start.year, start.month, start.day)
    hi = luach.gregorian_to_absolute(end.year, end.month, end.day)
    if hi < lo:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(lo, hi, args.N, args.seed, max_failures=args.max_failures)
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
