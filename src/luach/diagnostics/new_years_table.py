from __future__ import annotations

import argparse
from typing import List, Optional

import luach
from luach.core.types import SHORT_DAY_NAMES, GregorianDate


def mmdd(g: GregorianDate) -> str:
    return f"{g.month:02d}-{g.day:02d}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Rosh Hashana table: Gregorian date, weekday and year type per Hebrew year."
    )
    p.add_argument("--from-year", type=int, default=5780)
    p.add_argument("--to-year", type=int, default=5800)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")
    if Y0 < 1:
        raise SystemExit("--from-year must be >= 1")

    headers = ["Year", "Rosh Hashana", "Day", "Length", "Kind", "Leap"]
    colw = [6, 12, 4, 6, 9, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        info = luach.year_info(Y)
        g = luach.absolute_to_gregorian(info.new_year)
        cells = [
            str(Y),
            mmdd(g) if args.dates == "mmdd" else g.isoformat(),
            SHORT_DAY_NAMES[info.new_year_weekday],
            str(info.days),
            info.kind,
            "yes" if info.is_leap else "no",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
