from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import LuachError
from .core.types import SHORT_DAY_NAMES

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


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


def cmd_to_hebrew(argv: list[str]) -> int:
    import luach
    from luach.diagnostics.round_trip import parse_ymd

    p = argparse.ArgumentParser(prog="luach to-hebrew", description="Gregorian -> Hebrew date")
    p.add_argument("date", help="YYYY-MM-DD (leading '-' for BCE, after a '--' separator)")
    args = p.parse_args(argv)

    try:
        g = parse_ymd(args.date)
    except ValueError:
        p.error(f"malformed date {args.date!r}, expected YYYY-MM-DD")
    n = luach.gregorian_to_absolute(g.year, g.month, g.day)
    h = luach.absolute_to_hebrew(n)
    print(f"{h} ({SHORT_DAY_NAMES[luach.weekday(n)]}, absolute day {n})")
    return 0

def cmd_to_gregorian(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach to-gregorian", description="Hebrew -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1=Nisan .. 7=Tishrei .. 12=Adar I, 13=Adar II (14 = Nisan in leap years)")
    p.add_argument("day", type=int)
    args = p.parse_args(argv)

    month = luach.try_month_from_number(args.month, args.year)
    n = luach.hebrew_to_absolute(args.year, month, args.day)
    g = luach.absolute_to_gregorian(n)
    print(f"{g.isoformat()} ({SHORT_DAY_NAMES[luach.weekday(n)]}, absolute day {n})")
    return 0

def cmd_molad(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach molad", description="Mean conjunction of a Hebrew month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="Month number, as for to-gregorian")
    args = p.parse_args(argv)

    month = luach.try_month_from_number(args.month, args.year)
    print(luach.molad(args.year, month))
    return 0

def cmd_year(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach year", description="Summary of a Hebrew year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    info = luach.year_info(args.year)
    g = luach.absolute_to_gregorian(info.new_year)
    print(f"Year:         {info.year}")
    print(f"Leap:         {'yes' if info.is_leap else 'no'} ({info.months} months)")
    print(f"Length:       {info.days} days ({info.kind})")
    print(f"Rosh Hashana: {g.isoformat()} ({SHORT_DAY_NAMES[info.new_year_weekday]})")
    print(f"JDN:          {luach.absolute_to_jdn(info.new_year)}")
    return 0

def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `luach YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["to-hebrew", *argv]

    p = argparse.ArgumentParser(prog="luach", description="Hebrew/Gregorian calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-hebrew", help="Gregorian -> Hebrew date")
    sub.add_parser("to-gregorian", help="Hebrew -> Gregorian date")
    sub.add_parser("molad", help="Molad (mean conjunction) of a Hebrew month")
    sub.add_parser("year", help="Leap status, length and Rosh Hashana of a Hebrew year")
    sub.add_parser("new-years", help="Print Rosh Hashana table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Consistency diagnostics")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "to-hebrew": cmd_to_hebrew,
        "to-gregorian": cmd_to_gregorian,
        "molad": cmd_molad,
        "year": cmd_year,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "new-years":
            return _run_module_main("luach.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "luach.diagnostics.round_trip",
                "year-lengths": "luach.diagnostics.year_lengths",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except LuachError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
