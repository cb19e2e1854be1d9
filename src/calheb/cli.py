from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_UNITS = {"years": "YEARS", "months": "MONTHS", "weeks": "WEEKS", "days": "DAYS"}


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _setup_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper()), format="%(levelname)s %(name)s: %(message)s")


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


def _hebrew_date(year: int, month: int, day: int, order: str):
    import calheb

    mo = calheb.MonthOrder(order)
    return calheb.HebrewDate(year, mo.to_month(month, calheb.is_leap_year(year)), day)


def cmd_day(argv: list[str]) -> int:
    import calheb

    p = argparse.ArgumentParser(prog="calheb day", description="Gregorian -> Hebrew date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    try:
        info = calheb.day_info(_parse_ymd(args.date), debug=args.debug)
    except calheb.CalhebError as e:
        raise SystemExit(f"calheb day: {e}")
    print(info.hebrew)
    print(f"  epoch day = {info.epoch_day}   JDN = {info.jdn}   ISO weekday = {info.weekday}")
    if info.debug:
        for k, v in info.debug.items():
            print(f"  {k}: {v}")
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import calheb

    p = argparse.ArgumentParser(prog="calheb to-gregorian", description="Hebrew date -> Gregorian")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--order", choices=("civil", "biblical", "enum"), default="civil",
                   help="Month numbering (default: civil, Tishri = 1)")
    args = p.parse_args(argv)

    try:
        h = _hebrew_date(args.year, args.month, args.day, args.order)
        print(f"{h}  ->  {calheb.to_gregorian(h).isoformat()}")
    except calheb.CalhebError as e:
        raise SystemExit(f"calheb to-gregorian: {e}")
    return 0


def cmd_year(argv: list[str]) -> int:
    import calheb

    p = argparse.ArgumentParser(prog="calheb year", description="Year structure: molad, deferrals, month lengths")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    try:
        info = calheb.year_info(args.year)
        ny = calheb.new_year_day(args.year)
    except calheb.CalhebError as e:
        raise SystemExit(f"calheb year: {e}")

    mol = info["molad"]
    print(f"Year {args.year}  (cycle {info['cycle']}, year {info['year_of_cycle']} of 19)")
    print(f"  leap           = {info['leap']}")
    print(f"  molad Tishri   = day {mol['day']} + {mol['parts']} parts")
    print(f"  elapsed days   = {info['elapsed_days']}   delay = {info['delay']}")
    greg = ny["date"].isoformat() if ny["date"] else "-"
    print(f"  1 Tishri       = epoch day {info['new_year']}  ({greg})")
    print(f"  length         = {info['length']} ({info['kind']})")
    print()
    for row in info["months"]:
        print(f"  {row['civil']:2d}  {row['month']:<8s} {row['length']}")
    return 0


def cmd_add(argv: list[str]) -> int:
    import calheb

    p = argparse.ArgumentParser(prog="calheb add", description="Add years/months/weeks/days to a Hebrew date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("amount", type=int)
    p.add_argument("unit", choices=sorted(_UNITS))
    p.add_argument("--order", choices=("civil", "biblical", "enum"), default="civil")
    args = p.parse_args(argv)

    try:
        h = _hebrew_date(args.year, args.month, args.day, args.order)
        out = calheb.add(h, args.amount, calheb.Unit[_UNITS[args.unit]])
    except calheb.CalhebError as e:
        raise SystemExit(f"calheb add: {e}")
    print(f"{h} {args.amount:+d} {args.unit}  ->  {out}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `calheb YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="calheb", description="Hebrew calendar toolkit CLI.")
    p.add_argument("--log-level", default="warning",
                   choices=("debug", "info", "warning", "error"))
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Hebrew date")
    sub.add_parser("to-gregorian", help="Hebrew date -> Gregorian")
    sub.add_parser("year", help="Year structure: molad, deferrals, month lengths")
    sub.add_parser("add", help="Calendar arithmetic on a Hebrew date")

    # diagnostics
    sub.add_parser("pretty-month", help="Print Hebrew/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print 1 Tishri table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-lengths", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.log_level)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "add":
        return cmd_add(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("calheb.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("calheb.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calheb.diagnostics.round_trip",
            "year-lengths": "calheb.diagnostics.year_lengths",
            "new-year-scatter": "calheb.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
