from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import calheb


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def build_weeks(first: date, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first.weekday())]  # Monday=0
    for top, bot in cells:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def hebrew_month_calendar(Y: int, M: int) -> None:
    """M counts in civil order (Tishri = 1)."""
    month = calheb.HebrewMonth.of_civil(M, calheb.is_leap_year(Y))
    b = calheb.month_bounds(Y, month)
    d0 = b["first_date"]
    d1 = b["last_date"]

    cells = []
    d = d0
    day = 1
    while d <= d1:
        cells.append((f"{day:2d}", f"{d.month:02d}-{d.day:02d}"))
        d += timedelta(days=1)
        day += 1

    title = f"Hebrew month  {Y} {month.name} ({M})   ({d0} .. {d1})"
    print_grid(title, build_weeks(d0, cells))


def gregorian_month_calendar(gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    cells = []
    d = first
    while d <= last:
        h = calheb.from_gregorian(d)
        leap = calheb.is_leap_year(h.year)
        cells.append((f"{d.day:2d}", f"{h.month.civil_value(leap):02d}-{h.day:02d}"))
        d += timedelta(days=1)

    title = f"Gregorian month  {gy}-{gm:02d}"
    print_grid(title, build_weeks(first, cells))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Hebrew-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--hebrew", nargs=2, type=int, metavar=("Y", "M"),
                   help="Hebrew month to print, civil numbering: Y M (e.g. 5785 1)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 10)")
    args = p.parse_args(argv)

    if not args.hebrew and not args.greg:
        hebrew_month_calendar(Y=5785, M=1)
        gregorian_month_calendar(gy=2024, gm=10)
        return 0

    if args.hebrew:
        Y, M = args.hebrew
        hebrew_month_calendar(Y=Y, M=M)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy=gy, gm=gm)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
