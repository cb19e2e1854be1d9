from __future__ import annotations

import argparse
from typing import List

import calheb

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def rows(from_year: int, to_year: int) -> List[dict]:
    out = []
    for Y in range(from_year, to_year + 1):
        ny = calheb.new_year_day(Y)
        first = calheb.HebrewDate(Y, calheb.HebrewMonth.TISHRI, 1)
        out.append({
            "year": Y,
            "date": ny["date"],
            "epoch_day": ny["epoch_day"],
            "weekday": first.day_of_week(),
            "length": ny["length"],
            "kind": calheb.get_engine().year.year_kind(Y),
            "leap": calheb.is_leap_year(Y),
        })
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the 1 Tishri (Rosh Hashanah) table with year lengths."
    )
    p.add_argument("--from-year", type=int, default=5760)
    p.add_argument("--to-year", type=int, default=5800)
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "1 Tishri", "Day", "Length", "Kind", "Leap"]
    colw = [5, 11, 4, 6, 9, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for r in rows(Y0, Y1):
        d = r["date"].isoformat() if r["date"] else f"ED {r['epoch_day']}"
        cells = [
            str(r["year"]),
            d,
            _WEEKDAYS[r["weekday"] - 1],
            str(r["length"]),
            r["kind"],
            "L" if r["leap"] else "",
        ]
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
