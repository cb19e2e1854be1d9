from __future__ import annotations

import argparse
from collections import Counter
from typing import Dict, List, Tuple

import calheb
from calheb.engines.arithmetic_year import YEAR_LENGTHS, year_kind


def tally(from_year: int, to_year: int) -> Tuple[Dict[int, int], List[int]]:
    """Year-length histogram and the years whose length is not one of the six legal values."""
    counts: Counter = Counter()
    bad: List[int] = []
    for Y in range(from_year, to_year + 1):
        n = calheb.length_of_year(Y)
        counts[n] += 1
        if (n in (383, 384, 385)) != calheb.is_leap_year(Y) or n not in YEAR_LENGTHS:
            bad.append(Y)
    return dict(counts), bad


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Distribution of Hebrew year lengths over a year range.")
    p.add_argument("--from-year", type=int, default=1)
    p.add_argument("--to-year", type=int, default=9999)
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    counts, bad = tally(args.from_year, args.to_year)
    total = sum(counts.values())
    print(f"Years {args.from_year}..{args.to_year} ({total} years)")
    for n in sorted(counts):
        print(f"  {n}  {year_kind(n):<9s} {counts[n]:6d}  {100.0 * counts[n] / total:6.2f}%")

    if bad:
        print(f"Illegal year lengths in: {bad[:20]}")
        return 1
    print("All year lengths legal.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
