from __future__ import annotations

import argparse
import random

import calheb
from calheb import HebrewDate, Unit


def roundtrip_test(N: int, seed: int, *, max_failures: int) -> int:
    """epoch day -> date -> epoch day, plus add/subtract inverses."""
    random.seed(seed)
    eng = calheb.get_engine()
    lo, hi = eng.min_epoch_day, eng.max_epoch_day
    failures = 0

    for _ in range(N):
        ed = random.randint(lo, hi)
        h = calheb.from_epoch_day(ed)
        back = calheb.to_epoch_day(h)
        if back != ed:
            failures += 1
            print("\nFAIL (epoch day)")
            print("epoch day:", ed, "->", h, "->", back)

        n = random.randint(-500, 500)
        if lo <= ed + n <= hi and calheb.add_days(calheb.add_days(h, n), -n) != h:
            failures += 1
            print("\nFAIL (days)", h, n)

        if h.day <= 29:
            k = random.randint(-60, 60)
            try:
                moved = calheb.add_months(h, k)
            except calheb.OutOfRangeError:
                moved = None
            if moved is not None:
                if calheb.add_months(moved, -k) != h or calheb.units_between(Unit.MONTHS, h, moved) != k:
                    failures += 1
                    print("\nFAIL (months)", h, k, moved)

        if failures >= max_failures:
            return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: epoch day -> Hebrew date -> epoch day.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    print(f"Testing {args.N} random epoch days between {HebrewDate.minimum()} and {HebrewDate.maximum()} ...")
    f = roundtrip_test(args.N, args.seed, max_failures=args.max_failures)

    if f == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {f}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
