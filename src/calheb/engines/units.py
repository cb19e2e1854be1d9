"""
calheb.engines.units
--------------------
Calendar arithmetic in years, months, weeks and days.

Month steps skip ADAR_I whenever the year being walked is a common year, so
adding and counting months agree with each other across leap-year boundaries.
Shorter destination months clamp the day of month instead of failing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Tuple

from ..core.errors import ArithmeticOverflowError, OutOfRangeError
from ..core.months import HebrewMonth
from ..core.time import safe_add, safe_multiply
from ..core.types import HebrewDate, Unit
from .arithmetic_year import CYCLE_MONTHS, CYCLE_YEARS

if TYPE_CHECKING:
    from .calendar import CalendarEngine

logger = logging.getLogger(__name__)

_ADAR_I = int(HebrewMonth.ADAR_I)


class UnitEngine:
    def __init__(self, calendar: "CalendarEngine"):
        self.cal = calendar
        p = calendar.p
        # upper bound on the number of months in the supported range
        span = p.max_year - p.min_year + 1
        self.max_month_steps = (span * CYCLE_MONTHS) // CYCLE_YEARS + 13

    # ---------------------------------------------------------
    # Month stepping
    # ---------------------------------------------------------

    def _is_leap(self, year: int) -> bool:
        return self.cal.year.is_leap_year(year)

    def next_month(self, year: int, month: int) -> Tuple[int, int]:
        month += 1
        if month == _ADAR_I and not self._is_leap(year):
            month += 1
        elif month == 14:
            month = 1
            year += 1
        return year, month

    def prev_month(self, year: int, month: int) -> Tuple[int, int]:
        month -= 1
        if month == _ADAR_I and not self._is_leap(year):
            month -= 1
        elif month == 0:
            month = 13
            year -= 1
        return year, month

    def _clamped(self, year: int, month: HebrewMonth, day: int) -> HebrewDate:
        self.cal.check_year(year)
        n = self.cal.year.length_of_month(year, month)
        if day > n:
            logger.debug("clamping day %d to %d in %s %d", day, n, month.name, year)
            day = n
        return HebrewDate(year, month, day)

    # ---------------------------------------------------------
    # Addition
    # ---------------------------------------------------------

    def add_years(self, d: HebrewDate, amount: int) -> HebrewDate:
        try:
            year = safe_add(d.year, amount)
        except ArithmeticOverflowError as exc:
            raise OutOfRangeError(f"Resulting year out of bounds: {d} + {amount} years") from exc
        self.cal.check_year(year)
        month = d.month
        if month is HebrewMonth.ADAR_I and not self._is_leap(year):
            logger.debug("ADAR_I absent in %d, using SHEVAT", year)
            month = HebrewMonth.SHEVAT
        return self._clamped(year, month, d.day)

    def add_months(self, d: HebrewDate, amount: int) -> HebrewDate:
        if abs(amount) > self.max_month_steps:
            raise OutOfRangeError(f"Resulting year out of bounds: {d} + {amount} months")
        year, month = d.year, int(d.month)
        step = self.next_month if amount > 0 else self.prev_month
        for _ in range(abs(amount)):
            year, month = step(year, month)
        return self._clamped(year, HebrewMonth(month), d.day)

    def add_days(self, d: HebrewDate, amount: int) -> HebrewDate:
        try:
            epoch_day = safe_add(self.cal.to_epoch_day(d), amount)
        except ArithmeticOverflowError as exc:
            raise OutOfRangeError(f"Resulting day out of bounds: {d} + {amount} days") from exc
        return self.cal.from_epoch_day(epoch_day)

    def add_weeks(self, d: HebrewDate, amount: int) -> HebrewDate:
        try:
            days = safe_multiply(amount, 7)
        except ArithmeticOverflowError as exc:
            raise OutOfRangeError(f"Resulting day out of bounds: {d} + {amount} weeks") from exc
        return self.add_days(d, days)

    def add(self, d: HebrewDate, amount: int, unit: Unit) -> HebrewDate:
        if unit is Unit.YEARS:
            return self.add_years(d, amount)
        if unit is Unit.MONTHS:
            return self.add_months(d, amount)
        if unit is Unit.WEEKS:
            return self.add_weeks(d, amount)
        if unit is Unit.DAYS:
            return self.add_days(d, amount)
        raise TypeError(f"Unsupported unit: {unit!r}")

    # ---------------------------------------------------------
    # Differences
    # ---------------------------------------------------------

    def years_between(self, start: HebrewDate, end: HebrewDate) -> int:
        # Month positions are compared as they are, so ADAR_I + 1 year, which
        # lands on SHEVAT in a common year, counts as 0 whole years.
        delta = end.year - start.year
        if delta > 0 and (end.month, end.day) < (start.month, start.day):
            delta -= 1
        elif delta < 0 and (end.month, end.day) > (start.month, start.day):
            delta += 1
        return delta

    def months_between(self, start: HebrewDate, end: HebrewDate) -> int:
        s, e, sign = start, end, 1
        if start > end:
            s, e, sign = end, start, -1

        delta = 0
        year, month = s.year, int(s.month)
        target = (e.year, int(e.month))
        while (year, month) < target:
            year, month = self.next_month(year, month)
            delta += 1

        if delta > 0 and s.day > e.day:
            delta -= 1
        return sign * delta

    def days_between(self, start: HebrewDate, end: HebrewDate) -> int:
        return self.cal.to_epoch_day(end) - self.cal.to_epoch_day(start)

    def weeks_between(self, start: HebrewDate, end: HebrewDate) -> int:
        days = self.days_between(start, end)
        weeks = abs(days) // 7
        return -weeks if days < 0 else weeks

    def between(self, start: HebrewDate, end: HebrewDate, unit: Unit) -> int:
        if unit is Unit.YEARS:
            return self.years_between(start, end)
        if unit is Unit.MONTHS:
            return self.months_between(start, end)
        if unit is Unit.WEEKS:
            return self.weeks_between(start, end)
        if unit is Unit.DAYS:
            return self.days_between(start, end)
        raise TypeError(f"Unsupported unit: {unit!r}")
