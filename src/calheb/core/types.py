from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .errors import InvalidDateError, OutOfRangeError
from .months import HebrewMonth
from ..engines.arithmetic_year import is_leap_year, length_of_month
from ..engines.params import MAX_YEAR, MIN_YEAR


def _engine():
    from ..api import get_engine
    return get_engine()


class Unit(Enum):
    """Calendrical units with their nominal length in seconds."""
    YEARS = 365.2468 * 86400.0
    MONTHS = 30 * 86400.0
    WEEKS = 7 * 86400.0
    DAYS = 86400.0

    @property
    def length(self) -> float:
        return self.value

    def between(self, start: "HebrewDate", end: "HebrewDate") -> int:
        return _engine().units.between(start, end, self)


@dataclass(frozen=True, order=True)
class HebrewDate:
    """
    A day of the Hebrew calendar, validated on construction.
    Ordering is chronological because month positions follow civil order.
    """
    year: int
    month: HebrewMonth
    day: int

    def __post_init__(self) -> None:
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise InvalidDateError(f"Hebrew year must be an int: {self.year!r}")
        if not (MIN_YEAR <= self.year <= MAX_YEAR):
            raise OutOfRangeError(f"Hebrew year out of range: {self.year}")
        object.__setattr__(self, "month", HebrewMonth.of(self.month))
        if self.month is HebrewMonth.ADAR_I and not is_leap_year(self.year):
            raise InvalidDateError(f"ADAR_I does not exist in the common year {self.year}")
        if isinstance(self.day, bool) or not isinstance(self.day, int):
            raise InvalidDateError(f"Day of month must be an int: {self.day!r}")
        if not (1 <= self.day <= length_of_month(self.year, self.month)):
            raise InvalidDateError(
                f"Invalid Hebrew date: year={self.year}, month={self.month.name}, day={self.day}"
            )

    def __str__(self) -> str:
        return f"AM-{self.year:04d}-{self.month.name}-{self.day:02d}"

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "HebrewDate":
        return cls(year, HebrewMonth.of(month), day)

    @classmethod
    def of_civil(cls, year: int, month: int, day: int) -> "HebrewDate":
        return cls(year, HebrewMonth.of_civil(month, is_leap_year(year)), day)

    @classmethod
    def of_biblical(cls, year: int, month: int, day: int) -> "HebrewDate":
        return cls(year, HebrewMonth.of_biblical(month, is_leap_year(year)), day)

    @classmethod
    def of_day_of_year(cls, year: int, day_of_year: int) -> "HebrewDate":
        return _engine().from_day_of_year(year, day_of_year)

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> "HebrewDate":
        return _engine().from_epoch_day(epoch_day)

    @classmethod
    def from_gregorian(cls, d: date) -> "HebrewDate":
        return _engine().from_gregorian(d)

    @classmethod
    def today(cls, clock: Optional[Callable[[], date]] = None) -> "HebrewDate":
        """Current date; `clock` supplies today's Gregorian date (default: date.today)."""
        return cls.from_gregorian((clock or date.today)())

    @classmethod
    def minimum(cls) -> "HebrewDate":
        return cls(MIN_YEAR, HebrewMonth.TISHRI, 1)

    @classmethod
    def maximum(cls) -> "HebrewDate":
        return cls(MAX_YEAR, HebrewMonth.ELUL, 29)

    # ---------------------------------------------------------
    # Queries
    # ---------------------------------------------------------

    @property
    def civil_month(self) -> int:
        return self.month.civil_value(self.is_leap_year())

    @property
    def biblical_month(self) -> int:
        return self.month.biblical_value(self.is_leap_year())

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def is_sabbatical_year(self) -> bool:
        return self.year % 7 == 0

    def is_rosh_chodesh(self) -> bool:
        """Day 30 and day 1 are both observed as the new month."""
        return self.day == 1 or self.day == 30

    def length_of_month(self) -> int:
        return length_of_month(self.year, self.month)

    def length_of_year(self) -> int:
        return _engine().year.length_of_year(self.year)

    def day_of_year(self) -> int:
        return _engine().day_of_year(self)

    def day_of_week(self) -> int:
        """ISO weekday, 1=Monday .. 7=Sunday (Shabbat = 6)."""
        return _engine().day_of_week(self)

    def to_epoch_day(self) -> int:
        return _engine().to_epoch_day(self)

    def to_gregorian(self) -> date:
        return _engine().to_gregorian(self)

    # ---------------------------------------------------------
    # Adjusters and arithmetic
    # ---------------------------------------------------------

    def with_year(self, year: int) -> "HebrewDate":
        """Same month and day in `year`; ADAR_I becomes SHEVAT in a common year."""
        return _engine().units.add(self, year - self.year, Unit.YEARS)

    def with_month(self, month: HebrewMonth) -> "HebrewDate":
        month = HebrewMonth.of(month)
        if month is HebrewMonth.ADAR_I and not self.is_leap_year():
            raise InvalidDateError(f"ADAR_I cannot be set in a common year: {self}")
        return HebrewDate(self.year, month, min(self.day, length_of_month(self.year, month)))

    def with_day_of_month(self, day: int) -> "HebrewDate":
        return replace(self, day=day)

    def with_day_of_year(self, day_of_year: int) -> "HebrewDate":
        return HebrewDate.of_day_of_year(self.year, day_of_year)

    def plus(self, amount: int, unit: Unit = Unit.DAYS) -> "HebrewDate":
        return _engine().units.add(self, amount, unit)

    def minus(self, amount: int, unit: Unit = Unit.DAYS) -> "HebrewDate":
        return _engine().units.add(self, -amount, unit)

    def until(self, end: "HebrewDate", unit: Unit = Unit.DAYS) -> int:
        return _engine().units.between(self, end, unit)


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    epoch_day: int
    jdn: int
    hebrew: HebrewDate
    weekday: int
    debug: Optional[Dict[str, Any]] = None
