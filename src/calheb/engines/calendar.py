"""
calheb.engines.calendar
-----------------------
The Orchestrator. Binds the year engine to the month walk, translating between
HebrewDate labels and integer epoch days in both directions.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List

from ..core.errors import InvalidDateError, OutOfRangeError
from ..core.months import HebrewMonth
from ..core.time import date_from_rd, iso_weekday, jdn_from_rd, rd_from_date
from ..core.types import DayInfo, HebrewDate
from .arithmetic_year import ArithmeticYearEngine, months_of_year
from .params import CalendarParams
from .units import UnitEngine

logger = logging.getLogger(__name__)

# 35975351 / 98496 days is the mean length of the arithmetic year
_YEAR_NUM = 98496
_YEAR_DEN = 35975351


class CalendarEngine:
    """
    Translates HebrewDate values to epoch days and back. Stateless apart from
    the precomputed bounds of the supported range.
    """
    def __init__(self, year: ArithmeticYearEngine, params: CalendarParams):
        self.year = year
        self.p = params
        self.min_epoch_day = self._transform(HebrewDate(params.min_year, HebrewMonth.TISHRI, 1))
        self.max_epoch_day = self._transform(HebrewDate(params.max_year, HebrewMonth.ELUL, 29))
        self.units = UnitEngine(self)

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def check_year(self, year: int) -> None:
        if not (self.p.min_year <= year <= self.p.max_year):
            raise OutOfRangeError(
                f"Hebrew year {year} outside {self.p.min_year}..{self.p.max_year}"
            )

    def is_valid(self, year: int, month: int, day: int) -> bool:
        try:
            self.check_year(year)
            HebrewDate.of(year, month, day)
        except (InvalidDateError, OutOfRangeError):
            return False
        return True

    def months(self, year: int) -> List[HebrewMonth]:
        return months_of_year(year)

    # ---------------------------------------------------------
    # Forward: HebrewDate to epoch day
    # ---------------------------------------------------------

    def _transform(self, d: HebrewDate) -> int:
        epoch_day = self.year.new_year(d.year) + d.day - 1
        leap = self.year.is_leap_year(d.year)
        for m in HebrewMonth:
            if m >= d.month:
                break
            if leap or m is not HebrewMonth.ADAR_I:
                epoch_day += self.year.length_of_month(d.year, m)
        return epoch_day

    def to_epoch_day(self, d: HebrewDate) -> int:
        self.check_year(d.year)
        return self._transform(d)

    # ---------------------------------------------------------
    # Inverse: epoch day to HebrewDate
    # ---------------------------------------------------------

    def _locate_year(self, epoch_day: int) -> int:
        y = (_YEAR_NUM * (epoch_day - self.year.epoch)) // _YEAR_DEN
        year = y - 1
        # estimate landed past epoch_day
        while self.year.new_year(year) > epoch_day:
            logger.debug("year estimate %d too late for epoch day %d", year, epoch_day)
            year -= 1
            y = year + 1
        # new_year() is strictly increasing, so the scan ends within a few steps
        while self.year.new_year(y) <= epoch_day:
            year = y
            y += 1
        return year

    def from_epoch_day(self, epoch_day: int) -> HebrewDate:
        if not (self.min_epoch_day <= epoch_day <= self.max_epoch_day):
            raise OutOfRangeError(
                f"Epoch day {epoch_day} outside {self.min_epoch_day}..{self.max_epoch_day}"
            )

        year = self._locate_year(epoch_day)
        offset = epoch_day - self.year.new_year(year)
        leap = self.year.is_leap_year(year)

        for m in HebrewMonth:
            if m is HebrewMonth.ADAR_I and not leap:
                continue
            n = self.year.length_of_month(year, m)
            if offset < n:
                return HebrewDate(year, m, offset + 1)
            offset -= n

        raise AssertionError(f"epoch day {epoch_day} beyond the end of year {year}")

    # ---------------------------------------------------------
    # Derived fields
    # ---------------------------------------------------------

    def day_of_year(self, d: HebrewDate) -> int:
        return self.to_epoch_day(d) - self.year.new_year(d.year) + 1

    def from_day_of_year(self, year: int, day_of_year: int) -> HebrewDate:
        self.check_year(year)
        ylen = self.year.length_of_year(year)
        if not (1 <= day_of_year <= ylen):
            raise InvalidDateError(f"Day of year {day_of_year} outside 1..{ylen} in year {year}")
        return self.from_epoch_day(self.year.new_year(year) + day_of_year - 1)

    def to_rd(self, epoch_day: int) -> int:
        return epoch_day - self.p.rd_shift

    def from_rd(self, rd: int) -> int:
        return rd + self.p.rd_shift

    def day_of_week(self, d: HebrewDate) -> int:
        return iso_weekday(self.to_rd(self.to_epoch_day(d)))

    # ---------------------------------------------------------
    # Gregorian bridge
    # ---------------------------------------------------------

    def to_gregorian(self, d: HebrewDate) -> date:
        return date_from_rd(self.to_rd(self.to_epoch_day(d)))

    def from_gregorian(self, d: date) -> HebrewDate:
        return self.from_epoch_day(self.from_rd(rd_from_date(d)))

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "params": self.p.__dict__,
            "year_engine": type(self.year).__name__,
            "min_epoch_day": self.min_epoch_day,
            "max_epoch_day": self.max_epoch_day,
        }

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        rd = rd_from_date(d)
        epoch_day = self.from_rd(rd)
        h = self.from_epoch_day(epoch_day)
        return DayInfo(
            civil_date=d,
            epoch_day=epoch_day,
            jdn=jdn_from_rd(rd),
            hebrew=h,
            weekday=iso_weekday(rd),
            debug=self.explain(h) if debug else None,
        )

    def explain(self, d: HebrewDate) -> Dict[str, Any]:
        out = self.year.debug_year(d.year)
        out["date"] = str(d)
        out["civil_month"] = d.civil_month
        out["biblical_month"] = d.biblical_month
        out["day_of_year"] = self.day_of_year(d)
        return out
