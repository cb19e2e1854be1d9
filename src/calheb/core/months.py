"""
calheb.core.months
------------------
The thirteen month positions of the Hebrew year and their three numbering
schemes (enum position, civil count from Tishri, biblical count from Nisan).
"""

from __future__ import annotations

from enum import Enum, IntEnum

from .errors import InvalidDateError


def _check_number(value: int, leap_year: bool) -> None:
    if value < 1 or value > 13 or (not leap_year and value == 13):
        raise InvalidDateError(f"Hebrew month out of range: {value}")


class HebrewMonth(IntEnum):
    """
    Month positions in civil order. ADAR_I is the leap month and exists only in
    leap years; in a common year the single Adar is ADAR_II.
    """
    TISHRI = 1
    HESHVAN = 2
    KISLEV = 3
    TEVET = 4
    SHEVAT = 5
    ADAR_I = 6
    ADAR_II = 7
    NISAN = 8
    IYAR = 9
    SIVAN = 10
    TAMUZ = 11
    AV = 12
    ELUL = 13

    @classmethod
    def of(cls, value: int) -> "HebrewMonth":
        if isinstance(value, HebrewMonth):
            return value
        if isinstance(value, bool) or not isinstance(value, int) or not (1 <= value <= 13):
            raise InvalidDateError(f"Hebrew month out of range: {value!r}")
        return cls(value)

    @classmethod
    def of_civil(cls, value: int, leap_year: bool) -> "HebrewMonth":
        """Tishri = 1; Elul = 12 in common years, 13 in leap years."""
        _check_number(value, leap_year)
        if not leap_year and value >= 6:
            return cls(value + 1)
        return cls(value)

    @classmethod
    def of_biblical(cls, value: int, leap_year: bool) -> "HebrewMonth":
        """Nisan = 1; the (last) Adar is 12 in common years, 13 in leap years."""
        _check_number(value, leap_year)
        if not leap_year and value == 12:
            return cls.ADAR_II
        m = value + 7
        if m > 13:
            m -= 13
        return cls(m)

    @property
    def is_leap_month(self) -> bool:
        return self is HebrewMonth.ADAR_I

    def civil_value(self, leap_year: bool) -> int:
        m = int(self)
        if not leap_year and m >= 7:
            m -= 1
        return m

    def biblical_value(self, leap_year: bool) -> int:
        m = int(self) + 6
        if m > 13:
            m -= 13
        if not leap_year and m == 13:
            m = 12
        return m


class MonthOrder(Enum):
    CIVIL = "civil"
    BIBLICAL = "biblical"
    ENUM = "enum"

    def to_month(self, value: int, leap_year: bool) -> HebrewMonth:
        if self is MonthOrder.CIVIL:
            return HebrewMonth.of_civil(value, leap_year)
        if self is MonthOrder.BIBLICAL:
            return HebrewMonth.of_biblical(value, leap_year)
        return HebrewMonth.of(value)

    def number(self, month: HebrewMonth, leap_year: bool) -> int:
        if self is MonthOrder.CIVIL:
            return month.civil_value(leap_year)
        if self is MonthOrder.BIBLICAL:
            return month.biblical_value(leap_year)
        return int(month)
