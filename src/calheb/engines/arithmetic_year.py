"""
calheb.engines.arithmetic_year
------------------------------
Closed-form year arithmetic for the Hebrew calendar: mean conjunctions (molad),
the two deferral rules that place 1 Tishri, and the year and month lengths that
follow from them.

The module-level functions are pure functions of the year number and count days
from the Hebrew epoch (1 Tishri AM 1 = day 0). ArithmeticYearEngine anchors them
to an absolute epoch-day axis.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Any, Dict, List

from ..core.months import HebrewMonth
from .params import CalendarParams

PARTS_PER_HOUR = 1080
PARTS_PER_DAY = 24 * PARTS_PER_HOUR          # 25920

# Mean synodic month: 29d 12h 793p
SYNODIC_MONTH = Fraction(29, 1) + Fraction(12 * PARTS_PER_HOUR + 793, PARTS_PER_DAY)

# Molad of Tishri AM 1 (BaHaRaD): 5h 204p after 6 p.m. on the eve of the epoch
# day, which is 876 parts before its midnight.
MOLAD_EPOCH = Fraction(-876, PARTS_PER_DAY)

# 235 lunations per 19-year Metonic cycle
CYCLE_YEARS = 19
CYCLE_MONTHS = 235

YEAR_LENGTHS = (353, 354, 355, 383, 384, 385)

_YEAR_KIND = {3: "deficient", 4: "regular", 5: "complete"}

_FIXED_MONTH_LENGTHS: Dict[HebrewMonth, int] = {
    HebrewMonth.TISHRI: 30,
    HebrewMonth.TEVET: 29,
    HebrewMonth.SHEVAT: 30,
    HebrewMonth.ADAR_I: 30,
    HebrewMonth.ADAR_II: 29,
    HebrewMonth.NISAN: 30,
    HebrewMonth.IYAR: 29,
    HebrewMonth.SIVAN: 30,
    HebrewMonth.TAMUZ: 29,
    HebrewMonth.AV: 30,
    HebrewMonth.ELUL: 29,
}


# ---------------------------------------------------------
# Metonic cycle
# ---------------------------------------------------------

def is_leap_year(year: int) -> bool:
    """Years 3, 6, 8, 11, 14, 17 and 19 of each cycle carry ADAR_I."""
    return ((7 * year + 1) % CYCLE_YEARS) < 7


def months_in_year(year: int) -> int:
    return 13 if is_leap_year(year) else 12


def months_elapsed(year: int) -> int:
    """Lunations from the molad of Tishri AM 1 to the molad of Tishri of `year`."""
    return (CYCLE_MONTHS * year - (CYCLE_MONTHS - 1)) // CYCLE_YEARS


def months_of_year(year: int) -> List[HebrewMonth]:
    """Months present in `year`, in civil order."""
    leap = is_leap_year(year)
    return [m for m in HebrewMonth if leap or m is not HebrewMonth.ADAR_I]


# ---------------------------------------------------------
# Molad and the new-year deferrals
# ---------------------------------------------------------

def molad(year: int, month: HebrewMonth = HebrewMonth.TISHRI) -> Fraction:
    """
    Mean conjunction of `month` in `year`, in days since the epoch day.

    Lunations are counted from Tishri of `year` by the civil position of the
    month, so the single Adar of a common year is the sixth lunation.
    """
    month = HebrewMonth.of(month)
    elapsed = months_elapsed(year) + month.civil_value(is_leap_year(year)) - 1
    return MOLAD_EPOCH + elapsed * SYNODIC_MONTH


def elapsed_days(year: int) -> int:
    """
    Day of the Tishri molad (rounded at noon) with the weekday deferral applied.

    Equivalent to floor(molad(year) + 1/2) carried out on integer parts:
    29*m days + (12084 + 13753*m) parts, 12084 = 12960 - 876 and
    13753 = 12960 + 793.
    """
    m = months_elapsed(year)
    days = 29 * m + (12084 + 13753 * m) // PARTS_PER_DAY
    # Rosh Hashanah never falls on Sunday, Wednesday or Friday
    if (3 * (days + 1)) % 7 < 3:
        return days + 1
    return days


def new_year_delay(year: int) -> int:
    """Extra postponement that keeps year lengths away from 356 and 382 days."""
    ny0 = elapsed_days(year - 1)
    ny1 = elapsed_days(year)
    ny2 = elapsed_days(year + 1)
    if ny2 - ny1 == 356:
        return 2
    if ny1 - ny0 == 382:
        return 1
    return 0


def new_year_offset(year: int) -> int:
    """Days from the epoch day to 1 Tishri of `year`."""
    return elapsed_days(year) + new_year_delay(year)


# ---------------------------------------------------------
# Lengths
# ---------------------------------------------------------

def length_of_year(year: int) -> int:
    return new_year_offset(year + 1) - new_year_offset(year)


def month_length(month: HebrewMonth, year_length: int) -> int:
    """Length of `month` in a year of `year_length` days."""
    if month is HebrewMonth.HESHVAN:
        return 30 if year_length in (355, 385) else 29
    if month is HebrewMonth.KISLEV:
        return 29 if year_length in (353, 383) else 30
    return _FIXED_MONTH_LENGTHS[month]


def length_of_month(year: int, month: HebrewMonth) -> int:
    month = HebrewMonth.of(month)
    if month in (HebrewMonth.HESHVAN, HebrewMonth.KISLEV):
        return month_length(month, length_of_year(year))
    return _FIXED_MONTH_LENGTHS[month]


def year_kind(year_length: int) -> str:
    return _YEAR_KIND[year_length % 10]


class ArithmeticYearEngine:
    """
    Year-level facts on an absolute epoch-day axis.
    Every method is a pure function of its arguments; nothing is stored.
    """
    def __init__(self, params: CalendarParams):
        self.p = params

    @property
    def epoch(self) -> int:
        return self.p.fixed_epoch

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def months_in_year(self, year: int) -> int:
        return months_in_year(year)

    def molad(self, year: int, month: HebrewMonth = HebrewMonth.TISHRI) -> Fraction:
        return self.p.fixed_epoch + molad(year, HebrewMonth.of(month))

    def new_year(self, year: int) -> int:
        """Epoch day of 1 Tishri of `year`."""
        return self.p.fixed_epoch + new_year_offset(year)

    def length_of_year(self, year: int) -> int:
        return self.new_year(year + 1) - self.new_year(year)

    def length_of_month(self, year: int, month: HebrewMonth) -> int:
        month = HebrewMonth.of(month)
        if month in (HebrewMonth.HESHVAN, HebrewMonth.KISLEV):
            return month_length(month, self.length_of_year(year))
        return _FIXED_MONTH_LENGTHS[month]

    def year_kind(self, year: int) -> str:
        return year_kind(self.length_of_year(year))

    def debug_year(self, year: int) -> Dict[str, Any]:
        ylen = self.length_of_year(year)
        leap = is_leap_year(year)
        mol = molad(year)
        mol_day = math.floor(mol)
        return {
            "year": year,
            "cycle": (year - 1) // CYCLE_YEARS + 1,
            "year_of_cycle": (year - 1) % CYCLE_YEARS + 1,
            "leap": leap,
            "months_elapsed": months_elapsed(year),
            "molad": {
                "days": mol,
                "day": mol_day,
                "parts": int((mol - mol_day) * PARTS_PER_DAY),
            },
            "elapsed_days": elapsed_days(year),
            "delay": new_year_delay(year),
            "new_year": self.new_year(year),
            "length": ylen,
            "kind": year_kind(ylen),
            "months": [
                {"month": m.name, "civil": m.civil_value(leap), "length": month_length(m, ylen)}
                for m in months_of_year(year)
            ],
        }
