from __future__ import annotations

from datetime import date
from fractions import Fraction
from typing import Any, Dict, List, Optional

from .core.errors import InvalidDateError, OutOfRangeError
from .core.months import HebrewMonth
from .core.time import date_from_rd
from .core.types import DayInfo, HebrewDate, Unit
from .engines.calendar import CalendarEngine
from .engines.factory import make_engine as _make_engine
from .engines.params import DEFAULT_PARAMS, CalendarParams

_engine: Optional[CalendarEngine] = None

def set_engine(engine: CalendarEngine) -> None:
    global _engine
    _engine = engine

def get_engine() -> CalendarEngine:
    if _engine is None:
        raise RuntimeError("Calendar engine not initialized")
    return _engine

def make_engine(params: CalendarParams = DEFAULT_PARAMS, *, cached: bool = False) -> CalendarEngine:
    return _make_engine(params, cached=cached)

def engine_info() -> Dict[str, Any]:
    return get_engine().info()

def _check_year(year: int) -> None:
    if year < 0:
        raise InvalidDateError(f"Hebrew year is not positive: {year}")
    get_engine().check_year(year)

# ============================================================
# Core transforms
# ============================================================

def to_epoch_day(d: HebrewDate) -> int:
    return get_engine().to_epoch_day(d)

def from_epoch_day(epoch_day: int) -> HebrewDate:
    return get_engine().from_epoch_day(epoch_day)

def from_gregorian(d: date) -> HebrewDate:
    return get_engine().from_gregorian(d)

def to_gregorian(d: HebrewDate) -> date:
    return get_engine().to_gregorian(d)

def today() -> HebrewDate:
    return HebrewDate.today()

def day_info(d: date, *, debug: bool = False) -> DayInfo:
    return get_engine().day_info(d, debug=debug)

def explain(d: date) -> Dict[str, Any]:
    return day_info(d, debug=True).__dict__

# ============================================================
# Year-level queries
# ============================================================

def is_leap_year(year: int) -> bool:
    if year < 0:
        raise InvalidDateError(f"Hebrew year is not positive: {year}")
    return get_engine().year.is_leap_year(year)

def length_of_year(year: int) -> int:
    _check_year(year)
    return get_engine().year.length_of_year(year)

def length_of_month(year: int, month: HebrewMonth) -> int:
    _check_year(year)
    month = HebrewMonth.of(month)
    eng = get_engine()
    if month is HebrewMonth.ADAR_I and not eng.year.is_leap_year(year):
        raise InvalidDateError(f"ADAR_I does not exist in the common year {year}")
    return eng.year.length_of_month(year, month)

def molad(year: int, month: HebrewMonth = HebrewMonth.TISHRI) -> Fraction:
    """Mean conjunction as a fractional epoch day."""
    _check_year(year)
    return get_engine().year.molad(year, month)

def year_info(year: int) -> Dict[str, Any]:
    _check_year(year)
    return get_engine().year.debug_year(year)

def new_year_day(year: int, *, as_date: bool = True) -> Dict[str, Any]:
    _check_year(year)
    eng = get_engine()
    epoch_day = eng.year.new_year(year)
    out: Dict[str, Any] = {"year": year, "epoch_day": epoch_day, "length": eng.year.length_of_year(year)}
    if as_date:
        try:
            out["date"] = date_from_rd(eng.to_rd(epoch_day))
        except OutOfRangeError:
            out["date"] = None
    return out

def months_in_year(year: int) -> int:
    _check_year(year)
    return get_engine().year.months_in_year(year)

def month_table(year: int) -> List[Dict[str, Any]]:
    _check_year(year)
    eng = get_engine()
    leap = eng.year.is_leap_year(year)
    out = []
    for m in eng.months(year):
        first = eng.to_epoch_day(HebrewDate(year, m, 1))
        n = eng.year.length_of_month(year, m)
        out.append({
            "month": m,
            "civil": m.civil_value(leap),
            "biblical": m.biblical_value(leap),
            "length": n,
            "first_epoch_day": first,
            "last_epoch_day": first + n - 1,
        })
    return out

def month_bounds(year: int, month: HebrewMonth, *, as_date: bool = True) -> Dict[str, Any]:
    n = length_of_month(year, month)
    eng = get_engine()
    first = HebrewDate(year, HebrewMonth.of(month), 1)
    last = HebrewDate(year, first.month, n)
    out: Dict[str, Any] = {
        "year": year,
        "month": first.month,
        "length": n,
        "first_epoch_day": eng.to_epoch_day(first),
        "last_epoch_day": eng.to_epoch_day(last),
    }
    if as_date:
        out["first_date"] = eng.to_gregorian(first)
        out["last_date"] = eng.to_gregorian(last)
    return out

# ============================================================
# Unit arithmetic
# ============================================================

def add_years(d: HebrewDate, amount: int) -> HebrewDate:
    return get_engine().units.add_years(d, amount)

def add_months(d: HebrewDate, amount: int) -> HebrewDate:
    return get_engine().units.add_months(d, amount)

def add_weeks(d: HebrewDate, amount: int) -> HebrewDate:
    return get_engine().units.add_weeks(d, amount)

def add_days(d: HebrewDate, amount: int) -> HebrewDate:
    return get_engine().units.add_days(d, amount)

def add(d: HebrewDate, amount: int, unit: Unit) -> HebrewDate:
    return get_engine().units.add(d, amount, unit)

def units_between(unit: Unit, start: HebrewDate, end: HebrewDate) -> int:
    return get_engine().units.between(start, end, unit)
