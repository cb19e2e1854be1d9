"""calheb public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize the default engine on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_epoch_day,
    from_epoch_day,
    from_gregorian,
    to_gregorian,
    today,
    day_info,
    explain,
    is_leap_year,
    length_of_year,
    length_of_month,
    molad,
    year_info,
    new_year_day,
    months_in_year,
    month_table,
    month_bounds,
    add,
    add_years,
    add_months,
    add_weeks,
    add_days,
    units_between,
    get_engine,
    set_engine,
    make_engine,
    engine_info,
)
from .core.errors import CalhebError, InvalidDateError, OutOfRangeError
from .core.months import HebrewMonth, MonthOrder
from .core.types import DayInfo, HebrewDate, Unit
from .engines.params import CalendarParams, DEFAULT_PARAMS, JDN_PARAMS

__all__ = [
    "to_epoch_day",
    "from_epoch_day",
    "from_gregorian",
    "to_gregorian",
    "today",
    "day_info",
    "explain",
    "is_leap_year",
    "length_of_year",
    "length_of_month",
    "molad",
    "year_info",
    "new_year_day",
    "months_in_year",
    "month_table",
    "month_bounds",
    "add",
    "add_years",
    "add_months",
    "add_weeks",
    "add_days",
    "units_between",
    "get_engine",
    "set_engine",
    "make_engine",
    "engine_info",
    "CalhebError",
    "InvalidDateError",
    "OutOfRangeError",
    "HebrewMonth",
    "MonthOrder",
    "DayInfo",
    "HebrewDate",
    "Unit",
    "CalendarParams",
    "DEFAULT_PARAMS",
    "JDN_PARAMS",
]
