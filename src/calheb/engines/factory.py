"""
calheb.engines.factory
----------------------
Transforms pure data parameters into live, executable Engine objects.
"""

from __future__ import annotations

from .arithmetic_year import ArithmeticYearEngine
from .cache import CachedYearEngine
from .calendar import CalendarEngine
from .params import DEFAULT_PARAMS, CalendarParams


def build_year_engine(params: CalendarParams, *, cached: bool = False) -> ArithmeticYearEngine:
    if cached:
        return CachedYearEngine(params)
    return ArithmeticYearEngine(params)


def make_engine(params: CalendarParams = DEFAULT_PARAMS, *, cached: bool = False) -> CalendarEngine:
    """The universal entry point."""
    if not isinstance(params, CalendarParams):
        raise TypeError(f"Unknown params type: {type(params)}")
    return CalendarEngine(build_year_engine(params, cached=cached), params)
