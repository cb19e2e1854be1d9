"""
calheb.engines.cache
--------------------
Optional memoization of per-year facts. The cache belongs to the engine
instance that owns it; results are plain ints, computed once and never mutated.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

from .arithmetic_year import ArithmeticYearEngine
from .params import CalendarParams


class CachedYearEngine(ArithmeticYearEngine):
    def __init__(self, params: CalendarParams, *, maxsize: int = 4096):
        super().__init__(params)
        self._new_year = lru_cache(maxsize=maxsize)(super().new_year)
        self._length_of_year = lru_cache(maxsize=maxsize)(super().length_of_year)

    def new_year(self, year: int) -> int:
        return self._new_year(year)

    def length_of_year(self, year: int) -> int:
        return self._length_of_year(year)

    def cache_info(self) -> Dict[str, Any]:
        return {
            "new_year": self._new_year.cache_info()._asdict(),
            "length_of_year": self._length_of_year.cache_info()._asdict(),
        }

    def cache_clear(self) -> None:
        self._new_year.cache_clear()
        self._length_of_year.cache_clear()
