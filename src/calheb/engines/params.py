"""
calheb.engines.params
---------------------
Pure data payload from which engines are built.
"""

from __future__ import annotations

from dataclasses import dataclass

MIN_YEAR = 1
MAX_YEAR = 9999

# 1 Tishri AM 1 = 7 October 3761 BCE (proleptic Julian)
HEBREW_EPOCH_RD = -1373427
HEBREW_EPOCH_JDN = 347998


@dataclass(frozen=True)
class CalendarParams:
    """
    fixed_epoch is the epoch day assigned to 1 Tishri AM 1; it fixes the
    integer axis (Rata Die by default, HEBREW_EPOCH_JDN for Julian Day Numbers).
    min_year/max_year may narrow, never widen, the supported range.
    """
    fixed_epoch: int = HEBREW_EPOCH_RD
    min_year: int = MIN_YEAR
    max_year: int = MAX_YEAR

    def __post_init__(self) -> None:
        if not isinstance(self.fixed_epoch, int):
            raise TypeError("fixed_epoch must be an int")
        if not (MIN_YEAR <= self.min_year <= self.max_year <= MAX_YEAR):
            raise ValueError(f"Require {MIN_YEAR} <= min_year <= max_year <= {MAX_YEAR}")

    @property
    def rd_shift(self) -> int:
        """Epoch day minus Rata Die for the same day."""
        return self.fixed_epoch - HEBREW_EPOCH_RD


DEFAULT_PARAMS = CalendarParams()
JDN_PARAMS = CalendarParams(fixed_epoch=HEBREW_EPOCH_JDN)
