from __future__ import annotations
from datetime import date

from .errors import ArithmeticOverflowError, OutOfRangeError

# Julian Day Number of Rata Die 0 (JDN = RD + 1721425)
JDN_RD_OFFSET = 1721425

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def floor_div(a: int, b: int) -> int:
    return a // b


def floor_mod(a: int, b: int) -> int:
    return a % b


def _check64(x: int, op: str) -> int:
    if x < INT64_MIN or x > INT64_MAX:
        raise ArithmeticOverflowError(f"Integer overflow in {op}: {x}")
    return x


def safe_add(a: int, b: int) -> int:
    """a + b, restricted to the signed 64-bit range."""
    return _check64(a + b, "addition")


def safe_subtract(a: int, b: int) -> int:
    return _check64(a - b, "subtraction")


def safe_multiply(a: int, b: int) -> int:
    """a * b, restricted to the signed 64-bit range."""
    return _check64(a * b, "multiplication")


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    if not (1 <= year <= 9999):
        raise OutOfRangeError(f"JDN {jdn} is outside the range of datetime.date")
    return date(year, month, day)


def rd_from_date(d: date) -> int:
    """Rata Die fixed day (0001-01-01 = 1)."""
    return d.toordinal()


def date_from_rd(rd: int) -> date:
    if rd < date.min.toordinal() or rd > date.max.toordinal():
        raise OutOfRangeError(f"Fixed day {rd} is outside the range of datetime.date")
    return date.fromordinal(rd)


def jdn_from_rd(rd: int) -> int:
    return rd + JDN_RD_OFFSET


def rd_from_jdn(jdn: int) -> int:
    return jdn - JDN_RD_OFFSET


def iso_weekday(rd: int) -> int:
    """ISO weekday of a fixed day: 1=Monday .. 7=Sunday (RD 1 is a Monday)."""
    return floor_mod(rd - 1, 7) + 1
