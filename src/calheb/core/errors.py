class CalhebError(Exception):
    """Base error."""

class InvalidDateError(CalhebError, ValueError):
    """Raised when (year, month, day) does not name a day of the Hebrew calendar."""

class OutOfRangeError(CalhebError, ValueError):
    """Raised when a year or epoch day falls outside the supported range."""

class ArithmeticOverflowError(CalhebError, OverflowError):
    """Raised by checked integer arithmetic; engines report it as OutOfRangeError."""
