# tests/test_types.py

import pytest
from datetime import date

import calheb
from calheb import CalhebError, HebrewDate, HebrewMonth, InvalidDateError, OutOfRangeError, Unit

M = HebrewMonth


def test_validation():
    with pytest.raises(InvalidDateError):
        HebrewDate(5785, M.ADAR_I, 1)
    with pytest.raises(InvalidDateError):
        HebrewDate(5778, M.HESHVAN, 30)
    with pytest.raises(InvalidDateError):
        HebrewDate(5785, M.ELUL, 30)
    with pytest.raises(InvalidDateError):
        HebrewDate(5785, 14, 1)
    with pytest.raises(InvalidDateError):
        HebrewDate(5785, M.TISHRI, 0)
    with pytest.raises(InvalidDateError):
        HebrewDate("5785", M.TISHRI, 1)
    with pytest.raises(OutOfRangeError):
        HebrewDate(0, M.TISHRI, 1)
    with pytest.raises(OutOfRangeError):
        HebrewDate(10000, M.TISHRI, 1)

    # both error kinds are ValueErrors under a common base
    assert issubclass(InvalidDateError, ValueError)
    assert issubclass(OutOfRangeError, CalhebError)

    assert HebrewDate(5785, M.HESHVAN, 30).day == 30
    assert HebrewDate(5784, M.ADAR_I, 30).month is M.ADAR_I


def test_constructors():
    assert HebrewDate.of(5785, 7, 14) == HebrewDate(5785, M.ADAR_II, 14)
    assert HebrewDate.of(5785, 7, 14).month is M.ADAR_II
    assert HebrewDate.of_civil(5785, 6, 14) == HebrewDate(5785, M.ADAR_II, 14)
    assert HebrewDate.of_civil(5784, 6, 14) == HebrewDate(5784, M.ADAR_I, 14)
    assert HebrewDate.of_biblical(5784, 1, 15) == HebrewDate(5784, M.NISAN, 15)
    assert HebrewDate.of_biblical(5784, 13, 14) == HebrewDate(5784, M.ADAR_II, 14)
    assert HebrewDate.from_gregorian(date(2024, 3, 24)) == HebrewDate(5784, M.ADAR_II, 14)
    assert HebrewDate.from_epoch_day(date(2024, 10, 3).toordinal()) == HebrewDate(5785, M.TISHRI, 1)
    assert HebrewDate.today(clock=lambda: date(2024, 4, 23)) == HebrewDate(5784, M.NISAN, 15)
    assert isinstance(calheb.today(), HebrewDate)


def test_str_and_ordering():
    assert str(HebrewDate(5784, M.ADAR_II, 14)) == "AM-5784-ADAR_II-14"
    assert str(HebrewDate(1, M.TISHRI, 1)) == "AM-0001-TISHRI-01"
    assert HebrewDate(5784, M.ADAR_I, 30) < HebrewDate(5784, M.ADAR_II, 1)
    assert HebrewDate(5784, M.ELUL, 29) < HebrewDate(5785, M.TISHRI, 1)
    assert HebrewDate.minimum() < HebrewDate.maximum()


def test_month_numbers():
    h = HebrewDate(5784, M.NISAN, 1)
    assert h.civil_month == 8
    assert h.biblical_month == 1
    h = HebrewDate(5785, M.NISAN, 1)
    assert h.civil_month == 7
    assert h.biblical_month == 1
    assert HebrewDate(5785, M.ADAR_II, 1).biblical_month == 12
    assert HebrewDate(5784, M.ADAR_II, 1).biblical_month == 13


def test_year_queries():
    h = HebrewDate(5784, M.TISHRI, 1)
    assert h.is_leap_year()
    assert h.length_of_year() == 383
    assert h.length_of_month() == 30
    assert HebrewDate(5784, M.HESHVAN, 1).length_of_month() == 29
    assert HebrewDate(5782, M.TISHRI, 1).is_sabbatical_year()
    assert not HebrewDate(5783, M.TISHRI, 1).is_sabbatical_year()


def test_rosh_chodesh():
    assert HebrewDate(5785, M.TISHRI, 30).is_rosh_chodesh()
    assert HebrewDate(5785, M.HESHVAN, 1).is_rosh_chodesh()
    assert not HebrewDate(5785, M.HESHVAN, 15).is_rosh_chodesh()


def test_day_of_year():
    assert HebrewDate(5784, M.TISHRI, 1).day_of_year() == 1
    assert HebrewDate(5784, M.NISAN, 1).day_of_year() == 207
    assert HebrewDate(5784, M.ELUL, 29).day_of_year() == 383
    assert HebrewDate.of_day_of_year(5784, 207) == HebrewDate(5784, M.NISAN, 1)
    assert HebrewDate(5784, M.TISHRI, 5).with_day_of_year(383) == HebrewDate(5784, M.ELUL, 29)
    with pytest.raises(InvalidDateError):
        HebrewDate.of_day_of_year(5784, 384)
    with pytest.raises(InvalidDateError):
        HebrewDate.of_day_of_year(5785, 0)


def test_day_of_week():
    # ISO numbering: Thursday, Sunday, Saturday
    assert HebrewDate(5778, M.TISHRI, 1).day_of_week() == 4
    assert HebrewDate(5778, M.TISHRI, 11).day_of_week() == 7
    assert HebrewDate(5784, M.TISHRI, 1).day_of_week() == 6


def test_adjusters():
    h = HebrewDate(5785, M.TISHRI, 30)
    assert h.with_month(M.TEVET) == HebrewDate(5785, M.TEVET, 29)
    assert h.with_month(M.AV) == HebrewDate(5785, M.AV, 30)
    with pytest.raises(InvalidDateError):
        h.with_month(M.ADAR_I)
    assert h.with_day_of_month(3) == HebrewDate(5785, M.TISHRI, 3)
    with pytest.raises(InvalidDateError):
        HebrewDate(5785, M.ELUL, 1).with_day_of_month(30)

    assert HebrewDate(5784, M.ADAR_I, 30).with_year(5785) == HebrewDate(5785, M.SHEVAT, 30)
    assert HebrewDate(5785, M.AV, 9).with_year(5784) == HebrewDate(5784, M.AV, 9)


def test_arithmetic_shortcuts():
    h = HebrewDate(5784, M.TISHRI, 1)
    assert h.plus(383) == HebrewDate(5785, M.TISHRI, 1)
    assert h.plus(1, Unit.YEARS).minus(1, Unit.YEARS) == h
    assert h.until(HebrewDate(5785, M.TISHRI, 1), Unit.MONTHS) == 13
    assert h.until(HebrewDate(5785, M.TISHRI, 1)) == 383


def test_units_have_nominal_lengths():
    assert Unit.DAYS.length == 86400.0
    assert Unit.WEEKS.length == 7 * Unit.DAYS.length
    assert Unit.MONTHS.length < Unit.YEARS.length


def test_hebrew_date_is_frozen():
    h = HebrewDate(5785, M.TISHRI, 1)
    with pytest.raises(AttributeError):
        h.day = 2
    assert hash(h) == hash(HebrewDate(5785, M.TISHRI, 1))
