# tests/test_transform.py

import pytest
import random
from datetime import date

import calheb
from calheb import HebrewDate, HebrewMonth, OutOfRangeError
from calheb.engines.cache import CachedYearEngine
from calheb.engines.params import HEBREW_EPOCH_JDN, HEBREW_EPOCH_RD, JDN_PARAMS, CalendarParams

M = HebrewMonth


KNOWN = [
    (HebrewDate(5778, M.TISHRI, 1), date(2017, 9, 21)),
    (HebrewDate(5778, M.TISHRI, 11), date(2017, 10, 1)),
    (HebrewDate(5778, M.NISAN, 1), date(2018, 3, 17)),
    (HebrewDate(5784, M.TISHRI, 1), date(2023, 9, 16)),
    (HebrewDate(5784, M.ADAR_I, 1), date(2024, 2, 10)),
    (HebrewDate(5784, M.ADAR_I, 30), date(2024, 3, 10)),
    (HebrewDate(5784, M.ADAR_II, 1), date(2024, 3, 11)),
    (HebrewDate(5784, M.ADAR_II, 14), date(2024, 3, 24)),
    (HebrewDate(5784, M.NISAN, 1), date(2024, 4, 9)),
    (HebrewDate(5784, M.NISAN, 15), date(2024, 4, 23)),
    (HebrewDate(5785, M.TISHRI, 1), date(2024, 10, 3)),
    (HebrewDate(5786, M.TISHRI, 1), date(2025, 9, 23)),
]


@pytest.mark.parametrize("h, g", KNOWN)
def test_known_dates(h, g):
    assert calheb.to_gregorian(h) == g
    assert calheb.from_gregorian(g) == h
    assert calheb.to_epoch_day(h) == g.toordinal()
    assert calheb.from_epoch_day(g.toordinal()) == h


def test_epoch():
    first = HebrewDate.minimum()
    assert calheb.to_epoch_day(first) == HEBREW_EPOCH_RD
    assert calheb.from_epoch_day(HEBREW_EPOCH_RD) == first
    assert first.day_of_week() == 1


def test_round_trip_random_epoch_days():
    random.seed(42)
    eng = calheb.get_engine()
    for _ in range(5000):
        ed = random.randint(eng.min_epoch_day, eng.max_epoch_day)
        assert calheb.to_epoch_day(calheb.from_epoch_day(ed)) == ed


def test_consecutive_days_are_consecutive_dates():
    start = calheb.to_epoch_day(HebrewDate(5783, M.ELUL, 1))
    prev = calheb.from_epoch_day(start)
    for ed in range(start + 1, start + 800):
        cur = calheb.from_epoch_day(ed)
        assert cur > prev
        if cur.day != 1:
            assert (cur.year, cur.month, cur.day - 1) == (prev.year, prev.month, prev.day)
        prev = cur


def test_leap_month_boundary():
    last_shevat = HebrewDate(5784, M.SHEVAT, 30)
    ed = calheb.to_epoch_day(last_shevat)
    assert calheb.from_epoch_day(ed + 1) == HebrewDate(5784, M.ADAR_I, 1)
    assert calheb.from_epoch_day(ed + 31) == HebrewDate(5784, M.ADAR_II, 1)

    # common year: Shevat runs straight into the single Adar
    ed = calheb.to_epoch_day(HebrewDate(5785, M.SHEVAT, 30))
    assert calheb.from_epoch_day(ed + 1) == HebrewDate(5785, M.ADAR_II, 1)


def test_year_boundaries():
    for y in (1, 2, 5000, 5784, 5785, 9998):
        ny = calheb.new_year_day(y + 1)["epoch_day"]
        assert calheb.from_epoch_day(ny) == HebrewDate(y + 1, M.TISHRI, 1)
        assert calheb.from_epoch_day(ny - 1) == HebrewDate(y, M.ELUL, 29)


def test_out_of_range_epoch_days():
    eng = calheb.get_engine()
    with pytest.raises(OutOfRangeError):
        calheb.from_epoch_day(eng.min_epoch_day - 1)
    with pytest.raises(OutOfRangeError):
        calheb.from_epoch_day(eng.max_epoch_day + 1)
    assert calheb.from_epoch_day(eng.max_epoch_day) == HebrewDate.maximum()


def test_gregorian_outside_date_range():
    # 1 Tishri AM 1 lies in 3761 BCE
    with pytest.raises(OutOfRangeError):
        calheb.to_gregorian(HebrewDate.minimum())
    assert calheb.new_year_day(1)["date"] is None


def test_jdn_engine():
    eng = calheb.make_engine(JDN_PARAMS)
    assert eng.to_epoch_day(HebrewDate.minimum()) == HEBREW_EPOCH_JDN
    for h, g in KNOWN:
        assert eng.to_epoch_day(h) == g.toordinal() + 1721425
        assert eng.to_gregorian(h) == g
        assert eng.from_gregorian(g) == h


def test_cached_engine_matches_plain_engine():
    plain = calheb.get_engine()
    cached = calheb.make_engine(cached=True)
    assert isinstance(cached.year, CachedYearEngine)
    for y in range(5600, 5900):
        assert cached.year.new_year(y) == plain.year.new_year(y)
        assert cached.year.length_of_year(y) == plain.year.length_of_year(y)
    for _ in range(2):
        cached.to_epoch_day(HebrewDate(5785, M.AV, 9))
    assert cached.year.cache_info()["new_year"]["hits"] > 0
    cached.year.cache_clear()
    assert cached.year.cache_info()["new_year"]["currsize"] == 0


def test_narrowed_range():
    eng = calheb.make_engine(CalendarParams(min_year=5700, max_year=5800))
    assert eng.from_epoch_day(eng.min_epoch_day) == HebrewDate(5700, M.TISHRI, 1)
    with pytest.raises(OutOfRangeError):
        eng.to_epoch_day(HebrewDate(5801, M.TISHRI, 1))
    with pytest.raises(OutOfRangeError):
        eng.units.add_years(HebrewDate(5800, M.TISHRI, 1), 1)


def test_params_validation():
    with pytest.raises(ValueError):
        CalendarParams(min_year=0)
    with pytest.raises(ValueError):
        CalendarParams(min_year=10, max_year=5)
    with pytest.raises(TypeError):
        CalendarParams(fixed_epoch=1.5)
    with pytest.raises(TypeError):
        calheb.make_engine("jdn")


def test_day_info():
    info = calheb.day_info(date(2024, 10, 3))
    assert info.hebrew == HebrewDate(5785, M.TISHRI, 1)
    assert info.epoch_day == date(2024, 10, 3).toordinal()
    assert info.jdn == 2460587
    assert info.weekday == 4
    assert info.debug is None

    info = calheb.day_info(date(2024, 10, 3), debug=True)
    assert info.debug["length"] == 355
    assert info.debug["day_of_year"] == 1
    assert info.debug["date"] == "AM-5785-TISHRI-01"


def test_month_table_and_bounds():
    rows = calheb.month_table(5784)
    assert [r["month"] for r in rows] == list(M)
    assert sum(r["length"] for r in rows) == 383
    for a, b in zip(rows, rows[1:]):
        assert b["first_epoch_day"] == a["last_epoch_day"] + 1

    b = calheb.month_bounds(5784, M.ADAR_I)
    assert b["first_date"] == date(2024, 2, 10)
    assert b["last_date"] == date(2024, 3, 10)
    assert b["length"] == 30

    assert len(calheb.month_table(5785)) == 12


def test_is_valid():
    eng = calheb.get_engine()
    assert eng.is_valid(5784, 6, 30)
    assert eng.is_valid(5785, 2, 30)
    assert not eng.is_valid(5785, 6, 1)
    assert not eng.is_valid(5784, 2, 30)
    assert not eng.is_valid(5785, 14, 1)
    assert not eng.is_valid(10000, 1, 1)

    narrow = calheb.make_engine(CalendarParams(min_year=5700, max_year=5800))
    assert not narrow.is_valid(5801, 1, 1)
