# tests/test_propers.py

from litcal import CalendarDate, Color, PropersSet, Season, WeekKey
from litcal.engines.propers import PropersRepository
from litcal.engines.specs import DAILY_READINGS_LIMIT


def test_lectionary_is_shared_across_the_week(tables):
    repo = PropersRepository(tables)
    key = WeekKey(Season.LENT, 1)
    wed = repo.load(CalendarDate(2024, 2, 14), key)
    sun = repo.load(CalendarDate(2024, 2, 18), key)
    assert wed.lectionary == sun.lectionary
    assert wed.lectionary[0].text == "Invocabit"
    assert wed.lectionary[0].key == "Lent-1"
    assert wed.lectionary[0].color is Color.VIOLET


def test_festivals_keyed_by_fixed_date(tables):
    repo = PropersRepository(tables)
    # same month/day, different liturgical weeks
    a = repo.load(CalendarDate(2024, 1, 25), WeekKey(Season.EPIPHANY, 3))
    b = repo.load(CalendarDate(2026, 1, 25), WeekKey(Season.EPIPHANY, 5))
    assert a.festivals == b.festivals
    assert a.festivals[0].text == "The Conversion of St. Paul"
    assert a.festivals[0].key == "01-25"


def test_commemorations_always_typed_37(tables):
    repo = PropersRepository(tables)
    ps = repo.load(CalendarDate(2024, 1, 10), WeekKey(Season.EPIPHANY, 1))
    assert [p.type for p in ps.commemorations] == [37]
    assert ps.commemorations[0].text == "Basil the Great of Caesarea"


def test_daily_prefers_week_entry_and_caps(tables):
    repo = PropersRepository(tables)
    ps = repo.load(CalendarDate(2024, 2, 14), WeekKey(Season.LENT, 1))
    assert len(ps.daily) == DAILY_READINGS_LIMIT == 2
    assert [p.text for p in ps.daily] == ["Joel 2:12-19", "Matthew 6:1-21"]
    assert ps.daily[0].key == "Lent-1:3"


def test_daily_falls_back_to_month_rotation(tables):
    repo = PropersRepository(tables)
    ps = repo.load(CalendarDate(2024, 2, 15), WeekKey(Season.LENT, 1))
    assert [p.text for p in ps.daily] == ["Exodus 2:1-22", "Mark 2:1-17"]
    assert ps.daily[0].key == "02-15"


def test_daily_limit_is_configurable(tables):
    repo = PropersRepository(tables, daily_limit=3)
    ps = repo.load(CalendarDate(2024, 2, 15), WeekKey(Season.LENT, 1))
    assert len(ps.daily) == 3


def test_missing_keys_are_empty(tables):
    repo = PropersRepository(tables)
    ps = repo.load(CalendarDate(2024, 7, 3), WeekKey(Season.PENTECOST, 7))
    assert ps == PropersSet()
    assert ps.is_empty()


def test_load_is_idempotent(engine):
    d = CalendarDate(2024, 2, 14)
    key = engine.resolve_week(d).week_key
    assert engine.load_propers(d, key) == engine.load_propers(d, key)
