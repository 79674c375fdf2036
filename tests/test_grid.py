# tests/test_grid.py

import pytest

from litcal import (
    CalendarDate,
    Color,
    Day,
    Empty,
    UnsupportedYearError,
    ValidationError,
)


def test_february_leap_year_layout(engine):
    grid = engine.build_month(2024, 2)
    assert all(len(week) == 7 for week in grid.weeks)
    assert len(grid.weeks) == 5
    assert len(grid.days()) == 29

    first_row = grid.weeks[0]
    # Feb 1, 2024 is a Thursday: Sunday-first column 4
    assert all(isinstance(c, Empty) for c in first_row[:4])
    assert isinstance(first_row[4], Day)
    assert first_row[4].date == CalendarDate(2024, 2, 1)
    last_row = grid.weeks[-1]
    assert last_row[4].date == CalendarDate(2024, 2, 29)
    assert all(isinstance(c, Empty) for c in last_row[5:])


def test_non_leap_february(engine):
    assert len(engine.build_month(2023, 2).days()) == 28


def test_month_starting_on_sunday_has_no_leading_padding(engine):
    grid = engine.build_month(2024, 9)  # Sep 1, 2024 is a Sunday
    assert isinstance(grid.weeks[0][0], Day)
    assert grid.weeks[0][0].date == CalendarDate(2024, 9, 1)


def test_days_sit_in_their_weekday_column(engine):
    grid = engine.build_month(2024, 12)
    for week in grid.weeks:
        for col, cell in enumerate(week):
            if isinstance(cell, Day):
                assert cell.date.weekday % 7 == col


def test_padding_is_distinct_from_empty_day(engine):
    grid = engine.build_month(2024, 7)
    day = grid.day(3)
    assert isinstance(day, Day)
    assert day.propers.is_empty()
    assert Empty() != day


def test_day_carries_own_and_sunday_propers(engine):
    grid = engine.build_month(2024, 2)
    ash_wednesday = grid.day(14)
    assert str(ash_wednesday.week_key) == "Lent-1"
    assert ash_wednesday.propers.lectionary[0].text == "Invocabit"
    # the Sunday (Feb 11) is read under the Wednesday's week key, not Epiphany-6
    assert ash_wednesday.sunday_propers.lectionary == ash_wednesday.propers.lectionary
    assert ash_wednesday.propers.commemorations
    assert ash_wednesday.sunday_propers.commemorations == ()


def test_ash_wednesday_title_follows_lent(engine):
    from litcal.engines import day_view

    day = engine.day(CalendarDate(2024, 2, 14))
    assert day_view.day_title(day) == "Wednesday of Invocabit"
    assert day_view.day_color(day) is Color.VIOLET


@pytest.mark.parametrize("month", [0, 13, -1])
def test_bad_month_is_a_validation_error(engine, month):
    with pytest.raises(ValidationError):
        engine.build_month(2024, month)


def test_pre_gregorian_year_is_unsupported(engine):
    with pytest.raises(UnsupportedYearError):
        engine.build_month(1500, 3)


def test_first_supported_month(engine):
    assert len(engine.build_month(1583, 1).days()) == 31


def test_december_of_last_year_needs_next_easter(engine):
    with pytest.raises(UnsupportedYearError):
        engine.build_month(9999, 12)
