"""
litcal.engines.grid
-------------------
Assembles a Gregorian month into a Sunday-first grid of 7-cell rows. Cells
outside the month are ``Empty``; every real date becomes a ``Day`` holding
its own propers and those of its observed Sunday.
"""

from __future__ import annotations

from typing import List

from litcal.core.time import days_in_month
from litcal.core.types import CalendarDate, CalendarGrid, Cell, Day, Empty
from litcal.engines.interfaces import PropersRepositoryProtocol, SeasonCalculatorProtocol
from litcal.engines.season import check_year

EMPTY = Empty()


class CalendarGridBuilder:
    def __init__(self, seasons: SeasonCalculatorProtocol, propers: PropersRepositoryProtocol):
        self.seasons = seasons
        self.propers = propers

    def day(self, d: CalendarDate) -> Day:
        res = self.seasons.resolve_week(d)
        # the Sunday is read under the date's own week key
        return Day(
            date=d,
            week_key=res.week_key,
            propers=self.propers.load(d, res.week_key),
            sunday_propers=self.propers.load(res.observed_sunday, res.week_key),
        )

    def build(self, year: int, month: int) -> CalendarGrid:
        """
        Raises ValidationError for a month outside 1..12 and UnsupportedYearError
        for a year outside the computus range. Days on or after the first Sunday
        of Advent belong to the next liturgical year, so December of the last
        supported year also raises UnsupportedYearError.
        """
        n_days = days_in_month(year, month)  # ValidationError on bad month
        check_year(year)

        first = CalendarDate(year, month, 1)
        cells: List[Cell] = [EMPTY] * (first.weekday % 7)  # Sunday=0
        for n in range(1, n_days + 1):
            cells.append(self.day(CalendarDate(year, month, n)))
        if len(cells) % 7:
            cells.extend([EMPTY] * (7 - len(cells) % 7))

        weeks = tuple(tuple(cells[i : i + 7]) for i in range(0, len(cells), 7))
        return CalendarGrid(year=year, month=month, weeks=weeks)
