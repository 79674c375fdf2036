"""
litcal.engines.propers
----------------------
Looks up the propers of one date in the four tables. Each table is keyed
independently:

  lectionary      week key (shared by every day of the week)
  festivals       fixed MM-DD
  commemorations  fixed MM-DD
  daily           (week key, weekday), else the MM-DD rotation entry

A key absent from a table yields an empty tuple.
"""

from __future__ import annotations

from typing import Tuple

from litcal.core.types import CalendarDate, Proper, PropersSet, WeekKey
from litcal.engines.specs import DAILY_READINGS_LIMIT
from litcal.tables import Tables


class PropersRepository:
    def __init__(self, tables: Tables, *, daily_limit: int = DAILY_READINGS_LIMIT):
        self.tables = tables
        self.daily_limit = daily_limit

    def lectionary(self, week_key: WeekKey) -> Tuple[Proper, ...]:
        return self.tables.lectionary.get(str(week_key), ())

    def festivals(self, d: CalendarDate) -> Tuple[Proper, ...]:
        return self.tables.festivals.get(d.mmdd, ())

    def commemorations(self, d: CalendarDate) -> Tuple[Proper, ...]:
        return self.tables.commemorations.get(d.mmdd, ())

    def daily(self, d: CalendarDate, week_key: WeekKey) -> Tuple[Proper, ...]:
        # week-specific entries take precedence over the month rotation
        entries = self.tables.daily.get((str(week_key), d.weekday), ())
        if not entries:
            entries = self.tables.daily.get(d.mmdd, ())
        return tuple(entries[: self.daily_limit])

    def load(self, d: CalendarDate, week_key: WeekKey) -> PropersSet:
        return PropersSet(
            lectionary=self.lectionary(week_key),
            festivals=self.festivals(d),
            daily=self.daily(d, week_key),
            commemorations=self.commemorations(d),
        )
