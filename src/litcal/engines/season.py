"""
litcal.engines.season
---------------------
The Church-year clock. Computes Easter for a civil year and places any date
in its liturgical season and week.

A liturgical year L runs from the first Sunday of Advent in civil year L-1
to the eve of the first Sunday of Advent in civil year L; its Easter is
Easter of civil year L.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from litcal.core.errors import UnsupportedYearError
from litcal.core.types import CalendarDate, Season, WeekKey, WeekResolution
from litcal.engines.specs import FIRST_GREGORIAN_YEAR, LAST_SUPPORTED_YEAR

# Movable anchors, in days relative to Easter
ASH_WEDNESDAY_OFFSET = -46
HOLY_WEEK_OFFSET = -7
PENTECOST_OFFSET = 49


def check_year(year: int) -> None:
    if not FIRST_GREGORIAN_YEAR <= year <= LAST_SUPPORTED_YEAR:
        raise UnsupportedYearError(
            f"Year {year} is outside the Gregorian computus range "
            f"{FIRST_GREGORIAN_YEAR}..{LAST_SUPPORTED_YEAR}"
        )


def compute_easter(year: int) -> CalendarDate:
    """Western Easter Sunday (anonymous Gregorian / Meeus-Jones-Butcher)."""
    check_year(year)
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return CalendarDate(year, month, day)


def first_advent(year: int) -> CalendarDate:
    """First Sunday of Advent in civil ``year``: the Sunday nearest Nov 30."""
    nov27 = CalendarDate(year, 11, 27)
    return nov27.shift((7 - nov27.weekday) % 7)


def observed_sunday(d: CalendarDate) -> CalendarDate:
    """The Sunday that opens the civil week of ``d`` (``d`` itself on Sundays)."""
    return d.shift(-(d.weekday % 7))


@dataclass(frozen=True)
class ChurchYear:
    """Season anchors of one liturgical year."""
    year: int
    advent: CalendarDate
    christmas: CalendarDate
    epiphany: CalendarDate
    ash_wednesday: CalendarDate
    holy_week: CalendarDate
    easter: CalendarDate
    pentecost: CalendarDate
    next_advent: CalendarDate

    @classmethod
    def of(cls, year: int) -> "ChurchYear":
        easter = compute_easter(year)
        return cls(
            year=year,
            advent=first_advent(year - 1),
            christmas=CalendarDate(year - 1, 12, 25),
            epiphany=CalendarDate(year, 1, 6),
            ash_wednesday=easter.shift(ASH_WEDNESDAY_OFFSET),
            holy_week=easter.shift(HOLY_WEEK_OFFSET),
            easter=easter,
            pentecost=easter.shift(PENTECOST_OFFSET),
            next_advent=first_advent(year),
        )

    def season_starts(self) -> Tuple[Tuple[Season, CalendarDate], ...]:
        return (
            (Season.ADVENT, self.advent),
            (Season.CHRISTMAS, self.christmas),
            (Season.EPIPHANY, self.epiphany),
            (Season.LENT, self.ash_wednesday),
            (Season.HOLY_WEEK, self.holy_week),
            (Season.EASTER, self.easter),
            (Season.PENTECOST, self.pentecost),
        )

    def contains(self, d: CalendarDate) -> bool:
        return self.advent <= d < self.next_advent

    def season_of(self, d: CalendarDate) -> Tuple[Season, CalendarDate]:
        """Season of ``d`` and the date that season began (inclusive start)."""
        if not self.contains(d):
            raise ValueError(f"{d} is outside liturgical year {self.year}")
        found = self.season_starts()[0]
        for season, start in self.season_starts():
            if start <= d:
                found = (season, start)
        return found


def liturgical_year(d: CalendarDate) -> int:
    """Civil year whose Easter governs ``d``."""
    return d.year + 1 if d >= first_advent(d.year) else d.year


class SeasonCalculator:
    def compute_easter(self, year: int) -> CalendarDate:
        return compute_easter(year)

    def resolve_week(self, d: CalendarDate) -> WeekResolution:
        cy = ChurchYear.of(liturgical_year(d))
        season, start = cy.season_of(d)
        ordinal = d.days_since(start) // 7 + 1
        return WeekResolution(
            week_key=WeekKey(season, ordinal),
            observed_sunday=observed_sunday(d),
        )
