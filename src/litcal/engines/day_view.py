"""
litcal.engines.day_view
-----------------------
Precedence rules a consumer applies on top of a resolved ``Day``:

- festivals outrank the weekly lectionary for weekday title and color, but
  never a Sunday's own propers;
- commemorations never decide title or color; the day's commemoration only
  titles the daily-reading section;
- daily readings are supplemental.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from litcal.core.types import SUNDAY, Color, Day, DayView, Proper
from litcal.engines.color import find_color
from litcal.engines.lookup import TypeCatalog, find_proper_by_type, viewable
from litcal.engines.specs import (
    COLLECT_TYPE,
    COMMEMORATION_TYPE,
    DEFAULT_DAILY_TITLE,
    TITLE_TYPE,
)


def is_sunday(day: Day) -> bool:
    return day.date.weekday == SUNDAY


def day_color(day: Day) -> Optional[Color]:
    # Don't let festivals trump Sundays
    festivals = None if is_sunday(day) else day.propers.festivals
    return find_color(festivals, day.propers.lectionary, day.sunday_propers.lectionary)


def day_title(day: Day) -> Optional[str]:
    if not is_sunday(day):
        festival = find_proper_by_type(day.propers.festivals, TITLE_TYPE)
        if festival is not None and festival.text:
            return festival.text

    sunday = find_proper_by_type(day.sunday_propers.lectionary, TITLE_TYPE)
    sunday_title = sunday.text if sunday is not None and sunday.text else None
    if sunday_title and not is_sunday(day):
        return f"{day.date.weekday_name} of {sunday_title}"
    return sunday_title


def commemoration(day: Day) -> Optional[Proper]:
    return find_proper_by_type(day.propers.commemorations, COMMEMORATION_TYPE)


def daily_propers(day: Day, *, default_title: str = DEFAULT_DAILY_TITLE) -> Tuple[Proper, ...]:
    """Daily section: a title entry, then the retained daily readings.

    The title is the day's commemoration retyped as a Title, or a literal
    heading when there is none. A day with neither lectionary nor festival
    propers borrows its Sunday's collect, placed right after the title.
    """
    comm = commemoration(day)
    if comm is not None:
        head = comm.retype(TITLE_TYPE)
    else:
        head = Proper(type=TITLE_TYPE, text=default_title)

    out: List[Proper] = [head, *day.propers.daily]

    if not day.propers.lectionary and not day.propers.festivals:
        collect = find_proper_by_type(day.sunday_propers.lectionary, COLLECT_TYPE)
        if collect is not None:
            out.insert(1, collect)
    return tuple(out)


def view_day(day: Day, catalog: TypeCatalog, *, default_title: str = DEFAULT_DAILY_TITLE) -> DayView:
    """Every section keeps only viewable entries; the daily heading survives as ``daily_title``."""
    daily = daily_propers(day, default_title=default_title)
    return DayView(
        date=day.date,
        week_key=day.week_key,
        title=day_title(day),
        color=day_color(day),
        lectionary=viewable(day.propers.lectionary, catalog),
        festivals=viewable(day.propers.festivals, catalog),
        daily=viewable(daily, catalog),
        daily_title=daily[0].text,
        commemoration=commemoration(day),
    )
