from __future__ import annotations

from datetime import date
from typing import Optional, Sequence, Tuple, Union

from .core.errors import ValidationError
from .core.types import (
    CalendarDate,
    CalendarGrid,
    Color,
    Day,
    DayView,
    Proper,
    PropersSet,
    WeekKey,
    WeekResolution,
)
from .engines import color as _color
from .engines import day_view as _day_view
from .engines import lookup as _lookup
from .engines.grid import CalendarGridBuilder
from .engines.lookup import TypeCatalog
from .engines.propers import PropersRepository
from .engines.season import SeasonCalculator
from .engines.specs import EnginePolicy

DateLike = Union[CalendarDate, date]


def _as_calendar_date(d: DateLike) -> CalendarDate:
    if isinstance(d, CalendarDate):
        return d
    if isinstance(d, date):
        return CalendarDate.from_date(d)
    raise TypeError(f"Expected a date, got {type(d).__name__}")


def prev_month(year: int, month: int) -> Tuple[int, int]:
    if not 1 <= month <= 12:
        raise ValidationError(f"month must be in 1..12, got {month}")
    return (year - 1, 12) if month == 1 else (year, month - 1)

def next_month(year: int, month: int) -> Tuple[int, int]:
    if not 1 <= month <= 12:
        raise ValidationError(f"month must be in 1..12, got {month}")
    return (year + 1, 1) if month == 12 else (year, month + 1)


class CalendarEngine:
    """
    Entry points for the presentation layer. Holds the components built
    around one set of tables; use ``litcal.make_engine`` to construct it.
    """
    def __init__(
        self,
        seasons: SeasonCalculator,
        propers: PropersRepository,
        grid: CalendarGridBuilder,
        catalog: TypeCatalog,
        policy: EnginePolicy,
    ):
        self.seasons = seasons
        self.propers = propers
        self.grid = grid
        self.catalog = catalog
        self.policy = policy

    # ---------------------------------------------------------
    # Season / week
    # ---------------------------------------------------------

    def compute_easter(self, year: int) -> CalendarDate:
        return self.seasons.compute_easter(year)

    def resolve_week(self, d: DateLike) -> WeekResolution:
        return self.seasons.resolve_week(_as_calendar_date(d))

    # ---------------------------------------------------------
    # Propers
    # ---------------------------------------------------------

    def load_propers(self, d: DateLike, week_key: WeekKey) -> PropersSet:
        return self.propers.load(_as_calendar_date(d), week_key)

    def find_color(self, *candidates: Optional[Sequence[Proper]]) -> Optional[Color]:
        return _color.find_color(*candidates)

    def find_proper_by_type(self, propers: Optional[Sequence[Proper]], code: int) -> Optional[Proper]:
        return _lookup.find_proper_by_type(propers, code)

    def has_readings(self, propers: Optional[Sequence[Proper]]) -> bool:
        return _lookup.has_readings(propers, self.catalog)

    # ---------------------------------------------------------
    # Days and months
    # ---------------------------------------------------------

    def day(self, d: DateLike) -> Day:
        return self.grid.day(_as_calendar_date(d))

    def view_day(self, d: DateLike) -> DayView:
        return _day_view.view_day(
            self.day(d), self.catalog, default_title=self.policy.default_daily_title
        )

    def build_month(self, year: int, month: int) -> CalendarGrid:
        return self.grid.build(year, month)

    def prev_month(self, year: int, month: int) -> Tuple[int, int]:
        return prev_month(year, month)

    def next_month(self, year: int, month: int) -> Tuple[int, int]:
        return next_month(year, month)
