from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from .errors import ValidationError
from .time import check_ymd, from_jdn, iso_weekday, to_jdn

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
SUNDAY = 7


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A validated Gregorian date. ``weekday`` is 1 (Monday) .. 7 (Sunday)."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        check_ymd(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month, d.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "CalendarDate":
        return cls(*from_jdn(jdn))

    @property
    def jdn(self) -> int:
        return to_jdn(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        return iso_weekday(self.jdn)

    @property
    def weekday_name(self) -> str:
        return WEEKDAY_NAMES[self.weekday - 1]

    @property
    def mmdd(self) -> str:
        return f"{self.month:02d}-{self.day:02d}"

    def shift(self, days: int) -> "CalendarDate":
        return CalendarDate.from_jdn(self.jdn + days)

    def days_since(self, other: "CalendarDate") -> int:
        return self.jdn - other.jdn

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


class Season(str, Enum):
    ADVENT = "Advent"
    CHRISTMAS = "Christmas"
    EPIPHANY = "Epiphany"
    LENT = "Lent"
    HOLY_WEEK = "HolyWeek"
    EASTER = "Easter"
    PENTECOST = "Pentecost"


@dataclass(frozen=True)
class WeekKey:
    season: Season
    ordinal: int  # 1-based

    @classmethod
    def parse(cls, s: str) -> "WeekKey":
        name, sep, num = s.rpartition("-")
        try:
            return cls(Season(name), int(num))
        except ValueError as e:
            raise ValidationError(f"Not a week key: {s!r}") from e

    def __str__(self) -> str:
        return f"{self.season.value}-{self.ordinal}"


@dataclass(frozen=True)
class WeekResolution:
    week_key: WeekKey
    observed_sunday: CalendarDate


class Color(str, Enum):
    VIOLET = "violet"
    WHITE = "white"
    GREEN = "green"
    RED = "red"
    ROSE = "rose"

    @classmethod
    def parse(cls, s: Optional[str]) -> Optional["Color"]:
        """Case-insensitive; empty, ``None`` and ``"none"`` mean no color."""
        if s is None:
            return None
        s = s.strip().lower()
        if s in ("", "none"):
            return None
        return cls(s)


class ProperType(IntEnum):
    TITLE = 0
    EPISTLE = 1
    GOSPEL = 2
    OLD_TESTAMENT = 19
    COLLECT = 20
    COMMEMORATION = 37


@dataclass(frozen=True)
class Proper:
    type: int
    text: str
    color: Optional[Color] = None
    key: str = ""

    def retype(self, type: int) -> "Proper":
        return replace(self, type=type)


@dataclass(frozen=True)
class TypeDescriptor:
    type: int
    name: str
    is_reading: bool
    is_viewable: bool


@dataclass(frozen=True)
class PropersSet:
    lectionary: Tuple[Proper, ...] = ()
    festivals: Tuple[Proper, ...] = ()
    daily: Tuple[Proper, ...] = ()
    commemorations: Tuple[Proper, ...] = ()

    def is_empty(self) -> bool:
        return not (self.lectionary or self.festivals or self.daily or self.commemorations)


@dataclass(frozen=True)
class Empty:
    """Grid padding outside the month. Carries no date and no propers."""


@dataclass(frozen=True)
class Day:
    date: CalendarDate
    week_key: WeekKey
    propers: PropersSet
    sunday_propers: PropersSet

Cell = Union[Empty, Day]


@dataclass(frozen=True)
class CalendarGrid:
    year: int
    month: int
    weeks: Tuple[Tuple[Cell, ...], ...]

    def days(self) -> Tuple[Day, ...]:
        return tuple(c for wk in self.weeks for c in wk if isinstance(c, Day))

    def day(self, n: int) -> Optional[Day]:
        for d in self.days():
            if d.date.day == n:
                return d
        return None


@dataclass(frozen=True)
class DayView:
    """Consumer-facing summary of one resolved day."""
    date: CalendarDate
    week_key: WeekKey
    title: Optional[str]
    color: Optional[Color]
    lectionary: Tuple[Proper, ...] = ()
    festivals: Tuple[Proper, ...] = ()
    daily: Tuple[Proper, ...] = ()
    daily_title: Optional[str] = None
    commemoration: Optional[Proper] = None

