"""litcal public API.

Keep this surface small: build an engine once from the tables, then use its
methods. Nothing here holds global table state.
"""

from .api import CalendarEngine, next_month, prev_month
from .core.errors import (
    InvalidDateError,
    LitcalError,
    TableFormatError,
    UnsupportedYearError,
    ValidationError,
)
from .core.types import (
    CalendarDate,
    CalendarGrid,
    Color,
    Day,
    DayView,
    Empty,
    Proper,
    PropersSet,
    ProperType,
    Season,
    TypeDescriptor,
    WeekKey,
    WeekResolution,
)
from .engines.color import find_color
from .engines.factory import make_engine
from .engines.lookup import TypeCatalog, find_proper_by_type, has_readings
from .engines.season import compute_easter, first_advent
from .engines.specs import DEFAULT_POLICY, EnginePolicy
from .tables import Tables, load_tables, make_tables

__all__ = [
    "CalendarEngine",
    "make_engine",
    "EnginePolicy",
    "DEFAULT_POLICY",
    "Tables",
    "make_tables",
    "load_tables",
    "compute_easter",
    "first_advent",
    "find_color",
    "find_proper_by_type",
    "has_readings",
    "TypeCatalog",
    "prev_month",
    "next_month",
    "CalendarDate",
    "CalendarGrid",
    "Color",
    "Day",
    "DayView",
    "Empty",
    "Proper",
    "PropersSet",
    "ProperType",
    "Season",
    "TypeDescriptor",
    "WeekKey",
    "WeekResolution",
    "LitcalError",
    "ValidationError",
    "UnsupportedYearError",
    "InvalidDateError",
    "TableFormatError",
]
