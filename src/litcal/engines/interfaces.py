"""
litcal.engines.interfaces
-------------------------
Boundaries between the engine components. Data flows one way:

    SeasonCalculator -> PropersRepository -> {ColorResolver, CalendarGridBuilder}

Everything behind these protocols is pure given the injected tables.
"""

from __future__ import annotations

from typing import Protocol

from litcal.core.types import CalendarDate, PropersSet, WeekKey, WeekResolution


class SeasonCalculatorProtocol(Protocol):
    def compute_easter(self, year: int) -> CalendarDate:
        """
        Western Easter Sunday of the civil year.
        Raises UnsupportedYearError outside the Gregorian computus range.
        """
        ...

    def resolve_week(self, d: CalendarDate) -> WeekResolution:
        """
        Week key of the date plus the Sunday on or before it.
        """
        ...


class PropersRepositoryProtocol(Protocol):
    def load(self, d: CalendarDate, week_key: WeekKey) -> PropersSet:
        """
        All four proper lists for the date. Missing keys are empty, not errors.
        """
        ...
