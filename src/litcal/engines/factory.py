"""
litcal.engines.factory
----------------------
Wires the components of one engine around an injected ``Tables`` bundle.
"""

from __future__ import annotations

import logging

from litcal.api import CalendarEngine
from litcal.engines.grid import CalendarGridBuilder
from litcal.engines.propers import PropersRepository
from litcal.engines.season import SeasonCalculator
from litcal.engines.specs import DEFAULT_POLICY, EnginePolicy
from litcal.tables import Tables

logger = logging.getLogger(__name__)


def make_engine(tables: Tables, *, policy: EnginePolicy = DEFAULT_POLICY) -> CalendarEngine:
    """The universal entry point."""
    if policy.daily_limit < 0:
        raise ValueError("daily_limit must be non-negative")
    seasons = SeasonCalculator()
    propers = PropersRepository(tables, daily_limit=policy.daily_limit)
    engine = CalendarEngine(
        seasons=seasons,
        propers=propers,
        grid=CalendarGridBuilder(seasons, propers),
        catalog=tables.types,
        policy=policy,
    )
    logger.debug("Built calendar engine over tables %s", tables.sizes())
    return engine
