"""
litcal.engines.specs
--------------------
Display policies of the devotional calendar. These encode product decisions
rather than liturgical rules, so they live here under names instead of as
literals at the call sites.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..core.types import ProperType

# ============================================================
# GREGORIAN COMPUTUS RANGE
# ============================================================

# Gregorian reform took effect in October 1582.
FIRST_GREGORIAN_YEAR = 1583
LAST_SUPPORTED_YEAR = 9999

# ============================================================
# DISPLAY POLICY
# ============================================================

# Only the first two daily readings are kept (display space).
DAILY_READINGS_LIMIT = 2

# The day's commemoration is shown as the title of the daily section.
COMMEMORATION_TYPE = int(ProperType.COMMEMORATION)
TITLE_TYPE = int(ProperType.TITLE)
COLLECT_TYPE = int(ProperType.COLLECT)

DEFAULT_DAILY_TITLE = "Daily Lectionary"

# Composite daily keys are written "<WeekKey>:<weekday>" in JSON.
DAILY_KEY_SEP = ":"


@dataclass(frozen=True)
class EnginePolicy:
    daily_limit: int = DAILY_READINGS_LIMIT
    default_daily_title: str = DEFAULT_DAILY_TITLE

    def tweak(self, **kwargs) -> "EnginePolicy":
        return replace(self, **kwargs)


DEFAULT_POLICY = EnginePolicy()
