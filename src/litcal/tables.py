"""
litcal.tables
-------------
The four propers tables plus the type-descriptor table, bundled as one
immutable value. Build it once per process (``load_tables`` from a data
directory, or ``make_tables`` from in-memory mappings) and hand it to
``litcal.make_engine``.

JSON layout (one file per table):

    lsb-1yr.json             {"Advent-1": [{"type": 0, "text": "...", "color": "violet"}, ...]}
    lsb-festivals.json       {"12-25": [...]}
    lsb-commemorations.json  {"01-10": [...]}
    lsb-daily.json           {"Advent-1:3": [...], "12-26": [...]}
    types.json               [{"type": 0, "name": "Title", "is_reading": false, "is_viewable": false}, ...]

Daily keys are either "<WeekKey>:<weekday>" (weekday 1=Mon..7=Sun) or the
generic "MM-DD" fallback.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Sequence, Tuple, Union

from .core.errors import TableFormatError
from .core.types import Color, Proper, TypeDescriptor
from .engines.lookup import TypeCatalog
from .engines.specs import COMMEMORATION_TYPE, DAILY_KEY_SEP

logger = logging.getLogger(__name__)

DailyKey = Union[Tuple[str, int], str]

TABLE_FILES: Dict[str, str] = {
    "lectionary": "lsb-1yr.json",
    "festivals": "lsb-festivals.json",
    "daily": "lsb-daily.json",
    "commemorations": "lsb-commemorations.json",
    "types": "types.json",
}

_MMDD_RE = re.compile(r"^(\d{2})-(\d{2})$")


@dataclass(frozen=True)
class Tables:
    lectionary: Mapping[str, Tuple[Proper, ...]]
    festivals: Mapping[str, Tuple[Proper, ...]]
    daily: Mapping[DailyKey, Tuple[Proper, ...]]
    commemorations: Mapping[str, Tuple[Proper, ...]]
    types: TypeCatalog

    def sizes(self) -> Dict[str, int]:
        return {
            "lectionary": len(self.lectionary),
            "festivals": len(self.festivals),
            "daily": len(self.daily),
            "commemorations": len(self.commemorations),
            "types": len(self.types),
        }


def _proper(raw: Any, key: str, *, force_type: int | None = None) -> Proper:
    if isinstance(raw, Proper):
        return Proper(
            type=raw.type if force_type is None else force_type,
            text=raw.text,
            color=raw.color,
            key=key,
        )
    if not isinstance(raw, Mapping):
        raise TableFormatError(f"[{key}] proper must be an object, got {type(raw).__name__}")
    try:
        code = int(raw["type"]) if force_type is None else force_type
        text = str(raw.get("text") or "")
        color = Color.parse(raw.get("color"))
    except KeyError as e:
        raise TableFormatError(f"[{key}] proper is missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise TableFormatError(f"[{key}] bad proper {raw!r}: {e}") from e
    return Proper(type=code, text=text, color=color, key=key)


def _entries(raw: Any, key: str, *, force_type: int | None = None) -> Tuple[Proper, ...]:
    if not isinstance(raw, Sequence) or isinstance(raw, (str, bytes)):
        raise TableFormatError(f"[{key}] expected a list of propers")
    return tuple(_proper(p, key, force_type=force_type) for p in raw)


def _check_mmdd(key: str) -> str:
    m = _MMDD_RE.match(key)
    if not m or not (1 <= int(m.group(1)) <= 12 and 1 <= int(m.group(2)) <= 31):
        raise TableFormatError(f"Expected an MM-DD key, got {key!r}")
    return key


def daily_key_str(key: DailyKey) -> str:
    if isinstance(key, tuple):
        week, weekday = key
        return f"{week}{DAILY_KEY_SEP}{weekday}"
    return key


def _daily_key(key: Any) -> DailyKey:
    if isinstance(key, tuple):
        week, weekday = key
        return (str(week), int(weekday))
    key = str(key)
    if DAILY_KEY_SEP in key:
        week, _, weekday = key.rpartition(DAILY_KEY_SEP)
        try:
            wd = int(weekday)
        except ValueError as e:
            raise TableFormatError(f"Bad daily key {key!r}") from e
        if not 1 <= wd <= 7:
            raise TableFormatError(f"Bad weekday in daily key {key!r}")
        return (week, wd)
    return _check_mmdd(key)


def _descriptor(raw: Any) -> TypeDescriptor:
    if isinstance(raw, TypeDescriptor):
        return raw
    try:
        return TypeDescriptor(
            type=int(raw["type"]),
            name=str(raw["name"]),
            is_reading=bool(raw.get("is_reading", False)),
            is_viewable=bool(raw.get("is_viewable", True)),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise TableFormatError(f"Bad type descriptor {raw!r}") from e


def make_tables(
    *,
    lectionary: Mapping[str, Sequence[Any]] | None = None,
    festivals: Mapping[str, Sequence[Any]] | None = None,
    daily: Mapping[Any, Sequence[Any]] | None = None,
    commemorations: Mapping[str, Sequence[Any]] | None = None,
    types: Sequence[Any] = (),
) -> Tables:
    """Freeze JSON-shaped mappings into a ``Tables`` bundle.

    Each proper is stamped with the key it is filed under; commemorations are
    always typed 37.
    """
    lect = {str(k): _entries(v, str(k)) for k, v in (lectionary or {}).items()}
    fest = {_check_mmdd(str(k)): _entries(v, str(k)) for k, v in (festivals or {}).items()}
    comm = {
        _check_mmdd(str(k)): _entries(v, str(k), force_type=COMMEMORATION_TYPE)
        for k, v in (commemorations or {}).items()
    }
    dly: Dict[DailyKey, Tuple[Proper, ...]] = {}
    for k, v in (daily or {}).items():
        dk = _daily_key(k)
        dly[dk] = _entries(v, daily_key_str(dk))

    catalog = TypeCatalog(_descriptor(t) for t in types)  # TableFormatError on duplicates

    return Tables(
        lectionary=MappingProxyType(lect),
        festivals=MappingProxyType(fest),
        daily=MappingProxyType(dly),
        commemorations=MappingProxyType(comm),
        types=catalog,
    )


def _read_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise TableFormatError(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise TableFormatError(f"{path}: not UTF-8 ({e})") from e


def load_tables(directory: str | Path, *, files: Mapping[str, str] | None = None) -> Tables:
    """Read all five tables from ``directory``.

    A missing propers file is treated as an empty table; ``types.json`` is
    required.
    """
    base = Path(directory)
    names = dict(TABLE_FILES)
    if files:
        names.update(files)

    raw: Dict[str, Any] = {}
    for table, fname in names.items():
        path = base / fname
        if not path.exists():
            if table == "types":
                raise TableFormatError(f"Type-descriptor table not found: {path}")
            logger.warning("Table %s not found at %s; using an empty table", table, path)
            raw[table] = {}
            continue
        raw[table] = _read_json(path)
        logger.debug("Read %s from %s", table, path)

    for table in ("lectionary", "festivals", "daily", "commemorations"):
        if not isinstance(raw[table], Mapping):
            raise TableFormatError(f"{names[table]}: expected a JSON object at top level")
    if not isinstance(raw["types"], list):
        raise TableFormatError(f"{names['types']}: expected a JSON array at top level")

    tables = make_tables(**raw)
    logger.debug("Loaded tables: %s", tables.sizes())
    return tables
