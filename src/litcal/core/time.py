from __future__ import annotations
import calendar as pycal
from datetime import date

from .errors import InvalidDateError, ValidationError

MIN_YEAR = 1
MAX_YEAR = 9999


def days_in_month(y: int, m: int) -> int:
    if not 1 <= m <= 12:
        raise ValidationError(f"month must be in 1..12, got {m}")
    return pycal.monthrange(y, m)[1]

def check_ymd(y: int, m: int, d: int) -> None:
    """Validate a Gregorian (year, month, day) triple.

    Out-of-range components raise ValidationError; a day past the end of its
    month (Feb 30, Apr 31) raises InvalidDateError.
    """
    if not MIN_YEAR <= y <= MAX_YEAR:
        raise ValidationError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {y}")
    if not 1 <= m <= 12:
        raise ValidationError(f"month must be in 1..12, got {m}")
    if not 1 <= d <= 31:
        raise ValidationError(f"day must be in 1..31, got {d}")
    if d > days_in_month(y, m):
        raise InvalidDateError(f"{y:04d}-{m:02d}-{d:02d} is not a valid date")


def to_jdn(y: int, m: int, day: int) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day

def iso_weekday(jdn: int) -> int:
    # JDN 0 was a Monday: 1=Mon..7=Sun
    return jdn % 7 + 1

def parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
    except ValueError as e:
        raise ValidationError(f"expected YYYY-MM-DD, got {s!r}") from e
    check_ymd(y, m, d)
    return date(y, m, d)
