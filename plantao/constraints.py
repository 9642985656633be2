from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence, Set

from .models import Holiday, VacationInterval


SATURDAY = 5
SUNDAY = 6


def parse_date(value) -> Optional[date]:
    """Return a calendar date for ``YYYY-MM-DD`` strings, dates and datetimes.

    Empty or malformed values give ``None``; callers treat that as "never matches".
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        # aware values are read on the UTC calendar
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def days_in_month(year: int, month: int) -> List[date]:
    # month is 0-indexed (0 = January)
    if not 0 <= month <= 11:
        raise ValueError(f"month must be in 0..11, got {month}")
    first = date(year, month + 1, 1)
    count = calendar.monthrange(year, month + 1)[1]
    return [first + timedelta(days=i) for i in range(count)]


def is_weekend(d: date) -> bool:
    return d.weekday() in (SATURDAY, SUNDAY)


def is_same_day(a, b) -> bool:
    da, db = parse_date(a), parse_date(b)
    return da is not None and da == db


def find_holiday(d: date, holidays: Iterable[Holiday]) -> Optional[Holiday]:
    for h in holidays:
        if parse_date(h.date) == d:
            return h
    return None


def is_holiday(d: date, holidays: Iterable[Holiday]) -> bool:
    return find_holiday(d, holidays) is not None


def holiday_dates(holidays: Iterable[Holiday]) -> Set[date]:
    """Distinct parsed holiday dates; duplicates and malformed entries collapse away."""
    return {d for d in (parse_date(h.date) for h in holidays) if d is not None}


def is_on_vacation(d: date, vacations: Sequence[VacationInterval]) -> bool:
    for v in vacations or ():
        start = parse_date(v.start_date)
        end = parse_date(v.end_date)
        if start is None or end is None:
            continue
        if start <= d <= end:
            return True
    return False


def requires_coverage(d: date, holidays: Iterable[Holiday]) -> bool:
    return is_weekend(d) or is_holiday(d, holidays)


def week_number(d: date) -> int:
    """Coarse week index of the month used to spot back-to-back weekends."""
    return d.day // 7
