"""Holiday list helpers: combining national and custom lists before generation."""

from __future__ import annotations

from typing import Any, Iterable, List

from .constraints import parse_date
from .models import Holiday, coerce_holidays


def merge_holidays(*sources: Iterable[Any]) -> List[Holiday]:
    """
    Concatenate holiday lists, keeping the first entry seen for each date.

    Pass national holidays before custom ones so an official name wins when
    an organization re-declares the same day. Entries whose date cannot be
    parsed are kept as given; the generator never matches them.
    """
    seen = set()
    merged: List[Holiday] = []
    for source in sources:
        for h in coerce_holidays(source):
            d = parse_date(h.date)
            if d is not None:
                if d in seen:
                    continue
                seen.add(d)
            merged.append(h)
    return merged


def holidays_in_month(holidays: Iterable[Any], year: int, month: int) -> List[Holiday]:
    # month is 0-indexed
    out = []
    for h in coerce_holidays(holidays):
        d = parse_date(h.date)
        if d is not None and d.year == year and d.month == month + 1:
            out.append(h)
    return out


def custom_holiday(name: str, date_str: str) -> Holiday:
    if not name or not name.strip():
        raise ValueError("Custom holiday needs a name")
    d = parse_date(date_str)
    if d is None:
        raise ValueError(f"Invalid holiday date {date_str!r}; expected YYYY-MM-DD")
    return Holiday(date=d.isoformat(), name=name.strip(), type="custom")
