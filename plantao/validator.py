from __future__ import annotations

from datetime import timedelta
from typing import Any, Iterable, List, Optional, Sequence

import pandas as pd

from .constraints import days_in_month, holiday_dates, is_on_vacation, is_weekend
from .models import Day, coerce_holidays, coerce_roster


def validate_calendar(
    days: Sequence[Day],
    roster: Iterable[Any],
    holidays: Iterable[Any],
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> None:
    """Raise ValueError when a calendar breaks an assignment rule.

    Manual overrides may legitimately break these rules; this is meant for
    generated calendars and imported files.
    """
    staff = {p.id: p for p in coerce_roster(roster)}
    holiday_set = holiday_dates(coerce_holidays(holidays))

    # Sequence shape: contiguous and ascending, optionally the exact month
    for prev, cur in zip(days, days[1:]):
        if cur.date - prev.date != timedelta(days=1):
            raise ValueError(f"Days not contiguous/ascending: {prev.date} followed by {cur.date}")
    if year is not None and month is not None:
        expected = days_in_month(year, month)
        if [d.date for d in days] != expected:
            raise ValueError(
                f"Calendar does not cover {year:04d}-{month + 1:02d}: "
                f"expected {len(expected)} days, got {len(days)}"
            )

    for day in days:
        member = day.staff_member
        if member is None:
            continue
        if member.id not in staff:
            raise ValueError(f"{day.date}: assigned staff id {member.id!r} is not in the roster")
        if not is_weekend(day.date) and day.date not in holiday_set:
            raise ValueError(f"{day.date}: {member.name} assigned on a day without coverage")
        if is_on_vacation(day.date, staff[member.id].vacations):
            raise ValueError(f"{day.date}: {member.name} assigned while on vacation")


def unassigned_coverage_days(days: Sequence[Day], holidays: Iterable[Any]) -> List[Day]:
    """Coverage days nobody could take. Advisory only."""
    holiday_set = holiday_dates(coerce_holidays(holidays))
    return [
        d for d in days
        if d.staff_member is None and (is_weekend(d.date) or d.date in holiday_set)
    ]


def summarize_calendar(days: Sequence[Day], roster: Iterable[Any], holidays: Iterable[Any] = ()) -> str:
    if not days:
        return "No days."
    staff = coerce_roster(roster)
    holiday_set = holiday_dates(coerce_holidays(holidays))

    df = pd.DataFrame(
        [
            {
                "date": d.date,
                "staff_id": d.staff_id,
                "kind": "weekend" if is_weekend(d.date) else ("holiday" if d.date in holiday_set else "weekday"),
            }
            for d in days
        ]
    )
    assigned = df[df["staff_id"].notna()]
    names = {p.id: p.name for p in staff}

    per_kind = (
        assigned.groupby(["staff_id", "kind"]).size().unstack(fill_value=0)
        if not assigned.empty
        else pd.DataFrame()
    )
    per_kind = per_kind.reindex(index=[p.id for p in staff], fill_value=0)
    # manual overrides can land on weekdays; they count toward the total only
    total = per_kind.sum(axis=1).astype(int)
    for col in ("weekend", "holiday"):
        if col not in per_kind.columns:
            per_kind[col] = 0
    per_kind = per_kind[["weekend", "holiday"]].copy()
    per_kind["total"] = total
    per_kind.index = [names.get(i, i) for i in per_kind.index]
    per_kind.index.name = "staff"

    lines = ["Shifts per staff member:"]
    lines.append(per_kind.to_string() if not per_kind.empty else "(empty roster)")
    if not per_kind.empty:
        lines.append(f"Spread (max - min): {int(per_kind['total'].max() - per_kind['total'].min())}")
    missing = unassigned_coverage_days(days, holidays)
    lines.append("")
    if missing:
        lines.append("Coverage days without staff:")
        lines.extend(f"  - {d.date.isoformat()}" for d in missing)
    else:
        lines.append("All coverage days assigned.")
    return "\n".join(lines)
