from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .constraints import parse_date
from .models import Day, Holiday, StaffMember, VacationInterval


def read_roster(staff_path: str | Path, vacations_path: str | Path | None = None) -> List[StaffMember]:
    df = pd.read_csv(staff_path, dtype={"id": str})
    df.columns = df.columns.str.lower().str.strip()
    roster = [StaffMember(id=str(row["id"]), name=str(row["name"])) for _, row in df.iterrows()]

    if vacations_path is not None:
        by_id: Dict[str, StaffMember] = {p.id: p for p in roster}
        vac = pd.read_csv(vacations_path, dtype=str).fillna("")
        vac.columns = vac.columns.str.lower().str.strip()
        for i, row in vac.iterrows():
            member = by_id.get(row["staff_id"])
            if member is None:
                raise ValueError(f"Vacation row {i} references unknown staff id {row['staff_id']!r}")
            member.vacations.append(
                VacationInterval(
                    id=row.get("id") or f"{row['staff_id']}-{i}",
                    start_date=row["start_date"].strip(),
                    end_date=row["end_date"].strip(),
                )
            )
    return roster


def read_holidays(path: str | Path) -> List[Holiday]:
    df = pd.read_csv(path, dtype=str).fillna("")
    df.columns = df.columns.str.lower().str.strip()
    return [
        Holiday(date=row["date"].strip(), name=row.get("name", ""), type=row.get("type") or None)
        for _, row in df.iterrows()
    ]


def calendar_to_frame(days: Sequence[Day]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "date": d.date.isoformat(),
                "weekday": d.date.strftime("%A"),
                "staff_id": d.staff_id,
                "staff_name": d.staff_member.name if d.staff_member is not None else None,
            }
            for d in days
        ],
        columns=["date", "weekday", "staff_id", "staff_name"],
    )


def calendar_records(days: Sequence[Day]) -> List[dict]:
    """Plain records (ISO date, staff name or None) for storage by the caller."""
    return [
        {"date": d.date.isoformat(), "staff": d.staff_member.name if d.staff_member is not None else None}
        for d in days
    ]


def collaborator_days(days: Sequence[Day], staff_id: str) -> List[Day]:
    return [d for d in days if d.staff_id == staff_id]


def write_calendar(path: str | Path, days: Sequence[Day]) -> None:
    calendar_to_frame(days).to_csv(path, index=False)


def read_calendar(path: str | Path, roster: Sequence[StaffMember]) -> List[Day]:
    """Load a calendar written by write_calendar, resolving staff ids against ``roster``."""
    df = pd.read_csv(path, dtype=str).fillna("")
    by_id = {p.id: p for p in roster}
    days: List[Day] = []
    for _, row in df.iterrows():
        d = parse_date(row["date"])
        if d is None:
            raise ValueError(f"Invalid date in calendar file: {row['date']!r}")
        staff_id = row.get("staff_id", "")
        member: Optional[StaffMember] = None
        if staff_id:
            member = by_id.get(staff_id)
            if member is None:
                # unknown ids survive so the validator can report them
                member = StaffMember(id=staff_id, name=row.get("staff_name", "") or staff_id)
        days.append(Day(date=d, staff_member=member))
    return days
