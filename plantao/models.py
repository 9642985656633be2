"""Plain data model shared by the generator, validator and I/O layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional


@dataclass
class VacationInterval:
    """Whole-day, inclusive vacation range given as ``YYYY-MM-DD`` strings."""

    id: str
    start_date: str = ""
    end_date: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VacationInterval":
        return cls(
            id=str(data.get("id", "")),
            start_date=_str_or_empty(data.get("start_date", data.get("startDate"))),
            end_date=_str_or_empty(data.get("end_date", data.get("endDate"))),
        )


@dataclass
class StaffMember:
    id: str
    name: str
    vacations: List[VacationInterval] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StaffMember":
        vacations = [
            v if isinstance(v, VacationInterval) else VacationInterval.from_dict(v)
            for v in (data.get("vacations") or [])
        ]
        return cls(id=str(data["id"]), name=str(data.get("name", "")), vacations=vacations)


@dataclass
class Holiday:
    date: str
    name: str = ""
    type: Optional[str] = None  # "national" or "custom"; informational only

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Holiday":
        return cls(
            date=_str_or_empty(data.get("date")),
            name=str(data.get("name", "")),
            type=data.get("type"),
        )


@dataclass
class Day:
    """One calendar day of a generated month.

    ``staff_member`` references an entry of the input roster (not a copy) and
    is ``None`` when the day needs no coverage or nobody was eligible.
    """

    date: date
    staff_member: Optional[StaffMember] = None

    @property
    def staff_id(self) -> Optional[str]:
        return self.staff_member.id if self.staff_member is not None else None

    def __repr__(self) -> str:
        who = self.staff_member.name if self.staff_member is not None else None
        return f"<Day(date={self.date.isoformat()}, staff={who!r})>"


def coerce_roster(roster: Iterable[Any] | None) -> List[StaffMember]:
    """Accept StaffMember instances or mappings in the roster wire shape."""
    if not roster:
        return []
    return [p if isinstance(p, StaffMember) else StaffMember.from_dict(p) for p in roster]


def coerce_holidays(holidays: Iterable[Any] | None) -> List[Holiday]:
    if not holidays:
        return []
    return [h if isinstance(h, Holiday) else Holiday.from_dict(h) for h in holidays]


def _str_or_empty(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
