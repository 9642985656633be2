"""Roster and holiday storage."""

from .models import Base, HolidayRecord, StaffRecord, VacationRecord
from .repositories import HolidayRepository, StaffRepository, VacationRepository

__all__ = [
    "Base",
    "StaffRecord",
    "VacationRecord",
    "HolidayRecord",
    "StaffRepository",
    "VacationRepository",
    "HolidayRepository",
]
