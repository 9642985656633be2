"""Repository classes for data access."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from plantao.constraints import parse_date
from plantao.models import Holiday, StaffMember

from .models import HolidayRecord, StaffRecord, VacationRecord


class StaffRepository:
    """Repository for staff data access."""

    @staticmethod
    def get_all(session: Session) -> List[StaffRecord]:
        """Get all staff ordered by name."""
        return session.query(StaffRecord).order_by(StaffRecord.name).all()

    @staticmethod
    def get_by_id(session: Session, staff_id: str) -> Optional[StaffRecord]:
        """Get a staff member by ID."""
        return session.query(StaffRecord).filter(StaffRecord.staff_id == staff_id).first()

    @staticmethod
    def create(session: Session, staff: StaffRecord) -> StaffRecord:
        """Create a new staff member."""
        session.add(staff)
        session.commit()
        session.refresh(staff)
        return staff

    @staticmethod
    def bulk_create(session: Session, staff: List[StaffRecord]) -> None:
        """Create multiple staff members."""
        session.add_all(staff)
        session.commit()

    @staticmethod
    def delete(session: Session, staff_id: str) -> bool:
        """Delete a staff member and their vacations. Returns False if not found."""
        record = StaffRepository.get_by_id(session, staff_id)
        if record is None:
            return False
        session.delete(record)
        session.commit()
        return True

    @staticmethod
    def load_roster(session: Session) -> List[StaffMember]:
        """Roster as plain models, ready for generate_calendar."""
        return [record.to_model() for record in StaffRepository.get_all(session)]


class VacationRepository:
    """Repository for vacation data access."""

    @staticmethod
    def get_by_staff(session: Session, staff_id: str) -> List[VacationRecord]:
        return (
            session.query(VacationRecord)
            .filter(VacationRecord.staff_id == staff_id)
            .order_by(VacationRecord.start_date)
            .all()
        )

    @staticmethod
    def build(session: Session, staff_id: str, start_date: str, end_date: str) -> VacationRecord:
        """
        Check a vacation range and return an unsaved record for it.

        Raises:
            ValueError: If the staff member is unknown or the range is malformed
        """
        if StaffRepository.get_by_id(session, staff_id) is None:
            raise ValueError(f"Unknown staff id {staff_id!r}")
        start, end = parse_date(start_date), parse_date(end_date)
        if start is None or end is None:
            raise ValueError(f"Invalid vacation range {start_date!r}..{end_date!r}")
        if start > end:
            raise ValueError(f"Vacation starts after it ends: {start} > {end}")
        return VacationRecord(staff_id=staff_id, start_date=start.isoformat(), end_date=end.isoformat())

    @staticmethod
    def add(session: Session, staff_id: str, start_date: str, end_date: str) -> VacationRecord:
        """Add a vacation range for a staff member."""
        record = VacationRepository.build(session, staff_id, start_date, end_date)
        session.add(record)
        session.commit()
        session.refresh(record)
        return record

    @staticmethod
    def delete(session: Session, vacation_id: int) -> bool:
        count = session.query(VacationRecord).filter(VacationRecord.id == vacation_id).delete()
        session.commit()
        return count > 0


class HolidayRepository:
    """Repository for custom holiday data access."""

    @staticmethod
    def get_all(session: Session) -> List[HolidayRecord]:
        """Get all holidays ordered by date."""
        return session.query(HolidayRecord).order_by(HolidayRecord.date).all()

    @staticmethod
    def get_by_date(session: Session, date_str: str) -> Optional[HolidayRecord]:
        return session.query(HolidayRecord).filter(HolidayRecord.date == date_str).first()

    @staticmethod
    def build(session: Session, holiday: Holiday) -> HolidayRecord:
        """
        Check a holiday and return an unsaved record; one holiday per date.

        Raises:
            ValueError: If the date is malformed or already taken
        """
        d = parse_date(holiday.date)
        if d is None:
            raise ValueError(f"Invalid holiday date {holiday.date!r}")
        if HolidayRepository.get_by_date(session, d.isoformat()) is not None:
            raise ValueError(f"Holiday already defined for {d.isoformat()}")
        return HolidayRecord(date=d.isoformat(), name=holiday.name, type=holiday.type or "custom")

    @staticmethod
    def add(session: Session, holiday: Holiday) -> HolidayRecord:
        record = HolidayRepository.build(session, holiday)
        session.add(record)
        session.commit()
        session.refresh(record)
        return record

    @staticmethod
    def delete(session: Session, holiday_id: int) -> bool:
        count = session.query(HolidayRecord).filter(HolidayRecord.id == holiday_id).delete()
        session.commit()
        return count > 0

    @staticmethod
    def load_holidays(session: Session, year: int | None = None, month: int | None = None) -> List[Holiday]:
        """Holidays as plain models, optionally limited to a year or a 0-indexed month."""
        query = session.query(HolidayRecord)
        if year is not None:
            prefix = f"{year:04d}-" if month is None else f"{year:04d}-{month + 1:02d}-"
            query = query.filter(HolidayRecord.date.startswith(prefix))
        return [record.to_model() for record in query.order_by(HolidayRecord.date).all()]
