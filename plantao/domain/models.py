"""SQLAlchemy models for the roster and holiday store."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, relationship

from plantao.models import Holiday, StaffMember, VacationInterval


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class StaffRecord(Base):
    """An on-call staff member."""

    __tablename__ = "staff"

    staff_id = Column(String(64), primary_key=True)
    name = Column(String(200), nullable=False)

    # Relationships
    vacations = relationship(
        "VacationRecord",
        back_populates="staff",
        cascade="all, delete-orphan",
        order_by="VacationRecord.start_date",
    )

    def to_model(self) -> StaffMember:
        return StaffMember(
            id=self.staff_id,
            name=self.name,
            vacations=[v.to_model() for v in self.vacations],
        )

    def __repr__(self) -> str:
        return f"<StaffRecord(id={self.staff_id!r}, name={self.name!r})>"


class VacationRecord(Base):
    """Whole-day vacation range; dates kept as YYYY-MM-DD strings."""

    __tablename__ = "vacations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    staff_id = Column(String(64), ForeignKey("staff.staff_id"), nullable=False)
    start_date = Column(String(10), nullable=False)
    end_date = Column(String(10), nullable=False)

    # Relationships
    staff = relationship("StaffRecord", back_populates="vacations")

    def to_model(self) -> VacationInterval:
        return VacationInterval(id=str(self.id), start_date=self.start_date, end_date=self.end_date)

    def __repr__(self) -> str:
        return f"<VacationRecord(staff={self.staff_id!r}, {self.start_date}..{self.end_date})>"


class HolidayRecord(Base):
    """Organization-defined holiday (national ones come from the caller)."""

    __tablename__ = "holidays"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(String(10), nullable=False, unique=True)
    name = Column(String(200), nullable=False)
    type = Column(String(20), nullable=False, default="custom")

    def to_model(self) -> Holiday:
        return Holiday(date=self.date, name=self.name, type=self.type)

    def __repr__(self) -> str:
        return f"<HolidayRecord(date={self.date}, name={self.name!r}, type={self.type})>"
