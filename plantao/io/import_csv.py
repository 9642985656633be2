"""CSV import utilities to load roster and holiday data into the database.

Each importer checks every row before anything is added, so a bad row
leaves the store untouched. Pass ``commit=False`` to stage several files in
one transaction and commit (or roll back) them together.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
from sqlalchemy.orm import Session

from plantao.constraints import parse_date
from plantao.domain.models import StaffRecord
from plantao.domain.repositories import HolidayRepository, VacationRepository
from plantao.models import Holiday

logger = logging.getLogger(__name__)


def _read(csv_path: str | Path) -> pd.DataFrame:
    df = pd.read_csv(csv_path, dtype=str).fillna("")
    # Normalize column names
    df.columns = df.columns.str.lower().str.strip()
    return df


def _save(session: Session, records: list, commit: bool) -> None:
    session.add_all(records)
    if commit:
        session.commit()


def import_staff_csv(session: Session, csv_path: str | Path, commit: bool = True) -> int:
    """
    Import staff from CSV into database.

    Args:
        session: Database session
        csv_path: Path to staff CSV (columns: id, name)
        commit: Commit once all rows are staged

    Returns:
        Number of staff members imported
    """
    df = _read(csv_path)

    staff = []
    for i, row in df.iterrows():
        staff_id, name = row["id"].strip(), row["name"].strip()
        if not staff_id or not name:
            raise ValueError(f"{csv_path}: row {i + 1} needs both id and name")
        staff.append(StaffRecord(staff_id=staff_id, name=name))
    _save(session, staff, commit)

    logger.info("Imported %d staff from %s", len(staff), csv_path)
    return len(staff)


def import_vacations_csv(session: Session, csv_path: str | Path, commit: bool = True) -> int:
    """
    Import vacation ranges (columns: staff_id, start_date, end_date).

    Rows with a missing bound are skipped, since such ranges never exclude anyone.
    """
    df = _read(csv_path)

    records = []
    for _, row in df.iterrows():
        start, end = row["start_date"].strip(), row["end_date"].strip()
        if not start or not end:
            logger.warning("Skipping vacation for %s with an open bound", row["staff_id"])
            continue
        records.append(VacationRepository.build(session, row["staff_id"].strip(), start, end))
    _save(session, records, commit)

    logger.info("Imported %d vacations from %s", len(records), csv_path)
    return len(records)


def import_holidays_csv(session: Session, csv_path: str | Path, commit: bool = True) -> int:
    """
    Import custom holidays (columns: date, name[, type]).

    Dates already in the store, or repeated in the file, are skipped.
    A malformed date aborts the whole file.
    """
    df = _read(csv_path)

    records = []
    staged = set()
    for _, row in df.iterrows():
        holiday = Holiday(date=row["date"].strip(), name=row.get("name", ""), type=row.get("type") or "custom")
        d = parse_date(holiday.date)
        if d is None:
            raise ValueError(f"Invalid holiday date {holiday.date!r} in {csv_path}")
        if d in staged or HolidayRepository.get_by_date(session, d.isoformat()) is not None:
            logger.info("Holiday on %s already stored; skipping", d.isoformat())
            continue
        records.append(HolidayRepository.build(session, holiday))
        staged.add(d)
    _save(session, records, commit)

    logger.info("Imported %d holidays from %s", len(records), csv_path)
    return len(records)
