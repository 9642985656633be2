"""Engine and session helpers for the roster store.

Only inputs live here (staff, vacations, custom holidays); generated
calendars are exported, never stored.
"""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base

logger = logging.getLogger(__name__)

DEFAULT_DB_URL = "sqlite:///plantao.db"


def create_db_engine(db_url: str = DEFAULT_DB_URL, echo: bool = False) -> Engine:
    return create_engine(db_url, echo=echo)


def init_database(db_url: str = DEFAULT_DB_URL) -> None:
    """Create the staff, vacation and holiday tables if missing."""
    Base.metadata.create_all(create_db_engine(db_url))
    logger.info("Roster store ready at %s", db_url)


def get_session(db_url: str = DEFAULT_DB_URL) -> Session:
    # callers own the session and must close it
    return sessionmaker(bind=create_db_engine(db_url))()


def reset_database(db_url: str = DEFAULT_DB_URL) -> None:
    """Drop and recreate every table. All stored staff and holidays are lost."""
    engine = create_db_engine(db_url)
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    logger.warning("Roster store wiped: %s", db_url)
