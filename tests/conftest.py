"""Pytest configuration and shared fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from plantao.domain.models import Base
from plantao.models import StaffMember, VacationInterval


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def roster():
    """Four staff members, no vacations."""
    return [
        StaffMember(id="ana", name="Ana"),
        StaffMember(id="bruno", name="Bruno"),
        StaffMember(id="carla", name="Carla"),
        StaffMember(id="diego", name="Diego"),
    ]


@pytest.fixture
def roster_with_vacation():
    return [
        StaffMember(
            id="ana",
            name="Ana",
            vacations=[VacationInterval(id="v1", start_date="2024-01-01", end_date="2024-01-14")],
        ),
        StaffMember(id="bruno", name="Bruno"),
        StaffMember(id="carla", name="Carla"),
    ]


@pytest.fixture
def db_session():
    """Create in-memory database session for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
