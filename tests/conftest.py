"""Pytest configuration and shared fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from weekplan.domain.models import Base


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )
    config.addinivalue_line(
        "markers", "currently_permitted: documents behavior that is accepted today but may be tightened later"
    )


@pytest.fixture
def db_session():
    """Create in-memory database session for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def reference_schedule():
    """A valid week: split Monday, three single-slot days, notes on three days."""
    return {
        "scheduleData": {
            "monday": [["09:00", "12:00"], ["14:00", "17:00"]],
            "tuesday": [["10:00", "18:00"]],
            "wednesday": [["08:30", "16:30"]],
            "thursday": [],
            "friday": [["09:00", "17:00"]],
            "saturday": [],
            "sunday": [],
        },
        "dailyNotes": {
            "monday": "Formation le matin",
            "wednesday": "Réunion à 15h",
            "thursday": "Absent",
        },
    }
