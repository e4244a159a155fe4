"""Pytest fixtures and configuration for cyclecal tests."""

import os

# Pin settings before cyclecal reads the environment (a developer .env must not leak in)
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["CYCLE_START_DATE"] = "2026-01-01"
os.environ["WORK_WEEKS"] = "6"
os.environ["REST_WEEKS"] = "1"
os.environ["WEEK_STARTS_ON"] = "1"
os.environ["CALENDAR_YEAR"] = "2026"

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from cyclecal.database.database import Base, get_db
from cyclecal.database import models  # noqa: F401  (registers tables)
from cyclecal.engine.generator import generate_year_blocks
from cyclecal.models.cycle_config import CycleConfig, WeekStartDay


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db_session():
    """Create a database session for testing.

    Uses an in-memory SQLite database that is created fresh for each test.
    """
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def six_plus_one():
    """Default 6+1 cycle starting Thursday 2026-01-01, Monday-based weeks.

    The anchor is Monday 2025-12-29, so cycle 1 starts four days before the year.
    """
    return CycleConfig(
        cycle_start_date=date(2026, 1, 1),
        work_weeks=6,
        rest_weeks=1,
        week_starts_on=WeekStartDay.MONDAY,
    )


@pytest.fixture
def blocks_2026(six_plus_one):
    """Blocks for 2026 under the default 6+1 config."""
    return generate_year_blocks(six_plus_one, 2026)


@pytest.fixture
def test_client(db_session: Session):
    """Create a FastAPI test client with overridden database dependency."""
    from cyclecal.api.app import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close the session here, let the fixture handle it

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
