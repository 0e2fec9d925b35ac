"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from westgate_assistant.api.main import create_app
from westgate_assistant.domain.models import AmortizationInput
from westgate_assistant.infrastructure.database.models import Base
from westgate_assistant.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def default_loan() -> AmortizationInput:
    """Calculator defaults: 5M property, 1M down, 15 years at 8.5%"""
    return AmortizationInput(
        property_price=5_000_000,
        down_payment=1_000_000,
        term_years=15,
        annual_rate_percent=8.5,
    )


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that ticks one second per call, starting 2024-03-01 09:05 UTC"""
    start = datetime(2024, 3, 1, 9, 5, tzinfo=timezone.utc)
    ticks = iter(range(10_000))

    def clock() -> datetime:
        return start + timedelta(seconds=next(ticks))

    return clock
