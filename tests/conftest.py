"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path
from typing import Generator

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import Settings
from domain.models import Database
from main import create_app, open_database


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file"""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'test_mess.db'}",
        environment="testing",
        db_init_attempts=1,
        db_init_delay_sec=0,
        admin_phone="9999999999",
    )


@pytest.fixture
def database(test_settings: Settings) -> Generator[Database, None, None]:
    """Schema created and seeded, disposed after the test"""
    database = open_database(test_settings)
    try:
        yield database
    finally:
        database.dispose()


@pytest.fixture
def db_session(database: Database) -> Generator[Session, None, None]:
    """
    Real database session for service and repository tests.

    Each test gets its own database file, so nothing leaks between tests.
    """
    with database.session() as session:
        yield session


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """TestClient whose lifespan opens and seeds the test database"""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
