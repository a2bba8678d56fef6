"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy.pool import StaticPool

from osc_backend.database import BaseSchema, DatabaseService
from osc_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.orm import Session

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", SQLITE_MEMORY_URL)
    monkeypatch.setenv("LOG_FORMAT", "text")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    """In-memory SQLite database with every table created."""
    service = DatabaseService(
        SQLITE_MEMORY_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    BaseSchema.metadata.create_all(service.engine)
    yield service
    service.engine.dispose()


@pytest.fixture
def db_session(database: DatabaseService) -> Iterator[Session]:
    """Session bound to the in-memory database."""
    with database.session() as session:
        yield session
        # Discard any failed flush so the committing scope can close cleanly.
        session.rollback()
