"""Root test fixtures shared across all test types.

Tests run against an in-memory SQLite database; every test gets a fresh
schema and its own application instance.
"""

import os

os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
# Cheap Argon2 parameters - hashing cost is irrelevant in tests
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "8192")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.marketplace.core.config import Settings, get_settings
from src.marketplace.core.db import Database
from src.marketplace.main import create_app

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings() -> Settings:
    """Settings for the app under test. Override fields per test with model_copy."""
    return get_settings().model_copy(update={"database_url": TEST_DATABASE_URL})


@pytest.fixture
async def database() -> AsyncGenerator[Database]:
    """Connected in-memory database with all tables created."""
    db = Database(TEST_DATABASE_URL)
    await db.connect(create_tables=True)
    yield db
    await db.dispose()


@pytest.fixture
def app(settings: Settings, database: Database) -> FastAPI:
    """Application wired to the test database.

    ASGITransport does not run the lifespan, so the database is connected
    by the fixture instead.
    """
    return create_app(settings=settings, database=database)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the app. Unhandled errors come back as 500 responses."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def reported(monkeypatch: pytest.MonkeyPatch) -> list[tuple[BaseException, dict]]:
    """Capture exceptions sent to the error reporting sink."""
    calls: list[tuple[BaseException, dict]] = []

    def _capture(exc: BaseException, **context) -> None:
        calls.append((exc, context))

    for target in (
        "src.marketplace.core.exceptions.report_exception",
        "src.marketplace.services.project_service.report_exception",
        "src.marketplace.api.routes.seed.report_exception",
    ):
        monkeypatch.setattr(target, _capture)
    return calls
