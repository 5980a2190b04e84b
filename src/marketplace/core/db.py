"""Database handle - engine lifecycle and session factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.marketplace.core.config import Settings
from src.marketplace.core.logging import get_logger

logger = get_logger(__name__)


class DatabaseNotConnectedError(RuntimeError):
    """Raised when a session is requested before connect() or after dispose()."""


class Database:
    """Single shared connection to the store, opened once per process.

    The handle is created in the application lifespan and injected into
    request handlers through ``app.state.db``. ``connect()`` verifies the
    store is reachable and raises on failure so startup aborts.
    """

    def __init__(
        self,
        database_url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
    ) -> None:
        self.database_url = database_url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseNotConnectedError("Database is not connected. Call connect() first.")
        return self._engine

    def _engine_kwargs(self) -> dict[str, Any]:
        if self.is_sqlite:
            kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in self.database_url:
                # All sessions must share the one in-memory database
                kwargs["poolclass"] = StaticPool
            return kwargs
        return {
            "pool_size": self.pool_size,
            "max_overflow": self.max_overflow,
            "pool_pre_ping": True,
        }

    async def connect(self, create_tables: bool = False) -> None:
        """Create the engine and check the store answers.

        Raises whatever the driver raises when the store is unreachable.
        """
        if self._engine is not None:
            return

        engine = create_async_engine(self.database_url, **self._engine_kwargs())

        if self.is_sqlite:

            @event.listens_for(engine.sync_engine, "connect")
            def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        try:
            async with engine.begin() as connection:
                await connection.execute(text("SELECT 1"))
                if create_tables:
                    # Register every table on the metadata before create_all
                    import src.marketplace.models  # noqa: F401

                    await connection.run_sync(SQLModel.metadata.create_all)
        except Exception:
            await engine.dispose()
            raise

        self._engine = engine
        self._session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("Connected to database", dialect=engine.dialect.name)

    async def dispose(self) -> None:
        """Dispose the engine. Call during shutdown."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connection closed")

    async def ping(self) -> None:
        async with self.engine.connect() as connection:
            await connection.execute(text("SELECT 1"))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """Create a session. Transaction control (commit) stays with the caller."""
        if self._session_factory is None:
            raise DatabaseNotConnectedError("Database is not connected. Call connect() first.")

        async with self._session_factory() as session:
            yield session
