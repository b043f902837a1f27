"""
Library Catalog — Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   `Database` wraps one async engine over the SQLite file plus a session
       factory. The app factory creates exactly one and stores it on
       `app.state.database`; the session dependency borrows it per request.
Who:   Used by route handlers via FastAPI's dependency injection system and
       by the schema initializer at startup.
When:  Engine is created with the app; sessions are created per-request.

SQLite specifics:
    - Foreign-key enforcement is off by default in SQLite. A connect-event
      listener issues `PRAGMA foreign_keys = ON` on every new DBAPI connection.
    - The aiosqlite driver runs each statement in a worker thread, so the
      event loop never blocks on file I/O.
"""

import logging
from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncConnection,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from library_catalog.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

# Largest value an SQLite INTEGER column can hold (signed 64-bit)
SQLITE_MAX_INTEGER = 2**63 - 1


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models (shared metadata)."""
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turns on foreign-key enforcement for a freshly opened SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class Database:
    """
    Owns the engine and session factory for one catalog database.

    Attributes:
        engine:           AsyncEngine bound to `settings.database_url`
        session_factory:  async_sessionmaker producing AsyncSession objects
    """

    def __init__(self, config: Optional[Settings] = None):
        config = config or default_settings
        self.url = config.database_url

        self.engine: AsyncEngine = create_async_engine(
            self.url,
            echo=config.sql_echo,
        )

        if make_url(self.url).get_backend_name() == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        # expire_on_commit=False: rows stay readable after the service commits
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_tables(self, conn: AsyncConnection) -> None:
        """
        Creates every table registered on Base.metadata that does not exist yet.

        Runs on the caller's connection so it joins the caller's transaction.
        """
        # Register all models with the metadata before create_all
        from library_catalog import models  # noqa: F401

        await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Closes all pooled connections."""
        await self.engine.dispose()
        logger.info("Database engine disposed")


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the app's Database
        2. Yields it to the route handler
        3. On error: rolls back the transaction
        4. Always: closes the session (returns connection to pool)

    Services commit their own writes, so a failed commit surfaces as a
    DatabaseError inside the handler rather than after the response.
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
