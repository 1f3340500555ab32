"""
Schedule API — Database Handle & Session Management
====================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   A `Database` object owns the engine and session factory. The app
       factory builds one and attaches it to `app.state.database`; each
       request gets its own session through `get_db_session`, which rolls
       back on error. Services commit their own writes before returning so a
       failed commit still reaches the error handlers.
Who:   Built by `create_app()`; used by route handlers via Depends().

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from settings and only
    apply to server databases. SQLite URLs keep SQLAlchemy's defaults,
    which do not accept queue-pool sizing arguments.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, AsyncIterator, Dict

from fastapi import Depends, Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from schedule_api.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    The metadata collected here mirrors the externally managed schema and is
    used by `Database.create_all()` to bootstrap empty databases.
    """
    pass


class Database:
    """
    Store handle: one engine (connection pool) plus a session factory.

    Example:
        database = Database("sqlite+aiosqlite:///./dev.db")
        await database.create_all()
        async with database.session() as session:
            await session.execute(...)
    """

    def __init__(self, url: str, echo: bool = False, **pool_options: Any):
        self.url = url
        engine_options: Dict[str, Any] = {"echo": echo}
        if not url.startswith("sqlite"):
            engine_options.update(pool_options)
            engine_options.setdefault("pool_recycle", 3600)
        self.engine = create_async_engine(url, **engine_options)

        # expire_on_commit=False: rows stay readable after the request commits
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.database_url,
            echo=settings.log_level == "DEBUG",
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Scoped session: commit on success, roll back on error, always close.

        Why broad Exception: any failure inside the scope (including a bug in
        serialization after a query) must discard the pending writes.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create any missing tables declared by the ORM models."""
        # Registers the model classes on Base.metadata
        import schedule_api.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def ping(self) -> None:
        """Execute SELECT 1; raises if the store is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Close every pooled connection (called on application shutdown)."""
        await self.engine.dispose()


# ── Dependencies ──────────────────────────────────────────────────────────
def get_database(request: Request) -> Database:
    """Return the store handle attached to the running application."""
    return request.app.state.database


async def get_db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Example usage in a route:
        @router.get("/feedback")
        async def list_feedback(db: AsyncSession = Depends(get_db_session)):
            ...

    Raises:
        Any database exceptions are propagated to the global error handler.
    """
    async with database.session() as session:
        yield session
