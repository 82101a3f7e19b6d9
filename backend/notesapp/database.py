"""
Notes Backend — Note Store Connection & Session Management
============================================================

What:  Async SQLAlchemy engine, session factory, FastAPI session dependency,
       and the startup/shutdown hooks of the note store.
How:   One engine per process (connection pool), one AsyncSession per request.
Who:   Route handlers receive sessions via Depends(get_db_session); the app
       lifespan calls init_store() and dispose_engine().

Startup contract:
    init_store() must succeed before the server accepts traffic. If the
    database cannot be reached it raises StoreUnavailableError, the lifespan
    propagates it, and uvicorn aborts startup with a non-zero exit status.
"""

import logging
from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from notesapp.config import settings
from notesapp.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


def engine_options(database_url: str) -> Dict[str, Any]:
    """
    Keyword arguments for create_async_engine().

    SQLite drivers use their own pool classes, which reject the sizing
    arguments, so pool tuning is applied to server databases only.
    """
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
# create_async_engine does not connect; the first connection is opened by
# init_store() during startup.
engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))

# expire_on_commit=False: services return data after committing, so loaded
# attributes must stay readable once the transaction is closed.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models (shared metadata)."""
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Services commit their own unit of work; the commit here only flushes
    anything a handler left pending. Any exception rolls the session back
    before it reaches the global error handlers.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(db: AsyncSession = Depends(get_db_session)):
            return await note_service.list_notes(db)
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def init_store(
    target: Optional[AsyncEngine] = None,
    create_tables: Optional[bool] = None,
) -> None:
    """
    Verify connectivity to the note store and create the schema.

    Args:
        target: Engine to initialise (defaults to the module engine)
        create_tables: Override for settings.db_create_tables

    Raises:
        StoreUnavailableError: The database could not be reached or the
            schema could not be created.
    """
    # Import registers the Note table on Base.metadata
    from notesapp.models.note import Note  # noqa: F401

    target = target or engine
    if create_tables is None:
        create_tables = settings.db_create_tables

    try:
        async with target.begin() as conn:
            await conn.execute(text("SELECT 1"))
            if create_tables:
                await conn.run_sync(Base.metadata.create_all)
    except (SQLAlchemyError, OSError) as e:
        logger.error("Note store connection failed: %s", str(e))
        raise StoreUnavailableError(
            message="Could not connect to the note store",
            context={"error_type": type(e).__name__},
        ) from e

    logger.info("Note store connected (%s)", target.url.render_as_string(hide_password=True))


async def ping_store(target: Optional[AsyncEngine] = None) -> bool:
    """Lightweight connectivity check used by the health endpoint."""
    target = target or engine
    try:
        async with target.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Health check: database unreachable: %s", str(e))
        return False
    return True


async def dispose_engine() -> None:
    """Close all pooled connections (application shutdown)."""
    await engine.dispose()
