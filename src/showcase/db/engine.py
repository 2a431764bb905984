"""Shared async connection to the project store."""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from showcase.errors.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


def create_db_engine(url: str) -> AsyncEngine:
    """Create an async SQLAlchemy engine sized for a single shared connection."""
    engine_kwargs: dict = {"echo": False}

    # SQLite does not support pool_size / max_overflow
    if "sqlite" not in url:
        engine_kwargs.update(pool_size=1, max_overflow=0)

    return create_async_engine(url, **engine_kwargs)


class ConnectionManager:
    """Owns the one connection every repository call runs on.

    The connection is opened on first use and then reused as-is: there is no
    liveness check and no reconnect, so a dropped link surfaces as an error
    from the next statement. Establishment is attempted once; the failure is
    kept and raised again as DatabaseConnectionError on every later acquire,
    for startup code to treat as fatal. A connection SQLAlchemy has
    invalidated after a lost link is refused rather than silently replaced.
    """

    def __init__(
        self,
        url: str,
        engine_factory: Callable[[str], AsyncEngine] = create_db_engine,
    ):
        self.url = url
        self._engine_factory = engine_factory
        self._engine: AsyncEngine | None = None
        self._connection: AsyncConnection | None = None
        self._failure: DatabaseConnectionError | None = None
        self._init_lock = asyncio.Lock()
        self._statement_lock = asyncio.Lock()

    @property
    def established(self) -> bool:
        return self._connection is not None

    async def acquire(self) -> AsyncConnection:
        """Return the shared connection, establishing it on the first call."""
        if self._connection is not None:
            return self._connection
        if self._failure is not None:
            raise self._failure

        async with self._init_lock:
            # Another caller may have finished (or failed) establishing while we waited
            if self._failure is not None:
                raise self._failure
            if self._connection is None:
                engine = self._engine_factory(self.url)
                try:
                    connection = await engine.connect()
                except (SQLAlchemyError, OSError) as exc:
                    logger.error("Could not connect to the database: %s", exc)
                    await engine.dispose()
                    self._failure = DatabaseConnectionError(
                        f"Could not connect to the database: {exc}"
                    )
                    raise self._failure from exc
                self._engine = engine
                self._connection = connection
                logger.info("Connected to database (dialect=%s)", engine.dialect.name)

        return self._connection

    @asynccontextmanager
    async def statement(self) -> AsyncIterator[AsyncConnection]:
        """Run one unit of work on the shared connection.

        Callers are serialized in submission order. The body runs inside a
        transaction that commits on exit and rolls back if the body raises.
        """
        connection = await self.acquire()
        async with self._statement_lock:
            if connection.invalidated:
                raise DatabaseConnectionError("Database connection was lost")
            async with connection.begin():
                yield connection

    async def dispose(self) -> None:
        """Close the shared connection and its engine."""
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
