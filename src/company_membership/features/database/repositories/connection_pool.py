"""asyncpg-backed database repository.

One pool per process. A transaction opened through ``transaction()`` binds
its connection to the current task, so every repository call made inside the
block runs on that connection.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Any, AsyncIterator, Dict, List, Optional

import asyncpg

from ....core.exceptions import ConflictError, MembershipError, TransientError

logger = logging.getLogger(__name__)

_current_connection: ContextVar[Optional[asyncpg.Connection]] = ContextVar(
    "company_membership_connection", default=None
)


def _store_error(error: Exception) -> MembershipError:
    """Translate a driver error into the package taxonomy."""
    if isinstance(error, asyncpg.UniqueViolationError):
        return ConflictError(f"Uniqueness violation: {error}")
    return TransientError(f"Database operation failed: {error}")


class AsyncPGDatabaseRepository:
    """Implementation of DatabaseRepository using an asyncpg pool."""

    def __init__(
        self,
        dsn: str,
        min_size: int = 1,
        max_size: int = 10,
        command_timeout: float = 30.0,
    ):
        self._dsn = dsn
        self._min_size = min_size
        self._max_size = max_size
        self._command_timeout = command_timeout
        self._pool: Optional[asyncpg.Pool] = None
        self._lock = asyncio.Lock()

    async def _ensure_pool(self) -> asyncpg.Pool:
        """Ensure the pool is created and available."""
        if self._pool is None:
            async with self._lock:
                if self._pool is None:  # Double-check
                    try:
                        self._pool = await asyncpg.create_pool(
                            dsn=self._dsn,
                            min_size=self._min_size,
                            max_size=self._max_size,
                            command_timeout=self._command_timeout,
                        )
                    except (OSError, asyncpg.PostgresError) as e:
                        logger.error(f"Failed to create connection pool: {e}")
                        raise TransientError(f"Failed to create connection pool: {e}") from e
                    logger.info(f"Created connection pool: min={self._min_size}, max={self._max_size}")
        return self._pool

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[asyncpg.Connection]:
        bound = _current_connection.get()
        if bound is not None:
            yield bound
            return

        pool = await self._ensure_pool()
        async with pool.acquire() as conn:
            yield conn

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Open a transaction, or join the one already bound to this task."""
        if _current_connection.get() is not None:
            yield
            return

        pool = await self._ensure_pool()
        async with pool.acquire() as conn:
            token = _current_connection.set(conn)
            try:
                async with conn.transaction():
                    yield
            except (OSError, asyncpg.PostgresError) as e:
                logger.error(f"Transaction failed: {e}")
                raise _store_error(e) from e
            finally:
                _current_connection.reset(token)

    async def fetch_one(self, query: str, *args: Any) -> Optional[Dict[str, Any]]:
        try:
            async with self._connection() as conn:
                row = await conn.fetchrow(query, *args)
                return dict(row) if row else None
        except (OSError, asyncpg.PostgresError) as e:
            logger.error(f"Fetchrow failed: {e}")
            raise _store_error(e) from e

    async def fetch_all(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        try:
            async with self._connection() as conn:
                rows = await conn.fetch(query, *args)
                return [dict(row) for row in rows]
        except (OSError, asyncpg.PostgresError) as e:
            logger.error(f"Fetch failed: {e}")
            raise _store_error(e) from e

    async def fetch_value(self, query: str, *args: Any) -> Any:
        try:
            async with self._connection() as conn:
                return await conn.fetchval(query, *args)
        except (OSError, asyncpg.PostgresError) as e:
            logger.error(f"Fetchval failed: {e}")
            raise _store_error(e) from e

    async def execute(self, command: str, *args: Any) -> str:
        try:
            async with self._connection() as conn:
                return await conn.execute(command, *args)
        except (OSError, asyncpg.PostgresError) as e:
            logger.error(f"Command failed: {e}")
            raise _store_error(e) from e

    async def close(self) -> None:
        """Close the connection pool."""
        if self._pool:
            async with self._lock:
                if self._pool:
                    await self._pool.close()
                    self._pool = None
                    logger.info("Closed connection pool")
