"""Tests for the asyncpg database repository's transaction binding."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

from company_membership.core.exceptions import IdentityDeletionError, TransientError
from company_membership.features.database import AsyncPGDatabaseRepository


class FakeTransaction:
    def __init__(self, conn):
        self.conn = conn

    async def __aenter__(self):
        self.conn.events.append("begin")

    async def __aexit__(self, exc_type, exc, tb):
        self.conn.events.append("rollback" if exc_type else "commit")
        return False


class FakeConnection:
    def __init__(self):
        self.events = []
        self.fetchrow = AsyncMock(return_value={"id": 1})
        self.execute = AsyncMock(return_value="UPDATE 1")

    def transaction(self):
        return FakeTransaction(self)


class FakePool:
    def __init__(self):
        self.connections = []
        self.closed = False

    @asynccontextmanager
    async def acquire(self):
        conn = FakeConnection()
        self.connections.append(conn)
        yield conn

    async def close(self):
        self.closed = True


@pytest.fixture
def pool(mocker):
    fake = FakePool()
    mocker.patch(
        "company_membership.features.database.repositories.connection_pool.asyncpg.create_pool",
        AsyncMock(return_value=fake),
    )
    return fake


@pytest.fixture
def database():
    return AsyncPGDatabaseRepository(dsn="postgresql://localhost/test")


@pytest.mark.asyncio
async def test_calls_inside_transaction_share_connection(database, pool):
    async with database.transaction():
        await database.fetch_one("SELECT 1")
        await database.execute("UPDATE t SET x = 1")

    assert len(pool.connections) == 1
    assert pool.connections[0].events == ["begin", "commit"]


@pytest.mark.asyncio
async def test_nested_transaction_joins_outer(database, pool):
    async with database.transaction():
        async with database.transaction():
            await database.fetch_one("SELECT 1")

    assert len(pool.connections) == 1
    assert pool.connections[0].events == ["begin", "commit"]


@pytest.mark.asyncio
async def test_domain_error_rolls_back_and_propagates(database, pool):
    with pytest.raises(IdentityDeletionError):
        async with database.transaction():
            await database.execute("UPDATE t SET x = 1")
            raise IdentityDeletionError("Identity deletion failed")

    assert pool.connections[0].events == ["begin", "rollback"]


@pytest.mark.asyncio
async def test_calls_outside_transaction_use_own_connections(database, pool):
    await database.fetch_one("SELECT 1")
    await database.fetch_one("SELECT 2")

    assert len(pool.connections) == 2
    assert all(conn.events == [] for conn in pool.connections)


@pytest.mark.asyncio
async def test_driver_error_is_transient(database, pool, mocker):
    original_acquire = pool.acquire

    @asynccontextmanager
    async def failing_acquire():
        async with original_acquire() as conn:
            conn.fetchrow.side_effect = OSError("connection reset")
            yield conn

    mocker.patch.object(pool, "acquire", failing_acquire)

    with pytest.raises(TransientError):
        await database.fetch_one("SELECT 1")


@pytest.mark.asyncio
async def test_close(database, pool):
    await database.fetch_one("SELECT 1")
    await database.close()
    assert pool.closed
