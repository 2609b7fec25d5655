"""Database feature: asyncpg pool and the transaction protocol."""

from .entities import DatabaseRepository, TransactionManager
from .repositories import AsyncPGDatabaseRepository

__all__ = ["DatabaseRepository", "TransactionManager", "AsyncPGDatabaseRepository"]
