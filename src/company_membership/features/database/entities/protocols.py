"""Database protocols shared by the membership and employee repositories."""

from abc import abstractmethod
from typing import Any, AsyncContextManager, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class TransactionManager(Protocol):
    """Unit of work spanning several repository calls.

    Repositories backed by the same manager join the open transaction; an
    exception inside the block rolls every write back.
    """

    @abstractmethod
    def transaction(self) -> AsyncContextManager[None]:
        """Open (or join) a transaction."""
        ...


@runtime_checkable
class DatabaseRepository(TransactionManager, Protocol):
    """Minimal query interface used by the asyncpg repositories."""

    @abstractmethod
    async def fetch_one(self, query: str, *args: Any) -> Optional[Dict[str, Any]]:
        """Execute a query and return a single row."""
        ...

    @abstractmethod
    async def fetch_all(self, query: str, *args: Any) -> List[Dict[str, Any]]:
        """Execute a query and return all rows."""
        ...

    @abstractmethod
    async def fetch_value(self, query: str, *args: Any) -> Any:
        """Execute a query and return the first column of the first row."""
        ...

    @abstractmethod
    async def execute(self, command: str, *args: Any) -> str:
        """Execute a command and return its status string."""
        ...
