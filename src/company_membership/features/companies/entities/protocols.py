"""Protocol interfaces for company persistence."""

from abc import abstractmethod
from typing import Optional, Protocol, runtime_checkable

from ....core.value_objects import CompanyId
from .company import Company


@runtime_checkable
class CompanyRepository(Protocol):
    """Protocol for company data persistence operations."""

    @abstractmethod
    async def add(self, company: Company) -> Company:
        """Insert a company row; ConflictError on a duplicate business number."""
        ...

    @abstractmethod
    async def find_by_id(self, company_id: CompanyId) -> Optional[Company]:
        ...
