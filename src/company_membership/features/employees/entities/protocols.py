"""Protocol interfaces for employee record persistence."""

from abc import abstractmethod
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from ....core.value_objects import CompanyId, EmployeeId, IdentityId
from .employee import EmployeeRecord


@runtime_checkable
class EmployeeRepository(Protocol):
    """Protocol for employee record persistence operations."""

    @abstractmethod
    async def add(self, record: EmployeeRecord) -> EmployeeRecord:
        """Insert a new record, link included."""
        ...

    @abstractmethod
    async def find_by_id(self, employee_id: EmployeeId) -> Optional[EmployeeRecord]:
        """Find record by ID."""
        ...

    @abstractmethod
    async def find_by_linked_identity(
        self, company_id: CompanyId, identity_id: IdentityId
    ) -> Optional[EmployeeRecord]:
        """Find the company's record linked to an identity."""
        ...

    @abstractmethod
    async def list_unlinked(self, company_id: CompanyId) -> List[EmployeeRecord]:
        """List the company's records without a linked identity."""
        ...

    @abstractmethod
    async def update(self, employee_id: EmployeeId, patch: Dict[str, Any]) -> EmployeeRecord:
        """Apply a partial update of name, department or hire date."""
        ...

    @abstractmethod
    async def link_to_identity(self, employee_id: EmployeeId, identity_id: IdentityId) -> bool:
        """Set the link if the record is still unlinked.

        Returns:
            False when the record was already linked (nothing written)
        """
        ...

    @abstractmethod
    async def unlink_identity(self, company_id: CompanyId, identity_id: IdentityId) -> int:
        """Clear every link to ``identity_id`` in the company; returns rows changed."""
        ...
