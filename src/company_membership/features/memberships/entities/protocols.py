"""Protocol interfaces for membership persistence."""

from abc import abstractmethod
from typing import List, Optional, Protocol, runtime_checkable

from ....core.value_objects import CompanyId, IdentityId, MembershipId
from .membership import CompanyMembership, MembershipStatus


@runtime_checkable
class MembershipRepository(Protocol):
    """Protocol for membership data persistence operations.

    Implementations raise TransientError on store failures and ConflictError
    when a uniqueness rule is violated.
    """

    @abstractmethod
    async def save(self, membership: CompanyMembership) -> CompanyMembership:
        """Insert a new membership row."""
        ...

    @abstractmethod
    async def update(self, membership: CompanyMembership) -> CompanyMembership:
        """Persist role, permission, status, approval time and display name."""
        ...

    @abstractmethod
    async def find_by_id(self, membership_id: MembershipId) -> Optional[CompanyMembership]:
        """Find membership by ID."""
        ...

    @abstractmethod
    async def find_open(self, identity_id: IdentityId, company_id: CompanyId) -> Optional[CompanyMembership]:
        """Find the pending or active membership of an identity in a company."""
        ...

    @abstractmethod
    async def find_active_by_identity(self, identity_id: IdentityId) -> Optional[CompanyMembership]:
        """Find the identity's active membership (at most one exists)."""
        ...

    @abstractmethod
    async def list_by_status(self, company_id: CompanyId, status: MembershipStatus) -> List[CompanyMembership]:
        """List a company's memberships in one status."""
        ...

    @abstractmethod
    async def count_by_status(self, company_id: CompanyId, status: MembershipStatus) -> int:
        """Count a company's memberships in one status."""
        ...
