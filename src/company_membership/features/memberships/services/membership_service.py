"""Membership lifecycle service.

Every mutating operation loads the target row, authorizes the actor against
it through the permission gate, applies the transition on a copy of the
entity and only then writes. A failed check leaves the store untouched.
"""

import logging
from dataclasses import replace
from typing import Any, List, Tuple

from ....core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RequiredFieldError,
    ValidationError,
)
from ....core.value_objects import CompanyId, IdentityId, MembershipId
from ...companies.entities import Company, CompanyDraft, CompanyRepository
from ...database.entities import TransactionManager
from ...employees.entities import EmployeeRepository
from ...identities.entities import Identity, IdentityDirectory
from ...permissions.entities.actor import ActorContext
from ...permissions.entities.capability import Capability
from ...permissions.entities.role import Permission, Role
from ...permissions.services import PermissionGate
from ..entities.membership import CompanyMembership, MembershipStatus
from ..entities.protocols import MembershipRepository

logger = logging.getLogger(__name__)


class MembershipService:
    """Service for the membership lifecycle: join, review, re-role, removal."""

    def __init__(
        self,
        memberships: MembershipRepository,
        employees: EmployeeRepository,
        identities: IdentityDirectory,
        transactions: TransactionManager,
        companies: CompanyRepository,
    ):
        self.memberships = memberships
        self.employees = employees
        self.identities = identities
        self.transactions = transactions
        self.companies = companies

    async def resolve_actor(self, identity_id: IdentityId) -> ActorContext:
        """Build the actor context from the identity's active membership.

        Raises:
            AuthorizationError: If the identity has no active membership
        """
        membership = await self.memberships.find_active_by_identity(identity_id)
        if membership is None:
            raise AuthorizationError(
                "No active company membership",
                details={"identity_id": str(identity_id)},
            )
        return ActorContext.from_membership(membership)

    async def get_membership(self, membership_id: MembershipId) -> CompanyMembership:
        membership = await self.memberships.find_by_id(membership_id)
        if membership is None:
            raise NotFoundError("Membership", str(membership_id))
        return membership

    async def _ensure_not_active_elsewhere(self, identity_id: IdentityId) -> None:
        """An identity is an active member of at most one company."""
        active = await self.memberships.find_active_by_identity(identity_id)
        if active is not None:
            raise ConflictError(
                "Identity is already an active member of a company",
                details={"membership_id": str(active.id), "company_id": str(active.company_id)},
            )

    async def register_company(
        self, identity: Identity, draft: CompanyDraft
    ) -> Tuple[Company, CompanyMembership]:
        """Create a company with ``identity`` as its active owner.

        The company row and the owner membership are written in one
        transaction.

        Raises:
            ValidationError: If the name or business number is blank or malformed
            ConflictError: If the identity is already active in a company
        """
        draft = draft.validated()
        await self._ensure_not_active_elsewhere(identity.id)

        company = Company(id=CompanyId.generate(), name=draft.name, business_number=draft.business_number)
        owner = CompanyMembership(
            id=MembershipId.generate(),
            identity_id=identity.id,
            company_id=company.id,
            email=identity.email,
            display_name=identity.display_name,
        )
        owner.activate_as_owner()

        async with self.transactions.transaction():
            created = await self.companies.add(company)
            saved = await self.memberships.save(owner)

        logger.info(f"Company {created.id} registered by identity {identity.id}")
        return created, saved

    async def get_own_membership(self, by: ActorContext) -> CompanyMembership:
        """The caller's own membership row, with its profile fields."""
        PermissionGate(by).require(Capability.READ_OWN_PROFILE)
        return await self.get_membership(self._own_membership_id(by))

    async def update_own_profile(self, by: ActorContext, display_name: str) -> CompanyMembership:
        """Edit the display name on the caller's own membership."""
        PermissionGate(by).require(Capability.EDIT_OWN_PROFILE)
        target = await self.get_membership(self._own_membership_id(by))

        updated = replace(target)
        updated.rename(display_name)
        saved = await self.memberships.update(updated)
        logger.info(f"Membership {target.id} profile updated by its owner")
        return saved

    def _own_membership_id(self, by: ActorContext) -> MembershipId:
        if by.membership_id is None:
            raise AuthorizationError("No active company membership")
        return by.membership_id

    async def request_join(self, identity: Identity, company_id: CompanyId) -> CompanyMembership:
        """Create the pending membership a redeemed invite produces."""
        await self._ensure_not_active_elsewhere(identity.id)
        existing = await self.memberships.find_open(identity.id, company_id)
        if existing is not None:
            raise ConflictError(
                f"Identity already has a {existing.status.value} membership in this company",
                details={"membership_id": str(existing.id), "status": existing.status.value},
            )

        membership = CompanyMembership(
            id=MembershipId.generate(),
            identity_id=identity.id,
            company_id=company_id,
            email=identity.email,
            display_name=identity.display_name,
        )
        created = await self.memberships.save(membership)
        logger.info(f"Identity {identity.id} requested to join company {company_id}")
        return created

    async def approve(
        self,
        membership_id: MembershipId,
        by: ActorContext,
        role: Role = Role.EMPLOYEE,
        permission: Permission = Permission.EDITOR,
    ) -> CompanyMembership:
        """pending -> active."""
        target = await self.get_membership(membership_id)
        PermissionGate(by).ensure_can_review(target)
        if target.is_pending:
            await self._ensure_not_active_elsewhere(target.identity_id)

        approved = replace(target)
        approved.approve(role, permission)
        saved = await self.memberships.update(approved)
        logger.info(
            f"Membership {membership_id} approved by {by.identity_id} "
            f"as {role.value}/{permission.value}"
        )
        return saved

    async def reject(self, membership_id: MembershipId, by: ActorContext) -> CompanyMembership:
        """pending -> removed."""
        target = await self.get_membership(membership_id)
        PermissionGate(by).ensure_can_review(target)

        rejected = replace(target)
        rejected.reject()
        saved = await self.memberships.update(rejected)
        logger.info(f"Membership {membership_id} rejected by {by.identity_id}")
        return saved

    async def change_role(
        self,
        membership_id: MembershipId,
        new_role: Role,
        new_permission: Permission,
        by: ActorContext,
    ) -> CompanyMembership:
        """Update role and permission of an active, non-owner membership."""
        target = await self.get_membership(membership_id)
        PermissionGate(by).ensure_can_change_role(target)

        changed = replace(target)
        changed.change_role(new_role, new_permission)
        saved = await self.memberships.update(changed)
        logger.info(
            f"Membership {membership_id} changed from {target.role.value}/{target.permission.value} "
            f"to {new_role.value}/{new_permission.value} by {by.identity_id}"
        )
        return saved

    async def remove(self, membership_id: MembershipId, by: ActorContext) -> CompanyMembership:
        """active -> removed, unlinking employee records and deleting the identity.

        The three writes share one transaction and the identity deletion runs
        last, so a provider failure rolls the membership and the links back.

        Raises:
            IdentityDeletionError: If the identity provider fails; nothing is committed
        """
        target = await self.get_membership(membership_id)
        PermissionGate(by).ensure_can_remove(target)

        removed = replace(target)
        removed.mark_removed()

        async with self.transactions.transaction():
            saved = await self.memberships.update(removed)
            unlinked = await self.employees.unlink_identity(target.company_id, target.identity_id)
            await self.identities.delete_identity(target.identity_id)

        logger.info(
            f"Membership {membership_id} removed by {by.identity_id}; "
            f"{unlinked} employee record(s) unlinked, identity {target.identity_id} deleted"
        )
        return saved

    async def withdraw_identity(
        self, member_id: Any, by: ActorContext
    ) -> CompanyMembership:
        """Delete the backing identity of a member, leaving the membership row as is.

        Serves the privileged withdrawal endpoint, which admits owners and
        admins and reports the owner target as an authorization failure.
        """
        gate = PermissionGate(by)
        gate.require_role(Role.ADMIN)
        if not member_id:
            raise RequiredFieldError("memberId")
        if not isinstance(member_id, (MembershipId, str)):
            raise ValidationError("memberId must be a string", details={"field": "memberId"})
        try:
            membership_id = member_id if isinstance(member_id, MembershipId) else MembershipId(member_id)
        except ValueError:
            raise NotFoundError("Membership", str(member_id))

        target = await self.get_membership(membership_id)
        gate.require_same_company(target)
        if target.is_owner:
            raise AuthorizationError("Cannot withdraw the company owner")

        await self.identities.delete_identity(target.identity_id)
        logger.info(f"Identity {target.identity_id} of membership {membership_id} withdrawn by {by.identity_id}")
        return target

    async def list_members(self, by: ActorContext) -> List[CompanyMembership]:
        """Active members of the actor's company."""
        PermissionGate(by).require(Capability.READ_MEMBERS)
        return await self.memberships.list_by_status(by.company_id, MembershipStatus.ACTIVE)

    async def list_pending(self, by: ActorContext) -> List[CompanyMembership]:
        """Pending join requests of the actor's company (admin and up)."""
        gate = PermissionGate(by)
        gate.require_role(Role.ADMIN)
        gate.require(Capability.APPROVE_MEMBERS)
        return await self.memberships.list_by_status(by.company_id, MembershipStatus.PENDING)

    async def pending_count(self, by: ActorContext) -> int:
        """Number of pending requests; read outside any transaction and may be stale."""
        gate = PermissionGate(by)
        gate.require_role(Role.ADMIN)
        return await self.memberships.count_by_status(by.company_id, MembershipStatus.PENDING)
