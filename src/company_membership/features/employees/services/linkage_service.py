"""Employee profile linkage service.

Links an active member's identity to an employee record, either by creating
a new record with the link already set or by claiming an unlinked one.
"""

import logging
from typing import List, Optional

from ....core.exceptions import ConflictError, InvalidStateError, NotFoundError
from ....core.value_objects import CompanyId, EmployeeId, IdentityId, MembershipId
from ...database.entities import TransactionManager
from ...memberships.entities import CompanyMembership, MembershipRepository
from ...permissions.entities.actor import ActorContext
from ...permissions.entities.capability import Capability
from ...permissions.services import PermissionGate
from ..entities.employee import EmployeeDraft, EmployeeRecord
from ..entities.protocols import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeLinkageService:
    """Maintains the identity to employee record mapping."""

    def __init__(
        self,
        memberships: MembershipRepository,
        employees: EmployeeRepository,
        transactions: TransactionManager,
    ):
        self.memberships = memberships
        self.employees = employees
        self.transactions = transactions

    async def _authorized_target(self, membership_id: MembershipId, by: ActorContext) -> CompanyMembership:
        target = await self.memberships.find_by_id(membership_id)
        if target is None:
            raise NotFoundError("Membership", str(membership_id))
        PermissionGate(by).ensure_can_link(target)
        if not target.is_active:
            raise InvalidStateError(
                "Only active members can be linked to an employee record",
                details={"status": target.status.value},
            )
        return target

    async def _ensure_identity_unlinked(self, company_id: CompanyId, identity_id: IdentityId) -> None:
        existing = await self.employees.find_by_linked_identity(company_id, identity_id)
        if existing is not None:
            raise ConflictError(
                "This member is already linked to an employee record",
                details={"employee_id": str(existing.id)},
            )

    async def link_new(
        self, target_membership_id: MembershipId, draft: EmployeeDraft, by: ActorContext
    ) -> EmployeeRecord:
        """Create an employee record already linked to the target member."""
        # Input first, so a blank field never reaches the store
        draft = draft.validated()
        target = await self._authorized_target(target_membership_id, by)
        await self._ensure_identity_unlinked(target.company_id, target.identity_id)

        record = EmployeeRecord(
            id=EmployeeId.generate(),
            company_id=target.company_id,
            name=draft.name,
            department=draft.department,
            hire_date=draft.hire_date,
            linked_identity_id=target.identity_id,
        )
        created = await self.employees.add(record)
        logger.info(f"Employee {created.id} created and linked to identity {target.identity_id}")
        return created

    async def link_existing(
        self,
        target_membership_id: MembershipId,
        employee_id: EmployeeId,
        by: ActorContext,
        rename: Optional[str] = None,
    ) -> EmployeeRecord:
        """Claim an unlinked employee record for the target member.

        Raises:
            NotFoundError: If the record does not exist in the actor's company
            ConflictError: If the record or the member is already linked
        """
        target = await self._authorized_target(target_membership_id, by)

        employee = await self.employees.find_by_id(employee_id)
        if employee is None or employee.company_id != target.company_id:
            raise NotFoundError("Employee", str(employee_id))
        if employee.is_linked:
            raise ConflictError(
                "Employee record is already linked to another member",
                details={"employee_id": str(employee_id)},
            )
        await self._ensure_identity_unlinked(target.company_id, target.identity_id)

        new_name = (rename or "").strip()
        async with self.transactions.transaction():
            if new_name and new_name != employee.name:
                await self.employees.update(employee_id, {"name": new_name})
            if not await self.employees.link_to_identity(employee_id, target.identity_id):
                raise ConflictError(
                    "Employee record was linked by another request",
                    details={"employee_id": str(employee_id)},
                )
            linked = await self.employees.find_by_id(employee_id)

        logger.info(f"Employee {employee_id} linked to identity {target.identity_id} by {by.identity_id}")
        return linked

    async def get_linked_employee(
        self, identity_id: IdentityId, company_id: CompanyId
    ) -> Optional[EmployeeRecord]:
        return await self.employees.find_by_linked_identity(company_id, identity_id)

    async def list_unlinked(self, by: ActorContext) -> List[EmployeeRecord]:
        """Records of the actor's company that ``link_existing`` can claim."""
        PermissionGate(by).require(Capability.LINK_EMPLOYEES)
        return await self.employees.list_unlinked(by.company_id)
