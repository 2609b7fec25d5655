"""Company membership domain entity.

A membership binds one identity to one company with a role, a permission
and a lifecycle status::

    pending --approve--> active --remove--> removed
       \\--reject------------------------->/

``removed`` is terminal; re-entry creates a new pending row.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ....core.exceptions import InvalidOperationError, InvalidStateError, RequiredFieldError
from ....core.value_objects import CompanyId, IdentityId, MembershipId
from ....utils import utc_now
from ...permissions.entities.role import Permission, Role


class MembershipStatus(str, Enum):
    """Lifecycle status of a membership."""
    PENDING = "pending"
    ACTIVE = "active"
    REMOVED = "removed"


@dataclass
class CompanyMembership:
    """Binding of an identity to a company."""

    id: MembershipId
    identity_id: IdentityId
    company_id: CompanyId
    role: Role = Role.EMPLOYEE
    permission: Permission = Permission.EDITOR
    status: MembershipStatus = MembershipStatus.PENDING
    applied_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None

    # View fields copied from the identity at join time
    email: Optional[str] = None
    display_name: Optional[str] = None

    def __post_init__(self):
        if self.applied_at is None:
            self.applied_at = utc_now()

    @property
    def is_pending(self) -> bool:
        return self.status == MembershipStatus.PENDING

    @property
    def is_active(self) -> bool:
        return self.status == MembershipStatus.ACTIVE

    @property
    def is_removed(self) -> bool:
        return self.status == MembershipStatus.REMOVED

    @property
    def is_owner(self) -> bool:
        return self.role == Role.OWNER

    def _require_status(self, expected: MembershipStatus, action: str) -> None:
        if self.status != expected:
            raise InvalidStateError(
                f"Cannot {action} a {self.status.value} membership",
                details={"status": self.status.value, "expected": expected.value},
            )

    def approve(self, role: Role = Role.EMPLOYEE, permission: Permission = Permission.EDITOR) -> None:
        """Activate a pending membership with the given role and permission."""
        self._require_status(MembershipStatus.PENDING, "approve")
        if role == Role.OWNER:
            raise InvalidOperationError("A join request cannot be approved as owner")
        self.role = role
        self.permission = permission
        self.status = MembershipStatus.ACTIVE
        self.approved_at = utc_now()

    def activate_as_owner(self) -> None:
        """Founding membership of a newly registered company."""
        self._require_status(MembershipStatus.PENDING, "activate")
        self.role = Role.OWNER
        self.permission = Permission.EDITOR
        self.status = MembershipStatus.ACTIVE
        self.approved_at = self.applied_at

    def rename(self, display_name: str) -> None:
        """Set the display name shown to the rest of the company."""
        self._require_status(MembershipStatus.ACTIVE, "edit")
        name = (display_name or "").strip()
        if not name:
            raise RequiredFieldError("display_name")
        self.display_name = name

    def reject(self) -> None:
        """Close a pending request."""
        self._require_status(MembershipStatus.PENDING, "reject")
        self.status = MembershipStatus.REMOVED

    def change_role(self, role: Role, permission: Permission) -> None:
        """Re-role an active, non-owner membership in place."""
        self._require_status(MembershipStatus.ACTIVE, "change the role of")
        if role == Role.OWNER:
            raise InvalidOperationError("Ownership cannot be granted through a role change")
        self.role = role
        self.permission = permission

    def mark_removed(self) -> None:
        """Terminal transition for an active membership."""
        self._require_status(MembershipStatus.ACTIVE, "remove")
        self.status = MembershipStatus.REMOVED
