"""Permission gate for membership and linkage operations.

Every check either passes silently or raises; a failed check never turns
into a no-op for the caller.
"""

import logging

from ....core.exceptions import (
    AuthorizationError,
    CrossTenantError,
    OwnerImmutableError,
    SelfTargetError,
)
from ..entities.actor import ActorContext
from ..entities.capability import Capability
from ..entities.role import Role, at_least

logger = logging.getLogger(__name__)


class PermissionGate:
    """Authorizes an actor against capabilities and target memberships."""

    def __init__(self, actor: ActorContext):
        self.actor = actor

    def require(self, capability: Capability) -> None:
        """
        Require that the actor holds a capability.

        Raises:
            AuthorizationError: If the capability is not granted
        """
        if not self.actor.has(capability):
            logger.warning(
                f"Identity {self.actor.identity_id} ({self.actor.role.value}) "
                f"lacks capability {capability.value}"
            )
            raise AuthorizationError(
                f"Permission denied: {capability.value}",
                details={"capability": capability.value, "role": self.actor.role.value},
            )

    def require_role(self, min_role: Role) -> None:
        """Require the actor to rank at or above ``min_role``."""
        if not at_least(self.actor.role, min_role):
            raise AuthorizationError(
                f"Role '{min_role.value}' or higher required",
                details={"required_role": min_role.value, "role": self.actor.role.value},
            )

    def require_same_company(self, target) -> None:
        """Require the target row to belong to the actor's company."""
        if target.company_id != self.actor.company_id:
            logger.warning(
                f"Identity {self.actor.identity_id} attempted cross-tenant access "
                f"to company {target.company_id}"
            )
            raise CrossTenantError("Target does not belong to your company")

    def require_not_owner(self, target) -> None:
        """The owner's membership is never mutated by another member."""
        if target.role == Role.OWNER:
            raise OwnerImmutableError("The company owner cannot be modified or removed")

    def require_not_self(self, target) -> None:
        """No self-service role changes or self-removal."""
        if target.identity_id == self.actor.identity_id:
            raise SelfTargetError("You cannot perform this operation on your own membership")

    def ensure_can_review(self, target) -> None:
        """Approve or reject a pending join request."""
        self.require_same_company(target)
        self.require_role(Role.ADMIN)
        self.require(Capability.APPROVE_MEMBERS)

    def ensure_can_change_role(self, target) -> None:
        """Change another member's role and permission."""
        self.require_same_company(target)
        self.require_not_owner(target)
        self.require_role(Role.ADMIN)
        self.require(Capability.CHANGE_MEMBER_ROLE)
        self.require(Capability.CHANGE_MEMBER_PERMISSION)
        self.require_not_self(target)

    def ensure_can_remove(self, target) -> None:
        """Remove another member from the company (owner only)."""
        self.require_same_company(target)
        self.require_not_owner(target)
        if self.actor.role != Role.OWNER:
            raise AuthorizationError(
                "Only the company owner can remove members",
                details={"role": self.actor.role.value},
            )
        self.require(Capability.REMOVE_MEMBERS)
        self.require_not_self(target)

    def ensure_can_link(self, target) -> None:
        """Link an employee record to the target membership's identity."""
        self.require_same_company(target)
        self.require_role(Role.ADMIN)
        self.require(Capability.LINK_EMPLOYEES)
