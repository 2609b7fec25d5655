"""Actor context for membership operations."""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from ....core.value_objects import CompanyId, IdentityId, MembershipId
from .capability import Capability, capabilities_for
from .role import Permission, Role, at_least


@dataclass(frozen=True)
class ActorContext:
    """
    Immutable context for the member performing an operation.

    Assembled once per request or session from the caller's active
    membership and passed explicitly into every service call.

    Attributes:
        identity_id: The authenticated identity
        company_id: The company the identity is an active member of
        membership_id: The caller's own membership row
        role: The caller's role in the company
        permission: The caller's permission modifier
        capabilities: Effective capability set derived from role/permission
    """
    identity_id: IdentityId
    company_id: CompanyId
    role: Role
    permission: Permission = Permission.EDITOR
    membership_id: Optional[MembershipId] = None
    capabilities: FrozenSet[Capability] = field(default=frozenset(), compare=False)

    def __post_init__(self):
        if not self.capabilities:
            object.__setattr__(self, 'capabilities', capabilities_for(self.role, self.permission))

    def has(self, capability: Capability) -> bool:
        """Check if the actor holds a capability."""
        return capability in self.capabilities

    @property
    def is_owner(self) -> bool:
        return self.role == Role.OWNER

    @property
    def is_admin(self) -> bool:
        """Owner or admin."""
        return at_least(self.role, Role.ADMIN)

    @property
    def can_manage_team(self) -> bool:
        """Member removal; owner only."""
        return self.has(Capability.REMOVE_MEMBERS)

    @classmethod
    def from_membership(cls, membership) -> 'ActorContext':
        """Build the context from an active CompanyMembership."""
        return cls(
            identity_id=membership.identity_id,
            company_id=membership.company_id,
            role=membership.role,
            permission=membership.permission,
            membership_id=membership.id,
        )
