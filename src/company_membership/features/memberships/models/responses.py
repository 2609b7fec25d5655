"""Membership API response models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...permissions.entities.role import Permission, Role, role_display_name
from ..entities.membership import MembershipStatus


class MembershipResponse(BaseModel):
    """Company membership view row."""

    id: str = Field(..., description="Membership ID")
    identity_id: str = Field(..., description="Identity ID")
    company_id: str = Field(..., description="Company ID")
    email: Optional[str] = Field(None, description="Member email")
    display_name: Optional[str] = Field(None, description="Member display name")
    role: Role = Field(..., description="Member role")
    permission: Permission = Field(..., description="Member permission")
    role_label: str = Field(..., description="Human readable role and permission")
    status: MembershipStatus = Field(..., description="Lifecycle status")
    applied_at: Optional[datetime] = Field(None, description="Join request timestamp")
    approved_at: Optional[datetime] = Field(None, description="Approval timestamp")

    @classmethod
    def from_entity(cls, membership) -> "MembershipResponse":
        """Create response from membership entity."""
        return cls(
            id=str(membership.id),
            identity_id=str(membership.identity_id),
            company_id=str(membership.company_id),
            email=membership.email,
            display_name=membership.display_name,
            role=membership.role,
            permission=membership.permission,
            role_label=role_display_name(membership.role, membership.permission),
            status=membership.status,
            applied_at=membership.applied_at,
            approved_at=membership.approved_at,
        )


class MembershipListResponse(BaseModel):
    """List of memberships."""

    items: List[MembershipResponse] = Field(default_factory=list)
    total: int = Field(..., description="Number of rows returned")

    @classmethod
    def from_entities(cls, memberships) -> "MembershipListResponse":
        items = [MembershipResponse.from_entity(m) for m in memberships]
        return cls(items=items, total=len(items))


class PendingCountResponse(BaseModel):
    """Pending join request count. May be briefly stale."""

    count: int = Field(..., ge=0)


class WithdrawMemberResponse(BaseModel):
    """Successful withdrawal."""

    success: bool = Field(True)
    message: str = Field(...)
