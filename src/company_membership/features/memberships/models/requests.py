"""Membership API request models."""

from pydantic import BaseModel, Field

from ...permissions.entities.role import Permission, Role


class ApproveMembershipRequest(BaseModel):
    """Approve a pending join request."""

    role: Role = Field(Role.EMPLOYEE, description="Role granted on approval (admin or employee)")
    permission: Permission = Field(Permission.EDITOR, description="Permission granted on approval")


class ChangeRoleRequest(BaseModel):
    """Change the role and permission of an active member."""

    role: Role = Field(..., description="New role (admin or employee)")
    permission: Permission = Field(..., description="New permission")


class UpdateProfileRequest(BaseModel):
    """Edit the caller's own profile fields."""

    display_name: str = Field(..., description="Display name shown to the company")
