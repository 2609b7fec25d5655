from .requests import ApproveMembershipRequest, ChangeRoleRequest, UpdateProfileRequest
from .responses import (
    MembershipListResponse,
    MembershipResponse,
    PendingCountResponse,
    WithdrawMemberResponse,
)

__all__ = [
    "ApproveMembershipRequest",
    "ChangeRoleRequest",
    "UpdateProfileRequest",
    "MembershipListResponse",
    "MembershipResponse",
    "PendingCountResponse",
    "WithdrawMemberResponse",
]
