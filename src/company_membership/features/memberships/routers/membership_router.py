"""Membership management routes."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends

from ....core.value_objects import MembershipId
from ....dependencies import get_actor, get_membership_service
from ...permissions.entities.actor import ActorContext
from ..models.requests import ApproveMembershipRequest, ChangeRoleRequest, UpdateProfileRequest
from ..models.responses import MembershipListResponse, MembershipResponse, PendingCountResponse
from ..services.membership_service import MembershipService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/members", tags=["Members"])


@router.get("", response_model=MembershipListResponse)
async def list_members(
    actor: ActorContext = Depends(get_actor),
    service: MembershipService = Depends(get_membership_service),
) -> MembershipListResponse:
    """Active members of the caller's company."""
    return MembershipListResponse.from_entities(await service.list_members(actor))


@router.get("/pending", response_model=MembershipListResponse)
async def list_pending(
    actor: ActorContext = Depends(get_actor),
    service: MembershipService = Depends(get_membership_service),
) -> MembershipListResponse:
    """Pending join requests (admin and owner)."""
    return MembershipListResponse.from_entities(await service.list_pending(actor))


@router.get("/pending/count", response_model=PendingCountResponse)
async def pending_count(
    actor: ActorContext = Depends(get_actor),
    service: MembershipService = Depends(get_membership_service),
) -> PendingCountResponse:
    return PendingCountResponse(count=await service.pending_count(actor))


@router.get("/me", response_model=MembershipResponse)
async def get_own_membership(
    actor: ActorContext = Depends(get_actor),
    service: MembershipService = Depends(get_membership_service),
) -> MembershipResponse:
    """The caller's own membership and profile fields."""
    return MembershipResponse.from_entity(await service.get_own_membership(actor))


@router.patch("/me", response_model=MembershipResponse)
async def update_own_profile(
    request: UpdateProfileRequest,
    actor: ActorContext = Depends(get_actor),
    service: MembershipService = Depends(get_membership_service),
) -> MembershipResponse:
    membership = await service.update_own_profile(actor, request.display_name)
    return MembershipResponse.from_entity(membership)


@router.post("/{membership_id}/approve", response_model=MembershipResponse)
async def approve_member(
    membership_id: UUID,
    request: Optional[ApproveMembershipRequest] = None,
    actor: ActorContext = Depends(get_actor),
    service: MembershipService = Depends(get_membership_service),
) -> MembershipResponse:
    """Approve a join request; role and permission default to employee/editor."""
    request = request or ApproveMembershipRequest()
    membership = await service.approve(
        MembershipId(membership_id), actor, role=request.role, permission=request.permission
    )
    return MembershipResponse.from_entity(membership)


@router.post("/{membership_id}/reject", response_model=MembershipResponse)
async def reject_member(
    membership_id: UUID,
    actor: ActorContext = Depends(get_actor),
    service: MembershipService = Depends(get_membership_service),
) -> MembershipResponse:
    membership = await service.reject(MembershipId(membership_id), actor)
    return MembershipResponse.from_entity(membership)


@router.patch("/{membership_id}/role", response_model=MembershipResponse)
async def change_member_role(
    membership_id: UUID,
    request: ChangeRoleRequest,
    actor: ActorContext = Depends(get_actor),
    service: MembershipService = Depends(get_membership_service),
) -> MembershipResponse:
    membership = await service.change_role(
        MembershipId(membership_id), request.role, request.permission, actor
    )
    return MembershipResponse.from_entity(membership)


@router.delete("/{membership_id}", response_model=MembershipResponse)
async def remove_member(
    membership_id: UUID,
    actor: ActorContext = Depends(get_actor),
    service: MembershipService = Depends(get_membership_service),
) -> MembershipResponse:
    """Remove a member (owner only). Deletes the member's identity."""
    membership = await service.remove(MembershipId(membership_id), actor)
    return MembershipResponse.from_entity(membership)
