"""Employee linkage routes."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from ....core.value_objects import EmployeeId, MembershipId
from ....dependencies import get_actor, get_linkage_service
from ...permissions.entities.actor import ActorContext
from ..models.requests import LinkExistingEmployeeRequest, LinkNewEmployeeRequest
from ..models.responses import EmployeeListResponse, EmployeeResponse
from ..services.linkage_service import EmployeeLinkageService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Employees"])


@router.post(
    "/members/{membership_id}/employee",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def link_new_employee(
    membership_id: UUID,
    request: LinkNewEmployeeRequest,
    actor: ActorContext = Depends(get_actor),
    service: EmployeeLinkageService = Depends(get_linkage_service),
) -> EmployeeResponse:
    """Create an employee record already linked to the member."""
    record = await service.link_new(MembershipId(membership_id), request.to_draft(), actor)
    return EmployeeResponse.from_entity(record)


@router.post("/members/{membership_id}/employee/link", response_model=EmployeeResponse)
async def link_existing_employee(
    membership_id: UUID,
    request: LinkExistingEmployeeRequest,
    actor: ActorContext = Depends(get_actor),
    service: EmployeeLinkageService = Depends(get_linkage_service),
) -> EmployeeResponse:
    """Link an unlinked employee record to the member, optionally renaming it."""
    record = await service.link_existing(
        MembershipId(membership_id),
        EmployeeId(request.employee_id),
        actor,
        rename=request.rename,
    )
    return EmployeeResponse.from_entity(record)


@router.get("/employees/unlinked", response_model=EmployeeListResponse)
async def list_unlinked_employees(
    actor: ActorContext = Depends(get_actor),
    service: EmployeeLinkageService = Depends(get_linkage_service),
) -> EmployeeListResponse:
    records = await service.list_unlinked(actor)
    return EmployeeListResponse(
        items=[EmployeeResponse.from_entity(r) for r in records],
        total=len(records),
    )
