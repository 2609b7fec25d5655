"""Company registration routes."""

import logging

from fastapi import APIRouter, Depends, status

from ....dependencies import get_current_identity, get_membership_service
from ...identities.entities import Identity
from ...memberships.models.responses import MembershipResponse
from ...memberships.services.membership_service import MembershipService
from ..models.requests import RegisterCompanyRequest
from ..models.responses import CompanyRegistrationResponse, CompanyResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post("", response_model=CompanyRegistrationResponse, status_code=status.HTTP_201_CREATED)
async def register_company(
    request: RegisterCompanyRequest,
    identity: Identity = Depends(get_current_identity),
    service: MembershipService = Depends(get_membership_service),
) -> CompanyRegistrationResponse:
    """Register a company owned by the caller."""
    company, owner = await service.register_company(identity, request.to_draft())
    return CompanyRegistrationResponse(
        company=CompanyResponse.from_entity(company),
        owner=MembershipResponse.from_entity(owner),
    )
