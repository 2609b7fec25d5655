"""Company API response models."""

from datetime import datetime

from pydantic import BaseModel, Field

from ...memberships.models.responses import MembershipResponse


class CompanyResponse(BaseModel):
    """Registered company."""

    id: str = Field(..., description="Company ID")
    name: str = Field(..., description="Company name")
    business_number: str = Field(..., description="Business registration number (digits only)")
    created_at: datetime = Field(..., description="Registration timestamp")

    @classmethod
    def from_entity(cls, company) -> "CompanyResponse":
        return cls(
            id=str(company.id),
            name=company.name,
            business_number=company.business_number,
            created_at=company.created_at,
        )


class CompanyRegistrationResponse(BaseModel):
    """New company and its owner membership."""

    company: CompanyResponse
    owner: MembershipResponse
