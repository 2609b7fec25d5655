"""Company API request models."""

from pydantic import BaseModel, Field

from ..entities.company import CompanyDraft


class RegisterCompanyRequest(BaseModel):
    """Register a new company; the caller becomes its owner."""

    company_name: str = Field("", description="Company name")
    business_number: str = Field("", description="10-digit business registration number; separators allowed")

    def to_draft(self) -> CompanyDraft:
        return CompanyDraft(name=self.company_name, business_number=self.business_number)
