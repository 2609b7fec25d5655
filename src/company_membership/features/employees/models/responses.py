"""Employee API response models."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class EmployeeResponse(BaseModel):
    """Employee record."""

    id: str = Field(..., description="Employee record ID")
    company_id: str = Field(..., description="Company ID")
    name: str = Field(..., description="Employee name")
    department: str = Field(..., description="Department")
    hire_date: date = Field(..., description="Hire date")
    linked_identity_id: Optional[str] = Field(None, description="Linked identity ID")

    @classmethod
    def from_entity(cls, record) -> "EmployeeResponse":
        """Create response from employee record entity."""
        return cls(
            id=str(record.id),
            company_id=str(record.company_id),
            name=record.name,
            department=record.department,
            hire_date=record.hire_date,
            linked_identity_id=str(record.linked_identity_id) if record.linked_identity_id else None,
        )


class EmployeeListResponse(BaseModel):
    """List of employee records."""

    items: List[EmployeeResponse] = Field(default_factory=list)
    total: int = Field(...)
