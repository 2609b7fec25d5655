"""Employee linkage API request models.

Draft fields are plain strings so that blank values reach the domain check
and are reported as validation errors with the field name.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ..entities.employee import EmployeeDraft


class LinkNewEmployeeRequest(BaseModel):
    """Create an employee record linked to a member."""

    name: str = Field("", max_length=255, description="Employee name")
    department: str = Field("", max_length=255, description="Department")
    hire_date: Optional[str] = Field(None, description="Hire date (YYYY-MM-DD)")

    def to_draft(self) -> EmployeeDraft:
        return EmployeeDraft(name=self.name, department=self.department, hire_date=self.hire_date)


class LinkExistingEmployeeRequest(BaseModel):
    """Link an existing unlinked employee record to a member."""

    employee_id: UUID = Field(..., description="Employee record ID")
    rename: Optional[str] = Field(None, max_length=255, description="New name applied before linking")
