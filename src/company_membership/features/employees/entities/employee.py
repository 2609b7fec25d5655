"""Employee record domain entity.

Employee records are operational, company-owned rows used for time
tracking. A record may point back at at most one identity, and an identity
is linked to at most one record per company.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Union

from ....core.exceptions import RequiredFieldError, ValidationError
from ....core.value_objects import CompanyId, EmployeeId, IdentityId
from ....utils import utc_now


@dataclass
class EmployeeRecord:
    """Operational employee record."""

    id: EmployeeId
    company_id: CompanyId
    name: str
    department: str
    hire_date: date
    linked_identity_id: Optional[IdentityId] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def is_linked(self) -> bool:
        return self.linked_identity_id is not None

    def is_linked_to(self, identity_id: IdentityId) -> bool:
        return self.linked_identity_id == identity_id


@dataclass(frozen=True)
class EmployeeDraft:
    """Input for creating a new employee record. Every field is mandatory."""

    name: str
    department: str
    hire_date: Union[date, str, None]

    def validated(self) -> 'EmployeeDraft':
        """Return a trimmed copy, raising on blank or malformed fields."""
        name = (self.name or "").strip()
        if not name:
            raise RequiredFieldError("name")

        department = (self.department or "").strip()
        if not department:
            raise RequiredFieldError("department")

        hire_date = self.hire_date
        if isinstance(hire_date, str):
            if not hire_date.strip():
                raise RequiredFieldError("hire_date")
            try:
                hire_date = date.fromisoformat(hire_date.strip())
            except ValueError as e:
                raise ValidationError(
                    f"hire_date must be an ISO date (YYYY-MM-DD), got: {self.hire_date}",
                    details={"field": "hire_date"},
                ) from e
        if hire_date is None:
            raise RequiredFieldError("hire_date")

        return EmployeeDraft(name=name, department=department, hire_date=hire_date)
