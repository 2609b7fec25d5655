"""Company (tenant) entity.

A company is created together with its owner membership and is otherwise
read-only here.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime

from ....core.exceptions import RequiredFieldError, ValidationError
from ....core.value_objects import CompanyId
from ....utils import utc_now

BUSINESS_NUMBER_LENGTH = 10


@dataclass
class Company:
    """Registered company."""

    id: CompanyId
    name: str
    business_number: str
    created_at: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class CompanyDraft:
    """Registration input; the business number may carry separators."""

    name: str
    business_number: str

    def validated(self) -> 'CompanyDraft':
        name = (self.name or "").strip()
        if not name:
            raise RequiredFieldError("company_name")

        raw = (self.business_number or "").strip()
        if not raw:
            raise RequiredFieldError("business_number")
        digits = re.sub(r"\D", "", raw)
        if len(digits) != BUSINESS_NUMBER_LENGTH:
            raise ValidationError(
                f"business_number must have {BUSINESS_NUMBER_LENGTH} digits",
                details={"field": "business_number"},
            )

        return CompanyDraft(name=name, business_number=digits)
