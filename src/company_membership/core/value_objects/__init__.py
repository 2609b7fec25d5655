"""Value objects module for company-membership."""

from .identifiers import (
    IdentityId,
    CompanyId,
    MembershipId,
    EmployeeId,
)

__all__ = [
    "IdentityId",
    "CompanyId",
    "MembershipId",
    "EmployeeId",
]
