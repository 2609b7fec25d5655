from .membership import CompanyMembership, MembershipStatus
from .protocols import MembershipRepository

__all__ = ["CompanyMembership", "MembershipStatus", "MembershipRepository"]
