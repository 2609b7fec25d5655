"""Memberships feature: the company membership lifecycle.

- entities/: membership entity, status enum and repository protocol
- repositories/: asyncpg-backed repository
- services/: lifecycle service (join, approve, reject, change role, remove)
- routers/: HTTP routes, including the privileged withdrawal endpoint
"""

from .entities import CompanyMembership, MembershipStatus, MembershipRepository
from .services import MembershipService

__all__ = ["CompanyMembership", "MembershipStatus", "MembershipRepository", "MembershipService"]
