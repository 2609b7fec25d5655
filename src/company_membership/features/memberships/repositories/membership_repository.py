"""Membership repository implementation over the asyncpg database repository."""

import logging
from typing import Any, Dict, List, Optional

from ....core.exceptions import NotFoundError
from ....core.value_objects import CompanyId, IdentityId, MembershipId
from ...database.entities import DatabaseRepository
from ...permissions.entities.role import Permission, Role
from ..entities.membership import CompanyMembership, MembershipStatus
from ..utils.queries import (
    MEMBERSHIP_COUNT_BY_STATUS,
    MEMBERSHIP_GET_ACTIVE_BY_IDENTITY,
    MEMBERSHIP_GET_BY_ID,
    MEMBERSHIP_GET_OPEN,
    MEMBERSHIP_INSERT,
    MEMBERSHIP_LIST_BY_STATUS,
    MEMBERSHIP_UPDATE,
)

logger = logging.getLogger(__name__)


class MembershipDatabaseRepository:
    """Database repository for company memberships.

    Accepts the database repository and schema via dependency injection.
    """

    def __init__(self, database_repository: DatabaseRepository, schema: str = "public"):
        self._db = database_repository
        self._schema = schema

    async def save(self, membership: CompanyMembership) -> CompanyMembership:
        query = MEMBERSHIP_INSERT.format(schema=self._schema)
        row = await self._db.fetch_one(
            query,
            membership.id.value,
            membership.identity_id.value,
            membership.company_id.value,
            membership.role.value,
            membership.permission.value,
            membership.status.value,
            membership.applied_at,
            membership.approved_at,
            membership.email,
            membership.display_name,
        )
        logger.info(f"Created membership {membership.id} for identity {membership.identity_id}")
        return self._map_row_to_membership(row)

    async def update(self, membership: CompanyMembership) -> CompanyMembership:
        query = MEMBERSHIP_UPDATE.format(schema=self._schema)
        row = await self._db.fetch_one(
            query,
            membership.id.value,
            membership.role.value,
            membership.permission.value,
            membership.status.value,
            membership.approved_at,
            membership.display_name,
        )
        if row is None:
            raise NotFoundError("Membership", str(membership.id))
        return self._map_row_to_membership(row)

    async def find_by_id(self, membership_id: MembershipId) -> Optional[CompanyMembership]:
        query = MEMBERSHIP_GET_BY_ID.format(schema=self._schema)
        row = await self._db.fetch_one(query, membership_id.value)
        return self._map_row_to_membership(row) if row else None

    async def find_open(self, identity_id: IdentityId, company_id: CompanyId) -> Optional[CompanyMembership]:
        query = MEMBERSHIP_GET_OPEN.format(schema=self._schema)
        row = await self._db.fetch_one(query, identity_id.value, company_id.value)
        return self._map_row_to_membership(row) if row else None

    async def find_active_by_identity(self, identity_id: IdentityId) -> Optional[CompanyMembership]:
        query = MEMBERSHIP_GET_ACTIVE_BY_IDENTITY.format(schema=self._schema)
        row = await self._db.fetch_one(query, identity_id.value)
        return self._map_row_to_membership(row) if row else None

    async def list_by_status(self, company_id: CompanyId, status: MembershipStatus) -> List[CompanyMembership]:
        query = MEMBERSHIP_LIST_BY_STATUS.format(schema=self._schema)
        rows = await self._db.fetch_all(query, company_id.value, status.value)
        return [self._map_row_to_membership(row) for row in rows]

    async def count_by_status(self, company_id: CompanyId, status: MembershipStatus) -> int:
        query = MEMBERSHIP_COUNT_BY_STATUS.format(schema=self._schema)
        return int(await self._db.fetch_value(query, company_id.value, status.value) or 0)

    def _map_row_to_membership(self, row: Dict[str, Any]) -> CompanyMembership:
        """Map database row to CompanyMembership entity."""
        return CompanyMembership(
            id=MembershipId(row["id"]),
            identity_id=IdentityId(row["identity_id"]),
            company_id=CompanyId(row["company_id"]),
            role=Role(row["role"]),
            permission=Permission(row["permission"]),
            status=MembershipStatus(row["status"]),
            applied_at=row["applied_at"],
            approved_at=row["approved_at"],
            email=row.get("email"),
            display_name=row.get("display_name"),
        )
