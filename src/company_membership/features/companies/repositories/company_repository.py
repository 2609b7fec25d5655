"""Company repository implementation over the asyncpg database repository."""

import logging
from typing import Any, Dict, Optional

from ....core.value_objects import CompanyId
from ...database.entities import DatabaseRepository
from ..entities.company import Company
from ..utils.queries import COMPANY_GET_BY_ID, COMPANY_INSERT

logger = logging.getLogger(__name__)


class CompanyDatabaseRepository:
    """Database repository for companies."""

    def __init__(self, database_repository: DatabaseRepository, schema: str = "public"):
        self._db = database_repository
        self._schema = schema

    async def add(self, company: Company) -> Company:
        query = COMPANY_INSERT.format(schema=self._schema)
        row = await self._db.fetch_one(
            query,
            company.id.value,
            company.name,
            company.business_number,
            company.created_at,
        )
        logger.info(f"Created company {company.id}")
        return self._map_row_to_company(row)

    async def find_by_id(self, company_id: CompanyId) -> Optional[Company]:
        query = COMPANY_GET_BY_ID.format(schema=self._schema)
        row = await self._db.fetch_one(query, company_id.value)
        return self._map_row_to_company(row) if row else None

    def _map_row_to_company(self, row: Dict[str, Any]) -> Company:
        return Company(
            id=CompanyId(row["id"]),
            name=row["name"],
            business_number=row["business_number"],
            created_at=row["created_at"],
        )
