"""Employee record repository implementation over the asyncpg database repository."""

import logging
from typing import Any, Dict, List, Optional

from ....core.exceptions import NotFoundError, ValidationError
from ....core.value_objects import CompanyId, EmployeeId, IdentityId
from ...database.entities import DatabaseRepository
from ..entities.employee import EmployeeRecord
from ..utils.queries import (
    EMPLOYEE_GET_BY_ID,
    EMPLOYEE_GET_BY_LINKED_IDENTITY,
    EMPLOYEE_INSERT,
    EMPLOYEE_LINK_IDENTITY,
    EMPLOYEE_LIST_UNLINKED,
    EMPLOYEE_UNLINK_IDENTITY,
    EMPLOYEE_UPDATE,
)

logger = logging.getLogger(__name__)

# Columns a patch may touch; links go through link_to_identity/unlink_identity
UPDATABLE_COLUMNS = ("name", "department", "hire_date")


class EmployeeDatabaseRepository:
    """Database repository for employee records."""

    def __init__(self, database_repository: DatabaseRepository, schema: str = "public"):
        self._db = database_repository
        self._schema = schema

    async def add(self, record: EmployeeRecord) -> EmployeeRecord:
        query = EMPLOYEE_INSERT.format(schema=self._schema)
        row = await self._db.fetch_one(
            query,
            record.id.value,
            record.company_id.value,
            record.name,
            record.department,
            record.hire_date,
            record.linked_identity_id.value if record.linked_identity_id else None,
            record.created_at,
            record.updated_at,
        )
        logger.info(f"Created employee record {record.id} in company {record.company_id}")
        return self._map_row_to_employee(row)

    async def find_by_id(self, employee_id: EmployeeId) -> Optional[EmployeeRecord]:
        query = EMPLOYEE_GET_BY_ID.format(schema=self._schema)
        row = await self._db.fetch_one(query, employee_id.value)
        return self._map_row_to_employee(row) if row else None

    async def find_by_linked_identity(
        self, company_id: CompanyId, identity_id: IdentityId
    ) -> Optional[EmployeeRecord]:
        query = EMPLOYEE_GET_BY_LINKED_IDENTITY.format(schema=self._schema)
        row = await self._db.fetch_one(query, company_id.value, identity_id.value)
        return self._map_row_to_employee(row) if row else None

    async def list_unlinked(self, company_id: CompanyId) -> List[EmployeeRecord]:
        query = EMPLOYEE_LIST_UNLINKED.format(schema=self._schema)
        rows = await self._db.fetch_all(query, company_id.value)
        return [self._map_row_to_employee(row) for row in rows]

    async def update(self, employee_id: EmployeeId, patch: Dict[str, Any]) -> EmployeeRecord:
        unknown = set(patch) - set(UPDATABLE_COLUMNS)
        if unknown:
            raise ValidationError(
                f"Cannot update employee fields: {', '.join(sorted(unknown))}",
                details={"fields": sorted(unknown)},
            )
        if not patch:
            existing = await self.find_by_id(employee_id)
            if existing is None:
                raise NotFoundError("Employee", str(employee_id))
            return existing

        columns = [column for column in UPDATABLE_COLUMNS if column in patch]
        assignments = ", ".join(f"{column} = ${i}" for i, column in enumerate(columns, start=2))
        query = EMPLOYEE_UPDATE.format(schema=self._schema, assignments=assignments)
        row = await self._db.fetch_one(query, employee_id.value, *(patch[c] for c in columns))
        if row is None:
            raise NotFoundError("Employee", str(employee_id))
        return self._map_row_to_employee(row)

    async def link_to_identity(self, employee_id: EmployeeId, identity_id: IdentityId) -> bool:
        query = EMPLOYEE_LINK_IDENTITY.format(schema=self._schema)
        linked = await self._db.fetch_value(query, employee_id.value, identity_id.value)
        if linked is None:
            logger.warning(f"Employee {employee_id} was already linked; link to {identity_id} not written")
            return False
        return True

    async def unlink_identity(self, company_id: CompanyId, identity_id: IdentityId) -> int:
        query = EMPLOYEE_UNLINK_IDENTITY.format(schema=self._schema)
        status = await self._db.execute(query, company_id.value, identity_id.value)
        # asyncpg returns the command tag, e.g. "UPDATE 1"
        try:
            return int(status.split()[-1])
        except (AttributeError, IndexError, ValueError):
            return 0

    def _map_row_to_employee(self, row: Dict[str, Any]) -> EmployeeRecord:
        """Map database row to EmployeeRecord entity."""
        linked = row.get("linked_identity_id")
        return EmployeeRecord(
            id=EmployeeId(row["id"]),
            company_id=CompanyId(row["company_id"]),
            name=row["name"],
            department=row["department"],
            hire_date=row["hire_date"],
            linked_identity_id=IdentityId(linked) if linked else None,
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
