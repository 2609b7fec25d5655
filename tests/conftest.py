"""Pytest configuration and fixtures for company-membership tests.

Repositories are replaced by in-memory fakes sharing one store. The store's
``transaction()`` snapshots every table and restores them when the block
raises, matching the all-or-nothing behaviour of the database transaction.
"""

import copy
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional
from uuid import uuid4

import pytest

from company_membership.core.exceptions import (
    ConflictError,
    IdentityDeletionError,
    InvalidTokenError,
    NotFoundError,
    TransientError,
)
from company_membership.core.value_objects import CompanyId, EmployeeId, IdentityId, MembershipId
from company_membership.features.credentials.entities import PasswordUpdateResult
from company_membership.features.employees.entities import EmployeeRecord
from company_membership.features.employees.services import EmployeeLinkageService
from company_membership.features.identities.entities import Identity
from company_membership.features.memberships.entities import CompanyMembership, MembershipStatus
from company_membership.features.memberships.services import MembershipService
from company_membership.features.permissions import ActorContext, Permission, Role


class InMemoryStore:
    """Tables shared by the fake repositories."""

    def __init__(self):
        self.memberships: Dict[MembershipId, CompanyMembership] = {}
        self.employees: Dict[EmployeeId, EmployeeRecord] = {}
        self.companies: Dict[CompanyId, Any] = {}
        self.transactions_opened = 0

    @asynccontextmanager
    async def transaction(self):
        self.transactions_opened += 1
        snapshot = (
            copy.deepcopy(self.memberships),
            copy.deepcopy(self.employees),
            copy.deepcopy(self.companies),
        )
        try:
            yield
        except Exception:
            self.memberships, self.employees, self.companies = snapshot
            raise


class FakeMembershipRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store
        self.fail_writes = False

    def _check_writable(self):
        if self.fail_writes:
            raise TransientError("Database operation failed: connection reset")

    def _check_unique(self, membership: CompanyMembership):
        if not membership.is_active:
            return
        for other in self.store.memberships.values():
            if other.id == membership.id or not other.is_active:
                continue
            if other.identity_id == membership.identity_id:
                raise ConflictError("Uniqueness violation: uq_company_memberships_identity_active")
            if membership.is_owner and other.is_owner and other.company_id == membership.company_id:
                raise ConflictError("Uniqueness violation: uq_company_memberships_owner")

    async def save(self, membership: CompanyMembership) -> CompanyMembership:
        self._check_writable()
        if await self.find_open(membership.identity_id, membership.company_id) is not None:
            raise ConflictError("Uniqueness violation: uq_company_memberships_open")
        self._check_unique(membership)
        self.store.memberships[membership.id] = replace(membership)
        return replace(membership)

    async def update(self, membership: CompanyMembership) -> CompanyMembership:
        self._check_writable()
        if membership.id not in self.store.memberships:
            raise NotFoundError("Membership", str(membership.id))
        self._check_unique(membership)
        self.store.memberships[membership.id] = replace(membership)
        return replace(membership)

    async def find_by_id(self, membership_id: MembershipId) -> Optional[CompanyMembership]:
        found = self.store.memberships.get(membership_id)
        return replace(found) if found else None

    async def find_open(self, identity_id: IdentityId, company_id: CompanyId) -> Optional[CompanyMembership]:
        for membership in self.store.memberships.values():
            if (membership.identity_id == identity_id
                    and membership.company_id == company_id
                    and not membership.is_removed):
                return replace(membership)
        return None

    async def find_active_by_identity(self, identity_id: IdentityId) -> Optional[CompanyMembership]:
        for membership in self.store.memberships.values():
            if membership.identity_id == identity_id and membership.is_active:
                return replace(membership)
        return None

    async def list_by_status(self, company_id: CompanyId, status: MembershipStatus) -> List[CompanyMembership]:
        rows = [
            replace(m) for m in self.store.memberships.values()
            if m.company_id == company_id and m.status == status
        ]
        return sorted(rows, key=lambda m: m.applied_at)

    async def count_by_status(self, company_id: CompanyId, status: MembershipStatus) -> int:
        return len(await self.list_by_status(company_id, status))


class FakeCompanyRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def add(self, company):
        if any(c.business_number == company.business_number for c in self.store.companies.values()):
            raise ConflictError("Uniqueness violation: companies_business_number_key")
        self.store.companies[company.id] = replace(company)
        return replace(company)

    async def find_by_id(self, company_id: CompanyId):
        found = self.store.companies.get(company_id)
        return replace(found) if found else None


class FakeEmployeeRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store
        self.writes = 0

    async def add(self, record: EmployeeRecord) -> EmployeeRecord:
        if record.linked_identity_id is not None and await self.find_by_linked_identity(
            record.company_id, record.linked_identity_id
        ):
            raise ConflictError("Uniqueness violation: uq_employees_linked_identity")
        self.writes += 1
        self.store.employees[record.id] = replace(record)
        return replace(record)

    async def find_by_id(self, employee_id: EmployeeId) -> Optional[EmployeeRecord]:
        found = self.store.employees.get(employee_id)
        return replace(found) if found else None

    async def find_by_linked_identity(self, company_id: CompanyId, identity_id: IdentityId) -> Optional[EmployeeRecord]:
        for record in self.store.employees.values():
            if record.company_id == company_id and record.linked_identity_id == identity_id:
                return replace(record)
        return None

    async def list_unlinked(self, company_id: CompanyId) -> List[EmployeeRecord]:
        rows = [
            replace(r) for r in self.store.employees.values()
            if r.company_id == company_id and r.linked_identity_id is None
        ]
        return sorted(rows, key=lambda r: r.name)

    async def update(self, employee_id: EmployeeId, patch: Dict[str, Any]) -> EmployeeRecord:
        if employee_id not in self.store.employees:
            raise NotFoundError("Employee", str(employee_id))
        self.writes += 1
        updated = replace(self.store.employees[employee_id], **patch)
        self.store.employees[employee_id] = updated
        return replace(updated)

    async def link_to_identity(self, employee_id: EmployeeId, identity_id: IdentityId) -> bool:
        record = self.store.employees.get(employee_id)
        if record is None or record.linked_identity_id is not None:
            return False
        self.writes += 1
        record.linked_identity_id = identity_id
        return True

    async def unlink_identity(self, company_id: CompanyId, identity_id: IdentityId) -> int:
        count = 0
        for record in self.store.employees.values():
            if record.company_id == company_id and record.linked_identity_id == identity_id:
                record.linked_identity_id = None
                count += 1
        self.writes += count
        return count


class FakeIdentityDirectory:
    def __init__(self):
        self.deleted: List[IdentityId] = []
        self.fail = False

    async def delete_identity(self, identity_id: IdentityId) -> None:
        if self.fail:
            raise IdentityDeletionError("Identity deletion failed: 503 Service Unavailable")
        self.deleted.append(identity_id)


class FakeIdentityResolver:
    def __init__(self):
        self.tokens: Dict[str, Identity] = {}

    def issue(self, identity: Identity) -> str:
        token = f"token-{identity.id}"
        self.tokens[token] = identity
        return token

    async def resolve(self, token: str) -> Identity:
        try:
            return self.tokens[token]
        except KeyError:
            raise InvalidTokenError("Token format is invalid")


class FakeCredentialVerifier:
    def __init__(self, password: str = "correct-horse"):
        self.password = password
        self.transport_error = False
        self.verify_calls = 0
        self.update_calls: List[str] = []
        self.update_result = PasswordUpdateResult.ok()

    async def verify_current_password(self, identity: Identity, password: str) -> bool:
        self.verify_calls += 1
        if self.transport_error:
            raise TransientError("Credential verification unavailable: connection refused")
        return password == self.password

    async def update_password(self, identity: Identity, new_password: str) -> PasswordUpdateResult:
        self.update_calls.append(new_password)
        if self.update_result.success:
            self.password = new_password
        return self.update_result


class Company:
    """Seeds one company's memberships and employee records into the store."""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.id = CompanyId(uuid4())

    def member(
        self,
        role: Role = Role.EMPLOYEE,
        permission: Permission = Permission.EDITOR,
        status: MembershipStatus = MembershipStatus.ACTIVE,
        email: Optional[str] = None,
    ) -> CompanyMembership:
        identity_id = IdentityId(uuid4())
        membership = CompanyMembership(
            id=MembershipId(uuid4()),
            identity_id=identity_id,
            company_id=self.id,
            role=role,
            permission=permission,
            status=status,
            email=email or f"{identity_id.value.hex[:8]}@example.com",
        )
        self.store.memberships[membership.id] = membership
        return replace(membership)

    def actor(self, membership: CompanyMembership) -> ActorContext:
        return ActorContext.from_membership(membership)

    def employee(self, name: str = "Kim Minji", linked_to: Optional[IdentityId] = None) -> EmployeeRecord:
        record = EmployeeRecord(
            id=EmployeeId(uuid4()),
            company_id=self.id,
            name=name,
            department="Operations",
            hire_date=date(2023, 3, 1),
            linked_identity_id=linked_to,
        )
        self.store.employees[record.id] = record
        return replace(record)

    @staticmethod
    def identity(membership: CompanyMembership) -> Identity:
        return identity_of(membership)


def identity_of(membership: CompanyMembership) -> Identity:
    return Identity(id=membership.identity_id, email=membership.email or "", display_name=membership.display_name)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def membership_repository(store):
    return FakeMembershipRepository(store)


@pytest.fixture
def employee_repository(store):
    return FakeEmployeeRepository(store)


@pytest.fixture
def company_repository(store):
    return FakeCompanyRepository(store)


@pytest.fixture
def identity_directory():
    return FakeIdentityDirectory()


@pytest.fixture
def identity_resolver():
    return FakeIdentityResolver()


@pytest.fixture
def credential_verifier():
    return FakeCredentialVerifier()


@pytest.fixture
def company(store):
    return Company(store)


@pytest.fixture
def other_company(store):
    return Company(store)


@pytest.fixture
def membership_service(store, membership_repository, employee_repository, identity_directory, company_repository):
    return MembershipService(
        memberships=membership_repository,
        employees=employee_repository,
        identities=identity_directory,
        transactions=store,
        companies=company_repository,
    )


@pytest.fixture
def linkage_service(store, membership_repository, employee_repository):
    return EmployeeLinkageService(
        memberships=membership_repository,
        employees=employee_repository,
        transactions=store,
    )
