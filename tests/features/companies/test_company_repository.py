"""Tests for the company entity and its asyncpg-backed repository."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from company_membership.core.exceptions import ConflictError, RequiredFieldError, ValidationError
from company_membership.core.value_objects import CompanyId
from company_membership.features.companies.entities import Company, CompanyDraft
from company_membership.features.companies.repositories import CompanyDatabaseRepository


@pytest.fixture
def mock_database_repository():
    """Mock database repository for testing."""
    mock_db = AsyncMock()
    mock_db.fetch_one = AsyncMock()
    return mock_db


class TestCompanyDraft:

    def test_strips_separators_from_business_number(self):
        draft = CompanyDraft(name=" Blue Cafe ", business_number="123-45-67890").validated()

        assert draft == CompanyDraft(name="Blue Cafe", business_number="1234567890")

    def test_blank_name(self):
        with pytest.raises(RequiredFieldError) as exc:
            CompanyDraft(name="  ", business_number="1234567890").validated()
        assert exc.value.field_name == "company_name"

    @pytest.mark.parametrize("number", ["123456789", "12345678901", "abc-de-fghij"])
    def test_business_number_needs_ten_digits(self, number):
        with pytest.raises(ValidationError) as exc:
            CompanyDraft(name="Blue Cafe", business_number=number).validated()
        assert exc.value.details == {"field": "business_number"}


class TestCompanyDatabaseRepository:

    @pytest.fixture
    def repository(self, mock_database_repository):
        return CompanyDatabaseRepository(mock_database_repository, schema="tenant")

    @pytest.mark.asyncio
    async def test_add(self, repository, mock_database_repository):
        company = Company(id=CompanyId(uuid4()), name="Blue Cafe", business_number="1234567890")
        mock_database_repository.fetch_one.return_value = {
            "id": company.id.value,
            "name": company.name,
            "business_number": company.business_number,
            "created_at": company.created_at,
        }

        created = await repository.add(company)

        assert created.id == company.id
        query, *args = mock_database_repository.fetch_one.call_args.args
        assert "tenant.companies" in query
        assert args[:3] == [company.id.value, "Blue Cafe", "1234567890"]

    @pytest.mark.asyncio
    async def test_duplicate_business_number_propagates_conflict(self, repository, mock_database_repository):
        mock_database_repository.fetch_one.side_effect = ConflictError("Uniqueness violation: companies_business_number_key")

        with pytest.raises(ConflictError):
            await repository.add(Company(id=CompanyId(uuid4()), name="Blue Cafe", business_number="1234567890"))

    @pytest.mark.asyncio
    async def test_find_by_id(self, repository, mock_database_repository):
        company_id = uuid4()
        mock_database_repository.fetch_one.return_value = {
            "id": company_id,
            "name": "Blue Cafe",
            "business_number": "1234567890",
            "created_at": datetime.now(timezone.utc),
        }

        found = await repository.find_by_id(CompanyId(company_id))

        assert found.id == CompanyId(company_id)
        assert found.name == "Blue Cafe"

    @pytest.mark.asyncio
    async def test_find_missing(self, repository, mock_database_repository):
        mock_database_repository.fetch_one.return_value = None
        assert await repository.find_by_id(CompanyId(uuid4())) is None
