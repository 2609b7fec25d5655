"""Value objects for identifiers in company-membership.

Every identifier is an immutable wrapper around a UUID so an employee id can
never be passed where a membership id is expected.
"""

from dataclasses import dataclass
from uuid import UUID

from ...utils import generate_uuid_v7


def _coerce_uuid(owner: str, value) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (ValueError, TypeError):
        raise ValueError(f"{owner} must be a valid UUID, got: {value}")


@dataclass(frozen=True)
class IdentityId:
    """Identifier of an authenticated principal (the identity provider's user id)."""
    value: UUID

    def __post_init__(self):
        object.__setattr__(self, 'value', _coerce_uuid("IdentityId", self.value))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"IdentityId(value={self.value!r})"


@dataclass(frozen=True)
class CompanyId:
    """Company (tenant) identifier."""
    value: UUID

    def __post_init__(self):
        object.__setattr__(self, 'value', _coerce_uuid("CompanyId", self.value))

    @classmethod
    def generate(cls) -> 'CompanyId':
        """Generate a new CompanyId using UUIDv7 for time-ordering."""
        return cls(generate_uuid_v7())

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"CompanyId(value={self.value!r})"


@dataclass(frozen=True)
class MembershipId:
    """Company membership identifier."""
    value: UUID

    def __post_init__(self):
        object.__setattr__(self, 'value', _coerce_uuid("MembershipId", self.value))

    @classmethod
    def generate(cls) -> 'MembershipId':
        """Generate a new MembershipId using UUIDv7 for time-ordering."""
        return cls(generate_uuid_v7())

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"MembershipId(value={self.value!r})"


@dataclass(frozen=True)
class EmployeeId:
    """Employee record identifier."""
    value: UUID

    def __post_init__(self):
        object.__setattr__(self, 'value', _coerce_uuid("EmployeeId", self.value))

    @classmethod
    def generate(cls) -> 'EmployeeId':
        """Generate a new EmployeeId using UUIDv7 for time-ordering."""
        return cls(generate_uuid_v7())

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"EmployeeId(value={self.value!r})"
