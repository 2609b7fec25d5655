"""Domain-specific exceptions for company-membership.

Each class corresponds to one failure kind a membership, linkage or
credential operation can report to its caller.
"""

from .base import MembershipError


# Configuration Errors
class ConfigurationError(MembershipError):
    """Raised when there's a configuration issue."""
    pass


# Input Errors
class ValidationError(MembershipError):
    """Raised when input is malformed or missing. Checked before any write."""
    pass


class RequiredFieldError(ValidationError):
    """Raised when a mandatory field is blank."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(
            f"{field_name} is required",
            details={"field": field_name},
        )


# Authentication Errors
class AuthenticationError(MembershipError):
    """Raised when the caller's credential is missing or invalid."""
    pass


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token cannot be validated."""
    pass


# Authorization Errors
class AuthorizationError(MembershipError):
    """Raised when the caller lacks the role, permission or tenant access."""
    pass


class CrossTenantError(AuthorizationError):
    """Raised when the target belongs to a different company than the caller."""
    pass


class VerificationRequiredError(AuthorizationError):
    """Raised when a credential change is attempted without re-verification."""
    pass


# Business Logic Errors
class InvalidOperationError(MembershipError):
    """Raised when a transition is structurally disallowed."""
    pass


class OwnerImmutableError(InvalidOperationError):
    """Raised when an operation targets the company owner."""
    pass


class SelfTargetError(InvalidOperationError):
    """Raised when a caller targets their own membership."""
    pass


class InvalidStateError(InvalidOperationError):
    """Raised when the membership status does not allow the transition."""
    pass


class ConflictError(MembershipError):
    """Raised when an operation would violate a uniqueness rule."""
    pass


class NotFoundError(MembershipError):
    """Raised when a referenced membership or employee record is absent."""

    def __init__(self, entity_type: str, identifier: str):
        self.entity_type = entity_type
        self.identifier = identifier
        super().__init__(
            f"{entity_type} with identifier '{identifier}' not found",
            details={"entity_type": entity_type, "identifier": identifier},
        )


# Infrastructure Errors
class TransientError(MembershipError):
    """Raised when the store or a remote collaborator fails.

    Surfaced to the caller as retryable; nothing in the package retries it.
    """
    pass


class IdentityDeletionError(TransientError):
    """Raised when the identity provider refuses or fails to delete a user."""
    pass
