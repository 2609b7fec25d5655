"""Exceptions module for company-membership.

Provides the complete exception hierarchy, grouped by the failure kinds an
operation reports: validation, authentication, authorization, invalid
operation, conflict, not found and transient store failures.
"""

from .base import MembershipError, create_error_response
from .domain import (
    ConfigurationError,
    ValidationError,
    RequiredFieldError,
    AuthenticationError,
    InvalidTokenError,
    AuthorizationError,
    CrossTenantError,
    VerificationRequiredError,
    InvalidOperationError,
    OwnerImmutableError,
    SelfTargetError,
    InvalidStateError,
    ConflictError,
    NotFoundError,
    TransientError,
    IdentityDeletionError,
)
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "MembershipError",
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",
    "ConfigurationError",
    "ValidationError",
    "RequiredFieldError",
    "AuthenticationError",
    "InvalidTokenError",
    "AuthorizationError",
    "CrossTenantError",
    "VerificationRequiredError",
    "InvalidOperationError",
    "OwnerImmutableError",
    "SelfTargetError",
    "InvalidStateError",
    "ConflictError",
    "NotFoundError",
    "TransientError",
    "IdentityDeletionError",
]
