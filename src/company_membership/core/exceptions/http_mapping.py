"""HTTP status code mapping for exceptions.

Lookup walks the exception's MRO so subclasses inherit the status code of
their closest mapped ancestor.
"""

from typing import Dict, Type

from .base import MembershipError
from .domain import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    InvalidOperationError,
    InvalidTokenError,
    NotFoundError,
    TransientError,
    ValidationError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    InvalidOperationError: 400,

    # 401 Unauthorized
    AuthenticationError: 401,
    InvalidTokenError: 401,

    # 403 Forbidden
    AuthorizationError: 403,

    # 404 Not Found
    NotFoundError: 404,

    # 409 Conflict
    ConflictError: 409,

    # 500 Internal Server Error
    ConfigurationError: 500,

    # 503 Service Unavailable
    TransientError: 503,

    # Default for MembershipError
    MembershipError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception instance.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code, 500 for anything unmapped
    """
    for exc_type in type(exception).__mro__:
        status_code = HTTP_STATUS_MAP.get(exc_type)
        if status_code is not None:
            return status_code
    return 500
