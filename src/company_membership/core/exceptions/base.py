"""Root of the company-membership exception hierarchy."""

from typing import Any, Dict, Optional


class MembershipError(Exception):
    """Base exception for every failure an operation reports.

    ``error_code`` defaults to the class name; ``details`` carries the
    offending field, id or role for API consumers.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}


def create_error_response(exception: MembershipError) -> Dict[str, Any]:
    """Error envelope used by every route except the withdrawal endpoint."""
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": type(exception).__name__,
        }
    }
