"""Credential verification state and results."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class VerificationState(str, Enum):
    """State of the re-verification gate for one edit session.

    UNVERIFIED --verify--> VERIFYING --ok--> VERIFIED
                                   \\--fail--> UNVERIFIED

    Editing the current credential, a change attempt or closing the session
    returns the gate to UNVERIFIED.
    """
    UNVERIFIED = "unverified"
    VERIFYING = "verifying"
    VERIFIED = "verified"


@dataclass(frozen=True)
class PasswordUpdateResult:
    """Outcome of a password update at the credential store."""
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> 'PasswordUpdateResult':
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> 'PasswordUpdateResult':
        return cls(success=False, error=error)
