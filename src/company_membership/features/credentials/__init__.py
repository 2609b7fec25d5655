"""Credentials feature: the re-verification gate in front of password changes."""

from .entities import CredentialVerifier, PasswordUpdateResult, VerificationState
from .services import CredentialVerificationGate

__all__ = [
    "CredentialVerifier",
    "PasswordUpdateResult",
    "VerificationState",
    "CredentialVerificationGate",
]
