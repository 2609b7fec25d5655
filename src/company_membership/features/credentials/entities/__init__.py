from .verification import PasswordUpdateResult, VerificationState
from .protocols import CredentialVerifier

__all__ = ["PasswordUpdateResult", "VerificationState", "CredentialVerifier"]
