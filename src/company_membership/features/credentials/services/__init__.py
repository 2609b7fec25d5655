from .verification_gate import CredentialVerificationGate, DEFAULT_MIN_PASSWORD_LENGTH

__all__ = ["CredentialVerificationGate", "DEFAULT_MIN_PASSWORD_LENGTH"]
