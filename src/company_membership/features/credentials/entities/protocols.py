"""Protocol interface for the credential store."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from ...identities.entities import Identity
from .verification import PasswordUpdateResult


@runtime_checkable
class CredentialVerifier(Protocol):
    """Verifies and replaces an identity's password."""

    @abstractmethod
    async def verify_current_password(self, identity: Identity, password: str) -> bool:
        """Check ``password`` against the identity's current credential.

        Raises:
            TransientError: If the credential store cannot be reached
        """
        ...

    @abstractmethod
    async def update_password(self, identity: Identity, new_password: str) -> PasswordUpdateResult:
        """Replace the identity's credential."""
        ...
