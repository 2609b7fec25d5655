"""Protocol interfaces for the identity provider collaborators."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from ....core.value_objects import IdentityId
from .identity import Identity


@runtime_checkable
class IdentityDirectory(Protocol):
    """Privileged identity-management capability."""

    @abstractmethod
    async def delete_identity(self, identity_id: IdentityId) -> None:
        """Delete the backing identity.

        Raises:
            IdentityDeletionError: If the provider refuses or fails
        """
        ...


@runtime_checkable
class IdentityResolver(Protocol):
    """Resolves a bearer credential to the identity it was issued for."""

    @abstractmethod
    async def resolve(self, token: str) -> Identity:
        """Validate the credential and return its identity.

        Raises:
            InvalidTokenError: If the credential is invalid or expired
        """
        ...
