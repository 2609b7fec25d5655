"""FastAPI dependencies for company-membership.

Services are built once in the application lifespan and stored on
``app.state.container``; request handlers receive them through these
dependencies rather than module globals.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .core.exceptions import AuthenticationError, ConfigurationError
from .features.credentials import CredentialVerificationGate, CredentialVerifier
from .features.employees.services import EmployeeLinkageService
from .features.identities.entities import Identity, IdentityResolver
from .features.memberships.services import MembershipService
from .features.permissions.entities.actor import ActorContext

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class ServiceContainer:
    """Explicitly constructed handles for one running application."""

    membership_service: MembershipService
    linkage_service: EmployeeLinkageService
    identity_resolver: IdentityResolver
    credential_verifier: Optional[CredentialVerifier] = None
    min_password_length: int = 6
    resources: list = field(default_factory=list)

    def credential_gate(self, identity: Identity) -> CredentialVerificationGate:
        """Open a re-verification gate for one profile-edit session."""
        if self.credential_verifier is None:
            raise ConfigurationError("No credential verifier configured")
        return CredentialVerificationGate(
            identity,
            self.credential_verifier,
            min_password_length=self.min_password_length,
        )

    async def close(self) -> None:
        """Close pooled resources in reverse order of creation."""
        for resource in reversed(self.resources):
            await resource.close()


def get_container(request: Request) -> ServiceContainer:
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise ConfigurationError("Service container not initialized")
    return container


def get_membership_service(container: ServiceContainer = Depends(get_container)) -> MembershipService:
    return container.membership_service


def get_linkage_service(container: ServiceContainer = Depends(get_container)) -> EmployeeLinkageService:
    return container.linkage_service


async def resolve_identity(
    credentials: Optional[HTTPAuthorizationCredentials],
    container: ServiceContainer,
) -> Identity:
    """Resolve the bearer credential, raising AuthenticationError when absent or invalid."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authorization header required")
    return await container.identity_resolver.resolve(credentials.credentials)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    container: ServiceContainer = Depends(get_container),
) -> Identity:
    return await resolve_identity(credentials, container)


async def get_actor(
    identity: Identity = Depends(get_current_identity),
    container: ServiceContainer = Depends(get_container),
) -> ActorContext:
    """Actor context of the caller, built from their active membership."""
    return await container.membership_service.resolve_actor(identity.id)
