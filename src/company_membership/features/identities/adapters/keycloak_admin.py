"""Keycloak Admin API adapter.

Backs the privileged identity operations: deleting a removed member's
account and setting a new password after re-verification.
"""

import logging
from typing import Optional

from keycloak import KeycloakAdmin, KeycloakOpenIDConnection
from keycloak.exceptions import KeycloakError

from ....core.exceptions import ConfigurationError, IdentityDeletionError, TransientError
from ....core.value_objects import IdentityId

logger = logging.getLogger(__name__)


def _strip_auth_suffix(server_url: str) -> str:
    """Keycloak 18+ serves from the root; drop a legacy /auth path."""
    server_url = server_url.rstrip("/")
    return server_url[: -len("/auth")] if server_url.endswith("/auth") else server_url


class KeycloakAdminAdapter:
    """Privileged user management on one realm.

    Authenticates either as a service account (``client_secret``) or as an
    admin user of the master realm (``username`` and ``password``).
    """

    def __init__(
        self,
        server_url: str,
        realm_name: str,
        client_id: str = "admin-cli",
        verify: bool = True,
        username: Optional[str] = None,
        password: Optional[str] = None,
        client_secret: Optional[str] = None,
    ):
        self.server_url = _strip_auth_suffix(server_url)
        self.realm_name = realm_name

        if client_secret:
            credentials = {"client_secret_key": client_secret}
        elif username and password:
            credentials = {"username": username, "password": password, "user_realm_name": "master"}
        else:
            raise ConfigurationError(
                "Keycloak admin access needs a client secret or an admin username and password"
            )

        self._connection_options = {
            "server_url": self.server_url,
            "realm_name": realm_name,
            "client_id": client_id,
            "verify": verify,
            **credentials,
        }
        self._admin: Optional[KeycloakAdmin] = None

    def _client(self) -> KeycloakAdmin:
        if self._admin is None:
            self._admin = KeycloakAdmin(connection=KeycloakOpenIDConnection(**self._connection_options))
            logger.info(f"Keycloak admin client ready for realm {self.realm_name}")
        return self._admin

    async def delete_identity(self, identity_id: IdentityId) -> None:
        """Delete the user backing ``identity_id`` from the realm."""
        admin = self._client()
        try:
            await admin.a_delete_user(str(identity_id))
            logger.info(f"Deleted identity {identity_id} from realm {self.realm_name}")
        except KeycloakError as e:
            logger.error(f"Failed to delete identity {identity_id}: {e}")
            raise IdentityDeletionError(f"Identity deletion failed: {e}") from e

    async def set_password(self, identity_id: IdentityId, new_password: str) -> None:
        """Replace the identity's password (non-temporary)."""
        admin = self._client()
        try:
            await admin.a_set_user_password(str(identity_id), new_password, temporary=False)
            logger.info(f"Set password for identity {identity_id}")
        except KeycloakError as e:
            logger.error(f"Failed to set password for identity {identity_id}: {e}")
            raise TransientError(f"Cannot set password: {e}") from e
