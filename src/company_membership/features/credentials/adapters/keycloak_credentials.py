"""Keycloak-backed credential verifier."""

import logging
from typing import Optional

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakAuthenticationError, KeycloakError

from ....core.exceptions import TransientError
from ...identities.adapters.keycloak_admin import KeycloakAdminAdapter
from ...identities.entities import Identity
from ..entities.verification import PasswordUpdateResult

logger = logging.getLogger(__name__)


class KeycloakCredentialVerifier:
    """Verifies passwords with a password grant and updates them through the admin API."""

    def __init__(
        self,
        server_url: str,
        realm_name: str,
        client_id: str,
        admin: KeycloakAdminAdapter,
        client_secret: Optional[str] = None,
        verify: bool = True,
    ):
        self.server_url = server_url.rstrip('/')
        self.realm_name = realm_name
        self.client_id = client_id
        self.client_secret = client_secret
        self.verify = verify
        self.admin = admin
        self._openid_client: Optional[KeycloakOpenID] = None

    def _ensure_connected(self) -> KeycloakOpenID:
        if self._openid_client is None:
            self._openid_client = KeycloakOpenID(
                server_url=self.server_url,
                client_id=self.client_id,
                realm_name=self.realm_name,
                client_secret_key=self.client_secret,
                verify=self.verify,
            )
            logger.info(f"Initialized OpenID client for realm: {self.realm_name}")
        return self._openid_client

    async def verify_current_password(self, identity: Identity, password: str) -> bool:
        openid = self._ensure_connected()
        try:
            token = await openid.a_token(identity.email, password)
        except KeycloakAuthenticationError:
            logger.info(f"Password verification failed for identity {identity.id}")
            return False
        except KeycloakError as e:
            logger.error(f"Keycloak error during password verification: {e}")
            raise TransientError(f"Credential verification unavailable: {e}") from e

        # The grant only proved the password; drop the session it opened
        refresh_token = token.get("refresh_token")
        if refresh_token:
            try:
                await openid.a_logout(refresh_token)
            except KeycloakError as e:
                logger.warning(f"Could not close verification session: {e}")
        return True

    async def update_password(self, identity: Identity, new_password: str) -> PasswordUpdateResult:
        try:
            await self.admin.set_password(identity.id, new_password)
        except TransientError as e:
            return PasswordUpdateResult.failed(e.message)
        return PasswordUpdateResult.ok()
