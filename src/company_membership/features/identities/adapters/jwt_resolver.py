"""Bearer token resolver for realm-issued access tokens."""

import logging
from typing import List, Optional

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    InvalidAudienceError,
    InvalidSignatureError,
    InvalidTokenError as JWTInvalidTokenError,
)

from ....core.exceptions import InvalidTokenError
from ....core.value_objects import IdentityId
from ..entities.identity import Identity

logger = logging.getLogger(__name__)


class JWTIdentityResolver:
    """Validates access tokens with the realm public key."""

    def __init__(
        self,
        public_key: str,
        algorithms: Optional[List[str]] = None,
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
    ):
        self.public_key = self._as_pem(public_key)
        self.algorithms = algorithms or ["RS256"]
        self.audience = audience
        self.issuer = issuer

    @staticmethod
    def _as_pem(public_key: str) -> str:
        """Keycloak publishes the bare base64 key; wrap it when needed."""
        if public_key.startswith("-----BEGIN"):
            return public_key
        return f"-----BEGIN PUBLIC KEY-----\n{public_key}\n-----END PUBLIC KEY-----"

    async def resolve(self, token: str) -> Identity:
        """Decode ``token`` and build the identity from its claims."""
        try:
            claims = jwt.decode(
                token,
                key=self.public_key,
                algorithms=self.algorithms,
                audience=self.audience,
                issuer=self.issuer,
                options={"verify_aud": self.audience is not None},
            )
        except ExpiredSignatureError as e:
            logger.warning("Access token expired")
            raise InvalidTokenError("Token has expired") from e
        except (InvalidSignatureError, InvalidAudienceError) as e:
            logger.warning(f"Access token rejected: {e}")
            raise InvalidTokenError("Token signature or audience is invalid") from e
        except (DecodeError, JWTInvalidTokenError) as e:
            logger.warning(f"Token decode error: {e}")
            raise InvalidTokenError("Token format is invalid") from e

        subject = claims.get("sub")
        if not subject:
            raise InvalidTokenError("Token missing 'sub' claim")

        try:
            identity_id = IdentityId(subject)
        except ValueError as e:
            raise InvalidTokenError("Token subject is not a valid identity id") from e

        return Identity(
            id=identity_id,
            email=claims.get("email", ""),
            display_name=claims.get("name") or claims.get("preferred_username"),
        )
