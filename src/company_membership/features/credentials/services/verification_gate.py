"""Re-verification gate for credential changes.

One gate lives for one profile-edit session. A credential change is only
sent to the store after the current credential was verified, and only
while that verified input is still untouched.
"""

import logging
from typing import Optional

from ....core.exceptions import TransientError, ValidationError, VerificationRequiredError
from ...identities.entities import Identity
from ..entities.protocols import CredentialVerifier
from ..entities.verification import PasswordUpdateResult, VerificationState

logger = logging.getLogger(__name__)

DEFAULT_MIN_PASSWORD_LENGTH = 6


class CredentialVerificationGate:
    """Session-local gate in front of ``CredentialVerifier.update_password``."""

    def __init__(
        self,
        identity: Identity,
        verifier: CredentialVerifier,
        min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
    ):
        self.identity = identity
        self.verifier = verifier
        self.min_password_length = min_password_length
        self._state = VerificationState.UNVERIFIED
        self._current_credential = ""

    @property
    def state(self) -> VerificationState:
        return self._state

    @property
    def is_verified(self) -> bool:
        return self._state == VerificationState.VERIFIED

    @property
    def current_credential(self) -> str:
        return self._current_credential

    async def verify(self, current_credential: str) -> bool:
        """Check the current credential; a transport failure counts as a mismatch."""
        if not current_credential:
            raise ValidationError(
                "Current password is required",
                details={"field": "current_password"},
            )

        self._current_credential = current_credential
        self._state = VerificationState.VERIFYING
        try:
            verified = await self.verifier.verify_current_password(self.identity, current_credential)
        except TransientError as e:
            logger.warning(f"Credential verification for {self.identity.id} failed: {e}")
            verified = False

        # The input was edited while the check was in flight
        if self._state != VerificationState.VERIFYING or self._current_credential != current_credential:
            verified = False

        self._state = VerificationState.VERIFIED if verified else VerificationState.UNVERIFIED
        return verified

    def update_current_credential(self, value: str) -> None:
        """Record an edit of the current-credential input, dropping any verification."""
        if value == self._current_credential:
            return
        self._current_credential = value
        if self._state != VerificationState.UNVERIFIED:
            logger.debug(f"Current credential edited; verification reset for {self.identity.id}")
        self._state = VerificationState.UNVERIFIED

    async def change_credential(
        self, new_credential: str, confirmation: Optional[str] = None
    ) -> PasswordUpdateResult:
        """Send the new credential to the store.

        Raises:
            VerificationRequiredError: If the gate is not verified; nothing is sent
            ValidationError: If the credential is too short or unconfirmed
        """
        if self._state != VerificationState.VERIFIED:
            raise VerificationRequiredError("Verify your current password before changing it")

        if len(new_credential or "") < self.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.min_password_length} characters",
                details={"field": "new_password", "min_length": self.min_password_length},
            )
        if confirmation is not None and new_credential != confirmation:
            raise ValidationError(
                "Password confirmation does not match",
                details={"field": "confirm_password"},
            )

        # Every attempt consumes the verification
        self._state = VerificationState.UNVERIFIED
        result = await self.verifier.update_password(self.identity, new_credential)
        if result.success:
            self._current_credential = ""
            logger.info(f"Password changed for identity {self.identity.id}")
        else:
            logger.warning(f"Password change for {self.identity.id} failed: {result.error}")
        return result

    def close(self) -> None:
        """End of the edit session."""
        self._state = VerificationState.UNVERIFIED
        self._current_credential = ""
