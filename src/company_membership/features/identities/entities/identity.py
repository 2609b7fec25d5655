"""Identity entity.

Identities are created and destroyed by the identity provider; this package
only reads them and may request their deletion when a member is removed.
"""

from dataclasses import dataclass
from typing import Optional

from ....core.value_objects import IdentityId


@dataclass(frozen=True)
class Identity:
    """An authenticated principal."""
    id: IdentityId
    email: str
    display_name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.display_name or self.email
