from .identity import Identity
from .protocols import IdentityDirectory, IdentityResolver

__all__ = ["Identity", "IdentityDirectory", "IdentityResolver"]
