"""Identities feature: the identity provider as seen by this package."""

from .entities import Identity, IdentityDirectory, IdentityResolver

__all__ = ["Identity", "IdentityDirectory", "IdentityResolver"]
