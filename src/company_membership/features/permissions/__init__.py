"""Permissions feature for company-membership.

- entities/: role hierarchy, capability derivation and the actor context
- services/: the permission gate enforcing them
"""

from .entities import (
    Role,
    Permission,
    MenuItem,
    SETTINGS_MENU,
    level_of,
    at_least,
    filter_menu,
    role_display_name,
    Capability,
    capabilities_for,
    ActorContext,
)
from .services import PermissionGate

__all__ = [
    "Role",
    "Permission",
    "MenuItem",
    "SETTINGS_MENU",
    "level_of",
    "at_least",
    "filter_menu",
    "role_display_name",
    "Capability",
    "capabilities_for",
    "ActorContext",
    "PermissionGate",
]
