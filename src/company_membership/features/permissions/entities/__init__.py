"""Permission entities: role hierarchy, capabilities and actor context."""

from .role import (
    Role,
    Permission,
    MenuItem,
    SETTINGS_MENU,
    level_of,
    at_least,
    filter_menu,
    role_display_name,
)
from .capability import Capability, ALL_CAPABILITIES, capabilities_for
from .actor import ActorContext

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
    "ALL_CAPABILITIES",
    "capabilities_for",
    "ActorContext",
]
