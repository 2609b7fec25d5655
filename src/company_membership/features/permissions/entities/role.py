"""Role hierarchy for company memberships.

Roles form a strict total order ``owner > admin > employee``. Permission is a
separate editor/viewer modifier applied within a role. Everything in this
module is pure and deterministic.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Union, assert_never


class Role(str, Enum):
    """Coarse authority tier of a company member."""
    OWNER = "owner"
    ADMIN = "admin"
    EMPLOYEE = "employee"


class Permission(str, Enum):
    """Read/write modifier applied within a role."""
    EDITOR = "editor"
    VIEWER = "viewer"


# Level assigned to any value that is not a recognised role
LOWEST_LEVEL = 1


def _as_role(role: Union[Role, str, None]) -> Union[Role, None]:
    if isinstance(role, Role):
        return role
    try:
        return Role(role)
    except (ValueError, TypeError):
        return None


def level_of(role: Union[Role, str, None]) -> int:
    """Numeric level of a role; unknown values fall to the lowest level."""
    resolved = _as_role(role)
    if resolved is None:
        return LOWEST_LEVEL

    match resolved:
        case Role.OWNER:
            return 3
        case Role.ADMIN:
            return 2
        case Role.EMPLOYEE:
            return 1
        case _:
            assert_never(resolved)


def at_least(role: Union[Role, str, None], min_role: Union[Role, str, None]) -> bool:
    """Check whether ``role`` ranks at or above ``min_role``."""
    return level_of(role) >= level_of(min_role)


@dataclass(frozen=True)
class MenuItem:
    """Navigation entry visible from ``min_role`` upwards."""
    id: str
    min_role: Union[Role, str]
    label: str = ""


def filter_menu(role: Union[Role, str, None], items: Iterable[MenuItem]) -> List[MenuItem]:
    """Return the items ``role`` may see, preserving their original order."""
    return [item for item in items if at_least(role, item.min_role)]


SETTINGS_MENU: Sequence[MenuItem] = (
    MenuItem(id="profile", min_role=Role.EMPLOYEE, label="Edit profile"),
    MenuItem(id="company", min_role=Role.EMPLOYEE, label="Company"),
    MenuItem(id="multiplier", min_role=Role.ADMIN, label="Multipliers"),
    MenuItem(id="invite", min_role=Role.ADMIN, label="Invite members"),
    MenuItem(id="team", min_role=Role.OWNER, label="Team management"),
)


def role_display_name(role: Union[Role, str, None], permission: Union[Permission, str, None] = None) -> str:
    """Human readable label for a role/permission pair."""
    resolved = _as_role(role) or Role.EMPLOYEE

    match resolved:
        case Role.OWNER:
            return "Owner"
        case Role.ADMIN:
            name = "Admin"
        case Role.EMPLOYEE:
            name = "Member"
        case _:
            assert_never(resolved)

    if permission == Permission.VIEWER:
        return f"{name} (viewer)"
    return name
