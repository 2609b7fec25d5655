"""Capabilities derived from a (role, permission) pair."""

from enum import Enum
from typing import FrozenSet, assert_never

from .role import Permission, Role


class Capability(str, Enum):
    """Single action a member may be allowed to perform."""
    READ_OWN_PROFILE = "profile.read_own"
    EDIT_OWN_PROFILE = "profile.edit_own"
    READ_COMPANY_SETTINGS = "company.read"
    WRITE_COMPANY_SETTINGS = "company.write"
    READ_MEMBERS = "members.read"
    APPROVE_MEMBERS = "members.approve"
    CHANGE_MEMBER_ROLE = "members.change_role"
    CHANGE_MEMBER_PERMISSION = "members.change_permission"
    REMOVE_MEMBERS = "members.remove"
    LINK_EMPLOYEES = "employees.link"
    READ_OPERATIONAL_DATA = "operations.read"
    WRITE_OPERATIONAL_DATA = "operations.write"


_SELF_SERVICE: FrozenSet[Capability] = frozenset({
    Capability.READ_OWN_PROFILE,
    Capability.EDIT_OWN_PROFILE,
})

_ADMIN_READ: FrozenSet[Capability] = _SELF_SERVICE | frozenset({
    Capability.READ_COMPANY_SETTINGS,
    Capability.READ_MEMBERS,
    Capability.READ_OPERATIONAL_DATA,
})

_MEMBERSHIP_MANAGEMENT: FrozenSet[Capability] = frozenset({
    Capability.APPROVE_MEMBERS,
    Capability.CHANGE_MEMBER_ROLE,
    Capability.CHANGE_MEMBER_PERMISSION,
    Capability.LINK_EMPLOYEES,
})

ALL_CAPABILITIES: FrozenSet[Capability] = frozenset(Capability)


def capabilities_for(role: Role, permission: Permission) -> FrozenSet[Capability]:
    """Effective capability set for a member.

    Member removal (team management) belongs to the owner alone. Admins can
    re-role members but cannot expel them.
    """
    match role:
        case Role.OWNER:
            return ALL_CAPABILITIES
        case Role.ADMIN:
            granted = _ADMIN_READ | _MEMBERSHIP_MANAGEMENT
            match permission:
                case Permission.EDITOR:
                    return granted | {Capability.WRITE_OPERATIONAL_DATA}
                case Permission.VIEWER:
                    return granted
                case _:
                    assert_never(permission)
        case Role.EMPLOYEE:
            return _SELF_SERVICE
        case _:
            assert_never(role)
