"""Tests for the role hierarchy."""

import pytest

from company_membership.features.permissions import (
    SETTINGS_MENU,
    MenuItem,
    Permission,
    Role,
    at_least,
    filter_menu,
    level_of,
    role_display_name,
)


class TestLevelOf:

    def test_total_order(self):
        assert level_of(Role.OWNER) > level_of(Role.ADMIN) > level_of(Role.EMPLOYEE)

    def test_accepts_raw_strings(self):
        assert level_of("owner") == 3
        assert level_of("admin") == 2
        assert level_of("employee") == 1

    @pytest.mark.parametrize("unknown", ["superuser", "OWNER", "", None, 42])
    def test_unknown_values_fall_to_employee_level(self, unknown):
        assert level_of(unknown) == level_of(Role.EMPLOYEE)

    def test_at_least(self):
        assert at_least(Role.OWNER, Role.ADMIN)
        assert at_least(Role.ADMIN, Role.ADMIN)
        assert not at_least(Role.EMPLOYEE, Role.ADMIN)
        assert not at_least("root", Role.ADMIN)


class TestFilterMenu:

    def test_keeps_order_and_only_reachable_items(self):
        items = [
            MenuItem(id="a", min_role=Role.OWNER),
            MenuItem(id="b", min_role=Role.EMPLOYEE),
            MenuItem(id="c", min_role=Role.ADMIN),
            MenuItem(id="d", min_role=Role.EMPLOYEE),
        ]

        assert [i.id for i in filter_menu(Role.ADMIN, items)] == ["b", "c", "d"]
        assert [i.id for i in filter_menu(Role.EMPLOYEE, items)] == ["b", "d"]
        assert filter_menu(Role.OWNER, items) == items

    def test_unknown_role_sees_employee_items(self):
        visible = filter_menu("intern", SETTINGS_MENU)
        assert [i.id for i in visible] == ["profile", "company"]

    def test_settings_menu_team_is_owner_only(self):
        assert "team" not in [i.id for i in filter_menu(Role.ADMIN, SETTINGS_MENU)]
        assert "team" in [i.id for i in filter_menu(Role.OWNER, SETTINGS_MENU)]

    def test_empty_items(self):
        assert filter_menu(Role.OWNER, []) == []


class TestRoleDisplayName:

    def test_labels(self):
        assert role_display_name(Role.OWNER, Permission.VIEWER) == "Owner"
        assert role_display_name(Role.ADMIN, Permission.EDITOR) == "Admin"
        assert role_display_name(Role.ADMIN, Permission.VIEWER) == "Admin (viewer)"
        assert role_display_name(Role.EMPLOYEE) == "Member"
        assert role_display_name("bogus", Permission.VIEWER) == "Member (viewer)"
