"""
Gatekeeper Guard Tests

Route guard signals and conditional-render decisions.
"""

import pytest

from gatekeeper.guards.permission_guard import PermissionGuard, PermissionRequirement
from gatekeeper.guards.route_guard import RouteDecision, RouteGuard, RouteGuardResult
from gatekeeper.routing.route_table import RouteTable
from gatekeeper.schemas.permission import Action


PERMISSIONS = ["users:read", "reports:read", "dashboard:read"]


class TestRouteGuard:
    """Test route guard decisions."""

    @pytest.fixture
    def guard(self):
        return RouteGuard(RouteTable())

    def test_unauthenticated_goes_to_login_first(self, guard):
        """Login redirect wins even for paths the permissions would allow."""
        result = guard.check("/users", is_authenticated=False, permissions=PERMISSIONS)
        assert result.decision == RouteDecision.REDIRECT_LOGIN
        assert result.redirect_to == "/auth"
        assert result.from_path == "/users"
        assert result.is_allowed is False

    def test_unauthenticated_on_open_route(self, guard):
        result = guard.check("/public", is_authenticated=False, permissions=[])
        assert result.decision == RouteDecision.REDIRECT_LOGIN

    def test_denied_goes_to_fallback(self, guard):
        result = guard.check("/settings", is_authenticated=True, permissions=PERMISSIONS)
        assert result == RouteGuardResult.redirect("/unauthorized")

    def test_allowed(self, guard):
        result = guard.check("/reports", is_authenticated=True, permissions=PERMISSIONS)
        assert result.is_allowed is True
        assert result.redirect_to is None

    def test_unconfigured_route_allowed(self, guard):
        result = guard.check("/profile", is_authenticated=True, permissions=None)
        assert result == RouteGuardResult.allow()

    def test_custom_paths(self):
        guard = RouteGuard(RouteTable(), fallback_path="/403", login_path="/login")
        assert guard.check("/admin", True, []).redirect_to == "/403"
        assert guard.check("/admin", False, []).redirect_to == "/login"

    def test_plain_mapping_table(self):
        guard = RouteGuard({})
        assert guard.check("/anything", True, []).is_allowed


class TestPermissionGuard:
    """Test conditional rendering."""

    @pytest.fixture
    def guard(self):
        return PermissionGuard()

    def test_feature_action(self, guard):
        assert guard.allows(PermissionRequirement(feature="users", action=Action.READ), PERMISSIONS)
        assert not guard.allows(PermissionRequirement(feature="users", action="write"), PERMISSIONS)

    def test_exact_permission(self, guard):
        assert guard.allows(PermissionRequirement(permission="reports:read"), PERMISSIONS)
        assert not guard.allows(PermissionRequirement(permission="reports:write"), PERMISSIONS)

    def test_permission_list_any(self, guard):
        requirement = PermissionRequirement(permissions=["settings:read", "users:read"])
        assert guard.allows(requirement, PERMISSIONS)

    def test_permission_list_all(self, guard):
        requirement = PermissionRequirement(permissions=["settings:read", "users:read"], require_all=True)
        assert not guard.allows(requirement, PERMISSIONS)

    def test_precedence_feature_action_first(self, guard):
        """feature/action wins over the exact permission and the list."""
        requirement = PermissionRequirement(
            feature="settings",
            action="read",
            permission="users:read",
            permissions=["users:read"],
        )
        assert not guard.allows(requirement, PERMISSIONS)

    def test_precedence_permission_before_list(self, guard):
        requirement = PermissionRequirement(permission="settings:read", permissions=["users:read"])
        assert not guard.allows(requirement, PERMISSIONS)

    def test_feature_without_action_falls_through(self, guard):
        requirement = PermissionRequirement(feature="settings", permission="users:read")
        assert guard.allows(requirement, PERMISSIONS)

    def test_empty_requirement_denies(self, guard):
        assert not guard.allows(PermissionRequirement(), PERMISSIONS)
        assert not guard.allows(PermissionRequirement(permissions=[], require_all=True), PERMISSIONS)

    def test_render(self, guard):
        allowed = PermissionRequirement(permission="users:read")
        denied = PermissionRequirement(permission="users:write")
        assert guard.render(allowed, PERMISSIONS, "content", "fallback") == "content"
        assert guard.render(denied, PERMISSIONS, "content", "fallback") == "fallback"
        assert guard.render(denied, PERMISSIONS, "content") is None

    def test_no_permissions(self, guard):
        assert not guard.allows(PermissionRequirement(permission="users:read"), None)
