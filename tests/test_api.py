"""
Gatekeeper API Tests

Decision endpoints exercised through FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from gatekeeper.api.routes import get_route_table
from gatekeeper.main import app
from gatekeeper.routing.route_table import RouteTable


PERMISSIONS = ["users:read", "users:write", "reports:read", "dashboard:read", "dashboard:write"]


@pytest.fixture
def table():
    return RouteTable({
        "/": {"requiredPermissions": ["dashboard:read"]},
        "/admin": {"requiredPermissions": ["administration:read", "settings:write"], "requireAll": True},
    })


@pytest.fixture
def client(table):
    app.dependency_overrides[get_route_table] = lambda: table
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    """Test service metadata endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["health"] == "/api/v1/health"

    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["route_count"] == 2


class TestPermissionEndpoints:
    """Test permission list endpoints."""

    def test_catalog(self, client):
        body = client.get("/api/v1/permissions/catalog").json()
        assert "activity_logs" in body["features"]
        assert body["actions"] == ["read", "write"]
        labels = {p["permission"]: p["label"] for p in body["permissions"]}
        assert labels["activity_logs:read"] == "Activity Logs - Read"

    def test_validate(self, client):
        response = client.post(
            "/api/v1/permissions/validate",
            json={"permissions": ["users:read", "bad", "x:delete"]},
        )
        assert response.json() == {"valid": False, "invalid": ["bad", "x:delete"]}

    def test_check_feature_action(self, client):
        response = client.post(
            "/api/v1/permissions/check",
            json={"permissions": PERMISSIONS, "requirement": {"feature": "users", "action": "write"}},
        )
        assert response.json() == {"allowed": True}

    def test_check_list_all(self, client):
        response = client.post(
            "/api/v1/permissions/check",
            json={
                "permissions": PERMISSIONS,
                "requirement": {"permissions": ["users:read", "settings:read"], "require_all": True},
            },
        )
        assert response.json() == {"allowed": False}

    def test_check_requires_requirement(self, client):
        response = client.post("/api/v1/permissions/check", json={"permissions": PERMISSIONS})
        assert response.status_code == 422

    def test_summary(self, client):
        body = client.post("/api/v1/permissions/summary", json={"permissions": PERMISSIONS}).json()
        assert sorted(body["features"]) == ["dashboard", "reports", "users"]
        assert body["grouped"]["users"] == ["read", "write"]
        assert body["admin"] is True
        assert body["read_only_features"] == ["reports"]

    def test_summary_empty(self, client):
        body = client.post("/api/v1/permissions/summary", json={}).json()
        assert body == {"features": [], "grouped": {}, "admin": False, "read_only_features": []}


class TestAccessEndpoints:
    """Test route and navigation decisions."""

    def test_route_allowed(self, client):
        body = client.post(
            "/api/v1/access/route",
            json={"path": "/", "is_authenticated": True, "permissions": PERMISSIONS},
        ).json()
        assert body["decision"] == "allow"
        assert body["redirect_to"] is None

    def test_route_denied(self, client):
        body = client.post(
            "/api/v1/access/route",
            json={"path": "/admin", "is_authenticated": True, "permissions": PERMISSIONS},
        ).json()
        assert body == {"decision": "redirect", "redirect_to": "/unauthorized", "from_path": None}

    def test_route_unauthenticated(self, client):
        body = client.post(
            "/api/v1/access/route",
            json={"path": "/admin", "is_authenticated": False, "permissions": PERMISSIONS},
        ).json()
        assert body == {"decision": "redirect_login", "redirect_to": "/auth", "from_path": "/admin"}

    def test_route_requires_authentication_flag(self, client):
        """Omitting is_authenticated is rejected rather than treated as logged in."""
        response = client.post(
            "/api/v1/access/route",
            json={"path": "/", "permissions": ["dashboard:read"]},
        )
        assert response.status_code == 422

    def test_unconfigured_route_open(self, client):
        body = client.post("/api/v1/access/route", json={"path": "/profile", "is_authenticated": True}).json()
        assert body["decision"] == "allow"

    def test_navigation(self, client):
        body = client.post("/api/v1/navigation", json={"permissions": ["reports:read"]}).json()
        assert [(i["title"], i["url"], i["icon"]) for i in body["items"]] == [
            ("Reports", "/reports", "bar-chart-3"),
        ]

    def test_routes(self, client):
        body = client.get("/api/v1/routes").json()
        admin = next(r for r in body if r["path"] == "/admin")
        assert admin["requireAll"] is True
        assert admin["requiredPermissions"] == ["administration:read", "settings:write"]
