"""
Gatekeeper API Routes

FastAPI endpoints that expose access decisions to UI collaborators
that cannot call the Python core directly. The endpoints add no
policy of their own; each one delegates to the evaluator or a guard.
"""

from __future__ import annotations
from typing import Dict, Optional, List
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from datetime import datetime, timezone

from .. import __version__
from ..config import get_config
from ..guards.permission_guard import PermissionRequirement, permission_guard
from ..guards.route_guard import RouteGuard
from ..permissions.catalog import AVAILABLE_PERMISSIONS
from ..permissions.codec import permission_label
from ..permissions.evaluator import PolicyEvaluator, validate_permissions
from ..routing.navigation import filter_navigation, with_icons
from ..routing.route_table import RouteTable
from ..schemas.permission import Action, Feature
from ..schemas.routes import NavigationItem, RouteRule


# =============================================================================
# API Models
# =============================================================================

class PermissionListRequest(BaseModel):
    """A principal's permission list."""
    permissions: List[str] = Field(default_factory=list, description="`feature:action` strings")

    class Config:
        json_schema_extra = {
            "example": {"permissions": ["users:read", "users:write", "reports:read"]}
        }


class ValidatePermissionsResponse(BaseModel):
    valid: bool
    invalid: List[str]


class CheckPermissionRequest(PermissionListRequest):
    """Permission list plus a declarative requirement."""
    requirement: PermissionRequirement


class CheckPermissionResponse(BaseModel):
    allowed: bool


class PermissionSummaryResponse(BaseModel):
    """Derived views over a permission list."""
    features: List[str]
    grouped: Dict[str, List[str]]
    admin: bool
    read_only_features: List[str]


class RouteAccessRequest(PermissionListRequest):
    """Route guard input."""
    path: str = Field(..., description="Path the principal is trying to open")
    is_authenticated: bool = Field(..., description="Anonymous principals are sent to login")


class RouteAccessResponse(BaseModel):
    decision: str
    redirect_to: Optional[str] = None
    from_path: Optional[str] = None


class NavigationResponse(BaseModel):
    items: List[NavigationItem]


class PermissionInfo(BaseModel):
    """A catalog entry."""
    key: str
    permission: str
    label: str


class CatalogResponse(BaseModel):
    features: List[str]
    actions: List[str]
    permissions: List[PermissionInfo]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    timestamp: str
    route_count: int


# =============================================================================
# Router
# =============================================================================

router = APIRouter(prefix="/api/v1", tags=["Gatekeeper Access Decisions"])

# Route table singleton, built from configuration on first use
_route_table: Optional[RouteTable] = None


def get_route_table() -> RouteTable:
    """Get or create the process route table."""
    global _route_table
    if _route_table is None:
        _route_table = RouteTable.from_config(get_config())
    return _route_table


def get_route_guard(table: RouteTable = Depends(get_route_table)) -> RouteGuard:
    """Route guard bound to the process route table and configured redirects."""
    routes = get_config().routes
    return RouteGuard(table, fallback_path=routes.fallback_path, login_path=routes.login_path)


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
)
async def health_check(table: RouteTable = Depends(get_route_table)):
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        route_count=len(table),
    )


@router.get(
    "/permissions/catalog",
    response_model=CatalogResponse,
    summary="Permission Catalog",
    description="Known features, actions and permissions with display labels.",
)
async def get_catalog():
    return CatalogResponse(
        features=[f.value for f in Feature],
        actions=[a.value for a in Action],
        permissions=[
            PermissionInfo(key=key, permission=value, label=permission_label(value))
            for key, value in AVAILABLE_PERMISSIONS.items()
        ],
    )


@router.post(
    "/permissions/validate",
    response_model=ValidatePermissionsResponse,
    summary="Validate Permissions",
)
async def validate(request: PermissionListRequest):
    """Report malformed entries of a permission list."""
    result = validate_permissions(request.permissions)
    return ValidatePermissionsResponse(valid=result.valid, invalid=result.invalid)


@router.post(
    "/permissions/check",
    response_model=CheckPermissionResponse,
    summary="Check Requirement",
)
async def check(request: CheckPermissionRequest):
    """Evaluate a declarative requirement (conditional guard)."""
    return CheckPermissionResponse(
        allowed=permission_guard.allows(request.requirement, request.permissions)
    )


@router.post(
    "/permissions/summary",
    response_model=PermissionSummaryResponse,
    summary="Summarize Permissions",
)
async def summarize(request: PermissionListRequest):
    evaluator = PolicyEvaluator(request.permissions)
    features = evaluator.get_user_features()
    return PermissionSummaryResponse(
        features=features,
        grouped=evaluator.group_by_feature(),
        admin=evaluator.has_admin_access(),
        read_only_features=[f for f in features if evaluator.is_read_only(f)],
    )


@router.post(
    "/access/route",
    response_model=RouteAccessResponse,
    summary="Route Access",
    description="Route guard decision: allow, redirect to login, or redirect to fallback.",
)
async def route_access(
    request: RouteAccessRequest,
    guard: RouteGuard = Depends(get_route_guard),
):
    result = guard.check(request.path, request.is_authenticated, request.permissions)
    return RouteAccessResponse(
        decision=result.decision.value,
        redirect_to=result.redirect_to,
        from_path=result.from_path,
    )


@router.post(
    "/navigation",
    response_model=NavigationResponse,
    summary="Visible Navigation",
)
async def navigation(request: PermissionListRequest):
    """Navigation items the principal may see, in menu order."""
    return NavigationResponse(items=with_icons(filter_navigation(request.permissions)))


@router.get(
    "/routes",
    response_model=List[RouteRule],
    summary="Route Table",
)
async def list_routes(table: RouteTable = Depends(get_route_table)):
    return list(table.rules.values())
