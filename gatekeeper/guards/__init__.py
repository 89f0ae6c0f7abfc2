"""Gatekeeper Guards Module - Route and conditional-render guards."""

from .route_guard import (
    RouteGuard,
    RouteGuardResult,
    RouteDecision,
    DEFAULT_LOGIN_PATH,
    DEFAULT_FALLBACK_PATH,
)
from .permission_guard import PermissionGuard, PermissionRequirement, permission_guard

__all__ = [
    "RouteGuard",
    "RouteGuardResult",
    "RouteDecision",
    "DEFAULT_LOGIN_PATH",
    "DEFAULT_FALLBACK_PATH",
    "PermissionGuard",
    "PermissionRequirement",
    "permission_guard",
]
