"""Gatekeeper Schemas Package - Permission, route and validation schemas."""

from .permission import (
    Action,
    Feature,
    PermissionParts,
    AuthenticatedUser,
    VALID_ACTIONS,
    KNOWN_FEATURES,
)
from .routes import (
    RouteRule,
    NavigationItem,
    VisibleElement,
)
from .validation import (
    ValidationSeverity,
    ValidationIssue,
    ValidationResult,
    PermissionValidation,
    RouteTableError,
)

__all__ = [
    # Permission
    "Action",
    "Feature",
    "PermissionParts",
    "AuthenticatedUser",
    "VALID_ACTIONS",
    "KNOWN_FEATURES",
    # Routes
    "RouteRule",
    "NavigationItem",
    "VisibleElement",
    # Validation
    "ValidationSeverity",
    "ValidationIssue",
    "ValidationResult",
    "PermissionValidation",
    "RouteTableError",
]
