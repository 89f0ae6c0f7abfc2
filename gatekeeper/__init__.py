"""
Gatekeeper - Permission-Based Access Control Core

Gatekeeper evaluates a principal's resolved permission list. Its ONLY
responsibilities are:
- Encoding and decoding `feature:action` permissions
- Answering single, any-of and all-of permission queries
- Deciding route access from a static route table
- Filtering navigation and UI elements
- Translating decisions into guard signals

Gatekeeper does NOT:
- Store permissions
- Resolve roles or role hierarchies
- Authenticate users
"""

__version__ = "0.1.0"

from .permissions.evaluator import PolicyEvaluator
from .permissions.codec import encode, decode, is_well_formed
from .schemas.permission import Action, Feature, AuthenticatedUser
from .schemas.routes import RouteRule, NavigationItem, VisibleElement
from .schemas.validation import RouteTableError
from .routing.route_table import RouteTable
from .routing.navigation import filter_navigation
from .guards.route_guard import RouteGuard, RouteGuardResult, RouteDecision
from .guards.permission_guard import PermissionGuard, PermissionRequirement

__all__ = [
    # Evaluator
    "PolicyEvaluator",
    # Codec
    "encode",
    "decode",
    "is_well_formed",
    # Schemas
    "Action",
    "Feature",
    "AuthenticatedUser",
    "RouteRule",
    "NavigationItem",
    "VisibleElement",
    "RouteTableError",
    # Routing
    "RouteTable",
    "filter_navigation",
    # Guards
    "RouteGuard",
    "RouteGuardResult",
    "RouteDecision",
    "PermissionGuard",
    "PermissionRequirement",
]
