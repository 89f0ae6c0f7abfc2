"""
Gatekeeper Permission Catalog

Reference list of permissions the dashboard knows about. The backend
is the source of truth for what a principal actually holds; these
constants exist for configuration, tests and display.
"""

from __future__ import annotations
from typing import Dict, FrozenSet, List

from ..schemas.permission import Action, Feature
from .codec import encode


# =============================================================================
# Available Permissions
# =============================================================================

AVAILABLE_PERMISSIONS: Dict[str, str] = {
    f"{feature.name}_{action.name}": encode(feature, action)
    for feature in Feature
    for action in Action
}

# Holding any one of these marks a principal as an administrator.
ADMIN_PERMISSIONS: FrozenSet[str] = frozenset({
    encode(Feature.USERS, Action.WRITE),
    encode(Feature.SETTINGS, Action.WRITE),
    encode(Feature.ADMINISTRATION, Action.READ),
})


# =============================================================================
# Example Permission Sets
# =============================================================================

EXAMPLE_PERMISSION_SETS: Dict[str, List[str]] = {
    "super_admin": list(AVAILABLE_PERMISSIONS.values()),
    "admin": [
        AVAILABLE_PERMISSIONS["DASHBOARD_READ"],
        AVAILABLE_PERMISSIONS["USERS_READ"],
        AVAILABLE_PERMISSIONS["USERS_WRITE"],
        AVAILABLE_PERMISSIONS["REPORTS_READ"],
        AVAILABLE_PERMISSIONS["REPORTS_WRITE"],
        AVAILABLE_PERMISSIONS["SETTINGS_READ"],
        AVAILABLE_PERMISSIONS["SETTINGS_WRITE"],
        AVAILABLE_PERMISSIONS["MONITORING_READ"],
        AVAILABLE_PERMISSIONS["ACTIVITY_LOGS_READ"],
        AVAILABLE_PERMISSIONS["ADMINISTRATION_READ"],
    ],
    "manager": [
        AVAILABLE_PERMISSIONS["DASHBOARD_READ"],
        AVAILABLE_PERMISSIONS["USERS_READ"],
        AVAILABLE_PERMISSIONS["REPORTS_READ"],
        AVAILABLE_PERMISSIONS["REPORTS_WRITE"],
        AVAILABLE_PERMISSIONS["MONITORING_READ"],
    ],
    "user": [
        AVAILABLE_PERMISSIONS["DASHBOARD_READ"],
        AVAILABLE_PERMISSIONS["REPORTS_READ"],
    ],
    "viewer": [
        AVAILABLE_PERMISSIONS["DASHBOARD_READ"],
    ],
}
