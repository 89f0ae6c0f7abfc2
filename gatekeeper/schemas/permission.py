"""
Gatekeeper Permission Schema

Permission vocabulary: actions, known features, the decoded
permission pair, and the user object handed over by the authenticator.
"""

from __future__ import annotations
from typing import List, NamedTuple, Optional
from pydantic import BaseModel, Field
from enum import Enum


# =============================================================================
# Actions & Features
# =============================================================================

class Action(str, Enum):
    """Operation classes a permission can grant. WRITE does not imply READ."""
    READ = "read"
    WRITE = "write"


class Feature(str, Enum):
    """
    Features known to the admin dashboard.

    This is a catalog, not a gate: the backend may grant permissions on
    features missing here and they evaluate like any other.
    """
    USERS = "users"
    REPORTS = "reports"
    SETTINGS = "settings"
    MONITORING = "monitoring"
    DASHBOARD = "dashboard"
    ACTIVITY_LOGS = "activity_logs"
    SYSTEM = "system"
    ADMINISTRATION = "administration"


VALID_ACTIONS = frozenset(a.value for a in Action)
KNOWN_FEATURES = frozenset(f.value for f in Feature)


class PermissionParts(NamedTuple):
    """Decoded `feature:action` pair."""
    feature: str
    action: str


# =============================================================================
# Principal
# =============================================================================

class AuthenticatedUser(BaseModel):
    """
    Resolved user object from the authentication collaborator.

    Only `permissions` matters to evaluation; the rest is carried for
    callers that display it.
    """
    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = Field(default=None, description="Display label only, never evaluated")
    permissions: List[str] = Field(default_factory=list)
