"""
Gatekeeper Route Guard

Turns a route access check into a navigation signal: render the
route, send the principal to login, or send them to a fallback page.
"""

from __future__ import annotations
from typing import Iterable, Optional
from dataclasses import dataclass
from enum import Enum
import logging

from ..permissions.evaluator import can_access_route, RouteLookup


logger = logging.getLogger(__name__)

DEFAULT_LOGIN_PATH = "/auth"
DEFAULT_FALLBACK_PATH = "/unauthorized"


# =============================================================================
# Route Decisions
# =============================================================================

class RouteDecision(str, Enum):
    """Route guard outcomes."""
    ALLOW = "allow"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class RouteGuardResult:
    """Result of a route guard check."""
    decision: RouteDecision
    redirect_to: Optional[str] = None
    from_path: Optional[str] = None

    @property
    def is_allowed(self) -> bool:
        return self.decision == RouteDecision.ALLOW

    @classmethod
    def allow(cls) -> "RouteGuardResult":
        return cls(decision=RouteDecision.ALLOW)

    @classmethod
    def login(cls, login_path: str, from_path: str) -> "RouteGuardResult":
        return cls(
            decision=RouteDecision.REDIRECT_LOGIN,
            redirect_to=login_path,
            from_path=from_path,
        )

    @classmethod
    def redirect(cls, fallback_path: str) -> "RouteGuardResult":
        return cls(decision=RouteDecision.REDIRECT, redirect_to=fallback_path)


# =============================================================================
# Route Guard
# =============================================================================

class RouteGuard:
    """
    Guards navigable routes.

    Unauthenticated principals are sent to login before any permission
    is looked at.
    """

    def __init__(
        self,
        table: RouteLookup,
        fallback_path: str = DEFAULT_FALLBACK_PATH,
        login_path: str = DEFAULT_LOGIN_PATH,
    ):
        self.table = table
        self.fallback_path = fallback_path
        self.login_path = login_path

    def check(
        self,
        current_path: str,
        is_authenticated: bool,
        permissions: Optional[Iterable[str]],
    ) -> RouteGuardResult:
        """Decide what to do with a request for `current_path`."""
        if not is_authenticated:
            return RouteGuardResult.login(self.login_path, current_path)

        if not can_access_route(permissions or (), current_path, self.table):
            logger.debug(f"Redirecting {current_path} to {self.fallback_path}")
            return RouteGuardResult.redirect(self.fallback_path)

        return RouteGuardResult.allow()
