"""
Gatekeeper Permission Guard

Conditional rendering: choose between content and a fallback based
on a declarative permission requirement.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, TypeVar, Union
from pydantic import BaseModel, Field

from ..permissions.evaluator import (
    check_permission,
    has_all_permissions,
    has_any_permission,
    has_permission,
)
from ..schemas.permission import Action


T = TypeVar("T")
F = TypeVar("F")


class PermissionRequirement(BaseModel):
    """
    Declarative requirement, one of:
    - `feature` + `action`
    - `permission` (exact string)
    - `permissions` + `require_all`

    When several forms are filled in, the first one in that order wins.
    A requirement with no usable form denies.
    """
    feature: Optional[str] = None
    action: Optional[Union[Action, str]] = None
    permission: Optional[str] = None
    permissions: List[str] = Field(default_factory=list)
    require_all: bool = False


class PermissionGuard:
    """Evaluates PermissionRequirements against a permission list."""

    def allows(
        self,
        requirement: PermissionRequirement,
        permissions: Optional[Iterable[str]],
    ) -> bool:
        granted = frozenset(permissions or ())

        if requirement.feature and requirement.action:
            return has_permission(granted, requirement.feature, requirement.action)

        if requirement.permission:
            return check_permission(granted, requirement.permission)

        if requirement.permissions:
            if requirement.require_all:
                return has_all_permissions(granted, requirement.permissions)
            return has_any_permission(granted, requirement.permissions)

        return False

    def render(
        self,
        requirement: PermissionRequirement,
        permissions: Optional[Iterable[str]],
        children: T,
        fallback: Optional[F] = None,
    ) -> Union[T, Optional[F]]:
        """Return `children` when allowed, otherwise `fallback`."""
        if self.allows(requirement, permissions):
            return children
        return fallback


# Singleton instance
permission_guard = PermissionGuard()
