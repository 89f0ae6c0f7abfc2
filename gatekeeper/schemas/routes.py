"""
Gatekeeper Route Schemas

Route rules, navigation items and generic permission-gated elements.
All models are frozen: route configuration is loaded once and shared
between concurrent evaluations.
"""

from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RouteRule(BaseModel):
    """Required permissions for one navigable path."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str = Field(..., min_length=1)
    required_permissions: List[str] = Field(..., min_length=1, alias="requiredPermissions")
    require_all: bool = Field(default=False, alias="requireAll")


class NavigationItem(BaseModel):
    """A navigation entry; always matched with any-of semantics."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    path: str = Field(..., alias="url")
    required_permissions: List[str] = Field(default_factory=list, alias="requiredPermissions")
    icon: Optional[str] = None


class VisibleElement(BaseModel):
    """A keyed UI element gated by permissions."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str
    required_permissions: List[str] = Field(default_factory=list, alias="requiredPermissions")
    require_all: bool = Field(default=False, alias="requireAll")
