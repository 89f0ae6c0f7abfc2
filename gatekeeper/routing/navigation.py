"""
Gatekeeper Navigation Filter

Derives the visible navigation from the principal's permissions.
Navigation items always use any-of matching.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from ..permissions.evaluator import has_any_permission
from ..schemas.permission import Action, Feature
from ..schemas.routes import NavigationItem
from ..permissions.codec import encode


DEFAULT_ICON = "layout-dashboard"

# Icon per route path
ROUTE_ICONS: Dict[str, str] = {
    "/": "layout-dashboard",
    "/users": "users",
    "/reports": "bar-chart-3",
    "/monitoring": "activity",
    "/settings": "settings",
    "/admin": "shield",
}


def _item(title: str, path: str, feature: Feature) -> NavigationItem:
    return NavigationItem(
        title=title,
        path=path,
        required_permissions=[encode(feature, Action.READ)],
    )


NAVIGATION_ITEMS: List[NavigationItem] = [
    _item("Dashboard", "/", Feature.DASHBOARD),
    _item("Users", "/users", Feature.USERS),
    _item("Reports", "/reports", Feature.REPORTS),
    _item("Monitoring", "/monitoring", Feature.MONITORING),
    _item("Settings", "/settings", Feature.SETTINGS),
    _item("Administration", "/admin", Feature.ADMINISTRATION),
]


def icon_for(path: str) -> str:
    return ROUTE_ICONS.get(path, DEFAULT_ICON)


def filter_navigation(
    permissions: Iterable[str],
    items: Optional[Iterable[NavigationItem]] = None,
) -> List[NavigationItem]:
    """
    Return the items the principal may see, in their original order.

    An item with no required permissions is hidden, like any other
    empty any-of requirement.
    """
    granted = frozenset(permissions or ())
    candidates = NAVIGATION_ITEMS if items is None else items
    return [item for item in candidates if has_any_permission(granted, item.required_permissions)]


def with_icons(items: Iterable[NavigationItem]) -> List[NavigationItem]:
    """Fill in missing icons from ROUTE_ICONS."""
    return [
        item if item.icon else item.model_copy(update={"icon": icon_for(item.path)})
        for item in items
    ]
