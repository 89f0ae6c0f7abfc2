"""Gatekeeper Routing Module - Route permission table and navigation filtering."""

from .route_table import RouteTable, DEFAULT_ROUTE_RULES
from .validator import RouteTableValidator, route_table_validator
from .navigation import (
    NAVIGATION_ITEMS,
    ROUTE_ICONS,
    filter_navigation,
    icon_for,
    with_icons,
)

__all__ = [
    "RouteTable",
    "DEFAULT_ROUTE_RULES",
    "RouteTableValidator",
    "route_table_validator",
    "NAVIGATION_ITEMS",
    "ROUTE_ICONS",
    "filter_navigation",
    "icon_for",
    "with_icons",
]
