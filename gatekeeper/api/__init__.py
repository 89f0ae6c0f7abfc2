"""Gatekeeper API Module - FastAPI decision endpoints."""

from .routes import router, get_route_table, get_route_guard

__all__ = [
    "router",
    "get_route_table",
    "get_route_guard",
]
