"""
Gatekeeper Configuration Module

Centralized configuration from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class RouteConfig:
    """Route table and redirect configuration."""
    table_path: Optional[str] = None
    fallback_path: str = "/unauthorized"
    login_path: str = "/auth"
    strict_features: bool = False


@dataclass
class GatekeeperConfig:
    """Main configuration container."""
    routes: RouteConfig
    debug: bool = False
    log_level: str = "INFO"


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def load_config() -> GatekeeperConfig:
    """
    Load configuration from environment variables.

    Environment Variables:
        GATEKEEPER_ROUTE_TABLE_PATH: JSON route table (default: built-in rules)
        GATEKEEPER_FALLBACK_PATH: Redirect target for denied routes (default: /unauthorized)
        GATEKEEPER_LOGIN_PATH: Redirect target for anonymous users (default: /auth)
        GATEKEEPER_STRICT_FEATURES: Reject rules naming unknown features (default: false)
        GATEKEEPER_DEBUG: Enable debug mode (default: false)
        GATEKEEPER_LOG_LEVEL: Log level (default: INFO)
    """
    routes = RouteConfig(
        table_path=os.getenv("GATEKEEPER_ROUTE_TABLE_PATH") or None,
        fallback_path=os.getenv("GATEKEEPER_FALLBACK_PATH", "/unauthorized"),
        login_path=os.getenv("GATEKEEPER_LOGIN_PATH", "/auth"),
        strict_features=_flag("GATEKEEPER_STRICT_FEATURES"),
    )

    return GatekeeperConfig(
        routes=routes,
        debug=_flag("GATEKEEPER_DEBUG"),
        log_level=os.getenv("GATEKEEPER_LOG_LEVEL", "INFO").upper(),
    )


# Singleton config instance
_config: Optional[GatekeeperConfig] = None


def get_config() -> GatekeeperConfig:
    """Get the global configuration (lazy-loaded singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    global _config
    _config = None
