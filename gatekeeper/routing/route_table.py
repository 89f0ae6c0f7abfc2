"""
Gatekeeper Route Permission Table

Static mapping from route path to its RouteRule.

The live mapping is immutable. Reloads validate the new configuration
first and then rebind the whole mapping, so a reader sees either the
old table or the new one, never a mix. Readers take no lock.
"""

from __future__ import annotations
from typing import Dict, Iterator, Mapping, Optional, TYPE_CHECKING
from pathlib import Path
from types import MappingProxyType
import json
import logging
import threading

from ..schemas.permission import Action, Feature
from ..schemas.routes import RouteRule
from ..schemas.validation import RouteTableError
from ..permissions.codec import encode
from .validator import RawRouteTable, RouteTableValidator, route_table_validator

if TYPE_CHECKING:
    from ..config import GatekeeperConfig


logger = logging.getLogger(__name__)


# =============================================================================
# Default Rules
# =============================================================================

def _read_rule(path: str, feature: Feature) -> RouteRule:
    return RouteRule(path=path, required_permissions=[encode(feature, Action.READ)])


DEFAULT_ROUTE_RULES: Dict[str, RouteRule] = {
    rule.path: rule
    for rule in (
        _read_rule("/", Feature.DASHBOARD),
        _read_rule("/users", Feature.USERS),
        _read_rule("/reports", Feature.REPORTS),
        _read_rule("/monitoring", Feature.MONITORING),
        _read_rule("/settings", Feature.SETTINGS),
        _read_rule("/admin", Feature.ADMINISTRATION),
    )
}


# =============================================================================
# Route Table
# =============================================================================

class RouteTable:
    """
    Read-mostly route rule registry.

    Usage:
        table = RouteTable.from_file("routes.json")
        rule = table.lookup("/users")
    """

    def __init__(
        self,
        rules: Optional[RawRouteTable] = None,
        validator: Optional[RouteTableValidator] = None,
    ):
        self._validator = validator or route_table_validator
        self._reload_lock = threading.Lock()
        source = DEFAULT_ROUTE_RULES if rules is None else rules
        self._rules: Mapping[str, RouteRule] = MappingProxyType(self._validator.compile(source))

    @classmethod
    def from_file(
        cls,
        path: str,
        validator: Optional[RouteTableValidator] = None,
    ) -> "RouteTable":
        """Load a table from a JSON file."""
        table = cls(_read_json(path), validator=validator)
        logger.info(f"Loaded {len(table)} route rule(s) from {path}")
        return table

    @classmethod
    def from_config(cls, config: "GatekeeperConfig") -> "RouteTable":
        """Build the table described by configuration, falling back to defaults."""
        validator = RouteTableValidator(strict_features=config.routes.strict_features)
        if config.routes.table_path:
            return cls.from_file(config.routes.table_path, validator=validator)
        return cls(validator=validator)

    def lookup(self, path: str) -> Optional[RouteRule]:
        """Get the rule for a path, or None when the path is unrestricted."""
        return self._rules.get(path)

    @property
    def rules(self) -> Mapping[str, RouteRule]:
        """Read-only view of the current mapping."""
        return self._rules

    def reload(self, rules: RawRouteTable) -> None:
        """
        Replace the whole table.

        Raises RouteTableError when the new configuration is invalid; the
        current table stays in place in that case.
        """
        with self._reload_lock:
            compiled = self._validator.compile(rules)
            self._rules = MappingProxyType(compiled)
        logger.info(f"Route table reloaded with {len(compiled)} rule(s)")

    def reload_from_file(self, path: str) -> None:
        """Replace the whole table from a JSON file."""
        self.reload(_read_json(path))

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, path: object) -> bool:
        return path in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)


def _read_json(path: str) -> RawRouteTable:
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise RouteTableError("E_UNREADABLE", f"Cannot read route table {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RouteTableError("E_UNREADABLE", f"Route table {path} is not valid JSON: {e}") from e

    if not isinstance(data, (dict, list)):
        raise RouteTableError(
            "E_UNREADABLE",
            f"Route table {path} must be a JSON object or array",
        )
    return data
