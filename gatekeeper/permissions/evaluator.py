"""
Gatekeeper Policy Evaluator

The access-control decision core. Every function takes the principal's
permission list explicitly and is a pure function of its arguments:
no I/O, no shared mutable state, no exceptions for any list shape.

Matching is exact and case-sensitive. There are no wildcards and no
hierarchy: `users:write` does not imply `users:read`.
"""

from __future__ import annotations
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    TypeVar,
    Union,
)
import logging

from ..schemas.permission import Action, AuthenticatedUser, Feature
from ..schemas.routes import RouteRule, VisibleElement
from ..schemas.validation import PermissionValidation
from .catalog import ADMIN_PERMISSIONS
from .codec import decode, encode, is_well_formed, token

if TYPE_CHECKING:
    from ..routing.route_table import RouteTable


logger = logging.getLogger(__name__)

T = TypeVar("T")

RouteLookup = Union["RouteTable", Mapping[str, RouteRule]]


def _as_set(permissions: Optional[Iterable[str]]) -> FrozenSet[str]:
    if isinstance(permissions, frozenset):
        return permissions
    return frozenset(permissions or ())


# =============================================================================
# Membership Checks
# =============================================================================

def has_permission(
    permissions: Iterable[str],
    feature: Union[Feature, str],
    action: Union[Action, str],
) -> bool:
    """Check for the exact `feature:action` grant."""
    return encode(feature, action) in _as_set(permissions)


def check_permission(permissions: Iterable[str], permission: str) -> bool:
    """Check for a literal permission string."""
    return permission in _as_set(permissions)


def has_any_permission(permissions: Iterable[str], required: Sequence[str]) -> bool:
    """
    True iff at least one required permission is granted.

    An empty requirement list is a denial: "any of nothing" never grants.
    """
    granted = _as_set(permissions)
    return any(p in granted for p in required)


def has_all_permissions(permissions: Iterable[str], required: Sequence[str]) -> bool:
    """
    True iff every required permission is granted.

    An empty requirement list imposes no restriction and is satisfied.
    """
    granted = _as_set(permissions)
    return all(p in granted for p in required)


def _meets(permissions: Iterable[str], required: Sequence[str], require_all: bool) -> bool:
    if require_all:
        return has_all_permissions(permissions, required)
    return has_any_permission(permissions, required)


def can_access_route(permissions: Iterable[str], path: str, table: RouteLookup) -> bool:
    """
    Decide whether the principal may open `path`.

    Paths without a rule are unrestricted. Configured paths use the
    rule's any/all combination over its required permissions.
    """
    if isinstance(table, Mapping):
        rule = table.get(path)
    else:
        rule = table.lookup(path)

    if rule is None:
        return True

    allowed = _meets(permissions, rule.required_permissions, rule.require_all)
    if not allowed:
        logger.debug(f"Route {path} denied (require_all={rule.require_all})")
    return allowed


# =============================================================================
# Derived Views
# =============================================================================

def get_user_features(permissions: Iterable[str]) -> List[str]:
    """Distinct features the principal holds any permission on, first-seen order."""
    features: Dict[str, None] = {}
    for permission in permissions or ():
        features.setdefault(decode(permission).feature, None)
    return list(features)


def get_feature_actions(permissions: Iterable[str], feature: Union[Feature, str]) -> List[str]:
    """Distinct actions granted on one feature, first-seen order."""
    wanted = token(feature)
    actions: Dict[str, None] = {}
    for permission in permissions or ():
        parts = decode(permission)
        if parts.feature == wanted:
            actions.setdefault(parts.action, None)
    return list(actions)


def can_write(permissions: Iterable[str], feature: Union[Feature, str]) -> bool:
    return has_permission(permissions, feature, Action.WRITE)


def can_read(permissions: Iterable[str], feature: Union[Feature, str]) -> bool:
    return has_permission(permissions, feature, Action.READ)


def is_read_only(permissions: Iterable[str], feature: Union[Feature, str]) -> bool:
    """Readable but not writable."""
    granted = _as_set(permissions)
    return can_read(granted, feature) and not can_write(granted, feature)


def has_admin_access(permissions: Iterable[str]) -> bool:
    """True iff any elevated permission is held."""
    return not ADMIN_PERMISSIONS.isdisjoint(_as_set(permissions))


def group_by_feature(permissions: Iterable[str]) -> Dict[str, List[str]]:
    """
    Partition permissions by feature.

    Actions keep their order and multiplicity from the input list.
    """
    grouped: Dict[str, List[str]] = {}
    for permission in permissions or ():
        feature, action = decode(permission)
        grouped.setdefault(feature, []).append(action)
    return grouped


def validate_permissions(permissions: Iterable[str]) -> PermissionValidation:
    """
    Report malformed entries of an externally supplied permission list.

    Findings are returned as data; nothing is raised.
    """
    invalid = [p for p in permissions or () if not is_well_formed(p)]
    if invalid:
        logger.warning(f"{len(invalid)} malformed permission(s) in permission list")
    return PermissionValidation(valid=not invalid, invalid=invalid)


# =============================================================================
# Filtering
# =============================================================================

def get_visible_keys(permissions: Iterable[str], elements: Iterable[VisibleElement]) -> List[str]:
    """Keys of the elements whose requirements pass, in input order."""
    granted = _as_set(permissions)
    return [
        element.key
        for element in elements
        if _meets(granted, element.required_permissions, element.require_all)
    ]


def _item_feature(item: Any) -> Optional[str]:
    if isinstance(item, Mapping):
        return item.get("feature")
    return getattr(item, "feature", None)


def filter_by_write_permission(permissions: Iterable[str], items: Iterable[T]) -> List[T]:
    """Keep items without a feature and items whose feature is writable."""
    granted = _as_set(permissions)
    result = []
    for item in items:
        feature = _item_feature(item)
        if not feature or can_write(granted, feature):
            result.append(item)
    return result


# =============================================================================
# Policy Evaluator
# =============================================================================

class PolicyEvaluator:
    """
    Evaluator bound to one principal's permission list.

    The list is captured at construction and never changes, so a single
    instance can be shared freely between threads.

    Usage:
        evaluator = PolicyEvaluator.for_user(user)
        if evaluator.can_access_route("/users", route_table):
            ...
    """

    def __init__(self, permissions: Optional[Iterable[str]] = None):
        self._permissions = tuple(permissions or ())
        self._granted = frozenset(self._permissions)

    @classmethod
    def for_user(cls, user: Optional[AuthenticatedUser]) -> "PolicyEvaluator":
        """Build from the authenticator's user object; no user means no permissions."""
        if user is None:
            return cls()
        return cls(user.permissions)

    @property
    def permissions(self) -> List[str]:
        """The permission list as received."""
        return list(self._permissions)

    def has_permission(self, feature: Union[Feature, str], action: Union[Action, str]) -> bool:
        return has_permission(self._granted, feature, action)

    def check_permission(self, permission: str) -> bool:
        return check_permission(self._granted, permission)

    def has_any_permission(self, required: Sequence[str]) -> bool:
        return has_any_permission(self._granted, required)

    def has_all_permissions(self, required: Sequence[str]) -> bool:
        return has_all_permissions(self._granted, required)

    def can_access_route(self, path: str, table: RouteLookup) -> bool:
        return can_access_route(self._granted, path, table)

    def get_user_features(self) -> List[str]:
        return get_user_features(self._permissions)

    def get_feature_actions(self, feature: Union[Feature, str]) -> List[str]:
        return get_feature_actions(self._permissions, feature)

    def can_write(self, feature: Union[Feature, str]) -> bool:
        return can_write(self._granted, feature)

    def can_read(self, feature: Union[Feature, str]) -> bool:
        return can_read(self._granted, feature)

    def is_read_only(self, feature: Union[Feature, str]) -> bool:
        return is_read_only(self._granted, feature)

    def has_admin_access(self) -> bool:
        return has_admin_access(self._granted)

    def group_by_feature(self) -> Dict[str, List[str]]:
        return group_by_feature(self._permissions)

    def validate(self) -> PermissionValidation:
        return validate_permissions(self._permissions)

    def get_visible_keys(self, elements: Iterable[VisibleElement]) -> List[str]:
        return get_visible_keys(self._granted, elements)

    def filter_by_write_permission(self, items: Iterable[T]) -> List[T]:
        return filter_by_write_permission(self._granted, items)
