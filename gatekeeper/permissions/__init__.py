"""Gatekeeper Permissions Module - Permission codec, catalog and policy evaluation."""

from .codec import encode, decode, is_well_formed, permission_label
from .catalog import AVAILABLE_PERMISSIONS, ADMIN_PERMISSIONS, EXAMPLE_PERMISSION_SETS
from .evaluator import (
    PolicyEvaluator,
    has_permission,
    check_permission,
    has_any_permission,
    has_all_permissions,
    can_access_route,
    get_user_features,
    get_feature_actions,
    can_read,
    can_write,
    is_read_only,
    has_admin_access,
    group_by_feature,
    validate_permissions,
    get_visible_keys,
    filter_by_write_permission,
)

__all__ = [
    # Codec
    "encode",
    "decode",
    "is_well_formed",
    "permission_label",
    # Catalog
    "AVAILABLE_PERMISSIONS",
    "ADMIN_PERMISSIONS",
    "EXAMPLE_PERMISSION_SETS",
    # Evaluator
    "PolicyEvaluator",
    "has_permission",
    "check_permission",
    "has_any_permission",
    "has_all_permissions",
    "can_access_route",
    "get_user_features",
    "get_feature_actions",
    "can_read",
    "can_write",
    "is_read_only",
    "has_admin_access",
    "group_by_feature",
    "validate_permissions",
    "get_visible_keys",
    "filter_by_write_permission",
]
