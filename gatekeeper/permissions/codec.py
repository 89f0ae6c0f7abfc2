"""
Gatekeeper Permission Codec

Converts between the `(feature, action)` pair and its canonical
wire string `"feature:action"`.

Tokens are not escaped: a `:` inside a feature or action produces a
string that decodes differently. Decoding never raises; malformed
strings degrade to partial fields and simply never match anything.
"""

from __future__ import annotations
from typing import Union
from enum import Enum

from ..schemas.permission import Action, Feature, PermissionParts, VALID_ACTIONS


SEPARATOR = ":"


def token(value: Union[str, Enum]) -> str:
    """Plain string form of a feature or action."""
    if isinstance(value, Enum):
        return str(value.value)
    return value


def encode(feature: Union[Feature, str], action: Union[Action, str]) -> str:
    """Build the canonical permission string."""
    return f"{token(feature)}{SEPARATOR}{token(action)}"


def decode(permission: str) -> PermissionParts:
    """
    Split a permission string on its first separator.

    A string without a separator decodes to the whole string as the
    feature and an empty action.
    """
    feature, _, action = permission.partition(SEPARATOR)
    return PermissionParts(feature, action)


def is_well_formed(permission: str) -> bool:
    """True iff exactly one separator, a non-empty feature, and a known action."""
    if permission.count(SEPARATOR) != 1:
        return False
    feature, action = decode(permission)
    return bool(feature) and action in VALID_ACTIONS


def permission_label(permission: str) -> str:
    """Human readable label, e.g. `activity_logs:read` -> `Activity Logs - Read`."""
    feature, action = decode(permission)
    feature_label = " ".join(word[:1].upper() + word[1:] for word in feature.split("_"))
    action_label = action[:1].upper() + action[1:]
    return f"{feature_label} - {action_label}"
