"""
Gatekeeper Route Table Validator

Checks raw route configuration before it replaces the live table.
Accepts either a mapping `{path: rule}` or a list of rules; in the
mapping form a rule may omit `path` and inherit its key.
"""

from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
import logging

from pydantic import ValidationError

from ..permissions.codec import decode, is_well_formed
from ..schemas.permission import KNOWN_FEATURES
from ..schemas.routes import RouteRule
from ..schemas.validation import (
    RouteTableError,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)


logger = logging.getLogger(__name__)

RawRouteTable = Union[Mapping[str, Any], Sequence[Any]]


def _entries(raw: RawRouteTable) -> List[Tuple[Optional[str], Any]]:
    if isinstance(raw, Mapping):
        return list(raw.items())
    return [(None, entry) for entry in raw]


def coerce_rule(key: Optional[str], entry: Any) -> RouteRule:
    """Build a RouteRule from a config entry; raises on shapes that don't parse."""
    if isinstance(entry, RouteRule):
        return entry
    data = dict(entry)
    if key is not None:
        data.setdefault("path", key)
    return RouteRule.model_validate(data)


class RouteTableValidator:
    """
    Validates route configuration.

    Blocking errors:
    - E_INVALID_RULE: entry does not parse as a rule
    - E_EMPTY_REQUIREMENTS: rule requires nothing
    - E_MALFORMED_PERMISSION: a required permission is not `feature:read|write`
    - E_PATH_MISMATCH: mapping key differs from the rule's path
    - E_DUPLICATE_PATH: two rules for the same path

    Warnings:
    - W_UNKNOWN_FEATURE: required permission names a feature outside the
      catalog (blocking when `strict_features` is set)
    """

    def __init__(self, strict_features: bool = False):
        self.strict_features = strict_features

    def validate(self, raw: RawRouteTable) -> ValidationResult:
        """Validate raw configuration without building a table."""
        errors, warnings, _ = self._check(raw)
        return ValidationResult(valid=not errors, errors=errors, warnings=warnings)

    def compile(self, raw: RawRouteTable) -> Dict[str, RouteRule]:
        """Validate and build the path -> rule mapping, raising on blocking errors."""
        errors, warnings, rules = self._check(raw)

        for warning in warnings:
            logger.warning(f"Route table: {warning.message}")

        if errors:
            first = errors[0]
            raise RouteTableError(
                code=first.code,
                message=f"Route table has {len(errors)} error(s); first: {first.message}",
                paths=first.paths,
            )
        return rules

    def _check(
        self, raw: RawRouteTable
    ) -> Tuple[List[ValidationIssue], List[ValidationIssue], Dict[str, RouteRule]]:
        errors: List[ValidationIssue] = []
        warnings: List[ValidationIssue] = []
        rules: Dict[str, RouteRule] = {}

        for key, entry in _entries(raw):
            label = key if key is not None else "<list entry>"

            if isinstance(entry, Mapping) and not entry.get(
                "required_permissions", entry.get("requiredPermissions")
            ):
                errors.append(ValidationIssue(
                    code="E_EMPTY_REQUIREMENTS",
                    severity=ValidationSeverity.BLOCKING,
                    message=f"Rule for {label} has no required permissions",
                    paths=[label],
                ))
                continue

            try:
                rule = coerce_rule(key, entry)
            except (ValidationError, TypeError, ValueError) as e:
                errors.append(ValidationIssue(
                    code="E_INVALID_RULE",
                    severity=ValidationSeverity.BLOCKING,
                    message=f"Rule for {label} is invalid: {e}",
                    paths=[label],
                ))
                continue

            if key is not None and rule.path != key:
                errors.append(ValidationIssue(
                    code="E_PATH_MISMATCH",
                    severity=ValidationSeverity.BLOCKING,
                    message=f"Rule keyed {key} declares path {rule.path}",
                    paths=[key, rule.path],
                ))
                continue

            if rule.path in rules:
                errors.append(ValidationIssue(
                    code="E_DUPLICATE_PATH",
                    severity=ValidationSeverity.BLOCKING,
                    message=f"Duplicate rule for path: {rule.path}",
                    paths=[rule.path],
                ))
                continue

            malformed = [p for p in rule.required_permissions if not is_well_formed(p)]
            if malformed:
                errors.append(ValidationIssue(
                    code="E_MALFORMED_PERMISSION",
                    severity=ValidationSeverity.BLOCKING,
                    message=f"Rule for {rule.path} has malformed permissions: {', '.join(malformed)}",
                    paths=[rule.path],
                    permissions=malformed,
                ))
                continue

            unknown = [
                p for p in rule.required_permissions
                if decode(p).feature not in KNOWN_FEATURES
            ]
            if unknown:
                issue = ValidationIssue(
                    code="W_UNKNOWN_FEATURE",
                    severity=(
                        ValidationSeverity.BLOCKING
                        if self.strict_features
                        else ValidationSeverity.WARNING
                    ),
                    message=f"Rule for {rule.path} names unknown features: {', '.join(unknown)}",
                    paths=[rule.path],
                    permissions=unknown,
                )
                if self.strict_features:
                    errors.append(issue)
                    continue
                warnings.append(issue)

            rules[rule.path] = rule

        return errors, warnings, rules


# Singleton instance
route_table_validator = RouteTableValidator()
