"""
Gatekeeper Validation Results

Structures for reporting validation findings as data.
"""

from __future__ import annotations
from typing import List, Optional
from dataclasses import dataclass, field
from enum import Enum


class ValidationSeverity(str, Enum):
    """Severity of validation issues."""
    BLOCKING = "blocking"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """A single validation issue."""
    code: str
    severity: ValidationSeverity
    message: str
    paths: Optional[List[str]] = None
    permissions: Optional[List[str]] = None


@dataclass
class ValidationResult:
    """Result of route table validation."""
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    def has_blocking(self) -> bool:
        """Check if there are blocking errors."""
        return any(e.severity == ValidationSeverity.BLOCKING for e in self.errors)


@dataclass
class PermissionValidation:
    """Outcome of validating a permission list."""
    valid: bool
    invalid: List[str] = field(default_factory=list)


class RouteTableError(Exception):
    """Route table could not be loaded."""

    def __init__(
        self,
        code: str,
        message: str,
        paths: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.paths = paths
