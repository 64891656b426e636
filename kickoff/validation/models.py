"""Data models for stack validation.

``Constraint`` is a frozen dataclass because it carries a predicate
callable; everything that crosses a boundary (violations, results, advisory
output) is a pydantic model so it can be dumped to JSON unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from kickoff.project import ProjectConfig


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class IssueSeverity(str, Enum):
    """Severity levels reported by the advisory reviewer."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Constraint:
    """A named predicate over a resolved ``ProjectConfig``.

    When ``check`` returns ``True`` the constraint *matches* and a violation
    of ``severity`` is reported.  Predicates must be pure.
    """

    id: str
    severity: Severity
    check: Callable[["ProjectConfig"], bool]
    message: str
    docs: str | None = None


class ConstraintViolation(BaseModel):
    id: str
    message: str
    docs: str | None = None


class ValidationResult(BaseModel):
    """Outcome of running every constraint against one configuration."""

    valid: bool = Field(default=True, description="True when no error-severity constraint matched")
    errors: list[ConstraintViolation] = Field(default_factory=list)
    warnings: list[ConstraintViolation] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Advisory review
# ---------------------------------------------------------------------------


class AdvisoryIssue(BaseModel):
    severity: IssueSeverity = IssueSeverity.WARNING
    title: str = ""
    description: str = ""
    suggestion: str | None = None


class AdvisoryResult(BaseModel):
    """Output of an optional secondary reviewer."""

    success: bool = Field(default=False, description="Whether the reviewer produced an analysis")
    provider: str | None = Field(default=None, description="Which reviewer produced the result")
    analysis: str = Field(default="", description="Raw reviewer text or failure reason")
    issues: list[AdvisoryIssue] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class StackValidationResult(BaseModel):
    """Combined result of rule-based and advisory validation."""

    valid: bool
    rules_result: ValidationResult
    advisory_result: AdvisoryResult | None = None
    summary: str = ""
