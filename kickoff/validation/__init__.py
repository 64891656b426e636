"""Stack validation: deterministic constraints plus an optional advisory review.

Usage::

    from kickoff.validation import validate_constraints, validate_stack

    result = validate_constraints(config)
    if not result.valid:
        print(format_validation_result(result))

    combined = await validate_stack(config, advisor=OllamaAdvisor())
"""

from kickoff.validation.advisor import (
    OllamaAdvisor,
    SecondaryValidator,
    format_advisory_result,
    parse_advisory_response,
)
from kickoff.validation.models import (
    AdvisoryIssue,
    AdvisoryResult,
    Constraint,
    ConstraintViolation,
    IssueSeverity,
    Severity,
    StackValidationResult,
    ValidationResult,
)
from kickoff.validation.rules import CONSTRAINTS, format_validation_result, validate_constraints
from kickoff.validation.validator import validate_stack

__all__ = [
    "AdvisoryIssue",
    "AdvisoryResult",
    "CONSTRAINTS",
    "Constraint",
    "ConstraintViolation",
    "IssueSeverity",
    "OllamaAdvisor",
    "SecondaryValidator",
    "Severity",
    "StackValidationResult",
    "ValidationResult",
    "format_advisory_result",
    "format_validation_result",
    "parse_advisory_response",
    "validate_constraints",
    "validate_stack",
]
