"""Combined stack validation: rule engine first, optional advisor second."""

from __future__ import annotations

from kickoff.project import ProjectConfig
from kickoff.validation.advisor import SecondaryValidator, failed_review, format_advisory_result
from kickoff.validation.models import (
    AdvisoryResult,
    IssueSeverity,
    StackValidationResult,
    ValidationResult,
)
from kickoff.validation.rules import format_validation_result, validate_constraints

DEFAULT_CONFIDENCE_THRESHOLD = 0.7


def advisory_blocks(result: AdvisoryResult | None, confidence_threshold: float) -> bool:
    """Return ``True`` if *result* should invalidate the stack on its own."""
    if result is None or not result.success:
        return False
    if result.confidence <= confidence_threshold:
        return False
    return any(issue.severity == IssueSeverity.ERROR for issue in result.issues)


def build_summary(
    rules_result: ValidationResult,
    advisory_result: AdvisoryResult | None,
    valid: bool,
) -> str:
    """Render the combined validation summary shown to the user."""
    rule = "─" * 50
    lines = [
        "",
        rule,
        "📋 Stack Validation Results",
        rule,
        "",
        "🔧 Rule-Based Validation:",
    ]
    lines.extend(f"  {line}" for line in format_validation_result(rules_result).split("\n"))

    if advisory_result is not None:
        lines.append("")
        lines.append("🤖 AI-Enhanced Validation:")
        lines.extend(f"  {line}" for line in format_advisory_result(advisory_result).split("\n"))

    lines.append("")
    lines.append(rule)
    if not valid:
        lines.append("❌ Validation FAILED - please fix errors before continuing")
    elif rules_result.warnings or (advisory_result is not None and advisory_result.issues):
        lines.append("⚠️  Validation PASSED with warnings")
    else:
        lines.append("✅ Validation PASSED")
    lines.append(rule)

    return "\n".join(lines)


async def validate_stack(
    config: ProjectConfig,
    advisor: SecondaryValidator | None = None,
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
) -> StackValidationResult:
    """Validate *config* with the rule engine and, optionally, an advisor.

    Rule-engine errors always make the stack invalid.  Advisory ``error``
    issues do so only when the review succeeded and its confidence is
    strictly greater than *confidence_threshold*.  An advisor that raises is
    treated as a failed review.

    Args:
        config: The resolved project configuration.
        advisor: Optional ``SecondaryValidator``.  ``None`` skips the review.
        confidence_threshold: Minimum advisory confidence needed to block.

    Returns:
        A ``StackValidationResult`` with both partial results and a summary.
    """
    rules_result = validate_constraints(config)

    advisory_result: AdvisoryResult | None = None
    if advisor is not None:
        try:
            advisory_result = await advisor.review(config)
        except Exception as exc:  # noqa: BLE001
            advisory_result = failed_review(str(exc) or type(exc).__name__)

    valid = rules_result.valid and not advisory_blocks(advisory_result, confidence_threshold)

    return StackValidationResult(
        valid=valid,
        rules_result=rules_result,
        advisory_result=advisory_result,
        summary=build_summary(rules_result, advisory_result, valid),
    )
