"""Generation orchestration: validate, collect, resolve, merge.

``prepare_generation`` is the single entry point the file writer needs.  It
refuses to plan while any error-severity constraint matches, reports
fragment problems as warnings, and turns a dependency cycle into an error
rather than a partial plan.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from kickoff.generator.collector import build_generator_context, collect_fragments
from kickoff.generator.models import GenerationOutcome, GeneratorContext, ProjectMetadata
from kickoff.generator.output import (
    build_package_manifest,
    files_for,
    next_steps,
    render_env_example,
)
from kickoff.generator.planner import create_generation_plan
from kickoff.generator.registry import (
    CircularDependencyError,
    FragmentRegistry,
    check_fragment_dependencies,
    resolve_fragment_order,
)
from kickoff.knowledge.base import KnowledgeBase
from kickoff.project import ProjectConfig
from kickoff.validation.models import Constraint
from kickoff.validation.rules import CONSTRAINTS, validate_constraints

_PROJECT_NAME_RE = re.compile(r"^[a-z0-9-_]+$", re.IGNORECASE)


def validate_context(context: GeneratorContext) -> list[str]:
    """Return the problems that make *context* unusable; empty when it is fine."""
    errors: list[str] = []
    if not context.project_name:
        errors.append("Project name is required")
    elif not _PROJECT_NAME_RE.match(context.project_name):
        errors.append("Project name must only contain letters, numbers, hyphens, and underscores")
    return errors


def prepare_generation(
    config: ProjectConfig,
    registry: FragmentRegistry | None = None,
    constraints: Sequence[Constraint] = CONSTRAINTS,
    kb: KnowledgeBase | None = None,
    metadata: ProjectMetadata | None = None,
) -> GenerationOutcome:
    """Validate *config* and, if it passes, build everything the writer needs.

    Args:
        config: The resolved project configuration.
        registry: Fragment catalog.  Defaults to the built-in fragments.
        constraints: Rules to validate against.
        kb: Knowledge base used to resolve selected options.
        metadata: Author, license and similar manifest metadata.

    Returns:
        A ``GenerationOutcome``.  ``success`` is ``False`` when constraint
        errors exist, the project name is invalid or the fragment graph has
        a cycle; in those cases ``plan`` is ``None`` and ``errors`` says why.
    """
    validation = validate_constraints(config, constraints)
    warnings = [violation.message for violation in validation.warnings]

    if not validation.valid:
        return GenerationOutcome(
            success=False,
            validation=validation,
            warnings=warnings,
            errors=[violation.message for violation in validation.errors],
        )

    context = build_generator_context(config, kb=kb, metadata=metadata)
    context_errors = validate_context(context)
    if context_errors:
        return GenerationOutcome(
            success=False,
            validation=validation,
            warnings=warnings,
            errors=context_errors,
        )

    fragments = collect_fragments(context, registry)
    report = check_fragment_dependencies(fragments)
    warnings.extend(report.missing_dependencies)

    try:
        ordered = resolve_fragment_order(fragments)
    except CircularDependencyError as exc:
        return GenerationOutcome(
            success=False,
            validation=validation,
            warnings=warnings,
            errors=[f"Dependency resolution error: {exc}"],
        )

    plan = create_generation_plan(ordered, context)
    warnings.extend(conflict.reason for conflict in plan.conflicts)
    warnings.extend(
        f"Manifest entry '{key}' is overridden by a later fragment" for key in plan.overridden_keys
    )

    return GenerationOutcome(
        success=True,
        validation=validation,
        plan=plan,
        files=files_for(plan, context),
        package_manifest=build_package_manifest(plan, context),
        env_example=render_env_example(plan.env_vars) if plan.env_vars else None,
        next_steps=next_steps(plan, context),
        warnings=warnings,
    )
