"""Kickoff fragment composition.

Collects the template fragments a configuration needs, orders them by
dependency and merges them into one ``GenerationPlan`` for the file writer.

Usage::

    from kickoff.generator import prepare_generation

    outcome = prepare_generation(config)
    if outcome.success:
        for file in outcome.files:
            ...
"""

from kickoff.generator.collector import (
    build_generator_context,
    collect_fragments,
    is_fragment_compatible,
    suggested_fragments,
)
from kickoff.generator.engine import prepare_generation, validate_context
from kickoff.generator.fragments import ALL_FRAGMENTS
from kickoff.generator.models import (
    DependencyReport,
    EnvVarDefinition,
    FeatureFlags,
    FragmentCategory,
    FragmentConflict,
    FragmentFile,
    GenerationOutcome,
    GenerationPlan,
    GeneratorContext,
    ManifestDelta,
    ProjectMetadata,
    TemplateFragment,
)
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
    default_registry,
    resolve_fragment_order,
)

__all__ = [
    "ALL_FRAGMENTS",
    "CircularDependencyError",
    "DependencyReport",
    "EnvVarDefinition",
    "FeatureFlags",
    "FragmentCategory",
    "FragmentConflict",
    "FragmentFile",
    "FragmentRegistry",
    "GenerationOutcome",
    "GenerationPlan",
    "GeneratorContext",
    "ManifestDelta",
    "ProjectMetadata",
    "TemplateFragment",
    "build_generator_context",
    "build_package_manifest",
    "check_fragment_dependencies",
    "collect_fragments",
    "create_generation_plan",
    "default_registry",
    "files_for",
    "is_fragment_compatible",
    "next_steps",
    "prepare_generation",
    "render_env_example",
    "resolve_fragment_order",
    "suggested_fragments",
    "validate_context",
]
