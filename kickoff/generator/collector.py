"""Map a project configuration onto the fragments that should be generated."""

from __future__ import annotations

from collections.abc import Sequence

from kickoff.generator.models import (
    FeatureFlags,
    GeneratorContext,
    ProjectMetadata,
    TemplateFragment,
)
from kickoff.generator.registry import FragmentRegistry, default_registry
from kickoff.knowledge.base import KnowledgeBase, default_knowledge_base
from kickoff.knowledge.models import StackOption
from kickoff.project import ProjectConfig


def build_generator_context(
    config: ProjectConfig,
    kb: KnowledgeBase | None = None,
    metadata: ProjectMetadata | None = None,
) -> GeneratorContext:
    """Derive the ``GeneratorContext`` for *config*.

    Project types with no catalog framework (``cli``, ``mcp-server``,
    ``worker``, ``library``) are selected under ``backend`` by their type
    value, which is also the id of their fragment.
    """
    kb = kb or default_knowledge_base()
    selections = config.selections()
    if config.framework is None and config.type.value not in selections.values():
        selections = {"backend": config.type.value, **selections}

    options: dict[str, StackOption] = {}
    for category, option_id in selections.items():
        option = kb.get_option(option_id)
        if option is not None:
            options[category] = option

    if metadata is None:
        metadata = ProjectMetadata(description=config.description or None)

    return GeneratorContext(
        project_name=config.name,
        project_type=config.type,
        runtime=config.runtime,
        selections=selections,
        options=options,
        features=FeatureFlags(
            docker=config.include_docker,
            github_actions=config.include_github_actions,
            tests=config.include_tests,
            linting=config.include_linting,
        ),
        metadata=metadata,
    )


def collect_fragments(
    context: GeneratorContext,
    registry: FragmentRegistry | None = None,
) -> list[TemplateFragment]:
    """Pick the fragments for *context*, in selection order.

    ``base`` always comes first.  Each selection value that names a fragment
    is added once; ``docker`` and ``github-actions`` follow their feature
    flags.  Values without a fragment (databases, ORMs and so on) are
    skipped.
    """
    if registry is None:
        registry = default_registry()
    collected: list[TemplateFragment] = []
    seen: set[str] = set()

    def _add(fragment_id: str) -> None:
        fragment = registry.get(fragment_id)
        if fragment is not None and fragment.id not in seen:
            collected.append(fragment)
            seen.add(fragment.id)

    _add("base")
    for value in context.selections.values():
        if value and value != "none":
            _add(value)
    if context.features.docker:
        _add("docker")
    if context.features.github_actions:
        _add("github-actions")

    return collected


def is_fragment_compatible(
    fragment: TemplateFragment,
    selected: Sequence[TemplateFragment],
) -> bool:
    """Return ``True`` if *fragment* conflicts with nothing in *selected*, either way."""
    selected_ids = {other.id for other in selected}
    if any(fragment.id in other.incompatible_with for other in selected):
        return False
    return not any(other in selected_ids for other in fragment.incompatible_with)


def suggested_fragments(
    current: Sequence[TemplateFragment],
    registry: FragmentRegistry | None = None,
) -> list[TemplateFragment]:
    """Fragments that could be added to *current* without conflicts or missing dependencies."""
    if registry is None:
        registry = default_registry()
    current_ids = {fragment.id for fragment in current}
    return [
        fragment
        for fragment in registry
        if fragment.id not in current_ids
        and is_fragment_compatible(fragment, current)
        and all(dependency in current_ids for dependency in fragment.dependencies)
    ]
