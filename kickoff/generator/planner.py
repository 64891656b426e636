"""Merge an ordered fragment list into a single ``GenerationPlan``."""

from __future__ import annotations

from collections.abc import Sequence

from kickoff.generator.models import (
    EnvVarDefinition,
    FragmentConflict,
    GenerationPlan,
    GeneratorContext,
    ManifestDelta,
    TemplateFragment,
)


def _merge_manifest(
    target: dict[str, dict[str, str]],
    delta: ManifestDelta,
    overridden: list[str],
) -> None:
    """Fold *delta* into *target*, group by group.  Later values win."""
    for group in ManifestDelta.GROUPS:
        for key, value in getattr(delta, group).items():
            current = target[group].get(key)
            if current is not None and current != value:
                label = f"{group}.{key}"
                if label not in overridden:
                    overridden.append(label)
            target[group][key] = value


def create_generation_plan(
    fragments: Sequence[TemplateFragment],
    context: GeneratorContext | None = None,
) -> GenerationPlan:
    """Merge *fragments*, already in dependency order, into one plan.

    * Manifest groups merge independently; on a key collision the later
      fragment wins and the key is listed in ``overridden_keys``.
    * Environment variables are de-duplicated by key; the first declaration
      wins, including its required/optional flag.
    * Post-install steps are de-duplicated by exact text.
    * One conflict is recorded per unordered pair of fragments where either
      side declares the other incompatible.

    A fragment id seen a second time is ignored, so merging an already
    merged list is idempotent.

    Args:
        fragments: Fragments in resolved order.
        context: Generation context; supplies the plan's project name.

    Returns:
        The merged ``GenerationPlan``.
    """
    unique: list[TemplateFragment] = []
    seen_ids: set[str] = set()
    for fragment in fragments:
        if fragment.id not in seen_ids:
            unique.append(fragment)
            seen_ids.add(fragment.id)

    manifest: dict[str, dict[str, str]] = {group: {} for group in ManifestDelta.GROUPS}
    overridden: list[str] = []
    env_vars: list[EnvVarDefinition] = []
    env_keys: set[str] = set()
    steps: list[str] = []

    for fragment in unique:
        if fragment.manifest is not None:
            _merge_manifest(manifest, fragment.manifest, overridden)
        for env_var in fragment.env_vars:
            if env_var.key not in env_keys:
                env_vars.append(env_var)
                env_keys.add(env_var.key)
        for step in fragment.post_install_steps:
            if step not in steps:
                steps.append(step)

    conflicts: list[FragmentConflict] = []
    for index, fragment in enumerate(unique):
        for other in unique[index + 1:]:
            if other.id in fragment.incompatible_with:
                conflicts.append(
                    FragmentConflict(
                        fragment_a=fragment.id,
                        fragment_b=other.id,
                        reason=f"{fragment.name} is incompatible with {other.name}",
                    )
                )
            elif fragment.id in other.incompatible_with:
                conflicts.append(
                    FragmentConflict(
                        fragment_a=other.id,
                        fragment_b=fragment.id,
                        reason=f"{other.name} is incompatible with {fragment.name}",
                    )
                )

    return GenerationPlan(
        project_name=context.project_name if context is not None else "",
        fragments=unique,
        merged_manifest=ManifestDelta(**manifest),
        env_vars=env_vars,
        post_install_steps=steps,
        conflicts=conflicts,
        overridden_keys=overridden,
    )
