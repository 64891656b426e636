"""Turn a ``GenerationPlan`` into what the file writer materialises.

Nothing here touches the filesystem: the package manifest comes back as a
dict, ``.env.example`` as a string rendered with Jinja2, and the file list as
``FragmentFile`` entries with their inclusion predicates already applied.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from kickoff.generator.models import (
    EnvVarDefinition,
    FragmentFile,
    GenerationPlan,
    GeneratorContext,
)

_TEMPLATE_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=select_autoescape([]),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)

# Manifest group -> key used in the written package.json.
_MANIFEST_KEYS = (
    ("dependencies", "dependencies"),
    ("dev_dependencies", "devDependencies"),
    ("peer_dependencies", "peerDependencies"),
)


def build_package_manifest(
    plan: GenerationPlan,
    context: GeneratorContext,
) -> dict[str, Any] | None:
    """Build the merged package manifest, or ``None`` if there is nothing to write.

    Dependency groups are sorted alphabetically and empty groups are omitted.
    Scripts keep the order in which fragments declared them.
    """
    merged = plan.merged_manifest
    if merged.is_empty():
        return None

    metadata = context.metadata
    manifest: dict[str, Any] = {
        "name": context.project_name,
        "version": "0.1.0",
        "private": True,
        "description": metadata.description or f"{context.project_name} project",
        "author": metadata.author or "",
        "license": metadata.license or "MIT",
    }
    if merged.scripts:
        manifest["scripts"] = dict(merged.scripts)
    for group, key in _MANIFEST_KEYS:
        values: dict[str, str] = getattr(merged, group)
        if values:
            manifest[key] = dict(sorted(values.items()))
    return manifest


def render_env_example(env_vars: list[EnvVarDefinition]) -> str:
    """Render ``.env.example`` with required variables set and optional ones commented out."""
    template = _env.get_template("env.example.j2")
    return template.render(
        required=[var for var in env_vars if var.required],
        optional=[var for var in env_vars if not var.required],
    )


def files_for(plan: GenerationPlan, context: GeneratorContext) -> list[FragmentFile]:
    """Every file the plan produces for *context*, in fragment order.

    Files whose condition is false are dropped.  When two fragments write
    the same destination, the later fragment's file is kept in place of the
    earlier one.
    """
    by_destination: dict[str, FragmentFile] = {}
    for fragment in plan.fragments:
        for file in fragment.files:
            if file.applies_to(context):
                by_destination.pop(file.destination, None)
                by_destination[file.destination] = file
    return list(by_destination.values())


def next_steps(plan: GenerationPlan, context: GeneratorContext) -> list[str]:
    """Shell-oriented instructions to show once the project is written."""
    steps = [f"cd {context.project_name}"]
    merged = plan.merged_manifest

    if merged.dependencies or merged.dev_dependencies:
        steps.append("npm install")

    if any(var.required for var in plan.env_vars):
        steps.append("cp .env.example .env")
        steps.append("# Configure required environment variables in .env")

    if "dev" in merged.scripts:
        steps.append("npm run dev")
    elif "start" in merged.scripts:
        steps.append("npm start")

    for fragment in plan.fragments:
        for step in fragment.post_install_steps:
            if step not in steps and "npm install" not in step:
                steps.append(f"# {fragment.name}: {step}")

    return steps
