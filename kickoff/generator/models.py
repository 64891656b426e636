"""Pydantic v2 models for template fragments and generation plans.

A *fragment* is one independently composable unit of generated output: a set
of files, a manifest delta, environment variables and post-install steps.
Fragments declare which other fragments they need (``dependencies``) and
which they cannot co-exist with (``incompatible_with``).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from kickoff.knowledge.models import Runtime, StackOption
from kickoff.project import ProjectType
from kickoff.validation.models import ValidationResult


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FragmentCategory(str, Enum):
    BASE = "base"
    RUNTIME = "runtime"
    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    ORM = "orm"
    AUTH = "auth"
    AI = "ai"
    DEPLOYMENT = "deployment"
    TOOLING = "tooling"


# ---------------------------------------------------------------------------
# Generation context
# ---------------------------------------------------------------------------

class FeatureFlags(BaseModel):
    model_config = ConfigDict(frozen=True)

    docker: bool = False
    github_actions: bool = False
    tests: bool = True
    linting: bool = True


class ProjectMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    author: str | None = None
    description: str | None = None
    repository: str | None = None
    license: str | None = None


class GeneratorContext(BaseModel):
    """Everything a fragment's files and conditions may depend on."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory and package name")
    project_type: ProjectType = Field(default=ProjectType.NEXTJS)
    runtime: Runtime = Field(default=Runtime.NODE)
    selections: dict[str, str] = Field(
        default_factory=dict, description="Category -> selected id, 'none' already dropped"
    )
    options: dict[str, StackOption] = Field(
        default_factory=dict, description="Category -> resolved catalog option"
    )
    features: FeatureFlags = Field(default_factory=FeatureFlags)
    metadata: ProjectMetadata = Field(default_factory=ProjectMetadata)


# ---------------------------------------------------------------------------
# Fragments
# ---------------------------------------------------------------------------

class FragmentFile(BaseModel):
    """One template file, optionally included only when ``condition`` holds."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="Template path relative to the fragment directory")
    destination: str = Field(..., description="Output path relative to the project root")
    condition: Callable[[GeneratorContext], bool] | None = Field(default=None, exclude=True)

    def applies_to(self, context: GeneratorContext) -> bool:
        return self.condition is None or self.condition(context)


class ManifestDelta(BaseModel):
    """Package-manifest keys contributed by a fragment, grouped independently."""

    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict)
    scripts: dict[str, str] = Field(default_factory=dict)
    peer_dependencies: dict[str, str] = Field(default_factory=dict)

    GROUPS: ClassVar[tuple[str, ...]] = (
        "dependencies",
        "dev_dependencies",
        "scripts",
        "peer_dependencies",
    )

    def is_empty(self) -> bool:
        return not any(getattr(self, group) for group in self.GROUPS)


class EnvVarDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    default_value: str | None = None
    description: str = ""
    required: bool = False
    secret: bool = False


class TemplateFragment(BaseModel):
    """A node in the fragment dependency graph."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: FragmentCategory
    path: str = Field(..., description="Template directory holding this fragment's files")
    description: str = ""
    dependencies: tuple[str, ...] = Field(
        default=(), description="Fragment ids that must be selected and emitted earlier"
    )
    incompatible_with: tuple[str, ...] = Field(default=())
    files: tuple[FragmentFile, ...] = Field(default=())
    manifest: ManifestDelta | None = Field(default=None)
    env_vars: tuple[EnvVarDefinition, ...] = Field(default=())
    post_install_steps: tuple[str, ...] = Field(default=())
    documentation_url: str | None = None


# ---------------------------------------------------------------------------
# Resolution & planning results
# ---------------------------------------------------------------------------

class DependencyReport(BaseModel):
    """Every missing dependency and conflict among a selection, collected at once."""

    valid: bool = True
    missing_dependencies: list[str] = Field(default_factory=list)
    conflicts: list[str] = Field(default_factory=list)


class FragmentConflict(BaseModel):
    fragment_a: str
    fragment_b: str
    reason: str


class GenerationPlan(BaseModel):
    """The merged, ready-to-write result of fragment composition."""

    project_name: str = ""
    fragments: list[TemplateFragment] = Field(default_factory=list)
    merged_manifest: ManifestDelta = Field(default_factory=ManifestDelta)
    env_vars: list[EnvVarDefinition] = Field(default_factory=list)
    post_install_steps: list[str] = Field(default_factory=list)
    conflicts: list[FragmentConflict] = Field(default_factory=list)
    overridden_keys: list[str] = Field(
        default_factory=list,
        description="'group.key' entries whose value a later fragment replaced",
    )

    @property
    def fragment_ids(self) -> list[str]:
        return [fragment.id for fragment in self.fragments]


class GenerationOutcome(BaseModel):
    """What the writer needs, or the reasons generation was refused."""

    success: bool = False
    validation: ValidationResult = Field(default_factory=ValidationResult)
    plan: GenerationPlan | None = None
    files: list[FragmentFile] = Field(default_factory=list)
    package_manifest: dict[str, Any] | None = None
    env_example: str | None = None
    next_steps: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
