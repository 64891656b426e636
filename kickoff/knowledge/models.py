"""Pydantic v2 models for the stack knowledge base.

Every selectable technology is a ``StackOption``.  Each catalog category adds
a handful of category-specific fields and is tagged with a literal
``category`` so the full set can be treated as one discriminated union
(``AnyStackOption``).
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Complexity(str, Enum):
    """Learning / operational complexity of an option."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Scalability(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNLIMITED = "unlimited"


class Runtime(str, Enum):
    """Primary language runtime of a generated project."""
    NODE = "node"
    BUN = "bun"
    DENO = "deno"
    PYTHON = "python"
    GO = "go"
    RUST = "rust"


class KnowledgeCategory(str, Enum):
    """Catalog categories known to the knowledge base."""
    DATABASE = "database"
    ORM = "orm"
    AUTH = "auth"
    FRONTEND = "frontend"
    BACKEND = "backend"
    AI = "ai"
    VECTOR_DB = "vector-db"
    EMBEDDING = "embedding"
    LOCAL_AI = "local-ai"
    WEB_SERVER = "web-server"


_PRICE_RE = re.compile(r"\d+(?:\.\d+)?")


# ---------------------------------------------------------------------------
# Cost
# ---------------------------------------------------------------------------

class CostTier(BaseModel):
    """Monthly cost profile.  Price bands are free-form strings like ``"$0-25/mo"``."""

    model_config = ConfigDict(frozen=True)

    free: bool = Field(default=False, description="Whether a free tier exists")
    hobbyist: str | None = Field(default=None, description="Hobbyist price band")
    startup: str | None = Field(default=None, description="Startup price band")
    enterprise: str | None = Field(default=None, description="Enterprise price band")

    def bands(self) -> list[str]:
        """Return the disclosed price bands, cheapest tier first."""
        return [b for b in (self.hobbyist, self.startup, self.enterprise) if b]

    def lowest_price(self) -> float | None:
        """Lowest number found in the cheapest disclosed band.

        ``"$25-100/mo"`` -> ``25.0``.  Returns ``None`` when no band is
        disclosed or the band carries no number.
        """
        for band in self.bands():
            match = _PRICE_RE.search(band)
            if match:
                return float(match.group(0))
        return None


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class StackOption(BaseModel):
    """Fields shared by every catalog entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable token, e.g. 'drizzle'")
    name: str = Field(..., description="Display name")
    description: str = Field(default="")
    pros: tuple[str, ...] = Field(default=())
    cons: tuple[str, ...] = Field(default=())
    tradeoffs: tuple[str, ...] = Field(default=())
    best_for: tuple[str, ...] = Field(default=())
    monthly_cost: CostTier = Field(default_factory=CostTier)
    required_env_vars: tuple[str, ...] = Field(default=())
    compatible_with: tuple[str, ...] = Field(
        default=(), description="Known-good partners, most recommended first"
    )
    incompatible_with: frozenset[str] = Field(default=frozenset())
    complexity: Complexity = Field(default=Complexity.MEDIUM)
    documentation_url: str | None = Field(default=None)
    logo_emoji: str | None = Field(default=None)

    @field_validator("compatible_with")
    @classmethod
    def _dedupe_partners(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(value))

    @model_validator(mode="after")
    def _check_relations(self) -> "StackOption":
        if self.id in self.compatible_with or self.id in self.incompatible_with:
            raise ValueError(f"option '{self.id}' lists itself in its relation sets")
        overlap = set(self.compatible_with) & self.incompatible_with
        if overlap:
            raise ValueError(
                f"option '{self.id}' declares {sorted(overlap)} both compatible and incompatible"
            )
        return self


class DatabaseOption(StackOption):
    category: Literal["database"] = "database"
    type: Literal["sql", "nosql", "graph", "key-value", "document"] = "sql"
    hosting: Literal["serverless", "managed", "self-hosted", "baas"] = "managed"
    scalability: Scalability = Scalability.MEDIUM
    supported_runtimes: tuple[Runtime, ...] = ()
    connection_pooling: bool = False
    realtime_support: bool = False
    branching_support: bool = False


class ORMOption(StackOption):
    category: Literal["orm"] = "orm"
    supported_databases: tuple[str, ...] = ()
    type_safety: bool = False
    migrations: bool = False
    query_style: Literal["sql-like", "object-oriented", "query-builder", "schema-first"] = "sql-like"
    supported_runtimes: tuple[Runtime, ...] = ()


class AuthOption(StackOption):
    category: Literal["auth"] = "auth"
    type: Literal["hosted", "self-hosted", "platform-specific"] = "hosted"
    social_login: bool = False
    mfa: bool = False
    sso: bool = False
    prebuilt_components: bool = False
    supported_runtimes: tuple[Runtime, ...] = ()


class FrontendOption(StackOption):
    category: Literal["frontend"] = "frontend"
    type: Literal["full-stack", "spa", "static", "islands"] = "spa"
    ssr: bool = False
    ssg: bool = False
    server_components: bool = False
    type_safe: bool = False
    bundler: str = ""


class BackendOption(StackOption):
    category: Literal["backend"] = "backend"
    runtime: Runtime = Runtime.NODE
    type: Literal["minimal", "batteries-included", "microframework"] = "minimal"
    edge_support: bool = False
    websocket_support: bool = False
    openapi_support: bool = False
    performance_rating: Literal["fast", "very-fast", "blazing"] = "fast"


class AIOption(StackOption):
    category: Literal["ai"] = "ai"
    type: Literal["sdk", "framework", "local"] = "sdk"
    streaming: bool = False
    structured_output: bool = False
    agent_support: bool = False
    supported_providers: tuple[str, ...] = ()
    supported_runtimes: tuple[Runtime, ...] = ()


class VectorDBOption(StackOption):
    category: Literal["vector-db"] = "vector-db"
    hosting: Literal["managed", "self-hosted", "embedded"] = "managed"
    max_dimensions: int = 0
    hybrid_search: bool = False
    filtering: bool = False
    supported_runtimes: tuple[Runtime, ...] = ()


class EmbeddingOption(StackOption):
    category: Literal["embedding"] = "embedding"
    type: Literal["cloud", "local"] = "cloud"
    models: tuple[str, ...] = ()
    max_tokens: int = 0
    cost_per_1m_tokens: str | None = None
    supported_runtimes: tuple[Runtime, ...] = ()


class LocalAIOption(StackOption):
    category: Literal["local-ai"] = "local-ai"
    platform: Literal["cross-platform", "apple-silicon", "linux-cuda", "docker"] = "cross-platform"
    gpu_required: bool = False
    min_memory_gb: int = 8
    api_compatibility: Literal["openai", "custom", "both"] = "openai"


class WebServerOption(StackOption):
    category: Literal["web-server"] = "web-server"
    auto_ssl: bool = False
    config_style: Literal["simple", "complex", "code"] = "simple"
    docker_native: bool = False


AnyStackOption = Annotated[
    Union[
        DatabaseOption,
        ORMOption,
        AuthOption,
        FrontendOption,
        BackendOption,
        AIOption,
        VectorDBOption,
        EmbeddingOption,
        LocalAIOption,
        WebServerOption,
    ],
    Field(discriminator="category"),
]


# ---------------------------------------------------------------------------
# Compatibility
# ---------------------------------------------------------------------------

class CompatibilityEntry(BaseModel):
    """Relations declared by one option id."""

    model_config = ConfigDict(frozen=True)

    compatible_with: frozenset[str] = Field(default=frozenset())
    incompatible_with: frozenset[str] = Field(default=frozenset())
    notes: dict[str, str] = Field(default_factory=dict)


class CompatibilityRule(BaseModel):
    """One directed relation flattened out of the matrix."""
    source: str
    target: str
    compatible: bool
    reason: str | None = None


class SelectionConflict(BaseModel):
    option_a: str
    option_b: str
    reason: str


class SelectionCheck(BaseModel):
    """Result of checking a whole selection against the matrix."""
    valid: bool = True
    conflicts: list[SelectionConflict] = Field(default_factory=list)
