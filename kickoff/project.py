"""Project configuration record and the built-in presets.

``ProjectConfig`` is the fully resolved answer set for one generation run:
one option id (or ``"none"``) per category plus project-wide flags.  It is
built once, by a preset or by whatever collects answers from the user, and
is read-only thereafter.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kickoff.knowledge.models import Runtime

NONE = "none"


class ProjectType(str, Enum):
    """Kind of project being generated."""
    NEXTJS = "nextjs"
    TANSTACK_START = "tanstack-start"
    VITE_REACT = "vite-react"
    STATIC = "static"
    HONO_API = "hono-api"
    ELYSIA_API = "elysia-api"
    EXPRESS_API = "express-api"
    FRESH_API = "fresh-api"
    FASTAPI = "fastapi"
    LITESTAR = "litestar"
    GIN_API = "gin-api"
    FIBER_API = "fiber-api"
    ECHO_API = "echo-api"
    AXUM_API = "axum-api"
    ACTIX_API = "actix-api"
    WORKER = "worker"
    CLI = "cli"
    MCP_SERVER = "mcp-server"
    LIBRARY = "library"


class ComplexityTrack(str, Enum):
    QUICK = "quick"
    STANDARD = "standard"
    PRODUCTION = "production"


# Project type -> (knowledge category, option id) of the framework it implies.
_FRAMEWORK_FOR_TYPE: dict[ProjectType, tuple[str, str]] = {
    ProjectType.NEXTJS: ("frontend", "nextjs"),
    ProjectType.TANSTACK_START: ("frontend", "tanstack-start"),
    ProjectType.VITE_REACT: ("frontend", "vite-react"),
    ProjectType.STATIC: ("frontend", "static"),
    ProjectType.HONO_API: ("backend", "hono"),
    ProjectType.ELYSIA_API: ("backend", "elysia"),
    ProjectType.EXPRESS_API: ("backend", "express"),
    ProjectType.FRESH_API: ("backend", "fresh"),
    ProjectType.FASTAPI: ("backend", "fastapi"),
    ProjectType.LITESTAR: ("backend", "litestar"),
    ProjectType.GIN_API: ("backend", "gin"),
    ProjectType.FIBER_API: ("backend", "fiber"),
    ProjectType.ECHO_API: ("backend", "echo"),
    ProjectType.AXUM_API: ("backend", "axum"),
    ProjectType.ACTIX_API: ("backend", "actix"),
}


class ProjectConfig(BaseModel):
    """Resolved configuration for one project.

    Every category field holds a catalog option id or the ``"none"``
    sentinel.  Instances are frozen; use ``model_copy(update=...)`` to derive
    a variant.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Project name, used for the package name")
    description: str = Field(default="")
    preset: str = Field(default=NONE)
    complexity_track: ComplexityTrack = Field(default=ComplexityTrack.STANDARD)
    type: ProjectType = Field(default=ProjectType.NEXTJS)
    runtime: Runtime = Field(default=Runtime.NODE)
    port: int = Field(default=3000, ge=1, le=65535)

    database_provider: str = Field(default=NONE)
    orm: str = Field(default=NONE)
    auth_provider: str = Field(default=NONE)
    ai_framework: str = Field(default=NONE)
    vector_db: str = Field(default=NONE)
    embedding_provider: str = Field(default=NONE)
    local_ai: str = Field(default=NONE)
    web_server: str = Field(default=NONE)

    use_design_system: bool = Field(default=False)
    include_docker: bool = Field(default=False)
    include_github_actions: bool = Field(default=False)
    include_tests: bool = Field(default=True)
    include_linting: bool = Field(default=True)

    domain: str | None = Field(default=None)
    github_username: str = Field(default="")

    @property
    def framework(self) -> tuple[str, str] | None:
        """``(category, option id)`` of the framework implied by ``type``, if any."""
        return _FRAMEWORK_FOR_TYPE.get(self.type)

    def selections(self) -> dict[str, str]:
        """Return ``{knowledge category: option id}`` with ``"none"`` dropped.

        The framework implied by ``type`` is included under ``frontend`` or
        ``backend`` so the whole stack can be checked against the
        compatibility matrix.
        """
        pairs: list[tuple[str, str]] = []
        if self.framework is not None:
            pairs.append(self.framework)
        pairs.extend(
            [
                ("database", self.database_provider),
                ("orm", self.orm),
                ("auth", self.auth_provider),
                ("ai", self.ai_framework),
                ("vector-db", self.vector_db),
                ("embedding", self.embedding_provider),
                ("local-ai", self.local_ai),
                ("web-server", self.web_server),
            ]
        )
        return {category: value for category, value in pairs if value and value != NONE}


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


class Preset(BaseModel):
    """A named, ready-made stack."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    description: str = ""
    values: dict[str, Any] = Field(default_factory=dict)


PRESETS: dict[str, Preset] = {
    preset.name: preset
    for preset in (
        Preset(
            name="saas-starter",
            label="SaaS Starter - Next.js + Supabase + Drizzle",
            description="Production SaaS with auth and payments ready",
            values={
                "type": "nextjs", "complexity_track": "production", "runtime": "node",
                "database_provider": "supabase", "orm": "drizzle", "auth_provider": "supabase-auth",
                "use_design_system": True,
            },
        ),
        Preset(
            name="api-microservice",
            label="API Microservice - Hono + Neon + Drizzle",
            description="Serverless API microservice",
            values={
                "type": "hono-api", "complexity_track": "standard", "runtime": "bun",
                "database_provider": "neon", "orm": "drizzle",
            },
        ),
        Preset(
            name="tanstack-hono",
            label="TanStack + Hono - TanStack Start + Turso + Better Auth",
            description="Type-safe full-stack with edge database",
            values={
                "type": "tanstack-start", "complexity_track": "standard", "runtime": "bun",
                "database_provider": "turso", "orm": "drizzle", "auth_provider": "better-auth",
                "use_design_system": True,
            },
        ),
        Preset(
            name="edge-api",
            label="Edge API - Hono + Turso + Bun",
            description="Blazing fast edge-first API",
            values={
                "type": "hono-api", "complexity_track": "quick", "runtime": "bun",
                "database_provider": "turso", "orm": "drizzle",
            },
        ),
        Preset(
            name="quick-cli",
            label="Quick CLI - Command-line tool",
            description="CLI tool with Commander",
            values={"type": "cli", "complexity_track": "quick", "runtime": "node"},
        ),
        Preset(
            name="landing-page",
            label="Landing Page - Static site",
            description="Static site with modern tooling",
            values={"type": "static", "complexity_track": "quick", "runtime": "node"},
        ),
        Preset(
            name="mcp-tool",
            label="MCP Tool - AI tool server",
            description="MCP server for AI tools",
            values={"type": "mcp-server", "complexity_track": "quick", "runtime": "node"},
        ),
        Preset(
            name="ai-rag-app",
            label="AI RAG App - Next.js + Supabase Vector + Vercel AI",
            description="RAG application with vector search",
            values={
                "type": "nextjs", "complexity_track": "standard", "runtime": "node",
                "database_provider": "supabase", "orm": "drizzle", "auth_provider": "supabase-auth",
                "use_design_system": True, "vector_db": "supabase-vector",
                "embedding_provider": "openai-embeddings", "ai_framework": "vercel-ai",
            },
        ),
        Preset(
            name="ai-agent",
            label="AI Agent - Hono + Ollama + LangChain (local)",
            description="Local AI agent with no cloud costs",
            values={
                "type": "hono-api", "complexity_track": "standard", "runtime": "bun",
                "database_provider": "turso", "orm": "drizzle", "vector_db": "chromadb",
                "embedding_provider": "local-embeddings", "local_ai": "ollama",
                "ai_framework": "langchain",
            },
        ),
        Preset(
            name="fastapi-starter",
            label="FastAPI Starter - FastAPI + PostgreSQL + SQLAlchemy",
            description="Python async API",
            values={
                "type": "fastapi", "complexity_track": "standard", "runtime": "python",
                "database_provider": "postgres-local", "orm": "sqlalchemy",
            },
        ),
        Preset(
            name="python-ml-api",
            label="Python ML API - FastAPI + pgvector + LangChain",
            description="Python ML/AI backend",
            values={
                "type": "fastapi", "complexity_track": "standard", "runtime": "python",
                "database_provider": "postgres-local", "orm": "sqlalchemy", "vector_db": "pgvector",
                "embedding_provider": "openai-embeddings", "ai_framework": "langchain",
            },
        ),
        Preset(
            name="go-microservice",
            label="Go Microservice - Gin + PostgreSQL + GORM",
            description="High-performance Go API",
            values={
                "type": "gin-api", "complexity_track": "standard", "runtime": "go",
                "database_provider": "postgres-local", "orm": "gorm",
            },
        ),
        Preset(
            name="rust-api",
            label="Rust API - Axum + PostgreSQL + SQLx",
            description="Maximum performance Rust API",
            values={
                "type": "axum-api", "complexity_track": "standard", "runtime": "rust",
                "database_provider": "postgres-local", "orm": "sqlx-rust",
            },
        ),
        Preset(
            name="mlx-local",
            label="MLX Local - FastAPI + MLX + Apple Silicon",
            description="Apple Silicon optimized AI",
            values={
                "type": "fastapi", "complexity_track": "standard", "runtime": "python",
                "database_provider": "sqlite", "orm": "sqlalchemy", "vector_db": "chromadb",
                "embedding_provider": "local-embeddings", "local_ai": "mlx",
                "ai_framework": "langchain",
            },
        ),
    )
}


def list_presets() -> list[Preset]:
    """Return every built-in preset in display order."""
    return list(PRESETS.values())


def config_from_preset(preset_name: str, project_name: str, **overrides: Any) -> ProjectConfig:
    """Build a ``ProjectConfig`` from a named preset.

    Args:
        preset_name: Key in ``PRESETS``.
        project_name: Value for ``ProjectConfig.name``.
        **overrides: Field values applied on top of the preset.

    Returns:
        A validated, frozen ``ProjectConfig``.

    Raises:
        KeyError: If *preset_name* is not a known preset.
    """
    if preset_name not in PRESETS:
        raise KeyError(f"Unknown preset: {preset_name!r}")
    values: dict[str, Any] = {**PRESETS[preset_name].values, **overrides}
    return ProjectConfig(**{"name": project_name, "preset": preset_name, **values})
