"""Shared pytest fixtures for the Kickoff test suite.

Provides reusable fixtures for:
- Project configurations built from presets
- A small substituted knowledge base
- Requirement profiles for the scorer
- Synthetic fragment catalogs
- Mocked Ollama HTTP responses
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from kickoff.generator.models import (
    EnvVarDefinition,
    FragmentCategory,
    ManifestDelta,
    TemplateFragment,
)
from kickoff.knowledge import (
    AuthOption,
    CostTier,
    DatabaseOption,
    FrontendOption,
    KnowledgeBase,
    ORMOption,
)
from kickoff.knowledge.models import Complexity
from kickoff.project import ProjectConfig, config_from_preset
from kickoff.recommender import UserRequirements


# ---------------------------------------------------------------------------
# Project configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def saas_config() -> ProjectConfig:
    """The saas-starter preset: Next.js + Supabase + Drizzle + Supabase Auth."""
    return config_from_preset("saas-starter", "my-saas")


@pytest.fixture
def plain_config() -> ProjectConfig:
    """A Next.js project with every category left at ``"none"``."""
    return ProjectConfig(name="plain-app")


# ---------------------------------------------------------------------------
# Knowledge base
# ---------------------------------------------------------------------------

@pytest.fixture
def tiny_kb() -> KnowledgeBase:
    """A hand-built knowledge base with a handful of options and one conflict."""
    return KnowledgeBase(
        {
            "frontend": (
                FrontendOption(
                    id="fe-simple",
                    name="Simple FE",
                    complexity=Complexity.LOW,
                    monthly_cost=CostTier(free=True),
                ),
            ),
            "database": (
                DatabaseOption(
                    id="db-free",
                    name="Free DB",
                    complexity=Complexity.LOW,
                    monthly_cost=CostTier(free=True, hobbyist="$0/mo"),
                    incompatible_with=frozenset({"orm-legacy"}),
                ),
                DatabaseOption(
                    id="db-paid",
                    name="Paid DB",
                    complexity=Complexity.HIGH,
                    monthly_cost=CostTier(hobbyist="$99/mo", startup="$299/mo"),
                ),
            ),
            "orm": (
                ORMOption(id="orm-modern", name="Modern ORM", complexity=Complexity.LOW),
                ORMOption(id="orm-legacy", name="Legacy ORM", complexity=Complexity.HIGH),
            ),
            "auth": (
                AuthOption(
                    id="auth-hosted",
                    name="Hosted Auth",
                    complexity=Complexity.LOW,
                    monthly_cost=CostTier(free=True, startup="$25/mo"),
                ),
            ),
        }
    )


# ---------------------------------------------------------------------------
# Requirements
# ---------------------------------------------------------------------------

@pytest.fixture
def beginner_requirements() -> UserRequirements:
    """Beginner, free budget, urgent timeline."""
    return UserRequirements(experience="beginner", budget="free", timeline="urgent")


@pytest.fixture
def default_requirements() -> UserRequirements:
    return UserRequirements()


# ---------------------------------------------------------------------------
# Fragments
# ---------------------------------------------------------------------------

def make_fragment(
    fragment_id: str,
    *,
    dependencies: tuple[str, ...] = (),
    incompatible_with: tuple[str, ...] = (),
    manifest: ManifestDelta | None = None,
    env_vars: tuple[EnvVarDefinition, ...] = (),
    post_install_steps: tuple[str, ...] = (),
) -> TemplateFragment:
    """Build a minimal fragment for graph and merge tests."""
    return TemplateFragment(
        id=fragment_id,
        name=fragment_id.upper(),
        category=FragmentCategory.TOOLING,
        path=fragment_id,
        dependencies=dependencies,
        incompatible_with=incompatible_with,
        manifest=manifest,
        env_vars=env_vars,
        post_install_steps=post_install_steps,
    )


@pytest.fixture
def fragment_factory():
    """Expose ``make_fragment`` to tests as a fixture."""
    return make_fragment


# ---------------------------------------------------------------------------
# Mock Ollama
# ---------------------------------------------------------------------------

def _make_ollama_generate_response(payload: dict[str, Any] | str) -> dict[str, Any]:
    """Build a realistic ``/api/generate`` response body."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return {
        "model": "llama3.1:8b",
        "response": text,
        "done": True,
        "total_duration": 1_234_567_890,
    }


@pytest.fixture
def mock_ollama():
    """Factory that patches ``httpx.AsyncClient`` to answer ``/api/tags`` and ``/api/generate``.

    Usage:
        def test_something(mock_ollama):
            with mock_ollama({"issues": [], "confidence": 0.9}) as client:
                ...
                client.post.assert_awaited_once()
    """

    def factory(payload: dict[str, Any] | str, models: tuple[str, ...] = ("llama3.1:8b",)):
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = _make_ollama_generate_response(payload)
        mock_response.raise_for_status = MagicMock()

        tags_response = MagicMock()
        tags_response.status_code = 200
        tags_response.json.return_value = {"models": [{"name": name} for name in models]}
        tags_response.raise_for_status = MagicMock()

        mock_client = AsyncMock()
        mock_client.post = AsyncMock(return_value=mock_response)
        mock_client.get = AsyncMock(return_value=tags_response)
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)

        patcher = patch("httpx.AsyncClient", return_value=mock_client)

        class _Context:
            def __enter__(self):
                patcher.start()
                return mock_client

            def __exit__(self, *exc_info):
                patcher.stop()
                return False

        return _Context()

    return factory
