"""Unit tests for the pipeline orchestrator (kickoff.pipeline).

Tests cover:
- PipelineError exception
- requirements_for mapping from project type and selections
- Pipeline.__init__ advisor wiring
- Pipeline.run stage selection, success and failure handling
- state_to_json serialisation
- main() CLI argument handling
"""

from __future__ import annotations

import json

import pytest

from kickoff.config import Config, UserDefaults
from kickoff.pipeline import Pipeline, PipelineError, main, requirements_for, state_to_json
from kickoff.project import ProjectConfig, config_from_preset
from kickoff.recommender import ProjectKind, StackRecommendation, UserRequirements
from kickoff.utils import console
from kickoff.validation import (
    AdvisoryIssue,
    AdvisoryResult,
    IssueSeverity,
    OllamaAdvisor,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class StubAdvisor:
    """Advisory reviewer returning a canned result."""

    def __init__(self, result: AdvisoryResult) -> None:
        self.result = result
        self.reviewed: list[str] = []

    async def review(self, config: ProjectConfig) -> AdvisoryResult:
        self.reviewed.append(config.name)
        return self.result


def _blocking_review() -> AdvisoryResult:
    return AdvisoryResult(
        success=True,
        provider="stub",
        confidence=0.95,
        issues=[
            AdvisoryIssue(
                severity=IssueSeverity.ERROR, title="Mismatch", description="Bad pairing"
            )
        ],
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Strip KICKOFF_* variables and point saved defaults at an empty temp dir."""
    for key in (
        "KICKOFF_USE_ADVISOR",
        "KICKOFF_VERBOSE",
        "KICKOFF_GITHUB_USERNAME",
        "KICKOFF_OLLAMA_URL",
        "KICKOFF_OLLAMA_MODEL",
        "KICKOFF_AUTHOR",
        "KICKOFF_LICENSE",
    ):
        monkeypatch.delenv(key, raising=False)
    defaults_path = tmp_path / "defaults.json"
    monkeypatch.setattr("kickoff.config.DEFAULT_DEFAULTS_PATH", defaults_path)
    monkeypatch.setattr(console, "quiet", False)
    return defaults_path


# ---------------------------------------------------------------------------
# PipelineError
# ---------------------------------------------------------------------------

class TestPipelineError:
    @pytest.mark.unit
    def test_includes_stage_number_and_name(self):
        err = PipelineError(1, "stack has blocking validation errors")
        assert err.stage == 1
        assert str(err) == "Stage 1 (VALIDATE): stack has blocking validation errors"

    @pytest.mark.unit
    def test_unknown_stage(self):
        assert str(PipelineError(7, "x")) == "Stage 7 (?): x"


# ---------------------------------------------------------------------------
# requirements_for
# ---------------------------------------------------------------------------

class TestRequirementsFor:
    @pytest.mark.unit
    def test_frontend_project_is_web_app(self, saas_config):
        requirements = requirements_for(saas_config)
        assert requirements.project_kind == ProjectKind.WEB_APP
        assert requirements.runtime.value == "node"

    @pytest.mark.unit
    def test_backend_framework_is_api(self):
        config = config_from_preset("api-microservice", "svc")
        assert requirements_for(config).project_kind == ProjectKind.API

    @pytest.mark.unit
    def test_ai_selection_is_ai_app(self):
        config = ProjectConfig(name="bot", ai_framework="vercel-ai")
        assert requirements_for(config).project_kind == ProjectKind.AI_APP

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("project_type", "kind"),
        [
            ("cli", ProjectKind.CLI),
            ("worker", ProjectKind.WORKER),
            ("library", ProjectKind.LIBRARY),
            ("mcp-server", ProjectKind.MCP_SERVER),
            ("static", ProjectKind.STATIC_SITE),
        ],
    )
    def test_fixed_kinds(self, project_type, kind):
        config = ProjectConfig(name="p", type=project_type)
        assert requirements_for(config).project_kind == kind

    @pytest.mark.unit
    def test_overrides_win(self, saas_config):
        requirements = requirements_for(saas_config, experience="beginner", runtime="bun")
        assert requirements.experience.value == "beginner"
        assert requirements.runtime.value == "bun"


# ---------------------------------------------------------------------------
# Pipeline.__init__
# ---------------------------------------------------------------------------

class TestPipelineInit:
    @pytest.mark.unit
    def test_no_advisor_by_default(self):
        pipeline = Pipeline(Config())
        assert pipeline.advisor is None
        assert pipeline.state == {}

    @pytest.mark.unit
    def test_advisor_built_from_config(self):
        config = Config(use_advisor=True)
        config.advisor.model = "qwen2.5:7b"
        pipeline = Pipeline(config)
        assert isinstance(pipeline.advisor, OllamaAdvisor)
        assert pipeline.advisor.provider == "ollama:qwen2.5:7b"

    @pytest.mark.unit
    def test_explicit_advisor_kept(self):
        advisor = StubAdvisor(AdvisoryResult(success=True, confidence=1.0))
        assert Pipeline(Config(use_advisor=True), advisor=advisor).advisor is advisor

    @pytest.mark.unit
    def test_substituted_kb(self, tiny_kb):
        assert Pipeline(Config(), kb=tiny_kb).kb is tiny_kb


# ---------------------------------------------------------------------------
# Pipeline.run
# ---------------------------------------------------------------------------

class TestPipelineRun:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_validate_and_plan(self, saas_config):
        state = await Pipeline(Config()).run(saas_config)

        assert state["success"] is True
        assert state["stages_completed"] == [1, 3]
        assert state["stages_failed"] == []
        assert state["validation"].valid is True
        assert state["recommendations"] is None
        assert state["plan"].fragment_ids == ["base", "nextjs"]
        assert "total_duration" in state
        assert "finished_at" in state

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_recommend_stage_runs_with_requirements(self, saas_config):
        requirements = UserRequirements(experience="beginner", budget="free")
        state = await Pipeline(Config()).run(saas_config, requirements)

        assert state["stages_completed"] == [1, 2, 3]
        assert isinstance(state["recommendations"], StackRecommendation)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_verbose_prints_rankings(self, saas_config, monkeypatch):
        monkeypatch.setattr(console, "quiet", False)
        config = Config(defaults=UserDefaults(verbose=True))
        with console.capture() as capture:
            await Pipeline(config).run(saas_config, UserRequirements())
        assert "frontend ranking" in capture.get()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_verbose_ranking_excludes_own_pick(self, saas_config, monkeypatch):
        import kickoff.pipeline as pipeline_module

        seen: list[dict[str, str]] = []
        real_create = pipeline_module.create_scoring_context

        def _recording(requirements, existing_selections=None, matrix=None):
            seen.append(dict(existing_selections or {}))
            return real_create(requirements, existing_selections, matrix)

        monkeypatch.setattr(pipeline_module, "create_scoring_context", _recording)
        config = Config(defaults=UserDefaults(verbose=True))
        state = await Pipeline(config).run(saas_config, UserRequirements())

        categories = list(state["recommendations"].categories)
        assert len(seen) == len(categories)
        for category, selections in zip(categories, seen):
            assert category not in selections

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_defaults_flow_into_manifest(self, saas_config):
        config = Config(defaults=UserDefaults(author="Ada", license="Apache-2.0"))
        state = await Pipeline(config).run(saas_config)

        manifest = state["generation"].package_manifest
        assert manifest["author"] == "Ada"
        assert manifest["license"] == "Apache-2.0"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_rule_errors_stop_the_run(self):
        config = ProjectConfig(name="app", database_provider="d1", orm="prisma")
        state = await Pipeline(Config()).run(config, UserRequirements())

        assert state["success"] is False
        assert state["stages_completed"] == []
        assert state["stages_failed"] == [1]
        assert state["error"] == "Stage 1 (VALIDATE): stack has blocking validation errors"
        assert state["recommendations"] is None
        assert state["generation"] is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_confident_advisor_blocks(self, saas_config):
        advisor = StubAdvisor(_blocking_review())
        state = await Pipeline(Config(), advisor=advisor).run(saas_config)

        assert advisor.reviewed == ["my-saas"]
        assert state["success"] is False
        assert state["stages_failed"] == [1]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_threshold_from_config(self, saas_config):
        config = Config()
        config.advisor.confidence_threshold = 0.99
        state = await Pipeline(config, advisor=StubAdvisor(_blocking_review())).run(saas_config)
        assert state["success"] is True

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_plan_refusal(self, saas_config, fragment_factory, monkeypatch):
        from kickoff.generator import FragmentRegistry, prepare_generation

        registry = FragmentRegistry(
            [
                fragment_factory("base", dependencies=("nextjs",)),
                fragment_factory("nextjs", dependencies=("base",)),
            ]
        )
        monkeypatch.setattr(
            "kickoff.pipeline.prepare_generation",
            lambda config, kb=None, metadata=None: prepare_generation(
                config, registry=registry, kb=kb, metadata=metadata
            ),
        )
        state = await Pipeline(Config()).run(saas_config)

        assert state["success"] is False
        assert state["stages_completed"] == [1]
        assert state["stages_failed"] == [3]
        assert state["error"].startswith("Stage 3 (PLAN): Dependency resolution error")
        assert state["plan"] is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unexpected_exception_recorded(self, saas_config, monkeypatch):
        async def _boom(self, project_config):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(Pipeline, "stage_plan", _boom)
        state = await Pipeline(Config()).run(saas_config)

        assert state["success"] is False
        assert state["stages_failed"] == [3]
        assert "RuntimeError: disk on fire" in state["error"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_state_reset_between_runs(self, saas_config):
        pipeline = Pipeline(Config())
        await pipeline.run(ProjectConfig(name="app", database_provider="d1", orm="prisma"))
        state = await pipeline.run(saas_config)
        assert state["stages_failed"] == []
        assert "error" not in state


# ---------------------------------------------------------------------------
# state_to_json
# ---------------------------------------------------------------------------

class TestStateToJson:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_round_trips_through_json(self, saas_config):
        state = await Pipeline(Config()).run(saas_config, UserRequirements())
        payload = json.loads(state_to_json(state))

        assert payload["success"] is True
        assert payload["validation"]["valid"] is True
        assert [f["id"] for f in payload["plan"]["fragments"]] == ["base", "nextjs"]
        assert "frontend" in payload["recommendations"]["categories"]

    @pytest.mark.unit
    def test_plain_values(self):
        assert json.loads(state_to_json({"a": 1, "b": None})) == {"a": 1, "b": None}


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    @pytest.mark.unit
    def test_list_presets(self, capsys, clean_env):
        main(["--list-presets"])
        out = capsys.readouterr().out
        assert "saas-starter" in out
        assert "ai-agent" in out

    @pytest.mark.unit
    def test_requires_preset_and_name(self, clean_env):
        with pytest.raises(SystemExit) as exc_info:
            main(["--preset", "saas-starter"])
        assert exc_info.value.code == 1

    @pytest.mark.unit
    def test_unknown_preset(self, clean_env):
        with pytest.raises(SystemExit) as exc_info:
            main(["--preset", "nope", "--name", "x"])
        assert exc_info.value.code == 1

    @pytest.mark.unit
    def test_invalid_choice(self, clean_env):
        with pytest.raises(SystemExit) as exc_info:
            main(["--preset", "saas-starter", "--name", "x", "--budget", "lavish"])
        assert exc_info.value.code == 2

    @pytest.mark.unit
    def test_success_returns_normally(self, clean_env):
        main(["--preset", "saas-starter", "--name", "my-app"])

    @pytest.mark.unit
    def test_json_output(self, capsys, clean_env):
        main(["--preset", "saas-starter", "--name", "my-app", "--json", "--experience", "beginner"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["success"] is True
        assert payload["stages_completed"] == [1, 2, 3]
        assert payload["plan"]["project_name"] == "my-app"

    @pytest.mark.unit
    def test_saved_defaults_are_read(self, capsys, clean_env):
        UserDefaults(author="Grace", license="BSD-3-Clause").save(clean_env)
        main(["--preset", "saas-starter", "--name", "my-app", "--json"])
        manifest = json.loads(capsys.readouterr().out)["generation"]["package_manifest"]
        assert manifest["author"] == "Grace"
        assert manifest["license"] == "BSD-3-Clause"

    @pytest.mark.unit
    def test_save_defaults(self, capsys, clean_env):
        main(
            [
                "--preset", "saas-starter", "--name", "my-app", "--json",
                "--author", "Ada", "--license", "Apache-2.0", "--save-defaults",
            ]
        )
        payload = json.loads(capsys.readouterr().out)
        assert payload["generation"]["package_manifest"]["author"] == "Ada"
        saved = UserDefaults.load(clean_env)
        assert saved.author == "Ada"
        assert saved.license == "Apache-2.0"

    @pytest.mark.unit
    def test_flags_without_save_leave_file_alone(self, clean_env):
        main(["--preset", "saas-starter", "--name", "my-app", "--author", "Ada"])
        assert not clean_env.exists()

    @pytest.mark.unit
    def test_failed_run_exits_nonzero(self, clean_env):
        with pytest.raises(SystemExit) as exc_info:
            main(["--preset", "saas-starter", "--name", "bad name!"])
        assert exc_info.value.code == 1
