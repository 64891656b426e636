"""Kickoff pipeline orchestrator.

Runs the three resolution stages for one project configuration:

Stage 1: VALIDATE  -- constraint engine, plus the advisory reviewer if enabled.
Stage 2: RECOMMEND -- rank stack options against the user's requirements.
Stage 3: PLAN      -- collect, order and merge template fragments.

Usage::

    python -m kickoff.pipeline --preset saas-starter --name my-app
    python -m kickoff.pipeline --preset ai-agent --name bot --advisor --json
"""

from __future__ import annotations

import asyncio
import json
import sys
import time
import traceback
from datetime import datetime, timezone
from typing import Any

from rich.panel import Panel

from kickoff.config import Config
from kickoff.generator import ProjectMetadata, prepare_generation
from kickoff.knowledge import KnowledgeBase, default_knowledge_base
from kickoff.ollama_client import OllamaClient
from kickoff.project import ProjectConfig, ProjectType, config_from_preset, list_presets
from kickoff.recommender import (
    BudgetLevel,
    ExperienceLevel,
    ProjectKind,
    ScaleRequirement,
    UserRequirements,
    create_scoring_context,
    recommend_stack,
    score_and_rank_options,
    stack_summary,
)
from kickoff.utils import (
    STAGE_NAMES,
    console,
    format_duration,
    print_error,
    print_ranking_table,
    print_stage_header,
    print_success,
    print_summary_table,
    print_warning,
)
from kickoff.validation import OllamaAdvisor, SecondaryValidator, validate_stack

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PipelineError(Exception):
    """Raised when a pipeline stage cannot produce a usable result."""

    def __init__(self, stage: int, message: str) -> None:
        self.stage = stage
        super().__init__(f"Stage {stage} ({STAGE_NAMES.get(stage, '?')}): {message}")


# ---------------------------------------------------------------------------
# Requirements derived from a project configuration
# ---------------------------------------------------------------------------

_KIND_FOR_TYPE: dict[ProjectType, ProjectKind] = {
    ProjectType.STATIC: ProjectKind.STATIC_SITE,
    ProjectType.WORKER: ProjectKind.WORKER,
    ProjectType.CLI: ProjectKind.CLI,
    ProjectType.MCP_SERVER: ProjectKind.MCP_SERVER,
    ProjectType.LIBRARY: ProjectKind.LIBRARY,
}


def requirements_for(project_config: ProjectConfig, **overrides: Any) -> UserRequirements:
    """Build ``UserRequirements`` matching the shape of *project_config*.

    API project types map to ``api``, front-end types to ``web-app`` (or
    ``ai-app`` when an AI framework is selected).  *overrides* win.
    """
    kind = _KIND_FOR_TYPE.get(project_config.type)
    if kind is None:
        framework = project_config.framework
        if framework is not None and framework[0] == "backend":
            kind = ProjectKind.API
        elif project_config.selections().get("ai"):
            kind = ProjectKind.AI_APP
        else:
            kind = ProjectKind.WEB_APP
    values: dict[str, Any] = {"project_kind": kind, "runtime": project_config.runtime}
    values.update(overrides)
    return UserRequirements(**values)


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Kickoff pipeline orchestrator.

    Attributes:
        config: Global configuration.
        kb: Knowledge base shared by every stage.
        advisor: Advisory reviewer, or ``None`` when disabled.
        state: Results accumulated by each stage of the current run.
    """

    def __init__(
        self,
        config: Config,
        kb: KnowledgeBase | None = None,
        advisor: SecondaryValidator | None = None,
    ) -> None:
        self.config = config
        self.kb = kb if kb is not None else default_knowledge_base()
        if advisor is None and config.use_advisor:
            advisor = OllamaAdvisor(
                OllamaClient(base_url=config.advisor.url, timeout=config.advisor.timeout),
                model=config.advisor.model,
            )
        self.advisor = advisor
        self.state: dict[str, Any] = {}

    def _reset_state(self) -> None:
        self.state = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "stages_completed": [],
            "stages_failed": [],
            "validation": None,
            "recommendations": None,
            "generation": None,
            "plan": None,
            "success": False,
        }

    async def run(
        self,
        project_config: ProjectConfig,
        requirements: UserRequirements | None = None,
    ) -> dict[str, Any]:
        """Validate, optionally recommend, then plan *project_config*.

        Stage 2 runs only when *requirements* is given.  The first failing
        stage stops the run.

        Returns:
            The state dictionary: ``validation``, ``recommendations``,
            ``generation``, ``plan`` and a top-level ``success`` flag.
        """
        self._reset_state()
        run_start = time.monotonic()

        console.print(
            Panel(
                f"[bold bright_cyan]Kickoff[/bold bright_cyan]\n"
                f"Project : {project_config.name}\n"
                f"Type    : {project_config.type.value} ({project_config.runtime.value})\n"
                f"Preset  : {project_config.preset}\n"
                f"Advisor : {'on' if self.advisor is not None else 'off'}",
                title="[bold]Pipeline Start[/bold]",
                border_style="bright_cyan",
            )
        )

        stages: list[tuple[int, Any]] = [(1, lambda: self.stage_validate(project_config))]
        if requirements is not None:
            stages.append((2, lambda: self.stage_recommend(requirements)))
        stages.append((3, lambda: self.stage_plan(project_config)))

        all_success = True
        for stage_num, stage in stages:
            stage_name = STAGE_NAMES[stage_num]
            print_stage_header(stage_num, stage_name)
            stage_start = time.monotonic()
            try:
                await stage()
                self.state["stages_completed"].append(stage_num)
                print_success(
                    f"Stage {stage_num} ({stage_name}) completed in "
                    f"{format_duration(time.monotonic() - stage_start)}"
                )
            except PipelineError as exc:
                all_success = False
                self.state["stages_failed"].append(stage_num)
                self.state["error"] = str(exc)
                print_error(str(exc))
                break
            except Exception as exc:
                all_success = False
                self.state["stages_failed"].append(stage_num)
                tb = traceback.format_exc()
                self.state["error"] = tb
                print_error(f"Stage {stage_num} ({stage_name}) FAILED: {exc}")
                console.print(f"[dim]{tb}[/dim]")
                break

        total_elapsed = time.monotonic() - run_start
        self.state["success"] = all_success
        self.state["total_duration"] = format_duration(total_elapsed)
        self.state["finished_at"] = datetime.now(timezone.utc).isoformat()
        self._print_final_summary()
        return self.state

    # ------------------------------------------------------------------
    # Stage 1: VALIDATE
    # ------------------------------------------------------------------

    async def stage_validate(self, project_config: ProjectConfig) -> None:
        result = await validate_stack(
            project_config,
            advisor=self.advisor,
            confidence_threshold=self.config.advisor.confidence_threshold,
        )
        self.state["validation"] = result
        console.print(result.summary, markup=False)
        if not result.valid:
            raise PipelineError(1, "stack has blocking validation errors")

    # ------------------------------------------------------------------
    # Stage 2: RECOMMEND
    # ------------------------------------------------------------------

    async def stage_recommend(self, requirements: UserRequirements) -> None:
        recommendation = recommend_stack(requirements, self.kb)
        self.state["recommendations"] = recommendation
        console.print(stack_summary(recommendation), markup=False)

        if self.config.defaults.verbose:
            selections = recommendation.selections()
            for category in recommendation.categories:
                others = {key: value for key, value in selections.items() if key != category}
                context = create_scoring_context(requirements, others, self.kb.matrix)
                ranked = score_and_rank_options(self.kb.options_for(category), context)
                print_ranking_table(ranked[:5], title=f"{category} ranking")

        for issue in recommendation.compatibility_issues:
            print_warning(f"{issue.option_a} / {issue.option_b}: {issue.message}")

    # ------------------------------------------------------------------
    # Stage 3: PLAN
    # ------------------------------------------------------------------

    async def stage_plan(self, project_config: ProjectConfig) -> None:
        defaults = self.config.defaults
        metadata = ProjectMetadata(
            author=defaults.author or None,
            license=defaults.license or None,
            description=project_config.description or None,
        )
        outcome = prepare_generation(project_config, kb=self.kb, metadata=metadata)
        self.state["generation"] = outcome
        self.state["plan"] = outcome.plan

        for warning in outcome.warnings:
            print_warning(warning)
        if not outcome.success:
            raise PipelineError(3, "; ".join(outcome.errors) or "generation refused")

        plan = outcome.plan
        print_summary_table(
            {
                "Fragments": ", ".join(plan.fragment_ids),
                "Files": str(len(outcome.files)),
                "Env vars": str(len(plan.env_vars)),
                "Conflicts": str(len(plan.conflicts)),
            },
            title="Generation Plan",
        )

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def _print_final_summary(self) -> None:
        if self.state.get("success"):
            border_style = "bold green"
            status_text = "[bold green]READY TO GENERATE[/bold green]"
        else:
            border_style = "bold red"
            status_text = "[bold red]PIPELINE FAILED[/bold red]"

        detail_lines = [
            status_text,
            "",
            f"Duration  : {self.state.get('total_duration', '?')}",
            f"Completed : {', '.join(str(s) for s in self.state['stages_completed']) or 'none'}",
        ]
        if self.state["stages_failed"]:
            detail_lines.append(
                f"Failed    : {', '.join(str(s) for s in self.state['stages_failed'])}"
            )

        generation = self.state.get("generation")
        if generation is not None and generation.success:
            detail_lines.append("")
            detail_lines.append("Next steps:")
            detail_lines.extend(f"  {step}" for step in generation.next_steps)

        console.print()
        console.print(
            Panel(
                "\n".join(detail_lines),
                title="[bold]Pipeline Complete[/bold]",
                border_style=border_style,
            )
        )


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


def state_to_json(state: dict[str, Any]) -> str:
    """Serialise a pipeline state dictionary, dumping any pydantic models."""
    payload: dict[str, Any] = {}
    for key, value in state.items():
        if hasattr(value, "model_dump"):
            payload[key] = value.model_dump(mode="json")
        else:
            payload[key] = value
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``kickoff`` and ``python -m kickoff.pipeline``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Kickoff -- validate a stack and plan project generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  kickoff --list-presets\n"
            "  kickoff --preset saas-starter --name my-app\n"
            "  kickoff --preset ai-agent --name bot --advisor --experience beginner\n"
        ),
    )
    parser.add_argument("--preset", default=None, help="Preset to start from")
    parser.add_argument("--name", default=None, help="Project name")
    parser.add_argument(
        "--advisor",
        action="store_true",
        help="Also consult the local Ollama advisory reviewer",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the pipeline result as JSON instead of rich output",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List the built-in presets and exit",
    )
    parser.add_argument(
        "--experience",
        choices=[level.value for level in ExperienceLevel],
        default=None,
        help="Recommend a stack for this experience level",
    )
    parser.add_argument(
        "--budget",
        choices=[level.value for level in BudgetLevel],
        default=None,
        help="Recommend a stack for this budget",
    )
    parser.add_argument(
        "--scale",
        choices=[level.value for level in ScaleRequirement],
        default=None,
        help="Recommend a stack for this scale",
    )
    parser.add_argument("--author", default=None, help="Author for the package manifest")
    parser.add_argument("--license", default=None, help="License for the package manifest")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember --author/--license in ~/.kickoff/defaults.json",
    )

    args = parser.parse_args(argv)

    if args.list_presets:
        print_summary_table(
            {preset.name: preset.label for preset in list_presets()},
            title="Presets",
        )
        return

    if not args.preset or not args.name:
        print_error("Error: --preset and --name are required (see --list-presets)")
        sys.exit(1)

    config = Config.from_env()
    if args.advisor:
        config.use_advisor = True
    if args.author is not None:
        config.defaults.author = args.author
    if args.license is not None:
        config.defaults.license = args.license

    try:
        project_config = config_from_preset(
            args.preset,
            args.name,
            github_username=config.defaults.github_username,
        )
    except KeyError:
        print_error(f"Error: unknown preset '{args.preset}'")
        sys.exit(1)

    tiers = {
        key: getattr(args, key)
        for key in ("experience", "budget", "scale")
        if getattr(args, key) is not None
    }
    requirements = requirements_for(project_config, **tiers) if tiers else None

    if args.json:
        console.quiet = True

    if args.save_defaults:
        saved_to = config.defaults.save()
        console.print(f"[dim]Defaults saved to {saved_to}[/dim]")

    pipeline = Pipeline(config)
    state = asyncio.run(pipeline.run(project_config, requirements))

    if args.json:
        sys.stdout.write(state_to_json(state) + "\n")

    if not state.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()
