"""Pydantic v2 models for the recommendation scorer.

Covers the user's requirements record, weight profiles, the per-option score
breakdown, and the category- and stack-level recommendation results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from kickoff.knowledge.compatibility import CompatibilityMatrix
from kickoff.knowledge.models import Complexity, CostTier, Runtime, StackOption


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ProjectKind(str, Enum):
    """Broad shape of the project the user wants recommendations for."""
    WEB_APP = "web-app"
    API = "api"
    CLI = "cli"
    LIBRARY = "library"
    AI_APP = "ai-app"
    STATIC_SITE = "static-site"
    MCP_SERVER = "mcp-server"
    WORKER = "worker"


class BudgetLevel(str, Enum):
    FREE = "free"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNLIMITED = "unlimited"


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class ScaleRequirement(str, Enum):
    PROTOTYPE = "prototype"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


class TimelineUrgency(str, Enum):
    URGENT = "urgent"
    NORMAL = "normal"
    FLEXIBLE = "flexible"


class Impact(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class WarningSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


# ---------------------------------------------------------------------------
# Requirements & weights
# ---------------------------------------------------------------------------

class UserRequirements(BaseModel):
    """Everything the scorer knows about what the user wants."""

    model_config = ConfigDict(frozen=True)

    project_kind: ProjectKind = Field(default=ProjectKind.WEB_APP)
    runtime: Runtime = Field(default=Runtime.NODE)
    budget: BudgetLevel = Field(default=BudgetLevel.LOW)
    experience: ExperienceLevel = Field(default=ExperienceLevel.INTERMEDIATE)
    scale: ScaleRequirement = Field(default=ScaleRequirement.SMALL)
    timeline: TimelineUrgency = Field(default=TimelineUrgency.NORMAL)
    priorities: list[str] = Field(
        default_factory=list, description="Free-text priorities, e.g. 'type-safety'"
    )
    must_have_features: list[str] = Field(default_factory=list)
    nice_to_have_features: list[str] = Field(default_factory=list)
    exclude_options: list[str] = Field(
        default_factory=list, description="Option ids the user refuses"
    )
    preferred_options: list[str] = Field(
        default_factory=list, description="Option ids the user favours"
    )
    existing_stack: list[str] = Field(default_factory=list)
    team_size: int | None = Field(default=None, ge=1)
    is_open_source: bool = Field(default=False)
    needs_enterprise: bool = Field(default=False)


class ScoreWeights(BaseModel):
    """Relative weight of each scoring factor."""

    model_config = ConfigDict(frozen=True)

    complexity: float = 0.2
    cost: float = 0.15
    compatibility: float = 0.25
    features: float = 0.2
    ecosystem: float = 0.1
    performance: float = 0.1

    def total(self) -> float:
        return (
            self.complexity
            + self.cost
            + self.compatibility
            + self.features
            + self.ecosystem
            + self.performance
        )


DEFAULT_WEIGHTS = ScoreWeights()

BEGINNER_WEIGHTS = ScoreWeights(
    complexity=0.35,
    cost=0.1,
    compatibility=0.2,
    features=0.15,
    ecosystem=0.15,
    performance=0.05,
)

ENTERPRISE_WEIGHTS = ScoreWeights(
    complexity=0.1,
    cost=0.1,
    compatibility=0.2,
    features=0.25,
    ecosystem=0.15,
    performance=0.2,
)


@dataclass(frozen=True)
class ScoringContext:
    """Inputs shared by every score computed for one category.

    Rebuilt after each committed selection, because later categories are
    scored for compatibility against earlier ones.
    """

    requirements: UserRequirements
    weights: ScoreWeights
    matrix: CompatibilityMatrix
    existing_selections: dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Scored results
# ---------------------------------------------------------------------------

class ReasoningItem(BaseModel):
    """One factor's contribution to an option's score."""
    factor: str = Field(..., description="e.g. 'complexity', 'cost'")
    impact: Impact = Field(default=Impact.NEUTRAL)
    weight: float = Field(default=0.0, description="The factor's sub-score")
    explanation: str = Field(default="")


class RecommendationWarning(BaseModel):
    severity: WarningSeverity = Field(default=WarningSeverity.WARNING)
    category: str = Field(..., description="e.g. 'compatibility', 'cost', 'complexity'")
    message: str
    suggestion: str | None = None


class ScoredOption(BaseModel):
    """An option together with its 0-100 score and the reasons behind it."""

    option: SerializeAsAny[StackOption]
    score: float = Field(default=0.0, ge=0.0, le=100.0)
    reasoning: list[ReasoningItem] = Field(default_factory=list)
    warnings: list[RecommendationWarning] = Field(default_factory=list)
    alternatives: list[str] = Field(
        default_factory=list, description="Up to three compatible sibling ids"
    )
    rank: int = Field(default=0, description="1-based position once ranked; 0 when unranked")


class CategoryRecommendation(BaseModel):
    category: str
    recommended: ScoredOption
    alternatives: list[ScoredOption] = Field(default_factory=list)
    explanation: str = ""
    tradeoff_summary: str = ""


class CompatibilityIssue(BaseModel):
    option_a: str
    option_b: str
    severity: Literal["warning", "critical"] = "critical"
    message: str
    resolution: str | None = None


class StackRecommendation(BaseModel):
    """A recommendation for every category relevant to the project.

    ``categories`` preserves the order in which categories were decided.
    """

    categories: dict[str, CategoryRecommendation] = Field(default_factory=dict)
    overall_score: float = Field(default=0.0)
    overall_reasoning: list[str] = Field(default_factory=list)
    overall_warnings: list[RecommendationWarning] = Field(default_factory=list)
    total_estimated_cost: CostTier = Field(default_factory=CostTier)
    overall_complexity: Complexity = Field(default=Complexity.MEDIUM)
    compatibility_issues: list[CompatibilityIssue] = Field(default_factory=list)

    def get(self, category: str) -> CategoryRecommendation | None:
        return self.categories.get(category)

    def selections(self) -> dict[str, str]:
        """Return ``{category: recommended option id}``."""
        return {
            category: rec.recommended.option.id
            for category, rec in self.categories.items()
        }


# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------

Winner = Literal["A", "B", "tie"]


class ComparisonVerdict(BaseModel):
    winner: Winner
    score_a: float
    score_b: float
    verdict: str


class OptionComparison(BaseModel):
    """Side-by-side comparison of two options with their unique pros and cons."""

    option_a: SerializeAsAny[StackOption]
    option_b: SerializeAsAny[StackOption]
    winner: Winner
    score_a: float
    score_b: float
    pros_a: list[str] = Field(default_factory=list)
    pros_b: list[str] = Field(default_factory=list)
    cons_a: list[str] = Field(default_factory=list)
    cons_b: list[str] = Field(default_factory=list)
    verdict: str = ""


class TradeoffSide(BaseModel):
    name: str
    score: int
    benefit: str


class TradeoffAnalysis(BaseModel):
    aspect: str = Field(..., description="e.g. 'performance'")
    option_a: TradeoffSide
    option_b: TradeoffSide
    recommendation: str
    choose_a_if: str
    choose_b_if: str
