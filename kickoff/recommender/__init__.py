"""Kickoff recommendation scorer.

Ranks catalog options against a user's requirements and already-committed
selections, and assembles whole-stack recommendations with explanations.

Usage::

    from kickoff.recommender import UserRequirements, recommend_stack, stack_summary

    rec = recommend_stack(UserRequirements(experience="beginner", budget="free"))
    print(stack_summary(rec))
"""

from kickoff.recommender.engine import (
    aggregate_cost,
    create_scoring_context,
    explain_recommendations,
    quick_recommend,
    recommend_for_category,
    recommend_stack,
)
from kickoff.recommender.explainer import (
    category_explanation,
    comparison,
    explain_choice,
    format_warnings,
    option_explanation,
    short_summary,
    stack_summary,
    tradeoff_analysis,
)
from kickoff.recommender.models import (
    BEGINNER_WEIGHTS,
    DEFAULT_WEIGHTS,
    ENTERPRISE_WEIGHTS,
    BudgetLevel,
    CategoryRecommendation,
    CompatibilityIssue,
    ExperienceLevel,
    Impact,
    ProjectKind,
    ReasoningItem,
    RecommendationWarning,
    ScaleRequirement,
    ScoredOption,
    ScoreWeights,
    ScoringContext,
    StackRecommendation,
    TimelineUrgency,
    UserRequirements,
    WarningSeverity,
)
from kickoff.recommender.scorer import (
    compare_options,
    score_and_rank_options,
    score_option,
    top_recommendation,
    weights_for_profile,
)

__all__ = [
    "BEGINNER_WEIGHTS",
    "DEFAULT_WEIGHTS",
    "ENTERPRISE_WEIGHTS",
    "BudgetLevel",
    "CategoryRecommendation",
    "CompatibilityIssue",
    "ExperienceLevel",
    "Impact",
    "ProjectKind",
    "ReasoningItem",
    "RecommendationWarning",
    "ScaleRequirement",
    "ScoredOption",
    "ScoreWeights",
    "ScoringContext",
    "StackRecommendation",
    "TimelineUrgency",
    "UserRequirements",
    "WarningSeverity",
    "aggregate_cost",
    "category_explanation",
    "compare_options",
    "comparison",
    "create_scoring_context",
    "explain_choice",
    "explain_recommendations",
    "format_warnings",
    "option_explanation",
    "quick_recommend",
    "recommend_for_category",
    "recommend_stack",
    "score_and_rank_options",
    "score_option",
    "short_summary",
    "stack_summary",
    "top_recommendation",
    "tradeoff_analysis",
    "weights_for_profile",
]
