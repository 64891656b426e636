"""Option scoring.

Each option gets six independent 0-100 sub-scores (complexity fit, cost fit,
compatibility with committed selections, feature match, ecosystem maturity
and explicit preference).  The weighted sum is renormalised by the total
weight, so the final score also lands in 0-100.

The factor tables and magnitudes below are fixed: rankings produced here are
used as regression fixtures.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import NamedTuple

from kickoff.knowledge.models import Complexity, StackOption
from kickoff.recommender.models import (
    BEGINNER_WEIGHTS,
    DEFAULT_WEIGHTS,
    ENTERPRISE_WEIGHTS,
    BudgetLevel,
    ComparisonVerdict,
    ExperienceLevel,
    Impact,
    ReasoningItem,
    RecommendationWarning,
    ScaleRequirement,
    ScoredOption,
    ScoreWeights,
    ScoringContext,
    TimelineUrgency,
    UserRequirements,
    WarningSeverity,
)

COMPLEXITY_SCORES: dict[Complexity, int] = {
    Complexity.LOW: 100,
    Complexity.MEDIUM: 60,
    Complexity.HIGH: 30,
}

COMPLEXITY_PREFERENCE: dict[ExperienceLevel, frozenset[Complexity]] = {
    ExperienceLevel.BEGINNER: frozenset({Complexity.LOW}),
    ExperienceLevel.INTERMEDIATE: frozenset({Complexity.LOW, Complexity.MEDIUM}),
    ExperienceLevel.ADVANCED: frozenset({Complexity.MEDIUM, Complexity.HIGH}),
    ExperienceLevel.EXPERT: frozenset(Complexity),
}

BUDGET_CEILINGS: dict[BudgetLevel, float] = {
    BudgetLevel.FREE: 0,
    BudgetLevel.LOW: 25,
    BudgetLevel.MEDIUM: 100,
    BudgetLevel.HIGH: 500,
    BudgetLevel.UNLIMITED: math.inf,
}

ECOSYSTEM_INDICATORS = (
    "large community",
    "active",
    "mature",
    "established",
    "popular",
    "widely used",
)

IMMATURITY_INDICATORS = ("newer", "young", "less mature", "smaller community")

# Weight of the explicit-preference factor, outside the profile weights.
PREFERENCE_WEIGHT = 0.1

UNRANKED = 999


class _Factor(NamedTuple):
    score: float
    reasoning: ReasoningItem
    warning: RecommendationWarning | None = None


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))


def weights_for_profile(requirements: UserRequirements) -> ScoreWeights:
    """Pick the weight profile for *requirements*.

    Beginners always get the beginner profile; otherwise an enterprise flag
    or enterprise scale selects the enterprise profile.
    """
    if requirements.experience == ExperienceLevel.BEGINNER:
        return BEGINNER_WEIGHTS
    if requirements.needs_enterprise or requirements.scale == ScaleRequirement.ENTERPRISE:
        return ENTERPRISE_WEIGHTS
    return DEFAULT_WEIGHTS


# ---------------------------------------------------------------------------
# Factors
# ---------------------------------------------------------------------------


def _score_complexity(option: StackOption, requirements: UserRequirements) -> _Factor:
    preferred = option.complexity in COMPLEXITY_PREFERENCE[requirements.experience]
    high = option.complexity == Complexity.HIGH
    score: float = COMPLEXITY_SCORES[option.complexity]
    impact = Impact.NEUTRAL
    explanation = ""

    if preferred:
        score += 20
        impact = Impact.POSITIVE
        explanation = (
            f"{option.name}'s {option.complexity.value} complexity aligns well with your "
            f"{requirements.experience.value} experience level"
        )
    elif requirements.experience == ExperienceLevel.BEGINNER and high:
        score -= 30
        impact = Impact.NEGATIVE
        explanation = f"{option.name} has high complexity which may be challenging for beginners"
    elif requirements.timeline == TimelineUrgency.URGENT and high:
        score -= 20
        impact = Impact.NEGATIVE
        explanation = f"{option.name}'s high complexity may slow down your urgent timeline"

    warning = None
    if not preferred and high:
        warning = RecommendationWarning(
            severity=WarningSeverity.WARNING,
            category="complexity",
            message=f"{option.name} has high complexity",
            suggestion="Consider alternatives if you need faster time-to-market",
        )

    return _Factor(
        _clamp(score),
        ReasoningItem(factor="complexity", impact=impact, weight=score, explanation=explanation),
        warning,
    )


def _score_cost(option: StackOption, requirements: UserRequirements) -> _Factor:
    cost = option.monthly_cost
    score: float = 100
    impact = Impact.NEUTRAL
    explanation = ""
    warning = None

    if cost.free and requirements.budget == BudgetLevel.FREE:
        impact = Impact.POSITIVE
        explanation = f"{option.name} is free, matching your budget requirement"
    elif cost.free:
        score = 90
        impact = Impact.POSITIVE
        explanation = f"{option.name} offers a free tier"
    else:
        price = cost.lowest_price()
        band = cost.bands()[0] if cost.bands() else ""
        if price is not None:
            over_budget = (
                price > BUDGET_CEILINGS[requirements.budget]
                and requirements.budget != BudgetLevel.UNLIMITED
            )
            if over_budget:
                score = 30
                impact = Impact.NEGATIVE
                explanation = (
                    f"{option.name}'s cost ({band}) exceeds your "
                    f"{requirements.budget.value} budget"
                )
                warning = RecommendationWarning(
                    severity=WarningSeverity.WARNING,
                    category="cost",
                    message=f"{option.name} may exceed your budget at {band}",
                    suggestion="Consider free alternatives or adjust budget expectations",
                )
            else:
                score = 70
                explanation = f"{option.name} costs {band}, within your budget"

    return _Factor(
        score,
        ReasoningItem(factor="cost", impact=impact, weight=score, explanation=explanation),
        warning,
    )


def _score_compatibility(option: StackOption, context: ScoringContext) -> _Factor:
    existing = [
        value for value in context.existing_selections.values() if value and value != "none"
    ]
    if not existing:
        return _Factor(
            100,
            ReasoningItem(
                factor="compatibility",
                impact=Impact.NEUTRAL,
                weight=100,
                explanation="No existing selections to check compatibility against",
            ),
        )

    conflicts = [
        other for other in existing if not context.matrix.are_compatible(option.id, other)
    ]
    if not conflicts:
        return _Factor(
            100,
            ReasoningItem(
                factor="compatibility",
                impact=Impact.POSITIVE,
                weight=100,
                explanation=f"{option.name} is compatible with all your selected options",
            ),
        )

    joined = ", ".join(conflicts)
    return _Factor(
        20,
        ReasoningItem(
            factor="compatibility",
            impact=Impact.NEGATIVE,
            weight=20,
            explanation=f"{option.name} is incompatible with: {joined}",
        ),
        RecommendationWarning(
            severity=WarningSeverity.CRITICAL,
            category="compatibility",
            message=f"{option.name} conflicts with {joined}",
            suggestion="Choose a compatible alternative or change conflicting selections",
        ),
    )


def _score_features(option: StackOption, requirements: UserRequirements) -> _Factor:
    haystack = [text.lower() for text in (*option.pros, *option.best_for)]
    score: float = 70
    matches: list[str] = []
    missing: list[str] = []

    def _has(feature: str) -> bool:
        needle = feature.lower()
        return any(needle in text for text in haystack)

    for feature in requirements.must_have_features:
        if _has(feature):
            score += 10
            matches.append(feature)
        else:
            score -= 15
            missing.append(feature)

    for feature in requirements.nice_to_have_features:
        if _has(feature):
            score += 5
            matches.append(feature)

    for priority in requirements.priorities:
        if _has(priority):
            score += 8

    if missing:
        impact = Impact.NEGATIVE
    elif matches:
        impact = Impact.POSITIVE
    else:
        impact = Impact.NEUTRAL

    if matches:
        explanation = f"{option.name} matches: {', '.join(matches)}"
    elif missing:
        explanation = f"{option.name} missing: {', '.join(missing)}"
    else:
        explanation = f"{option.name} partially matches your requirements"

    return _Factor(
        _clamp(score),
        ReasoningItem(factor="features", impact=impact, weight=score, explanation=explanation),
    )


def _score_ecosystem(option: StackOption) -> _Factor:
    score: float = 70
    if option.documentation_url:
        score += 10

    pros = [text.lower() for text in option.pros]
    cons = [text.lower() for text in option.cons]
    for indicator in ECOSYSTEM_INDICATORS:
        if any(indicator in text for text in pros):
            score += 5
    for indicator in IMMATURITY_INDICATORS:
        if any(indicator in text for text in cons):
            score -= 10

    score = _clamp(score)
    if score >= 80:
        explanation = f"{option.name} has a mature ecosystem"
    elif score >= 60:
        explanation = f"{option.name} has a growing ecosystem"
    else:
        explanation = f"{option.name} has a smaller ecosystem"

    return _Factor(
        score,
        ReasoningItem(
            factor="ecosystem",
            impact=Impact.POSITIVE if score >= 70 else Impact.NEUTRAL,
            weight=score,
            explanation=explanation,
        ),
    )


def _score_preference(option: StackOption, requirements: UserRequirements) -> _Factor:
    if option.id in requirements.exclude_options:
        return _Factor(
            0,
            ReasoningItem(
                factor="preference",
                impact=Impact.NEGATIVE,
                weight=0,
                explanation=f"{option.name} was explicitly excluded",
            ),
        )
    if option.id in requirements.preferred_options:
        return _Factor(
            100,
            ReasoningItem(
                factor="preference",
                impact=Impact.POSITIVE,
                weight=100,
                explanation=f"{option.name} was explicitly preferred",
            ),
        )
    return _Factor(
        70,
        ReasoningItem(
            factor="preference",
            impact=Impact.NEUTRAL,
            weight=70,
            explanation="No explicit preference",
        ),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def score_option(option: StackOption, context: ScoringContext) -> ScoredOption:
    """Score a single option against *context*.

    Args:
        option: Catalog option to score.
        context: Requirements, weight profile and committed selections.

    Returns:
        An unranked ``ScoredOption``.  Explicitly excluded options score
        exactly 0 with a single ``excluded`` reasoning entry.
    """
    requirements = context.requirements
    if option.id in requirements.exclude_options:
        return ScoredOption(
            option=option,
            score=0,
            reasoning=[
                ReasoningItem(
                    factor="excluded",
                    impact=Impact.NEGATIVE,
                    weight=0,
                    explanation="Explicitly excluded",
                )
            ],
            rank=UNRANKED,
        )

    complexity = _score_complexity(option, requirements)
    cost = _score_cost(option, requirements)
    compatibility = _score_compatibility(option, context)
    features = _score_features(option, requirements)
    ecosystem = _score_ecosystem(option)
    preference = _score_preference(option, requirements)

    weights = context.weights
    weighted = (
        complexity.score * weights.complexity
        + cost.score * weights.cost
        + compatibility.score * weights.compatibility
        + features.score * weights.features
        + ecosystem.score * weights.ecosystem
        + preference.score * PREFERENCE_WEIGHT
    )
    score = round(weighted / (weights.total() + PREFERENCE_WEIGHT), 2)

    factors = (complexity, cost, compatibility, features, ecosystem, preference)
    incompatible = set(context.matrix.incompatible_options(option.id))
    alternatives = [
        other
        for other in option.compatible_with
        if other not in incompatible and other != option.id
    ][:3]

    return ScoredOption(
        option=option,
        score=_clamp(score),
        reasoning=[f.reasoning for f in factors if f.reasoning.explanation],
        warnings=[f.warning for f in factors if f.warning is not None],
        alternatives=alternatives,
    )


def score_and_rank_options(
    options: Sequence[StackOption],
    context: ScoringContext,
) -> list[ScoredOption]:
    """Score *options* and rank them by descending score.

    The ``"none"`` placeholder is dropped unless it is the only option.  Ties
    keep catalog order.  Ranks are 1-based.
    """
    candidates = [o for o in options if o.id != "none" or len(options) == 1]
    scored = sorted(
        (score_option(option, context) for option in candidates),
        key=lambda s: s.score,
        reverse=True,
    )
    return [item.model_copy(update={"rank": index}) for index, item in enumerate(scored, start=1)]


def top_recommendation(
    options: Sequence[StackOption],
    context: ScoringContext,
) -> ScoredOption | None:
    """Return the best-ranked option, or ``None`` when *options* is empty."""
    ranked = score_and_rank_options(options, context)
    return ranked[0] if ranked else None


def compare_options(
    option_a: StackOption,
    option_b: StackOption,
    context: ScoringContext,
) -> ComparisonVerdict:
    """Score two options head to head.  A gap under 5 points is a tie."""
    score_a = score_option(option_a, context).score
    score_b = score_option(option_b, context).score

    if abs(score_a - score_b) < 5:
        return ComparisonVerdict(
            winner="tie",
            score_a=score_a,
            score_b=score_b,
            verdict=f"{option_a.name} and {option_b.name} are roughly equivalent for your needs",
        )
    if score_a > score_b:
        return ComparisonVerdict(
            winner="A",
            score_a=score_a,
            score_b=score_b,
            verdict=(
                f"{option_a.name} is recommended over {option_b.name} "
                f"({round(score_a)} vs {round(score_b)})"
            ),
        )
    return ComparisonVerdict(
        winner="B",
        score_a=score_a,
        score_b=score_b,
        verdict=(
            f"{option_b.name} is recommended over {option_a.name} "
            f"({round(score_b)} vs {round(score_a)})"
        ),
    )
