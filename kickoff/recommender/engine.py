"""Stack recommendation orchestration.

Categories are decided one at a time in dependency order.  After each pick
the scoring context is rebuilt with the new selection, so every later
category is scored for compatibility against everything chosen before it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from kickoff.knowledge.base import KnowledgeBase, default_knowledge_base
from kickoff.knowledge.compatibility import CompatibilityMatrix
from kickoff.knowledge.models import BackendOption, Complexity, CostTier, StackOption
from kickoff.recommender.explainer import category_explanation
from kickoff.recommender.models import (
    CategoryRecommendation,
    CompatibilityIssue,
    ProjectKind,
    RecommendationWarning,
    ScoredOption,
    ScoringContext,
    StackRecommendation,
    UserRequirements,
)
from kickoff.recommender.scorer import score_and_rank_options, weights_for_profile

# Databases that bring their own data layer and take no ORM.
BAAS_DATABASES = frozenset({"convex", "firebase", "pocketbase"})

# Categories whose picks count towards the overall score.
_SCORED_CATEGORIES = ("frontend", "backend", "database", "orm", "auth", "ai")
# Categories whose picks count towards the overall complexity.
_COMPLEXITY_CATEGORIES = ("frontend", "backend", "database", "orm", "auth")


def create_scoring_context(
    requirements: UserRequirements,
    existing_selections: Mapping[str, str] | None = None,
    matrix: CompatibilityMatrix | None = None,
) -> ScoringContext:
    """Build a ``ScoringContext`` with the weight profile for *requirements*."""
    return ScoringContext(
        requirements=requirements,
        weights=weights_for_profile(requirements),
        matrix=matrix if matrix is not None else default_knowledge_base().matrix,
        existing_selections=dict(existing_selections or {}),
    )


def recommend_for_category(
    category: str,
    options: Sequence[StackOption],
    context: ScoringContext,
    count: int = 3,
) -> CategoryRecommendation | None:
    """Rank *options* and package the winner with up to ``count - 1`` runners-up.

    Returns:
        A ``CategoryRecommendation``, or ``None`` if *options* is empty.
    """
    scored = score_and_rank_options(options, context)
    if not scored:
        return None

    recommended = scored[0]
    alternatives = scored[1:count]
    if alternatives:
        runner_up = alternatives[0].option
        need = runner_up.best_for[0] if runner_up.best_for else "different features"
        tradeoff_summary = f"Consider {runner_up.name} if you need {need}"
    else:
        tradeoff_summary = "This is the clear choice for your requirements"

    rec = CategoryRecommendation(
        category=category,
        recommended=recommended,
        alternatives=alternatives,
        tradeoff_summary=tradeoff_summary,
    )
    return rec.model_copy(update={"explanation": category_explanation(rec)})


def aggregate_cost(options: Sequence[StackOption]) -> CostTier:
    """Combine per-option cost tiers into one estimate for the whole stack.

    The stack is free only if every option has a free tier.  Each price band
    is the sum of the lowest disclosed price of every option that discloses
    that band, shown as a floor (``"$44+/mo"``); a band nobody discloses
    stays ``None``.
    """
    if not options:
        return CostTier(free=True)

    def _band_total(band: str) -> str | None:
        total = 0.0
        disclosed = False
        for option in options:
            value = getattr(option.monthly_cost, band)
            if not value:
                continue
            price = CostTier(hobbyist=value).lowest_price()
            if price is None:
                continue
            disclosed = True
            total += price
        return f"${total:g}+/mo" if disclosed else None

    return CostTier(
        free=all(option.monthly_cost.free for option in options),
        hobbyist=_band_total("hobbyist"),
        startup=_band_total("startup"),
        enterprise=_band_total("enterprise"),
    )


def _overall_complexity(options: Sequence[StackOption]) -> Complexity:
    highs = sum(1 for o in options if o.complexity == Complexity.HIGH)
    lows = sum(1 for o in options if o.complexity == Complexity.LOW)
    if highs >= 2:
        return Complexity.HIGH
    if lows >= 3:
        return Complexity.LOW
    return Complexity.MEDIUM


def _needs_ai(requirements: UserRequirements) -> bool:
    return requirements.project_kind == ProjectKind.AI_APP or any(
        "ai" in feature.lower() for feature in requirements.must_have_features
    )


def recommend_stack(
    requirements: UserRequirements,
    kb: KnowledgeBase | None = None,
) -> StackRecommendation:
    """Recommend one option per relevant category.

    Order: frontend (skipped for API and CLI projects), backend (restricted to
    the requested runtime when any backend matches), database, ORM (skipped
    for BaaS databases), auth, then AI framework and vector database for AI
    projects.  Categories the knowledge base does not hold are skipped.

    Args:
        requirements: What the user wants.
        kb: Knowledge base to draw options from.  Defaults to the built-in one.

    Returns:
        A ``StackRecommendation`` with per-category picks, overall score and
        complexity, aggregated cost, collected warnings and any pairwise
        compatibility issues among the picks.
    """
    kb = kb or default_knowledge_base()
    selections: dict[str, str] = {}
    reasoning: list[str] = []
    categories: dict[str, CategoryRecommendation] = {}
    context = create_scoring_context(requirements, selections, kb.matrix)

    def _options(category: str) -> Sequence[StackOption]:
        return kb.options_for(category) if category in kb.categories else ()

    def _decide(category: str, options: Sequence[StackOption], label: str | None) -> None:
        nonlocal context
        rec = recommend_for_category(category, options, context)
        if rec is None:
            return
        option = rec.recommended.option
        categories[category] = rec
        selections[category] = option.id
        context = create_scoring_context(requirements, selections, kb.matrix)
        if label is not None:
            reason = option.best_for[0] if option.best_for else option.description
            reasoning.append(f"Selected {option.name} for {label}: {reason}")

    if requirements.project_kind not in (ProjectKind.API, ProjectKind.CLI):
        _decide("frontend", _options("frontend"), "frontend")

    backends = _options("backend")
    runtime_backends = [
        b for b in backends if isinstance(b, BackendOption) and b.runtime == requirements.runtime
    ]
    _decide("backend", runtime_backends or backends, "backend")

    _decide("database", _options("database"), "database")

    if "database" in categories and selections["database"] not in BAAS_DATABASES:
        _decide("orm", _options("orm"), "ORM")

    _decide("auth", _options("auth"), "auth")

    if _needs_ai(requirements):
        _decide("ai", _options("ai"), "AI")
        _decide("vector-db", _options("vector-db"), None)

    check = kb.matrix.validate_selection(selections)
    compatibility_issues = [
        CompatibilityIssue(
            option_a=conflict.option_a,
            option_b=conflict.option_b,
            severity="critical",
            message=conflict.reason,
            resolution="Consider alternative options for one of these choices",
        )
        for conflict in check.conflicts
    ]

    scores = [categories[c].recommended.score for c in _SCORED_CATEGORIES if c in categories]
    overall_score = round(sum(scores) / len(scores), 2) if scores else 0.0

    warnings: list[RecommendationWarning] = []
    for category in _SCORED_CATEGORIES:
        if category in categories:
            warnings.extend(categories[category].recommended.warnings)

    picked = [rec.recommended.option for rec in categories.values()]
    return StackRecommendation(
        categories=categories,
        overall_score=overall_score,
        overall_reasoning=reasoning,
        overall_warnings=warnings,
        total_estimated_cost=aggregate_cost(picked),
        overall_complexity=_overall_complexity(
            [categories[c].recommended.option for c in _COMPLEXITY_CATEGORIES if c in categories]
        ),
        compatibility_issues=compatibility_issues,
    )


def quick_recommend(
    category: str,
    kb: KnowledgeBase | None = None,
    **requirements: Any,
) -> ScoredOption | None:
    """Return the single best option in *category* for partial requirements.

    Unspecified requirements fall back to a web app on Node with a low
    budget, intermediate experience, small scale and a normal timeline.

    Raises:
        UnknownCategoryError: If *category* is not a knowledge-base category.
    """
    kb = kb or default_knowledge_base()
    context = create_scoring_context(UserRequirements(**requirements), matrix=kb.matrix)
    ranked = score_and_rank_options(kb.options_for(category), context)
    return ranked[0] if ranked else None


def explain_recommendations(
    requirements: UserRequirements,
    kb: KnowledgeBase | None = None,
) -> str:
    """Render the user's profile followed by every category explanation."""
    rec = recommend_stack(requirements, kb)
    lines = [
        "╔════════════════════════════════════════════════════════════╗",
        "║        STACK RECOMMENDATION ANALYSIS                       ║",
        "╚════════════════════════════════════════════════════════════╝",
        "",
        "📋 Your Profile:",
        f"   Project Type: {requirements.project_kind.value}",
        f"   Experience: {requirements.experience.value}",
        f"   Budget: {requirements.budget.value}",
        f"   Scale: {requirements.scale.value}",
        f"   Timeline: {requirements.timeline.value}",
        "",
    ]
    for category in _SCORED_CATEGORIES:
        if category in rec.categories:
            lines.append(rec.categories[category].explanation)
    return "\n".join(lines)
