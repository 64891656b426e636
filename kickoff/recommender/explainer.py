"""Plain-text explanations of scores, comparisons and whole-stack picks.

Every function here returns a string or a model; none of them print.
"""

from __future__ import annotations

from kickoff.knowledge.models import StackOption
from kickoff.recommender.models import (
    CategoryRecommendation,
    Impact,
    OptionComparison,
    RecommendationWarning,
    ScoredOption,
    StackRecommendation,
    TradeoffAnalysis,
    TradeoffSide,
    WarningSeverity,
)

_DEFAULT_EMOJI = "📦"

# Display label and fallback emoji per category in stack summaries.
_STACK_LABELS: dict[str, tuple[str, str]] = {
    "frontend": ("Frontend", "🖼️"),
    "backend": ("Backend", "⚙️"),
    "database": ("Database", "🗄️"),
    "orm": ("ORM", "🔗"),
    "auth": ("Auth", "🔐"),
    "ai": ("AI", "🤖"),
    "vector-db": ("VectorDB", "📊"),
}

_SEVERITY_ICONS = {
    WarningSeverity.CRITICAL: "🔴",
    WarningSeverity.WARNING: "🟡",
    WarningSeverity.INFO: "🔵",
}


def _reasons(scored: ScoredOption, impact: Impact, limit: int = 3) -> list[str]:
    return [r.explanation for r in scored.reasoning if r.impact == impact][:limit]


def option_explanation(scored: ScoredOption) -> str:
    """Describe one scored option: header, description, reasons and warnings."""
    option = scored.option
    lines = [
        f"{option.logo_emoji or _DEFAULT_EMOJI} {option.name} (Score: {round(scored.score)}/100)",
        "",
        option.description,
        "",
    ]

    positive = _reasons(scored, Impact.POSITIVE)
    if positive:
        lines.append("✅ Why this works for you:")
        lines.extend(f"   • {text}" for text in positive)
        lines.append("")

    negative = _reasons(scored, Impact.NEGATIVE)
    if negative:
        lines.append("⚠️  Considerations:")
        lines.extend(f"   • {text}" for text in negative)
        lines.append("")

    if scored.warnings:
        lines.append("🚨 Warnings:")
        for warning in scored.warnings:
            lines.append(f"   • {warning.message}")
            if warning.suggestion:
                lines.append(f"     → {warning.suggestion}")
        lines.append("")

    return "\n".join(lines)


def short_summary(scored: ScoredOption) -> str:
    """One-line summary with a traffic-light icon for the worst warning."""
    if any(w.severity == WarningSeverity.CRITICAL for w in scored.warnings):
        icon = "🔴"
    elif scored.warnings:
        icon = "🟡"
    else:
        icon = "🟢"
    option = scored.option
    return f"{icon} {option.logo_emoji or _DEFAULT_EMOJI} {option.name} - {round(scored.score)}/100"


def tradeoff_analysis(option_a: StackOption, option_b: StackOption, aspect: str) -> TradeoffAnalysis:
    """Compare two options on a single free-text *aspect* such as ``"performance"``.

    Each option starts at 50 and gains 15 per pro, loses 15 per con and gains
    10 per best-for entry mentioning the aspect.  A gap under 10 is reported
    as comparable.
    """
    needle = aspect.lower()

    def _aspect_score(option: StackOption) -> int:
        score = 50
        score += 15 * sum(1 for pro in option.pros if needle in pro.lower())
        score -= 15 * sum(1 for con in option.cons if needle in con.lower())
        score += 10 * sum(1 for best in option.best_for if needle in best.lower())
        return max(0, min(100, score))

    def _benefit(option: StackOption) -> str:
        return next(
            (pro for pro in option.pros if needle in pro.lower()),
            f"Good {aspect} support",
        )

    score_a, score_b = _aspect_score(option_a), _aspect_score(option_b)
    benefit_a, benefit_b = _benefit(option_a), _benefit(option_b)

    if abs(score_a - score_b) < 10:
        recommendation = f"Both options are comparable for {aspect}"
    elif score_a > score_b:
        recommendation = f"{option_a.name} is better for {aspect}"
    else:
        recommendation = f"{option_b.name} is better for {aspect}"

    return TradeoffAnalysis(
        aspect=aspect,
        option_a=TradeoffSide(name=option_a.name, score=score_a, benefit=benefit_a),
        option_b=TradeoffSide(name=option_b.name, score=score_b, benefit=benefit_b),
        recommendation=recommendation,
        choose_a_if=f"You prioritize {option_a.name}'s approach: {benefit_a}",
        choose_b_if=f"You prioritize {option_b.name}'s approach: {benefit_b}",
    )


def comparison(
    option_a: StackOption,
    option_b: StackOption,
    score_a: float,
    score_b: float,
) -> OptionComparison:
    """Build a side-by-side comparison listing each option's unique pros and cons."""
    if abs(score_a - score_b) < 5:
        winner = "tie"
    elif score_a > score_b:
        winner = "A"
    else:
        winner = "B"

    def _unique(items: tuple[str, ...], others: tuple[str, ...]) -> list[str]:
        lowered = {other.lower() for other in others}
        return [item for item in items if item.lower() not in lowered]

    pros_a = _unique(option_a.pros, option_b.pros)
    pros_b = _unique(option_b.pros, option_a.pros)
    cons_a = _unique(option_a.cons, option_b.cons)
    cons_b = _unique(option_b.cons, option_a.cons)

    if winner == "tie":
        verdict = (
            f"{option_a.name} and {option_b.name} are both excellent choices. "
            "Consider your specific priorities."
        )
    elif winner == "A":
        verdict = (
            f"{option_a.name} is recommended for your use case. "
            f"Key advantages: {', '.join(pros_a[:2])}."
        )
    else:
        verdict = (
            f"{option_b.name} is recommended for your use case. "
            f"Key advantages: {', '.join(pros_b[:2])}."
        )

    return OptionComparison(
        option_a=option_a,
        option_b=option_b,
        winner=winner,
        score_a=score_a,
        score_b=score_b,
        pros_a=pros_a[:5],
        pros_b=pros_b[:5],
        cons_a=cons_a[:3],
        cons_b=cons_b[:3],
        verdict=verdict,
    )


def category_explanation(rec: CategoryRecommendation) -> str:
    """Render the detailed explanation block for one category's pick."""
    recommended = rec.recommended
    option = recommended.option
    banner = "═" * 38
    lines = [
        banner,
        f"  {rec.category.upper()} RECOMMENDATION",
        banner,
        "",
        f"🏆 Recommended: {option.name}",
        f"   Score: {round(recommended.score)}/100",
        "",
        f"   {option.description}",
        "",
        "   Why this fits your needs:",
    ]
    lines.extend(f"   ✓ {text}" for text in _reasons(recommended, Impact.POSITIVE))
    lines.append("")

    lines.append("   Pros:")
    lines.extend(f"   + {pro}" for pro in option.pros[:4])
    lines.append("")
    lines.append("   Cons:")
    lines.extend(f"   - {con}" for con in option.cons[:3])
    lines.append("")

    if option.tradeoffs:
        lines.append("   Key Tradeoffs:")
        lines.extend(f"   ⚖️  {tradeoff}" for tradeoff in option.tradeoffs[:3])
        lines.append("")

    if recommended.warnings:
        lines.append("   ⚠️  Warnings:")
        lines.extend(f"   • {w.message}" for w in recommended.warnings)
        lines.append("")

    if rec.alternatives:
        lines.append("   Alternatives to consider:")
        for index, alt in enumerate(rec.alternatives[:3], start=1):
            lines.append(f"   {index}. {alt.option.name} (Score: {round(alt.score)}/100)")
            lines.append(f"      {alt.option.description}")
        lines.append("")

    cost = option.monthly_cost
    lines.append("   💰 Pricing:")
    if cost.free:
        lines.append("   • Free tier: Available")
    if cost.hobbyist:
        lines.append(f"   • Hobbyist: {cost.hobbyist}")
    if cost.startup:
        lines.append(f"   • Startup: {cost.startup}")
    lines.append("")

    return "\n".join(lines)


def stack_summary(rec: StackRecommendation) -> str:
    """Render the whole-stack summary: score, picks, cost, reasons and issues."""
    lines = [
        "╔════════════════════════════════════════════════════════════╗",
        "║           YOUR RECOMMENDED STACK                          ║",
        "╚════════════════════════════════════════════════════════════╝",
        "",
        f"📊 Overall Score: {round(rec.overall_score)}/100",
        f"🎚️  Complexity: {rec.overall_complexity.value}",
        "",
        "📦 Selected Stack:",
    ]
    for category, (label, fallback) in _STACK_LABELS.items():
        category_rec = rec.get(category)
        if category_rec is None:
            continue
        option = category_rec.recommended.option
        lines.append(f"   {label + ':':<10} {option.logo_emoji or fallback} {option.name}")
    lines.append("")

    cost = rec.total_estimated_cost
    lines.append("💰 Estimated Monthly Cost:")
    if cost.free:
        lines.append("   • Can start free")
    if cost.hobbyist:
        lines.append(f"   • Hobbyist: {cost.hobbyist}")
    if cost.startup:
        lines.append(f"   • Startup: {cost.startup}")
    lines.append("")

    if rec.overall_reasoning:
        lines.append("📝 Why this stack:")
        lines.extend(f"   • {reason}" for reason in rec.overall_reasoning[:5])
        lines.append("")

    if rec.overall_warnings:
        lines.append("⚠️  Things to consider:")
        lines.extend(f"   {_SEVERITY_ICONS[w.severity]} {w.message}" for w in rec.overall_warnings)
        lines.append("")

    if rec.compatibility_issues:
        lines.append("🔗 Compatibility Notes:")
        for issue in rec.compatibility_issues:
            icon = "❌" if issue.severity == "critical" else "⚠️"
            lines.append(f"   {icon} {issue.message}")
            if issue.resolution:
                lines.append(f"      → {issue.resolution}")
        lines.append("")

    return "\n".join(lines)


def explain_choice(chosen: ScoredOption, rejected: ScoredOption) -> str:
    """Explain why *chosen* ranked above *rejected*."""
    chosen_name = chosen.option.name
    rejected_name = rejected.option.name
    diff = chosen.score - rejected.score

    lines = [f"Why {chosen_name} over {rejected_name}?", ""]
    if diff > 20:
        lines.append(f"{chosen_name} scored significantly higher ({round(diff)} points)")
    elif diff > 10:
        lines.append(f"{chosen_name} scored moderately higher ({round(diff)} points)")
    else:
        lines.append(f"Both options scored similarly, but {chosen_name} edges ahead")
    lines.append("")

    lines.append(f"Key advantages of {chosen_name}:")
    lines.extend(f"• {text}" for text in _reasons(chosen, Impact.POSITIVE))
    lines.append("")

    concerns = _reasons(rejected, Impact.NEGATIVE)
    if concerns:
        lines.append(f"Concerns with {rejected_name}:")
        lines.extend(f"• {text}" for text in concerns)

    return "\n".join(lines)


def format_warnings(warnings: list[RecommendationWarning]) -> str:
    """Group warnings by severity.  Returns ``""`` for an empty list."""
    if not warnings:
        return ""

    lines: list[str] = []
    groups = (
        (WarningSeverity.CRITICAL, "🔴 Critical Issues:", True),
        (WarningSeverity.WARNING, "🟡 Warnings:", True),
        (WarningSeverity.INFO, "🔵 Notes:", False),
    )
    for severity, heading, with_suggestion in groups:
        matching = [w for w in warnings if w.severity == severity]
        if not matching:
            continue
        lines.append(heading)
        for warning in matching:
            lines.append(f"   {warning.message}")
            if with_suggestion and warning.suggestion:
                lines.append(f"   → {warning.suggestion}")
        lines.append("")

    return "\n".join(lines)
