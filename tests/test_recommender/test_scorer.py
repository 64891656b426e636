"""Unit tests for option scoring (kickoff.recommender.scorer).

Tests cover:
- weights_for_profile selection
- score_option: bounds, exclusion, individual factors, alternatives
- A worked beginner/free/urgent example with exact scores
- score_and_rank_options ordering, ties and the "none" placeholder
- compare_options verdicts
"""

from __future__ import annotations

import pytest

from kickoff.knowledge import CostTier, DatabaseOption, default_knowledge_base
from kickoff.knowledge.models import Complexity, StackOption
from kickoff.recommender import (
    BEGINNER_WEIGHTS,
    DEFAULT_WEIGHTS,
    ENTERPRISE_WEIGHTS,
    Impact,
    UserRequirements,
    WarningSeverity,
    compare_options,
    create_scoring_context,
    score_and_rank_options,
    score_option,
    top_recommendation,
    weights_for_profile,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def realtime_beginner() -> UserRequirements:
    return UserRequirements(
        experience="beginner",
        budget="free",
        timeline="urgent",
        must_have_features=["realtime"],
    )


@pytest.fixture
def simple_free() -> DatabaseOption:
    return DatabaseOption(
        id="option-a",
        name="Option A",
        complexity=Complexity.LOW,
        monthly_cost=CostTier(free=True),
    )


@pytest.fixture
def complex_paid() -> DatabaseOption:
    return DatabaseOption(
        id="option-b",
        name="Option B",
        complexity=Complexity.HIGH,
        monthly_cost=CostTier(hobbyist="$99/mo"),
        pros=("Realtime sync",),
    )


def _factor(scored, name):
    return next(item for item in scored.reasoning if item.factor == name)


class TestWeightsForProfile:
    def test_default(self, default_requirements):
        assert weights_for_profile(default_requirements) == DEFAULT_WEIGHTS

    def test_beginner_wins_over_enterprise(self):
        requirements = UserRequirements(experience="beginner", needs_enterprise=True)
        assert weights_for_profile(requirements) == BEGINNER_WEIGHTS

    def test_enterprise_flag(self):
        assert weights_for_profile(UserRequirements(needs_enterprise=True)) == ENTERPRISE_WEIGHTS

    def test_enterprise_scale(self):
        assert weights_for_profile(UserRequirements(scale="enterprise")) == ENTERPRISE_WEIGHTS

    def test_profiles_sum_to_one(self):
        for weights in (DEFAULT_WEIGHTS, BEGINNER_WEIGHTS, ENTERPRISE_WEIGHTS):
            assert weights.total() == pytest.approx(1.0)


class TestWorkedExample:
    def test_exact_scores(self, realtime_beginner, simple_free, complex_paid):
        context = create_scoring_context(realtime_beginner)
        assert score_option(simple_free, context).score == pytest.approx(82.5)
        assert score_option(complex_paid, context).score == pytest.approx(47.73)

    def test_ranking(self, realtime_beginner, simple_free, complex_paid):
        context = create_scoring_context(realtime_beginner)
        ranked = score_and_rank_options([complex_paid, simple_free], context)
        assert [s.option.id for s in ranked] == ["option-a", "option-b"]
        assert [s.rank for s in ranked] == [1, 2]

    def test_sub_scores(self, realtime_beginner, simple_free, complex_paid):
        context = create_scoring_context(realtime_beginner)
        a = score_option(simple_free, context)
        b = score_option(complex_paid, context)
        assert _factor(a, "features").weight == 55
        assert _factor(a, "features").impact == Impact.NEGATIVE
        assert _factor(b, "features").weight == 80
        assert _factor(b, "complexity").weight == 0
        assert _factor(b, "cost").weight == 30

    def test_warnings(self, realtime_beginner, complex_paid):
        scored = score_option(complex_paid, create_scoring_context(realtime_beginner))
        assert [w.category for w in scored.warnings] == ["complexity", "cost"]
        assert scored.warnings[1].message == "Option B may exceed your budget at $99/mo"


class TestScoreOption:
    def test_scores_in_bounds_across_catalog(self):
        kb = default_knowledge_base()
        profiles = [
            UserRequirements(),
            UserRequirements(experience="beginner", budget="free", timeline="urgent"),
            UserRequirements(experience="expert", budget="unlimited", scale="enterprise"),
            UserRequirements(must_have_features=["x", "y", "z", "w", "v", "u", "t"]),
        ]
        for requirements in profiles:
            context = create_scoring_context(requirements, {"orm": "prisma"})
            for option in kb.all_options():
                assert 0 <= score_option(option, context).score <= 100

    def test_excluded_scores_zero(self, simple_free):
        requirements = UserRequirements(exclude_options=["option-a"])
        scored = score_option(simple_free, create_scoring_context(requirements))
        assert scored.score == 0
        assert [item.factor for item in scored.reasoning] == ["excluded"]

    def test_preferred_beats_neutral(self, simple_free):
        neutral = score_option(simple_free, create_scoring_context(UserRequirements()))
        preferred = score_option(
            simple_free, create_scoring_context(UserRequirements(preferred_options=["option-a"]))
        )
        assert preferred.score > neutral.score

    def test_incompatible_with_existing_selection(self):
        d1 = default_knowledge_base().get_option("d1")
        context = create_scoring_context(UserRequirements(), {"orm": "prisma"})
        scored = score_option(d1, context)
        compatibility = _factor(scored, "compatibility")
        assert compatibility.weight == 20
        assert compatibility.explanation == "Cloudflare D1 is incompatible with: prisma"
        assert any(w.severity == WarningSeverity.CRITICAL for w in scored.warnings)

    def test_none_selection_ignored_for_compatibility(self, simple_free):
        context = create_scoring_context(UserRequirements(), {"orm": "none"})
        assert _factor(score_option(simple_free, context), "compatibility").weight == 100

    def test_cost_within_budget(self):
        option = StackOption(id="x", name="X", monthly_cost=CostTier(hobbyist="$20/mo"))
        scored = score_option(option, create_scoring_context(UserRequirements(budget="low")))
        assert _factor(scored, "cost").weight == 70
        assert all(w.category != "cost" for w in scored.warnings)

    def test_unlimited_budget_never_over(self):
        option = StackOption(id="x", name="X", monthly_cost=CostTier(hobbyist="$5000/mo"))
        scored = score_option(option, create_scoring_context(UserRequirements(budget="unlimited")))
        assert _factor(scored, "cost").weight == 70

    def test_ecosystem_indicators(self):
        mature = StackOption(
            id="m", name="M", documentation_url="https://m.dev", pros=("Large community",)
        )
        young = StackOption(id="y", name="Y", cons=("Newer project",))
        context = create_scoring_context(UserRequirements())
        assert _factor(score_option(mature, context), "ecosystem").weight == 85
        assert _factor(score_option(young, context), "ecosystem").weight == 60

    def test_alternatives_keep_declared_order_and_cap(self):
        option = StackOption(id="x", name="X", compatible_with=("z", "b", "z", "a", "c"))
        assert option.compatible_with == ("z", "b", "a", "c")
        scored = score_option(option, create_scoring_context(UserRequirements()))
        assert scored.alternatives == ["z", "b", "a"]

    def test_alternatives_skip_matrix_incompatibilities(self):
        option = StackOption(id="d1", name="D1", compatible_with=("prisma", "drizzle"))
        scored = score_option(option, create_scoring_context(UserRequirements()))
        assert scored.alternatives == ["drizzle"]


class TestRanking:
    def test_ties_keep_input_order(self):
        first = StackOption(id="first", name="First")
        second = StackOption(id="second", name="Second")
        context = create_scoring_context(UserRequirements())
        ranked = score_and_rank_options([first, second], context)
        assert [s.option.id for s in ranked] == ["first", "second"]

    def test_none_placeholder_dropped(self, simple_free):
        none = StackOption(id="none", name="None")
        ranked = score_and_rank_options([none, simple_free], create_scoring_context(UserRequirements()))
        assert [s.option.id for s in ranked] == ["option-a"]

    def test_lone_none_placeholder_kept(self):
        none = StackOption(id="none", name="None")
        ranked = score_and_rank_options([none], create_scoring_context(UserRequirements()))
        assert [s.option.id for s in ranked] == ["none"]

    def test_empty(self):
        context = create_scoring_context(UserRequirements())
        assert score_and_rank_options([], context) == []
        assert top_recommendation([], context) is None

    def test_deterministic(self, beginner_requirements):
        options = default_knowledge_base().options_for("database")
        context = create_scoring_context(beginner_requirements)
        first = score_and_rank_options(options, context)
        assert score_and_rank_options(options, context) == first
        assert [s.rank for s in first] == list(range(1, len(first) + 1))
        assert [s.score for s in first] == sorted((s.score for s in first), reverse=True)


class TestCompareOptions:
    def test_clear_winner(self, realtime_beginner, simple_free, complex_paid):
        verdict = compare_options(simple_free, complex_paid, create_scoring_context(realtime_beginner))
        assert verdict.winner == "A"
        assert verdict.verdict.startswith("Option A is recommended over Option B")

    def test_reverse_order(self, realtime_beginner, simple_free, complex_paid):
        verdict = compare_options(complex_paid, simple_free, create_scoring_context(realtime_beginner))
        assert verdict.winner == "B"

    def test_tie(self, simple_free):
        twin = simple_free.model_copy(update={"id": "twin", "name": "Twin"})
        verdict = compare_options(simple_free, twin, create_scoring_context(UserRequirements()))
        assert verdict.winner == "tie"
        assert verdict.score_a == verdict.score_b
