"""Unit tests for knowledge-base option models (kickoff.knowledge.models).

Tests cover:
- CostTier.bands and lowest_price
- StackOption relation-set validation
- The AnyStackOption discriminated union
"""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from kickoff.knowledge import (
    AnyStackOption,
    BackendOption,
    CostTier,
    DatabaseOption,
    ORMOption,
)

pytestmark = pytest.mark.unit


class TestCostTier:
    def test_bands_skip_missing(self):
        cost = CostTier(free=True, startup="$25/mo")
        assert cost.bands() == ["$25/mo"]

    def test_lowest_price_first_number_of_cheapest_band(self):
        cost = CostTier(hobbyist="$25-100/mo", startup="$300/mo")
        assert cost.lowest_price() == 25.0

    def test_lowest_price_decimal(self):
        assert CostTier(hobbyist="$0.50 per GB").lowest_price() == 0.5

    def test_lowest_price_none_when_undisclosed(self):
        assert CostTier(free=True).lowest_price() is None

    def test_lowest_price_skips_bands_without_numbers(self):
        cost = CostTier(hobbyist="Contact sales", startup="$49/mo")
        assert cost.lowest_price() == 49.0


class TestRelationSets:
    def test_self_reference_rejected(self):
        with pytest.raises(ValidationError, match="lists itself"):
            ORMOption(id="drizzle", name="Drizzle", compatible_with=("drizzle",))

    def test_overlap_rejected(self):
        with pytest.raises(ValidationError, match="both compatible and incompatible"):
            ORMOption(
                id="x",
                name="X",
                compatible_with=("neon",),
                incompatible_with=frozenset({"neon"}),
            )

    def test_options_are_frozen(self):
        option = DatabaseOption(id="db", name="DB")
        with pytest.raises(ValidationError):
            option.name = "Other"


class TestDiscriminatedUnion:
    def test_category_selects_model(self):
        adapter = TypeAdapter(AnyStackOption)
        option = adapter.validate_python(
            {"category": "backend", "id": "hono", "name": "Hono", "runtime": "bun"}
        )
        assert isinstance(option, BackendOption)
        assert option.runtime.value == "bun"

    def test_unknown_category_rejected(self):
        adapter = TypeAdapter(AnyStackOption)
        with pytest.raises(ValidationError):
            adapter.validate_python({"category": "spaceship", "id": "x", "name": "X"})

    def test_category_literal_defaults(self):
        assert DatabaseOption(id="db", name="DB").category == "database"
        assert ORMOption(id="orm", name="ORM").category == "orm"
