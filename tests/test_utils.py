"""Unit tests for utility functions (kickoff.utils).

Tests cover:
- format_duration
- STAGE_NAMES / STAGE_COLORS constants
- Rich output helpers (print_stage_header, print_summary_table,
  print_ranking_table, print_success / print_error / print_warning)
"""

from __future__ import annotations

import pytest

from kickoff.knowledge import DatabaseOption
from kickoff.recommender import ReasoningItem, ScoredOption
from kickoff.utils import (
    STAGE_COLORS,
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


# ---------------------------------------------------------------------------
# format_duration
# ---------------------------------------------------------------------------


class TestFormatDuration:
    @pytest.mark.unit
    def test_milliseconds(self):
        assert format_duration(0.042) == "42ms"

    @pytest.mark.unit
    def test_zero(self):
        assert format_duration(0.0) == "0ms"

    @pytest.mark.unit
    def test_negative(self):
        assert format_duration(-5.0) == "0ms"

    @pytest.mark.unit
    def test_seconds_only(self):
        assert format_duration(3.7) == "3.7s"

    @pytest.mark.unit
    def test_fractional_seconds_below_minute(self):
        assert format_duration(45.3) == "45.3s"

    @pytest.mark.unit
    def test_minutes_and_seconds(self):
        assert format_duration(65.2) == "1m 5s"

    @pytest.mark.unit
    def test_exactly_one_minute(self):
        assert format_duration(60.0) == "1m 0s"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------


class TestStageConstants:
    @pytest.mark.unit
    def test_names(self):
        assert STAGE_NAMES == {1: "VALIDATE", 2: "RECOMMEND", 3: "PLAN"}

    @pytest.mark.unit
    def test_every_stage_has_a_color(self):
        assert set(STAGE_COLORS) == set(STAGE_NAMES)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_stage_header(self):
        with console.capture() as capture:
            print_stage_header(2, "recommend")
        assert "Stage 2: RECOMMEND" in capture.get()

    @pytest.mark.unit
    def test_print_stage_header_unknown_stage(self):
        # Falls back to white instead of raising
        print_stage_header(9, "EXTRA")

    @pytest.mark.unit
    def test_print_summary_table(self):
        with console.capture() as capture:
            print_summary_table({"Fragments": "base, nextjs"}, title="Generation Plan")
        output = capture.get()
        assert "Generation Plan" in output
        assert "base, nextjs" in output

    @pytest.mark.unit
    def test_print_ranking_table(self):
        ranked = [
            ScoredOption(
                option=DatabaseOption(id="neon", name="Neon"),
                score=81.25,
                rank=1,
                reasoning=[ReasoningItem(factor="cost", explanation="Free tier")],
            )
        ]
        with console.capture() as capture:
            print_ranking_table(ranked, title="database ranking")
        output = capture.get()
        assert "Neon" in output
        assert "81.2" in output or "81.3" in output
        assert "Free tier" in output

    @pytest.mark.unit
    def test_messages(self):
        with console.capture() as capture:
            print_success("All stages passed")
            print_error("Something failed")
            print_warning("Heads up")
        output = capture.get()
        assert "All stages passed" in output
        assert "Something failed" in output
        assert "Heads up" in output
