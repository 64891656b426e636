"""Unit tests for the rule-based constraint engine (kickoff.validation.rules).

Tests cover:
- The CONSTRAINTS catalog (ids, uniqueness, order)
- validate_constraints: partition, determinism, every rule shape
- Preset configurations validate cleanly
- Substituted constraint lists
- format_validation_result
"""

from __future__ import annotations

import pytest

from kickoff.project import ProjectConfig, config_from_preset, list_presets
from kickoff.validation import (
    CONSTRAINTS,
    Constraint,
    Severity,
    format_validation_result,
    validate_constraints,
)

pytestmark = pytest.mark.unit


def _ids(violations) -> list[str]:
    return [violation.id for violation in violations]


class TestCatalog:
    def test_ids_unique(self):
        ids = [constraint.id for constraint in CONSTRAINTS]
        assert len(ids) == len(set(ids))

    def test_expected_rules_registered(self):
        ids = {constraint.id for constraint in CONSTRAINTS}
        assert {
            "d1-requires-drizzle",
            "better-auth-nextjs-bun",
            "turbopuffer-latency",
            "prisma-edge-warning",
            "firebase-orm-mismatch",
            "mongodb-sql-orm",
            "convex-orm-mismatch",
            "pocketbase-orm-mismatch",
            "auth-needs-database",
            "vectordb-needs-embeddings",
            "mlx-apple-only",
            "supabase-vector-requires-supabase",
            "supabase-auth-requires-supabase",
            "convex-auth-requires-convex",
            "firebase-auth-requires-firebase",
            "pocketbase-auth-requires-pocketbase",
            "python-orm-runtime-mismatch",
            "go-orm-runtime-mismatch",
            "rust-orm-runtime-mismatch",
            "tanstack-requires-ts",
        } == ids


class TestScenarios:
    def test_d1_with_prisma_is_an_error(self):
        config = ProjectConfig(name="app", database_provider="d1", orm="prisma")
        result = validate_constraints(config)
        assert result.valid is False
        assert "d1-requires-drizzle" in _ids(result.errors)
        assert result.errors[0].docs == "https://orm.drizzle.team/docs/connect-cloudflare-d1"

    @pytest.mark.parametrize("orm", ["prisma", "none"])
    def test_mongodb_allows_prisma_or_none(self, orm):
        config = ProjectConfig(name="app", database_provider="mongodb-local", orm=orm)
        assert "mongodb-sql-orm" not in _ids(validate_constraints(config).errors)

    def test_mongodb_with_drizzle_is_an_error(self):
        config = ProjectConfig(name="app", database_provider="mongodb-local", orm="drizzle")
        result = validate_constraints(config)
        assert result.valid is False
        assert _ids(result.errors) == ["mongodb-sql-orm"]

    def test_turbopuffer_is_a_single_warning(self):
        config = ProjectConfig(
            name="app", vector_db="turbopuffer", embedding_provider="openai-embeddings"
        )
        result = validate_constraints(config)
        assert result.valid is True
        assert result.errors == []
        assert _ids(result.warnings) == ["turbopuffer-latency"]


class TestRuleShapes:
    def test_cross_field_platform_auth(self):
        config = ProjectConfig(name="app", auth_provider="supabase-auth", database_provider="neon")
        result = validate_constraints(config)
        assert _ids(result.errors) == ["supabase-auth-requires-supabase"]
        assert result.errors[0].message == "Supabase Auth requires Supabase as the database provider."

    def test_better_auth_nextjs_bun(self):
        config = ProjectConfig(
            name="app",
            runtime="bun",
            auth_provider="better-auth",
            database_provider="turso",
            orm="drizzle",
        )
        assert _ids(validate_constraints(config).errors) == ["better-auth-nextjs-bun"]

    def test_baas_orm_conflicts(self):
        for database, rule in (
            ("firebase", "firebase-orm-mismatch"),
            ("convex", "convex-orm-mismatch"),
            ("pocketbase", "pocketbase-orm-mismatch"),
        ):
            config = ProjectConfig(name="app", database_provider=database, orm="drizzle")
            assert rule in _ids(validate_constraints(config).errors)

    def test_self_hosted_auth_without_database_warns(self):
        config = ProjectConfig(name="app", auth_provider="lucia")
        result = validate_constraints(config)
        assert result.valid is True
        assert _ids(result.warnings) == ["auth-needs-database"]

    def test_hosted_auth_without_database_is_fine(self):
        config = ProjectConfig(name="app", auth_provider="clerk")
        result = validate_constraints(config)
        assert result.errors == []
        assert result.warnings == []

    def test_orm_runtime_mismatch(self):
        config = ProjectConfig(name="app", database_provider="postgres-local", orm="gorm")
        assert _ids(validate_constraints(config).errors) == ["go-orm-runtime-mismatch"]

    def test_tanstack_requires_node_or_bun(self):
        config = ProjectConfig(name="app", type="tanstack-start", runtime="python")
        assert "tanstack-requires-ts" in _ids(validate_constraints(config).errors)

    def test_prisma_on_hono_warns(self):
        config = ProjectConfig(
            name="app", type="hono-api", database_provider="neon", orm="prisma"
        )
        result = validate_constraints(config)
        assert result.valid is True
        assert _ids(result.warnings) == ["prisma-edge-warning"]

    def test_all_matches_reported_in_registration_order(self):
        config = ProjectConfig(
            name="app",
            database_provider="d1",
            orm="prisma",
            vector_db="turbopuffer",
            runtime="bun",
        )
        result = validate_constraints(config)
        order = [constraint.id for constraint in CONSTRAINTS]
        reported = _ids(result.errors) + _ids(result.warnings)
        assert _ids(result.errors) == sorted(_ids(result.errors), key=order.index)
        assert _ids(result.warnings) == sorted(_ids(result.warnings), key=order.index)
        assert {"d1-requires-drizzle", "turbopuffer-latency", "prisma-edge-warning",
                "vectordb-needs-embeddings"} <= set(reported)


class TestProperties:
    def test_presets_have_no_errors(self):
        for preset in list_presets():
            result = validate_constraints(config_from_preset(preset.name, "demo"))
            assert result.valid, (preset.name, _ids(result.errors))

    def test_partition(self):
        configs = [
            ProjectConfig(name="a"),
            ProjectConfig(name="b", vector_db="turbopuffer"),
            ProjectConfig(name="c", database_provider="d1", orm="prisma"),
            config_from_preset("mlx-local", "d"),
        ]
        for config in configs:
            result = validate_constraints(config)
            assert result.valid == (len(result.errors) == 0)

    def test_deterministic(self):
        config = ProjectConfig(
            name="app", database_provider="convex", orm="prisma", auth_provider="firebase-auth"
        )
        first = validate_constraints(config)
        for _ in range(5):
            assert validate_constraints(config) == first


class TestSubstitutedConstraints:
    def test_custom_rule_list(self):
        always = Constraint(
            id="always-warn", severity=Severity.WARNING, check=lambda c: True, message="hi"
        )
        never = Constraint(
            id="never-error", severity=Severity.ERROR, check=lambda c: False, message="no"
        )
        result = validate_constraints(ProjectConfig(name="app"), [always, never])
        assert result.valid is True
        assert _ids(result.warnings) == ["always-warn"]

    def test_empty_rule_list(self):
        result = validate_constraints(
            ProjectConfig(name="app", database_provider="d1", orm="prisma"), []
        )
        assert result.valid is True


class TestFormatValidationResult:
    def test_clean(self, plain_config):
        text = format_validation_result(validate_constraints(plain_config))
        assert text == "✅ Stack validation passed - no issues detected"

    def test_errors_and_warnings(self):
        config = ProjectConfig(
            name="app", database_provider="d1", orm="prisma", vector_db="turbopuffer",
            embedding_provider="openai-embeddings",
        )
        text = format_validation_result(validate_constraints(config))
        assert text.startswith("❌ Stack Validation Errors:")
        assert "⚠️  Stack Warnings:" in text
        assert "📖 https://orm.drizzle.team/docs/connect-cloudflare-d1" in text
        assert "✅" not in text
