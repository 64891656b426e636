"""Rule-based stack constraints.

``CONSTRAINTS`` is a flat, ordered list of predicates over a
``ProjectConfig``.  ``validate_constraints`` evaluates every one of them (no
short-circuiting) and sorts matches into errors and warnings, preserving
registration order so results are deterministic.

Rule shapes:

* *requires*: option A forces option B elsewhere (``d1-requires-drizzle``).
* *conflict*: A never co-occurs with a non-default B (``convex-orm-mismatch``).
* *cross-field requires*: a platform-specific choice forces an unrelated field
  (``supabase-auth-requires-supabase``).
* *soft warning*: an operational caveat that never blocks generation
  (``turbopuffer-latency``).
"""

from __future__ import annotations

from collections.abc import Sequence

from kickoff.knowledge.auth import HOSTED_AUTH_IDS
from kickoff.knowledge.models import Runtime
from kickoff.project import NONE, ProjectConfig, ProjectType
from kickoff.validation.models import (
    Constraint,
    ConstraintViolation,
    Severity,
    ValidationResult,
)

_PYTHON_ORMS = frozenset({"sqlalchemy", "tortoise", "sqlmodel"})
_GO_ORMS = frozenset({"gorm", "sqlx-go"})
_RUST_ORMS = frozenset({"diesel", "sqlx-rust", "sea-orm"})
_APPLE_ONLY_LOCAL_AI = frozenset({"mlx", "mlx-lm"})


def _platform_auth(auth_id: str, database_id: str, label: str) -> Constraint:
    return Constraint(
        id=f"{auth_id}-requires-{database_id}",
        severity=Severity.ERROR,
        check=lambda c: c.auth_provider == auth_id and c.database_provider != database_id,
        message=f"{label} Auth requires {label} as the database provider.",
    )


CONSTRAINTS: tuple[Constraint, ...] = (
    Constraint(
        id="d1-requires-drizzle",
        severity=Severity.ERROR,
        check=lambda c: c.database_provider == "d1" and c.orm == "prisma",
        message=(
            "Cloudflare D1 requires Drizzle ORM. Prisma has significant edge compatibility "
            "issues with D1 including large bundle sizes and transaction incompatibility."
        ),
        docs="https://orm.drizzle.team/docs/connect-cloudflare-d1",
    ),
    Constraint(
        id="better-auth-nextjs-bun",
        severity=Severity.ERROR,
        check=lambda c: (
            c.auth_provider == "better-auth"
            and c.type == ProjectType.NEXTJS
            and c.runtime == Runtime.BUN
        ),
        message=(
            "Better-Auth has known build failures with Next.js + Bun runtime. "
            "Use Node.js runtime or switch to a different auth provider."
        ),
        docs="https://github.com/better-auth/better-auth/issues/6781",
    ),
    Constraint(
        id="turbopuffer-latency",
        severity=Severity.WARNING,
        check=lambda c: c.vector_db == "turbopuffer",
        message=(
            "Turbopuffer uses object storage architecture with ~500ms P90 cold query latency. "
            "Ensure your UI has loading states for search operations. Consider Pinecone or "
            "Qdrant for sub-50ms latency requirements."
        ),
        docs="https://turbopuffer.com/",
    ),
    Constraint(
        id="prisma-edge-warning",
        severity=Severity.WARNING,
        check=lambda c: c.orm == "prisma" and (c.runtime == Runtime.BUN or c.type == ProjectType.HONO_API),
        message=(
            "Prisma on edge runtimes requires the Prisma Accelerate or Data Proxy. "
            "Consider Drizzle for simpler edge deployment."
        ),
        docs="https://www.prisma.io/docs/orm/prisma-client/deployment/edge/overview",
    ),
    Constraint(
        id="firebase-orm-mismatch",
        severity=Severity.ERROR,
        check=lambda c: c.database_provider == "firebase" and c.orm != NONE,
        message=(
            "Firebase Firestore is a NoSQL document database and does not work with SQL ORMs "
            'like Drizzle or Prisma. Set ORM to "none" when using Firebase.'
        ),
    ),
    Constraint(
        id="mongodb-sql-orm",
        severity=Severity.ERROR,
        check=lambda c: c.database_provider == "mongodb-local" and c.orm not in (NONE, "prisma"),
        message=(
            "MongoDB is a NoSQL database. Only Prisma supports MongoDB among SQL-style ORMs. "
            'Use Prisma or set ORM to "none" for Mongoose.'
        ),
    ),
    Constraint(
        id="convex-orm-mismatch",
        severity=Severity.ERROR,
        check=lambda c: c.database_provider == "convex" and c.orm != NONE,
        message=(
            "Convex is a reactive BaaS with its own data layer. External ORMs are not "
            'compatible. Set ORM to "none".'
        ),
    ),
    Constraint(
        id="pocketbase-orm-mismatch",
        severity=Severity.ERROR,
        check=lambda c: c.database_provider == "pocketbase" and c.orm != NONE,
        message=(
            "PocketBase is a self-contained BaaS with built-in SQLite. External ORMs are not "
            'compatible. Set ORM to "none".'
        ),
    ),
    Constraint(
        id="auth-needs-database",
        severity=Severity.WARNING,
        check=lambda c: (
            c.auth_provider != NONE
            and c.auth_provider not in HOSTED_AUTH_IDS
            and c.database_provider == NONE
        ),
        message=(
            "Self-hosted auth providers like Better-Auth, Lucia, and AuthJS require a database "
            "to store sessions and users. Add a database or use a managed auth provider like Clerk."
        ),
    ),
    Constraint(
        id="vectordb-needs-embeddings",
        severity=Severity.WARNING,
        check=lambda c: c.vector_db != NONE and c.embedding_provider == NONE,
        message=(
            "You selected a vector database but no embedding provider. You will need to "
            "provide embeddings to store and query vectors."
        ),
    ),
    Constraint(
        id="mlx-apple-only",
        severity=Severity.WARNING,
        check=lambda c: c.local_ai in _APPLE_ONLY_LOCAL_AI,
        message=(
            "MLX is optimized for Apple Silicon (M1/M2/M3/M4/M5). This project will only run "
            "on macOS with Apple Silicon."
        ),
    ),
    Constraint(
        id="supabase-vector-requires-supabase",
        severity=Severity.ERROR,
        check=lambda c: c.vector_db == "supabase-vector" and c.database_provider != "supabase",
        message=(
            "Supabase Vector is a pgvector integration and requires Supabase as the "
            "database provider."
        ),
    ),
    _platform_auth("supabase-auth", "supabase", "Supabase"),
    _platform_auth("convex-auth", "convex", "Convex"),
    _platform_auth("firebase-auth", "firebase", "Firebase"),
    _platform_auth("pocketbase-auth", "pocketbase", "PocketBase"),
    Constraint(
        id="python-orm-runtime-mismatch",
        severity=Severity.ERROR,
        check=lambda c: c.orm in _PYTHON_ORMS and c.runtime != Runtime.PYTHON,
        message="SQLAlchemy, Tortoise ORM, and SQLModel are Python ORMs and require Python runtime.",
    ),
    Constraint(
        id="go-orm-runtime-mismatch",
        severity=Severity.ERROR,
        check=lambda c: c.orm in _GO_ORMS and c.runtime != Runtime.GO,
        message="GORM and sqlx are Go ORMs and require Go runtime.",
    ),
    Constraint(
        id="rust-orm-runtime-mismatch",
        severity=Severity.ERROR,
        check=lambda c: c.orm in _RUST_ORMS and c.runtime != Runtime.RUST,
        message="Diesel, SQLx, and SeaORM are Rust ORMs and require Rust runtime.",
    ),
    Constraint(
        id="tanstack-requires-ts",
        severity=Severity.ERROR,
        check=lambda c: (
            c.type == ProjectType.TANSTACK_START and c.runtime not in (Runtime.NODE, Runtime.BUN)
        ),
        message="TanStack Start is a TypeScript framework and requires Node.js or Bun runtime.",
    ),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_constraints(
    config: ProjectConfig,
    constraints: Sequence[Constraint] = CONSTRAINTS,
) -> ValidationResult:
    """Evaluate every constraint against *config*.

    Args:
        config: The resolved project configuration.
        constraints: Rules to evaluate, in order.  Defaults to ``CONSTRAINTS``.

    Returns:
        A ``ValidationResult`` whose ``valid`` flag is ``True`` exactly when
        no error-severity constraint matched.  Warnings never affect it.
    """
    errors: list[ConstraintViolation] = []
    warnings: list[ConstraintViolation] = []

    for constraint in constraints:
        if not constraint.check(config):
            continue
        violation = ConstraintViolation(
            id=constraint.id,
            message=constraint.message,
            docs=constraint.docs,
        )
        if constraint.severity == Severity.ERROR:
            errors.append(violation)
        else:
            warnings.append(violation)

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


def format_validation_result(result: ValidationResult) -> str:
    """Render a ``ValidationResult`` as plain text for terminals and logs."""
    lines: list[str] = []

    if result.errors:
        lines.append("❌ Stack Validation Errors:")
        for error in result.errors:
            lines.append(f"  • {error.message}")
            if error.docs:
                lines.append(f"    📖 {error.docs}")

    if result.warnings:
        if lines:
            lines.append("")
        lines.append("⚠️  Stack Warnings:")
        for warning in result.warnings:
            lines.append(f"  • {warning.message}")
            if warning.docs:
                lines.append(f"    📖 {warning.docs}")

    if result.valid and not result.warnings:
        lines.append("✅ Stack validation passed - no issues detected")

    return "\n".join(lines)
