"""ORM / query-builder catalog."""

from __future__ import annotations

from kickoff.knowledge.models import Complexity, CostTier, ORMOption, Runtime

_JS = (Runtime.NODE, Runtime.BUN, Runtime.DENO)
_FREE = CostTier(free=True)


ORMS: tuple[ORMOption, ...] = (
    ORMOption(
        id="drizzle",
        name="Drizzle ORM",
        description="Lightweight TypeScript ORM with a SQL-like API and first-class edge support.",
        pros=("SQL-like API with full type safety", "Works on the edge and in serverless", "Active development"),
        cons=("Younger ecosystem than Prisma",),
        tradeoffs=("SQL familiarity versus higher-level abstractions",),
        best_for=("edge runtimes", "Cloudflare D1 and Turso", "type-safe SQL"),
        monthly_cost=_FREE,
        compatible_with=("supabase", "neon", "turso", "d1", "postgres-local", "sqlite", "better-auth"),
        incompatible_with=frozenset({"prisma", "mongodb-local"}),
        complexity=Complexity.LOW,
        documentation_url="https://orm.drizzle.team",
        logo_emoji="💧",
        supported_databases=("postgres", "mysql", "sqlite", "d1", "turso"),
        type_safety=True,
        migrations=True,
        query_style="sql-like",
        supported_runtimes=_JS,
    ),
    ORMOption(
        id="prisma",
        name="Prisma",
        description="Schema-first TypeScript ORM with a generated client and migrations.",
        pros=("Mature and widely used", "Excellent tooling and studio", "Supports MongoDB"),
        cons=("Heavy generated client", "Edge support needs Accelerate or adapters"),
        tradeoffs=("Developer experience versus bundle size and cold starts",),
        best_for=("teams new to SQL", "Node.js servers", "MongoDB with types"),
        monthly_cost=_FREE,
        compatible_with=("supabase", "neon", "postgres-local", "mysql-local", "mongodb-local", "authjs"),
        incompatible_with=frozenset({"drizzle", "turso", "d1"}),
        complexity=Complexity.LOW,
        documentation_url="https://www.prisma.io/docs",
        logo_emoji="🔺",
        supported_databases=("postgres", "mysql", "sqlite", "mongodb", "cockroachdb"),
        type_safety=True,
        migrations=True,
        query_style="schema-first",
        supported_runtimes=(Runtime.NODE, Runtime.BUN),
    ),
    ORMOption(
        id="kysely",
        name="Kysely",
        description="Type-safe SQL query builder for TypeScript.",
        pros=("Type-safe query builder", "Tiny runtime"),
        cons=("No schema migrations DSL", "Smaller community"),
        best_for=("developers who want to write SQL", "existing databases"),
        monthly_cost=_FREE,
        compatible_with=("postgres-local", "mysql-local", "sqlite", "neon", "planetscale"),
        incompatible_with=frozenset({"prisma", "drizzle"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://kysely.dev",
        logo_emoji="🧱",
        supported_databases=("postgres", "mysql", "sqlite"),
        type_safety=True,
        query_style="query-builder",
        supported_runtimes=_JS,
    ),
    ORMOption(
        id="sqlalchemy",
        name="SQLAlchemy",
        description="The standard Python SQL toolkit and ORM.",
        pros=("Mature and established", "Supports every major database", "Large community"),
        cons=("Steep learning curve for the 2.0 API",),
        best_for=("Python backends", "complex relational models"),
        monthly_cost=_FREE,
        compatible_with=("postgres-local", "mysql-local", "sqlite", "fastapi", "litestar"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://docs.sqlalchemy.org",
        logo_emoji="🐍",
        supported_databases=("postgres", "mysql", "sqlite", "cockroachdb"),
        type_safety=True,
        migrations=True,
        query_style="object-oriented",
        supported_runtimes=(Runtime.PYTHON,),
    ),
    ORMOption(
        id="sqlmodel",
        name="SQLModel",
        description="SQLAlchemy models that are also Pydantic models.",
        pros=("One model for API and database", "Built for FastAPI"),
        cons=("Newer project", "Thin documentation for advanced cases"),
        best_for=("FastAPI apps", "small Python services"),
        monthly_cost=_FREE,
        compatible_with=("fastapi", "postgres-local", "sqlite"),
        complexity=Complexity.LOW,
        documentation_url="https://sqlmodel.tiangolo.com",
        logo_emoji="🧩",
        supported_databases=("postgres", "mysql", "sqlite"),
        type_safety=True,
        query_style="object-oriented",
        supported_runtimes=(Runtime.PYTHON,),
    ),
    ORMOption(
        id="tortoise",
        name="Tortoise ORM",
        description="Async Python ORM inspired by Django.",
        pros=("Native asyncio", "Django-like API"),
        cons=("Smaller community",),
        best_for=("async Python services",),
        monthly_cost=_FREE,
        compatible_with=("fastapi", "postgres-local"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://tortoise.github.io",
        logo_emoji="🐢",
        supported_databases=("postgres", "mysql", "sqlite"),
        migrations=True,
        query_style="object-oriented",
        supported_runtimes=(Runtime.PYTHON,),
    ),
    ORMOption(
        id="gorm",
        name="GORM",
        description="Full-featured ORM for Go.",
        pros=("Popular in the Go community", "Auto migrations"),
        cons=("Reflection overhead", "Magic behaviour surprises"),
        best_for=("Go CRUD services",),
        monthly_cost=_FREE,
        compatible_with=("gin", "fiber", "echo", "postgres-local", "mysql-local"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://gorm.io/docs",
        logo_emoji="🐹",
        supported_databases=("postgres", "mysql", "sqlite"),
        migrations=True,
        query_style="object-oriented",
        supported_runtimes=(Runtime.GO,),
    ),
    ORMOption(
        id="sqlx-go",
        name="sqlx (Go)",
        description="Extensions over database/sql for scanning into structs.",
        pros=("Thin and fast", "Plain SQL"),
        cons=("No migrations", "Manual query writing"),
        best_for=("Go services that prefer raw SQL",),
        monthly_cost=_FREE,
        compatible_with=("gin", "fiber", "echo"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://jmoiron.github.io/sqlx",
        logo_emoji="🐹",
        supported_databases=("postgres", "mysql", "sqlite"),
        query_style="sql-like",
        supported_runtimes=(Runtime.GO,),
    ),
    ORMOption(
        id="sqlx-rust",
        name="SQLx (Rust)",
        description="Async Rust SQL crate with compile-time checked queries.",
        pros=("Compile-time checked SQL", "Async native"),
        cons=("Needs a database at build time for checks",),
        best_for=("Rust web services",),
        monthly_cost=_FREE,
        compatible_with=("axum", "actix"),
        complexity=Complexity.HIGH,
        documentation_url="https://github.com/launchbadge/sqlx",
        logo_emoji="🦀",
        supported_databases=("postgres", "mysql", "sqlite"),
        type_safety=True,
        migrations=True,
        query_style="sql-like",
        supported_runtimes=(Runtime.RUST,),
    ),
    ORMOption(
        id="sea-orm",
        name="SeaORM",
        description="Async dynamic ORM for Rust.",
        pros=("Async first", "Entity code generation"),
        cons=("Verbose entity definitions", "Smaller community"),
        best_for=("Rust apps with rich domain models",),
        monthly_cost=_FREE,
        compatible_with=("axum", "actix"),
        complexity=Complexity.HIGH,
        documentation_url="https://www.sea-ql.org/SeaORM",
        logo_emoji="🦀",
        supported_databases=("postgres", "mysql", "sqlite"),
        type_safety=True,
        migrations=True,
        query_style="object-oriented",
        supported_runtimes=(Runtime.RUST,),
    ),
    ORMOption(
        id="diesel",
        name="Diesel",
        description="Safe, extensible ORM and query builder for Rust.",
        pros=("Mature and established", "Compile-time query validation"),
        cons=("Synchronous API", "Steep learning curve"),
        best_for=("Rust services needing maximum safety",),
        monthly_cost=_FREE,
        compatible_with=("axum", "actix"),
        complexity=Complexity.HIGH,
        documentation_url="https://diesel.rs/guides",
        logo_emoji="🦀",
        supported_databases=("postgres", "mysql", "sqlite"),
        type_safety=True,
        migrations=True,
        query_style="query-builder",
        supported_runtimes=(Runtime.RUST,),
    ),
)
