"""Database catalog."""

from __future__ import annotations

from kickoff.knowledge.models import (
    Complexity,
    CostTier,
    DatabaseOption,
    Runtime,
    Scalability,
)

_JS = (Runtime.NODE, Runtime.BUN, Runtime.DENO)
_ALL = (Runtime.NODE, Runtime.BUN, Runtime.DENO, Runtime.PYTHON, Runtime.GO, Runtime.RUST)


DATABASES: tuple[DatabaseOption, ...] = (
    DatabaseOption(
        id="supabase",
        name="Supabase",
        description="Open-source Firebase alternative built on Postgres with auth, storage and realtime.",
        pros=(
            "Full Postgres with extensions",
            "Built-in auth, storage and realtime",
            "Large community and active development",
            "Generous free tier",
        ),
        cons=("Vendor features tie you to the platform", "Free projects pause after inactivity"),
        tradeoffs=("Convenience of a BaaS versus portability of plain Postgres",),
        best_for=("SaaS apps needing auth and database in one place", "realtime dashboards", "rapid prototyping"),
        monthly_cost=CostTier(free=True, hobbyist="$25/mo", startup="$25-100/mo", enterprise="$599+/mo"),
        required_env_vars=("SUPABASE_URL", "SUPABASE_ANON_KEY", "DATABASE_URL"),
        compatible_with=("drizzle", "prisma", "supabase-auth", "pgvector", "supabase-vector"),
        incompatible_with=frozenset({"firebase", "convex", "pocketbase"}),
        complexity=Complexity.LOW,
        documentation_url="https://supabase.com/docs",
        logo_emoji="⚡",
        type="sql",
        hosting="baas",
        scalability=Scalability.HIGH,
        supported_runtimes=_ALL,
        connection_pooling=True,
        realtime_support=True,
        branching_support=True,
    ),
    DatabaseOption(
        id="neon",
        name="Neon",
        description="Serverless Postgres with branching and scale-to-zero.",
        pros=("Serverless with scale-to-zero", "Database branching for previews", "Standard Postgres wire protocol"),
        cons=("Cold starts on the free tier", "Newer service with a smaller community"),
        tradeoffs=("Pay-per-use economics versus occasional cold starts",),
        best_for=("serverless apps on Vercel", "preview environments per pull request"),
        monthly_cost=CostTier(free=True, hobbyist="$19/mo", startup="$69/mo", enterprise="custom"),
        required_env_vars=("DATABASE_URL",),
        compatible_with=("drizzle", "prisma", "kysely", "pgvector"),
        incompatible_with=frozenset({"firebase", "convex", "pocketbase"}),
        complexity=Complexity.LOW,
        documentation_url="https://neon.tech/docs",
        logo_emoji="🟢",
        type="sql",
        hosting="serverless",
        scalability=Scalability.HIGH,
        supported_runtimes=_ALL,
        connection_pooling=True,
        branching_support=True,
    ),
    DatabaseOption(
        id="turso",
        name="Turso",
        description="Edge-replicated SQLite built on libSQL.",
        pros=("Replicas close to users at the edge", "SQLite simplicity", "Generous free tier"),
        cons=("No Prisma libSQL adapter", "Younger ecosystem than Postgres"),
        tradeoffs=("Low read latency versus SQLite feature limits",),
        best_for=("edge applications", "read-heavy global apps"),
        monthly_cost=CostTier(free=True, hobbyist="$29/mo", startup="$29-99/mo"),
        required_env_vars=("TURSO_DATABASE_URL", "TURSO_AUTH_TOKEN"),
        compatible_with=("drizzle", "hono"),
        incompatible_with=frozenset({"prisma", "mysql-local"}),
        complexity=Complexity.LOW,
        documentation_url="https://docs.turso.tech",
        logo_emoji="🐢",
        type="sql",
        hosting="serverless",
        scalability=Scalability.HIGH,
        supported_runtimes=_JS + (Runtime.PYTHON, Runtime.GO, Runtime.RUST),
    ),
    DatabaseOption(
        id="d1",
        name="Cloudflare D1",
        description="Cloudflare's serverless SQLite database for Workers.",
        pros=("Runs next to Cloudflare Workers", "Zero connection management", "Free tier included with Workers"),
        cons=("Only reachable from Cloudflare Workers", "Requires Drizzle for typed access", "Less mature than hosted Postgres"),
        tradeoffs=("Tight Cloudflare integration versus platform lock-in",),
        best_for=("Cloudflare Workers apps", "edge APIs with Hono"),
        monthly_cost=CostTier(free=True, hobbyist="$5/mo"),
        compatible_with=("drizzle", "hono"),
        incompatible_with=frozenset({"prisma", "nextjs"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://developers.cloudflare.com/d1",
        logo_emoji="☁️",
        type="sql",
        hosting="serverless",
        scalability=Scalability.MEDIUM,
        supported_runtimes=(Runtime.NODE, Runtime.BUN),
    ),
    DatabaseOption(
        id="convex",
        name="Convex",
        description="Reactive backend platform with a document database and server functions.",
        pros=("Realtime by default", "End-to-end type safety", "No ORM or migrations needed"),
        cons=("Proprietary query model", "Cannot use SQL ORMs"),
        tradeoffs=("Developer speed versus lock-in to the Convex runtime",),
        best_for=("realtime collaborative apps", "type-safe full-stack TypeScript"),
        monthly_cost=CostTier(free=True, hobbyist="$25/mo", startup="$25-100/mo"),
        required_env_vars=("CONVEX_DEPLOYMENT", "NEXT_PUBLIC_CONVEX_URL"),
        compatible_with=("convex-auth", "nextjs", "tanstack-start"),
        incompatible_with=frozenset({"drizzle", "prisma", "supabase", "firebase"}),
        complexity=Complexity.LOW,
        documentation_url="https://docs.convex.dev",
        logo_emoji="🔄",
        type="document",
        hosting="baas",
        scalability=Scalability.HIGH,
        supported_runtimes=_JS,
        realtime_support=True,
    ),
    DatabaseOption(
        id="firebase",
        name="Firebase Firestore",
        description="Google's managed NoSQL document database with offline sync.",
        pros=("Mature and widely used", "Offline sync for mobile", "Tight Google Cloud integration"),
        cons=("NoSQL data modelling limits", "Costs grow quickly with reads"),
        tradeoffs=("Managed scaling versus query flexibility",),
        best_for=("mobile apps", "realtime chat"),
        monthly_cost=CostTier(free=True, hobbyist="$0-25/mo", startup="$25-200/mo", enterprise="custom"),
        required_env_vars=("FIREBASE_PROJECT_ID", "FIREBASE_API_KEY"),
        compatible_with=("firebase-auth", "nextjs", "vite-react"),
        incompatible_with=frozenset({"drizzle", "prisma", "supabase", "convex", "pocketbase"}),
        complexity=Complexity.LOW,
        documentation_url="https://firebase.google.com/docs/firestore",
        logo_emoji="🔥",
        type="document",
        hosting="baas",
        scalability=Scalability.UNLIMITED,
        supported_runtimes=_JS + (Runtime.PYTHON, Runtime.GO),
        realtime_support=True,
    ),
    DatabaseOption(
        id="pocketbase",
        name="PocketBase",
        description="Single-binary backend with embedded SQLite, auth and admin UI.",
        pros=("One binary to deploy", "Built-in admin dashboard", "Free and open source"),
        cons=("Single-node scaling", "Smaller community"),
        tradeoffs=("Operational simplicity versus horizontal scale",),
        best_for=("side projects", "internal tools", "self-hosted MVPs"),
        monthly_cost=CostTier(free=True),
        required_env_vars=("POCKETBASE_URL",),
        compatible_with=("pocketbase-auth", "vite-react", "tanstack-start"),
        incompatible_with=frozenset({"drizzle", "prisma", "supabase", "convex", "firebase"}),
        complexity=Complexity.LOW,
        documentation_url="https://pocketbase.io/docs",
        logo_emoji="📦",
        type="sql",
        hosting="self-hosted",
        scalability=Scalability.LOW,
        supported_runtimes=_JS,
        realtime_support=True,
    ),
    DatabaseOption(
        id="postgres-local",
        name="PostgreSQL (self-hosted)",
        description="Plain PostgreSQL running in Docker or on your own server.",
        pros=("Mature and established", "Huge extension ecosystem", "No vendor lock-in"),
        cons=("You own backups and upgrades",),
        tradeoffs=("Full control versus operational effort",),
        best_for=("production apps with ops capacity", "on-premise deployments"),
        monthly_cost=CostTier(free=True, hobbyist="$5-20/mo"),
        required_env_vars=("DATABASE_URL",),
        compatible_with=("drizzle", "prisma", "kysely", "sqlalchemy", "sqlmodel", "pgvector"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://www.postgresql.org/docs",
        logo_emoji="🐘",
        type="sql",
        hosting="self-hosted",
        scalability=Scalability.HIGH,
        supported_runtimes=_ALL,
        connection_pooling=True,
    ),
    DatabaseOption(
        id="mysql-local",
        name="MySQL (self-hosted)",
        description="MySQL running in Docker or on your own server.",
        pros=("Widely used in production", "Large community"),
        cons=("No pgvector support", "Weaker JSON support than Postgres"),
        best_for=("legacy integrations", "LAMP-style deployments"),
        monthly_cost=CostTier(free=True, hobbyist="$5-20/mo"),
        required_env_vars=("DATABASE_URL",),
        compatible_with=("drizzle", "prisma", "kysely", "sqlalchemy"),
        incompatible_with=frozenset({"pgvector"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://dev.mysql.com/doc",
        logo_emoji="🐬",
        type="sql",
        hosting="self-hosted",
        scalability=Scalability.HIGH,
        supported_runtimes=_ALL,
    ),
    DatabaseOption(
        id="mongodb-local",
        name="MongoDB (self-hosted)",
        description="Document database running in Docker or on your own server.",
        pros=("Flexible schemas", "Popular with a large community"),
        cons=("Only Prisma among the TypeScript ORMs supports it", "Joins are awkward"),
        best_for=("schemaless content", "event logging"),
        monthly_cost=CostTier(free=True, hobbyist="$0-57/mo"),
        required_env_vars=("MONGODB_URI",),
        compatible_with=("prisma",),
        incompatible_with=frozenset({"drizzle", "kysely", "pgvector"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://www.mongodb.com/docs",
        logo_emoji="🍃",
        type="document",
        hosting="self-hosted",
        scalability=Scalability.HIGH,
        supported_runtimes=_ALL,
    ),
    DatabaseOption(
        id="sqlite",
        name="SQLite",
        description="Embedded file-based SQL database.",
        pros=("Zero configuration", "Mature and widely used", "Fast for single-node apps"),
        cons=("Single writer", "No network access"),
        best_for=("CLIs", "local-first apps", "prototypes"),
        monthly_cost=CostTier(free=True),
        compatible_with=("drizzle", "kysely", "sqlalchemy", "sqlmodel"),
        complexity=Complexity.LOW,
        documentation_url="https://www.sqlite.org/docs.html",
        logo_emoji="🪶",
        type="sql",
        hosting="self-hosted",
        scalability=Scalability.LOW,
        supported_runtimes=_ALL,
    ),
    DatabaseOption(
        id="planetscale",
        name="PlanetScale",
        description="Serverless MySQL built on Vitess with non-blocking schema changes.",
        pros=("Non-blocking schema changes", "Horizontal sharding"),
        cons=("No free tier", "MySQL dialect only"),
        best_for=("high-scale MySQL workloads",),
        monthly_cost=CostTier(free=False, hobbyist="$39/mo", startup="$39-99/mo", enterprise="custom"),
        required_env_vars=("DATABASE_URL",),
        compatible_with=("prisma", "kysely", "drizzle"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://planetscale.com/docs",
        logo_emoji="🪐",
        type="sql",
        hosting="serverless",
        scalability=Scalability.UNLIMITED,
        supported_runtimes=_ALL,
        branching_support=True,
    ),
    DatabaseOption(
        id="cockroachdb",
        name="CockroachDB",
        description="Distributed SQL database with Postgres compatibility.",
        pros=("Multi-region by design", "Strong consistency"),
        cons=("Operationally complex", "Some Postgres features missing"),
        best_for=("global enterprise workloads",),
        monthly_cost=CostTier(free=True, hobbyist="$0-30/mo", startup="$295+/mo", enterprise="custom"),
        required_env_vars=("DATABASE_URL",),
        compatible_with=("prisma", "drizzle", "sqlalchemy"),
        complexity=Complexity.HIGH,
        documentation_url="https://www.cockroachlabs.com/docs",
        logo_emoji="🪳",
        type="sql",
        hosting="managed",
        scalability=Scalability.UNLIMITED,
        supported_runtimes=_ALL,
    ),
    DatabaseOption(
        id="redis",
        name="Redis",
        description="In-memory key-value store for caching and queues.",
        pros=("Extremely fast", "Mature and widely used"),
        cons=("Memory bound", "Not a primary relational store"),
        best_for=("caching", "job queues", "rate limiting"),
        monthly_cost=CostTier(free=True, hobbyist="$5-15/mo"),
        required_env_vars=("REDIS_URL",),
        complexity=Complexity.LOW,
        documentation_url="https://redis.io/docs",
        logo_emoji="🟥",
        type="key-value",
        hosting="self-hosted",
        scalability=Scalability.HIGH,
        supported_runtimes=_ALL,
    ),
    DatabaseOption(
        id="upstash",
        name="Upstash",
        description="Serverless Redis and Kafka priced per request.",
        pros=("HTTP API works on the edge", "Pay per request"),
        cons=("Per-request pricing adds up at volume",),
        best_for=("edge caching", "serverless rate limiting"),
        monthly_cost=CostTier(free=True, hobbyist="$0-10/mo", startup="$10-280/mo"),
        required_env_vars=("UPSTASH_REDIS_REST_URL", "UPSTASH_REDIS_REST_TOKEN"),
        complexity=Complexity.LOW,
        documentation_url="https://upstash.com/docs",
        logo_emoji="🔺",
        type="key-value",
        hosting="serverless",
        scalability=Scalability.HIGH,
        supported_runtimes=_ALL,
    ),
)
