"""Frontend, backend and web server catalogs."""

from __future__ import annotations

from kickoff.knowledge.models import (
    BackendOption,
    Complexity,
    CostTier,
    FrontendOption,
    Runtime,
    WebServerOption,
)

_FREE = CostTier(free=True)


FRONTENDS: tuple[FrontendOption, ...] = (
    FrontendOption(
        id="nextjs",
        name="Next.js",
        description="React meta-framework with server components, routing and server actions.",
        pros=("Server components and streaming", "Large community", "First-class Vercel deployment"),
        cons=("Complex caching semantics", "Frequent breaking changes"),
        tradeoffs=("Full-stack convenience versus framework coupling",),
        best_for=("full-stack React apps", "SaaS dashboards", "SEO-heavy sites"),
        monthly_cost=_FREE,
        compatible_with=("clerk", "better-auth", "supabase", "neon", "drizzle", "prisma", "vercel-ai"),
        incompatible_with=frozenset({"hono", "express", "fastapi"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://nextjs.org/docs",
        logo_emoji="▲",
        type="full-stack",
        ssr=True,
        ssg=True,
        server_components=True,
        type_safe=True,
        bundler="turbopack",
    ),
    FrontendOption(
        id="tanstack-start",
        name="TanStack Start",
        description="Full-stack React framework built on TanStack Router and Vite.",
        pros=("Fully type-safe routing", "Server functions without lock-in"),
        cons=("Young project", "Smaller community"),
        best_for=("type-safe full-stack apps", "teams already on TanStack Query"),
        monthly_cost=_FREE,
        compatible_with=("clerk", "better-auth", "convex", "drizzle", "vercel-ai"),
        incompatible_with=frozenset({"authjs", "hono", "express"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://tanstack.com/start",
        logo_emoji="🏝️",
        type="full-stack",
        ssr=True,
        type_safe=True,
        bundler="vite",
    ),
    FrontendOption(
        id="vite-react",
        name="Vite + React",
        description="Client-side React single page app bundled with Vite.",
        pros=("Fast dev server", "Simple mental model", "Popular and widely used"),
        cons=("No server rendering", "Needs a separate backend"),
        best_for=("dashboards behind login", "SPAs with a separate API"),
        monthly_cost=_FREE,
        compatible_with=("hono", "express", "fastapi", "firebase", "supabase", "pocketbase"),
        incompatible_with=frozenset({"authjs", "nextjs"}),
        complexity=Complexity.LOW,
        documentation_url="https://vitejs.dev/guide",
        logo_emoji="⚡",
        type="spa",
        type_safe=True,
        bundler="vite",
    ),
    FrontendOption(
        id="static",
        name="Static HTML",
        description="Plain HTML, CSS and a sprinkle of JavaScript.",
        pros=("No build step", "Host anywhere for free"),
        cons=("No components or routing",),
        best_for=("landing pages", "documentation sites"),
        monthly_cost=_FREE,
        incompatible_with=frozenset({"nextjs", "vite-react"}),
        complexity=Complexity.LOW,
        logo_emoji="📄",
        type="static",
        ssg=True,
    ),
)


BACKENDS: tuple[BackendOption, ...] = (
    BackendOption(
        id="hono",
        name="Hono",
        description="Ultrafast web framework for the edge built on Web Standards.",
        pros=("Runs on every JavaScript runtime", "Tiny and fast", "Active development"),
        cons=("Smaller middleware ecosystem than Express",),
        tradeoffs=("Portability versus ecosystem size",),
        best_for=("edge APIs", "Cloudflare Workers", "Bun servers"),
        monthly_cost=_FREE,
        compatible_with=("drizzle", "turso", "d1", "clerk", "better-auth", "vercel-ai"),
        incompatible_with=frozenset({"nextjs", "tanstack-start", "authjs"}),
        complexity=Complexity.LOW,
        documentation_url="https://hono.dev",
        logo_emoji="🔥",
        runtime=Runtime.BUN,
        type="minimal",
        edge_support=True,
        websocket_support=True,
        openapi_support=True,
        performance_rating="blazing",
    ),
    BackendOption(
        id="elysia",
        name="Elysia",
        description="Bun-first web framework with end-to-end type safety.",
        pros=("Very fast on Bun", "End-to-end types with Eden"),
        cons=("Bun only", "Smaller community"),
        best_for=("Bun APIs",),
        monthly_cost=_FREE,
        compatible_with=("drizzle", "better-auth"),
        complexity=Complexity.LOW,
        documentation_url="https://elysiajs.com",
        logo_emoji="🦊",
        runtime=Runtime.BUN,
        type="minimal",
        websocket_support=True,
        openapi_support=True,
        performance_rating="blazing",
    ),
    BackendOption(
        id="express",
        name="Express",
        description="The classic minimalist Node.js web framework.",
        pros=("Mature and widely used", "Huge middleware ecosystem"),
        cons=("Callback-era API", "Slower than modern alternatives"),
        best_for=("traditional Node.js APIs", "teams that know Express"),
        monthly_cost=_FREE,
        compatible_with=("prisma", "drizzle", "clerk", "auth0", "langchain"),
        incompatible_with=frozenset({"nextjs", "tanstack-start", "d1", "turso"}),
        complexity=Complexity.LOW,
        documentation_url="https://expressjs.com",
        logo_emoji="🚂",
        runtime=Runtime.NODE,
        type="minimal",
        websocket_support=True,
        performance_rating="fast",
    ),
    BackendOption(
        id="fresh",
        name="Fresh",
        description="Deno's islands-based web framework.",
        pros=("No build step", "Islands architecture"),
        cons=("Deno only", "Smaller community"),
        best_for=("Deno Deploy apps",),
        monthly_cost=_FREE,
        complexity=Complexity.MEDIUM,
        documentation_url="https://fresh.deno.dev/docs",
        logo_emoji="🍋",
        runtime=Runtime.DENO,
        type="batteries-included",
        edge_support=True,
        performance_rating="very-fast",
    ),
    BackendOption(
        id="fastapi",
        name="FastAPI",
        description="Modern async Python API framework driven by type hints.",
        pros=("Automatic OpenAPI docs", "Popular with a large community", "Pydantic validation"),
        cons=("Async pitfalls with sync libraries",),
        best_for=("Python APIs", "ML model serving", "AI backends"),
        monthly_cost=_FREE,
        compatible_with=("sqlalchemy", "sqlmodel", "tortoise", "auth0", "langchain", "llamaindex"),
        incompatible_with=frozenset({"nextjs", "drizzle", "prisma", "clerk"}),
        complexity=Complexity.LOW,
        documentation_url="https://fastapi.tiangolo.com",
        logo_emoji="🐍",
        runtime=Runtime.PYTHON,
        type="microframework",
        websocket_support=True,
        openapi_support=True,
        performance_rating="fast",
    ),
    BackendOption(
        id="litestar",
        name="Litestar",
        description="Performance-focused Python ASGI framework.",
        pros=("Fast msgspec serialisation", "Batteries included"),
        cons=("Smaller community than FastAPI",),
        best_for=("high-throughput Python APIs",),
        monthly_cost=_FREE,
        compatible_with=("sqlalchemy",),
        complexity=Complexity.MEDIUM,
        documentation_url="https://docs.litestar.dev",
        logo_emoji="⭐",
        runtime=Runtime.PYTHON,
        type="batteries-included",
        websocket_support=True,
        openapi_support=True,
        performance_rating="very-fast",
    ),
    BackendOption(
        id="gin",
        name="Gin",
        description="The most popular HTTP framework for Go.",
        pros=("Popular and widely used", "Fast router"),
        cons=("Go verbosity",),
        best_for=("Go microservices",),
        monthly_cost=_FREE,
        compatible_with=("gorm", "sqlx-go"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://gin-gonic.com/docs",
        logo_emoji="🍸",
        runtime=Runtime.GO,
        type="microframework",
        performance_rating="very-fast",
    ),
    BackendOption(
        id="fiber",
        name="Fiber",
        description="Express-inspired Go web framework built on fasthttp.",
        pros=("Express-like API", "Very fast"),
        cons=("fasthttp is not net/http compatible",),
        best_for=("Go APIs for Node.js developers",),
        monthly_cost=_FREE,
        compatible_with=("gorm", "sqlx-go"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://docs.gofiber.io",
        logo_emoji="🧵",
        runtime=Runtime.GO,
        type="minimal",
        websocket_support=True,
        performance_rating="blazing",
    ),
    BackendOption(
        id="echo",
        name="Echo",
        description="High performance, minimalist Go web framework.",
        pros=("Clean middleware API", "Mature and established"),
        cons=("Smaller community than Gin",),
        best_for=("Go REST APIs",),
        monthly_cost=_FREE,
        compatible_with=("gorm", "sqlx-go"),
        complexity=Complexity.MEDIUM,
        documentation_url="https://echo.labstack.com/docs",
        logo_emoji="📣",
        runtime=Runtime.GO,
        type="minimal",
        websocket_support=True,
        performance_rating="very-fast",
    ),
    BackendOption(
        id="axum",
        name="Axum",
        description="Ergonomic Rust web framework from the Tokio team.",
        pros=("Built on Tokio and Tower", "Excellent performance"),
        cons=("Rust learning curve", "Long compile times"),
        best_for=("high-performance Rust APIs",),
        monthly_cost=_FREE,
        compatible_with=("sqlx-rust", "sea-orm", "diesel"),
        complexity=Complexity.HIGH,
        documentation_url="https://docs.rs/axum",
        logo_emoji="🦀",
        runtime=Runtime.RUST,
        type="minimal",
        websocket_support=True,
        performance_rating="blazing",
    ),
    BackendOption(
        id="actix",
        name="Actix Web",
        description="Powerful, pragmatic Rust web framework.",
        pros=("Among the fastest web frameworks", "Mature and established"),
        cons=("Rust learning curve",),
        best_for=("latency-critical services",),
        monthly_cost=_FREE,
        compatible_with=("sqlx-rust", "sea-orm", "diesel"),
        complexity=Complexity.HIGH,
        documentation_url="https://actix.rs/docs",
        logo_emoji="🦀",
        runtime=Runtime.RUST,
        type="batteries-included",
        websocket_support=True,
        performance_rating="blazing",
    ),
)


WEB_SERVERS: tuple[WebServerOption, ...] = (
    WebServerOption(
        id="caddy",
        name="Caddy",
        description="Web server with automatic HTTPS.",
        pros=("Automatic TLS certificates", "Two-line reverse proxy config"),
        cons=("Smaller community than nginx",),
        best_for=("single VPS deployments",),
        monthly_cost=_FREE,
        complexity=Complexity.LOW,
        documentation_url="https://caddyserver.com/docs",
        logo_emoji="🔒",
        auto_ssl=True,
        config_style="simple",
        docker_native=True,
    ),
    WebServerOption(
        id="nginx",
        name="nginx",
        description="High-performance reverse proxy and web server.",
        pros=("Mature and widely used", "Extremely efficient"),
        cons=("Manual certificate management",),
        best_for=("high-traffic static assets", "classic reverse proxies"),
        monthly_cost=_FREE,
        complexity=Complexity.MEDIUM,
        documentation_url="https://nginx.org/en/docs",
        logo_emoji="🟩",
        config_style="complex",
    ),
    WebServerOption(
        id="traefik",
        name="Traefik",
        description="Cloud-native edge router driven by container labels.",
        pros=("Service discovery from Docker labels", "Automatic HTTPS"),
        cons=("Label syntax is verbose",),
        best_for=("multi-container hosts",),
        monthly_cost=_FREE,
        complexity=Complexity.MEDIUM,
        documentation_url="https://doc.traefik.io/traefik",
        logo_emoji="🚦",
        auto_ssl=True,
        config_style="code",
        docker_native=True,
    ),
)
