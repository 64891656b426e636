"""Built-in template fragments.

Every project gets ``base``.  ``docker`` and ``github-actions`` are added by
feature flag; the remaining fragments are chosen by the project's framework
or project type.
"""

from __future__ import annotations

from kickoff.generator.models import (
    EnvVarDefinition,
    FragmentCategory,
    FragmentFile,
    GeneratorContext,
    ManifestDelta,
    TemplateFragment,
)

_TS_DEV_DEPENDENCIES = {
    "@types/node": "^20.0.0",
    "typescript": "^5.4.0",
}

_INSTALL_AND_DEV = (
    "Run `npm install` to install dependencies",
    "Run `npm run dev` to start development server",
)


def _with_docker(context: GeneratorContext) -> bool:
    return context.features.docker


def _files(*pairs: tuple[str, str]) -> tuple[FragmentFile, ...]:
    return tuple(FragmentFile(source=source, destination=dest) for source, dest in pairs)


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------

BASE = TemplateFragment(
    id="base",
    name="Base Project",
    category=FragmentCategory.BASE,
    path="shared",
    description="Core project files (README, CLAUDE.md, .gitignore)",
    files=_files(
        ("README.md.j2", "README.md"),
        ("CLAUDE.md.j2", "CLAUDE.md"),
        (".gitignore.j2", ".gitignore"),
        (".env.example.j2", ".env.example"),
    ),
    env_vars=(
        EnvVarDefinition(
            key="NODE_ENV",
            default_value="development",
            description="Environment mode",
        ),
    ),
    post_install_steps=(
        "Copy .env.example to .env and fill in values",
        "Initialize git repository with `git init`",
    ),
)

DOCKER = TemplateFragment(
    id="docker",
    name="Docker",
    category=FragmentCategory.DEPLOYMENT,
    path="shared",
    description="Docker containerization support",
    dependencies=("base",),
    files=_files(("docker-compose.yml.j2", "docker-compose.yml")),
    post_install_steps=(
        "Build containers with `docker compose build`",
        "Start services with `docker compose up -d`",
    ),
)

GITHUB_ACTIONS = TemplateFragment(
    id="github-actions",
    name="GitHub Actions",
    category=FragmentCategory.DEPLOYMENT,
    path="shared",
    description="CI/CD with GitHub Actions",
    dependencies=("base",),
    files=_files((".github/workflows/deploy.yml.j2", ".github/workflows/deploy.yml")),
    env_vars=(
        EnvVarDefinition(
            key="VPS_HOST", description="VPS hostname for deployment", required=True, secret=True
        ),
        EnvVarDefinition(key="VPS_USER", description="VPS SSH username", required=True, secret=True),
        EnvVarDefinition(
            key="VPS_SSH_KEY", description="VPS SSH private key", required=True, secret=True
        ),
    ),
    post_install_steps=(
        "Add VPS_HOST, VPS_USER, VPS_SSH_KEY to GitHub repository secrets",
        "Push to main branch to trigger deployment",
    ),
)


# ---------------------------------------------------------------------------
# Frontend
# ---------------------------------------------------------------------------

NEXTJS = TemplateFragment(
    id="nextjs",
    name="Next.js",
    category=FragmentCategory.FRONTEND,
    path="nextjs",
    description="Full-stack React framework with App Router",
    dependencies=("base",),
    files=(
        *_files(
            ("package.json.j2", "package.json"),
            ("next.config.ts.j2", "next.config.ts"),
            ("tsconfig.json.j2", "tsconfig.json"),
            ("tailwind.config.ts.j2", "tailwind.config.ts"),
            ("postcss.config.mjs.j2", "postcss.config.mjs"),
            ("src/app/layout.tsx.j2", "src/app/layout.tsx"),
            ("src/app/page.tsx.j2", "src/app/page.tsx"),
            ("src/app/globals.css.j2", "src/app/globals.css"),
            ("src/app/api/health/route.ts.j2", "src/app/api/health/route.ts"),
        ),
        FragmentFile(source="Dockerfile.j2", destination="Dockerfile", condition=_with_docker),
    ),
    manifest=ManifestDelta(
        dependencies={"next": "^14.2.0", "react": "^18.3.0", "react-dom": "^18.3.0"},
        dev_dependencies={
            **_TS_DEV_DEPENDENCIES,
            "@types/react": "^18.3.0",
            "@types/react-dom": "^18.3.0",
            "tailwindcss": "^3.4.0",
            "postcss": "^8.4.0",
            "autoprefixer": "^10.4.0",
        },
        scripts={"dev": "next dev", "build": "next build", "start": "next start", "lint": "next lint"},
    ),
    env_vars=(
        EnvVarDefinition(
            key="NEXT_PUBLIC_API_URL",
            description="Public API URL for client-side requests",
        ),
    ),
    post_install_steps=_INSTALL_AND_DEV,
    documentation_url="https://nextjs.org/docs",
)

VITE_REACT = TemplateFragment(
    id="vite-react",
    name="Vite + React",
    category=FragmentCategory.FRONTEND,
    path="vite-react",
    description="Lightning fast React development with Vite",
    dependencies=("base",),
    incompatible_with=("nextjs",),
    files=(
        *_files(
            ("package.json.j2", "package.json"),
            ("vite.config.ts.j2", "vite.config.ts"),
            ("tsconfig.json.j2", "tsconfig.json"),
            ("tailwind.config.js.j2", "tailwind.config.js"),
            ("postcss.config.js.j2", "postcss.config.js"),
            ("index.html.j2", "index.html"),
            ("src/main.tsx.j2", "src/main.tsx"),
            ("src/App.tsx.j2", "src/App.tsx"),
            ("src/index.css.j2", "src/index.css"),
        ),
        FragmentFile(source="Dockerfile.j2", destination="Dockerfile", condition=_with_docker),
        FragmentFile(source="nginx.conf.j2", destination="nginx.conf", condition=_with_docker),
    ),
    manifest=ManifestDelta(
        dependencies={"react": "^18.3.0", "react-dom": "^18.3.0"},
        dev_dependencies={
            "@types/react": "^18.3.0",
            "@types/react-dom": "^18.3.0",
            "@vitejs/plugin-react": "^4.2.0",
            "typescript": "^5.4.0",
            "vite": "^5.2.0",
            "tailwindcss": "^3.4.0",
            "postcss": "^8.4.0",
            "autoprefixer": "^10.4.0",
        },
        scripts={"dev": "vite", "build": "tsc && vite build", "preview": "vite preview"},
    ),
    env_vars=(
        EnvVarDefinition(key="VITE_API_URL", description="API URL for client-side requests"),
    ),
    post_install_steps=_INSTALL_AND_DEV,
    documentation_url="https://vitejs.dev/guide/",
)

STATIC = TemplateFragment(
    id="static",
    name="Static Site",
    category=FragmentCategory.FRONTEND,
    path="static",
    description="Simple static HTML/CSS/JS site",
    dependencies=("base",),
    incompatible_with=("nextjs", "vite-react"),
    files=(
        *_files(
            ("index.html.j2", "index.html"),
            ("styles.css.j2", "styles.css"),
            ("main.js.j2", "main.js"),
        ),
        FragmentFile(source="Dockerfile.j2", destination="Dockerfile", condition=_with_docker),
        FragmentFile(source="nginx.conf.j2", destination="nginx.conf", condition=_with_docker),
    ),
    post_install_steps=(
        "Open index.html in a browser to view",
        "Use a local server for development: `npx serve .`",
    ),
)


# ---------------------------------------------------------------------------
# Backend & project shapes
# ---------------------------------------------------------------------------

HONO = TemplateFragment(
    id="hono",
    name="Hono",
    category=FragmentCategory.BACKEND,
    path="hono-api",
    description="Ultrafast, lightweight web framework for any runtime",
    dependencies=("base",),
    files=(
        *_files(
            ("package.json.j2", "package.json"),
            ("tsconfig.json.j2", "tsconfig.json"),
            ("src/index.ts.j2", "src/index.ts"),
            ("src/routes/health.ts.j2", "src/routes/health.ts"),
        ),
        FragmentFile(source="Dockerfile.j2", destination="Dockerfile", condition=_with_docker),
    ),
    manifest=ManifestDelta(
        dependencies={"hono": "^4.3.0"},
        dev_dependencies={**_TS_DEV_DEPENDENCIES, "tsx": "^4.9.0"},
        scripts={"dev": "tsx watch src/index.ts", "build": "tsc", "start": "node dist/index.js"},
    ),
    env_vars=(
        EnvVarDefinition(key="PORT", default_value="3000", description="Server port"),
    ),
    post_install_steps=_INSTALL_AND_DEV,
    documentation_url="https://hono.dev/",
)

CLI = TemplateFragment(
    id="cli",
    name="CLI Tool",
    category=FragmentCategory.BACKEND,
    path="cli",
    description="Command-line interface tool with Commander.js",
    dependencies=("base",),
    files=_files(
        ("package.json.j2", "package.json"),
        ("tsconfig.json.j2", "tsconfig.json"),
        ("src/index.ts.j2", "src/index.ts"),
        ("src/commands/greet.ts.j2", "src/commands/greet.ts"),
        ("src/lib/config.ts.j2", "src/lib/config.ts"),
    ),
    manifest=ManifestDelta(
        dependencies={"commander": "^12.1.0", "chalk": "^5.3.0"},
        dev_dependencies={**_TS_DEV_DEPENDENCIES, "tsx": "^4.9.0"},
        scripts={"dev": "tsx src/index.ts", "build": "tsc", "start": "node dist/index.js"},
    ),
    post_install_steps=(
        "Run `npm install` to install dependencies",
        "Run `npm run dev -- --help` to test CLI",
        "Link globally with `npm link` for system-wide access",
    ),
)

MCP_SERVER = TemplateFragment(
    id="mcp-server",
    name="MCP Server",
    category=FragmentCategory.BACKEND,
    path="mcp-server",
    description="Model Context Protocol server for AI tool integration",
    dependencies=("base",),
    files=_files(
        ("package.json.j2", "package.json"),
        ("tsconfig.json.j2", "tsconfig.json"),
        ("src/index.ts.j2", "src/index.ts"),
    ),
    manifest=ManifestDelta(
        dependencies={"@modelcontextprotocol/sdk": "^1.0.0"},
        dev_dependencies=dict(_TS_DEV_DEPENDENCIES),
        scripts={
            "build": "tsc",
            "start": "node dist/index.js",
            "inspect": "npx @modelcontextprotocol/inspector node dist/index.js",
        },
    ),
    post_install_steps=(
        "Run `npm install` to install dependencies",
        "Run `npm run build` to compile TypeScript",
        "Register the server with your MCP client to test it",
    ),
    documentation_url="https://modelcontextprotocol.io/",
)

WORKER = TemplateFragment(
    id="worker",
    name="Background Worker",
    category=FragmentCategory.BACKEND,
    path="worker",
    description="Background job processor with BullMQ",
    dependencies=("base",),
    files=(
        *_files(
            ("package.json.j2", "package.json"),
            ("tsconfig.json.j2", "tsconfig.json"),
            ("src/index.ts.j2", "src/index.ts"),
            ("src/jobs/email.ts.j2", "src/jobs/email.ts"),
            ("src/jobs/webhook.ts.j2", "src/jobs/webhook.ts"),
            ("docker-compose.yml.j2", "docker-compose.yml"),
        ),
        FragmentFile(source="Dockerfile.j2", destination="Dockerfile", condition=_with_docker),
    ),
    manifest=ManifestDelta(
        dependencies={"bullmq": "^5.7.0", "ioredis": "^5.4.0"},
        dev_dependencies={**_TS_DEV_DEPENDENCIES, "tsx": "^4.9.0"},
        scripts={"dev": "tsx watch src/index.ts", "build": "tsc", "start": "node dist/index.js"},
    ),
    env_vars=(
        EnvVarDefinition(
            key="REDIS_URL",
            default_value="redis://localhost:6379",
            description="Redis connection URL for job queue",
            required=True,
        ),
    ),
    post_install_steps=(
        "Start Redis: `docker compose up -d redis`",
        "Run `npm install` to install dependencies",
        "Run `npm run dev` to start worker",
    ),
)

LIBRARY = TemplateFragment(
    id="library",
    name="TypeScript Library",
    category=FragmentCategory.BACKEND,
    path="library",
    description="Publishable TypeScript/JavaScript library",
    dependencies=("base",),
    files=(
        *_files(
            ("package.json.j2", "package.json"),
            ("tsconfig.json.j2", "tsconfig.json"),
            ("tsup.config.ts.j2", "tsup.config.ts"),
            ("src/index.ts.j2", "src/index.ts"),
            ("src/types.ts.j2", "src/types.ts"),
            ("src/greeter.ts.j2", "src/greeter.ts"),
        ),
        FragmentFile(
            source="test/index.test.ts.j2",
            destination="test/index.test.ts",
            condition=lambda context: context.features.tests,
        ),
    ),
    manifest=ManifestDelta(
        dev_dependencies={**_TS_DEV_DEPENDENCIES, "tsup": "^8.0.0", "vitest": "^1.6.0"},
        scripts={"build": "tsup", "test": "vitest", "prepublishOnly": "npm run build"},
    ),
    post_install_steps=(
        "Run `npm install` to install dependencies",
        "Run `npm test` to run tests",
        "Run `npm run build` to build for publishing",
    ),
)


ALL_FRAGMENTS: tuple[TemplateFragment, ...] = (
    BASE,
    DOCKER,
    GITHUB_ACTIONS,
    NEXTJS,
    VITE_REACT,
    STATIC,
    HONO,
    CLI,
    MCP_SERVER,
    WORKER,
    LIBRARY,
)
