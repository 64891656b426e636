"""Authentication provider catalog."""

from __future__ import annotations

from kickoff.knowledge.models import AuthOption, Complexity, CostTier, Runtime

_JS = (Runtime.NODE, Runtime.BUN, Runtime.DENO)
_ALL = (Runtime.NODE, Runtime.BUN, Runtime.DENO, Runtime.PYTHON, Runtime.GO, Runtime.RUST)

# Hosted providers keep user records on their side, no local database required.
HOSTED_AUTH_IDS = frozenset({"clerk", "auth0", "workos", "kinde"})


AUTH_PROVIDERS: tuple[AuthOption, ...] = (
    AuthOption(
        id="clerk",
        name="Clerk",
        description="Hosted authentication with prebuilt React components and user management.",
        pros=("Prebuilt sign-in components", "Popular with Next.js developers", "Organizations and MFA built in"),
        cons=("Per-user pricing beyond the free tier", "User data lives with the vendor"),
        tradeoffs=("Speed of integration versus per-user cost",),
        best_for=("SaaS apps with organizations", "Next.js projects"),
        monthly_cost=CostTier(free=True, hobbyist="$25/mo", startup="$25-100/mo", enterprise="custom"),
        required_env_vars=("CLERK_SECRET_KEY", "NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY"),
        compatible_with=("nextjs", "tanstack-start", "hono", "express"),
        incompatible_with=frozenset({"supabase-auth", "firebase-auth", "convex-auth", "pocketbase-auth"}),
        complexity=Complexity.LOW,
        documentation_url="https://clerk.com/docs",
        logo_emoji="🔐",
        type="hosted",
        social_login=True,
        mfa=True,
        sso=True,
        prebuilt_components=True,
        supported_runtimes=_JS,
    ),
    AuthOption(
        id="kinde",
        name="Kinde",
        description="Hosted auth with feature flags and billing hooks.",
        pros=("Generous free tier", "Feature flags included"),
        cons=("Newer provider with a smaller community",),
        best_for=("startups wanting auth and feature flags",),
        monthly_cost=CostTier(free=True, hobbyist="$25/mo", startup="$25-250/mo"),
        required_env_vars=("KINDE_CLIENT_ID", "KINDE_CLIENT_SECRET", "KINDE_ISSUER_URL"),
        compatible_with=("nextjs", "tanstack-start", "hono"),
        incompatible_with=frozenset({"supabase-auth", "firebase-auth", "convex-auth", "pocketbase-auth"}),
        complexity=Complexity.LOW,
        documentation_url="https://kinde.com/docs",
        logo_emoji="🔑",
        type="hosted",
        social_login=True,
        mfa=True,
        prebuilt_components=True,
        supported_runtimes=_JS,
    ),
    AuthOption(
        id="auth0",
        name="Auth0",
        description="Enterprise identity platform by Okta.",
        pros=("Mature and established", "Enterprise SSO and compliance"),
        cons=("Expensive at scale", "Complex configuration"),
        best_for=("enterprise apps", "B2B SSO"),
        monthly_cost=CostTier(free=True, hobbyist="$35/mo", startup="$240+/mo", enterprise="custom"),
        required_env_vars=("AUTH0_DOMAIN", "AUTH0_CLIENT_ID", "AUTH0_CLIENT_SECRET"),
        compatible_with=("nextjs", "express", "hono", "fastapi"),
        incompatible_with=frozenset({"supabase-auth", "firebase-auth", "convex-auth", "pocketbase-auth"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://auth0.com/docs",
        logo_emoji="🛡️",
        type="hosted",
        social_login=True,
        mfa=True,
        sso=True,
        prebuilt_components=True,
        supported_runtimes=_ALL,
    ),
    AuthOption(
        id="workos",
        name="WorkOS",
        description="Enterprise-ready auth with SSO, SCIM and audit logs.",
        pros=("Enterprise SSO and SCIM", "AuthKit free up to a million users"),
        cons=("Enterprise features billed per connection",),
        best_for=("B2B SaaS selling to enterprises",),
        monthly_cost=CostTier(free=True, startup="$125/mo per connection", enterprise="custom"),
        required_env_vars=("WORKOS_API_KEY", "WORKOS_CLIENT_ID"),
        incompatible_with=frozenset({"supabase-auth", "firebase-auth", "convex-auth", "pocketbase-auth"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://workos.com/docs",
        logo_emoji="🏢",
        type="hosted",
        social_login=True,
        mfa=True,
        sso=True,
        prebuilt_components=True,
        supported_runtimes=_ALL,
    ),
    AuthOption(
        id="better-auth",
        name="Better Auth",
        description="Framework-agnostic TypeScript auth library that stores users in your database.",
        pros=("Own your user data", "Plugin system for MFA and organizations", "Free and open source"),
        cons=("Newer library", "You run the database"),
        tradeoffs=("Data ownership versus hosted convenience",),
        best_for=("self-hosted auth", "Drizzle projects"),
        monthly_cost=CostTier(free=True),
        required_env_vars=("BETTER_AUTH_SECRET", "BETTER_AUTH_URL"),
        compatible_with=("nextjs", "tanstack-start", "hono", "express", "drizzle", "prisma"),
        incompatible_with=frozenset({"clerk", "auth0", "kinde"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://www.better-auth.com/docs",
        logo_emoji="🔒",
        type="self-hosted",
        social_login=True,
        mfa=True,
        supported_runtimes=_JS,
    ),
    AuthOption(
        id="lucia",
        name="Lucia",
        description="Session-based auth primitives for TypeScript.",
        pros=("Minimal and transparent", "Free and open source"),
        cons=("Deprecated as a library, now a learning resource", "More code to write"),
        best_for=("learning how sessions work", "custom auth flows"),
        monthly_cost=CostTier(free=True),
        compatible_with=("nextjs", "hono", "express", "drizzle", "prisma"),
        incompatible_with=frozenset({"clerk", "auth0", "kinde"}),
        complexity=Complexity.HIGH,
        documentation_url="https://lucia-auth.com",
        logo_emoji="🌙",
        type="self-hosted",
        supported_runtimes=_JS,
    ),
    AuthOption(
        id="authjs",
        name="Auth.js",
        description="Open-source auth for Next.js (formerly NextAuth).",
        pros=("Widely used with Next.js", "Dozens of OAuth providers"),
        cons=("Best only inside Next.js", "Credential flows are awkward"),
        best_for=("Next.js apps with OAuth login",),
        monthly_cost=CostTier(free=True),
        required_env_vars=("AUTH_SECRET",),
        compatible_with=("nextjs", "drizzle", "prisma"),
        incompatible_with=frozenset({"hono", "tanstack-start", "clerk", "auth0", "kinde"}),
        complexity=Complexity.MEDIUM,
        documentation_url="https://authjs.dev",
        logo_emoji="🗝️",
        type="self-hosted",
        social_login=True,
        supported_runtimes=(Runtime.NODE, Runtime.BUN),
    ),
    AuthOption(
        id="supabase-auth",
        name="Supabase Auth",
        description="Auth built into Supabase with row-level security.",
        pros=("Native row-level security integration", "Free with Supabase"),
        cons=("Only works with Supabase",),
        best_for=("Supabase projects",),
        monthly_cost=CostTier(free=True),
        compatible_with=("supabase",),
        complexity=Complexity.LOW,
        documentation_url="https://supabase.com/docs/guides/auth",
        logo_emoji="⚡",
        type="platform-specific",
        social_login=True,
        mfa=True,
        supported_runtimes=_ALL,
    ),
    AuthOption(
        id="convex-auth",
        name="Convex Auth",
        description="Auth library built for Convex backends.",
        pros=("Native Convex integration",),
        cons=("Only works with Convex", "Newer library"),
        best_for=("Convex projects",),
        monthly_cost=CostTier(free=True),
        compatible_with=("convex",),
        complexity=Complexity.LOW,
        documentation_url="https://labs.convex.dev/auth",
        logo_emoji="🔄",
        type="platform-specific",
        social_login=True,
        supported_runtimes=_JS,
    ),
    AuthOption(
        id="firebase-auth",
        name="Firebase Auth",
        description="Google's hosted authentication for Firebase apps.",
        pros=("Mature and widely used", "Phone and anonymous sign-in"),
        cons=("Only integrates cleanly with Firebase",),
        best_for=("Firebase projects", "mobile apps"),
        monthly_cost=CostTier(free=True, startup="$0.0055 per verification"),
        compatible_with=("firebase",),
        complexity=Complexity.LOW,
        documentation_url="https://firebase.google.com/docs/auth",
        logo_emoji="🔥",
        type="platform-specific",
        social_login=True,
        mfa=True,
        supported_runtimes=_JS + (Runtime.PYTHON, Runtime.GO),
    ),
    AuthOption(
        id="pocketbase-auth",
        name="PocketBase Auth",
        description="Auth collections built into PocketBase.",
        pros=("Zero extra services", "Free and open source"),
        cons=("Only works with PocketBase",),
        best_for=("PocketBase projects",),
        monthly_cost=CostTier(free=True),
        compatible_with=("pocketbase",),
        complexity=Complexity.LOW,
        documentation_url="https://pocketbase.io/docs/authentication",
        logo_emoji="📦",
        type="platform-specific",
        social_login=True,
        supported_runtimes=_JS,
    ),
)
