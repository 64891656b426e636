"""Pairwise compatibility matrix between catalog option ids.

Storage is deliberately asymmetric: each id records what *it* declares.  The
public queries are symmetric, so a pair is incompatible as soon as either side
lists the other.

Typical usage::

    matrix = CompatibilityMatrix.from_options(all_options)
    matrix.are_compatible("d1", "prisma")        # False
    matrix.validate_selection({"database": "neon", "orm": "drizzle"}).valid
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from kickoff.knowledge.models import (
    CompatibilityEntry,
    CompatibilityRule,
    SelectionCheck,
    SelectionConflict,
    StackOption,
)

# ---------------------------------------------------------------------------
# Matrix data
# ---------------------------------------------------------------------------

_MATRIX_DATA: dict[str, dict] = {
    # Databases
    "supabase": {
        "compatible_with": [
            "drizzle", "prisma", "supabase-auth", "nextjs", "tanstack-start",
            "hono", "express", "vercel-ai", "pgvector",
        ],
        "incompatible_with": [
            "firebase", "convex", "pocketbase", "firebase-auth", "convex-auth", "pocketbase-auth",
        ],
        "notes": {
            "supabase-auth": "Native integration, recommended for Supabase projects",
            "drizzle": "Works via Postgres connection string",
            "pgvector": "Supabase includes pgvector extension by default",
        },
    },
    "neon": {
        "compatible_with": ["drizzle", "prisma", "kysely", "nextjs", "hono", "express", "vercel-ai", "pgvector"],
        "incompatible_with": ["firebase", "convex", "pocketbase", "turso", "d1"],
        "notes": {
            "drizzle": "Excellent serverless support with Neon",
            "prisma": "Works but has cold start implications",
        },
    },
    "turso": {
        "compatible_with": ["drizzle", "hono", "nextjs", "tanstack-start", "vercel-ai"],
        "incompatible_with": ["prisma", "firebase", "convex", "supabase", "neon", "mysql-local"],
        "notes": {
            "drizzle": "Native libsql support, recommended ORM",
            "prisma": "No libsql adapter available",
        },
    },
    "d1": {
        "compatible_with": ["drizzle", "hono"],
        "incompatible_with": ["prisma", "firebase", "convex", "supabase", "neon", "turso", "nextjs"],
        "notes": {
            "hono": "Both Cloudflare-native, excellent pairing",
            "drizzle": "D1 adapter available",
        },
    },
    "convex": {
        "compatible_with": ["convex-auth", "nextjs", "tanstack-start", "vercel-ai"],
        "incompatible_with": [
            "supabase", "firebase", "pocketbase", "drizzle", "prisma", "supabase-auth", "firebase-auth",
        ],
        "notes": {"convex-auth": "Native auth, only option for Convex"},
    },
    "firebase": {
        "compatible_with": ["firebase-auth", "nextjs", "vite-react"],
        "incompatible_with": [
            "supabase", "convex", "pocketbase", "drizzle", "prisma", "supabase-auth", "convex-auth",
        ],
        "notes": {"firebase-auth": "Native auth, only option for Firebase"},
    },
    "pocketbase": {
        "compatible_with": ["pocketbase-auth", "nextjs", "vite-react", "tanstack-start"],
        "incompatible_with": [
            "supabase", "convex", "firebase", "drizzle", "prisma", "supabase-auth", "firebase-auth",
        ],
        "notes": {"pocketbase-auth": "Native auth, only option for PocketBase"},
    },
    # ORMs
    "drizzle": {
        "compatible_with": [
            "supabase", "neon", "turso", "d1", "postgres-local", "mysql-local", "sqlite",
            "better-auth", "lucia", "nextjs", "hono", "express",
        ],
        "incompatible_with": ["prisma", "firebase", "convex", "pocketbase", "mongodb-local"],
        "notes": {
            "turso": "Best ORM for libsql/Turso",
            "d1": "Best ORM for Cloudflare D1",
        },
    },
    "prisma": {
        "compatible_with": [
            "supabase", "neon", "postgres-local", "mysql-local", "planetscale",
            "better-auth", "lucia", "authjs", "nextjs", "express",
        ],
        "incompatible_with": ["drizzle", "turso", "d1", "firebase", "convex", "pocketbase"],
        "notes": {
            "neon": "Works but watch for cold starts in serverless",
            "authjs": "Has official Prisma adapter",
        },
    },
    "kysely": {
        "compatible_with": ["postgres-local", "mysql-local", "sqlite", "neon", "planetscale", "nextjs", "hono"],
        "incompatible_with": ["prisma", "drizzle", "firebase", "convex"],
    },
    # Auth
    "clerk": {
        "compatible_with": [
            "nextjs", "tanstack-start", "hono", "express", "drizzle", "prisma",
            "supabase", "neon", "postgres-local",
        ],
        "incompatible_with": [
            "supabase-auth", "firebase-auth", "convex-auth", "pocketbase-auth",
            "firebase", "convex", "pocketbase",
        ],
        "notes": {
            "nextjs": "Excellent Next.js integration",
            "tanstack-start": "Good TanStack Start support",
        },
    },
    "kinde": {
        "compatible_with": ["nextjs", "tanstack-start", "hono", "drizzle", "prisma", "supabase", "neon"],
        "incompatible_with": [
            "supabase-auth", "firebase-auth", "convex-auth", "pocketbase-auth",
            "firebase", "convex", "pocketbase",
        ],
    },
    "auth0": {
        "compatible_with": ["nextjs", "express", "hono", "fastapi", "drizzle", "prisma"],
        "incompatible_with": [
            "supabase-auth", "firebase-auth", "convex-auth", "pocketbase-auth",
            "firebase", "convex", "pocketbase",
        ],
    },
    "better-auth": {
        "compatible_with": [
            "nextjs", "tanstack-start", "hono", "express", "drizzle", "prisma",
            "supabase", "neon", "postgres-local",
        ],
        "incompatible_with": ["clerk", "auth0", "kinde", "supabase-auth", "firebase-auth", "convex-auth"],
        "notes": {
            "drizzle": "Excellent integration with Drizzle",
            "hono": "Great Hono middleware support",
        },
    },
    "lucia": {
        "compatible_with": ["nextjs", "hono", "express", "drizzle", "prisma", "supabase", "neon", "postgres-local"],
        "incompatible_with": ["clerk", "auth0", "kinde", "supabase-auth", "firebase-auth"],
    },
    "authjs": {
        "compatible_with": ["nextjs", "drizzle", "prisma"],
        "incompatible_with": [
            "clerk", "auth0", "kinde", "hono", "tanstack-start", "supabase-auth", "firebase-auth",
        ],
        "notes": {
            "nextjs": "Best integration is with Next.js",
            "prisma": "Official Prisma adapter available",
        },
    },
    # Frontends
    "nextjs": {
        "compatible_with": [
            "clerk", "kinde", "auth0", "better-auth", "lucia", "authjs", "supabase", "neon",
            "convex", "firebase", "drizzle", "prisma", "vercel-ai", "langchain",
        ],
        "incompatible_with": ["hono", "express", "fastapi"],
        "notes": {
            "vercel-ai": "Excellent integration via Server Actions",
            "clerk": "Pre-built components work seamlessly",
        },
    },
    "tanstack-start": {
        "compatible_with": [
            "clerk", "kinde", "better-auth", "supabase", "convex", "pocketbase", "drizzle", "vercel-ai",
        ],
        "incompatible_with": ["authjs", "hono", "express"],
        "notes": {"better-auth": "Good full-stack auth integration"},
    },
    "vite-react": {
        "compatible_with": ["hono", "express", "fastapi", "firebase", "supabase", "pocketbase", "vercel-ai"],
        "incompatible_with": ["authjs", "nextjs"],
        "notes": {"hono": "Can be paired with Hono backend"},
    },
    # Backends
    "hono": {
        "compatible_with": [
            "clerk", "kinde", "better-auth", "lucia", "drizzle", "turso", "d1",
            "supabase", "neon", "vercel-ai", "langchain",
        ],
        "incompatible_with": ["nextjs", "tanstack-start", "authjs", "prisma"],
        "notes": {
            "drizzle": "Perfect pairing for edge deployments",
            "d1": "Both Cloudflare-native",
            "turso": "Great edge database pairing",
        },
    },
    "express": {
        "compatible_with": [
            "clerk", "auth0", "better-auth", "lucia", "drizzle", "prisma",
            "supabase", "neon", "postgres-local", "langchain",
        ],
        "incompatible_with": ["nextjs", "tanstack-start", "d1", "turso"],
    },
    "fastapi": {
        "compatible_with": [
            "auth0", "sqlalchemy", "sqlmodel", "tortoise", "postgres-local", "mysql-local",
            "langchain", "llamaindex",
        ],
        "incompatible_with": ["nextjs", "drizzle", "prisma", "clerk", "supabase-auth"],
    },
    # AI frameworks
    "vercel-ai": {
        "compatible_with": [
            "nextjs", "hono", "express", "openai-sdk", "anthropic-sdk", "google-ai",
            "ollama", "pinecone", "chromadb", "turbopuffer",
        ],
        "notes": {
            "nextjs": "Best integration with Server Actions and streaming",
            "ollama": "Good local AI support",
        },
    },
    "langchain": {
        "compatible_with": [
            "nextjs", "hono", "express", "fastapi", "openai-sdk", "anthropic-sdk",
            "pinecone", "chromadb", "qdrant", "weaviate",
        ],
        "notes": {
            "pinecone": "Official integration available",
            "chromadb": "Great local development pairing",
        },
    },
    "llamaindex": {
        "compatible_with": [
            "nextjs", "express", "fastapi", "openai-sdk", "pinecone", "chromadb", "qdrant", "weaviate",
        ],
    },
    # Vector databases
    "pinecone": {
        "compatible_with": [
            "vercel-ai", "langchain", "llamaindex", "openai-embeddings", "cohere-embeddings", "voyage-embeddings",
        ],
    },
    "chromadb": {
        "compatible_with": ["langchain", "llamaindex", "openai-embeddings", "local-embeddings", "ollama"],
        "notes": {"ollama": "Great for fully local AI stack"},
    },
    "pgvector": {
        "compatible_with": ["supabase", "neon", "postgres-local", "drizzle", "prisma", "openai-embeddings"],
        "incompatible_with": ["mysql-local", "mongodb-local", "turso", "d1"],
        "notes": {"supabase": "Included by default in Supabase"},
    },
    # Local AI
    "ollama": {
        "compatible_with": ["vercel-ai", "langchain", "chromadb", "local-embeddings"],
        "notes": {"chromadb": "Perfect for fully local RAG stack"},
    },
}


def _entry(raw: Mapping) -> CompatibilityEntry:
    return CompatibilityEntry(
        compatible_with=frozenset(raw.get("compatible_with", ())),
        incompatible_with=frozenset(raw.get("incompatible_with", ())),
        notes=dict(raw.get("notes", {})),
    )


# ---------------------------------------------------------------------------
# Matrix
# ---------------------------------------------------------------------------


class CompatibilityMatrix:
    """Immutable id -> ``CompatibilityEntry`` lookup with symmetric queries."""

    def __init__(self, entries: Mapping[str, CompatibilityEntry]) -> None:
        self._entries: Mapping[str, CompatibilityEntry] = MappingProxyType(dict(entries))

    @classmethod
    def default(cls) -> "CompatibilityMatrix":
        """Return the built-in matrix without any option-level relations folded in."""
        return cls({key: _entry(raw) for key, raw in _MATRIX_DATA.items()})

    @classmethod
    def from_options(
        cls,
        options: Iterable[StackOption],
        base: Mapping[str, CompatibilityEntry] | None = None,
    ) -> "CompatibilityMatrix":
        """Build a matrix from *base* plus every option's own relation sets.

        Option-level ``incompatible_with`` is unioned into the option's entry.
        Option-level ``compatible_with`` is added only where it does not
        contradict a declared incompatibility, so an entry never lists an id in
        both of its sets.

        Args:
            options: Catalog options whose relation sets should be folded in.
            base: Starting entries.  Defaults to the built-in matrix data.

        Returns:
            A new ``CompatibilityMatrix``.
        """
        if base is None:
            base = {key: _entry(raw) for key, raw in _MATRIX_DATA.items()}
        merged: dict[str, CompatibilityEntry] = dict(base)

        for option in options:
            current = merged.get(option.id, CompatibilityEntry())
            incompatible = current.incompatible_with | option.incompatible_with
            compatible = (current.compatible_with | frozenset(option.compatible_with)) - incompatible
            merged[option.id] = CompatibilityEntry(
                compatible_with=compatible,
                incompatible_with=incompatible,
                notes=current.notes,
            )
        return cls(merged)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def __contains__(self, option_id: object) -> bool:
        return option_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def entry(self, option_id: str) -> CompatibilityEntry | None:
        return self._entries.get(option_id)

    def are_compatible(self, option_a: str, option_b: str) -> bool:
        """Return ``False`` if either side declares the other incompatible."""
        entry_a = self._entries.get(option_a)
        entry_b = self._entries.get(option_b)
        if entry_a is not None and option_b in entry_a.incompatible_with:
            return False
        if entry_b is not None and option_a in entry_b.incompatible_with:
            return False
        return True

    def compatible_options(self, option_id: str) -> list[str]:
        """Ids *option_id* declares compatible, sorted for stable output."""
        entry = self._entries.get(option_id)
        return sorted(entry.compatible_with) if entry else []

    def incompatible_options(self, option_id: str) -> list[str]:
        """Ids *option_id* declares incompatible, sorted for stable output."""
        entry = self._entries.get(option_id)
        return sorted(entry.incompatible_with) if entry else []

    def note(self, source: str, target: str) -> str | None:
        entry = self._entries.get(source)
        return entry.notes.get(target) if entry else None

    def rules(self) -> list[CompatibilityRule]:
        """Flatten the matrix into directed rules, compatible ones first per source."""
        rules: list[CompatibilityRule] = []
        for source in sorted(self._entries):
            entry = self._entries[source]
            for target in sorted(entry.compatible_with):
                rules.append(
                    CompatibilityRule(
                        source=source,
                        target=target,
                        compatible=True,
                        reason=entry.notes.get(target),
                    )
                )
            for target in sorted(entry.incompatible_with):
                rules.append(CompatibilityRule(source=source, target=target, compatible=False))
        return rules

    def validate_selection(self, selection: Mapping[str, str]) -> SelectionCheck:
        """Check every pair of selected ids, ignoring empty and ``"none"`` values.

        Args:
            selection: Category -> option id mapping.

        Returns:
            A ``SelectionCheck`` listing one conflict per incompatible pair, in
            selection order.
        """
        selected = [value for value in selection.values() if value and value != "none"]
        conflicts: list[SelectionConflict] = []
        for i, option_a in enumerate(selected):
            for option_b in selected[i + 1:]:
                if not self.are_compatible(option_a, option_b):
                    conflicts.append(
                        SelectionConflict(
                            option_a=option_a,
                            option_b=option_b,
                            reason=f"{option_a} and {option_b} are not compatible",
                        )
                    )
        return SelectionCheck(valid=not conflicts, conflicts=conflicts)

    def recommended_pairings(self, option_id: str) -> list[tuple[str, str]]:
        """Return ``(id, reason)`` pairs for every annotated pairing of *option_id*."""
        entry = self._entries.get(option_id)
        if entry is None:
            return []
        return list(entry.notes.items())
