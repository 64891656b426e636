"""The assembled knowledge base: every catalog plus the compatibility matrix."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType

from kickoff.knowledge.ai import (
    AI_FRAMEWORKS,
    EMBEDDING_PROVIDERS,
    LOCAL_AI_PROVIDERS,
    VECTOR_DATABASES,
)
from kickoff.knowledge.auth import AUTH_PROVIDERS
from kickoff.knowledge.compatibility import CompatibilityMatrix
from kickoff.knowledge.databases import DATABASES
from kickoff.knowledge.frameworks import BACKENDS, FRONTENDS, WEB_SERVERS
from kickoff.knowledge.models import (
    AnyStackOption,
    BackendOption,
    Complexity,
    KnowledgeCategory,
    Runtime,
    StackOption,
)
from kickoff.knowledge.orms import ORMS


class UnknownCategoryError(LookupError):
    """Raised when a caller asks for a category the knowledge base does not hold."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"Unknown knowledge category: {category!r}")


class KnowledgeBase:
    """Immutable catalog of stack options grouped by category.

    Built once from static literals by ``default_knowledge_base()``; tests
    construct their own instances from substituted catalogs.

    Args:
        catalogs: Category -> options.  Option ids must be unique across the
            whole knowledge base.
        matrix: Compatibility matrix.  Defaults to the built-in matrix with
            every option's own relation sets folded in.
    """

    def __init__(
        self,
        catalogs: Mapping[KnowledgeCategory | str, Iterable[StackOption]],
        matrix: CompatibilityMatrix | None = None,
    ) -> None:
        grouped: dict[str, tuple[StackOption, ...]] = {}
        index: dict[str, StackOption] = {}
        for category, options in catalogs.items():
            key = KnowledgeCategory(category).value
            grouped[key] = tuple(options)
            for option in grouped[key]:
                if option.id in index:
                    raise ValueError(f"Duplicate option id in knowledge base: {option.id!r}")
                index[option.id] = option

        self._catalogs: Mapping[str, tuple[StackOption, ...]] = MappingProxyType(grouped)
        self._index: Mapping[str, StackOption] = MappingProxyType(index)
        self.matrix = matrix if matrix is not None else CompatibilityMatrix.from_options(index.values())

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def categories(self) -> list[str]:
        return list(self._catalogs)

    def all_options(self) -> list[StackOption]:
        """Every option in catalog order."""
        return list(self._index.values())

    def get_option(self, option_id: str) -> StackOption | None:
        return self._index.get(option_id)

    def options_for(self, category: KnowledgeCategory | str) -> tuple[StackOption, ...]:
        """Return the options registered under *category*.

        Raises:
            UnknownCategoryError: If *category* is not a registered category.
        """
        key = category.value if isinstance(category, KnowledgeCategory) else str(category)
        try:
            return self._catalogs[key]
        except KeyError:
            raise UnknownCategoryError(key) from None

    def search(self, query: str) -> list[StackOption]:
        """Case-insensitive substring search over id, name and description."""
        needle = query.lower()
        return [
            option
            for option in self._index.values()
            if needle in option.name.lower()
            or needle in option.description.lower()
            or needle in option.id.lower()
        ]

    def options_for_runtime(self, runtime: Runtime | str) -> dict[str, list[StackOption]]:
        """Group the runtime-aware categories by what supports *runtime*.

        Backends match on their single ``runtime``; every other category
        matches on ``supported_runtimes``.
        """
        target = Runtime(runtime)
        result: dict[str, list[StackOption]] = {}
        for category in ("database", "orm", "auth", "backend", "ai"):
            if category not in self._catalogs:
                continue
            matches: list[StackOption] = []
            for option in self._catalogs[category]:
                if isinstance(option, BackendOption):
                    if option.runtime == target:
                        matches.append(option)
                elif target in getattr(option, "supported_runtimes", ()):
                    matches.append(option)
            result[category] = matches
        return result

    def complexity_summary(self) -> dict[str, int]:
        """Count options per complexity level."""
        summary = {level.value: 0 for level in Complexity}
        for option in self._index.values():
            summary[option.complexity.value] += 1
        return summary


def _default_catalogs() -> dict[KnowledgeCategory, tuple[AnyStackOption, ...]]:
    return {
        KnowledgeCategory.DATABASE: DATABASES,
        KnowledgeCategory.ORM: ORMS,
        KnowledgeCategory.AUTH: AUTH_PROVIDERS,
        KnowledgeCategory.FRONTEND: FRONTENDS,
        KnowledgeCategory.BACKEND: BACKENDS,
        KnowledgeCategory.AI: AI_FRAMEWORKS,
        KnowledgeCategory.VECTOR_DB: VECTOR_DATABASES,
        KnowledgeCategory.EMBEDDING: EMBEDDING_PROVIDERS,
        KnowledgeCategory.LOCAL_AI: LOCAL_AI_PROVIDERS,
        KnowledgeCategory.WEB_SERVER: WEB_SERVERS,
    }


@lru_cache(maxsize=1)
def default_knowledge_base() -> KnowledgeBase:
    """Return the built-in knowledge base, constructed on first use."""
    return KnowledgeBase(_default_catalogs())
