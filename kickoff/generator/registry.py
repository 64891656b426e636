"""Fragment registry and dependency resolution.

``resolve_fragment_order`` is a depth-first topological sort with a
"visiting" set for back-edge detection.  A cycle means the fragment catalog
itself is wrong, so it is the one fatal condition here; missing dependencies
and declared incompatibilities are only *reported*, by
``check_fragment_dependencies``, and the caller decides what to do.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache
from types import MappingProxyType

from kickoff.generator.fragments import ALL_FRAGMENTS
from kickoff.generator.models import DependencyReport, FragmentCategory, TemplateFragment


class CircularDependencyError(Exception):
    """Raised when the selected fragments' dependency graph has a cycle."""

    def __init__(self, fragment_id: str) -> None:
        self.fragment_id = fragment_id
        super().__init__(f"Circular dependency detected involving {fragment_id}")


class FragmentRegistry:
    """Immutable id -> fragment lookup over a fragment catalog.

    Args:
        fragments: The catalog.  Ids must be unique.

    Raises:
        ValueError: If two fragments share an id.
    """

    def __init__(self, fragments: Iterable[TemplateFragment]) -> None:
        ordered = tuple(fragments)
        index: dict[str, TemplateFragment] = {}
        for fragment in ordered:
            if fragment.id in index:
                raise ValueError(f"Duplicate fragment id: {fragment.id!r}")
            index[fragment.id] = fragment
        self._ordered = ordered
        self._index = MappingProxyType(index)

    def __contains__(self, fragment_id: object) -> bool:
        return fragment_id in self._index

    def __iter__(self) -> Iterator[TemplateFragment]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def get(self, fragment_id: str) -> TemplateFragment | None:
        return self._index.get(fragment_id)

    def by_category(self, category: FragmentCategory | str) -> list[TemplateFragment]:
        wanted = FragmentCategory(category)
        return [fragment for fragment in self._ordered if fragment.category == wanted]

    def compatible_with(self, fragment_id: str) -> list[TemplateFragment]:
        """Fragments that neither declare nor are declared incompatible with *fragment_id*.

        Returns an empty list for an unknown id.
        """
        fragment = self._index.get(fragment_id)
        if fragment is None:
            return []
        return [
            other
            for other in self._ordered
            if other.id != fragment_id
            and other.id not in fragment.incompatible_with
            and fragment_id not in other.incompatible_with
        ]


@lru_cache(maxsize=1)
def default_registry() -> FragmentRegistry:
    """Return the registry of built-in fragments."""
    return FragmentRegistry(ALL_FRAGMENTS)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def check_fragment_dependencies(selected: Sequence[TemplateFragment]) -> DependencyReport:
    """Report every missing dependency and every conflict among *selected*.

    Nothing here fails fast: all problems are collected so they can be shown
    together.

    Returns:
        A ``DependencyReport`` with ``"<id> requires <dep>"`` and
        ``"<id> is incompatible with <other>"`` messages.
    """
    selected_ids = {fragment.id for fragment in selected}
    missing: list[str] = []
    conflicts: list[str] = []

    for fragment in selected:
        for dependency in fragment.dependencies:
            if dependency not in selected_ids:
                missing.append(f"{fragment.id} requires {dependency}")
        for other in fragment.incompatible_with:
            if other in selected_ids:
                conflicts.append(f"{fragment.id} is incompatible with {other}")

    return DependencyReport(
        valid=not missing and not conflicts,
        missing_dependencies=missing,
        conflicts=conflicts,
    )


def resolve_fragment_order(selected: Sequence[TemplateFragment]) -> list[TemplateFragment]:
    """Order *selected* so every fragment follows its dependencies.

    Dependencies outside the selection are skipped here; they surface through
    ``check_fragment_dependencies``.  Among independent fragments the input
    order is kept.

    Raises:
        CircularDependencyError: If the dependency graph has a cycle.
    """
    by_id: dict[str, TemplateFragment] = {}
    for fragment in selected:
        by_id.setdefault(fragment.id, fragment)

    resolved: list[TemplateFragment] = []
    done: set[str] = set()
    visiting: set[str] = set()

    def _visit(fragment: TemplateFragment) -> None:
        if fragment.id in done:
            return
        if fragment.id in visiting:
            raise CircularDependencyError(fragment.id)
        visiting.add(fragment.id)
        for dependency in fragment.dependencies:
            if dependency in by_id:
                _visit(by_id[dependency])
        visiting.discard(fragment.id)
        done.add(fragment.id)
        resolved.append(fragment)

    for fragment in by_id.values():
        _visit(fragment)

    return resolved
