"""Kickoff stack knowledge base.

Static catalogs of every selectable technology, grouped by category, plus the
pairwise compatibility matrix between option ids.

Usage::

    from kickoff.knowledge import default_knowledge_base

    kb = default_knowledge_base()
    kb.get_option("drizzle").complexity
    kb.matrix.are_compatible("d1", "prisma")
    kb.options_for("vector-db")
"""

from kickoff.knowledge.base import (
    KnowledgeBase,
    UnknownCategoryError,
    default_knowledge_base,
)
from kickoff.knowledge.compatibility import CompatibilityMatrix
from kickoff.knowledge.models import (
    AIOption,
    AnyStackOption,
    AuthOption,
    BackendOption,
    Complexity,
    CostTier,
    DatabaseOption,
    EmbeddingOption,
    FrontendOption,
    KnowledgeCategory,
    LocalAIOption,
    ORMOption,
    Runtime,
    SelectionCheck,
    StackOption,
    VectorDBOption,
    WebServerOption,
)

__all__ = [
    "default_knowledge_base",
    "KnowledgeBase",
    "UnknownCategoryError",
    "CompatibilityMatrix",
    "StackOption",
    "AnyStackOption",
    "DatabaseOption",
    "ORMOption",
    "AuthOption",
    "FrontendOption",
    "BackendOption",
    "AIOption",
    "VectorDBOption",
    "EmbeddingOption",
    "LocalAIOption",
    "WebServerOption",
    "CostTier",
    "Complexity",
    "Runtime",
    "KnowledgeCategory",
    "SelectionCheck",
]
