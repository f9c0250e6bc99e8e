"""Mini README: Name-or-identifier resolution for clinab.

Users refer to budgets, accounts, categories, category groups and payees by
name. This package maps those names to canonical identifiers: ``base``
defines candidates and the fetch interface, ``resolver`` holds the matching
rules, and ``sources`` adapts the REST bindings into a candidate source.
"""

from .base import CandidateSource, CategoryGroupRef, EntityKind, EntityRef
from .resolver import (
    BUDGET_ALIASES,
    EntityNotFoundError,
    NameResolver,
    NotFound,
    Resolution,
    Resolved,
    looks_like_canonical_id,
)
from .sources import ApiCandidateSource

__all__ = [
    "ApiCandidateSource",
    "BUDGET_ALIASES",
    "CandidateSource",
    "CategoryGroupRef",
    "EntityKind",
    "EntityNotFoundError",
    "EntityRef",
    "NameResolver",
    "NotFound",
    "Resolution",
    "Resolved",
    "looks_like_canonical_id",
]
