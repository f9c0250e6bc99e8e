"""Mini README: Candidate types and the fetch interface used for resolution.

Structure:
    * EntityKind - enum of the entity kinds that can be referred to by name.
    * EntityRef - identifier/name pair with its soft-delete flag.
    * CategoryGroupRef - a category group together with its categories.
    * CandidateSource - abstract read interface supplying candidates.

Resolution never talks to HTTP directly. It asks a ``CandidateSource`` for
one page of candidates, which keeps the matching rules testable with
in-memory fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple


class EntityKind(str, Enum):
    """Entity kinds accepted by the resolver."""

    BUDGET = "budget"
    ACCOUNT = "account"
    CATEGORY = "category"
    CATEGORY_GROUP = "category_group"
    PAYEE = "payee"

    @property
    def requires_scope(self) -> bool:
        """Everything except budgets lives inside a budget."""

        return self is not EntityKind.BUDGET


@dataclass(frozen=True, slots=True)
class EntityRef:
    """A candidate entity: canonical identifier plus display name."""

    identifier: str
    name: str
    deleted: bool = False


@dataclass(frozen=True, slots=True)
class CategoryGroupRef:
    """A category group and the categories it contains, in service order."""

    identifier: str
    name: str
    categories: Tuple[EntityRef, ...] = ()
    deleted: bool = False

    def as_ref(self) -> EntityRef:
        """Return the group itself as a plain candidate."""

        return EntityRef(identifier=self.identifier, name=self.name, deleted=self.deleted)


class CandidateSource(ABC):
    """Read operations returning one page of candidates per entity kind."""

    @abstractmethod
    def list_budgets(self) -> Sequence[EntityRef]:
        """Return every budget visible to the current token."""

    @abstractmethod
    def list_accounts(self, budget_id: str) -> Sequence[EntityRef]:
        """Return the accounts of a budget."""

    @abstractmethod
    def list_payees(self, budget_id: str) -> Sequence[EntityRef]:
        """Return the payees of a budget."""

    @abstractmethod
    def list_category_groups(self, budget_id: str) -> Sequence[CategoryGroupRef]:
        """Return the category groups of a budget with nested categories."""
