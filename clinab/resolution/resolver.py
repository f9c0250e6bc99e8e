"""Mini README: Turn names or identifiers typed by users into identifiers.

Structure:
    * looks_like_canonical_id - the one predicate deciding "already an id".
    * Resolved / NotFound - explicit outcome of a lookup.
    * EntityNotFoundError - raised when a NotFound outcome is unwrapped.
    * NameResolver - matches tokens against candidates from a CandidateSource.

Matching is case-insensitive exact equality on the display name and the
first candidate in service order wins. Canonical identifiers (and the budget
aliases ``last-used`` / ``default``) are returned without fetching anything,
so an identifier that does not exist is only rejected later by the API call
that uses it. Nothing is cached: each lookup fetches a fresh candidate list.

Soft-deleted accounts and payees are ignored both for matching and in the
list of available names; budgets, categories and category groups are listed
as returned. The service rarely soft-deletes the latter, and the behaviour is
kept as observed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from ..errors import ClinabError
from ..logging_utils import get_logger
from .base import CandidateSource, EntityKind, EntityRef

LOGGER = get_logger(__name__)

CANONICAL_ID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)
BUDGET_ALIASES = frozenset({"last-used", "default"})


def looks_like_canonical_id(token: str) -> bool:
    """Return True when the token has the 8-4-4-4-12 hex identifier shape."""

    return CANONICAL_ID_PATTERN.fullmatch(token) is not None


@dataclass(frozen=True, slots=True)
class _KindRule:
    subject: str
    available_label: str
    skip_deleted: bool


_RULES: Dict[EntityKind, _KindRule] = {
    EntityKind.BUDGET: _KindRule("Budget", "Available budgets", skip_deleted=False),
    EntityKind.ACCOUNT: _KindRule("Account", "Available accounts", skip_deleted=True),
    EntityKind.CATEGORY: _KindRule("Category", "Available", skip_deleted=False),
    EntityKind.CATEGORY_GROUP: _KindRule("Category group", "Available", skip_deleted=False),
    EntityKind.PAYEE: _KindRule("Payee", "Available payees", skip_deleted=True),
}


class EntityNotFoundError(ClinabError, LookupError):
    """No candidate matched the token; carries the names that were available."""

    def __init__(self, kind: EntityKind, token: str, available: Tuple[str, ...]) -> None:
        rule = _RULES[kind]
        super().__init__(
            f'{rule.subject} "{token}" not found. '
            f'{rule.available_label}: {", ".join(available)}'
        )
        self.kind = kind
        self.token = token
        self.available = available


@dataclass(frozen=True, slots=True)
class Resolved:
    """Successful lookup."""

    identifier: str

    def unwrap(self) -> str:
        return self.identifier


@dataclass(frozen=True, slots=True)
class NotFound:
    """Failed lookup with every candidate name that was considered."""

    kind: EntityKind
    token: str
    available: Tuple[str, ...]

    def to_error(self) -> EntityNotFoundError:
        return EntityNotFoundError(self.kind, self.token, self.available)

    @property
    def message(self) -> str:
        return str(self.to_error())

    def unwrap(self) -> str:
        raise self.to_error()


Resolution = Union[Resolved, NotFound]


class NameResolver:
    """Resolve user tokens to canonical identifiers for each entity kind."""

    def __init__(self, source: CandidateSource) -> None:
        self.source = source

    def lookup(
        self,
        kind: Union[EntityKind, str],
        token: str,
        scope: Optional[str] = None,
    ) -> Resolution:
        """Return ``Resolved`` or ``NotFound`` for the token."""

        kind = EntityKind(kind)
        if looks_like_canonical_id(token):
            LOGGER.debug("Token %r is already a %s identifier", token, kind.value)
            return Resolved(token)
        if kind is EntityKind.BUDGET and token in BUDGET_ALIASES:
            return Resolved(token)
        if kind.requires_scope and not scope:
            raise ValueError(f"Resolving a {kind.value} requires a budget identifier.")

        rule = _RULES[kind]
        candidates = self._candidates(kind, scope)
        if rule.skip_deleted:
            candidates = [(ref, label) for ref, label in candidates if not ref.deleted]
        LOGGER.debug(
            "Matching %s token %r against %s candidates", kind.value, token, len(candidates)
        )

        wanted = token.casefold()
        for ref, _ in candidates:
            if ref.name.casefold() == wanted:
                return Resolved(ref.identifier)
        return NotFound(kind, token, tuple(label for _, label in candidates))

    def resolve(
        self,
        kind: Union[EntityKind, str],
        token: str,
        scope: Optional[str] = None,
    ) -> str:
        """Return the identifier or raise ``EntityNotFoundError``."""

        return self.lookup(kind, token, scope).unwrap()

    def resolve_budget(self, token: str) -> str:
        return self.resolve(EntityKind.BUDGET, token)

    def resolve_account(self, budget_id: str, token: str) -> str:
        return self.resolve(EntityKind.ACCOUNT, token, budget_id)

    def resolve_category(self, budget_id: str, token: str) -> str:
        return self.resolve(EntityKind.CATEGORY, token, budget_id)

    def resolve_category_group(self, budget_id: str, token: str) -> str:
        return self.resolve(EntityKind.CATEGORY_GROUP, token, budget_id)

    def resolve_payee(self, budget_id: str, token: str) -> str:
        return self.resolve(EntityKind.PAYEE, token, budget_id)

    def _candidates(
        self, kind: EntityKind, scope: Optional[str]
    ) -> List[Tuple[EntityRef, str]]:
        """Fetch candidates paired with the label shown when nothing matches."""

        if kind is EntityKind.BUDGET:
            refs = self.source.list_budgets()
        elif kind is EntityKind.ACCOUNT:
            refs = self.source.list_accounts(scope)
        elif kind is EntityKind.PAYEE:
            refs = self.source.list_payees(scope)
        elif kind is EntityKind.CATEGORY_GROUP:
            refs = [group.as_ref() for group in self.source.list_category_groups(scope)]
        else:
            return [
                (category, f"{group.name}/{category.name}")
                for group in self.source.list_category_groups(scope)
                for category in group.categories
            ]
        return [(ref, ref.name) for ref in refs]
