"""Mini README: CandidateSource backed by the REST endpoint bindings.

Converts list responses into ``EntityRef`` and ``CategoryGroupRef`` values in
the order the service returned them. Exactly one request is made per call.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from ..api.endpoints import YnabApi
from .base import CandidateSource, CategoryGroupRef, EntityRef


def _ref(payload: Mapping[str, Any]) -> EntityRef:
    return EntityRef(
        identifier=payload["id"],
        name=payload["name"],
        deleted=bool(payload.get("deleted", False)),
    )


class ApiCandidateSource(CandidateSource):
    """Fetch resolution candidates through ``YnabApi``."""

    def __init__(self, api: YnabApi) -> None:
        self.api = api

    def list_budgets(self) -> List[EntityRef]:
        return [_ref(budget) for budget in self.api.list_budgets()]

    def list_accounts(self, budget_id: str) -> List[EntityRef]:
        return [_ref(account) for account in self.api.list_accounts(budget_id)["accounts"]]

    def list_payees(self, budget_id: str) -> List[EntityRef]:
        return [_ref(payee) for payee in self.api.list_payees(budget_id)["payees"]]

    def list_category_groups(self, budget_id: str) -> List[CategoryGroupRef]:
        groups = self.api.list_categories(budget_id)["category_groups"]
        return [
            CategoryGroupRef(
                identifier=group["id"],
                name=group["name"],
                categories=tuple(_ref(category) for category in group.get("categories", [])),
                deleted=bool(group.get("deleted", False)),
            )
            for group in groups
        ]
