"""Mini README: One method per REST endpoint used by the command tree.

Structure:
    * YnabApi - groups user, budget, account, category, payee, month,
      transaction and scheduled transaction endpoints over a ``YnabClient``.

Methods pass parameters straight through and unwrap the resource member of
the response (``{"account": {...}}`` becomes the account dictionary). List
methods that support delta requests accept ``server_knowledge`` and return
the raw mapping so callers can read ``server_knowledge`` back.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..logging_utils import get_logger
from .client import YnabClient

LOGGER = get_logger(__name__)

Payload = Dict[str, Any]


def _knowledge(server_knowledge: Optional[int]) -> Dict[str, Optional[int]]:
    return {"last_knowledge_of_server": server_knowledge}


def _transaction_params(
    since_date: Optional[str],
    type_: Optional[str],
    server_knowledge: Optional[int],
) -> Dict[str, Any]:
    return {
        "since_date": since_date,
        "type": type_,
        "last_knowledge_of_server": server_knowledge,
    }


class YnabApi:
    """Endpoint bindings for the budgeting service."""

    def __init__(self, client: YnabClient) -> None:
        self.client = client

    # User -----------------------------------------------------------------

    def get_user(self) -> Payload:
        return self.client.get("/user")["user"]

    # Budgets --------------------------------------------------------------

    def list_budgets(self, include_accounts: bool = False) -> List[Payload]:
        params = {"include_accounts": True} if include_accounts else None
        return self.client.get("/budgets", params)["budgets"]

    def get_budget(self, budget_id: str) -> Payload:
        return self.client.get(f"/budgets/{budget_id}")["budget"]

    def get_budget_settings(self, budget_id: str) -> Payload:
        return self.client.get(f"/budgets/{budget_id}/settings")["settings"]

    # Accounts -------------------------------------------------------------

    def list_accounts(self, budget_id: str, server_knowledge: Optional[int] = None) -> Payload:
        return self.client.get(f"/budgets/{budget_id}/accounts", _knowledge(server_knowledge))

    def get_account(self, budget_id: str, account_id: str) -> Payload:
        return self.client.get(f"/budgets/{budget_id}/accounts/{account_id}")["account"]

    def create_account(self, budget_id: str, account: Mapping[str, Any]) -> Payload:
        LOGGER.info("Creating account %s", account.get("name"))
        data = self.client.post(f"/budgets/{budget_id}/accounts", {"account": dict(account)})
        return data["account"]

    # Categories -----------------------------------------------------------

    def list_categories(self, budget_id: str, server_knowledge: Optional[int] = None) -> Payload:
        return self.client.get(f"/budgets/{budget_id}/categories", _knowledge(server_knowledge))

    def get_category(self, budget_id: str, category_id: str) -> Payload:
        return self.client.get(f"/budgets/{budget_id}/categories/{category_id}")["category"]

    def get_month_category(self, budget_id: str, month: str, category_id: str) -> Payload:
        path = f"/budgets/{budget_id}/months/{month}/categories/{category_id}"
        return self.client.get(path)["category"]

    def create_category(self, budget_id: str, category: Mapping[str, Any]) -> Payload:
        LOGGER.info("Creating category %s", category.get("name"))
        data = self.client.post(f"/budgets/{budget_id}/categories", {"category": dict(category)})
        return data["category"]

    def update_category(
        self, budget_id: str, category_id: str, category: Mapping[str, Any]
    ) -> Payload:
        LOGGER.info("Updating category %s", category_id)
        path = f"/budgets/{budget_id}/categories/{category_id}"
        return self.client.patch(path, {"category": dict(category)})["category"]

    def update_month_category(
        self, budget_id: str, month: str, category_id: str, budgeted: int
    ) -> Payload:
        LOGGER.info("Assigning %s milliunits to %s for %s", budgeted, category_id, month)
        path = f"/budgets/{budget_id}/months/{month}/categories/{category_id}"
        return self.client.patch(path, {"category": {"budgeted": budgeted}})["category"]

    def create_category_group(self, budget_id: str, name: str) -> Payload:
        LOGGER.info("Creating category group %s", name)
        data = self.client.post(
            f"/budgets/{budget_id}/category_groups", {"category_group": {"name": name}}
        )
        return data["category_group"]

    def update_category_group(self, budget_id: str, group_id: str, name: str) -> Payload:
        LOGGER.info("Renaming category group %s", group_id)
        data = self.client.patch(
            f"/budgets/{budget_id}/category_groups/{group_id}",
            {"category_group": {"name": name}},
        )
        return data["category_group"]

    # Payees ---------------------------------------------------------------

    def list_payees(self, budget_id: str, server_knowledge: Optional[int] = None) -> Payload:
        return self.client.get(f"/budgets/{budget_id}/payees", _knowledge(server_knowledge))

    def get_payee(self, budget_id: str, payee_id: str) -> Payload:
        return self.client.get(f"/budgets/{budget_id}/payees/{payee_id}")["payee"]

    def update_payee(self, budget_id: str, payee_id: str, name: str) -> Payload:
        LOGGER.info("Renaming payee %s", payee_id)
        data = self.client.patch(
            f"/budgets/{budget_id}/payees/{payee_id}", {"payee": {"name": name}}
        )
        return data["payee"]

    def list_payee_locations(self, budget_id: str) -> List[Payload]:
        return self.client.get(f"/budgets/{budget_id}/payee_locations")["payee_locations"]

    def get_payee_location(self, budget_id: str, location_id: str) -> Payload:
        path = f"/budgets/{budget_id}/payee_locations/{location_id}"
        return self.client.get(path)["payee_location"]

    def list_payee_locations_for_payee(self, budget_id: str, payee_id: str) -> List[Payload]:
        path = f"/budgets/{budget_id}/payees/{payee_id}/payee_locations"
        return self.client.get(path)["payee_locations"]

    # Months ---------------------------------------------------------------

    def list_months(self, budget_id: str, server_knowledge: Optional[int] = None) -> Payload:
        return self.client.get(f"/budgets/{budget_id}/months", _knowledge(server_knowledge))

    def get_month(self, budget_id: str, month: str) -> Payload:
        return self.client.get(f"/budgets/{budget_id}/months/{month}")["month"]

    # Transactions ---------------------------------------------------------

    def list_transactions(
        self,
        budget_id: str,
        *,
        since_date: Optional[str] = None,
        type_: Optional[str] = None,
        server_knowledge: Optional[int] = None,
    ) -> Payload:
        return self.client.get(
            f"/budgets/{budget_id}/transactions",
            _transaction_params(since_date, type_, server_knowledge),
        )

    def list_account_transactions(
        self,
        budget_id: str,
        account_id: str,
        *,
        since_date: Optional[str] = None,
        type_: Optional[str] = None,
        server_knowledge: Optional[int] = None,
    ) -> Payload:
        return self.client.get(
            f"/budgets/{budget_id}/accounts/{account_id}/transactions",
            _transaction_params(since_date, type_, server_knowledge),
        )

    def list_category_transactions(
        self,
        budget_id: str,
        category_id: str,
        *,
        since_date: Optional[str] = None,
        type_: Optional[str] = None,
        server_knowledge: Optional[int] = None,
    ) -> Payload:
        return self.client.get(
            f"/budgets/{budget_id}/categories/{category_id}/transactions",
            _transaction_params(since_date, type_, server_knowledge),
        )

    def list_payee_transactions(
        self,
        budget_id: str,
        payee_id: str,
        *,
        since_date: Optional[str] = None,
        type_: Optional[str] = None,
        server_knowledge: Optional[int] = None,
    ) -> Payload:
        return self.client.get(
            f"/budgets/{budget_id}/payees/{payee_id}/transactions",
            _transaction_params(since_date, type_, server_knowledge),
        )

    def list_month_transactions(
        self,
        budget_id: str,
        month: str,
        *,
        since_date: Optional[str] = None,
        type_: Optional[str] = None,
        server_knowledge: Optional[int] = None,
    ) -> Payload:
        return self.client.get(
            f"/budgets/{budget_id}/months/{month}/transactions",
            _transaction_params(since_date, type_, server_knowledge),
        )

    def get_transaction(self, budget_id: str, transaction_id: str) -> Payload:
        path = f"/budgets/{budget_id}/transactions/{transaction_id}"
        return self.client.get(path)["transaction"]

    def create_transaction(self, budget_id: str, transaction: Mapping[str, Any]) -> Payload:
        LOGGER.info("Creating transaction of %s milliunits", transaction.get("amount"))
        return self.client.post(
            f"/budgets/{budget_id}/transactions", {"transaction": dict(transaction)}
        )

    def create_transactions(
        self, budget_id: str, transactions: Sequence[Mapping[str, Any]]
    ) -> Payload:
        LOGGER.info("Creating %s transactions", len(transactions))
        return self.client.post(
            f"/budgets/{budget_id}/transactions",
            {"transactions": [dict(transaction) for transaction in transactions]},
        )

    def update_transaction(
        self, budget_id: str, transaction_id: str, transaction: Mapping[str, Any]
    ) -> Payload:
        LOGGER.info("Updating transaction %s", transaction_id)
        data = self.client.put(
            f"/budgets/{budget_id}/transactions/{transaction_id}",
            {"transaction": dict(transaction)},
        )
        return data["transaction"]

    def update_transactions(
        self, budget_id: str, transactions: Sequence[Mapping[str, Any]]
    ) -> Payload:
        LOGGER.info("Updating %s transactions", len(transactions))
        return self.client.patch(
            f"/budgets/{budget_id}/transactions",
            {"transactions": [dict(transaction) for transaction in transactions]},
        )

    def delete_transaction(self, budget_id: str, transaction_id: str) -> Payload:
        LOGGER.info("Deleting transaction %s", transaction_id)
        path = f"/budgets/{budget_id}/transactions/{transaction_id}"
        return self.client.delete(path)["transaction"]

    def import_transactions(self, budget_id: str) -> Payload:
        LOGGER.info("Triggering import for budget %s", budget_id)
        return self.client.post(f"/budgets/{budget_id}/transactions/import", {})

    # Scheduled transactions -----------------------------------------------

    def list_scheduled_transactions(
        self, budget_id: str, server_knowledge: Optional[int] = None
    ) -> Payload:
        return self.client.get(
            f"/budgets/{budget_id}/scheduled_transactions", _knowledge(server_knowledge)
        )

    def get_scheduled_transaction(self, budget_id: str, scheduled_id: str) -> Payload:
        path = f"/budgets/{budget_id}/scheduled_transactions/{scheduled_id}"
        return self.client.get(path)["scheduled_transaction"]

    def create_scheduled_transaction(
        self, budget_id: str, transaction: Mapping[str, Any]
    ) -> Payload:
        LOGGER.info("Creating %s scheduled transaction", transaction.get("frequency"))
        data = self.client.post(
            f"/budgets/{budget_id}/scheduled_transactions",
            {"scheduled_transaction": dict(transaction)},
        )
        return data["scheduled_transaction"]

    def update_scheduled_transaction(
        self, budget_id: str, scheduled_id: str, transaction: Mapping[str, Any]
    ) -> Payload:
        LOGGER.info("Updating scheduled transaction %s", scheduled_id)
        data = self.client.put(
            f"/budgets/{budget_id}/scheduled_transactions/{scheduled_id}",
            {"scheduled_transaction": dict(transaction)},
        )
        return data["scheduled_transaction"]

    def delete_scheduled_transaction(self, budget_id: str, scheduled_id: str) -> Payload:
        LOGGER.info("Deleting scheduled transaction %s", scheduled_id)
        path = f"/budgets/{budget_id}/scheduled_transactions/{scheduled_id}"
        return self.client.delete(path)["scheduled_transaction"]
