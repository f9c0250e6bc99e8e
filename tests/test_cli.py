"""Mini README: End-to-end tests for the Typer command tree.

Structure:
    * FakeApi - in-memory replacement for ``YnabApi`` recording writes.
    * cli fixture - patches session construction so no HTTP is performed.
    * command tests - JSON output, name resolution, amount parsing and the
      exit-code contract for expected failures.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import pytest
from typer.testing import CliRunner

from clinab import __version__
from clinab.api import ApiError
from clinab.configuration import get_settings
from clinab.interface import CommandSession, app
from clinab.interface import session as session_module

USD_SETTINGS = {
    "date_format": {"format": "MM/DD/YYYY"},
    "currency_format": {
        "iso_code": "USD",
        "example_format": "123,456.78",
        "decimal_digits": 2,
        "decimal_separator": ".",
        "symbol_first": True,
        "group_separator": ",",
        "currency_symbol": "$",
        "display_symbol": True,
    },
}

CHECKING = {
    "id": "a1",
    "name": "Checking",
    "type": "checking",
    "on_budget": True,
    "closed": False,
    "deleted": False,
    "balance": 1234560,
    "cleared_balance": 1234560,
    "uncleared_balance": 0,
    "note": None,
    "last_reconciled_at": None,
}


class FakeApi:
    """Serve canned payloads and remember what commands sent."""

    def __init__(self) -> None:
        self.created: List[Dict[str, Any]] = []
        self.assigned: List[Any] = []
        self.fail_with: ApiError | None = None

    def list_budgets(self, include_accounts: bool = False) -> List[Dict[str, Any]]:
        if self.fail_with is not None:
            raise self.fail_with
        return [{"id": "b1", "name": "Household", "last_modified_on": "2026-01-02T10:00:00Z"}]

    def get_budget_settings(self, budget_id: str) -> Dict[str, Any]:
        return USD_SETTINGS

    def list_accounts(self, budget_id: str, server_knowledge: Any = None) -> Dict[str, Any]:
        closed = dict(CHECKING, id="a2", name="Old Savings", type="savings", closed=True)
        return {"accounts": [CHECKING, closed], "server_knowledge": 7}

    def get_account(self, budget_id: str, account_id: str) -> Dict[str, Any]:
        assert account_id == "a1"
        return CHECKING

    def list_categories(self, budget_id: str, server_knowledge: Any = None) -> Dict[str, Any]:
        return {
            "category_groups": [
                {
                    "id": "g1",
                    "name": "Everyday",
                    "categories": [{"id": "c1", "name": "Groceries", "deleted": False}],
                }
            ]
        }

    def list_payees(self, budget_id: str, server_knowledge: Any = None) -> Dict[str, Any]:
        return {"payees": []}

    def create_transaction(self, budget_id: str, transaction: Dict[str, Any]) -> Dict[str, Any]:
        self.created.append(dict(transaction))
        return {"transaction_ids": ["t1"], "transaction": dict(transaction, id="t1")}

    def update_month_category(
        self, budget_id: str, month: str, category_id: str, budgeted: int
    ) -> Dict[str, Any]:
        self.assigned.append((month, category_id, budgeted))
        return {"id": category_id, "name": "Groceries", "budgeted": budgeted}


@pytest.fixture()
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture()
def runner(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, fake_api: FakeApi) -> Iterator[CliRunner]:
    """CLI runner whose sessions talk to ``FakeApi`` when a token is present."""

    monkeypatch.delenv("YNAB_TOKEN", raising=False)
    monkeypatch.delenv("YNAB_BUDGET", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    real_build_session = session_module.build_session

    def build_session(**kwargs: Any) -> CommandSession:
        if not kwargs["token"]:
            return real_build_session(**kwargs)
        return CommandSession(fake_api, budget=kwargs["budget"], json_mode=kwargs["json_mode"])

    monkeypatch.setattr(session_module, "build_session", build_session)
    yield CliRunner()
    get_settings.cache_clear()


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_works_without_token(runner: CliRunner) -> None:
    result = runner.invoke(app, ["transactions", "--help"])
    assert result.exit_code == 0
    assert "add" in result.output


def test_missing_token_exits_with_guidance(runner: CliRunner) -> None:
    result = runner.invoke(app, ["budgets", "list"])
    assert result.exit_code == 1
    assert "No YNAB API token found" in result.output


def test_budgets_list_json(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--token", "t", "--json", "budgets", "list"])
    assert result.exit_code == 0
    assert json.loads(result.output)[0]["name"] == "Household"


def test_budgets_list_table(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--token", "t", "budgets", "list"])
    assert result.exit_code == 0
    assert "Household" in result.output
    assert "2026-01-02" in result.output


def test_token_from_environment(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("YNAB_TOKEN", "from-env")
    get_settings.cache_clear()
    result = runner.invoke(app, ["--json", "budgets", "list"])
    assert result.exit_code == 0


def test_accounts_list_hides_closed_by_default(runner: CliRunner) -> None:
    result = runner.invoke(app, ["-t", "t", "--json", "accounts", "list"])
    names = [account["name"] for account in json.loads(result.output)]
    assert names == ["Checking"]

    result = runner.invoke(app, ["-t", "t", "--json", "accounts", "list", "--include-closed"])
    assert len(json.loads(result.output)) == 2


def test_account_show_resolves_name(runner: CliRunner) -> None:
    result = runner.invoke(app, ["-t", "t", "accounts", "show", "checking"])
    assert result.exit_code == 0
    assert "$1,234.56" in result.output


def test_unknown_account_name_exits_with_available_names(runner: CliRunner) -> None:
    result = runner.invoke(app, ["-t", "t", "accounts", "show", "Brokerage"])
    assert result.exit_code == 1
    assert 'Account "Brokerage" not found.' in result.output
    assert "Checking" in result.output


def test_transaction_add_converts_amount(runner: CliRunner, fake_api: FakeApi) -> None:
    result = runner.invoke(
        app,
        [
            "-t", "t", "--json", "txn", "add",
            "-a", "Checking", "-c", "groceries", "-p", "Costco",
            "--date", "2026-03-01", "--", "-85.50",
        ],
    )
    assert result.exit_code == 0, result.output
    sent = fake_api.created[0]
    assert sent["amount"] == -85500
    assert sent["account_id"] == "a1"
    assert sent["category_id"] == "c1"
    assert sent["payee_name"] == "Costco"
    assert sent["date"] == "2026-03-01"
    assert sent["cleared"] == "cleared"
    assert sent["approved"] is True


def test_transaction_add_success_line(runner: CliRunner) -> None:
    result = runner.invoke(
        app, ["-t", "t", "txn", "add", "-a", "Checking", "--date", "2026-03-01", "12.5"]
    )
    assert result.exit_code == 0, result.output
    assert "$12.50" in result.output


def test_invalid_amount_is_rejected_before_any_request(
    runner: CliRunner, fake_api: FakeApi
) -> None:
    result = runner.invoke(app, ["-t", "t", "txn", "add", "-a", "Checking", "12,50"])
    assert result.exit_code == 1
    assert 'Invalid amount "12,50"' in result.output
    assert fake_api.created == []


def test_category_budget_assigns_milliunits(runner: CliRunner, fake_api: FakeApi) -> None:
    result = runner.invoke(app, ["-t", "t", "cat", "budget", "Groceries", "250"])
    assert result.exit_code == 0, result.output
    assert fake_api.assigned == [("current", "c1", 250000)]
    assert "$250.00" in result.output


def test_api_error_is_reported(runner: CliRunner, fake_api: FakeApi) -> None:
    fake_api.fail_with = ApiError(401, "401", "not_authorized", "Unauthorized")
    result = runner.invoke(app, ["-t", "t", "budgets", "list"])
    assert result.exit_code == 1
    assert "API Error (401): Unauthorized" in result.output


def test_json_mode_errors_are_json(runner: CliRunner, fake_api: FakeApi) -> None:
    fake_api.fail_with = ApiError(500, "500", "internal_server_error", "Boom")
    result = runner.invoke(app, ["-t", "t", "--json", "budgets", "list"])
    assert result.exit_code == 1
    assert json.loads(result.output.strip()) == {"error": "API Error (500): Boom"}


def test_invalid_environment_setting_is_reported(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("YNAB_TIMEOUT_SECONDS", "0")
    get_settings.cache_clear()

    result = runner.invoke(app, ["--token", "x", "budgets", "list"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "✗" in result.output
    assert "Invalid configuration" in result.output
    assert "YNAB_TIMEOUT_SECONDS" in result.output


def test_invalid_environment_setting_in_json_mode(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("YNAB_LOG_LEVEL", "chatty")
    get_settings.cache_clear()

    result = runner.invoke(app, ["--token", "x", "--json", "budgets", "list"])

    assert result.exit_code == 1
    error = json.loads(result.output.strip())["error"]
    assert error.startswith("Invalid configuration: YNAB_LOG_LEVEL")
