"""Mini README: ``clinab accounts`` - list, inspect and create accounts.

Balances arrive in milliunits; the net-worth summary below the table sums
those integers before formatting so totals never drift.
"""

from __future__ import annotations

from typing import Any, Mapping

import typer
from rich.text import Text

from ...api import ASSET_ACCOUNT_TYPES, AccountType
from ...money import parse_amount
from ..output import Column, count_by, visible
from ..session import get_session

app = typer.Typer(
    help="Manage budget accounts (checking, savings, credit cards, etc.).",
    epilog=(
        'Examples: clinab accounts list --include-closed | clinab accounts show "Checking" | '
        'clinab accounts create "Visa" creditCard 0'
    ),
)


@app.command("list")
def list_accounts(
    ctx: typer.Context,
    include_closed: bool = typer.Option(False, "--include-closed", help="Include closed accounts."),
) -> None:
    """List the accounts of the selected budget."""

    session = get_session(ctx)
    output = session.output
    accounts = [
        account
        for account in visible(session.api.list_accounts(session.budget_id)["accounts"])
        if include_closed or not account.get("closed")
    ]
    if output.json_mode:
        output.print_json(accounts)
        return

    name_counts = count_by(accounts, "name")

    def _name(value: Any, row: Mapping[str, Any]) -> Any:
        if name_counts.get(value, 0) > 1:
            label = Text(str(value))
            label.append(f" ({str(row['id'])[:8]})", style="dim")
            return label
        return value

    output.print_table(
        [
            Column("Name", "name", formatter=_name),
            Column("Type", "type"),
            Column("Balance", "balance", "right", lambda value, _: output.amount(value)),
            Column("Cleared", "cleared_balance", "right", lambda value, _: output.amount(value)),
            Column("Uncleared", "uncleared_balance", "right", lambda value, _: output.amount(value)),
            Column("On Budget", "on_budget", formatter=lambda value, _: "✓" if value else "—"),
        ],
        accounts,
    )

    if accounts:
        assets = sum(a["balance"] for a in accounts if a.get("type") in ASSET_ACCOUNT_TYPES)
        liabilities = sum(a["balance"] for a in accounts if a.get("type") not in ASSET_ACCOUNT_TYPES)
        summary = Text(f"\n  {len(accounts)} accounts  ", style="dim")
        summary.append("Assets: ")
        summary.append(output.money(assets), style="green")
        summary.append("  Liabilities: ")
        summary.append(output.money(liabilities), style="red")
        summary.append("  Net: ")
        summary.append_text(output.amount(assets + liabilities))
        output.console.print(summary)


@app.command("show")
def show_account(
    ctx: typer.Context,
    account: str = typer.Argument(..., help="Account name or ID."),
) -> None:
    """Show details for one account."""

    session = get_session(ctx)
    details = session.api.get_account(session.budget_id, session.account_id(account))
    output = session.output
    if output.json_mode:
        output.print_json(details)
        return
    output.print_detail(
        [
            ("Name", details["name"]),
            ("ID", details["id"]),
            ("Type", details.get("type", "")),
            ("On Budget", "Yes" if details.get("on_budget") else "No"),
            ("Closed", "Yes" if details.get("closed") else "No"),
            ("Balance", output.money(details["balance"])),
            ("Cleared", output.money(details["cleared_balance"])),
            ("Uncleared", output.money(details["uncleared_balance"])),
            ("Note", details.get("note") or ""),
            ("Last Reconciled", details.get("last_reconciled_at") or "Never"),
        ]
    )


@app.command("create")
def create_account(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Account name."),
    account_type: AccountType = typer.Argument(..., metavar="TYPE", help="Account type."),
    balance: str = typer.Argument(..., help="Starting balance in currency units, e.g. 1000.00."),
) -> None:
    """Create a new account with a starting balance."""

    milliunits = parse_amount(balance)
    session = get_session(ctx)
    created = session.api.create_account(
        session.budget_id,
        {"name": name, "type": account_type.value, "balance": milliunits},
    )
    if session.output.json_mode:
        session.output.print_json(created)
        return
    session.output.success(
        f'Created account "{created["name"]}" ({created["type"]}) '
        f'with balance {session.output.money(created["balance"])}'
    )
