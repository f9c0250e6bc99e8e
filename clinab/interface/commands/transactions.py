"""Mini README: ``clinab transactions`` (alias ``txn``) - transaction CRUD.

Amounts are typed in currency units (negative for outflows) and converted to
milliunits before any request is sent. Account, category and payee filters
accept names. Use ``--`` before a negative amount so it is not read as an
option: ``clinab txn add -a Checking -- -85.50``.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

import typer
from rich.text import Text

from ...api import ClearedStatus, FlagColor, TransactionFilter
from ...money import parse_amount
from ..output import Column, visible
from ..session import get_session

CLEARED_MARKERS = {
    "cleared": Text("C", style="green"),
    "reconciled": Text("R", style="blue"),
}

app = typer.Typer(
    help="Manage transactions (create, list, update, delete).",
    epilog=(
        'Examples: clinab txn list --since 2026-01-01 --account "Checking" | '
        'clinab txn add -a "Checking" -p "Costco" -c "Groceries" -- -85.50 | '
        'clinab txn update <id> --memo "Updated memo"'
    ),
)


def _cleared(value: Any, _row: Any) -> Text:
    return CLEARED_MARKERS.get(value, Text("U", style="yellow"))


@app.command("list")
def list_transactions(
    ctx: typer.Context,
    since: Optional[str] = typer.Option(None, "--since", "-s", help="Only transactions on or after YYYY-MM-DD."),
    type_: Optional[TransactionFilter] = typer.Option(None, "--type", "-t", help="Only uncategorized or unapproved."),
    account: Optional[str] = typer.Option(None, "--account", "-a", help="Filter by account name or ID."),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Filter by category name or ID."),
    payee: Optional[str] = typer.Option(None, "--payee", "-p", help="Filter by payee name or ID."),
    limit: int = typer.Option(50, "--limit", "-l", min=1, help="Maximum number of rows."),
) -> None:
    """List transactions, optionally filtered."""

    session = get_session(ctx)
    api = session.api
    filters = {"since_date": since, "type_": type_.value if type_ else None}

    if account:
        result = api.list_account_transactions(session.budget_id, session.account_id(account), **filters)
    elif category:
        result = api.list_category_transactions(session.budget_id, session.category_id(category), **filters)
    elif payee:
        result = api.list_payee_transactions(session.budget_id, session.payee_id(payee), **filters)
    else:
        result = api.list_transactions(session.budget_id, **filters)

    transactions = visible(result["transactions"])[:limit]
    output = session.output
    if output.json_mode:
        output.print_json(transactions)
        return
    output.print_table(
        [
            Column("Date", "date"),
            Column("Payee", "payee_name"),
            Column("Category", "category_name", formatter=lambda value, _: value or Text("Uncategorized", style="dim")),
            Column("Amount", "amount", "right", lambda value, _: output.amount(value)),
            Column("Account", "account_name"),
            Column("Clr", "cleared", formatter=_cleared),
            Column("Memo", "memo", formatter=lambda value, _: Text(value or "", style="dim")),
        ],
        transactions,
    )


@app.command("show")
def show_transaction(
    ctx: typer.Context,
    transaction_id: str = typer.Argument(..., metavar="ID", help="Transaction ID."),
) -> None:
    """Show full details for a transaction, including splits."""

    session = get_session(ctx)
    output = session.output
    txn = session.api.get_transaction(session.budget_id, transaction_id)
    if output.json_mode:
        output.print_json(txn)
        return

    subtransactions = txn.get("subtransactions") or []
    fields = [
        ("ID", txn["id"]),
        ("Date", txn["date"]),
        ("Amount", output.money(txn["amount"])),
        ("Payee", txn.get("payee_name") or ""),
        ("Category", txn.get("category_name") or "Uncategorized"),
        ("Account", txn.get("account_name", "")),
        ("Memo", txn.get("memo") or ""),
        ("Cleared", txn.get("cleared", "")),
        ("Approved", "Yes" if txn.get("approved") else "No"),
        ("Flag", txn.get("flag_color") or "None"),
    ]
    if subtransactions:
        fields.append(("Split", f"{len(subtransactions)} sub-transactions"))
    output.print_detail(fields)

    if subtransactions:
        output.print_line("\n  Sub-transactions:")
        output.print_table(
            [
                Column("Category", "category_name"),
                Column("Payee", "payee_name"),
                Column("Amount", "amount", "right", lambda value, _: output.amount(value)),
                Column("Memo", "memo"),
            ],
            subtransactions,
        )


@app.command("add")
def add_transaction(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="Amount in currency units; negative is an outflow."),
    account: str = typer.Option(..., "--account", "-a", help="Account name or ID."),
    payee: Optional[str] = typer.Option(None, "--payee", "-p", help="Payee name (created if new)."),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category name or ID."),
    memo: Optional[str] = typer.Option(None, "--memo", "-m", help="Transaction memo."),
    on_date: Optional[str] = typer.Option(None, "--date", "-d", help="YYYY-MM-DD, default today."),
    cleared: ClearedStatus = typer.Option(ClearedStatus.CLEARED, "--cleared", help="Cleared status."),
    approved: bool = typer.Option(True, "--approved/--unapproved", help="Approve the transaction."),
    flag: Optional[FlagColor] = typer.Option(None, "--flag", help="Flag colour."),
) -> None:
    """Create a transaction."""

    milliunits = parse_amount(amount)
    session = get_session(ctx)
    transaction_date = on_date or date.today().isoformat()
    payload: Dict[str, Any] = {
        "account_id": session.account_id(account),
        "date": transaction_date,
        "amount": milliunits,
        "payee_name": payee,
        "category_id": session.category_id(category) if category else None,
        "memo": memo,
        "cleared": cleared.value,
        "approved": approved,
        "flag_color": flag.value if flag else None,
    }
    result = session.api.create_transaction(session.budget_id, payload)
    if session.output.json_mode:
        session.output.print_json(result)
        return
    session.output.success(
        f'Created transaction: {session.output.money(milliunits)} at "{payee or "unknown"}" on {transaction_date}'
    )


@app.command("update")
def update_transaction(
    ctx: typer.Context,
    transaction_id: str = typer.Argument(..., metavar="ID", help="Transaction ID."),
    account: Optional[str] = typer.Option(None, "--account", "-a", help="Account name or ID."),
    payee: Optional[str] = typer.Option(None, "--payee", "-p", help="Payee name."),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category name or ID."),
    memo: Optional[str] = typer.Option(None, "--memo", "-m", help="Transaction memo."),
    on_date: Optional[str] = typer.Option(None, "--date", "-d", help="YYYY-MM-DD."),
    amount: Optional[str] = typer.Option(None, "--amount", help="New amount in currency units."),
    cleared: Optional[ClearedStatus] = typer.Option(None, "--cleared", help="Cleared status."),
    flag: Optional[FlagColor] = typer.Option(None, "--flag", help="Flag colour."),
) -> None:
    """Update fields of an existing transaction."""

    milliunits = parse_amount(amount) if amount else None
    session = get_session(ctx)
    existing = session.api.get_transaction(session.budget_id, transaction_id)
    changes: Dict[str, Any] = {
        "account_id": existing["account_id"],
        "date": existing["date"],
        "amount": existing["amount"],
    }
    if account:
        changes["account_id"] = session.account_id(account)
    if payee:
        changes["payee_name"] = payee
    if category:
        changes["category_id"] = session.category_id(category)
    if memo is not None:
        changes["memo"] = memo
    if on_date:
        changes["date"] = on_date
    if milliunits is not None:
        changes["amount"] = milliunits
    if cleared:
        changes["cleared"] = cleared.value
    if flag:
        changes["flag_color"] = flag.value

    updated = session.api.update_transaction(session.budget_id, transaction_id, changes)
    if session.output.json_mode:
        session.output.print_json(updated)
        return
    session.output.success(f"Updated transaction {updated['id']}")


@app.command("delete")
def delete_transaction(
    ctx: typer.Context,
    transaction_id: str = typer.Argument(..., metavar="ID", help="Transaction ID."),
) -> None:
    """Delete a transaction."""

    session = get_session(ctx)
    deleted = session.api.delete_transaction(session.budget_id, transaction_id)
    if session.output.json_mode:
        session.output.print_json(deleted)
        return
    session.output.success(f"Deleted transaction {deleted['id']}")


@app.command("import")
def import_transactions(ctx: typer.Context) -> None:
    """Import transactions from linked accounts."""

    session = get_session(ctx)
    result = session.api.import_transactions(session.budget_id)
    if session.output.json_mode:
        session.output.print_json(result)
        return
    session.output.success(f"Imported {len(result.get('transaction_ids', []))} transaction(s)")
