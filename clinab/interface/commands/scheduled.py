"""Mini README: ``clinab scheduled`` (alias ``sched``) - recurring transactions."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

import typer
from rich.text import Text

from ...api import FlagColor, Frequency
from ...money import parse_amount
from ..output import Column, visible
from ..session import get_session

app = typer.Typer(
    help="Manage scheduled/recurring transactions.",
    epilog=(
        'Examples: clinab sched add -a "Checking" -p "Landlord" -f monthly -- -1200 | '
        "clinab scheduled delete <id>. Frequencies: "
        + ", ".join(frequency.value for frequency in Frequency)
    ),
)


@app.command("list")
def list_scheduled(ctx: typer.Context) -> None:
    """List scheduled transactions."""

    session = get_session(ctx)
    output = session.output
    scheduled = visible(
        session.api.list_scheduled_transactions(session.budget_id)["scheduled_transactions"]
    )
    if output.json_mode:
        output.print_json(scheduled)
        return
    output.print_table(
        [
            Column("Next Date", "date_next"),
            Column("Frequency", "frequency"),
            Column("Payee", "payee_name"),
            Column("Category", "category_name"),
            Column("Amount", "amount", "right", lambda value, _: output.amount(value)),
            Column("Account", "account_name"),
            Column("Memo", "memo", formatter=lambda value, _: Text(value or "", style="dim")),
        ],
        scheduled,
    )


@app.command("show")
def show_scheduled(
    ctx: typer.Context,
    scheduled_id: str = typer.Argument(..., metavar="ID", help="Scheduled transaction ID."),
) -> None:
    """Show details for a scheduled transaction."""

    session = get_session(ctx)
    output = session.output
    txn = session.api.get_scheduled_transaction(session.budget_id, scheduled_id)
    if output.json_mode:
        output.print_json(txn)
        return

    output.print_detail(
        [
            ("ID", txn["id"]),
            ("First Date", txn.get("date_first", "")),
            ("Next Date", txn.get("date_next", "")),
            ("Frequency", txn.get("frequency", "")),
            ("Amount", output.money(txn["amount"])),
            ("Payee", txn.get("payee_name") or ""),
            ("Category", txn.get("category_name") or ""),
            ("Account", txn.get("account_name", "")),
            ("Memo", txn.get("memo") or ""),
            ("Flag", txn.get("flag_color") or "None"),
        ]
    )
    subtransactions = txn.get("subtransactions") or []
    if subtransactions:
        output.print_line("\n  Sub-transactions:")
        output.print_table(
            [
                Column("Category", "category_id"),
                Column("Amount", "amount", "right", lambda value, _: output.amount(value)),
                Column("Memo", "memo"),
            ],
            subtransactions,
        )


@app.command("add")
def add_scheduled(
    ctx: typer.Context,
    amount: str = typer.Argument(..., help="Amount in currency units; negative is an outflow."),
    account: str = typer.Option(..., "--account", "-a", help="Account name or ID."),
    frequency: Frequency = typer.Option(..., "--frequency", "-f", help="Recurrence frequency."),
    payee: Optional[str] = typer.Option(None, "--payee", "-p", help="Payee name."),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category name or ID."),
    memo: Optional[str] = typer.Option(None, "--memo", "-m", help="Memo."),
    on_date: Optional[str] = typer.Option(None, "--date", "-d", help="First date, default today."),
    flag: Optional[FlagColor] = typer.Option(None, "--flag", help="Flag colour."),
) -> None:
    """Create a scheduled transaction."""

    milliunits = parse_amount(amount)
    session = get_session(ctx)
    payload: Dict[str, Any] = {
        "account_id": session.account_id(account),
        "date": on_date or date.today().isoformat(),
        "amount": milliunits,
        "frequency": frequency.value,
        "payee_name": payee,
        "category_id": session.category_id(category) if category else None,
        "memo": memo,
        "flag_color": flag.value if flag else None,
    }
    created = session.api.create_scheduled_transaction(session.budget_id, payload)
    if session.output.json_mode:
        session.output.print_json(created)
        return
    session.output.success(
        f"Created scheduled transaction: {session.output.money(milliunits)} ({frequency.value})"
    )


@app.command("delete")
def delete_scheduled(
    ctx: typer.Context,
    scheduled_id: str = typer.Argument(..., metavar="ID", help="Scheduled transaction ID."),
) -> None:
    """Delete a scheduled transaction."""

    session = get_session(ctx)
    deleted = session.api.delete_scheduled_transaction(session.budget_id, scheduled_id)
    if session.output.json_mode:
        session.output.print_json(deleted)
        return
    session.output.success(f"Deleted scheduled transaction {deleted['id']}")
