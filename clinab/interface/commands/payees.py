"""Mini README: ``clinab payees`` - list, inspect and rename payees."""

from __future__ import annotations

import typer

from ..output import Column, visible
from ..session import get_session

app = typer.Typer(
    help="Manage payees.",
    epilog='Examples: clinab payees show "Walmart" | clinab payees rename "Wal-Mart" --name "Walmart"',
)


@app.command("list")
def list_payees(ctx: typer.Context) -> None:
    """List the payees of the selected budget."""

    session = get_session(ctx)
    payees = visible(session.api.list_payees(session.budget_id)["payees"])
    if session.output.json_mode:
        session.output.print_json(payees)
        return
    session.output.print_table(
        [
            Column("Name", "name"),
            Column("ID", "id"),
            Column("Transfer", "transfer_account_id", formatter=lambda value, _: "Yes" if value else "—"),
        ],
        payees,
    )


@app.command("show")
def show_payee(
    ctx: typer.Context,
    payee: str = typer.Argument(..., help="Payee name or ID."),
) -> None:
    """Show details for one payee."""

    session = get_session(ctx)
    details = session.api.get_payee(session.budget_id, session.payee_id(payee))
    if session.output.json_mode:
        session.output.print_json(details)
        return
    session.output.print_detail(
        [
            ("Name", details["name"]),
            ("ID", details["id"]),
            ("Transfer Account", details.get("transfer_account_id") or "None"),
        ]
    )


@app.command("rename")
def rename_payee(
    ctx: typer.Context,
    payee: str = typer.Argument(..., help="Payee name or ID."),
    name: str = typer.Option(..., "--name", "-n", help="New payee name."),
) -> None:
    """Rename a payee."""

    session = get_session(ctx)
    updated = session.api.update_payee(session.budget_id, session.payee_id(payee), name)
    if session.output.json_mode:
        session.output.print_json(updated)
        return
    session.output.success(f'Renamed payee to "{updated["name"]}"')


@app.command("locations")
def list_locations(ctx: typer.Context) -> None:
    """List payee locations."""

    session = get_session(ctx)
    locations = session.api.list_payee_locations(session.budget_id)
    if session.output.json_mode:
        session.output.print_json(locations)
        return
    if not locations:
        session.output.print_line("  No payee locations found.")
        return
    session.output.print_table(
        [
            Column("Payee ID", "payee_id"),
            Column("Latitude", "latitude"),
            Column("Longitude", "longitude"),
        ],
        locations,
    )
