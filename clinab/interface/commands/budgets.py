"""Mini README: ``clinab budgets`` - list budgets and show budget settings."""

from __future__ import annotations

import typer

from ..output import Column
from ..session import get_session

app = typer.Typer(
    help="List and inspect budgets.",
    epilog=(
        "Examples: clinab budgets list | clinab budgets list --json | "
        'clinab budgets settings -b "DevPlan"'
    ),
)


@app.command("list")
def list_budgets(ctx: typer.Context) -> None:
    """List all budgets accessible with your token."""

    session = get_session(ctx)
    budgets = session.api.list_budgets()
    if session.output.json_mode:
        session.output.print_json(budgets)
        return
    session.output.print_table(
        [
            Column("Name", "name"),
            Column("ID", "id"),
            Column("Last Modified", "last_modified_on"),
            Column("First Month", "first_month"),
            Column("Last Month", "last_month"),
        ],
        [
            {
                "name": budget["name"],
                "id": budget["id"],
                "last_modified_on": (budget.get("last_modified_on") or "").split("T")[0],
                "first_month": budget.get("first_month"),
                "last_month": budget.get("last_month"),
            }
            for budget in budgets
        ],
    )


@app.command("settings")
def show_settings(ctx: typer.Context) -> None:
    """Show date and currency settings for the selected budget."""

    session = get_session(ctx)
    settings = session.api.get_budget_settings(session.budget_id)
    if session.output.json_mode:
        session.output.print_json(settings)
        return
    currency = settings.get("currency_format") or {}
    session.output.print_detail(
        [
            ("Date Format", (settings.get("date_format") or {}).get("format", "")),
            ("Currency", currency.get("iso_code", "")),
            ("Currency Symbol", currency.get("currency_symbol", "")),
            ("Example", currency.get("example_format", "")),
        ]
    )
