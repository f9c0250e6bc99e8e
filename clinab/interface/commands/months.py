"""Mini README: ``clinab months`` - budget month summaries."""

from __future__ import annotations

from typing import Any, Mapping, Optional

import typer

from ..output import Column, visible
from ..session import get_session

HIDDEN_MONTH_CATEGORIES = frozenset({"Inflow: Ready to Assign", "Uncategorized"})

app = typer.Typer(
    help="View budget month summaries and details.",
    epilog="Examples: clinab months list | clinab months show current | clinab months show 2026-02-01",
)


def _age(value: Any, _row: Optional[Mapping[str, Any]] = None) -> str:
    return f"{value} days" if value and value > 0 else "—"


@app.command("list")
def list_months(ctx: typer.Context) -> None:
    """List budget months with summary figures."""

    session = get_session(ctx)
    output = session.output
    months = visible(session.api.list_months(session.budget_id)["months"])
    if output.json_mode:
        output.print_json(months)
        return
    output.print_table(
        [
            Column("Month", "month"),
            Column("Income", "income", "right", lambda value, _: output.amount(value)),
            Column("Budgeted", "budgeted", "right", lambda value, _: output.amount(value)),
            Column("Activity", "activity", "right", lambda value, _: output.amount(value)),
            Column("To Be Budgeted", "to_be_budgeted", "right", lambda value, _: output.amount(value)),
            Column("Age of Money", "age_of_money", "right", _age),
        ],
        months,
    )


@app.command("show")
def show_month(
    ctx: typer.Context,
    month: str = typer.Argument(..., help="Month as YYYY-MM-DD or 'current'."),
) -> None:
    """Show one month with its category breakdown."""

    session = get_session(ctx)
    output = session.output
    detail = session.api.get_month(session.budget_id, month)
    if output.json_mode:
        output.print_json(detail)
        return

    output.print_detail(
        [
            ("Month", detail["month"]),
            ("Income", output.money(detail["income"])),
            ("Budgeted", output.money(detail["budgeted"])),
            ("Activity", output.money(detail["activity"])),
            ("To Be Budgeted", output.money(detail["to_be_budgeted"])),
            ("Age of Money", _age(detail.get("age_of_money"))),
            ("Note", detail.get("note") or ""),
        ]
    )

    categories = [
        category
        for category in visible(detail.get("categories") or [])
        if not category.get("hidden") and category["name"] not in HIDDEN_MONTH_CATEGORIES
    ]
    if detail.get("categories"):
        output.print_line("\n  Category Breakdown:")
        output.print_table(
            [
                Column("Category", "name"),
                Column("Budgeted", "budgeted", "right", lambda value, _: output.amount(value)),
                Column("Activity", "activity", "right", lambda value, _: output.amount(value)),
                Column("Balance", "balance", "right", lambda value, _: output.amount(value)),
            ],
            categories,
        )
