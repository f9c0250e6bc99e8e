"""Mini README: ``clinab categories`` - categories and category groups.

Categories are listed grouped; internal and hidden groups are skipped unless
``--include-hidden`` is given. Categories and groups may be referenced by
name anywhere an identifier is accepted.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import typer

from ...money import parse_amount
from ..output import Column
from ..session import get_session

INTERNAL_GROUP = "Internal Master Category"
HIDDEN_GROUP = "Hidden Categories"

app = typer.Typer(
    help="Manage budget categories and category groups.",
    epilog=(
        'Examples: clinab categories budget "Groceries" 500 | '
        'clinab categories create "Pet Food" --group "Frequent" | '
        'clinab categories create-group "Pets"'
    ),
)


@app.command("list")
def list_categories(
    ctx: typer.Context,
    include_hidden: bool = typer.Option(False, "--include-hidden", help="Include hidden categories."),
) -> None:
    """List category groups and their categories."""

    session = get_session(ctx)
    output = session.output
    groups = session.api.list_categories(session.budget_id)["category_groups"]
    if output.json_mode:
        output.print_json(groups)
        return

    rows: List[Dict[str, Any]] = []
    for group in groups:
        if group.get("deleted") or group["name"] == INTERNAL_GROUP:
            continue
        if not include_hidden and (group.get("hidden") or group["name"] == HIDDEN_GROUP):
            continue
        for category in group.get("categories", []):
            if category.get("deleted") or (category.get("hidden") and not include_hidden):
                continue
            rows.append(
                {
                    "group": group["name"],
                    "name": category["name"],
                    "budgeted": category["budgeted"],
                    "activity": category["activity"],
                    "balance": category["balance"],
                    "goal": category.get("goal_type") or "—",
                }
            )

    output.print_table(
        [
            Column("Group", "group"),
            Column("Category", "name"),
            Column("Budgeted", "budgeted", "right", lambda value, _: output.amount(value)),
            Column("Activity", "activity", "right", lambda value, _: output.amount(value)),
            Column("Balance", "balance", "right", lambda value, _: output.amount(value)),
            Column("Goal", "goal"),
        ],
        rows,
    )


@app.command("show")
def show_category(
    ctx: typer.Context,
    category: str = typer.Argument(..., help="Category name or ID."),
) -> None:
    """Show details for one category."""

    session = get_session(ctx)
    output = session.output
    details = session.api.get_category(session.budget_id, session.category_id(category))
    if output.json_mode:
        output.print_json(details)
        return
    goal_target = details.get("goal_target")
    output.print_detail(
        [
            ("Name", details["name"]),
            ("ID", details["id"]),
            ("Group", details.get("category_group_name", "")),
            ("Budgeted", output.money(details["budgeted"])),
            ("Activity", output.money(details["activity"])),
            ("Balance", output.money(details["balance"])),
            ("Goal Type", details.get("goal_type") or "None"),
            ("Goal Target", output.money(goal_target) if goal_target else "—"),
            ("Hidden", "Yes" if details.get("hidden") else "No"),
            ("Note", details.get("note") or ""),
        ]
    )


@app.command("budget")
def assign_budget(
    ctx: typer.Context,
    category: str = typer.Argument(..., help="Category name or ID."),
    amount: str = typer.Argument(..., help="Amount to assign in currency units."),
    month: str = typer.Option("current", "--month", "-m", help="Month as YYYY-MM-DD or 'current'."),
) -> None:
    """Set the assigned amount for a category in a month."""

    milliunits = parse_amount(amount)
    session = get_session(ctx)
    updated = session.api.update_month_category(
        session.budget_id, month, session.category_id(category), milliunits
    )
    if session.output.json_mode:
        session.output.print_json(updated)
        return
    session.output.success(
        f'Set "{updated["name"]}" budget to {session.output.money(updated["budgeted"])} for {month}'
    )


@app.command("create")
def create_category(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="New category name."),
    group: str = typer.Option(..., "--group", "-g", help="Category group name or ID."),
    note: Optional[str] = typer.Option(None, "--note", "-n", help="Category note."),
) -> None:
    """Create a category inside a group."""

    session = get_session(ctx)
    payload: Dict[str, Any] = {"name": name, "category_group_id": session.category_group_id(group)}
    if note is not None:
        payload["note"] = note
    created = session.api.create_category(session.budget_id, payload)
    if session.output.json_mode:
        session.output.print_json(created)
        return
    session.output.success(
        f'Created category "{created["name"]}" in group "{created.get("category_group_name", group)}"'
    )


@app.command("update")
def update_category(
    ctx: typer.Context,
    category: str = typer.Argument(..., help="Category name or ID."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New name."),
    note: Optional[str] = typer.Option(None, "--note", help="New note."),
) -> None:
    """Rename a category or change its note."""

    session = get_session(ctx)
    changes: Dict[str, Any] = {}
    if name:
        changes["name"] = name
    if note is not None:
        changes["note"] = note
    updated = session.api.update_category(session.budget_id, session.category_id(category), changes)
    if session.output.json_mode:
        session.output.print_json(updated)
        return
    session.output.success(f'Updated category "{updated["name"]}"')


@app.command("create-group")
def create_group(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="New group name."),
) -> None:
    """Create a category group."""

    session = get_session(ctx)
    created = session.api.create_category_group(session.budget_id, name)
    if session.output.json_mode:
        session.output.print_json(created)
        return
    session.output.success(f'Created category group "{created["name"]}"')


@app.command("update-group")
def update_group(
    ctx: typer.Context,
    group: str = typer.Argument(..., help="Category group name or ID."),
    name: str = typer.Option(..., "--name", "-n", help="New group name."),
) -> None:
    """Rename a category group."""

    session = get_session(ctx)
    updated = session.api.update_category_group(
        session.budget_id, session.category_group_id(group), name
    )
    if session.output.json_mode:
        session.output.print_json(updated)
        return
    session.output.success(f'Renamed category group to "{updated["name"]}"')
