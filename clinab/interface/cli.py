"""Mini README: Entry point CLI for the clinab budgeting client.

This module builds the Typer application, captures the global options
(token, budget, JSON output, base URL, verbosity) and registers every command
group. Expected failures raised by commands (API errors, unknown names,
invalid amounts, missing token) are rendered as a single line and exit with
status 1; with ``--json`` the line is a JSON object on stderr.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import click
import typer
from typer.core import TyperGroup

from .. import __version__
from ..api import ApiError
from ..configuration import get_settings
from ..errors import ClinabError
from ..logging_utils import configure_root_logger, get_logger
from .commands import accounts, budgets, categories, months, payees, scheduled, transactions, user
from .session import CliState

LOGGER = get_logger(__name__)


class ClinabGroup(TyperGroup):
    """Root group reporting ``ClinabError`` failures instead of tracebacks."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except ApiError as error:
            message = f"API Error ({error.status_code}): {error.detail}"
            LOGGER.debug("Command failed: %s", error)
        except ClinabError as error:
            message = str(error)
            LOGGER.debug("Command failed: %s", error)
        state = ctx.obj if isinstance(ctx.obj, CliState) else CliState(token=None)
        state.renderer().error(message)
        raise typer.Exit(code=1)


app = typer.Typer(
    cls=ClinabGroup,
    help=(
        "clinab - a command-line client for You Need A Budget (YNAB).\n\n"
        "Set YNAB_TOKEN or pass --token. Use --json for machine-readable output "
        "and -b/--budget to pick a budget by name or ID (default: last-used)."
    ),
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    token: Optional[str] = typer.Option(None, "--token", "-t", help="API token (default: $YNAB_TOKEN)."),
    budget: Optional[str] = typer.Option(None, "--budget", "-b", help="Budget name or ID (default: last-used)."),
    json_output: bool = typer.Option(False, "--json", help="Output JSON for scripts and agents."),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the API base URL."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and resolution steps."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """Capture global options; the API session is created on first use."""

    # Errors raised while loading settings are rendered with this partial state.
    ctx.obj = CliState(token=token, json_mode=json_output)
    settings = get_settings()
    configure_root_logger(logging.DEBUG if verbose else settings.log_level)
    ctx.obj = CliState(
        token=token or settings.token,
        base_url=base_url or settings.base_url,
        budget=budget or settings.budget,
        json_mode=json_output,
        timeout=settings.timeout_seconds,
    )


app.add_typer(budgets.app, name="budgets")
app.add_typer(accounts.app, name="accounts")
app.add_typer(categories.app, name="categories")
app.add_typer(categories.app, name="cat", hidden=True)
app.add_typer(transactions.app, name="transactions")
app.add_typer(transactions.app, name="txn", hidden=True)
app.add_typer(payees.app, name="payees")
app.add_typer(months.app, name="months")
app.add_typer(scheduled.app, name="scheduled")
app.add_typer(scheduled.app, name="sched", hidden=True)
app.command("user")(user.show_user)


if __name__ == "__main__":
    app()
