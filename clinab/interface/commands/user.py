"""Mini README: ``clinab user`` - show the authenticated user."""

from __future__ import annotations

import typer

from ..session import get_session


def show_user(ctx: typer.Context) -> None:
    """Show authenticated user information."""

    session = get_session(ctx)
    user = session.api.get_user()
    if session.output.json_mode:
        session.output.print_json(user)
        return
    session.output.print_detail([("User ID", user["id"])])
