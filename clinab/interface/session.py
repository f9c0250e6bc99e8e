"""Mini README: Per-invocation state shared by every command.

Structure:
    * CommandSession - bundles the API bindings, resolver, renderer and the
      lazily resolved budget identifier and currency formatter.
    * build_session - wires a session from settings (patched in tests).
    * CliState / get_session - global option values stored on the Typer
      context and the accessor commands use to obtain the session.

The budget named by ``--budget`` is resolved at most once per invocation and
only when a command needs it. The currency formatter is likewise built once,
from the budget's own settings, the first time an amount is rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Optional

import typer

from ..api import YnabApi, YnabClient
from ..configuration import DEFAULT_BASE_URL, DEFAULT_BUDGET
from ..errors import ConfigurationError
from ..logging_utils import get_logger
from ..money import CurrencyFormatter
from ..resolution import ApiCandidateSource, NameResolver
from .output import OutputRenderer

LOGGER = get_logger(__name__)

MISSING_TOKEN_MESSAGE = (
    "No YNAB API token found. Set YNAB_TOKEN env var or use --token flag.\n"
    "Get your token at: https://app.ynab.com/settings/developer"
)


class CommandSession:
    """State for the single command executed by this process."""

    def __init__(
        self,
        api: YnabApi,
        *,
        budget: str = DEFAULT_BUDGET,
        json_mode: bool = False,
        resolver: Optional[NameResolver] = None,
    ) -> None:
        self.api = api
        self.budget_token = budget
        self.resolver = resolver or NameResolver(ApiCandidateSource(api))
        self.output = OutputRenderer(json_mode=json_mode, formatter_provider=lambda: self.formatter)

    @cached_property
    def budget_id(self) -> str:
        budget_id = self.resolver.resolve_budget(self.budget_token)
        LOGGER.debug("Budget %r resolved to %s", self.budget_token, budget_id)
        return budget_id

    @cached_property
    def formatter(self) -> CurrencyFormatter:
        return CurrencyFormatter.from_budget_settings(self.api.get_budget_settings(self.budget_id))

    def account_id(self, token: str) -> str:
        return self.resolver.resolve_account(self.budget_id, token)

    def category_id(self, token: str) -> str:
        return self.resolver.resolve_category(self.budget_id, token)

    def category_group_id(self, token: str) -> str:
        return self.resolver.resolve_category_group(self.budget_id, token)

    def payee_id(self, token: str) -> str:
        return self.resolver.resolve_payee(self.budget_id, token)


def build_session(
    *,
    token: Optional[str],
    base_url: str = DEFAULT_BASE_URL,
    budget: str = DEFAULT_BUDGET,
    json_mode: bool = False,
    timeout: float = 30.0,
) -> CommandSession:
    """Create the session used by the CLI, validating the token first."""

    if not token:
        raise ConfigurationError(MISSING_TOKEN_MESSAGE)
    client = YnabClient(token, base_url=base_url, timeout=timeout)
    return CommandSession(YnabApi(client), budget=budget, json_mode=json_mode)


@dataclass(slots=True)
class CliState:
    """Global option values captured by the root callback."""

    token: Optional[str]
    base_url: str = DEFAULT_BASE_URL
    budget: str = DEFAULT_BUDGET
    json_mode: bool = False
    timeout: float = 30.0
    session: Optional[CommandSession] = None

    def renderer(self) -> OutputRenderer:
        """Renderer for error reporting, usable before a session exists."""

        if self.session is not None:
            return self.session.output
        return OutputRenderer(json_mode=self.json_mode)


def get_session(ctx: typer.Context) -> CommandSession:
    """Return the session for this invocation, creating it on first use.

    Creation is deferred to the first command that needs the API so that
    ``--help`` works without a token.
    """

    state: CliState = ctx.find_root().obj
    if state.session is None:
        state.session = build_session(
            token=state.token,
            base_url=state.base_url,
            budget=state.budget,
            json_mode=state.json_mode,
            timeout=state.timeout,
        )
    return state.session
