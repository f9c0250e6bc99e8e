"""Mini README: Command groups registered on the root CLI.

Each module exposes a Typer ``app`` (or a single command function for
``user``) and reaches the API through ``get_session``.
"""

from . import accounts, budgets, categories, months, payees, scheduled, transactions, user

__all__ = [
    "accounts",
    "budgets",
    "categories",
    "months",
    "payees",
    "scheduled",
    "transactions",
    "user",
]
