"""Mini README: Money utilities for clinab.

The budgeting service transfers every monetary value as integer milliunits.
This package converts between that wire form and the decimal amounts people
type, and renders amounts using the currency settings of the active budget.
"""

from .currency import (
    MILLIUNITS_PER_UNIT,
    USD_FORMAT,
    CurrencyFormat,
    CurrencyFormatter,
    format_currency,
    from_major_units,
    parse_amount,
    to_major_units,
)

__all__ = [
    "MILLIUNITS_PER_UNIT",
    "USD_FORMAT",
    "CurrencyFormat",
    "CurrencyFormatter",
    "format_currency",
    "from_major_units",
    "parse_amount",
    "to_major_units",
]
