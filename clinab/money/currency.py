"""Mini README: Milliunit conversion and currency rendering.

Structure:
    * CurrencyFormat - immutable description of how a budget displays money.
    * to_major_units / from_major_units - conversions between the integer
      milliunit wire form (1000 = one unit) and decimal amounts.
    * parse_amount - validates user-typed amounts before conversion.
    * format_currency - renders milliunits with symbol, grouping and decimals.
    * CurrencyFormatter - holds the active format for one command invocation.

All arithmetic on money stays in integer milliunits. Rendering goes through
``Decimal`` so the displayed digits are exact for every integer input.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Union

from ..errors import InvalidAmountError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MILLIUNITS_PER_UNIT = 1000

Amount = Union[int, float, str, Decimal]


@dataclass(frozen=True, slots=True)
class CurrencyFormat:
    """Currency display settings as reported by a budget."""

    iso_code: str = "USD"
    decimal_digits: int = 2
    decimal_separator: str = "."
    group_separator: str = ","
    currency_symbol: str = "$"
    symbol_first: bool = True
    display_symbol: bool = True
    example_format: str = "123,456.78"

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "CurrencyFormat":
        """Build a format from the ``currency_format`` object of budget settings."""

        defaults = cls()
        return cls(
            iso_code=payload.get("iso_code", defaults.iso_code),
            decimal_digits=int(payload.get("decimal_digits", defaults.decimal_digits)),
            decimal_separator=payload.get("decimal_separator", defaults.decimal_separator),
            group_separator=payload.get("group_separator", defaults.group_separator),
            currency_symbol=payload.get("currency_symbol", defaults.currency_symbol),
            symbol_first=bool(payload.get("symbol_first", defaults.symbol_first)),
            display_symbol=bool(payload.get("display_symbol", defaults.display_symbol)),
            example_format=payload.get("example_format", defaults.example_format),
        )


USD_FORMAT = CurrencyFormat()


def to_major_units(milliunits: int) -> float:
    """Return the lossy decimal view of a milliunit amount (1500 -> 1.5)."""

    return milliunits / MILLIUNITS_PER_UNIT


def from_major_units(amount: Amount) -> int:
    """Convert a decimal amount to milliunits, rounding ties away from zero.

    ``Decimal(str(amount))`` keeps the digits the user typed, so
    ``from_major_units(1.2345)`` is 1235 rather than falling foul of the
    binary value of the float.
    """

    scaled = Decimal(str(amount)) * MILLIUNITS_PER_UNIT
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def parse_amount(text: str) -> int:
    """Validate a user-typed amount string and convert it to milliunits."""

    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError) as error:
        raise InvalidAmountError(str(text)) from error
    if not value.is_finite():
        raise InvalidAmountError(text)
    return from_major_units(value)


def format_currency(milliunits: int, currency_format: CurrencyFormat = USD_FORMAT) -> str:
    """Render milliunits for display, e.g. ``-1234560`` -> ``-$1,234.56``."""

    negative = milliunits < 0
    magnitude = Decimal(abs(milliunits)) / MILLIUNITS_PER_UNIT
    digits = max(currency_format.decimal_digits, 0)
    quantized = magnitude.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)

    integer_part, _, fraction_part = format(quantized, "f").partition(".")
    grouped = format(int(integer_part), ",").replace(",", currency_format.group_separator)
    formatted = (
        f"{grouped}{currency_format.decimal_separator}{fraction_part}"
        if fraction_part
        else grouped
    )

    if currency_format.display_symbol:
        if currency_format.symbol_first:
            formatted = f"{currency_format.currency_symbol}{formatted}"
        else:
            formatted = f"{formatted}{currency_format.currency_symbol}"

    return f"-{formatted}" if negative else formatted


class CurrencyFormatter:
    """Format amounts with the currency settings of the active budget.

    One instance is created per command invocation, once the budget is
    known, and handed to every call site that renders money.
    """

    def __init__(self, currency_format: CurrencyFormat = USD_FORMAT) -> None:
        self.currency_format = currency_format
        LOGGER.debug(
            "Currency formatter initialised for %s (%s digits)",
            currency_format.iso_code,
            currency_format.decimal_digits,
        )

    @classmethod
    def from_budget_settings(cls, settings: Mapping[str, Any]) -> "CurrencyFormatter":
        """Create a formatter from a budget settings payload."""

        payload = settings.get("currency_format") or {}
        return cls(CurrencyFormat.from_api(payload))

    def format(self, milliunits: int, currency_format: Optional[CurrencyFormat] = None) -> str:
        """Format using the held settings unless an explicit override is given."""

        return format_currency(milliunits, currency_format or self.currency_format)
