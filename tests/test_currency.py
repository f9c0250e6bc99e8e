"""Mini README: Tests for milliunit conversion and currency formatting.

Structure:
    * conversion tests - to/from major units, including half-up rounding.
    * formatting tests - USD/EUR rendering, grouping, sign and symbol rules.
    * CurrencyFormatter tests - held format versus explicit override.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from clinab.errors import InvalidAmountError
from clinab.money import (
    USD_FORMAT,
    CurrencyFormat,
    CurrencyFormatter,
    format_currency,
    from_major_units,
    parse_amount,
    to_major_units,
)

EUR_FORMAT = CurrencyFormat(
    iso_code="EUR",
    decimal_digits=2,
    decimal_separator=",",
    group_separator=".",
    currency_symbol="€",
    symbol_first=False,
    display_symbol=True,
    example_format="123.456,78",
)


def test_to_major_units_divides_by_one_thousand() -> None:
    assert to_major_units(1000) == 1
    assert to_major_units(1234560) == pytest.approx(1234.56)
    assert to_major_units(-85500) == pytest.approx(-85.5)
    assert to_major_units(10) == pytest.approx(0.01)
    assert to_major_units(0) == 0


def test_from_major_units_rounds_half_up_on_third_decimal() -> None:
    assert from_major_units(1.2345) == 1235
    assert from_major_units(1.2344) == 1234
    assert from_major_units(-1.2345) == -1235
    assert from_major_units(1234.56) == 1234560
    assert from_major_units(Decimal("0.0005")) == 1
    assert from_major_units("-85.5") == -85500


@pytest.mark.parametrize("amount", [0, 1, -1, 100.5, -85.5, 1234.56, -0.01])
def test_major_unit_round_trip_is_stable(amount: float) -> None:
    """Converting to milliunits and back preserves two decimal places."""

    assert to_major_units(from_major_units(amount)) == pytest.approx(amount, abs=0.005)


def test_parse_amount_validates_user_input() -> None:
    assert parse_amount(" -85.50 ") == -85500
    assert parse_amount("1000") == 1000000
    for bad in ("abc", "", "1,000", "nan", "inf"):
        with pytest.raises(InvalidAmountError):
            parse_amount(bad)


def test_format_usd_amounts() -> None:
    assert format_currency(1000, USD_FORMAT) == "$1.00"
    assert format_currency(-1000, USD_FORMAT) == "-$1.00"
    assert format_currency(0, USD_FORMAT) == "$0.00"
    assert format_currency(500, USD_FORMAT) == "$0.50"
    assert format_currency(-85500, USD_FORMAT) == "-$85.50"


def test_format_groups_integer_digits() -> None:
    assert format_currency(1234560, USD_FORMAT) == "$1,234.56"
    assert format_currency(123456789000, USD_FORMAT) == "$123,456,789.00"
    assert format_currency(1000000000, USD_FORMAT) == "$1,000,000.00"
    assert format_currency(999000, USD_FORMAT) == "$999.00"


def test_format_eur_places_symbol_after_amount() -> None:
    assert format_currency(1234560, EUR_FORMAT) == "1.234,56€"
    assert format_currency(-1234560, EUR_FORMAT) == "-1.234,56€"


def test_format_without_symbol() -> None:
    no_symbol = replace(USD_FORMAT, display_symbol=False)
    assert format_currency(1000, no_symbol) == "1.00"


def test_format_zero_decimal_digits_has_no_separator() -> None:
    yen = CurrencyFormat(iso_code="JPY", decimal_digits=0, currency_symbol="¥")
    assert format_currency(1234000, yen) == "¥1,234"
    assert format_currency(1500, yen) == "¥2"


def test_format_tiny_negative_keeps_sign() -> None:
    assert format_currency(-1, USD_FORMAT) == "-$0.00"


def test_currency_format_from_api_payload() -> None:
    payload = {
        "iso_code": "EUR",
        "example_format": "123.456,78",
        "decimal_digits": 2,
        "decimal_separator": ",",
        "symbol_first": False,
        "group_separator": ".",
        "currency_symbol": "€",
        "display_symbol": True,
    }
    assert CurrencyFormat.from_api(payload) == EUR_FORMAT


def test_formatter_uses_held_format_unless_overridden() -> None:
    """The formatter replaces process-wide state with an explicit object."""

    formatter = CurrencyFormatter(EUR_FORMAT)
    assert formatter.format(1234560) == "1.234,56€"
    assert formatter.format(1234560, USD_FORMAT) == "$1,234.56"
    assert CurrencyFormatter().format(1000) == "$1.00"


def test_formatter_from_budget_settings() -> None:
    settings = {
        "date_format": {"format": "DD.MM.YYYY"},
        "currency_format": {
            "iso_code": "EUR",
            "currency_symbol": "€",
            "symbol_first": False,
            "decimal_separator": ",",
            "group_separator": ".",
        },
    }
    formatter = CurrencyFormatter.from_budget_settings(settings)
    assert formatter.currency_format.iso_code == "EUR"
    assert formatter.format(-2500) == "-2,50€"
