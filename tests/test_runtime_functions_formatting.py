"""Tests for format_amount().

Validates symbol placement and separators per currency, two-decimal
half-away-from-zero rounding, and the placeholder for degenerate input.

European output uses a no-break space before the symbol; comparisons
that do not care about spacing squash whitespace first.
"""

from decimal import Decimal

import pytest

pytest.importorskip("babel")

from amountcodec import format_amount  # noqa: E402
from amountcodec.constants import NON_FINITE_PLACEHOLDER  # noqa: E402


def _squash(text: str) -> str:
    return "".join(text.split())


class TestFormatAmountPerCurrency:
    """Symbol and separators follow the currency's locale."""

    def test_usd(self) -> None:
        """US grouping, dollar prefix."""
        assert format_amount(1234.56, "USD") == "$1,234.56"
        assert format_amount(0, "USD") == "$0.00"
        assert format_amount(1000000, "USD") == "$1,000,000.00"

    def test_usd_fifty(self) -> None:
        """Integers get two decimals."""
        result = format_amount(50, "USD")
        assert result == "$50.00"

    def test_eur(self) -> None:
        """European grouping, comma decimal, euro suffix."""
        assert _squash(format_amount(1234.56, "EUR")) == "1.234,56€"
        assert _squash(format_amount(0, "EUR")) == "0,00€"
        assert _squash(format_amount(1000000, "EUR")) == "1.000.000,00€"

    def test_eur_fifty_uses_comma_decimal(self) -> None:
        """Decimal separator is a comma."""
        result = format_amount(50, "EUR")
        assert "50,00" in result
        assert "€" in result

    def test_eur_symbol_separated_by_no_break_space(self) -> None:
        """CLDR de-DE puts U+00A0 between amount and symbol."""
        assert format_amount(1234.56, "EUR") == "1.234,56\xa0€"

    def test_gbp(self) -> None:
        """Pound prefix, US-style separators."""
        assert format_amount(1234.56, "GBP") == "£1,234.56"
        assert format_amount(0, "GBP") == "£0.00"
        assert format_amount(1000000, "GBP") == "£1,000,000.00"

    @pytest.mark.parametrize("code", ["CAD", "AUD"])
    def test_local_dollars(self, code: str) -> None:
        """Canadian and Australian locales show their own dollar as "$"."""
        assert format_amount(1234.56, code) == "$1,234.56"

    def test_default_currency_is_usd(self) -> None:
        """Omitting the currency formats dollars."""
        assert format_amount(1234.56) == "$1,234.56"
        assert format_amount(0) == "$0.00"

    def test_currency_code_is_case_insensitive(self) -> None:
        """Lower-case codes resolve like upper-case ones."""
        assert format_amount(1234.56, "eur") == format_amount(1234.56, "EUR")
        assert format_amount(1234.56, " gbp ") == "£1,234.56"

    def test_blank_code_formats_as_default(self) -> None:
        """A blank preference is the default currency."""
        assert format_amount(1234.56, "") == "$1,234.56"

    def test_unknown_code_uses_us_conventions(self) -> None:
        """Unknown codes keep en-US separators and show the code."""
        result = format_amount(1234.56, "XYZ")
        assert "XYZ" in result
        assert "1,234.56" in result

    def test_non_table_currency_still_two_decimals(self) -> None:
        """Currencies with other minor units are forced to two decimals."""
        assert "1,234.56" in format_amount(1234.56, "JPY")
        assert "1,234.00" in format_amount(1234, "JPY")


class TestFormatAmountRounding:
    """Exactly two decimals, half away from zero."""

    @pytest.mark.parametrize(("amount", "expected"), [
        (1234.5, "$1,234.50"),
        (1234.567, "$1,234.57"),
        (1234.564, "$1,234.56"),
        (0.01, "$0.01"),
        (0.001, "$0.00"),
        (0.005, "$0.01"),
        (1.005, "$1.01"),
        (2.675, "$2.68"),
        (0.125, "$0.13"),
    ])
    def test_rounding(self, amount: float, expected: str) -> None:
        """Half-cent values round up in magnitude."""
        assert format_amount(amount, "USD") == expected

    def test_negative_rounds_away_from_zero(self) -> None:
        """-0.005 rounds to -0.01, not to zero."""
        assert format_amount(-0.005, "USD") == "-$0.01"

    def test_decimal_input(self) -> None:
        """Decimal values use the same rounding."""
        assert format_amount(Decimal("1234.565"), "USD") == "$1,234.57"
        assert format_amount(Decimal("1234.5650001"), "USD") == "$1,234.57"


class TestFormatAmountSigns:
    """Negative and zero amounts."""

    def test_negative_amounts(self) -> None:
        """Minus sign precedes the symbol."""
        assert format_amount(-1234.56, "USD") == "-$1,234.56"
        assert format_amount(-0.01, "USD") == "-$0.01"

    def test_negative_eur(self) -> None:
        """European negatives keep the suffix symbol."""
        assert _squash(format_amount(-1234.56, "EUR")) == "-1.234,56€"

    @pytest.mark.parametrize("amount", [-0.0, Decimal("-0"), -0.001, Decimal("-0.004")])
    def test_negative_zero_renders_as_zero(self, amount: float | Decimal) -> None:
        """Amounts that round to zero never show a minus sign."""
        assert format_amount(amount, "USD") == "$0.00"
        assert _squash(format_amount(amount, "EUR")) == "0,00€"


class TestFormatAmountMagnitude:
    """Large values."""

    def test_large_numbers(self) -> None:
        """Billions keep grouping and cents."""
        assert format_amount(999999999.99, "USD") == "$999,999,999.99"
        assert format_amount(1000000000, "USD") == "$1,000,000,000.00"

    def test_beyond_default_decimal_precision(self) -> None:
        """Amounts with more than 28 digits still format."""
        result = format_amount(10**30, "USD")
        assert result.startswith("$1,000,000,000")
        assert result.endswith(".00")

    def test_huge_float(self) -> None:
        """The largest doubles do not raise."""
        result = format_amount(1e300, "EUR")
        assert result.endswith(",00\xa0€")


class TestFormatAmountDegenerate:
    """NaN and Infinity render the placeholder."""

    @pytest.mark.parametrize("amount", [
        float("nan"),
        float("inf"),
        float("-inf"),
        Decimal("NaN"),
        Decimal("Infinity"),
        Decimal("-Infinity"),
    ])
    @pytest.mark.parametrize("code", ["USD", "EUR", "GBP", "XYZ"])
    def test_placeholder(self, amount: float | Decimal, code: str) -> None:
        """No exception, no partially formatted string."""
        assert format_amount(amount, code) == NON_FINITE_PLACEHOLDER

    def test_placeholder_value(self) -> None:
        """The placeholder is an em dash."""
        assert NON_FINITE_PLACEHOLDER == "—"
