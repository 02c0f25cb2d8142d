"""Amount formatting entry point.

format_amount() is what display components call: it picks the locale
for the currency from the static table, then delegates to the cached
AmountContext for that locale.

Example:
    >>> format_amount(1234.56, "USD")
    '$1,234.56'
    >>> format_amount(1234.56, "EUR")
    '1.234,56\\xa0€'
    >>> format_amount(float("inf"), "USD")
    '—'

Python 3.13+. Uses Babel for i18n.
"""

from decimal import Decimal

from amountcodec.constants import DEFAULT_CURRENCY
from amountcodec.currencies import get_currency_locale, normalize_currency_code

from .amount_context import AmountContext

__all__ = ["format_amount"]


def format_amount(
    amount: int | float | Decimal,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """Format an amount for display in its currency's locale.

    Args:
        amount: Monetary amount (int, float, or Decimal)
        currency: Currency code (case-insensitive). Unrecognized codes use
            en-US conventions with the code shown in place of a symbol.

    Returns:
        Display string with the currency symbol and exactly two decimals,
        rounded half away from zero. NaN and Infinity render as
        NON_FINITE_PLACEHOLDER.

    Raises:
        BabelImportError: If Babel is not installed

    Thread Safety:
        Thread-safe. Uses Babel (no global locale state mutation).
    """
    currency_code = normalize_currency_code(currency)
    ctx = AmountContext.create(get_currency_locale(currency_code))
    return ctx.format_currency(amount, currency=currency_code)
