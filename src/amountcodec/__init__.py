"""amountcodec - Locale-aware currency amount formatting and parsing.

Renders expense amounts with the grouping and decimal conventions of the
currency's locale, and reads free-form user-typed amounts back into
numbers without confusing "2,000.87" with "2.000,87".

Public API:
    format_amount - Number + currency code -> display string (requires Babel)
    parse_amount - Text + currency code -> (float | None, errors)
    parse_amount_or_raise - Text + currency code -> float, raises on failure
    resolve_locale - Currency code -> LocaleConvention
    get_currency_locale - Currency code -> BCP-47 locale identifier
    is_valid_amount - TypeIs guard for parse results

Exceptions:
    AmountError - Base exception class
    UnparseableAmountError - Text does not reduce to a finite amount

Submodules:
    amountcodec.parsing - Parser and the lone-separator heuristic
    amountcodec.runtime - AmountContext and Babel-backed formatting
    amountcodec.diagnostics - Error codes, templates and formatting
"""

from .currencies import (
    SUPPORTED_CURRENCIES,
    LocaleConvention,
    get_currency_locale,
    resolve_locale,
)
from .diagnostics import AmountError, UnparseableAmountError
from .enums import CurrencyCode
from .parsing import is_valid_amount, parse_amount, parse_amount_or_raise
from .runtime import format_amount

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("amountcodec")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "SUPPORTED_CURRENCIES",
    "AmountError",
    "CurrencyCode",
    "LocaleConvention",
    "UnparseableAmountError",
    "__version__",
    "format_amount",
    "get_currency_locale",
    "is_valid_amount",
    "parse_amount",
    "parse_amount_or_raise",
    "resolve_locale",
]
