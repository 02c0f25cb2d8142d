"""Currency table and Locale Resolver.

Maps each supported currency to the locale whose conventions are used to
display and read its amounts. The table is built once at import time and
exposed through read-only mappings.

Only EUR uses the European convention ("." groups, "," decimal). Every
other code, including codes outside the table, uses the US convention.

The conventions are stored statically instead of being read from CLDR so
that parsing works in parser-only installations without Babel. The test
suite checks the static table against Babel's number symbols.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from amountcodec.constants import DEFAULT_CURRENCY, DEFAULT_LOCALE
from amountcodec.enums import CurrencyCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data classes
    "LocaleConvention",
    # Tables
    "CURRENCY_LOCALES",
    "LOCALE_CONVENTIONS",
    "SUPPORTED_CURRENCIES",
    # Conventions
    "EUROPEAN_CONVENTION",
    "US_CONVENTION",
    # Lookup functions
    "get_currency_locale",
    "is_supported_currency",
    "normalize_currency_code",
    "resolve_locale",
]


@dataclass(frozen=True, slots=True)
class LocaleConvention:
    """Grouping and decimal separator pair for a locale.

    Attributes:
        group_separator: Character between thousands groups
        decimal_separator: Character before the fractional digits
    """

    group_separator: str
    decimal_separator: str

    @property
    def uses_decimal_comma(self) -> bool:
        """True when "," marks the fractional boundary."""
        return self.decimal_separator == ","


US_CONVENTION: Final[LocaleConvention] = LocaleConvention(
    group_separator=",", decimal_separator="."
)
EUROPEAN_CONVENTION: Final[LocaleConvention] = LocaleConvention(
    group_separator=".", decimal_separator=","
)

CURRENCY_LOCALES: Final[MappingProxyType[str, str]] = MappingProxyType({
    CurrencyCode.USD: "en-US",
    CurrencyCode.EUR: "de-DE",
    CurrencyCode.GBP: "en-GB",
    CurrencyCode.CAD: "en-CA",
    CurrencyCode.AUD: "en-AU",
})

LOCALE_CONVENTIONS: Final[MappingProxyType[str, LocaleConvention]] = MappingProxyType({
    "en-US": US_CONVENTION,
    "de-DE": EUROPEAN_CONVENTION,
    "en-GB": US_CONVENTION,
    "en-CA": US_CONVENTION,
    "en-AU": US_CONVENTION,
})

SUPPORTED_CURRENCIES: Final[tuple[str, ...]] = tuple(CURRENCY_LOCALES)


def normalize_currency_code(code: str) -> str:
    """Canonicalize a caller-supplied currency code.

    Strips surrounding whitespace and upper-cases. A blank code becomes
    the default currency so that an unset profile preference still
    formats as dollars.

    Args:
        code: Currency code as received from the caller

    Returns:
        Canonical code (may still be outside the supported table)

    Example:
        >>> normalize_currency_code(" eur ")
        'EUR'
        >>> normalize_currency_code("")
        'USD'
    """
    normalized = code.strip().upper()
    return normalized or DEFAULT_CURRENCY


def is_supported_currency(code: str) -> bool:
    """Check whether a code has a dedicated locale in the table."""
    return normalize_currency_code(code) in CURRENCY_LOCALES


def get_currency_locale(code: str = DEFAULT_CURRENCY) -> str:
    """Get the BCP-47 locale used for a currency.

    Total function: unrecognized codes fall back to DEFAULT_LOCALE.

    Args:
        code: Currency code (case-insensitive)

    Returns:
        BCP-47 locale identifier

    Example:
        >>> get_currency_locale("EUR")
        'de-DE'
        >>> get_currency_locale("JPY")
        'en-US'
    """
    return CURRENCY_LOCALES.get(normalize_currency_code(code), DEFAULT_LOCALE)


def resolve_locale(code: str) -> LocaleConvention:
    """Resolve the separator convention for a currency code.

    Total function: unrecognized codes yield the US convention.

    Args:
        code: Currency code (case-insensitive)

    Returns:
        LocaleConvention of the currency's locale

    Example:
        >>> resolve_locale("EUR")
        LocaleConvention(group_separator='.', decimal_separator=',')
        >>> resolve_locale("XYZ") is US_CONVENTION
        True
    """
    return LOCALE_CONVENTIONS.get(get_currency_locale(code), US_CONVENTION)
