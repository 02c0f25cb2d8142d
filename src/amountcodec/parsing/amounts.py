"""Amount parsing for free-form user input.

- parse_amount() returns tuple[float | None, tuple[UnparseableAmountError, ...]]
- Parse errors returned in tuple, never raised
- parse_amount_or_raise() is the strict variant

Input may use either US grouping ("2,000.87") or European grouping
("2.000,87"). The currency code picks the convention, and the convention
decides how "." and "," are read:

    US convention        every "," is a group separator, "." is decimal
    European convention  both present   "." groups, first "," decimal
                         only ","       first "," is decimal
                         only "."       classify_lone_separator() decides

Known ambiguities, kept on purpose:
    "1,234" with EUR parses as 1.234 (a lone comma is always decimal).
    "2.000.000" with EUR fails (only a single lone "." is reclassified).
    Signs are stripped with the other symbols, so "-$5.00" parses as 5.0.

Currency codes are matched after strip and upper-case rather than
exactly, so "eur" selects the European convention instead of falling
back to the US one.

No rounding happens here. Values keep full float precision until they
are formatted or stored.

Thread-safe. Pure string processing; Babel is not required.

Python 3.13+.
"""

import logging
import math
import re

from amountcodec.constants import DEFAULT_CURRENCY, GROUP_FRAGMENT_LENGTH
from amountcodec.currencies import (
    LocaleConvention,
    get_currency_locale,
    normalize_currency_code,
    resolve_locale,
)
from amountcodec.diagnostics import Diagnostic, ErrorTemplate, UnparseableAmountError
from amountcodec.enums import SeparatorRole

__all__ = [
    "classify_lone_separator",
    "clean_amount_text",
    "parse_amount",
    "parse_amount_or_raise",
]

logger = logging.getLogger(__name__)

# ASCII digits only: re's \d would also keep Arabic-Indic and other
# Unicode digits, which float() then silently accepts.
_NON_AMOUNT_CHARS = re.compile(r"[^0-9.,]")


def clean_amount_text(text: str) -> str:
    """Strip everything except ASCII digits, "." and ",".

    Removes currency symbols, whitespace (including NBSP), letters and signs.

    Example:
        >>> clean_amount_text(" 1.234,56\\xa0€ ")
        '1.234,56'
        >>> clean_amount_text("-$5")
        '5'
    """
    return _NON_AMOUNT_CHARS.sub("", text)


def classify_lone_separator(cleaned: str) -> SeparatorRole:
    """Decide what a lone "." means in European-convention input.

    Used only when the cleaned text contains "." but no ",". Exactly one
    "." followed by exactly GROUP_FRAGMENT_LENGTH characters is read as a
    thousands separator; anything else is read as a decimal separator.

    Args:
        cleaned: Output of clean_amount_text() containing no ","

    Returns:
        SeparatorRole tag for the "."

    Example:
        >>> classify_lone_separator("2.000")
        <SeparatorRole.LIKELY_GROUP: 'likely_group'>
        >>> classify_lone_separator("2.50")
        <SeparatorRole.LIKELY_DECIMAL: 'likely_decimal'>
    """
    head, sep, fragment = cleaned.rpartition(".")
    if sep and "." not in head and len(fragment) == GROUP_FRAGMENT_LENGTH:
        return SeparatorRole.LIKELY_GROUP
    return SeparatorRole.LIKELY_DECIMAL


def _normalize_decimal_comma(cleaned: str, convention: LocaleConvention) -> str:
    """Rewrite European-convention text into float() syntax."""
    group = convention.group_separator
    decimal = convention.decimal_separator
    has_group = group in cleaned
    has_decimal = decimal in cleaned

    if has_group and has_decimal:
        # Groups are assumed to precede the decimal separator; group arity
        # is not checked.
        return cleaned.replace(group, "").replace(decimal, ".", 1)

    if has_decimal:
        return cleaned.replace(decimal, ".", 1)

    if has_group:
        role = classify_lone_separator(cleaned)
        logger.debug("Lone '%s' in %r classified as %s", group, cleaned, role)
        match role:
            case SeparatorRole.LIKELY_GROUP:
                return cleaned.replace(group, "")
            case SeparatorRole.LIKELY_DECIMAL:
                return cleaned

    return cleaned


def _normalize_separators(cleaned: str, convention: LocaleConvention) -> str:
    """Rewrite cleaned text so that "." is the only decimal separator."""
    if convention.uses_decimal_comma:
        return _normalize_decimal_comma(cleaned, convention)
    # US convention never uses "," as a decimal marker.
    return cleaned.replace(convention.group_separator, "")


def _failure(
    diagnostic: Diagnostic, value: str, currency_code: str
) -> tuple[None, tuple[UnparseableAmountError, ...]]:
    error = UnparseableAmountError(
        diagnostic,
        input_value=value,
        currency_code=currency_code,
        locale_code=get_currency_locale(currency_code),
    )
    return (None, (error,))


def parse_amount(
    text: str,
    currency: str = DEFAULT_CURRENCY,
) -> tuple[float | None, tuple[UnparseableAmountError, ...]]:
    """Parse a user-typed amount using the currency's separator convention.

    Args:
        text: Raw input (e.g., "$1,234.56", "1.234,56 €", " 2000 ")
        currency: Currency code selecting the convention (case-insensitive);
            unrecognized codes use the US convention

    Returns:
        Tuple of (result, errors):
        - result: Parsed finite float, or None if parsing failed
        - errors: Tuple of UnparseableAmountError (empty tuple on success)

    Examples:
        >>> parse_amount("2,000.87", "USD")
        (2000.87, ())

        >>> parse_amount("2.000,87", "EUR")
        (2000.87, ())

        >>> parse_amount("2.000", "EUR")
        (2000.0, ())

        >>> result, errors = parse_amount("abc", "USD")
        >>> result is None, errors[0].diagnostic.code.name
        (True, 'PARSE_AMOUNT_NO_DIGITS')

    Thread Safety:
        Thread-safe. No shared state.
    """
    currency_code = normalize_currency_code(currency)

    if not text or not text.strip():
        return _failure(ErrorTemplate.parse_amount_empty(text, currency_code), text, currency_code)

    cleaned = clean_amount_text(text)
    if not cleaned:
        return _failure(
            ErrorTemplate.parse_amount_no_digits(text, currency_code), text, currency_code
        )

    normalized = _normalize_separators(cleaned, resolve_locale(currency_code))

    try:
        value = float(normalized)
    except ValueError:
        return _failure(
            ErrorTemplate.parse_amount_invalid(text, currency_code, normalized),
            text,
            currency_code,
        )

    # A run of hundreds of digits overflows to inf rather than raising.
    if not math.isfinite(value):
        return _failure(
            ErrorTemplate.parse_amount_invalid(text, currency_code, normalized),
            text,
            currency_code,
        )

    return (value, ())


def parse_amount_or_raise(text: str, currency: str = DEFAULT_CURRENCY) -> float:
    """Parse a user-typed amount, raising on failure.

    Strict variant of parse_amount() for callers that prefer exceptions,
    such as form validators that map exceptions to field errors.

    Raises:
        UnparseableAmountError: If text does not reduce to a finite number
    """
    result, errors = parse_amount(text, currency)
    if result is None:
        raise errors[0]
    return result
