"""Amount parsing: user-typed display strings back to numbers.

- parse_amount() NEVER raises for bad input - errors are returned in a tuple
- parse_amount_or_raise() is the strict variant
- Consistent with format_amount()'s "never raise" philosophy

This module provides the inverse operation to amountcodec.runtime:
- Formatting: number -> locale-aware display string
- Parsing: free-form display string -> number

Parsing is pure string processing and does not need Babel.

Public API:
    Parsing Functions:
        parse_amount - Returns tuple[float | None, tuple[UnparseableAmountError, ...]]
        parse_amount_or_raise - Returns float, raises UnparseableAmountError

    Policy Helpers:
        clean_amount_text - Strip symbols, letters and whitespace
        classify_lone_separator - Tag a lone "." as group or decimal

    Type Guards:
        is_valid_amount - TypeIs guard for finite float

Example:
    >>> from amountcodec.parsing import parse_amount, is_valid_amount
    >>> result, errors = parse_amount("2.000,87 €", "EUR")
    >>> if is_valid_amount(result):
    ...     print(result)
    2000.87

Python 3.13+.
"""

from .amounts import (
    classify_lone_separator,
    clean_amount_text,
    parse_amount,
    parse_amount_or_raise,
)
from .guards import is_valid_amount

__all__ = [
    # Type guards
    "is_valid_amount",
    # Policy helpers
    "classify_lone_separator",
    "clean_amount_text",
    # Parsing functions
    "parse_amount",
    "parse_amount_or_raise",
]
