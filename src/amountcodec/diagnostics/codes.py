"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for AmountError.

    Categories:
        PARSE: User-typed amount could not be reduced to a finite number
        LOCALE: Locale identifier could not be resolved to CLDR data
    """

    PARSE = "parse"
    LOCALE = "locale"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4099: Amount parsing errors
        4100-4199: Locale resolution errors

    The parse codes explain *why* an amount was rejected so a UI can pick
    an inline message. All of them surface as the same exception kind,
    UnparseableAmountError.
    """

    # Amount parsing errors (4000-4099)
    PARSE_AMOUNT_EMPTY = 4001
    PARSE_AMOUNT_NO_DIGITS = 4002
    PARSE_AMOUNT_INVALID = 4003

    # Locale resolution errors (4100-4199)
    LOCALE_UNKNOWN = 4101

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the numeric range."""
        if self.value < 4100:
            return ErrorCategory.PARSE
        return ErrorCategory.LOCALE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: Raw text the diagnostic is about (parse errors)
        currency_code: Currency code supplied by the caller (parse errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    currency_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARSE_AMOUNT_NO_DIGITS]: Amount 'abc' contains no digits
              = currency: USD
              = help: Enter a number such as 1,234.56

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
