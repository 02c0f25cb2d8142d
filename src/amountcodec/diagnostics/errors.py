"""amountcodec exception hierarchy with structured diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory


class AmountError(Exception):
    """Base exception for all amountcodec errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize AmountError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def category(self) -> ErrorCategory | None:
        """Category of the attached diagnostic, if any."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.code.category


class UnparseableAmountError(AmountError):
    """User-typed text does not reduce to a finite amount.

    The single failure kind of amount parsing. Covers empty input, input
    with no digits, and input whose cleaned form is not a finite number;
    the attached diagnostic code tells these apart.

    parse_amount() returns these in its error tuple. Only
    parse_amount_or_raise() raises them.

    Attributes:
        input_value: The string that failed to parse
        currency_code: The currency code used to pick the convention
        locale_code: The locale the currency code resolved to

    Example:
        >>> result, errors = parse_amount("abc", "USD")
        >>> for error in errors:
        ...     print(error.input_value, error.diagnostic.code.name)
        abc PARSE_AMOUNT_NO_DIGITS
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        currency_code: str = "",
        locale_code: str = "",
    ) -> None:
        """Initialize UnparseableAmountError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            currency_code: The currency code used to pick the convention
            locale_code: The locale the currency code resolved to
        """
        super().__init__(message)
        self.input_value = input_value
        self.currency_code = currency_code
        self.locale_code = locale_code


class LocaleResolutionError(AmountError, ValueError):
    """Locale identifier could not be resolved to CLDR data.

    Raised only by strict factories such as AmountContext.create_or_raise().
    Subclasses ValueError so callers validating configuration can catch
    either type.
    """
