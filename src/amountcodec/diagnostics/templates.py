"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistent, and documents every
    error case in one place.
    """

    # =========================================================================
    # AMOUNT PARSING ERRORS (4000-4099)
    # =========================================================================

    @staticmethod
    def parse_amount_empty(value: str, currency_code: str) -> Diagnostic:
        """Input was empty or whitespace-only.

        Args:
            value: The raw input string
            currency_code: The currency code supplied by the caller

        Returns:
            Diagnostic for PARSE_AMOUNT_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_AMOUNT_EMPTY,
            message="Amount is empty",
            hint="Enter an amount",
            input_value=value,
            currency_code=currency_code,
        )

    @staticmethod
    def parse_amount_no_digits(value: str, currency_code: str) -> Diagnostic:
        """Nothing numeric remained after stripping symbols and letters.

        Args:
            value: The raw input string
            currency_code: The currency code supplied by the caller

        Returns:
            Diagnostic for PARSE_AMOUNT_NO_DIGITS
        """
        msg = f"Amount '{value}' contains no digits"
        return Diagnostic(
            code=DiagnosticCode.PARSE_AMOUNT_NO_DIGITS,
            message=msg,
            hint="Enter a number such as 1,234.56",
            input_value=value,
            currency_code=currency_code,
        )

    @staticmethod
    def parse_amount_invalid(
        value: str,
        currency_code: str,
        normalized: str,
    ) -> Diagnostic:
        """Cleaned text is not a finite number.

        Args:
            value: The raw input string
            currency_code: The currency code supplied by the caller
            normalized: The text after separator normalization

        Returns:
            Diagnostic for PARSE_AMOUNT_INVALID
        """
        msg = f"Amount '{value}' is not a valid number (read as '{normalized}')"
        return Diagnostic(
            code=DiagnosticCode.PARSE_AMOUNT_INVALID,
            message=msg,
            hint="Use at most one decimal separator, after any thousands separators",
            input_value=value,
            currency_code=currency_code,
        )

    # =========================================================================
    # LOCALE ERRORS (4100-4199)
    # =========================================================================

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier has no CLDR data.

        Args:
            locale_code: The unknown locale code
            reason: Error text reported by Babel

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en-US', 'de-DE')",
        )
