"""Enumerations for amountcodec type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so CurrencyCode.EUR == "EUR".

Python 3.13+.
"""

from enum import StrEnum


class CurrencyCode(StrEnum):
    """Currencies with a dedicated display locale.

    StrEnum provides automatic string conversion: str(CurrencyCode.USD) == "USD"
    """

    USD = "USD"
    """US dollar, formatted with en-US conventions."""

    EUR = "EUR"
    """Euro, formatted with de-DE conventions (the only European convention)."""

    GBP = "GBP"
    """Pound sterling, formatted with en-GB conventions."""

    CAD = "CAD"
    """Canadian dollar, formatted with en-CA conventions."""

    AUD = "AUD"
    """Australian dollar, formatted with en-AU conventions."""


class SeparatorRole(StrEnum):
    """Role assigned to a lone "." in European-convention input.

    Produced by classify_lone_separator() so the thousands-versus-decimal
    policy is an explicit, testable value rather than inline branching.
    """

    LIKELY_GROUP = "likely_group"
    """Exactly one "." followed by three digits: "2.000" means 2000."""

    LIKELY_DECIMAL = "likely_decimal"
    """Anything else: "2.50" means 2.5."""


__all__ = [
    "CurrencyCode",
    "SeparatorRole",
]
