"""Shared constants for amountcodec.

This module provides centralized configuration constants used across
the parsing and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Defaults: Currency and locale used when the caller gives none
- Amount shape: Fraction digits and grouping arity
- Cache limits: Memory bounds for the locale context cache
- Fallback strings: Display values for degenerate input

Python 3.13+. Zero external dependencies.
"""

from typing import Final

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Defaults
    "DEFAULT_CURRENCY",
    "DEFAULT_LOCALE",
    # Amount shape
    "FRACTION_DIGITS",
    "GROUP_FRAGMENT_LENGTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Fallback strings
    "NON_FINITE_PLACEHOLDER",
]

# ============================================================================
# DEFAULTS
# ============================================================================

# Currency assumed when a caller passes a blank code.
DEFAULT_CURRENCY: Final[str] = "USD"

# Locale used for any currency code outside the supported table.
DEFAULT_LOCALE: Final[str] = "en-US"

# ============================================================================
# AMOUNT SHAPE
# ============================================================================

# Every formatted amount carries exactly this many fractional digits,
# regardless of the currency's ISO 4217 minor unit.
FRACTION_DIGITS: Final[int] = 2

# Length of the fragment after a lone "." that marks it as a thousands
# separator under the European convention ("2.000" -> 2000).
GROUP_FRAGMENT_LENGTH: Final[int] = 3

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached AmountContext instances.
# The supported table needs five; the bound covers ad-hoc locale lookups.
MAX_LOCALE_CACHE_SIZE: Final[int] = 32

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Rendered for NaN and +/-Infinity instead of a malformed amount.
NON_FINITE_PLACEHOLDER: Final[str] = "—"
