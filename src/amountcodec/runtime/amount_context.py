"""Amount context for thread-safe, locale-scoped currency formatting.

This module provides locale-aware amount formatting without global state mutation.
Uses Babel for CLDR-compliant currency formatting.

Architecture:
    - AmountContext: Immutable locale configuration container
    - Formatting uses Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Rounding to cents happens here, before Babel sees the value

Design Principles:
    - Explicit over implicit (locale always visible)
    - Immutable by default (frozen dataclass)
    - Thread-safe (no shared mutable state)
    - Degenerate input renders a fixed placeholder, never a malformed amount

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from threading import RLock
from typing import TYPE_CHECKING, ClassVar

from amountcodec.constants import (
    DEFAULT_LOCALE,
    FRACTION_DIGITS,
    MAX_LOCALE_CACHE_SIZE,
    NON_FINITE_PLACEHOLDER,
)
from amountcodec.core.babel_compat import get_babel_numbers, get_unknown_locale_error
from amountcodec.currencies import LocaleConvention
from amountcodec.diagnostics import ErrorTemplate, LocaleResolutionError
from amountcodec.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["AmountContext", "round_to_cents"]

logger = logging.getLogger(__name__)

_CENT = Decimal(1).scaleb(-FRACTION_DIGITS)
_ZERO = Decimal(0).quantize(_CENT)


def _precision_for(value: Decimal) -> int:
    # Digits needed to hold the value with FRACTION_DIGITS decimals, plus
    # one for a rounding carry.
    return value.adjusted() + FRACTION_DIGITS + 2


def round_to_cents(value: int | float | Decimal) -> Decimal | None:
    """Round an amount to the nearest cent, half away from zero.

    Floats are converted through their shortest repr, so 1.005 rounds to
    1.01 the way a person reading "1.005" expects, rather than following
    the binary value 1.00499999...

    Args:
        value: Amount to round

    Returns:
        Decimal with exactly FRACTION_DIGITS decimals, or None for NaN and
        Infinity. Results that round to zero (including -0.0) are returned
        as positive zero.

    Examples:
        >>> round_to_cents(1234.567)
        Decimal('1234.57')
        >>> round_to_cents(-0.001)
        Decimal('0.00')
        >>> round_to_cents(float("nan")) is None
        True
    """
    if isinstance(value, float):
        value = Decimal(repr(value))
    amount = Decimal(value)
    if not amount.is_finite():
        return None

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _precision_for(amount))
        cents = amount.quantize(_CENT, rounding=ROUND_HALF_UP)

    if cents.is_zero():
        return _ZERO
    return cents


@dataclass(frozen=True, slots=True)
class AmountContext:
    """Immutable locale configuration for amount formatting.

    Use AmountContext.create() factory to construct instances with proper validation.
    Direct construction via __init__ is not recommended (bypasses validation).

    Cache Management:
        AmountContext uses an internal LRU cache for instance reuse. Use class
        methods for cache management:
        - AmountContext.clear_cache(): Clear all cached instances
        - AmountContext.cache_size(): Get current cache size
        - AmountContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = AmountContext.create("de-DE")
        >>> ctx.format_currency(1234.5, currency="EUR")
        '1.234,50\\xa0€'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = AmountContext.create("invalid-locale")
        >>> ctx.locale_code  # Original code preserved
        'invalid-locale'
        >>> ctx.is_fallback
        True

    Thread Safety:
        AmountContext is immutable and thread-safe. Multiple threads can
        share the same instance without synchronization. Cache operations
        are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, AmountContext]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the amount context cache.

        Thread-safe via RLock.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached AmountContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> AmountContext:
        """Create AmountContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        DEFAULT_LOCALE. This method always succeeds - use create_or_raise()
        if you need strict validation.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'de-DE')

        Returns:
            AmountContext instance. For unknown/invalid locales, uses the
            default locale while preserving the original locale_code.

        Raises:
            BabelImportError: If Babel is not installed
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        unknown_locale_error = get_unknown_locale_error()
        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key)
        except (unknown_locale_error, ValueError) as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = get_babel_locale(DEFAULT_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> AmountContext:
        """Create AmountContext or raise on validation failure.

        Args:
            locale_code: BCP 47 locale identifier

        Returns:
            AmountContext instance with valid locale

        Raises:
            LocaleResolutionError: If locale code is invalid or unknown
        """
        unknown_locale_error = get_unknown_locale_error()
        try:
            babel_locale = get_babel_locale(locale_code)
        except (unknown_locale_error, ValueError) as e:
            raise LocaleResolutionError(
                ErrorTemplate.locale_unknown(locale_code, str(e))
            ) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def cldr_convention(self) -> LocaleConvention:
        """Separator convention according to CLDR number symbols."""
        numbers = get_babel_numbers()
        return LocaleConvention(
            group_separator=numbers.get_group_symbol(self.babel_locale),
            decimal_separator=numbers.get_decimal_symbol(self.babel_locale),
        )

    def format_currency(self, value: int | float | Decimal, *, currency: str) -> str:
        """Format an amount with this locale's currency pattern.

        Always renders exactly FRACTION_DIGITS decimals, independent of the
        currency's ISO 4217 minor unit.

        Args:
            value: Monetary amount (int, float, or Decimal)
            currency: ISO 4217 currency code; unknown codes are shown verbatim
                in place of a symbol

        Returns:
            Formatted currency string, or NON_FINITE_PLACEHOLDER for NaN
            and Infinity

        Examples:
            >>> AmountContext.create("en-US").format_currency(-1234.56, currency="USD")
            '-$1,234.56'
            >>> AmountContext.create("en-GB").format_currency(0.005, currency="GBP")
            '£0.01'
        """
        cents = round_to_cents(value)
        if cents is None:
            logger.debug("Non-finite amount %r rendered as placeholder", value)
            return NON_FINITE_PLACEHOLDER

        numbers = get_babel_numbers()
        # Babel quantizes again under the active context; very large
        # amounts need more than the default 28 digits.
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, _precision_for(cents))
            return str(
                numbers.format_currency(
                    cents,
                    currency,
                    locale=self.babel_locale,
                    currency_digits=False,
                )
            )
