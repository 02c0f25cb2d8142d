"""Locale identifier handling.

The currency table stores BCP-47 identifiers ("de-DE"), which is what
browser-side callers expect. Babel wants POSIX identifiers ("de_DE").
This module is the single place where that conversion happens.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from amountcodec.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Turn a BCP-47 code into the POSIX form Babel parses.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE")
        'de_DE'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a cached babel.Locale.

    Args:
        locale_code: BCP-47 ("en-US") or POSIX ("en_US") identifier

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the identifier is malformed
    """
    from amountcodec.core.babel_compat import get_locale_class  # noqa: PLC0415

    return get_locale_class().parse(normalize_locale(locale_code))
