"""Lazy access to the optional Babel dependency.

Two installation modes:

    pip install amountcodec          parse_amount() and the currency table only
    pip install amountcodec[babel]   adds format_amount() and AmountContext

Nothing here imports Babel at module load. Babel-backed code asks for the
piece it needs through an accessor, which raises BabelImportError with an
install hint when the extra is missing:

    from amountcodec.core.babel_compat import get_babel_numbers

    def render(value: Decimal) -> str:
        numbers = get_babel_numbers()
        ...

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Literal, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType

__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


# pylint: disable=redefined-builtin,unnecessary-ellipsis
class BabelNumbersProtocol(Protocol):
    """The part of babel.numbers that amount formatting calls."""

    def format_currency(
        self,
        number: int | float | Decimal,
        currency: str,
        format: str | None = None,
        locale: Locale | str | None = None,
        currency_digits: bool = True,
        format_type: Literal["standard", "accounting", "name"] = "standard",
    ) -> str:
        """Render an amount with the locale's currency pattern."""
        ...

    def get_group_symbol(self, locale: Locale | str | None = None) -> str:
        """Thousands separator of a locale."""
        ...

    def get_decimal_symbol(self, locale: Locale | str | None = None) -> str:
        """Decimal separator of a locale."""
        ...
# pylint: enable=redefined-builtin,unnecessary-ellipsis


class BabelImportError(ImportError):
    """A Babel-backed feature was used without the babel extra installed.

    Attributes:
        feature: Name of the function that needed Babel
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} requires Babel for CLDR currency data. "
            "Install with: pip install amountcodec[babel]"
        )
        self.feature = feature


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import
    except ImportError:
        return False
    return True


def is_babel_available() -> bool:
    """Return True when Babel can be imported. The probe runs once."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError naming feature unless Babel is installed."""
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Return babel.Locale."""
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Return babel.core.UnknownLocaleError, for use in except clauses."""
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_numbers() -> BabelNumbersProtocol:
    """Return the babel.numbers module."""
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers
