"""Tests for babel_compat module - centralized Babel dependency handling.

Tests the lazy import infrastructure, error handling, and availability checking
for the optional Babel dependency, including parser-only operation when
Babel is missing.
"""

import pytest

from amountcodec.core import babel_compat
from amountcodec.core.babel_compat import (
    BabelImportError,
    get_babel_numbers,
    get_locale_class,
    get_unknown_locale_error,
    is_babel_available,
    require_babel,
)


class TestBabelImportError:
    """Test BabelImportError exception class."""

    def test_message_includes_feature(self) -> None:
        """Error message includes the feature name."""
        error = BabelImportError("format_amount")
        assert "format_amount" in str(error)

    def test_message_includes_install_instructions(self) -> None:
        """Error message includes installation instructions."""
        error = BabelImportError("test_feature")
        assert "pip install amountcodec[babel]" in str(error)

    def test_stores_feature_attribute(self) -> None:
        """Error stores feature name as attribute."""
        assert BabelImportError("my_feature").feature == "my_feature"

    def test_is_import_error(self) -> None:
        """BabelImportError is a subclass of ImportError."""
        assert isinstance(BabelImportError("test"), ImportError)


class TestWithBabelInstalled:
    """Accessors return the real Babel objects."""

    @pytest.fixture(autouse=True)
    def _needs_babel(self) -> None:
        pytest.importorskip("babel")

    def test_is_babel_available(self) -> None:
        """Availability check reports True."""
        assert is_babel_available() is True

    def test_require_babel_does_not_raise(self) -> None:
        """Guard is a no-op."""
        require_babel("format_amount")

    def test_get_locale_class(self) -> None:
        """Returns babel.Locale."""
        from babel import Locale  # noqa: PLC0415

        assert get_locale_class() is Locale

    def test_get_unknown_locale_error(self) -> None:
        """Returns babel.core.UnknownLocaleError."""
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        assert get_unknown_locale_error() is UnknownLocaleError

    def test_get_babel_numbers(self) -> None:
        """Returns babel.numbers with the functions the codec calls."""
        numbers = get_babel_numbers()
        assert callable(numbers.format_currency)
        assert callable(numbers.get_group_symbol)
        assert callable(numbers.get_decimal_symbol)


class TestWithoutBabel:
    """Simulated parser-only installation."""

    @pytest.fixture
    def babel_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)

    @pytest.mark.usefixtures("babel_missing")
    def test_accessors_raise(self) -> None:
        """Every accessor raises BabelImportError naming itself."""
        assert is_babel_available() is False
        with pytest.raises(BabelImportError, match="get_locale_class"):
            get_locale_class()
        with pytest.raises(BabelImportError, match="get_unknown_locale_error"):
            get_unknown_locale_error()
        with pytest.raises(BabelImportError, match="get_babel_numbers"):
            get_babel_numbers()

    @pytest.mark.usefixtures("babel_missing", "fresh_context_cache")
    def test_formatting_requires_babel(self) -> None:
        """format_amount() fails loudly instead of guessing."""
        from amountcodec import format_amount  # noqa: PLC0415

        with pytest.raises(BabelImportError):
            format_amount(1234.56, "USD")

    @pytest.mark.usefixtures("babel_missing")
    def test_parsing_works_without_babel(self) -> None:
        """Parsing and locale resolution are pure string operations."""
        from amountcodec import get_currency_locale, parse_amount, resolve_locale  # noqa: PLC0415

        assert parse_amount("2.000,87", "EUR") == (2000.87, ())
        assert parse_amount("$1,234.56", "USD") == (1234.56, ())
        assert get_currency_locale("GBP") == "en-GB"
        assert resolve_locale("EUR").decimal_separator == ","
