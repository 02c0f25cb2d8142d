"""Amount Formatting and Parsing Examples.

amountcodec works in both directions:
- Format: number -> display string in the currency's home locale
- Parse: user-typed string -> number, reading "." and "," the way that
  currency's users write them

API Notes:
- is_valid_amount() accepts None for simplified patterns
- parse_amount() returns tuple[result, tuple[UnparseableAmountError, ...]]
- parse_amount() never raises; parse_amount_or_raise() does
- Formatting needs the Babel extra; parsing does not
"""

from amountcodec import (
    SUPPORTED_CURRENCIES,
    UnparseableAmountError,
    format_amount,
    get_currency_locale,
    is_valid_amount,
    parse_amount,
    parse_amount_or_raise,
)


def example_display() -> None:
    """Format the same amount for every supported currency."""
    print("[Example 1] Display Formatting")
    print("-" * 60)

    for code in SUPPORTED_CURRENCIES:
        print(f"  {code} ({get_currency_locale(code)}): {format_amount(1234.567, code)}")

    print(f"  Unknown code: {format_amount(1234.567, 'XYZ')}")
    print(f"  NaN: {format_amount(float('nan'), 'USD')}")


def example_form_input() -> None:
    """Read amounts the way users type them."""
    print("\n[Example 2] Form Input")
    print("-" * 60)

    samples = [
        ("$2,000.87", "USD"),
        ("2.000,87 €", "EUR"),
        ("2.000", "EUR"),
        ("2.50", "EUR"),
        ("£ 12", "GBP"),
        ("abc", "USD"),
        ("", "CAD"),
    ]
    for text, code in samples:
        result, errors = parse_amount(text, code)
        if is_valid_amount(result):
            print(f"  {text!r:>14} [{code}] -> {result}")
        else:
            print(f"  {text!r:>14} [{code}] -> {errors[0].diagnostic.code.name}")  # type: ignore[union-attr]


def example_strict_validation() -> None:
    """Exception-based validation with diagnostic output."""
    print("\n[Example 3] Strict Validation")
    print("-" * 60)

    try:
        parse_amount_or_raise("1.2.3,4,5", "EUR")
    except UnparseableAmountError as e:
        print(e)


def example_roundtrip() -> None:
    """Format, then parse the display string back."""
    print("\n[Example 4] Roundtrip")
    print("-" * 60)

    for code in SUPPORTED_CURRENCIES:
        display = format_amount(9876543.21, code)
        parsed, _ = parse_amount(display, code)
        status = "OK" if parsed == 9876543.21 else "MISMATCH"
        print(f"  {code}: {display!r} -> {parsed} [{status}]")


if __name__ == "__main__":
    print("=" * 60)
    print("amountcodec Examples")
    print("=" * 60)

    example_display()
    example_form_input()
    example_strict_validation()
    example_roundtrip()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)
