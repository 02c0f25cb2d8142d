"""Type guard functions for parsing result type narrowing.

parse_amount() returns tuple[result, tuple[UnparseableAmountError, ...]].
The guard checks the result component to narrow types for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: The guard accepts None and returns False. This simplifies the pattern from
`if not errors and is_valid_amount(result)` to just `if is_valid_amount(result)`.

Example:
    >>> from amountcodec.parsing import parse_amount, is_valid_amount
    >>> result, errors = parse_amount("1,234.56", "USD")
    >>> if is_valid_amount(result):
    ...     # mypy knows result is float
    ...     total = result * 1.21
"""

import math
from typing import TypeIs

__all__ = ["is_valid_amount"]


def is_valid_amount(value: float | None) -> TypeIs[float]:
    """Type guard: Check if parsed amount is valid (not None/NaN/Infinity).

    Safe to call directly on parse_amount() result without checking errors first.

    Args:
        value: Float from parse_amount() result tuple (may be None on error)

    Returns:
        True if value is a finite float, False otherwise
    """
    return value is not None and math.isfinite(value)
