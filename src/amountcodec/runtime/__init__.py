"""Runtime formatting: numbers to locale-aware display strings.

Requires Babel (`pip install amountcodec[babel]`).

Exports:
    AmountContext: Cached, immutable per-locale formatting context
    format_amount: Format an amount for a currency code
    round_to_cents: Half-away-from-zero rounding used before display
"""

from .amount_context import AmountContext, round_to_cents
from .functions import format_amount

__all__ = ["AmountContext", "format_amount", "round_to_cents"]
