"""Hypothesis strategies for amountcodec property-based testing.

Usage:
    from tests.strategies import cent_amounts, us_style_inputs
"""

from .amounts import (
    US_STYLE_CURRENCIES,
    cent_amounts,
    degenerate_amounts,
    european_style_inputs,
    supported_currencies,
    us_style_inputs,
)

__all__ = [
    "US_STYLE_CURRENCIES",
    "cent_amounts",
    "degenerate_amounts",
    "european_style_inputs",
    "supported_currencies",
    "us_style_inputs",
]
