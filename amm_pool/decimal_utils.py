"""High-precision Decimal helpers for fixed-point token values.

The default decimal context keeps 28 significant digits, which silently rounds
uint256-sized values (up to ~10^77). Everything here runs in a 78-digit context.
"""

from __future__ import annotations

import decimal
from decimal import Decimal

# 78 digits of precision, enough for any uint256 value
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78)
# Same precision, truncating instead of rounding half-even
DECIMAL_ROUND_DOWN_CONTEXT = decimal.Context(prec=78, rounding=decimal.ROUND_DOWN)


def fixed_point(raw: int, decimals: int) -> Decimal:
    """Interpret ``raw`` as a fixed-point number with ``decimals`` fractional digits.

    The result keeps trailing zeros, e.g. ``fixed_point(1500, 3) == Decimal("1.500")``
    with exponent -3.
    """
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return Decimal(raw).scaleb(-decimals)


__all__ = [
    "DECIMAL_HIGH_PREC_CONTEXT",
    "DECIMAL_ROUND_DOWN_CONTEXT",
    "fixed_point",
]
