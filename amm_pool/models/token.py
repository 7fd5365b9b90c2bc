"""Token identity model."""

from __future__ import annotations

import decimal
from decimal import ROUND_DOWN, Decimal

from pydantic import BaseModel, ConfigDict, Field

from amm_pool.decimal_utils import DECIMAL_ROUND_DOWN_CONTEXT, fixed_point
from amm_pool.models.types import ZERO_ADDRESS, Address


class ERC20Token(BaseModel):
    """Immutable description of a fungible token.

    Pools key their reserves by ``symbol``, so two distinct tokens traded by
    the same pool must not share a symbol.
    """

    model_config = ConfigDict(frozen=True)

    chain: str
    # Up to 77 so that 10**decimals still fits in uint256
    decimals: int = Field(ge=0, le=77)
    symbol: str = Field(min_length=1)
    address: Address = ZERO_ADDRESS

    def to_units(self, amount: Decimal | str | int) -> int:
        """Convert a human-readable amount into raw integer units.

        Digits beyond ``decimals`` are truncated.

        Raises:
            ValueError: If amount is negative or not a number
        """
        try:
            value = Decimal(amount)
        except decimal.InvalidOperation as err:
            raise ValueError(f"Invalid token amount: {amount!r}") from err
        if not value.is_finite() or value < 0:
            raise ValueError(f"Token amount must be a non-negative number: {amount!r}")

        with decimal.localcontext(DECIMAL_ROUND_DOWN_CONTEXT):
            scaled = value.scaleb(self.decimals)
            return int(scaled.to_integral_value(rounding=ROUND_DOWN))

    def from_units(self, raw: int) -> Decimal:
        """Convert raw integer units into a fixed-point Decimal."""
        return fixed_point(raw, self.decimals)

    def __str__(self) -> str:
        return f"{self.symbol} ({self.chain})"
