"""Pool capability shared by all pricing curves."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, runtime_checkable

from amm_pool.models.token import ERC20Token


@dataclass(frozen=True)
class SwapResult:
    """Result of simulating a swap through a pool."""

    amount_in: int
    amount_out: int
    pool_address: str
    token_in: str
    token_out: str
    # Pool state after the swap
    pool: Pool


@runtime_checkable
class Pool(Protocol):
    """Pricing and trading capability of a two-token liquidity pool.

    Implementations are immutable values: operations that trade return a new
    pool carrying the post-trade reserves and leave the receiver untouched.
    Reserves are keyed by token symbol.
    """

    address: str
    token_0: ERC20Token
    token_1: ERC20Token
    reserves: Mapping[str, int]

    def spot_price(self, a: ERC20Token, b: ERC20Token) -> Decimal:
        """Price of token ``a`` quoted in token ``b``, with ``b.decimals`` fractional digits.

        Raises:
            LookupError: If either token is not in the pool
            ArithmeticError: If the quote reserve is zero
        """
        ...

    def fee(self, a: ERC20Token, b: ERC20Token) -> float:
        """Fee fraction charged on trades between ``a`` and ``b``, for display."""
        ...

    def get_amount_out(
        self,
        sell_amount: int,
        sell_token: ERC20Token,
        buy_token: ERC20Token,
    ) -> tuple[int, Pool]:
        """Simulate selling ``sell_amount`` of ``sell_token`` for ``buy_token``.

        Returns:
            Tuple of (amount_out, updated_pool)

        Raises:
            LookupError: If either token is not in the pool
            ArithmeticError: On uint256 overflow or a zero denominator
        """
        ...

    def inertia(self, a: ERC20Token, b: ERC20Token) -> int:
        """Slippage resistance beyond the base curve; zero means none."""
        ...
