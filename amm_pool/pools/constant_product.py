"""Constant-product (Uniswap V2 style) pool.

The pool holds reserves x and y and prices trades so that x * y stays
constant, net of a fee taken from the input amount:

    amount_out = (in * (D - N) * y) / (x * D + in * (D - N))

where N / D is the fee fraction (30000 / 10000000 = 0.3% by default).
All arithmetic is checked uint256 integer math (see amm_pool.safe_int).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import ClassVar

import structlog

from amm_pool.config import (
    DEFAULT_FEE_DENOMINATOR,
    DEFAULT_FEE_NUMERATOR,
    DEFAULT_POOL_CONFIG,
    PoolConfig,
    validate_fee,
)
from amm_pool.decimal_utils import fixed_point
from amm_pool.errors import InvariantViolation, TokenNotInPoolError
from amm_pool.models.token import ERC20Token
from amm_pool.models.types import normalize_address, validate_uint256
from amm_pool.pools.base import SwapResult
from amm_pool.safe_int import S, SafeInt

logger = structlog.get_logger()


@dataclass(frozen=True)
class ConstantProductPool:
    """Two-token pool priced by the constant-product formula.

    Instances are immutable. Trades return a new pool with updated reserves;
    the address, tokens and fee carry over unchanged.
    """

    FEE_NUMERATOR: ClassVar[int] = DEFAULT_FEE_NUMERATOR
    FEE_DENOMINATOR: ClassVar[int] = DEFAULT_FEE_DENOMINATOR

    address: str
    token_0: ERC20Token
    token_1: ERC20Token
    # Keyed by token symbol; stored as a read-only copy
    reserves: Mapping[str, int]
    fee_numerator: int = field(default=DEFAULT_FEE_NUMERATOR)
    fee_denominator: int = field(default=DEFAULT_FEE_DENOMINATOR)

    def __post_init__(self) -> None:
        if self.token_0.symbol == self.token_1.symbol:
            raise ValueError(
                f"Pool tokens must have distinct symbols, both are {self.token_0.symbol!r}"
            )

        expected = {self.token_0.symbol, self.token_1.symbol}
        if set(self.reserves) != expected:
            raise ValueError(
                f"Reserves must have exactly the keys {sorted(expected)}, "
                f"got {sorted(self.reserves)}"
            )

        validate_fee(self.fee_numerator, self.fee_denominator)

        reserves = {symbol: validate_uint256(amount) for symbol, amount in self.reserves.items()}
        object.__setattr__(self, "reserves", MappingProxyType(reserves))
        object.__setattr__(self, "address", normalize_address(self.address, validate=True))

    def __hash__(self) -> int:
        return hash(
            (
                self.address,
                self.token_0,
                self.token_1,
                tuple(sorted(self.reserves.items())),
                self.fee_numerator,
                self.fee_denominator,
            )
        )

    @classmethod
    def from_reserves(
        cls,
        address: str,
        token_0: ERC20Token,
        reserve_0: int,
        token_1: ERC20Token,
        reserve_1: int,
        config: PoolConfig | None = None,
    ) -> ConstantProductPool:
        """Build a pool from two tokens and their initial reserves."""
        config = config or DEFAULT_POOL_CONFIG
        return cls(
            address=address,
            token_0=token_0,
            token_1=token_1,
            reserves={token_0.symbol: reserve_0, token_1.symbol: reserve_1},
            fee_numerator=config.fee_numerator,
            fee_denominator=config.fee_denominator,
        )

    # --- Lookups ---

    def reserve_of(self, token: ERC20Token) -> int:
        """Reserve of ``token``.

        Raises:
            TokenNotInPoolError: If the token's symbol has no reserve entry
        """
        try:
            return self.reserves[token.symbol]
        except KeyError:
            logger.debug("pool_lookup_failed", pool=self.address, symbol=token.symbol)
            raise TokenNotInPoolError(token.symbol, self.address) from None

    def other_token(self, token: ERC20Token) -> ERC20Token:
        """The counterpart of ``token`` in this pool."""
        if token.symbol == self.token_0.symbol:
            return self.token_1
        if token.symbol == self.token_1.symbol:
            return self.token_0
        raise TokenNotInPoolError(token.symbol, self.address)

    def _trade_reserves(
        self, sell_token: ERC20Token, buy_token: ERC20Token
    ) -> tuple[SafeInt, SafeInt]:
        """Reserves ordered as (reserve_sell, reserve_buy)."""
        reserve_sell = self.reserve_of(sell_token)
        reserve_buy = self.reserve_of(buy_token)
        if sell_token.symbol == buy_token.symbol:
            raise ValueError(f"Cannot trade {sell_token.symbol} for itself")
        return S(reserve_sell), S(reserve_buy)

    def _with_reserves(self, reserves: dict[str, int]) -> ConstantProductPool:
        return dataclasses.replace(self, reserves=reserves)

    # --- Pool capability ---

    def spot_price(self, a: ERC20Token, b: ERC20Token) -> Decimal:
        """Price of ``a`` in units of ``b``, floored to ``b.decimals`` fractional digits.

        Computed as reserve(a) * 10**b.decimals // reserve(b) and read back as
        a fixed-point value, so the result is exact and never rounded up.

        Raises:
            TokenNotInPoolError: If either token is not in the pool
            DivisionByZero: If reserve(b) is zero
        """
        reserve_a = S(self.reserve_of(a))
        reserve_b = S(self.reserve_of(b))

        raw = (reserve_a * (S(10) ** b.decimals)) // reserve_b
        return fixed_point(raw.value, b.decimals)

    def fee(self, a: ERC20Token, b: ERC20Token) -> float:
        """Fee fraction (0.003 by default), the same for every pair and direction.

        Display only: trade math uses the integer numerator and denominator.
        """
        return self.fee_numerator / self.fee_denominator

    def get_amount_out(
        self,
        sell_amount: int,
        sell_token: ERC20Token,
        buy_token: ERC20Token,
    ) -> tuple[int, ConstantProductPool]:
        """Simulate selling ``sell_amount`` of ``sell_token`` (exact input).

        Args:
            sell_amount: Raw amount of sell_token to sell
            sell_token: Token paid into the pool
            buy_token: Token paid out of the pool

        Returns:
            Tuple of (amount_out, updated_pool). ``self`` is not modified.

        Raises:
            ValueError: If sell_amount is negative or both tokens are the same
            TokenNotInPoolError: If either token is not in the pool
            Uint256Overflow: If an intermediate product exceeds uint256
            DivisionByZero: If both sell_amount and reserve(sell_token) are zero
            InvariantViolation: If the output would drain the buy reserve
        """
        if sell_amount < 0:
            raise ValueError(f"Sell amount cannot be negative: {sell_amount}")

        reserve_sell, reserve_buy = self._trade_reserves(sell_token, buy_token)
        amount_in = S(sell_amount)

        sell_amount_less_fee = amount_in * S(self.fee_denominator - self.fee_numerator)
        numerator = sell_amount_less_fee * reserve_buy
        denominator = reserve_sell * S(self.fee_denominator) + sell_amount_less_fee

        amount_out = numerator // denominator

        if amount_out > 0 and amount_out >= reserve_buy:
            logger.warning(
                "pool_invariant_violation",
                pool=self.address,
                sell_token=sell_token.symbol,
                buy_token=buy_token.symbol,
                amount_in=sell_amount,
                amount_out=amount_out.value,
                reserve_buy=reserve_buy.value,
            )
            raise InvariantViolation(
                f"Output {amount_out} would drain {buy_token.symbol} reserve {reserve_buy}"
            )

        updated_pool = self._with_reserves(
            {
                sell_token.symbol: (reserve_sell + amount_in).value,
                buy_token.symbol: (reserve_buy - amount_out).value,
            }
        )

        logger.debug(
            "pool_swap_simulated",
            pool=self.address,
            sell_token=sell_token.symbol,
            buy_token=buy_token.symbol,
            amount_in=sell_amount,
            amount_out=amount_out.value,
        )

        return amount_out.value, updated_pool

    def get_amount_in(
        self,
        buy_amount: int,
        sell_token: ERC20Token,
        buy_token: ERC20Token,
    ) -> tuple[int, ConstantProductPool]:
        """Simulate buying ``buy_amount`` of ``buy_token`` (exact output).

        Formula: amount_in = (res_sell * out * D) / ((res_buy - out) * (D - N)) + 1

        The required input is rounded up; the returned pool is the result of
        selling that input through get_amount_out, so it may pay out slightly
        more than ``buy_amount``.

        Returns:
            Tuple of (amount_in, updated_pool)

        Raises:
            ValueError: If buy_amount is negative or both tokens are the same
            TokenNotInPoolError: If either token is not in the pool
            InvariantViolation: If buy_amount is not below reserve(buy_token)
        """
        if buy_amount < 0:
            raise ValueError(f"Buy amount cannot be negative: {buy_amount}")

        reserve_sell, reserve_buy = self._trade_reserves(sell_token, buy_token)
        if buy_amount == 0:
            return 0, self._with_reserves(dict(self.reserves))
        if reserve_buy <= buy_amount:
            raise InvariantViolation(
                f"Cannot buy {buy_amount} {buy_token.symbol}, reserve is {reserve_buy}"
            )

        numerator = reserve_sell * S(buy_amount) * S(self.fee_denominator)
        denominator = (reserve_buy - S(buy_amount)) * S(self.fee_denominator - self.fee_numerator)
        amount_in = ((numerator // denominator) + S(1)).value

        _, updated_pool = self.get_amount_out(amount_in, sell_token, buy_token)
        return amount_in, updated_pool

    def simulate_swap(
        self,
        sell_amount: int,
        sell_token: ERC20Token,
        buy_token: ERC20Token,
    ) -> SwapResult:
        """Simulate an exact-input swap and package it as a SwapResult."""
        amount_out, updated_pool = self.get_amount_out(sell_amount, sell_token, buy_token)
        return SwapResult(
            amount_in=sell_amount,
            amount_out=amount_out,
            pool_address=self.address,
            token_in=sell_token.symbol,
            token_out=buy_token.symbol,
            pool=updated_pool,
        )

    def inertia(self, a: ERC20Token, b: ERC20Token) -> int:
        """Always zero: the constant-product curve has no concentrated liquidity.

        Reserved for curves whose liquidity depends on the trading path.
        """
        return 0


__all__ = ["ConstantProductPool"]
