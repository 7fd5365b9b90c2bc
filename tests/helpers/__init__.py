"""Test helpers module for shared test utilities.

- constants: Tokens, reserves and literal trade values
- factories: Pool factory functions
"""

from tests.helpers.constants import (
    REAL_AMOUNT_OUT,
    REAL_RESERVE_0,
    REAL_RESERVE_1,
    REAL_SELL_AMOUNT,
    RESERVE_0,
    RESERVE_1,
    TOKEN_0,
    TOKEN_1,
    USDC,
    WETH,
    WETH_USDC_POOL,
    ZERO,
)
from tests.helpers.factories import make_pool

__all__ = [
    # Constants
    "ZERO",
    "TOKEN_0",
    "TOKEN_1",
    "RESERVE_0",
    "RESERVE_1",
    "WETH",
    "USDC",
    "WETH_USDC_POOL",
    "REAL_RESERVE_0",
    "REAL_RESERVE_1",
    "REAL_SELL_AMOUNT",
    "REAL_AMOUNT_OUT",
    # Factories
    "make_pool",
]
