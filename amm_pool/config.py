"""Pool configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

# Uniswap V2 fee: 30000 / 10000000 = 0.3%
DEFAULT_FEE_NUMERATOR = 30_000
DEFAULT_FEE_DENOMINATOR = 10_000_000

ENV_FEE_NUMERATOR = "AMM_POOL_FEE_NUMERATOR"
ENV_FEE_DENOMINATOR = "AMM_POOL_FEE_DENOMINATOR"


@dataclass(frozen=True)
class PoolConfig:
    """Fee configuration for constant-product pools.

    The fee is kept as an integer fraction so that trade math never touches
    floating point.

    Attributes:
        fee_numerator: Fee numerator (default: 30,000)
        fee_denominator: Fee precision (default: 10,000,000)
    """

    fee_numerator: int = DEFAULT_FEE_NUMERATOR
    fee_denominator: int = DEFAULT_FEE_DENOMINATOR

    def __post_init__(self) -> None:
        validate_fee(self.fee_numerator, self.fee_denominator)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PoolConfig:
        """Build a config from environment variables, falling back to defaults.

        Raises:
            ValueError: If a variable is not an integer or the fee is invalid
        """
        env = os.environ if environ is None else environ
        return cls(
            fee_numerator=_int_from_env(env, ENV_FEE_NUMERATOR, DEFAULT_FEE_NUMERATOR),
            fee_denominator=_int_from_env(env, ENV_FEE_DENOMINATOR, DEFAULT_FEE_DENOMINATOR),
        )


def validate_fee(fee_numerator: int, fee_denominator: int) -> None:
    """Require 0 <= fee_numerator < fee_denominator.

    Raises:
        ValueError: If the fraction is out of range
    """
    if fee_denominator <= 0:
        raise ValueError(f"Fee denominator must be positive, got {fee_denominator}")
    if not 0 <= fee_numerator < fee_denominator:
        raise ValueError(
            f"Fee numerator must be in [0, {fee_denominator}), got {fee_numerator}"
        )


def _int_from_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from err


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()
