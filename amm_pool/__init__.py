"""Pricing and trade simulation for constant-product AMM pools."""

from amm_pool.config import DEFAULT_POOL_CONFIG, PoolConfig
from amm_pool.errors import InvariantViolation, PoolSimulationError, TokenNotInPoolError
from amm_pool.models import ERC20Token
from amm_pool.pools import ConstantProductPool, Pool, SwapResult

__version__ = "0.1.0"
__all__ = [
    "ConstantProductPool",
    "DEFAULT_POOL_CONFIG",
    "ERC20Token",
    "InvariantViolation",
    "Pool",
    "PoolConfig",
    "PoolSimulationError",
    "SwapResult",
    "TokenNotInPoolError",
    "__version__",
]
