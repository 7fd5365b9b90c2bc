"""Pool implementations behind the shared Pool capability."""

from amm_pool.pools.base import Pool, SwapResult
from amm_pool.pools.constant_product import ConstantProductPool

__all__ = [
    "Pool",
    "SwapResult",
    "ConstantProductPool",
]
