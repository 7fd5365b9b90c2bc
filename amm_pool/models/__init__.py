"""Token identity models."""

from amm_pool.models.token import ERC20Token
from amm_pool.models.types import ZERO_ADDRESS, Address, is_valid_address, normalize_address

__all__ = [
    "Address",
    "ZERO_ADDRESS",
    "ERC20Token",
    "is_valid_address",
    "normalize_address",
]
