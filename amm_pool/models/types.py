"""Shared type definitions for token and pool models."""

from typing import Annotated, Any

from pydantic import AfterValidator

from amm_pool.safe_int import UINT256_MAX

ZERO_ADDRESS = "0x" + "00" * 20


def validate_uint256(value: Any) -> int:
    """Validate that a value is a non-negative integer within uint256.

    Accepts ints and decimal strings (large reserves are often carried as
    strings in JSON).

    Raises:
        ValueError: If value is not a valid non-negative integer within uint256 range
    """
    if isinstance(value, bool):
        raise ValueError("Uint256 cannot be a bool")

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err

    if not isinstance(value, int):
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")
    return value


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase with 0x prefix.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a 20-byte hex address (0x + 40 hex chars)."""
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def _normalize_and_validate(address: str) -> str:
    return normalize_address(address, validate=True)


# 20-byte address, stored lowercase
Address = Annotated[str, AfterValidator(_normalize_and_validate)]
