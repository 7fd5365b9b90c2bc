"""Pytest configuration and fixtures."""

import pytest
import structlog

from amm_pool.pools import ConstantProductPool
from tests.helpers import (
    REAL_RESERVE_0,
    REAL_RESERVE_1,
    USDC,
    WETH,
    WETH_USDC_POOL,
    make_pool,
)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test installs (e.g. via the CLI)."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def test_pool() -> ConstantProductPool:
    """Pool with reserves 15e9 / 10e9 of two 18-decimal tokens."""
    return make_pool()


@pytest.fixture
def real_pool() -> ConstantProductPool:
    """Pool with reserves taken from a live mainnet pair."""
    return make_pool(reserve_0=REAL_RESERVE_0, reserve_1=REAL_RESERVE_1)


@pytest.fixture
def weth_usdc_pool() -> ConstantProductPool:
    """A WETH/USDC pool with reasonable reserves."""
    return ConstantProductPool.from_reserves(
        WETH_USDC_POOL,
        WETH,
        10_000 * 10**18,  # 10,000 WETH
        USDC,
        25_000_000 * 10**6,  # 25M USDC
    )
