"""Pool error classes.

Arithmetic failures (overflow, division by zero) are raised by
amm_pool.safe_int and derive from ArithmeticError.
"""


class PoolSimulationError(Exception):
    """Base error for pool operations."""

    pass


class TokenNotInPoolError(PoolSimulationError, LookupError):
    """Token symbol has no entry in the pool's reserves."""

    def __init__(self, symbol: str, pool_address: str) -> None:
        super().__init__(f"Token {symbol!r} not in pool {pool_address}")
        self.symbol = symbol
        self.pool_address = pool_address


class InvariantViolation(PoolSimulationError):
    """Trade output would meet or exceed the reserve of the output token."""

    pass
