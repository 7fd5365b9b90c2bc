"""Checked uint256 integer wrapper for reserve and trade arithmetic.

Python integers never wrap, but on-chain arithmetic is bounded to uint256.
SafeInt keeps every intermediate inside that range and fails loudly instead:
- Division by zero raises DivisionByZero
- Subtraction below zero raises Underflow
- Any result above 2**256 - 1 raises Uint256Overflow

All three derive from ArithmeticError.

Usage pattern:
    from amm_pool.safe_int import S

    def quote(amount: int, reserve_in: int, reserve_out: int) -> int:
        # Wrap at entry
        numerator = S(amount) * S(reserve_out)
        denominator = S(reserve_in) + S(amount)

        # Unwrap at exit
        return (numerator // denominator).value
"""

from __future__ import annotations

UINT256_MAX = 2**256 - 1


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Result would be negative."""

    pass


class Uint256Overflow(SafeIntError):
    """Result exceeds the uint256 maximum."""

    pass


def _check_range(value: int) -> int:
    if value < 0:
        raise Underflow(f"Negative value is not a uint256: {value}")
    if value > UINT256_MAX:
        raise Uint256Overflow(f"Value exceeds uint256 max: {value}")
    return value


class SafeInt:
    """Non-negative integer bounded to uint256 with checked operators.

    Every operator validates its result, so a chain such as
    ``(S(a) * S(b) + S(c)) // S(d)`` either yields a value that would also be
    produced by EVM checked math, or raises a SafeIntError.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt (bool is rejected)
            Underflow: If value is negative
            Uint256Overflow: If value exceeds 2**256 - 1
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = _check_range(value)
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        """Add two values.

        Raises:
            Uint256Overflow: If the sum exceeds uint256
        """
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply two values.

        Raises:
            Uint256Overflow: If the product exceeds uint256
        """
        other_val = _extract_value(other)
        result = self._value * other_val
        if result > UINT256_MAX:
            raise Uint256Overflow(f"Overflow: {self._value} * {other_val} exceeds uint256")
        return SafeInt(result)

    def __rmul__(self, other: int) -> SafeInt:
        return self.__mul__(other)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, truncating toward zero.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __rfloordiv__(self, other: int) -> SafeInt:
        if self._value == 0:
            raise DivisionByZero(f"Division by zero: {other} // 0")
        return SafeInt(other // self._value)

    def __pow__(self, exponent: int) -> SafeInt:
        """Raise to a non-negative integer power.

        Raises:
            Uint256Overflow: If the result exceeds uint256
        """
        if exponent < 0:
            raise ValueError(f"Negative exponent: {exponent}")
        # Bound the work before computing: bit_length grows linearly with exponent
        if self._value > 1 and (self._value.bit_length() - 1) * exponent > 256:
            raise Uint256Overflow(f"Overflow: {self._value} ** {exponent} exceeds uint256")
        return SafeInt(self._value**exponent)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    @classmethod
    def zero(cls) -> SafeInt:
        """Create a SafeInt with value 0."""
        return cls(0)

    @classmethod
    def from_str(cls, s: str) -> SafeInt:
        """Parse SafeInt from a decimal string.

        Raises:
            ValueError: If string is not a valid integer
        """
        return cls(int(s))


def _extract_value(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
