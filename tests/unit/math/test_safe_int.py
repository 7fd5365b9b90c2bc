"""Tests for SafeInt checked uint256 arithmetic."""

import pytest

from amm_pool.safe_int import (
    UINT256_MAX,
    DivisionByZero,
    S,
    SafeInt,
    SafeIntError,
    Uint256Overflow,
    Underflow,
)


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        """SafeInt can be constructed from another SafeInt."""
        assert SafeInt(SafeInt(42)).value == 42

    def test_bounds(self):
        """Zero and the uint256 maximum are both valid."""
        assert SafeInt(0).value == 0
        assert SafeInt(UINT256_MAX).value == UINT256_MAX

    def test_negative_raises(self):
        with pytest.raises(Underflow):
            SafeInt(-1)

    def test_above_max_raises(self):
        with pytest.raises(Uint256Overflow):
            SafeInt(UINT256_MAX + 1)

    def test_invalid_type_raises(self):
        """SafeInt rejects non-integers, including bool."""
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)

    def test_alias_s(self):
        assert S is SafeInt

    def test_zero_and_from_str(self):
        assert SafeInt.zero().value == 0
        assert SafeInt.from_str("6770398782322527849696614").value == 6770398782322527849696614
        with pytest.raises(ValueError):
            SafeInt.from_str("not a number")


class TestSafeIntArithmetic:
    """Tests for SafeInt arithmetic operations."""

    def test_add(self):
        assert (S(10) + S(5)).value == 15
        assert (S(10) + 5).value == 15
        assert (5 + S(10)).value == 15

    def test_add_overflow(self):
        with pytest.raises(Uint256Overflow):
            S(UINT256_MAX) + 1

    def test_sub(self):
        assert (S(10) - S(3)).value == 7
        assert (10 - S(3)).value == 7

    def test_sub_underflow(self):
        with pytest.raises(Underflow):
            S(3) - S(10)
        with pytest.raises(Underflow):
            3 - S(10)

    def test_mul(self):
        assert (S(6) * S(7)).value == 42
        assert (6 * S(7)).value == 42

    def test_mul_overflow(self):
        """Products beyond uint256 raise instead of wrapping."""
        with pytest.raises(Uint256Overflow):
            S(2**128) * S(2**128)
        assert (S(2**128) * S(2**127)).value == 2**255

    def test_floordiv_truncates(self):
        assert (S(7) // S(2)).value == 3
        assert (S(2) // S(3)).value == 0
        assert (7 // S(2)).value == 3

    def test_floordiv_by_zero(self):
        with pytest.raises(DivisionByZero):
            S(1) // S(0)
        with pytest.raises(DivisionByZero):
            1 // S(0)

    def test_pow(self):
        assert (S(10) ** 18).value == 10**18
        assert (S(10) ** 77).value == 10**77
        assert (S(0) ** 0).value == 1

    def test_pow_overflow(self):
        with pytest.raises(Uint256Overflow):
            S(10) ** 78
        with pytest.raises(Uint256Overflow):
            S(2) ** 256

    def test_large_chain(self):
        """uint256-scale chains stay exact."""
        big = 6_770_398_782_322_527_849_696_614
        result = (S(big) * S(10**18)) // S(3)
        assert result.value == big * 10**18 // 3


class TestSafeIntErrors:
    """All SafeInt errors are ArithmeticErrors."""

    @pytest.mark.parametrize("error", [DivisionByZero, Underflow, Uint256Overflow])
    def test_error_hierarchy(self, error):
        assert issubclass(error, SafeIntError)
        assert issubclass(error, ArithmeticError)


class TestSafeIntComparison:
    """Tests for comparisons and conversions."""

    def test_comparisons(self):
        assert S(1) < S(2)
        assert S(2) <= 2
        assert S(3) > 2
        assert S(3) >= S(3)
        assert S(5) == 5
        assert S(5) != S(6)

    def test_conversions(self):
        assert int(S(5)) == 5
        assert bool(S(0)) is False
        assert bool(S(1)) is True
        assert str(S(12)) == "12"
        assert repr(S(12)) == "SafeInt(12)"
        assert [0, 1, 2][S(1)] == 1
