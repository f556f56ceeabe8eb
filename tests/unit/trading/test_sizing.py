"""Tests for human-unit to raw-unit conversion."""

from decimal import Decimal

import pytest

from pumpswap.errors import InsufficientBalanceError, InvalidAmountError
from pumpswap.trading.sizing import (
    resolve_percentage_amount,
    resolve_percentage_raw,
    sol_to_lamports,
    to_raw_amount,
)


class TestToRawAmount:
    """Tests for to_raw_amount."""

    def test_whole_amount(self):
        assert to_raw_amount(1, 6) == 1_000_000

    def test_float_uses_decimal_repr(self):
        """0.1 SOL is exactly 100_000_000 lamports, not 99_999_999."""
        assert to_raw_amount(0.1, 9) == 100_000_000
        assert to_raw_amount(0.3, 6) == 300_000

    def test_truncates_excess_precision(self):
        assert to_raw_amount("1.9999999", 6) == 1_999_999
        assert to_raw_amount(Decimal("0.0000001"), 6) == 0

    def test_zero(self):
        assert to_raw_amount(0, 6) == 0

    @pytest.mark.parametrize("amount", [-1, -0.5, float("nan"), float("inf"), "abc"])
    def test_invalid_amounts_rejected(self, amount):
        with pytest.raises(InvalidAmountError):
            to_raw_amount(amount, 6)


class TestSolToLamports:
    """Tests for sol_to_lamports."""

    def test_one_sol(self):
        assert sol_to_lamports(1) == 1_000_000_000

    def test_fractional_sol(self):
        assert sol_to_lamports(0.25) == 250_000_000


class TestResolvePercentage:
    """Tests for percentage-of-balance sells."""

    def test_half_balance(self):
        assert resolve_percentage_amount(2.0, 50) == 1.0

    def test_full_balance(self):
        assert resolve_percentage_amount(123.5, 100) == 123.5

    @pytest.mark.parametrize("percentage", [0, -10, 100.01, 150])
    def test_out_of_range_percentage_rejected(self, percentage):
        with pytest.raises(InvalidAmountError):
            resolve_percentage_amount(10.0, percentage)

    def test_empty_balance_rejected(self):
        with pytest.raises(InsufficientBalanceError):
            resolve_percentage_amount(0.0, 50)


class TestResolvePercentageRaw:
    """Tests for resolve_percentage_raw."""

    def test_full_balance_beyond_float_precision(self):
        """2**53 + 7 is not a float; the whole balance is still returned."""
        raw = 2**53 + 7
        assert resolve_percentage_raw(raw, 100) == raw

    def test_fraction_floors(self):
        assert resolve_percentage_raw(1_000_001, 50) == 500_000
        assert resolve_percentage_raw(1_000_000, 33.3) == 333_000

    def test_never_exceeds_balance(self):
        raw = 9_007_199_254_740_999
        for percentage in (99.9999, 100.0):
            assert resolve_percentage_raw(raw, percentage) <= raw

    @pytest.mark.parametrize("percentage", [0, -5, 100.01])
    def test_out_of_range_percentage_rejected(self, percentage):
        with pytest.raises(InvalidAmountError):
            resolve_percentage_raw(1_000_000, percentage)

    def test_empty_balance_rejected(self):
        with pytest.raises(InsufficientBalanceError):
            resolve_percentage_raw(0, 50)
