"""Tests for slippage bounds."""

import pytest

from pumpswap.amm.slippage import (
    apply_slippage,
    apply_slippage_buy,
    apply_slippage_sell,
    validate_slippage_bps,
)
from pumpswap.errors import InvalidAmountError, InvalidSlippageError


class TestApplySlippage:
    """Tests for apply_slippage."""

    def test_default_tolerance(self):
        """500 bps shrinks by exactly 5%, floor-rounded."""
        assert apply_slippage(9_803_922, 500) == 9_313_725

    def test_zero_bps_is_identity(self):
        assert apply_slippage(9_803_922, 0) == 9_803_922

    def test_full_bps_is_zero(self):
        assert apply_slippage(9_803_922, 10_000) == 0

    def test_floor_rounding(self):
        """1 * 9999 / 10000 floors to 0."""
        assert apply_slippage(1, 1) == 0
        assert apply_slippage(10_001, 1) == 9_999

    def test_monotone_in_bps(self):
        """Larger tolerance never yields a larger bound."""
        ideal = 123_456_789
        bounds = [apply_slippage(ideal, bps) for bps in range(0, 10_001, 250)]
        assert bounds == sorted(bounds, reverse=True)
        assert all(b <= ideal for b in bounds)

    def test_buy_and_sell_share_formula(self):
        assert apply_slippage_buy(1_000_000, 300) == 970_000
        assert apply_slippage_sell(1_000_000, 300) == 970_000

    def test_negative_ideal_raises(self):
        with pytest.raises(InvalidAmountError):
            apply_slippage(-1, 500)


class TestValidateSlippage:
    """Tests for slippage validation."""

    def test_bounds_accepted(self):
        assert validate_slippage_bps(0) == 0
        assert validate_slippage_bps(10_000) == 10_000

    @pytest.mark.parametrize("bps", [-1, 10_001, 50_000])
    def test_out_of_range_rejected(self, bps):
        with pytest.raises(InvalidSlippageError):
            validate_slippage_bps(bps)

    @pytest.mark.parametrize("bps", [5.0, "500", True, None])
    def test_non_integer_rejected(self, bps):
        with pytest.raises(InvalidSlippageError):
            validate_slippage_bps(bps)

    def test_apply_rejects_invalid_bps(self):
        with pytest.raises(InvalidSlippageError):
            apply_slippage(1_000, 10_001)

    def test_error_is_value_error(self):
        """Callers can catch slippage errors as ValueError."""
        with pytest.raises(ValueError):
            validate_slippage_bps(-5)
