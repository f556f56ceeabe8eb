"""Slippage bounds for PumpSwap trades.

Both trade directions express slippage as the minimum acceptable receipt:
buys protect the base tokens received, sells protect the quote received.
The bound shrinks the ideal amount toward zero and is floor-rounded.
"""

from pumpswap.constants import BPS_DENOMINATOR
from pumpswap.errors import InvalidAmountError, InvalidSlippageError
from pumpswap.safe_int import S


def validate_slippage_bps(bps: int) -> int:
    """Validate a slippage tolerance in basis points.

    Raises:
        InvalidSlippageError: If bps is not an int in [0, 10000]
    """
    if isinstance(bps, bool) or not isinstance(bps, int):
        raise InvalidSlippageError(f"Slippage must be an integer number of bps, got {bps!r}")
    if bps < 0 or bps > BPS_DENOMINATOR:
        raise InvalidSlippageError(
            f"Invalid slippage {bps} (must be 0-{BPS_DENOMINATOR} basis points)"
        )
    return bps


def apply_slippage(ideal_amount: int, bps: int) -> int:
    """Shrink an ideal receipt by a slippage tolerance.

    bounded = floor(ideal_amount * (10000 - bps) / 10000)

    Args:
        ideal_amount: Zero-slippage amount from the quoter (raw units)
        bps: Tolerance in basis points, 0 (none) to 10000 (anything goes)

    Returns:
        Minimum acceptable amount (raw units)

    Raises:
        InvalidSlippageError: If bps is outside [0, 10000]
        InvalidAmountError: If ideal_amount is negative
    """
    validate_slippage_bps(bps)
    if ideal_amount < 0:
        raise InvalidAmountError(f"Ideal amount cannot be negative: {ideal_amount}")

    return (S(ideal_amount) * S(BPS_DENOMINATOR - bps) // S(BPS_DENOMINATOR)).value


def apply_slippage_buy(ideal_base_out: int, bps: int) -> int:
    """Minimum base tokens accepted for a buy."""
    return apply_slippage(ideal_base_out, bps)


def apply_slippage_sell(ideal_quote_out: int, bps: int) -> int:
    """Minimum quote tokens accepted for a sell."""
    return apply_slippage(ideal_quote_out, bps)
