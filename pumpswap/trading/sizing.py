"""Trade sizing: human-unit amounts to raw integer units.

Conversion goes through Decimal with a high-precision context and truncates
toward zero, so a float display amount never rounds a trade up.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_DOWN, Decimal

from pumpswap.constants import SOL_DECIMALS
from pumpswap.errors import InsufficientBalanceError, InvalidAmountError

# Enough digits for any u64 amount scaled by up to 10^30
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=60)


def to_raw_amount(amount: float | int | str | Decimal, decimals: int) -> int:
    """Convert a human amount to raw units, truncating any remainder.

    Floats are converted via their shortest repr, so 0.1 becomes exactly
    Decimal("0.1") rather than its binary expansion.

    Raises:
        InvalidAmountError: If the amount is negative or not a finite number
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except decimal.InvalidOperation as err:
        raise InvalidAmountError(f"Not a number: {amount!r}") from err
    if not value.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {amount!r}")
    if value < 0:
        raise InvalidAmountError(f"Amount cannot be negative: {amount!r}")

    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        scaled = (value * (Decimal(10) ** decimals)).quantize(Decimal(1), rounding=ROUND_DOWN)
    return int(scaled)


def sol_to_lamports(sol: float | int | str | Decimal) -> int:
    """Whole SOL to lamports (truncating)."""
    return to_raw_amount(sol, SOL_DECIMALS)


def resolve_percentage_amount(balance: float, percentage: float) -> float:
    """Amount to sell for a percentage of the current balance.

    Args:
        balance: Current token balance in human units
        percentage: Share of the balance to sell, in (0, 100]

    Returns:
        balance * percentage / 100

    Raises:
        InvalidAmountError: If percentage is outside (0, 100]
        InsufficientBalanceError: If the balance is zero
    """
    if not 0 < percentage <= 100:
        raise InvalidAmountError(f"Percentage must be between 0 and 100, got {percentage}")
    if balance <= 0:
        raise InsufficientBalanceError("No tokens to sell")
    return balance * percentage / 100


def resolve_percentage_raw(raw_balance: int, percentage: float) -> int:
    """Raw units to sell for a percentage of a raw balance.

    Computed in Decimal and floored, so the result never exceeds the
    balance however large it is.

    Raises:
        InvalidAmountError: If percentage is outside (0, 100]
        InsufficientBalanceError: If the balance is zero
    """
    if not 0 < percentage <= 100:
        raise InvalidAmountError(f"Percentage must be between 0 and 100, got {percentage}")
    if raw_balance <= 0:
        raise InsufficientBalanceError("No tokens to sell")

    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        share = Decimal(raw_balance) * Decimal(str(percentage)) / 100
        amount = int(share.quantize(Decimal(1), rounding=ROUND_DOWN))
    return min(amount, raw_balance)
