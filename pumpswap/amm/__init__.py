"""AMM (Automated Market Maker) quote math."""

from pumpswap.amm.constant_product import (
    ConstantProduct,
    HasReserves,
    constant_product,
    quote_buy,
    quote_sell,
)
from pumpswap.amm.slippage import (
    apply_slippage,
    apply_slippage_buy,
    apply_slippage_sell,
    validate_slippage_bps,
)

__all__ = [
    # Constant product
    "ConstantProduct",
    "HasReserves",
    "constant_product",
    "quote_buy",
    "quote_sell",
    # Slippage
    "apply_slippage",
    "apply_slippage_buy",
    "apply_slippage_sell",
    "validate_slippage_bps",
]
