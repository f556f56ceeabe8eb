"""Value objects and request/response models for the PumpSwap SDK."""

from pumpswap.models.pool import PoolAccount, PoolInfo, PoolRecord, PoolWithPrice, Reserves
from pumpswap.models.trade import (
    BasisPoints,
    BuyParams,
    PreparedTrade,
    SellParams,
    TradeQuote,
    TradeSide,
    TransactionResult,
)

__all__ = [
    # Pools
    "PoolAccount",
    "PoolRecord",
    "PoolWithPrice",
    "PoolInfo",
    "Reserves",
    # Trades
    "BasisPoints",
    "BuyParams",
    "SellParams",
    "TradeSide",
    "TradeQuote",
    "PreparedTrade",
    "TransactionResult",
]
