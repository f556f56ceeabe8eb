"""Solana RPC access for the PumpSwap SDK."""

from pumpswap.rpc.client import (
    AccountFilter,
    AccountSource,
    DataSizeFilter,
    KeyedAccount,
    MemcmpFilter,
    SolanaRpcClient,
    WalletSource,
    validate_connection,
)

__all__ = [
    "AccountFilter",
    "AccountSource",
    "DataSizeFilter",
    "KeyedAccount",
    "MemcmpFilter",
    "SolanaRpcClient",
    "WalletSource",
    "validate_connection",
]
