"""Trade preparation, instruction building and submission."""

from pumpswap.trading.instructions import (
    build_buy_instruction,
    build_compute_budget_instructions,
    build_create_ata_idempotent_instruction,
    build_sell_instruction,
    encode_swap_data,
)
from pumpswap.trading.sdk import PumpSwapSDK, create_sdk
from pumpswap.trading.sizing import (
    resolve_percentage_amount,
    resolve_percentage_raw,
    sol_to_lamports,
    to_raw_amount,
)
from pumpswap.trading.submission import RpcTransactionSubmitter, TransactionSubmitter

__all__ = [
    "PumpSwapSDK",
    "create_sdk",
    "TransactionSubmitter",
    "RpcTransactionSubmitter",
    "build_buy_instruction",
    "build_sell_instruction",
    "build_create_ata_idempotent_instruction",
    "build_compute_budget_instructions",
    "encode_swap_data",
    "resolve_percentage_amount",
    "resolve_percentage_raw",
    "sol_to_lamports",
    "to_raw_amount",
]
