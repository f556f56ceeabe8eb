"""PumpSwap instruction builders.

Buy and sell instruction data is the 8-byte Anchor discriminator followed
by two little-endian u64 arguments:

    buy:  base_amount_out,  max_quote_amount_in
    sell: base_amount_in,   min_quote_amount_out

Every builder takes the pool address explicitly.
"""

from __future__ import annotations

import struct

from solders.compute_budget import set_compute_unit_limit, set_compute_unit_price
from solders.instruction import AccountMeta, Instruction

from pumpswap.addresses import get_associated_token_address, parse_pubkey
from pumpswap.constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    BUY_DISCRIMINATOR,
    EVENT_AUTHORITY,
    FEE_RECIPIENT,
    FEE_RECIPIENT_ATA,
    GLOBAL_CONFIG,
    PUMP_AMM_PROGRAM_ID,
    SELL_DISCRIMINATOR,
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from pumpswap.safe_int import S

# Associated token program instruction index for CreateIdempotent
CREATE_ATA_IDEMPOTENT = 1

_U64_PAIR = struct.Struct("<QQ")


def encode_swap_data(discriminator: bytes, first: int, second: int) -> bytes:
    """Discriminator followed by two u64 arguments.

    Raises:
        U64Overflow: If either argument does not fit a u64
    """
    return discriminator + _U64_PAIR.pack(S(first).to_u64(), S(second).to_u64())


def _swap_accounts(pool: str, user: str, mint: str) -> list[AccountMeta]:
    # The user signs and pays, so it must be the transaction fee payer or a co-signer
    user_ata = get_associated_token_address(user, mint)
    return [
        AccountMeta(parse_pubkey(pool), is_signer=False, is_writable=True),
        AccountMeta(parse_pubkey(user), is_signer=True, is_writable=True),
        AccountMeta(parse_pubkey(user_ata), is_signer=False, is_writable=True),
        AccountMeta(parse_pubkey(GLOBAL_CONFIG), is_signer=False, is_writable=False),
        AccountMeta(parse_pubkey(EVENT_AUTHORITY), is_signer=False, is_writable=False),
        AccountMeta(parse_pubkey(FEE_RECIPIENT), is_signer=False, is_writable=True),
        AccountMeta(parse_pubkey(FEE_RECIPIENT_ATA), is_signer=False, is_writable=True),
        AccountMeta(parse_pubkey(TOKEN_PROGRAM_ID), is_signer=False, is_writable=False),
        AccountMeta(parse_pubkey(ASSOCIATED_TOKEN_PROGRAM_ID), is_signer=False, is_writable=False),
        AccountMeta(parse_pubkey(SYSTEM_PROGRAM_ID), is_signer=False, is_writable=False),
    ]


def build_buy_instruction(
    pool: str,
    user: str,
    mint: str,
    base_amount_out: int,
    max_quote_amount_in: int,
) -> Instruction:
    """Buy at least `base_amount_out` tokens for at most `max_quote_amount_in` lamports."""
    return Instruction(
        parse_pubkey(PUMP_AMM_PROGRAM_ID),
        encode_swap_data(BUY_DISCRIMINATOR, base_amount_out, max_quote_amount_in),
        _swap_accounts(pool, user, mint),
    )


def build_sell_instruction(
    pool: str,
    user: str,
    mint: str,
    base_amount_in: int,
    min_quote_amount_out: int,
) -> Instruction:
    """Sell `base_amount_in` tokens for at least `min_quote_amount_out` lamports."""
    return Instruction(
        parse_pubkey(PUMP_AMM_PROGRAM_ID),
        encode_swap_data(SELL_DISCRIMINATOR, base_amount_in, min_quote_amount_out),
        _swap_accounts(pool, user, mint),
    )


def build_create_ata_idempotent_instruction(payer: str, owner: str, mint: str) -> Instruction:
    """Create the owner's associated token account if it does not exist yet."""
    ata = get_associated_token_address(owner, mint)
    return Instruction(
        parse_pubkey(ASSOCIATED_TOKEN_PROGRAM_ID),
        bytes([CREATE_ATA_IDEMPOTENT]),
        [
            AccountMeta(parse_pubkey(payer), is_signer=True, is_writable=True),
            AccountMeta(parse_pubkey(ata), is_signer=False, is_writable=True),
            AccountMeta(parse_pubkey(owner), is_signer=False, is_writable=False),
            AccountMeta(parse_pubkey(mint), is_signer=False, is_writable=False),
            AccountMeta(parse_pubkey(SYSTEM_PROGRAM_ID), is_signer=False, is_writable=False),
            AccountMeta(parse_pubkey(TOKEN_PROGRAM_ID), is_signer=False, is_writable=False),
        ],
    )


def build_compute_budget_instructions(units: int, micro_lamports: int) -> list[Instruction]:
    """Compute unit limit and price instructions, in that order."""
    return [set_compute_unit_limit(units), set_compute_unit_price(micro_lamports)]
