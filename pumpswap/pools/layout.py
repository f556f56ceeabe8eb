"""Account layouts read by the SDK.

PumpSwap Pool account (211 bytes, Anchor):

    offset  size  field
    0       8     discriminator  sha256("account:Pool")[:8]
    8       1     pool_bump      u8
    9       2     index          u16
    11      32    creator
    43      32    base_mint
    75      32    quote_mint
    107     32    lp_mint
    139     32    pool_base_token_account
    171     32    pool_quote_token_account
    203     8     lp_supply      u64

SPL Token account: mint (32) | owner (32) | amount u64 at offset 64.
SPL Mint: mint_authority COption (36) | supply u64 | decimals u8 at offset 44.

All integers are little-endian.
"""

import struct

from pumpswap.addresses import pubkey_from_bytes
from pumpswap.constants import POOL_ACCOUNT_DISCRIMINATOR, POOL_ACCOUNT_SIZE
from pumpswap.errors import DecodeError
from pumpswap.models.pool import PoolAccount

POOL_LAYOUT = struct.Struct("<8sBH32s32s32s32s32s32sQ")

TOKEN_ACCOUNT_MIN_SIZE = 72
TOKEN_ACCOUNT_AMOUNT_OFFSET = 64

MINT_ACCOUNT_MIN_SIZE = 82
MINT_DECIMALS_OFFSET = 44


def decode_pool_account(address: str, data: bytes) -> PoolAccount:
    """Decode a PumpSwap Pool account.

    Args:
        address: Account address the data was read from
        data: Raw account data

    Returns:
        PoolAccount with base58 addresses

    Raises:
        DecodeError: If the size or discriminator does not match
    """
    if len(data) != POOL_ACCOUNT_SIZE:
        raise DecodeError(
            f"Pool account {address} has {len(data)} bytes, expected {POOL_ACCOUNT_SIZE}"
        )

    (
        discriminator,
        pool_bump,
        index,
        creator,
        base_mint,
        quote_mint,
        lp_mint,
        base_vault,
        quote_vault,
        lp_supply,
    ) = POOL_LAYOUT.unpack(data)

    if discriminator != POOL_ACCOUNT_DISCRIMINATOR:
        raise DecodeError(f"Account {address} is not a PumpSwap pool (discriminator mismatch)")

    return PoolAccount(
        address=address,
        pool_bump=pool_bump,
        index=index,
        creator=pubkey_from_bytes(creator),
        base_mint=pubkey_from_bytes(base_mint),
        quote_mint=pubkey_from_bytes(quote_mint),
        lp_mint=pubkey_from_bytes(lp_mint),
        pool_base_token_account=pubkey_from_bytes(base_vault),
        pool_quote_token_account=pubkey_from_bytes(quote_vault),
        lp_supply=lp_supply,
    )


def decode_token_amount(address: str, data: bytes) -> int:
    """Read the raw `amount` of an SPL token account.

    Raises:
        DecodeError: If the data is too short to be a token account
    """
    if len(data) < TOKEN_ACCOUNT_MIN_SIZE:
        raise DecodeError(f"Token account {address} has only {len(data)} bytes")
    (amount,) = struct.unpack_from("<Q", data, TOKEN_ACCOUNT_AMOUNT_OFFSET)
    return amount


def decode_mint_decimals(address: str, data: bytes) -> int:
    """Read `decimals` from an SPL mint account.

    Raises:
        DecodeError: If the data is too short to be a mint
    """
    if len(data) < MINT_ACCOUNT_MIN_SIZE:
        raise DecodeError(f"Mint account {address} has only {len(data)} bytes")
    return data[MINT_DECIMALS_OFFSET]
