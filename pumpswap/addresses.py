"""Solana account address helpers.

Addresses travel through the SDK as base58 strings; these helpers validate
them and derive program addresses with solders.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, Field
from solders.pubkey import Pubkey


def is_valid_pubkey(address: str) -> bool:
    """Check if a string is a valid base58-encoded 32-byte public key.

    Args:
        address: String to validate

    Returns:
        True if the string decodes to a public key
    """
    if not isinstance(address, str):
        return False
    try:
        Pubkey.from_string(address)
    except ValueError:
        return False
    return True


def parse_pubkey(address: str | Pubkey) -> Pubkey:
    """Convert an address to a solders Pubkey.

    Raises:
        ValueError: If the address is not a valid base58 public key
    """
    if isinstance(address, Pubkey):
        return address
    if not is_valid_pubkey(address):
        raise ValueError(f"Invalid account address: {address}")
    return Pubkey.from_string(address)


def pubkey_from_bytes(data: bytes, offset: int = 0) -> str:
    """Read a 32-byte public key from raw account data as base58."""
    return str(Pubkey.from_bytes(data[offset : offset + 32]))


def get_associated_token_address(
    owner: str | Pubkey,
    mint: str | Pubkey,
    token_program_id: str | None = None,
) -> str:
    """Derive the associated token account for (owner, mint).

    Seeds are [owner, token program, mint] under the associated token
    program, matching spl-associated-token-account.

    Args:
        owner: Wallet address that owns the token account
        mint: Token mint address
        token_program_id: Token program (defaults to SPL Token)

    Returns:
        Associated token account address (base58)
    """
    from pumpswap.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID

    token_program = parse_pubkey(token_program_id or TOKEN_PROGRAM_ID)
    ata, _bump = Pubkey.find_program_address(
        [bytes(parse_pubkey(owner)), bytes(token_program), bytes(parse_pubkey(mint))],
        parse_pubkey(ASSOCIATED_TOKEN_PROGRAM_ID),
    )
    return str(ata)


def _validate_address(value: Any) -> str:
    if isinstance(value, Pubkey):
        return str(value)
    if not isinstance(value, str) or not is_valid_pubkey(value):
        raise ValueError(f"Invalid account address: {value!r}")
    return value


# Base58 account address (validated, stored as string)
Address = Annotated[
    str,
    BeforeValidator(_validate_address),
    Field(description="Base58-encoded Solana account address"),
]
