"""Protocol constants for the PumpSwap SDK.

Centralizes well-known program IDs, account addresses and trade defaults.
"""

import hashlib

from pumpswap.addresses import is_valid_pubkey


def _validate_pubkey(name: str, address: str) -> str:
    """Validate and return a base58 account address.

    Raises:
        ValueError: If the address does not decode to 32 bytes
    """
    if not is_valid_pubkey(address):
        raise ValueError(f"Invalid {name} address: {address}")
    return address


# Programs
PUMP_AMM_PROGRAM_ID = _validate_pubkey("PUMP_AMM", "pAMMBay6oceH9fJKBRHGP5D4bD4sWpmSwMn52FMfXEA")
TOKEN_PROGRAM_ID = _validate_pubkey("TOKEN", "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
ASSOCIATED_TOKEN_PROGRAM_ID = _validate_pubkey(
    "ASSOCIATED_TOKEN", "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
)
SYSTEM_PROGRAM_ID = _validate_pubkey("SYSTEM", "11111111111111111111111111111111")

# Well-known mints
WSOL_MINT = _validate_pubkey("WSOL", "So11111111111111111111111111111111111111112")

# PumpSwap program accounts
GLOBAL_CONFIG = _validate_pubkey("GLOBAL", "ADyA8hdefvWN2dbGGWFotbzWxrAvLW83WG6QCVXvJKqw")
EVENT_AUTHORITY = _validate_pubkey(
    "EVENT_AUTHORITY", "GS4CU59F31iL7aR2Q8zVS8DRrcRnXX1yjQ66TqNVQnaR"
)
FEE_RECIPIENT = _validate_pubkey("FEE_RECIPIENT", "62qc2CNXwrYqQScmEdiZFFAnJR262PxWEuNQtxfafNgV")
FEE_RECIPIENT_ATA = _validate_pubkey(
    "FEE_RECIPIENT_ATA", "94qWNrtmfn42h3ZjUZwWvK1MEo9uVmmrBPd2hpNjYDjb"
)

# Anchor instruction discriminators
BUY_DISCRIMINATOR = bytes([102, 6, 61, 18, 1, 218, 235, 234])
SELL_DISCRIMINATOR = bytes([51, 230, 133, 164, 1, 127, 131, 173])

# Anchor account discriminator: sha256("account:<Name>")[:8]
POOL_ACCOUNT_DISCRIMINATOR = hashlib.sha256(b"account:Pool").digest()[:8]

# Pool account layout
POOL_ACCOUNT_SIZE = 211
POOL_BASE_MINT_OFFSET = 43
POOL_QUOTE_MINT_OFFSET = 75

# Native asset
LAMPORTS_PER_SOL = 1_000_000_000
SOL_DECIMALS = 9

# Trade defaults
DEFAULT_DECIMALS = 6
DEFAULT_SLIPPAGE_BPS = 500  # 5%
DEFAULT_COMPUTE_UNITS = 70_000
DEFAULT_COMPUTE_UNIT_PRICE = 696_969  # micro-lamports

# Basis point denominator (10000 bps = 100%)
BPS_DENOMINATOR = 10_000
