"""Test helpers module for shared test utilities.

- constants: Deterministic addresses and common amounts
- factories: Raw account bytes and pool object factories
- fakes: In-memory account source and transaction submitter
"""

from tests.helpers.constants import (
    DEEP_BASE_RESERVE,
    DEEP_QUOTE_RESERVE,
    ONE_SOL,
    ONE_TOKEN,
    OTHER_MINT,
    PAYER,
    POOL_A,
    POOL_B,
    POOL_C,
    TOKEN_DECIMALS,
    TOKEN_MINT,
    USER,
    WSOL,
    make_address,
)
from tests.helpers.factories import (
    make_pool_record,
    make_priced_pool,
    mint_account_bytes,
    pool_account_bytes,
    token_account_bytes,
)
from tests.helpers.fakes import FakeAccountSource, RecordingSubmitter

__all__ = [
    # Constants
    "TOKEN_MINT",
    "OTHER_MINT",
    "WSOL",
    "USER",
    "PAYER",
    "POOL_A",
    "POOL_B",
    "POOL_C",
    "TOKEN_DECIMALS",
    "ONE_SOL",
    "ONE_TOKEN",
    "DEEP_BASE_RESERVE",
    "DEEP_QUOTE_RESERVE",
    "make_address",
    # Factories
    "pool_account_bytes",
    "token_account_bytes",
    "mint_account_bytes",
    "make_pool_record",
    "make_priced_pool",
    # Fakes
    "FakeAccountSource",
    "RecordingSubmitter",
]
