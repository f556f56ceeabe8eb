"""Pool value objects.

PoolRecord holds raw integer reserves used for trade math. PoolWithPrice
adds display figures (float price and normalized reserves) that must never
feed back into trade amounts.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PoolAccount:
    """Decoded PumpSwap Pool account, before reserves are known.

    The on-chain account stores the pool's vault addresses, not balances.
    """

    address: str
    pool_bump: int
    index: int
    creator: str
    base_mint: str
    quote_mint: str
    lp_mint: str
    pool_base_token_account: str
    pool_quote_token_account: str
    lp_supply: int


@dataclass(frozen=True)
class PoolRecord:
    """A PumpSwap liquidity pool with raw reserves.

    Reserves are smallest-unit amounts (lamports for SOL). The constant
    product k = base_reserve * quote_reserve is recomputed per quote and
    never stored.
    """

    address: str
    base_mint: str
    quote_mint: str
    base_reserve: int
    quote_reserve: int
    # True when the queried token was found on the quote side of the pool
    is_native_base: bool = False
    lp_mint: str | None = None
    pool_base_token_account: str | None = None
    pool_quote_token_account: str | None = None
    lp_supply: int = 0
    creator: str | None = None
    index: int = 0

    @property
    def is_degenerate(self) -> bool:
        """True if either reserve is zero."""
        return self.base_reserve <= 0 or self.quote_reserve <= 0

    @classmethod
    def from_account(
        cls,
        account: PoolAccount,
        base_reserve: int,
        quote_reserve: int,
        is_native_base: bool,
    ) -> PoolRecord:
        """Combine a decoded pool account with its vault balances."""
        return cls(
            address=account.address,
            base_mint=account.base_mint,
            quote_mint=account.quote_mint,
            base_reserve=base_reserve,
            quote_reserve=quote_reserve,
            is_native_base=is_native_base,
            lp_mint=account.lp_mint,
            pool_base_token_account=account.pool_base_token_account,
            pool_quote_token_account=account.pool_quote_token_account,
            lp_supply=account.lp_supply,
            creator=account.creator,
            index=account.index,
        )


@dataclass(frozen=True)
class Reserves:
    """Reserves in human units (display only)."""

    native: float
    token: float


@dataclass(frozen=True)
class PoolWithPrice:
    """A pool augmented with display price and normalized liquidity."""

    record: PoolRecord
    price: float
    reserves: Reserves

    @property
    def address(self) -> str:
        return self.record.address

    @property
    def base_reserve(self) -> int:
        return self.record.base_reserve

    @property
    def quote_reserve(self) -> int:
        return self.record.quote_reserve

    @property
    def is_native_base(self) -> bool:
        return self.record.is_native_base


@dataclass(frozen=True)
class PoolInfo:
    """Snapshot of a single pool fetched by address."""

    pool_id: str
    base_mint: str
    quote_mint: str
    base_reserve: int
    quote_reserve: int
    price: float
