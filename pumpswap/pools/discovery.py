"""Pool discovery for a token mint.

Three program-account queries run concurrently:
- token as base
- token as quote
- token as base with wrapped SOL as quote

Results are concatenated in that order without deduplication, so a pool
matching more than one query appears more than once. Reserves are read
from each pool's vault token accounts in one batched request.
"""

from __future__ import annotations

import asyncio

import structlog

from pumpswap.constants import (
    POOL_ACCOUNT_SIZE,
    POOL_BASE_MINT_OFFSET,
    POOL_QUOTE_MINT_OFFSET,
    PUMP_AMM_PROGRAM_ID,
    WSOL_MINT,
)
from pumpswap.models.pool import PoolAccount, PoolRecord
from pumpswap.pools.layout import decode_pool_account, decode_token_amount
from pumpswap.rpc.client import AccountFilter, AccountSource, DataSizeFilter, MemcmpFilter

logger = structlog.get_logger()


def pool_filters(
    base_mint: str | None = None, quote_mint: str | None = None
) -> list[AccountFilter]:
    """Build getProgramAccounts filters selecting pools by mint."""
    filters: list[AccountFilter] = [DataSizeFilter(POOL_ACCOUNT_SIZE)]
    if base_mint is not None:
        filters.append(MemcmpFilter(offset=POOL_BASE_MINT_OFFSET, bytes=base_mint))
    if quote_mint is not None:
        filters.append(MemcmpFilter(offset=POOL_QUOTE_MINT_OFFSET, bytes=quote_mint))
    return filters


class PoolDiscovery:
    """Finds every PumpSwap pool that references a token.

    Args:
        accounts: Account query collaborator
        program_id: PumpSwap AMM program
        native_mint: Canonical quote asset for the third query (wrapped SOL)
    """

    def __init__(
        self,
        accounts: AccountSource,
        program_id: str = PUMP_AMM_PROGRAM_ID,
        native_mint: str = WSOL_MINT,
    ) -> None:
        self.accounts = accounts
        self.program_id = program_id
        self.native_mint = native_mint

    async def find_pools(self, mint: str) -> list[PoolRecord]:
        """Return all pools trading `mint`, with current reserves.

        An empty list means the queries succeeded and nothing matched.

        Raises:
            QueryError: If any query fails (no partial results)
            DecodeError: If any matched account does not decode
        """
        # gather propagates the first failure; sibling queries are left to finish
        base_pools, quote_pools, native_pools = await asyncio.gather(
            self._query(pool_filters(base_mint=mint), is_native_base=False),
            self._query(pool_filters(quote_mint=mint), is_native_base=True),
            self._query(
                pool_filters(base_mint=mint, quote_mint=self.native_mint), is_native_base=False
            ),
        )
        candidates = [*base_pools, *quote_pools, *native_pools]

        logger.debug(
            "pools_queried",
            mint=mint,
            as_base=len(base_pools),
            as_quote=len(quote_pools),
            with_native_quote=len(native_pools),
        )

        if not candidates:
            return []
        return await self._hydrate_reserves(candidates)

    async def fetch_pool(self, address: str) -> PoolRecord | None:
        """Fetch a single pool by address, or None if the account is absent."""
        data = await self.accounts.get_account_info(address)
        if data is None:
            return None
        account = decode_pool_account(address, data)
        records = await self._hydrate_reserves([(account, False)])
        return records[0]

    async def _query(
        self, filters: list[AccountFilter], is_native_base: bool
    ) -> list[tuple[PoolAccount, bool]]:
        matches = await self.accounts.get_program_accounts(self.program_id, filters)
        return [(decode_pool_account(m.address, m.data), is_native_base) for m in matches]

    async def _hydrate_reserves(
        self, candidates: list[tuple[PoolAccount, bool]]
    ) -> list[PoolRecord]:
        """Read vault balances for every candidate and build PoolRecords.

        A missing vault account counts as a zero reserve, which makes the
        pool degenerate.
        """
        vaults = list(
            dict.fromkeys(
                vault
                for account, _ in candidates
                for vault in (account.pool_base_token_account, account.pool_quote_token_account)
            )
        )

        raw_vaults = await self.accounts.get_multiple_accounts(vaults)
        balances = {
            vault: 0 if data is None else decode_token_amount(vault, data)
            for vault, data in zip(vaults, raw_vaults, strict=True)
        }

        return [
            PoolRecord.from_account(
                account,
                base_reserve=balances[account.pool_base_token_account],
                quote_reserve=balances[account.pool_quote_token_account],
                is_native_base=is_native_base,
            )
            for account, is_native_base in candidates
        ]
