"""Pool lookup facade: discovery, pricing and selection in one place.

Every call re-runs discovery; nothing is cached between calls.
"""

from __future__ import annotations

import structlog

from pumpswap.constants import DEFAULT_DECIMALS, WSOL_MINT
from pumpswap.models.pool import PoolInfo, PoolWithPrice
from pumpswap.pools.discovery import PoolDiscovery
from pumpswap.pools.pricing import price_pools
from pumpswap.pools.selector import select_best_pool, unique_pools
from pumpswap.tokens import TokenService

logger = structlog.get_logger()


class PoolService:
    """Finds, prices and ranks PumpSwap pools for a token.

    Args:
        discovery: Pool discovery over an account source
        tokens: Used to discover token decimals; if None, `default_decimals`
            is used for every mint
        default_decimals: Decimals used when no token service is configured
    """

    def __init__(
        self,
        discovery: PoolDiscovery,
        tokens: TokenService | None = None,
        default_decimals: int = DEFAULT_DECIMALS,
    ) -> None:
        self.discovery = discovery
        self.tokens = tokens
        self.default_decimals = default_decimals

    async def discover_pools(
        self,
        mint: str,
        decimals: int | None = None,
        deduplicate: bool = False,
    ) -> list[PoolWithPrice]:
        """All usable pools for `mint`, priced.

        Degenerate pools are dropped. Pools matched by more than one
        discovery query are repeated unless `deduplicate` is set.

        Args:
            mint: Token mint address
            decimals: Token decimals; discovered from the mint if None
            deduplicate: Collapse repeated pool addresses

        Raises:
            QueryError: If the account queries fail
            DecodeError: If a matched account does not decode
        """
        records = await self.discovery.find_pools(mint)
        if not records:
            return []

        if decimals is None:
            decimals = await self._decimals(mint)
        pools = price_pools(records, decimals)

        logger.debug("pools_discovered", mint=mint, candidates=len(records), usable=len(pools))
        return unique_pools(pools) if deduplicate else pools

    async def best_pool(self, mint: str) -> PoolWithPrice | None:
        """Pool with the deepest native-side liquidity, or None if none exist."""
        pools = await self.discover_pools(mint)
        best = select_best_pool(pools)
        if best is None:
            logger.warning("no_pools_found", mint=mint)
            return None

        logger.info(
            "best_pool_selected",
            mint=mint,
            pool=best.address,
            price=best.price,
            native_reserve=best.reserves.native,
        )
        return best

    async def best_trade_pool(
        self, mint: str, quote_mint: str = WSOL_MINT
    ) -> PoolWithPrice | None:
        """Deepest pool that trades `mint` as base against `quote_mint`.

        Buy and sell instructions move the pool's base token, so pools
        holding `mint` on the quote side, or pairing it with another quote
        token, are skipped.
        """
        pools = [
            pool
            for pool in await self.discover_pools(mint)
            if pool.record.base_mint == mint and pool.record.quote_mint == quote_mint
        ]
        best = select_best_pool(pools)
        if best is None:
            logger.warning("no_trade_pool_found", mint=mint, quote_mint=quote_mint)
            return None

        logger.info(
            "trade_pool_selected",
            mint=mint,
            pool=best.address,
            price=best.price,
            native_reserve=best.reserves.native,
        )
        return best

    async def price_of(self, mint: str) -> float | None:
        """Current price of `mint` in quote units per token, from the best pool."""
        best = await self.best_pool(mint)
        return best.price if best is not None else None

    async def get_pool_info(self, pool_address: str) -> PoolInfo | None:
        """Snapshot of one pool by address, or None if the account is absent.

        A degenerate pool reports a price of 0.0.
        """
        record = await self.discovery.fetch_pool(pool_address)
        if record is None:
            return None

        price = 0.0 if record.is_degenerate else record.quote_reserve / record.base_reserve
        return PoolInfo(
            pool_id=record.address,
            base_mint=record.base_mint,
            quote_mint=record.quote_mint,
            base_reserve=record.base_reserve,
            quote_reserve=record.quote_reserve,
            price=price,
        )

    async def _decimals(self, mint: str) -> int:
        if self.tokens is None:
            return self.default_decimals
        return await self.tokens.get_token_decimals(mint)
