"""Tests for the pool lookup facade."""

import asyncio

import pytest

from pumpswap.errors import QueryError
from pumpswap.pools.discovery import PoolDiscovery
from pumpswap.pools.service import PoolService
from pumpswap.tokens import TokenService
from tests.helpers import (
    OTHER_MINT,
    POOL_A,
    POOL_B,
    POOL_C,
    TOKEN_MINT,
    FakeAccountSource,
    mint_account_bytes,
)


def make_service(accounts: FakeAccountSource, with_tokens: bool = True) -> PoolService:
    tokens = TokenService(accounts) if with_tokens else None
    return PoolService(PoolDiscovery(accounts), tokens=tokens)


class TestDiscoverPools:
    """Tests for PoolService.discover_pools."""

    def test_empty(self, accounts: FakeAccountSource):
        assert asyncio.run(make_service(accounts).discover_pools(TOKEN_MINT)) == []

    def test_degenerate_pools_never_returned(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, base_reserve=0, quote_reserve=1_000_000_000)
        accounts.add_pool(POOL_B, base_reserve=1_000_000, quote_reserve=0)
        accounts.add_pool(POOL_C, base_reserve=1_000_000, quote_reserve=1_000_000_000)

        pools = asyncio.run(make_service(accounts).discover_pools(TOKEN_MINT))

        assert {p.address for p in pools} == {POOL_C}
        assert all(p.base_reserve > 0 and p.quote_reserve > 0 for p in pools)

    def test_duplicates_preserved_by_default(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 1_000_000, 1_000_000_000)

        pools = asyncio.run(make_service(accounts).discover_pools(TOKEN_MINT))

        assert [p.address for p in pools] == [POOL_A, POOL_A]

    def test_deduplicate_option(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 1_000_000, 1_000_000_000)

        pools = asyncio.run(make_service(accounts).discover_pools(TOKEN_MINT, deduplicate=True))

        assert [p.address for p in pools] == [POOL_A]

    def test_decimals_read_from_mint(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 2_000_000_000, 1_000_000_000)
        accounts.set_account(TOKEN_MINT, mint_account_bytes(decimals=9))

        pools = asyncio.run(make_service(accounts).discover_pools(TOKEN_MINT))

        assert pools[0].reserves.token == 2.0

    def test_explicit_decimals_override(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 2_000_000_000, 1_000_000_000)
        accounts.set_account(TOKEN_MINT, mint_account_bytes(decimals=9))

        pools = asyncio.run(make_service(accounts).discover_pools(TOKEN_MINT, decimals=6))

        assert pools[0].reserves.token == 2_000.0

    def test_default_decimals_without_token_service(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 2_000_000, 1_000_000_000)

        service = make_service(accounts, with_tokens=False)
        pools = asyncio.run(service.discover_pools(TOKEN_MINT))

        assert pools[0].reserves.token == 2.0

    def test_query_error_propagates(self, accounts: FakeAccountSource):
        accounts.fail_program_queries = True
        with pytest.raises(QueryError):
            asyncio.run(make_service(accounts).discover_pools(TOKEN_MINT))


class TestBestPool:
    """Tests for PoolService.best_pool and price_of."""

    def test_no_pools(self, accounts: FakeAccountSource):
        service = make_service(accounts)
        assert asyncio.run(service.best_pool(TOKEN_MINT)) is None
        assert asyncio.run(service.price_of(TOKEN_MINT)) is None

    def test_deepest_native_pool_selected(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 1_000_000, 1_000_000_000)
        accounts.add_pool(POOL_B, 1_000_000, 8_000_000_000)
        accounts.add_pool(POOL_C, 1_000_000, 3_000_000_000)

        best = asyncio.run(make_service(accounts).best_pool(TOKEN_MINT))

        assert best is not None
        assert best.address == POOL_B

    def test_price_of(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 500_000_000, 50_000_000_000)
        assert asyncio.run(make_service(accounts).price_of(TOKEN_MINT)) == 100.0

    def test_pool_without_native_quote_still_ranked(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 1_000, 2_000, quote_mint=OTHER_MINT)
        best = asyncio.run(make_service(accounts).best_pool(TOKEN_MINT))
        assert best is not None
        assert best.address == POOL_A


class TestBestTradePool:
    """Tests for PoolService.best_trade_pool."""

    def test_token_on_quote_side_skipped(self, accounts: FakeAccountSource):
        accounts.add_pool(
            POOL_A, 1_000_000, 1_000_000_000, base_mint=OTHER_MINT, quote_mint=TOKEN_MINT
        )
        assert asyncio.run(make_service(accounts).best_trade_pool(TOKEN_MINT)) is None

    def test_non_native_quote_skipped(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 1_000, 2_000, quote_mint=OTHER_MINT)
        assert asyncio.run(make_service(accounts).best_trade_pool(TOKEN_MINT)) is None

    def test_native_pair_chosen_over_deeper_pools(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 10**15, 10**15, base_mint=OTHER_MINT, quote_mint=TOKEN_MINT)
        accounts.add_pool(POOL_B, 10**15, 10**15, quote_mint=OTHER_MINT)
        accounts.add_pool(POOL_C, 1_000_000, 1_000_000_000)

        best = asyncio.run(make_service(accounts).best_trade_pool(TOKEN_MINT))

        assert best is not None
        assert best.address == POOL_C


class TestGetPoolInfo:
    """Tests for PoolService.get_pool_info."""

    def test_info_snapshot(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 500_000_000, 50_000_000_000)

        info = asyncio.run(make_service(accounts).get_pool_info(POOL_A))

        assert info is not None
        assert info.pool_id == POOL_A
        assert info.base_mint == TOKEN_MINT
        assert info.base_reserve == 500_000_000
        assert info.quote_reserve == 50_000_000_000
        assert info.price == 100.0

    def test_degenerate_pool_reports_zero_price(self, accounts: FakeAccountSource):
        accounts.add_pool(POOL_A, 0, 50_000_000_000)
        info = asyncio.run(make_service(accounts).get_pool_info(POOL_A))
        assert info is not None
        assert info.price == 0.0

    def test_missing_pool(self, accounts: FakeAccountSource):
        assert asyncio.run(make_service(accounts).get_pool_info(POOL_A)) is None
