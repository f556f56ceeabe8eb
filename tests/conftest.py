"""Pytest configuration and fixtures."""

import pytest

from pumpswap.config import ClientConfig
from pumpswap.pools.discovery import PoolDiscovery
from pumpswap.pools.service import PoolService
from pumpswap.tokens import TokenService
from pumpswap.trading.sdk import PumpSwapSDK
from tests.helpers import (
    DEEP_BASE_RESERVE,
    DEEP_QUOTE_RESERVE,
    POOL_A,
    TOKEN_MINT,
    FakeAccountSource,
    RecordingSubmitter,
    mint_account_bytes,
)


@pytest.fixture
def config() -> ClientConfig:
    """Default configuration against a local validator URL."""
    return ClientConfig(rpc_endpoint="http://localhost:8899")


@pytest.fixture
def accounts() -> FakeAccountSource:
    """Empty in-memory account source."""
    return FakeAccountSource()


@pytest.fixture
def funded_accounts(accounts: FakeAccountSource) -> FakeAccountSource:
    """Account source holding one deep TOKEN/WSOL pool and the token mint."""
    accounts.add_pool(POOL_A, base_reserve=DEEP_BASE_RESERVE, quote_reserve=DEEP_QUOTE_RESERVE)
    accounts.set_account(TOKEN_MINT, mint_account_bytes(decimals=6))
    return accounts


@pytest.fixture
def submitter() -> RecordingSubmitter:
    """Submitter that records instructions and reports success."""
    return RecordingSubmitter()


@pytest.fixture
def sdk(
    funded_accounts: FakeAccountSource,
    submitter: RecordingSubmitter,
    config: ClientConfig,
) -> PumpSwapSDK:
    """SDK wired to the funded in-memory account source."""
    tokens = TokenService(funded_accounts)
    pools = PoolService(PoolDiscovery(funded_accounts), tokens=tokens)
    return PumpSwapSDK(pools=pools, tokens=tokens, submitter=submitter, config=config)
