"""Shared setup for the operator scripts."""

import os
import sys
from pathlib import Path

from solders.keypair import Keypair

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pumpswap.config import ClientConfig  # noqa: E402
from pumpswap.errors import ConfigError  # noqa: E402
from pumpswap.log import configure_logging  # noqa: E402
from pumpswap.pools.discovery import PoolDiscovery  # noqa: E402
from pumpswap.pools.service import PoolService  # noqa: E402
from pumpswap.rpc.client import SolanaRpcClient  # noqa: E402
from pumpswap.tokens import TokenService  # noqa: E402


def load_config(verbose: bool = False) -> ClientConfig:
    """Read configuration from the environment and set up logging."""
    config = ClientConfig.from_env()
    configure_logging("debug" if verbose else config.log_level)
    return config


def load_wallet() -> Keypair:
    """Load the signing keypair from PRIVATE_KEY (base58)."""
    secret = os.environ.get("PRIVATE_KEY")
    if not secret:
        raise ConfigError("PRIVATE_KEY is not set")
    try:
        return Keypair.from_base58_string(secret)
    except ValueError as err:
        raise ConfigError("PRIVATE_KEY is not a valid base58 keypair") from err


def open_rpc(config: ClientConfig) -> SolanaRpcClient:
    return SolanaRpcClient(
        config.rpc_endpoint,
        commitment=config.commitment,
        timeout=config.request_timeout,
    )


def explorer_url(signature: str) -> str:
    return f"https://solscan.io/tx/{signature}"


def pool_service(rpc: SolanaRpcClient, config: ClientConfig) -> PoolService:
    """Read-only pool access for commands that do not sign."""
    tokens = TokenService(rpc, default_decimals=config.default_decimals)
    return PoolService(PoolDiscovery(rpc), tokens=tokens)
