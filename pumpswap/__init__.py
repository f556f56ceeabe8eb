"""PumpSwap trading SDK - Python implementation."""

from pumpswap.config import ClientConfig
from pumpswap.pools import PoolService
from pumpswap.trading import PumpSwapSDK, create_sdk

__version__ = "0.1.0"
__all__ = ["ClientConfig", "PoolService", "PumpSwapSDK", "create_sdk", "__version__"]
