"""Pool management package.

Provides discovery, pricing and selection of PumpSwap pools.
"""

from .discovery import PoolDiscovery, pool_filters
from .layout import decode_mint_decimals, decode_pool_account, decode_token_amount
from .pricing import price_pool, price_pools
from .selector import select_best_pool, unique_pools
from .service import PoolService

__all__ = [
    "PoolDiscovery",
    "PoolService",
    "pool_filters",
    "decode_pool_account",
    "decode_token_amount",
    "decode_mint_decimals",
    "price_pool",
    "price_pools",
    "select_best_pool",
    "unique_pools",
]
