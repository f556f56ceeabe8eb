"""Display price and normalized liquidity for pools.

Floats produced here are for ranking and display only; trade amounts are
always computed from the integer reserves on PoolRecord.
"""

import structlog

from pumpswap.constants import DEFAULT_DECIMALS, LAMPORTS_PER_SOL
from pumpswap.errors import DegeneratePoolError
from pumpswap.models.pool import PoolRecord, PoolWithPrice, Reserves

logger = structlog.get_logger()


def price_pool(record: PoolRecord, decimals: int = DEFAULT_DECIMALS) -> PoolWithPrice:
    """Compute price and normalized reserves for a pool.

    Args:
        record: Pool with raw reserves
        decimals: Decimal places of the base token

    Returns:
        PoolWithPrice with price = quote_reserve / base_reserve

    Raises:
        DegeneratePoolError: If either reserve is zero
    """
    if record.is_degenerate:
        raise DegeneratePoolError(record.address, record.base_reserve, record.quote_reserve)

    return PoolWithPrice(
        record=record,
        price=record.quote_reserve / record.base_reserve,
        reserves=Reserves(
            native=record.quote_reserve / LAMPORTS_PER_SOL,
            token=record.base_reserve / 10**decimals,
        ),
    )


def price_pools(records: list[PoolRecord], decimals: int = DEFAULT_DECIMALS) -> list[PoolWithPrice]:
    """Price every pool, dropping degenerate ones. Input order is kept."""
    priced: list[PoolWithPrice] = []
    for record in records:
        try:
            priced.append(price_pool(record, decimals))
        except DegeneratePoolError:
            logger.debug(
                "degenerate_pool_skipped",
                pool=record.address,
                base_reserve=record.base_reserve,
                quote_reserve=record.quote_reserve,
            )
    return priced
