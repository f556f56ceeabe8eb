"""Best-pool selection."""

from collections.abc import Iterable

from pumpswap.models.pool import PoolWithPrice


def select_best_pool(pools: Iterable[PoolWithPrice]) -> PoolWithPrice | None:
    """Return the pool with the greatest native-side reserve.

    Ties keep the first pool encountered. An empty input returns None.
    """
    best: PoolWithPrice | None = None
    for pool in pools:
        if best is None or pool.reserves.native > best.reserves.native:
            best = pool
    return best


def unique_pools(pools: Iterable[PoolWithPrice]) -> list[PoolWithPrice]:
    """Drop repeated pool addresses, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[PoolWithPrice] = []
    for pool in pools:
        if pool.address not in seen:
            seen.add(pool.address)
            unique.append(pool)
    return unique
