"""Constant product quote math for PumpSwap pools.

PumpSwap prices trades from the invariant: base_reserve * quote_reserve = k

All arithmetic is on raw integer units. Division truncates, so every quote
is biased in the pool's favour exactly as the on-chain program computes it.
"""

from __future__ import annotations

from typing import Protocol

import structlog

from pumpswap.errors import DegeneratePoolError, InvalidAmountError, ReserveExhaustedError
from pumpswap.safe_int import S

logger = structlog.get_logger()


class HasReserves(Protocol):
    """Anything exposing raw pool reserves (PoolRecord, PoolWithPrice)."""

    @property
    def address(self) -> str: ...

    @property
    def base_reserve(self) -> int: ...

    @property
    def quote_reserve(self) -> int: ...


class ConstantProduct:
    """Constant product quoter.

    Buy:  quote in, base out
        new_quote = quote_reserve + quote_in
        new_base  = k // new_quote
        base_out  = base_reserve - new_base

    Sell: base in, quote out
        new_base  = base_reserve + base_in
        new_quote = k // new_base
        quote_out = quote_reserve - new_quote
    """

    def quote_buy(
        self,
        base_reserve: int,
        quote_reserve: int,
        quote_amount_in: int,
        pool_address: str = "",
    ) -> int:
        """Calculate base tokens received for spending quote tokens.

        Args:
            base_reserve: Pool base reserve (raw units)
            quote_reserve: Pool quote reserve (raw units)
            quote_amount_in: Quote amount spent (raw units)
            pool_address: Pool address, for error messages

        Returns:
            Base amount out (raw units); 0 for a zero input

        Raises:
            InvalidAmountError: If quote_amount_in is negative
            DegeneratePoolError: If either reserve is zero
            ReserveExhaustedError: If the trade would empty the base reserve
        """
        _check_trade(base_reserve, quote_reserve, quote_amount_in, pool_address)
        if quote_amount_in == 0:
            return 0

        k = S(base_reserve) * S(quote_reserve)
        new_quote_reserve = S(quote_reserve) + S(quote_amount_in)
        new_base_reserve = k // new_quote_reserve
        if new_base_reserve <= 0:
            raise ReserveExhaustedError(
                f"Buy of {quote_amount_in} quote units would exhaust base reserve "
                f"{base_reserve} of pool {pool_address or '<unknown>'}"
            )

        return (S(base_reserve) - new_base_reserve).value

    def quote_sell(
        self,
        base_reserve: int,
        quote_reserve: int,
        base_amount_in: int,
        pool_address: str = "",
    ) -> int:
        """Calculate quote tokens received for selling base tokens.

        Args:
            base_reserve: Pool base reserve (raw units)
            quote_reserve: Pool quote reserve (raw units)
            base_amount_in: Base amount sold (raw units)
            pool_address: Pool address, for error messages

        Returns:
            Quote amount out (raw units); 0 for a zero input

        Raises:
            InvalidAmountError: If base_amount_in is negative
            DegeneratePoolError: If either reserve is zero
            ReserveExhaustedError: If the trade would empty the quote reserve
        """
        _check_trade(base_reserve, quote_reserve, base_amount_in, pool_address)
        if base_amount_in == 0:
            return 0

        k = S(base_reserve) * S(quote_reserve)
        new_base_reserve = S(base_reserve) + S(base_amount_in)
        new_quote_reserve = k // new_base_reserve
        if new_quote_reserve <= 0:
            raise ReserveExhaustedError(
                f"Sell of {base_amount_in} base units would exhaust quote reserve "
                f"{quote_reserve} of pool {pool_address or '<unknown>'}"
            )

        return (S(quote_reserve) - new_quote_reserve).value

    def quote_buy_from_pool(self, pool: HasReserves, quote_amount_in: int) -> int:
        """Quote a buy against a pool's current reserves."""
        amount_out = self.quote_buy(
            pool.base_reserve, pool.quote_reserve, quote_amount_in, pool.address
        )
        logger.debug(
            "quote_buy",
            pool=pool.address,
            quote_amount_in=quote_amount_in,
            base_amount_out=amount_out,
        )
        return amount_out

    def quote_sell_from_pool(self, pool: HasReserves, base_amount_in: int) -> int:
        """Quote a sell against a pool's current reserves."""
        amount_out = self.quote_sell(
            pool.base_reserve, pool.quote_reserve, base_amount_in, pool.address
        )
        logger.debug(
            "quote_sell",
            pool=pool.address,
            base_amount_in=base_amount_in,
            quote_amount_out=amount_out,
        )
        return amount_out


def _check_trade(base_reserve: int, quote_reserve: int, amount_in: int, pool_address: str) -> None:
    if amount_in < 0:
        raise InvalidAmountError(f"Trade amount cannot be negative: {amount_in}")
    if base_reserve <= 0 or quote_reserve <= 0:
        raise DegeneratePoolError(pool_address or "<unknown>", base_reserve, quote_reserve)


# Singleton instance
constant_product = ConstantProduct()


def quote_buy(base_reserve: int, quote_reserve: int, quote_amount_in: int) -> int:
    """Base amount out for spending quote_amount_in (see ConstantProduct.quote_buy)."""
    return constant_product.quote_buy(base_reserve, quote_reserve, quote_amount_in)


def quote_sell(base_reserve: int, quote_reserve: int, base_amount_in: int) -> int:
    """Quote amount out for selling base_amount_in (see ConstantProduct.quote_sell)."""
    return constant_product.quote_sell(base_reserve, quote_reserve, base_amount_in)


__all__ = [
    "ConstantProduct",
    "HasReserves",
    "constant_product",
    "quote_buy",
    "quote_sell",
]
