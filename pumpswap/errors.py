"""PumpSwap SDK error classes.

Every failure the core reports derives from PumpSwapError. "No pool" is not
an error at the discovery layer (best_pool returns None); PoolNotFoundError
is only raised by trade paths that cannot proceed without one.
"""


class PumpSwapError(Exception):
    """Base error for PumpSwap SDK operations."""

    pass


class QueryError(PumpSwapError):
    """An account query against the RPC node did not complete."""

    pass


class DecodeError(PumpSwapError):
    """Raw account bytes do not match the expected layout."""

    pass


class DegeneratePoolError(PumpSwapError):
    """Pool has a zero reserve, so price and liquidity are undefined."""

    def __init__(self, pool_address: str, base_reserve: int, quote_reserve: int) -> None:
        super().__init__(
            f"Degenerate pool {pool_address}: base_reserve={base_reserve}, "
            f"quote_reserve={quote_reserve}"
        )
        self.pool_address = pool_address
        self.base_reserve = base_reserve
        self.quote_reserve = quote_reserve


class PoolNotFoundError(PumpSwapError):
    """No usable pool exists for the requested mint."""

    def __init__(self, mint: str) -> None:
        super().__init__(f"No pool found for token {mint}")
        self.mint = mint


class ReserveExhaustedError(PumpSwapError):
    """Trade would drive a pool reserve to zero."""

    pass


class InvalidSlippageError(PumpSwapError, ValueError):
    """Slippage tolerance outside [0, 10000] basis points."""

    pass


class InvalidAmountError(PumpSwapError, ValueError):
    """Trade amount or percentage is not acceptable."""

    pass


class InsufficientBalanceError(PumpSwapError):
    """Wallet holds no tokens to sell."""

    pass


class ConfigError(PumpSwapError):
    """Required configuration is missing or malformed."""

    pass
