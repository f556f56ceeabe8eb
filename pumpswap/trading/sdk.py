"""High-level PumpSwap trading client.

A trade is prepared in one pass against a single pool: discover and select
the pool, quote against that pool's reserves, bound the quote by slippage,
and build the instructions. Submission is delegated to a
TransactionSubmitter.
"""

from __future__ import annotations

import structlog
from solders.keypair import Keypair

from pumpswap.amm.constant_product import ConstantProduct, constant_product
from pumpswap.amm.slippage import apply_slippage, validate_slippage_bps
from pumpswap.config import ClientConfig
from pumpswap.errors import InvalidAmountError, PoolNotFoundError
from pumpswap.models.pool import PoolWithPrice
from pumpswap.models.trade import (
    BuyParams,
    PreparedTrade,
    SellParams,
    TradeQuote,
    TradeSide,
    TransactionResult,
)
from pumpswap.pools.discovery import PoolDiscovery
from pumpswap.pools.service import PoolService
from pumpswap.rpc.client import SolanaRpcClient
from pumpswap.tokens import TokenService
from pumpswap.trading.instructions import (
    build_buy_instruction,
    build_compute_budget_instructions,
    build_create_ata_idempotent_instruction,
    build_sell_instruction,
)
from pumpswap.trading.sizing import resolve_percentage_raw, sol_to_lamports, to_raw_amount
from pumpswap.trading.submission import RpcTransactionSubmitter, TransactionSubmitter

logger = structlog.get_logger()


class PumpSwapSDK:
    """Buy and sell tokens on PumpSwap.

    Core failures (no pool, reserve exhaustion, invalid amounts, query
    errors) raise PumpSwapError subclasses. Submission failures are
    returned as TransactionResult(success=False).

    Args:
        pools: Pool discovery and selection
        tokens: Wallet balances and token decimals
        submitter: Signs and sends finished instructions
        config: Trade defaults (slippage, compute budget)
        amm: Quote math
    """

    def __init__(
        self,
        pools: PoolService,
        tokens: TokenService,
        submitter: TransactionSubmitter,
        config: ClientConfig,
        amm: ConstantProduct = constant_product,
    ) -> None:
        self.pools = pools
        self.tokens = tokens
        self.submitter = submitter
        self.config = config
        self.amm = amm

    # --- Trade preparation ---

    async def prepare_buy(self, params: BuyParams) -> PreparedTrade:
        """Quote and build a buy of `params.mint` for `params.sol_amount` SOL.

        The minimum base amount out is the constant-product quote shrunk by
        the slippage tolerance; the lamports spent are the exact input.

        Raises:
            PoolNotFoundError: If the token has no usable pool
            ReserveExhaustedError: If the pool cannot fill the trade
        """
        slippage_bps = self._slippage(params.slippage_bps)
        pool = await self._require_pool(params.mint)

        lamports_in = sol_to_lamports(params.sol_amount)
        if lamports_in == 0:
            raise InvalidAmountError(f"SOL amount {params.sol_amount} is below one lamport")

        ideal = self.amm.quote_buy_from_pool(pool, lamports_in)
        quote = TradeQuote(
            side=TradeSide.BUY,
            pool_address=pool.address,
            amount_in=lamports_in,
            ideal_amount=ideal,
            bounded_amount=apply_slippage(ideal, slippage_bps),
            slippage_bps=slippage_bps,
        )

        logger.info(
            "buy_prepared",
            mint=params.mint,
            pool=pool.address,
            lamports_in=lamports_in,
            expected_tokens=quote.ideal_amount,
            min_tokens=quote.bounded_amount,
            slippage_pct=slippage_bps / 100,
        )

        instructions = [
            *build_compute_budget_instructions(
                self.config.compute_units, self.config.compute_unit_price
            ),
            build_create_ata_idempotent_instruction(
                self.submitter.payer, params.user, params.mint
            ),
            build_buy_instruction(
                pool.address, params.user, params.mint, quote.bounded_amount, lamports_in
            ),
        ]
        return PreparedTrade(quote=quote, instructions=instructions, description="PumpSwap Buy")

    async def prepare_sell(self, params: SellParams) -> PreparedTrade:
        """Quote and build a sell of exactly `params.exact_amount` tokens.

        Raises:
            InvalidAmountError: If no exact amount is given or it rounds to zero
            PoolNotFoundError: If the token has no usable pool
            ReserveExhaustedError: If the pool cannot fill the trade
        """
        if params.exact_amount is None:
            raise InvalidAmountError("Exact amount is required to prepare a sell")
        slippage_bps = self._slippage(params.slippage_bps)

        decimals = await self.tokens.get_token_decimals(params.mint)
        base_in = to_raw_amount(params.exact_amount, decimals)
        if base_in == 0:
            raise InvalidAmountError(
                f"Sell amount {params.exact_amount} is below the token's smallest unit"
            )
        return await self._prepare_sell_raw(params.mint, params.user, base_in, slippage_bps)

    async def _prepare_sell_raw(
        self, mint: str, user: str, base_in: int, slippage_bps: int
    ) -> PreparedTrade:
        pool = await self._require_pool(mint)
        ideal = self.amm.quote_sell_from_pool(pool, base_in)
        quote = TradeQuote(
            side=TradeSide.SELL,
            pool_address=pool.address,
            amount_in=base_in,
            ideal_amount=ideal,
            bounded_amount=apply_slippage(ideal, slippage_bps),
            slippage_bps=slippage_bps,
        )

        logger.info(
            "sell_prepared",
            mint=mint,
            pool=pool.address,
            tokens_in=base_in,
            expected_lamports=quote.ideal_amount,
            min_lamports=quote.bounded_amount,
            slippage_pct=slippage_bps / 100,
        )

        instructions = [
            *build_compute_budget_instructions(
                self.config.compute_units, self.config.compute_unit_price
            ),
            build_sell_instruction(pool.address, user, mint, base_in, quote.bounded_amount),
        ]
        return PreparedTrade(quote=quote, instructions=instructions, description="PumpSwap Sell")

    # --- Trading ---

    async def buy(self, params: BuyParams) -> TransactionResult:
        """Buy tokens with SOL."""
        logger.info("buy_started", mint=params.mint, sol_amount=params.sol_amount)
        trade = await self.prepare_buy(params)
        return await self._submit(trade)

    async def sell_exact_amount(self, params: SellParams) -> TransactionResult:
        """Sell an exact amount of tokens (human units)."""
        logger.info("sell_started", mint=params.mint, exact_amount=params.exact_amount)
        trade = await self.prepare_sell(params)
        return await self._submit(trade)

    async def sell_percentage(self, params: SellParams) -> TransactionResult:
        """Sell a percentage of the wallet's token balance (default 100%).

        The amount is taken from the raw balance in integer units, so it
        never exceeds what the wallet holds.

        Raises:
            InsufficientBalanceError: If the wallet holds none of the token
        """
        percentage = params.percentage if params.percentage is not None else 100.0
        slippage_bps = self._slippage(params.slippage_bps)
        raw_balance = await self.tokens.get_token_balance_raw(params.mint, params.user)
        base_in = resolve_percentage_raw(raw_balance, percentage)

        logger.info(
            "sell_percentage_resolved",
            mint=params.mint,
            percentage=percentage,
            raw_balance=raw_balance,
            tokens_in=base_in,
        )
        if base_in == 0:
            raise InvalidAmountError(
                f"{percentage}% of {raw_balance} is below the token's smallest unit"
            )
        trade = await self._prepare_sell_raw(params.mint, params.user, base_in, slippage_bps)
        return await self._submit(trade)

    # --- Queries ---

    async def get_price(self, mint: str) -> float | None:
        """Current price of a token in SOL per token, or None if unlisted."""
        return await self.pools.price_of(mint)

    async def get_pool_info(self, mint: str) -> PoolWithPrice | None:
        """Best pool for a token, or None if unlisted."""
        return await self.pools.best_pool(mint)

    # --- Internals ---

    def _slippage(self, slippage_bps: int | None) -> int:
        if slippage_bps is None:
            return self.config.default_slippage_bps
        return validate_slippage_bps(slippage_bps)

    async def _require_pool(self, mint: str) -> PoolWithPrice:
        # Only TOKEN/WSOL pools match the buy/sell account layout
        pool = await self.pools.best_trade_pool(mint)
        if pool is None:
            raise PoolNotFoundError(mint)
        return pool

    async def _submit(self, trade: PreparedTrade) -> TransactionResult:
        result = await self.submitter.submit(trade.instructions, trade.description)
        if result.success:
            logger.info(
                "trade_succeeded",
                side=trade.quote.side.value,
                pool=trade.quote.pool_address,
                signature=result.signature,
            )
        else:
            logger.error(
                "trade_failed",
                side=trade.quote.side.value,
                pool=trade.quote.pool_address,
                error=result.error,
            )
        return result


def create_sdk(rpc: SolanaRpcClient, signer: Keypair, config: ClientConfig) -> PumpSwapSDK:
    """Wire an SDK over a live RPC client and signing keypair.

    The caller owns `rpc` and closes it when done.
    """
    tokens = TokenService(rpc, default_decimals=config.default_decimals)
    pools = PoolService(PoolDiscovery(rpc), tokens=tokens)
    return PumpSwapSDK(
        pools=pools,
        tokens=tokens,
        submitter=RpcTransactionSubmitter(rpc, signer),
        config=config,
    )
