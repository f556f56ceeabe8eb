"""Wallet balances and token metadata."""

from __future__ import annotations

import structlog

from pumpswap.addresses import get_associated_token_address
from pumpswap.constants import DEFAULT_DECIMALS, LAMPORTS_PER_SOL
from pumpswap.errors import DecodeError, QueryError
from pumpswap.pools.layout import decode_mint_decimals, decode_token_amount
from pumpswap.rpc.client import WalletSource

logger = structlog.get_logger()


class TokenService:
    """Reads SOL and SPL token balances for a wallet.

    Args:
        accounts: Account query collaborator with balance lookups
        default_decimals: Decimals assumed when a mint cannot be read
    """

    def __init__(self, accounts: WalletSource, default_decimals: int = DEFAULT_DECIMALS) -> None:
        self.accounts = accounts
        self.default_decimals = default_decimals

    async def get_sol_balance(self, owner: str) -> float:
        """SOL balance of `owner` in whole SOL."""
        lamports = await self.accounts.get_balance(owner)
        return lamports / LAMPORTS_PER_SOL

    async def get_token_balance_raw(self, mint: str, owner: str) -> int:
        """Raw token balance held in the owner's associated token account.

        Returns 0 when the associated token account does not exist.
        """
        ata = get_associated_token_address(owner, mint)
        data = await self.accounts.get_account_info(ata)
        if data is None:
            logger.debug("token_account_missing", mint=mint, owner=owner, ata=ata)
            return 0
        return decode_token_amount(ata, data)

    async def get_token_balance(self, mint: str, owner: str) -> float:
        """Token balance in human units (0.0 if no token account)."""
        raw = await self.get_token_balance_raw(mint, owner)
        if raw == 0:
            return 0.0
        decimals = await self.get_token_decimals(mint)
        return raw / 10**decimals

    async def get_token_decimals(self, mint: str) -> int:
        """Decimals of `mint`, falling back to the default when unreadable."""
        try:
            data = await self.accounts.get_account_info(mint)
            if data is not None:
                return decode_mint_decimals(mint, data)
        except (QueryError, DecodeError) as err:
            logger.warning(
                "token_decimals_unavailable",
                mint=mint,
                default=self.default_decimals,
                error=str(err),
            )
            return self.default_decimals

        logger.warning("token_decimals_unavailable", mint=mint, default=self.default_decimals)
        return self.default_decimals

    async def token_account_exists(self, mint: str, owner: str) -> bool:
        ata = get_associated_token_address(owner, mint)
        return await self.accounts.get_account_info(ata) is not None
