"""Tests for raw account decoding."""

import pytest
from solders.pubkey import Pubkey

from pumpswap.constants import POOL_ACCOUNT_SIZE, POOL_BASE_MINT_OFFSET, POOL_QUOTE_MINT_OFFSET
from pumpswap.errors import DecodeError
from pumpswap.pools.layout import decode_mint_decimals, decode_pool_account, decode_token_amount
from tests.helpers import (
    POOL_A,
    TOKEN_MINT,
    USER,
    WSOL,
    make_address,
    mint_account_bytes,
    pool_account_bytes,
    token_account_bytes,
)


class TestDecodePoolAccount:
    """Tests for decode_pool_account."""

    def test_decodes_all_fields(self):
        data = pool_account_bytes(
            base_mint=TOKEN_MINT,
            quote_mint=WSOL,
            base_vault=make_address(40),
            quote_vault=make_address(41),
            creator=make_address(42),
            lp_mint=make_address(43),
            index=7,
            pool_bump=254,
            lp_supply=123_456,
        )
        assert len(data) == POOL_ACCOUNT_SIZE

        account = decode_pool_account(POOL_A, data)

        assert account.address == POOL_A
        assert account.base_mint == TOKEN_MINT
        assert account.quote_mint == WSOL
        assert account.pool_base_token_account == make_address(40)
        assert account.pool_quote_token_account == make_address(41)
        assert account.creator == make_address(42)
        assert account.lp_mint == make_address(43)
        assert account.index == 7
        assert account.pool_bump == 254
        assert account.lp_supply == 123_456

    def test_mints_at_filter_offsets(self):
        """Base and quote mints sit where the discovery memcmp filters look."""
        data = pool_account_bytes(base_mint=TOKEN_MINT, quote_mint=WSOL)
        assert data[POOL_BASE_MINT_OFFSET : POOL_BASE_MINT_OFFSET + 32] == bytes(
            Pubkey.from_string(TOKEN_MINT)
        )
        assert data[POOL_QUOTE_MINT_OFFSET : POOL_QUOTE_MINT_OFFSET + 32] == bytes(
            Pubkey.from_string(WSOL)
        )

    def test_wrong_size_rejected(self):
        data = pool_account_bytes()
        with pytest.raises(DecodeError):
            decode_pool_account(POOL_A, data[:-1])
        with pytest.raises(DecodeError):
            decode_pool_account(POOL_A, data + b"\x00")

    def test_wrong_discriminator_rejected(self):
        data = pool_account_bytes(discriminator=b"\x00" * 8)
        with pytest.raises(DecodeError) as exc_info:
            decode_pool_account(POOL_A, data)
        assert "discriminator" in str(exc_info.value)


class TestDecodeTokenAccounts:
    """Tests for SPL token and mint decoding."""

    def test_token_amount(self):
        data = token_account_bytes(TOKEN_MINT, USER, 2**63 + 5)
        assert decode_token_amount(USER, data) == 2**63 + 5

    def test_token_amount_short_data(self):
        with pytest.raises(DecodeError):
            decode_token_amount(USER, b"\x00" * 71)

    def test_mint_decimals(self):
        assert decode_mint_decimals(TOKEN_MINT, mint_account_bytes(decimals=9)) == 9

    def test_mint_decimals_short_data(self):
        with pytest.raises(DecodeError):
            decode_mint_decimals(TOKEN_MINT, b"\x00" * 44)
