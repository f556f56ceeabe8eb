#!/usr/bin/env python3
"""Sell tokens on PumpSwap.

Usage:
    python scripts/sell.py sell --token <MINT> --percentage 50 [--slippage 500]
    python scripts/sell.py sell --token <MINT> --amount 1000 [--slippage 500]
    python scripts/sell.py balance --token <MINT>
    python scripts/sell.py price --token <MINT>

Requires RPC_ENDPOINT and PRIVATE_KEY in the environment.
"""

import argparse
import asyncio
import sys

import structlog
from pydantic import ValidationError

from common import explorer_url, load_config, load_wallet, open_rpc, pool_service

from pumpswap.errors import PumpSwapError
from pumpswap.models.trade import SellParams
from pumpswap.trading.sdk import create_sdk

logger = structlog.get_logger()


async def run_sell(args: argparse.Namespace) -> int:
    config = load_config(args.verbose)
    wallet = load_wallet()
    params = SellParams(
        mint=args.token,
        user=str(wallet.pubkey()),
        exact_amount=args.amount,
        percentage=args.percentage,
        slippage_bps=args.slippage,
    )

    async with open_rpc(config) as rpc:
        sdk = create_sdk(rpc, wallet, config)
        if params.exact_amount is not None:
            result = await sdk.sell_exact_amount(params)
        else:
            result = await sdk.sell_percentage(params)

    if not result.success:
        print(f"Transaction failed: {result.error}")
        return 1
    sold = f"{args.amount} tokens" if args.amount is not None else f"{args.percentage}% of tokens"
    print(f"Sold {sold} of {args.token}")
    print(f"Transaction: {explorer_url(result.signature or '')}")
    return 0


async def run_balance(args: argparse.Namespace) -> int:
    config = load_config(args.verbose)
    wallet = load_wallet()
    async with open_rpc(config) as rpc:
        sdk = create_sdk(rpc, wallet, config)
        balance = await sdk.tokens.get_token_balance(args.token, str(wallet.pubkey()))
        sol = await sdk.tokens.get_sol_balance(str(wallet.pubkey()))

    print(f"Token: {args.token}")
    print(f"Balance: {balance} tokens")
    print(f"SOL: {sol}")
    print(f"Wallet: {wallet.pubkey()}")
    return 0


async def run_price(args: argparse.Namespace) -> int:
    config = load_config(args.verbose)
    async with open_rpc(config) as rpc:
        price = await pool_service(rpc, config).price_of(args.token)

    if price is None:
        print(f"No pool found for {args.token}")
        return 1
    print(f"Token: {args.token}")
    print(f"Price: {price:.10f} SOL")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sell tokens on PumpSwap")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sell = sub.add_parser("sell", help="Sell tokens for SOL")
    sell.add_argument("--token", required=True, help="Token mint address")
    amount = sell.add_mutually_exclusive_group(required=True)
    amount.add_argument("--percentage", type=float, help="Percentage of balance to sell (0-100]")
    amount.add_argument("--amount", type=float, help="Exact amount of tokens to sell")
    sell.add_argument(
        "--slippage",
        type=int,
        default=None,
        help="Slippage tolerance in basis points (default: DEFAULT_SLIPPAGE_BPS or 500)",
    )
    sell.set_defaults(handler=run_sell)

    balance = sub.add_parser("balance", help="Show the wallet's token balance")
    balance.add_argument("--token", required=True, help="Token mint address")
    balance.set_defaults(handler=run_balance)

    price = sub.add_parser("price", help="Show the current token price")
    price.add_argument("--token", required=True, help="Token mint address")
    price.set_defaults(handler=run_price)
    return parser


async def main() -> int:
    args = build_parser().parse_args()
    try:
        return await args.handler(args)
    except ValidationError as err:
        print(f"Invalid input: {err}")
        return 1
    except PumpSwapError as err:
        logger.error("command_failed", command=args.command, error=str(err))
        print(f"Error: {err}")
        return 1


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
