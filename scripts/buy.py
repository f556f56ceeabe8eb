#!/usr/bin/env python3
"""Buy tokens on PumpSwap.

Usage:
    python scripts/buy.py buy --token <MINT> --sol 0.1 [--slippage 500]
    python scripts/buy.py price --token <MINT>

Requires RPC_ENDPOINT and PRIVATE_KEY in the environment.
"""

import argparse
import asyncio
import sys

import structlog
from pydantic import ValidationError

from common import explorer_url, load_config, load_wallet, open_rpc, pool_service

from pumpswap.errors import PumpSwapError
from pumpswap.models.trade import BuyParams
from pumpswap.trading.sdk import create_sdk

logger = structlog.get_logger()


async def run_buy(args: argparse.Namespace) -> int:
    config = load_config(args.verbose)
    wallet = load_wallet()
    params = BuyParams(
        mint=args.token,
        user=str(wallet.pubkey()),
        sol_amount=args.sol,
        slippage_bps=args.slippage,
    )

    async with open_rpc(config) as rpc:
        sdk = create_sdk(rpc, wallet, config)
        result = await sdk.buy(params)

    if not result.success:
        print(f"Transaction failed: {result.error}")
        return 1
    print(f"Bought {args.token} for {args.sol} SOL")
    print(f"Transaction: {explorer_url(result.signature or '')}")
    return 0


async def run_price(args: argparse.Namespace) -> int:
    config = load_config(args.verbose)
    async with open_rpc(config) as rpc:
        pool = await pool_service(rpc, config).best_pool(args.token)

    if pool is None:
        print(f"No pool found for {args.token}")
        return 1
    print(f"Token: {args.token}")
    print(f"Price: {pool.price:.10f} SOL")
    print(f"Pool: {pool.address}")
    print(f"Reserves: {pool.reserves.native:.4f} SOL / {pool.reserves.token:.4f} tokens")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Buy tokens on PumpSwap")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    buy = sub.add_parser("buy", help="Buy tokens with SOL")
    buy.add_argument("--token", required=True, help="Token mint address")
    buy.add_argument("--sol", type=float, required=True, help="Amount of SOL to spend")
    buy.add_argument(
        "--slippage",
        type=int,
        default=None,
        help="Slippage tolerance in basis points (default: DEFAULT_SLIPPAGE_BPS or 500)",
    )
    buy.set_defaults(handler=run_buy)

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
