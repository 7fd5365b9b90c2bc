"""Quote a trade against a constant-product pool from the command line.

Example:
    amm-pool --reserve0 15000000000 --reserve1 10000000000 --sell-amount 100000
"""

from __future__ import annotations

import argparse
import json
import sys

import structlog

from amm_pool.config import PoolConfig
from amm_pool.errors import PoolSimulationError
from amm_pool.logging_config import configure_logging
from amm_pool.models.token import ERC20Token
from amm_pool.models.types import ZERO_ADDRESS
from amm_pool.pools.constant_product import ConstantProductPool

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amm-pool",
        description="Spot prices and trade quotes for a constant-product pool",
    )
    parser.add_argument("--chain", default="ethereum", help="Chain of both tokens")
    parser.add_argument("--address", default=ZERO_ADDRESS, help="Pool address")
    parser.add_argument("--symbol0", default="TOKEN0", help="Symbol of token 0")
    parser.add_argument("--symbol1", default="TOKEN1", help="Symbol of token 1")
    parser.add_argument("--decimals0", type=int, default=18, help="Decimals of token 0")
    parser.add_argument("--decimals1", type=int, default=18, help="Decimals of token 1")
    parser.add_argument("--reserve0", type=int, required=True, help="Raw reserve of token 0")
    parser.add_argument("--reserve1", type=int, required=True, help="Raw reserve of token 1")
    parser.add_argument(
        "--sell-amount",
        type=int,
        default=0,
        help="Raw amount to sell (default: 0, prices only)",
    )
    parser.add_argument(
        "--sell-token",
        type=int,
        choices=[0, 1],
        default=0,
        help="Index of the token being sold (default: 0)",
    )
    parser.add_argument("--json", action="store_true", help="Print the quote as JSON")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def quote(pool: ConstantProductPool, sell_amount: int, sell_index: int) -> dict[str, str]:
    """Spot prices, fee and a trade quote as display strings."""
    token_0, token_1 = pool.token_0, pool.token_1
    sell_token, buy_token = (token_0, token_1) if sell_index == 0 else (token_1, token_0)

    amount_out, updated = pool.get_amount_out(sell_amount, sell_token, buy_token)

    return {
        "pool": pool.address,
        f"price_{token_0.symbol}_in_{token_1.symbol}": str(pool.spot_price(token_0, token_1)),
        f"price_{token_1.symbol}_in_{token_0.symbol}": str(pool.spot_price(token_1, token_0)),
        "fee": str(pool.fee(token_0, token_1)),
        "sell_token": sell_token.symbol,
        "buy_token": buy_token.symbol,
        "sell_amount": str(sell_amount),
        "amount_out": str(amount_out),
        f"reserve_{token_0.symbol}": str(updated.reserves[token_0.symbol]),
        f"reserve_{token_1.symbol}": str(updated.reserves[token_1.symbol]),
    }


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = PoolConfig.from_env()
        token_0 = ERC20Token(chain=args.chain, decimals=args.decimals0, symbol=args.symbol0)
        token_1 = ERC20Token(chain=args.chain, decimals=args.decimals1, symbol=args.symbol1)
        pool = ConstantProductPool.from_reserves(
            args.address, token_0, args.reserve0, token_1, args.reserve1, config=config
        )
        result = quote(pool, args.sell_amount, args.sell_token)
    except (ValueError, ArithmeticError, PoolSimulationError) as err:
        logger.error("quote_failed", error=str(err))
        print(f"Error: {err}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        width = max(len(key) for key in result)
        for key, value in result.items():
            print(f"{key:<{width}}  {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
