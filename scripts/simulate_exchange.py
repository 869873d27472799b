#!/usr/bin/env python3
"""Walk a single exchange pool through a seeding deposit, swaps and a withdrawal.

Prints the pool state after every step. Useful for eyeballing how fees
accrue to the reserves and how LP payouts track them.

Usage:
    python scripts/simulate_exchange.py [--fee-bps 30] [--swaps 5] [--verbose]
"""

import argparse
import logging
import sys
from pathlib import Path

import structlog

sys.path.insert(0, str(Path(__file__).parent.parent))

from exchange import Exchange, ExchangeConfig
from exchange.clock import ManualClock
from exchange.errors import ExchangeError
from exchange.transfers import InMemoryWallets

ASSET_A = "0x" + "aa" * 32
ASSET_B = "0x" + "bb" * 32
PROVIDER = "0x" + "01" * 32
TRADER = "0x" + "02" * 32

logger = structlog.get_logger()


def print_pool(label: str, exchange: Exchange) -> None:
    info = exchange.pool_info()
    k = info.reserve_a * info.reserve_b
    print(
        f"{label:<28} reserve_a={info.reserve_a:>12} reserve_b={info.reserve_b:>12} "
        f"lp_supply={info.lp_supply:>10} k={k}"
    )


def run(args: argparse.Namespace) -> int:
    clock = ManualClock()
    wallets = InMemoryWallets()
    exchange = Exchange(config=ExchangeConfig(fee_bps=args.fee_bps), clock=clock, sink=wallets)
    exchange.constructor(ASSET_A, ASSET_B)
    deadline = args.swaps + 10

    exchange.deposit(PROVIDER, ASSET_A, args.seed_a)
    exchange.deposit(PROVIDER, ASSET_B, args.seed_b)
    minted = exchange.add_liquidity(PROVIDER, 0, deadline)
    print_pool(f"seeded (minted {minted})", exchange)

    for i in range(args.swaps):
        clock.advance()
        asset_in = ASSET_A if i % 2 == 0 else ASSET_B
        quote = exchange.preview_swap_exact_input(args.swap_amount, asset_in)
        exchange.deposit(TRADER, asset_in, args.swap_amount)
        try:
            out = exchange.swap_exact_input(TRADER, quote.amount, deadline)
        except ExchangeError as e:
            logger.error("swap_failed", step=i, error=type(e).__name__)
            return 1
        side = "A->B" if asset_in == ASSET_A else "B->A"
        print_pool(f"swap {i + 1} {side} out={out}", exchange)

    clock.advance()
    removed = exchange.remove_liquidity(PROVIDER, minted, 0, 0, deadline)
    print_pool("liquidity removed", exchange)
    print(
        f"\nProvider received {removed.amount_a} A / {removed.amount_b} B "
        f"for {args.seed_a} A / {args.seed_b} B deposited"
    )
    print(
        f"Trader wallet: {wallets.balance(TRADER, ASSET_A)} A / "
        f"{wallets.balance(TRADER, ASSET_B)} B"
    )
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Simulate a constant-product exchange pool")
    parser.add_argument("--fee-bps", type=int, default=30, help="Swap fee in basis points")
    parser.add_argument("--seed-a", type=int, default=1_000_000, help="Initial asset A reserve")
    parser.add_argument("--seed-b", type=int, default=4_000_000, help="Initial asset B reserve")
    parser.add_argument("--swaps", type=int, default=5, help="Number of alternating swaps")
    parser.add_argument("--swap-amount", type=int, default=10_000, help="Input per swap")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
