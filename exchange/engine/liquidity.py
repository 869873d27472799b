"""Liquidity engine: plan add/remove liquidity transitions.

Planners read the current PoolState and escrow amounts, run every check
and formula, and return the resulting PoolState along with the amounts
to move. They never mutate anything; the Exchange commits a plan or
discards it.
"""

from __future__ import annotations

from dataclasses import dataclass

from exchange.amm import constant_product
from exchange.errors import (
    InsufficientLiquidityBalance,
    InsufficientLiquidityMinted,
    InsufficientReserves,
    SlippageExceeded,
)
from exchange.math import checked_add, checked_sub
from exchange.models.pool import PoolState


@dataclass(frozen=True)
class AddLiquidityPlan:
    """Outcome of an add-liquidity call.

    Attributes:
        amount_a: Escrowed asset A consumed into reserves
        amount_b: Escrowed asset B consumed into reserves
        liquidity: LP shares minted to the caller
        pool: Pool state after the commit
    """

    amount_a: int
    amount_b: int
    liquidity: int
    pool: PoolState


@dataclass(frozen=True)
class RemoveLiquidityPlan:
    """Outcome of a remove-liquidity call."""

    amount_a: int
    amount_b: int
    liquidity: int
    pool: PoolState


def consumed_amounts(pool: PoolState, escrow_a: int, escrow_b: int) -> tuple[int, int]:
    """Pick the amounts to take from escrow so the pool ratio is preserved.

    The limiting side is consumed in full and the other side is matched at
    the current ratio, rounded up. Whatever is left stays in escrow.
    """
    required_b = constant_product.proportional_amount(escrow_a, pool.reserve_a, pool.reserve_b)
    if required_b <= escrow_b:
        return escrow_a, required_b
    # escrow_a * reserve_b > escrow_b * reserve_a here, so required_a <= escrow_a
    required_a = constant_product.proportional_amount(escrow_b, pool.reserve_b, pool.reserve_a)
    return required_a, escrow_b


def plan_add_liquidity(
    pool: PoolState,
    escrow_a: int,
    escrow_b: int,
    desired_liquidity: int,
) -> AddLiquidityPlan:
    """Plan minting LP shares from the caller's escrow.

    First deposit: all escrowed A and B become the reserves and
    isqrt(a * b) shares are minted, fixing the initial price.
    Later deposits: see consumed_amounts(); shares minted are
    min(a * supply / reserve_a, b * supply / reserve_b).

    Args:
        pool: Current pool state
        escrow_a: Caller's escrowed asset A
        escrow_b: Caller's escrowed asset B
        desired_liquidity: Minimum shares to accept (0 accepts any non-zero amount)

    Raises:
        InsufficientLiquidityMinted: If the mint is zero or below desired_liquidity
        ArithmeticOverflow: If a new reserve or the supply exceeds u64
    """
    if pool.is_empty:
        if escrow_a == 0 or escrow_b == 0:
            raise InsufficientLiquidityMinted(
                f"Seeding the pool needs both assets escrowed, got ({escrow_a}, {escrow_b})"
            )
        amount_a, amount_b = escrow_a, escrow_b
        liquidity = constant_product.initial_liquidity(amount_a, amount_b)
    else:
        amount_a, amount_b = consumed_amounts(pool, escrow_a, escrow_b)
        liquidity = constant_product.liquidity_to_mint(
            amount_a, amount_b, pool.reserve_a, pool.reserve_b, pool.lp_supply
        )

    if liquidity == 0:
        raise InsufficientLiquidityMinted(
            f"Deposit of ({amount_a}, {amount_b}) mints no liquidity"
        )
    if liquidity < desired_liquidity:
        raise InsufficientLiquidityMinted(
            f"Would mint {liquidity} LP shares, below desired {desired_liquidity}"
        )

    new_pool = PoolState(
        reserve_a=checked_add(pool.reserve_a, amount_a),
        reserve_b=checked_add(pool.reserve_b, amount_b),
        lp_supply=checked_add(pool.lp_supply, liquidity),
    )
    return AddLiquidityPlan(
        amount_a=amount_a, amount_b=amount_b, liquidity=liquidity, pool=new_pool
    )


def plan_remove_liquidity(
    pool: PoolState,
    liquidity: int,
    held: int,
    min_asset_a: int,
    min_asset_b: int,
) -> RemoveLiquidityPlan:
    """Plan burning `liquidity` LP shares for a pro-rata share of reserves.

    Raises:
        InsufficientReserves: If the pool is empty
        InsufficientLiquidityBalance: If the caller holds fewer than `liquidity` shares
        SlippageExceeded: If either payout is below its floor
    """
    if pool.is_empty:
        raise InsufficientReserves("Pool has no liquidity to remove")
    if liquidity > held:
        raise InsufficientLiquidityBalance(f"Holding {held} LP shares, cannot burn {liquidity}")

    amount_a, amount_b = constant_product.burn_amounts(
        liquidity, pool.reserve_a, pool.reserve_b, pool.lp_supply
    )
    if amount_a < min_asset_a or amount_b < min_asset_b:
        raise SlippageExceeded(
            f"Removal yields ({amount_a}, {amount_b}), "
            f"below minimum ({min_asset_a}, {min_asset_b})"
        )

    new_pool = PoolState(
        reserve_a=checked_sub(pool.reserve_a, amount_a),
        reserve_b=checked_sub(pool.reserve_b, amount_b),
        lp_supply=checked_sub(pool.lp_supply, liquidity),
    )
    return RemoveLiquidityPlan(
        amount_a=amount_a, amount_b=amount_b, liquidity=liquidity, pool=new_pool
    )
