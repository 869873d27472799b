"""Swap engine: plan exact-input and exact-output swaps.

The input side of a swap is whichever asset the caller has escrowed; the
other asset of the pair is the output.
"""

from __future__ import annotations

from dataclasses import dataclass

from exchange.amm import constant_product
from exchange.config import ExchangeConfig
from exchange.errors import (
    AmbiguousInput,
    ExcessiveInputRequired,
    InsufficientReserves,
    InvalidAsset,
    InvariantViolation,
    SlippageExceeded,
)
from exchange.math import checked_add, checked_sub
from exchange.models.pool import AssetPair, PoolState


@dataclass(frozen=True)
class SwapPlan:
    """Outcome of a swap.

    Attributes:
        asset_in: Asset taken from the caller's escrow
        asset_out: Asset released to the caller
        amount_in: Escrowed input consumed (fee included)
        amount_out: Output released to the caller
        pool: Pool state after the commit
    """

    asset_in: str
    asset_out: str
    amount_in: int
    amount_out: int
    pool: PoolState


def select_input_asset(pair: AssetPair, escrow_a: int, escrow_b: int) -> str:
    """Determine the swap input from the caller's escrow.

    Raises:
        AmbiguousInput: If both assets are escrowed
        InvalidAsset: If neither asset is escrowed
    """
    if escrow_a > 0 and escrow_b > 0:
        raise AmbiguousInput(
            f"Both assets escrowed ({escrow_a}, {escrow_b}); withdraw one side before swapping"
        )
    if escrow_a > 0:
        return pair.asset_a
    if escrow_b > 0:
        return pair.asset_b
    raise InvalidAsset("No input asset escrowed")


def _apply_swap(
    pool: PoolState,
    pair: AssetPair,
    asset_in: str,
    amount_in: int,
    amount_out: int,
) -> PoolState:
    """Move amount_in into and amount_out out of the reserves.

    Raises:
        InvariantViolation: If the constant product would decrease
    """
    reserve_in, reserve_out = pool.get_reserves(pair, asset_in)
    new_pool = pool.with_reserves(
        pair,
        asset_in,
        checked_add(reserve_in, amount_in),
        checked_sub(reserve_out, amount_out),
    )
    if new_pool.product < pool.product:
        raise InvariantViolation(
            f"Constant product decreased from {pool.product} to {new_pool.product}"
        )
    return new_pool


def plan_swap_exact_input(
    pool: PoolState,
    pair: AssetPair,
    asset_in: str,
    amount_in: int,
    min_output: int | None,
    config: ExchangeConfig,
) -> SwapPlan:
    """Plan selling all of `amount_in` for as much output as the curve gives.

    Raises:
        InsufficientReserves: If the pool is empty
        SlippageExceeded: If the output is zero or below min_output
    """
    if pool.is_empty:
        raise InsufficientReserves("Pool has no reserves")

    reserve_in, reserve_out = pool.get_reserves(pair, asset_in)
    amount_out = constant_product.get_amount_out(
        amount_in, reserve_in, reserve_out, config.fee_multiplier, config.fee_denominator
    )
    if amount_out == 0:
        raise SlippageExceeded(f"Input of {amount_in} is too small to produce any output")
    if min_output is not None and amount_out < min_output:
        raise SlippageExceeded(f"Output {amount_out} below minimum {min_output}")

    return SwapPlan(
        asset_in=asset_in,
        asset_out=pair.other(asset_in),
        amount_in=amount_in,
        amount_out=amount_out,
        pool=_apply_swap(pool, pair, asset_in, amount_in, amount_out),
    )


def plan_swap_exact_output(
    pool: PoolState,
    pair: AssetPair,
    asset_in: str,
    max_input: int,
    amount_out: int,
    config: ExchangeConfig,
) -> SwapPlan:
    """Plan buying exactly `amount_out`, paying at most `max_input`.

    Raises:
        InsufficientReserves: If amount_out >= the output reserve
        ExcessiveInputRequired: If the required input exceeds max_input
    """
    reserve_in, reserve_out = pool.get_reserves(pair, asset_in)
    amount_in = constant_product.get_amount_in(
        amount_out, reserve_in, reserve_out, config.fee_multiplier, config.fee_denominator
    )
    if amount_in > max_input:
        raise ExcessiveInputRequired(
            f"Output {amount_out} requires input {amount_in}, only {max_input} escrowed"
        )

    return SwapPlan(
        asset_in=asset_in,
        asset_out=pair.other(asset_in),
        amount_in=amount_in,
        amount_out=amount_out,
        pool=_apply_swap(pool, pair, asset_in, amount_in, amount_out),
    )
