"""Preview engine: side-effect-free quotes.

Same formulas as the liquidity and swap engines, without deadline or
slippage enforcement. A quote that cannot be filled is reported, not
raised.
"""

from __future__ import annotations

import structlog

from exchange.amm import constant_product
from exchange.config import ExchangeConfig
from exchange.errors import InsufficientReserves
from exchange.models.pool import AssetPair, PoolState
from exchange.models.quotes import PoolInfo, PreviewAddLiquidityInfo, PreviewSwapInfo

logger = structlog.get_logger()


def preview_add_liquidity(
    pool: PoolState,
    pair: AssetPair,
    amount: int,
    asset: str,
    other_escrowed: int = 0,
) -> PreviewAddLiquidityInfo:
    """Quote adding `amount` of `asset`.

    On a seeded pool the counterpart is fixed by the reserve ratio. On an
    empty pool there is no ratio yet, so the quote uses whatever the
    caller already has escrowed of the other asset (`other_escrowed`).
    """
    if pool.is_empty:
        liquidity = constant_product.initial_liquidity(amount, other_escrowed)
        return PreviewAddLiquidityInfo(
            other_asset_amount=other_escrowed,
            liquidity_to_receive=liquidity,
        )

    reserve_this, reserve_other = pool.get_reserves(pair, asset)
    other_amount = constant_product.proportional_amount(amount, reserve_this, reserve_other)
    if pair.is_a(asset):
        amount_a, amount_b = amount, other_amount
    else:
        amount_a, amount_b = other_amount, amount
    liquidity = constant_product.liquidity_to_mint(
        amount_a, amount_b, pool.reserve_a, pool.reserve_b, pool.lp_supply
    )
    logger.debug(
        "preview_add_liquidity",
        asset=asset,
        amount=amount,
        other_asset_amount=other_amount,
        liquidity=liquidity,
    )
    return PreviewAddLiquidityInfo(other_asset_amount=other_amount, liquidity_to_receive=liquidity)


def preview_swap_exact_input(
    pool: PoolState,
    pair: AssetPair,
    amount_in: int,
    asset_in: str,
    config: ExchangeConfig,
) -> PreviewSwapInfo:
    """Quote the output for selling `amount_in` of `asset_in`."""
    reserve_in, reserve_out = pool.get_reserves(pair, asset_in)
    amount_out = constant_product.get_amount_out(
        amount_in, reserve_in, reserve_out, config.fee_multiplier, config.fee_denominator
    )
    sufficient = not pool.is_empty and amount_out < reserve_out
    logger.debug(
        "preview_swap_exact_input",
        asset_in=asset_in,
        amount_in=amount_in,
        amount_out=amount_out,
    )
    return PreviewSwapInfo(amount=amount_out, sufficient_reserve=sufficient)


def preview_swap_exact_output(
    pool: PoolState,
    pair: AssetPair,
    amount_out: int,
    asset_out: str,
    config: ExchangeConfig,
) -> PreviewSwapInfo:
    """Quote the input needed to buy `amount_out` of `asset_out`.

    Reports amount=0 with sufficient_reserve=False when the pool cannot
    pay that much.
    """
    asset_in = pair.other(asset_out)
    reserve_in, reserve_out = pool.get_reserves(pair, asset_in)
    try:
        amount_in = constant_product.get_amount_in(
            amount_out, reserve_in, reserve_out, config.fee_multiplier, config.fee_denominator
        )
    except InsufficientReserves:
        logger.debug(
            "preview_swap_exact_output_insufficient", asset_out=asset_out, amount_out=amount_out
        )
        return PreviewSwapInfo(amount=0, sufficient_reserve=False)
    logger.debug(
        "preview_swap_exact_output",
        asset_out=asset_out,
        amount_out=amount_out,
        amount_in=amount_in,
    )
    return PreviewSwapInfo(amount=amount_in, sufficient_reserve=True)


def pool_info(pool: PoolState, pair: AssetPair) -> PoolInfo:
    """Snapshot of reserves and LP supply."""
    return PoolInfo(
        asset_a=pair.asset_a,
        asset_b=pair.asset_b,
        reserve_a=pool.reserve_a,
        reserve_b=pool.reserve_b,
        lp_supply=pool.lp_supply,
    )
