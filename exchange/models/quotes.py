"""Pydantic models for exchange query and operation results.

Quotes are ephemeral: they describe what an operation would do against
the current state and are never persisted.
"""

from pydantic import BaseModel, ConfigDict, Field

from exchange.models.types import AssetId, Uint64


class Quote(BaseModel):
    """Base class for preview results."""

    model_config = ConfigDict(frozen=True)


class PreviewAddLiquidityInfo(Quote):
    """Result of previewing an add-liquidity call."""

    other_asset_amount: Uint64 = Field(
        description="Amount of the other asset needed to keep the pool ratio."
    )
    liquidity_to_receive: Uint64 = Field(description="LP shares that would be minted.")


class PreviewSwapInfo(Quote):
    """Result of previewing a swap.

    For exact-input previews `amount` is the output; for exact-output
    previews it is the required input.
    """

    amount: Uint64 = Field(description="Counterpart amount of the swap.")
    sufficient_reserve: bool = Field(
        description="Whether the pool reserves can satisfy the swap."
    )


class PoolInfo(BaseModel):
    """Snapshot of the pool reserves and LP supply."""

    model_config = ConfigDict(frozen=True)

    asset_a: AssetId
    asset_b: AssetId
    reserve_a: Uint64
    reserve_b: Uint64
    lp_supply: Uint64


class RemoveLiquidityInfo(BaseModel):
    """Amounts released by a remove-liquidity call."""

    model_config = ConfigDict(frozen=True)

    amount_a: Uint64
    amount_b: Uint64
    burned_liquidity: Uint64
