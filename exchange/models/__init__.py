"""Data models for the exchange."""

from exchange.models.pool import AssetPair, PoolState
from exchange.models.quotes import (
    PoolInfo,
    PreviewAddLiquidityInfo,
    PreviewSwapInfo,
    Quote,
    RemoveLiquidityInfo,
)
from exchange.models.types import AssetId, Uint64, is_u64, is_valid_id, normalize_id

__all__ = [
    # Pool
    "AssetPair",
    "PoolState",
    # Results
    "Quote",
    "PreviewAddLiquidityInfo",
    "PreviewSwapInfo",
    "PoolInfo",
    "RemoveLiquidityInfo",
    # Types
    "AssetId",
    "Uint64",
    "is_u64",
    "is_valid_id",
    "normalize_id",
]
