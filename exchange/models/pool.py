"""Pool state representation.

AssetPair is fixed once at construction. PoolState is an immutable
snapshot; every committed transition replaces it with a new value, so a
reverted transition only needs to keep the previous object.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from exchange.errors import InvalidAsset, InvariantViolation
from exchange.models.types import is_u64, is_valid_id, normalize_id


@dataclass(frozen=True)
class AssetPair:
    """The two distinct assets traded by the pool.

    Attributes:
        asset_a: First asset id (lowercase)
        asset_b: Second asset id (lowercase)
    """

    asset_a: str
    asset_b: str

    def __post_init__(self) -> None:
        for name in ("asset_a", "asset_b"):
            value = getattr(self, name)
            if not is_valid_id(value):
                raise InvalidAsset(f"{name} is not a valid asset id: {value!r}")
            object.__setattr__(self, name, normalize_id(value))
        if self.asset_a == self.asset_b:
            raise InvalidAsset(f"Pair assets must differ, got {self.asset_a} twice")

    def contains(self, asset: str) -> bool:
        return isinstance(asset, str) and normalize_id(asset) in (self.asset_a, self.asset_b)

    def resolve(self, asset: str) -> str:
        """Return the normalized asset id, failing if it is not in the pair."""
        if not is_valid_id(asset) or not self.contains(asset):
            raise InvalidAsset(f"Asset {asset!r} is not part of the pair")
        return normalize_id(asset)

    def other(self, asset: str) -> str:
        """Get the opposite asset of the pair."""
        asset = self.resolve(asset)
        return self.asset_b if asset == self.asset_a else self.asset_a

    def is_a(self, asset: str) -> bool:
        return self.resolve(asset) == self.asset_a


@dataclass(frozen=True)
class PoolState:
    """Reserves and LP supply of the pool.

    Invariant: reserve_a == 0 <=> reserve_b == 0 <=> lp_supply == 0.
    """

    reserve_a: int = 0
    reserve_b: int = 0
    lp_supply: int = 0

    def __post_init__(self) -> None:
        for name in ("reserve_a", "reserve_b", "lp_supply"):
            if not is_u64(getattr(self, name)):
                raise InvariantViolation(f"{name} out of u64 range: {getattr(self, name)!r}")
        zeros = (self.reserve_a == 0, self.reserve_b == 0, self.lp_supply == 0)
        if any(zeros) and not all(zeros):
            raise InvariantViolation(
                f"Pool must be empty or fully seeded: reserves=({self.reserve_a}, "
                f"{self.reserve_b}), lp_supply={self.lp_supply}"
            )

    @property
    def is_empty(self) -> bool:
        return self.lp_supply == 0

    @property
    def product(self) -> int:
        """Constant-product invariant k = reserve_a * reserve_b."""
        return self.reserve_a * self.reserve_b

    def get_reserves(self, pair: AssetPair, asset_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if pair.is_a(asset_in):
            return self.reserve_a, self.reserve_b
        return self.reserve_b, self.reserve_a

    def with_reserves(
        self, pair: AssetPair, asset_in: str, reserve_in: int, reserve_out: int
    ) -> PoolState:
        """Return a copy with reserves given in (in, out) order for asset_in."""
        if pair.is_a(asset_in):
            return replace(self, reserve_a=reserve_in, reserve_b=reserve_out)
        return replace(self, reserve_a=reserve_out, reserve_b=reserve_in)
