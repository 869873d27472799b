"""Tests for AssetPair and PoolState."""

import pytest

from exchange.errors import InvalidAsset, InvariantViolation
from exchange.models import AssetPair, PoolState
from tests.helpers import ASSET_A, ASSET_B, ASSET_C


class TestAssetPair:
    def test_normalizes_case(self):
        pair = AssetPair(ASSET_A.upper().replace("0X", "0x"), ASSET_B)
        assert pair.asset_a == ASSET_A

    def test_rejects_identical_assets(self):
        with pytest.raises(InvalidAsset):
            AssetPair(ASSET_A, ASSET_A)

    def test_rejects_identical_assets_differing_in_case(self):
        with pytest.raises(InvalidAsset):
            AssetPair(ASSET_A, ASSET_A.replace("aa", "AA"))

    @pytest.mark.parametrize("bad", ["", "0x1234", "aa" * 32, "0x" + "zz" * 32])
    def test_rejects_malformed_ids(self, bad):
        with pytest.raises(InvalidAsset):
            AssetPair(bad, ASSET_B)

    def test_is_frozen(self):
        pair = AssetPair(ASSET_A, ASSET_B)
        with pytest.raises(AttributeError):
            pair.asset_a = ASSET_C  # type: ignore[misc]

    def test_other(self):
        pair = AssetPair(ASSET_A, ASSET_B)
        assert pair.other(ASSET_A) == ASSET_B
        assert pair.other(ASSET_B) == ASSET_A

    def test_resolve_rejects_foreign_asset(self):
        pair = AssetPair(ASSET_A, ASSET_B)
        with pytest.raises(InvalidAsset):
            pair.resolve(ASSET_C)

    def test_contains(self):
        pair = AssetPair(ASSET_A, ASSET_B)
        assert pair.contains(ASSET_A)
        assert not pair.contains(ASSET_C)


class TestPoolState:
    def test_default_is_empty(self):
        pool = PoolState()
        assert pool.is_empty
        assert pool.product == 0

    def test_seeded(self):
        pool = PoolState(reserve_a=100, reserve_b=400, lp_supply=200)
        assert not pool.is_empty
        assert pool.product == 40_000

    @pytest.mark.parametrize(
        ("reserve_a", "reserve_b", "lp_supply"),
        [(100, 0, 0), (0, 400, 0), (0, 0, 200), (100, 400, 0), (100, 0, 200)],
    )
    def test_rejects_partially_seeded(self, reserve_a, reserve_b, lp_supply):
        with pytest.raises(InvariantViolation):
            PoolState(reserve_a=reserve_a, reserve_b=reserve_b, lp_supply=lp_supply)

    def test_rejects_out_of_range(self):
        with pytest.raises(InvariantViolation):
            PoolState(reserve_a=2**64, reserve_b=1, lp_supply=1)

    def test_get_reserves_orders_by_input(self):
        pair = AssetPair(ASSET_A, ASSET_B)
        pool = PoolState(reserve_a=100, reserve_b=400, lp_supply=200)
        assert pool.get_reserves(pair, ASSET_A) == (100, 400)
        assert pool.get_reserves(pair, ASSET_B) == (400, 100)

    def test_with_reserves(self):
        pair = AssetPair(ASSET_A, ASSET_B)
        pool = PoolState(reserve_a=100, reserve_b=400, lp_supply=200)
        assert pool.with_reserves(pair, ASSET_A, 110, 364) == PoolState(110, 364, 200)
        assert pool.with_reserves(pair, ASSET_B, 410, 91) == PoolState(91, 410, 200)
