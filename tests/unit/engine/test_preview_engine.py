"""Tests for side-effect-free previews."""

from exchange.config import ExchangeConfig
from exchange.engine.preview import (
    pool_info,
    preview_add_liquidity,
    preview_swap_exact_input,
    preview_swap_exact_output,
)
from exchange.models import AssetPair, PoolState
from tests.helpers import ASSET_A, ASSET_B

PAIR = AssetPair(ASSET_A, ASSET_B)
SEEDED = PoolState(reserve_a=100, reserve_b=400, lp_supply=200)
NO_FEE = ExchangeConfig(fee_bps=0)


class TestPreviewAddLiquidity:
    def test_seeded_pool_a_side(self):
        info = preview_add_liquidity(SEEDED, PAIR, 10, ASSET_A)
        assert info.other_asset_amount == 40
        assert info.liquidity_to_receive == 20

    def test_seeded_pool_b_side(self):
        info = preview_add_liquidity(SEEDED, PAIR, 40, ASSET_B)
        assert info.other_asset_amount == 10
        assert info.liquidity_to_receive == 20

    def test_empty_pool_uses_other_escrow(self):
        info = preview_add_liquidity(PoolState(), PAIR, 100, ASSET_A, other_escrowed=400)
        assert info.other_asset_amount == 400
        assert info.liquidity_to_receive == 200

    def test_empty_pool_without_counterpart(self):
        info = preview_add_liquidity(PoolState(), PAIR, 100, ASSET_A)
        assert info.other_asset_amount == 0
        assert info.liquidity_to_receive == 0


class TestPreviewSwaps:
    def test_exact_input(self):
        info = preview_swap_exact_input(SEEDED, PAIR, 10, ASSET_A, NO_FEE)
        assert info.amount == 36
        assert info.sufficient_reserve

    def test_exact_input_empty_pool(self):
        info = preview_swap_exact_input(PoolState(), PAIR, 10, ASSET_A, NO_FEE)
        assert info.amount == 0
        assert not info.sufficient_reserve

    def test_exact_output(self):
        info = preview_swap_exact_output(SEEDED, PAIR, 36, ASSET_B, NO_FEE)
        assert info.amount == 10
        assert info.sufficient_reserve

    def test_exact_output_beyond_reserve(self):
        info = preview_swap_exact_output(SEEDED, PAIR, 400, ASSET_B, NO_FEE)
        assert info.amount == 0
        assert not info.sufficient_reserve

    def test_exact_output_empty_pool(self):
        info = preview_swap_exact_output(PoolState(), PAIR, 1, ASSET_B, NO_FEE)
        assert not info.sufficient_reserve


def test_pool_info():
    info = pool_info(SEEDED, PAIR)
    assert (info.asset_a, info.asset_b) == (ASSET_A, ASSET_B)
    assert (info.reserve_a, info.reserve_b, info.lp_supply) == (100, 400, 200)
