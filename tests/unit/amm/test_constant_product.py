"""Tests for constant-product pool formulas."""

import pytest

from exchange.amm import ConstantProduct, constant_product
from exchange.errors import InsufficientReserves


class TestGetAmountOut:
    """Exact-input formula."""

    def test_zero_fee_floor(self):
        """400 * 10 / (100 + 10) = 36.36 -> 36."""
        assert constant_product.get_amount_out(10, 100, 400) == 36

    def test_fee_reduces_effective_input(self):
        """30 bps: effective = 10 * 9970 // 10000 = 9, out = 400 * 9 // 109 = 33."""
        assert constant_product.get_amount_out(10, 100, 400, fee_multiplier=9970) == 33

    def test_large_amounts(self):
        """1 unit in against 100/250_000 reserves, 0.3% fee."""
        amount_in = 1 * 10**18
        reserve_in = 100 * 10**18
        reserve_out = 250_000 * 10**6
        out = constant_product.get_amount_out(amount_in, reserve_in, reserve_out, 9970)
        expected = 2467 * 10**6
        assert out < reserve_out
        assert abs(out - expected) < expected * 0.01

    def test_zero_input(self):
        assert constant_product.get_amount_out(0, 100, 100) == 0

    def test_zero_reserves(self):
        assert constant_product.get_amount_out(100, 0, 100) == 0
        assert constant_product.get_amount_out(100, 100, 0) == 0

    def test_output_never_drains_reserve(self):
        assert constant_product.get_amount_out(10**18, 1, 1000) == 999

    def test_product_never_decreases(self):
        reserve_in, reserve_out = 1_000_003, 7_000_019
        for amount_in in (1, 17, 999, 123_456, 10**7):
            out = constant_product.get_amount_out(amount_in, reserve_in, reserve_out, 9970)
            assert (reserve_in + amount_in) * (reserve_out - out) >= reserve_in * reserve_out


class TestGetAmountIn:
    """Exact-output formula."""

    def test_zero_fee_rounds_up(self):
        """100 * 36 / (400 - 36) = 9.89 -> 10."""
        assert constant_product.get_amount_in(36, 100, 400) == 10

    def test_fee_grosses_up(self):
        """ceil(3600 / 364) = 10, then ceil(10 * 10000 / 9970) = 11."""
        assert constant_product.get_amount_in(36, 100, 400, fee_multiplier=9970) == 11

    def test_fee_grosses_up_past_boundary(self):
        """ceil(100_000 / 900) = 112, then ceil(112 * 10000 / 9970) = 113."""
        assert constant_product.get_amount_in(100, 1000, 1000, fee_multiplier=9970) == 113
        assert constant_product.get_amount_in(100, 1000, 1000) == 112

    def test_zero_output(self):
        assert constant_product.get_amount_in(0, 100, 400) == 0

    def test_output_equal_to_reserve_raises(self):
        with pytest.raises(InsufficientReserves):
            constant_product.get_amount_in(400, 100, 400)

    def test_empty_pool_raises(self):
        with pytest.raises(InsufficientReserves):
            constant_product.get_amount_in(1, 0, 0)

    def test_round_trip_covers_requested_output(self):
        """Selling the quoted input yields at least the requested output."""
        reserve_in, reserve_out = 100 * 10**18, 250_000 * 10**6
        desired = 2467 * 10**6
        required = constant_product.get_amount_in(desired, reserve_in, reserve_out, 9970)
        actual = constant_product.get_amount_out(required, reserve_in, reserve_out, 9970)
        assert actual >= desired
        assert actual < desired * 1.0001


class TestLiquidityFormulas:
    def test_initial_liquidity_geometric_mean(self):
        assert constant_product.initial_liquidity(100, 400) == 200

    def test_initial_liquidity_floor(self):
        assert constant_product.initial_liquidity(2, 3) == 2

    def test_proportional_amount_rounds_up(self):
        """10 A at 100:400 needs 40 B; 3 A needs 12 B; 1 B needs 0.25 -> 1 A."""
        assert constant_product.proportional_amount(10, 100, 400) == 40
        assert constant_product.proportional_amount(3, 100, 400) == 12
        assert constant_product.proportional_amount(1, 400, 100) == 1

    def test_liquidity_to_mint_takes_minimum(self):
        assert constant_product.liquidity_to_mint(10, 100, 100, 400, 200) == 20
        assert constant_product.liquidity_to_mint(50, 40, 100, 400, 200) == 20

    def test_burn_amounts_floor(self):
        assert constant_product.burn_amounts(200, 100, 400, 200) == (100, 400)
        assert constant_product.burn_amounts(3, 100, 400, 200) == (1, 6)

    def test_singleton(self):
        assert isinstance(constant_product, ConstantProduct)
