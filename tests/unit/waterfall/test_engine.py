# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the Waterfall Engine

Covers the four tiers on the reference deal, boundary behaviour when proceeds
run out part-way through the waterfall, and engine-level error handling.
"""

import logging
import math

import pytest
from pydantic import ValidationError

from carryflow.core import (
    CalculationSettings,
    WaterfallInvariantError,
    WaterfallTierEnum,
)
from carryflow.waterfall import (
    WaterfallEngine,
    WaterfallInputs,
    WaterfallResults,
    compute_waterfall,
)


class TestReferenceDeal:
    """$50M proceeds, $40M LP capital, 8% hurdle, 20% carry, $2M fees."""

    def test_headline_split(self, engine, reference_inputs):
        results = engine.compute(reference_inputs)

        assert results.total_distribution == pytest.approx(48_000_000)
        assert results.lp_distribution == pytest.approx(46_400_000)
        assert results.gp_distribution == pytest.approx(1_600_000)

    def test_tier_amounts(self, engine, reference_inputs):
        results = engine.compute(reference_inputs)

        assert results.return_of_capital == pytest.approx(40_000_000)
        assert results.preferred_return == pytest.approx(3_200_000)
        assert results.calculations.gp_catchup == pytest.approx(800_000)
        assert results.lp_carry_share == pytest.approx(3_200_000)
        assert results.gp_carry_share == pytest.approx(800_000)
        assert results.calculations.carry_distribution == pytest.approx(800_000)

    def test_remaining_after_each_tier(self, engine, reference_inputs):
        results = engine.compute(reference_inputs)

        remaining = [tier.remaining_after for tier in results.tiers]
        assert remaining == pytest.approx([8_000_000, 4_800_000, 4_000_000, 0])

    def test_tiers_in_payment_order(self, engine, reference_inputs):
        results = engine.compute(reference_inputs)

        assert [t.tier for t in results.tiers] == WaterfallTierEnum.ordered()

    def test_derived_metrics(self, engine, reference_inputs):
        results = engine.compute(reference_inputs)

        assert results.catchup_threshold == pytest.approx(43_200_000)
        assert results.calculations.net_proceeds == pytest.approx(48_000_000)
        assert results.calculations.lp_return == pytest.approx(16.0)
        assert results.lp_equity_multiple == pytest.approx(1.16)

    def test_rates_are_echoed(self, engine, reference_inputs):
        results = engine.compute(reference_inputs)

        assert results.carry_rate == 20
        assert results.hurdle_rate == 8
        assert results.lp_contribution == 40_000_000

    def test_full_catchup_gives_gp_carry_share_of_profit(
        self, engine, reference_inputs
    ):
        """Once catch-up is fully paid the GP holds exactly the carry rate of profit."""
        results = engine.compute(reference_inputs)

        assert results.gp_share_of_profit == pytest.approx(0.20)

    def test_compute_waterfall_matches_engine(self, engine, reference_inputs):
        assert compute_waterfall(reference_inputs) == engine.compute(reference_inputs)


class TestBoundaryBehaviour:
    """Proceeds that run out before all tiers are paid."""

    def test_loss_scenario(self, engine):
        """Proceeds below LP capital all return to the LP."""
        inputs = WaterfallInputs(
            total_proceeds=30_000_000,
            lp_contribution=40_000_000,
            management_fees=0,
        )
        results = engine.compute(inputs)

        assert results.return_of_capital == pytest.approx(30_000_000)
        assert results.preferred_return == 0
        assert results.calculations.gp_catchup == 0
        assert results.lp_carry_share == 0
        assert results.lp_distribution == pytest.approx(30_000_000)
        assert results.gp_distribution == 0
        assert results.calculations.lp_return == pytest.approx(-25.0)
        assert results.gp_share_of_profit is None

    def test_proceeds_equal_to_fees(self, engine):
        inputs = WaterfallInputs(total_proceeds=2_000_000, management_fees=2_000_000)
        results = engine.compute(inputs)

        assert results.total_distribution == 0
        assert results.lp_distribution == 0
        assert results.gp_distribution == 0
        assert results.calculations.lp_return == pytest.approx(-100.0)

    def test_proceeds_below_capital_plus_fees(self, engine):
        inputs = WaterfallInputs(
            total_proceeds=41_000_000,
            lp_contribution=40_000_000,
            management_fees=2_000_000,
        )
        results = engine.compute(inputs)

        assert results.lp_distribution == pytest.approx(39_000_000)
        assert results.gp_distribution == 0

    def test_fees_exceeding_proceeds_pass_the_shortfall_to_the_lp(self, engine):
        inputs = WaterfallInputs(total_proceeds=1_000_000, management_fees=3_000_000)
        results = engine.compute(inputs)

        assert results.total_distribution == pytest.approx(-2_000_000)
        assert results.return_of_capital == pytest.approx(-2_000_000)
        assert results.lp_distribution == pytest.approx(-2_000_000)
        assert results.preferred_return == 0
        assert results.calculations.gp_catchup == 0
        assert results.gp_distribution == 0

    def test_partial_preferred_return(self, engine):
        inputs = WaterfallInputs(
            total_proceeds=42_000_000, lp_contribution=40_000_000, management_fees=0
        )
        results = engine.compute(inputs)

        assert results.preferred_return == pytest.approx(2_000_000)
        assert results.calculations.gp_catchup == 0
        assert results.lp_distribution == pytest.approx(42_000_000)
        assert results.gp_distribution == 0

    def test_partial_catchup(self, engine):
        """Proceeds run out inside the catch-up tier."""
        inputs = WaterfallInputs(
            total_proceeds=43_500_000, lp_contribution=40_000_000, management_fees=0
        )
        results = engine.compute(inputs)

        assert results.preferred_return == pytest.approx(3_200_000)
        assert results.calculations.gp_catchup == pytest.approx(300_000)
        assert results.lp_carry_share == pytest.approx(0, abs=1e-6)
        assert results.gp_carry_share == pytest.approx(0, abs=1e-6)
        assert results.lp_distribution == pytest.approx(43_200_000)
        assert results.gp_distribution == pytest.approx(300_000)

    def test_zero_carry_gives_gp_nothing(self, engine, reference_inputs):
        results = engine.compute(reference_inputs.copy(updates={"carry_rate": 0}))

        assert results.calculations.gp_catchup == 0
        assert results.gp_carry_share == 0
        assert results.gp_distribution == 0
        assert results.lp_distribution == pytest.approx(48_000_000)

    @pytest.mark.parametrize("hurdle_rate", [0, -5])
    def test_non_positive_hurdle_clamps_preferred_return(
        self, engine, reference_inputs, hurdle_rate
    ):
        results = engine.compute(
            reference_inputs.copy(updates={"hurdle_rate": hurdle_rate})
        )

        assert results.preferred_return == 0
        assert results.calculations.gp_catchup == 0
        # Everything above capital is split 80/20
        assert results.lp_distribution == pytest.approx(46_400_000)
        assert results.gp_distribution == pytest.approx(1_600_000)

    def test_carry_split_stays_finite_near_float_max(self, engine):
        inputs = WaterfallInputs(total_proceeds=1e308, management_fees=0)
        results = engine.compute(inputs)

        assert math.isfinite(results.lp_distribution)
        assert math.isfinite(results.gp_distribution)
        assert results.lp_distribution == pytest.approx(0.8e308)
        assert results.gp_distribution == pytest.approx(0.2e308)
        assert results.lp_distribution + results.gp_distribution == pytest.approx(1e308)


class TestCatchupRate:
    """The catch-up rate is accepted but does not change the result."""

    def test_partial_catchup_rate_is_ignored(self, engine, reference_inputs):
        full = engine.compute(reference_inputs)
        partial = engine.compute(reference_inputs.copy(updates={"catchup_rate": 50}))

        assert partial.lp_distribution == full.lp_distribution
        assert partial.gp_distribution == full.gp_distribution

    def test_partial_catchup_rate_logs_warning(self, engine, reference_inputs, caplog):
        with caplog.at_level(logging.WARNING, logger="carryflow.waterfall.engine"):
            engine.compute(reference_inputs.copy(updates={"catchup_rate": 50}))

        assert "catchup_rate=50% ignored" in caplog.text

    def test_full_catchup_does_not_warn(self, engine, reference_inputs, caplog):
        with caplog.at_level(logging.WARNING, logger="carryflow.waterfall.engine"):
            engine.compute(reference_inputs)

        assert caplog.text == ""


class TestEngineInputs:
    """Accepted input shapes and engine-level errors."""

    def test_accepts_camel_case_mapping(self, engine):
        results = engine.compute(
            {
                "totalProceeds": 50_000_000,
                "lpContribution": 40_000_000,
                "hurdleRate": 8,
                "carryRate": 20,
                "catchupRate": 100,
                "managementFees": 2_000_000,
            }
        )

        assert isinstance(results, WaterfallResults)
        assert results.gp_distribution == pytest.approx(1_600_000)

    def test_none_settings_fall_back_to_defaults(self, reference_inputs):
        engine = WaterfallEngine(None)

        assert engine.settings == CalculationSettings()
        assert engine.compute(reference_inputs).gp_distribution == pytest.approx(
            1_600_000
        )

    def test_invalid_mapping_is_rejected_before_computing(self, engine):
        with pytest.raises(ValidationError) as exc_info:
            engine.compute({"lp_contribution": 0})

        assert exc_info.value.errors()[0]["loc"] == ("lp_contribution",)

    def test_rejects_unsupported_input_type(self, engine):
        with pytest.raises(TypeError, match="WaterfallInputs or a mapping"):
            engine.compute([50_000_000, 40_000_000])  # type: ignore[arg-type]

    def test_full_carry_divides_by_zero_when_validation_is_bypassed(
        self, unchecked_engine
    ):
        inputs = WaterfallInputs.model_construct(carry_rate=100.0)

        with pytest.raises(ZeroDivisionError):
            unchecked_engine.compute(inputs)

    def test_conservation_failure_raises(self, engine):
        with pytest.raises(WaterfallInvariantError) as exc_info:
            engine._check_conservation(100.0, 60.0, 30.0)

        assert exc_info.value.expected == 100.0
        assert exc_info.value.actual == 90.0

    def test_conservation_check_passes_within_tolerance(self, engine):
        engine._check_conservation(48_000_000.0, 46_400_000.0, 1_600_000.000001)

    def test_results_are_immutable(self, engine, reference_inputs):
        results = engine.compute(reference_inputs)

        with pytest.raises(ValidationError):
            results.lp_distribution = 0.0
