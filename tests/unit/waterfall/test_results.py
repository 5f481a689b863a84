# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for Waterfall Results

Export shape, tier lookup and convenience accessors of WaterfallResults.
"""

import pytest

from carryflow.core.primitives import WaterfallTierEnum
from carryflow.waterfall import TierDistribution, compute_waterfall


class TestWaterfallResultsExport:
    """Dict export matches the dashboard payload."""

    def test_camel_case_export(self, reference_inputs):
        data = compute_waterfall(reference_inputs).to_dict()

        assert set(data) == {
            "totalDistribution",
            "lpDistribution",
            "gpDistribution",
            "carryRate",
            "catchupThreshold",
            "hurdleRate",
            "lpContribution",
            "calculations",
            "tiers",
        }
        assert set(data["calculations"]) == {
            "netProceeds",
            "lpReturn",
            "gpCatchup",
            "carryDistribution",
        }
        assert data["lpDistribution"] == pytest.approx(46_400_000)
        assert data["calculations"]["lpReturn"] == pytest.approx(16.0)

    def test_snake_case_export(self, reference_inputs):
        data = compute_waterfall(reference_inputs).to_dict(by_alias=False)

        assert data["gp_distribution"] == pytest.approx(1_600_000)
        assert data["calculations"]["gp_catchup"] == pytest.approx(800_000)

    def test_tiers_export_as_list_of_records(self, reference_inputs):
        tiers = compute_waterfall(reference_inputs).to_dict()["tiers"]

        assert [t["tier"] for t in tiers] == [
            "Return of Capital",
            "Preferred Return",
            "GP Catch-up",
            "Carried Interest",
        ]
        assert tiers[2]["gpAmount"] == pytest.approx(800_000)
        assert tiers[2]["remainingAfter"] == pytest.approx(4_000_000)


class TestWaterfallResultsAccessors:
    """Tier lookup and derived values."""

    def test_tier_lookup(self, reference_inputs):
        results = compute_waterfall(reference_inputs)

        catchup = results.tier(WaterfallTierEnum.GP_CATCH_UP)
        assert isinstance(catchup, TierDistribution)
        assert catchup.lp_amount == 0
        assert catchup.gp_amount == pytest.approx(800_000)
        assert catchup.total == pytest.approx(800_000)

    def test_missing_tier_raises_key_error(self, reference_inputs):
        results = compute_waterfall(reference_inputs)
        truncated = results.model_copy(update={"tiers": results.tiers[:1]})

        with pytest.raises(KeyError):
            truncated.tier(WaterfallTierEnum.CARRIED_INTEREST)

    def test_string_representation(self, reference_inputs):
        assert str(compute_waterfall(reference_inputs)) == (
            "Waterfall result: LP $46,400,000 (16.0% return), GP $1,600,000"
        )
