# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Waterfall results.

Immutable outputs of a single waterfall computation. The top-level shape
mirrors the payload the dashboard consumes (``totalDistribution``,
``calculations.lpReturn`` and so on when dumped by alias) and adds a
tier-by-tier breakdown.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import Field

from ..core.calculations import FinancialCalculations
from ..core.primitives import Model, WaterfallTierEnum


class TierDistribution(Model):
    """Amounts paid to each partner class by one waterfall tier."""

    tier: WaterfallTierEnum
    lp_amount: float = Field(..., description="Paid to the LP in this tier")
    gp_amount: float = Field(..., description="Paid to the GP in this tier")
    remaining_after: float = Field(
        ..., description="Proceeds left for later tiers once this tier is paid"
    )

    @property
    def total(self) -> float:
        return self.lp_amount + self.gp_amount


class WaterfallCalculations(Model):
    """Intermediate figures behind the headline split."""

    net_proceeds: float = Field(..., description="Proceeds after management fees")
    lp_return: float = Field(
        ..., description="LP total return over contributed capital, whole percent"
    )
    gp_catchup: float = Field(..., description="GP catch-up tier amount")
    carry_distribution: float = Field(
        ..., description="GP share of the residual carry split"
    )


class WaterfallResults(Model):
    """
    Result of distributing one pool of proceeds through the waterfall.

    ``lp_distribution + gp_distribution`` equals ``total_distribution``
    (within floating point tolerance).
    """

    total_distribution: float = Field(..., description="Net proceeds distributed")
    lp_distribution: float
    gp_distribution: float
    carry_rate: float = Field(..., description="Echoed carry rate, whole percent")
    catchup_threshold: float = Field(
        ..., description="LP capital grown by the hurdle rate"
    )
    hurdle_rate: float = Field(..., description="Echoed hurdle rate, whole percent")
    lp_contribution: float = Field(..., description="Echoed LP capital")
    calculations: WaterfallCalculations
    tiers: Tuple[TierDistribution, ...] = Field(
        ..., description="Tier-by-tier breakdown in payment order"
    )

    def tier(self, tier: WaterfallTierEnum) -> TierDistribution:
        """Look up a tier's breakdown."""
        for entry in self.tiers:
            if entry.tier == tier:
                return entry
        raise KeyError(f"No breakdown for tier {tier!r}")

    @property
    def return_of_capital(self) -> float:
        return self.tier(WaterfallTierEnum.RETURN_OF_CAPITAL).lp_amount

    @property
    def preferred_return(self) -> float:
        return self.tier(WaterfallTierEnum.PREFERRED_RETURN).lp_amount

    @property
    def lp_carry_share(self) -> float:
        return self.tier(WaterfallTierEnum.CARRIED_INTEREST).lp_amount

    @property
    def gp_carry_share(self) -> float:
        return self.tier(WaterfallTierEnum.CARRIED_INTEREST).gp_amount

    @property
    def lp_equity_multiple(self) -> Optional[float]:
        return FinancialCalculations.calculate_equity_multiple(
            self.lp_distribution, self.lp_contribution
        )

    @property
    def gp_share_of_profit(self) -> Optional[float]:
        """GP share of all profit above returned capital, as a fraction."""
        profit = self.total_distribution - self.return_of_capital
        if profit <= 0:
            return None
        return self.gp_distribution / profit

    def to_dict(self, by_alias: bool = True) -> Dict[str, Any]:
        """
        Plain-dict export of the results.

        Args:
            by_alias: Use camelCase keys (``lpDistribution``) matching the
                dashboard payload; snake_case otherwise.
        """
        return self.model_dump(mode="json", by_alias=by_alias)

    def __str__(self) -> str:
        return (
            f"Waterfall result: LP ${self.lp_distribution:,.0f} "
            f"({self.calculations.lp_return:.1f}% return), "
            f"GP ${self.gp_distribution:,.0f}"
        )


__all__ = ["TierDistribution", "WaterfallCalculations", "WaterfallResults"]
