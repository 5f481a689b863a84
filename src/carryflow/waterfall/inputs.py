# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Waterfall Input Parameters

Validated parameters for a single distribution event. Amounts are in one
currency unit; rates are whole-number percentages (``8`` means 8%).

Example:
    ```python
    inputs = WaterfallInputs(
        total_proceeds=50_000_000,
        lp_contribution=40_000_000,
        hurdle_rate=8,
        carry_rate=20,
        management_fees=2_000_000,
    )

    # camelCase payloads from the dashboard validate as well
    inputs = WaterfallInputs.model_validate({"totalProceeds": 50_000_000, ...})
    ```
"""

from __future__ import annotations

from pydantic import Field

from ..core.calculations import FinancialCalculations
from ..core.primitives import (
    CarryPercentage,
    FiniteFloat,
    Model,
    NonNegativeFloat,
    Percentage,
    PositiveFloat,
)


class WaterfallInputs(Model):
    """
    Parameters of an American (deal-by-deal) distribution waterfall.

    Defaults reproduce the reference deal: $50M proceeds on $40M of LP capital,
    8% hurdle, 20% carry, full catch-up and $2M of management fees.

    Validation is strict so the engine never sees values that would make a
    tier meaningless: LP capital must be positive (it is a divisor), carry
    must stay below 100% (the catch-up divisor is ``100 - carry``), and
    proceeds and fees cannot be negative.
    """

    total_proceeds: NonNegativeFloat = Field(
        default=50_000_000.0, description="Gross distributable proceeds"
    )
    lp_contribution: PositiveFloat = Field(
        default=40_000_000.0, description="Capital contributed by the LP"
    )
    hurdle_rate: FiniteFloat = Field(
        default=8.0,
        description="LP preferred return as a whole percent (8 for 8%); "
        "zero or negative hurdles produce no preferred return",
    )
    carry_rate: CarryPercentage = Field(
        default=20.0, description="GP carried interest as a whole percent, below 100"
    )
    catchup_rate: Percentage = Field(
        default=100.0,
        description="GP catch-up percentage. Collected for completeness; the "
        "catch-up tier always equalizes the GP to the full carry rate",
    )
    management_fees: NonNegativeFloat = Field(
        default=2_000_000.0, description="Fees deducted before any distribution"
    )

    @property
    def net_proceeds(self) -> float:
        """Proceeds left for partners after management fees."""
        return self.total_proceeds - self.management_fees

    @property
    def hurdle_amount(self) -> float:
        """LP contribution grown by the hurdle rate (the catch-up threshold)."""
        return FinancialCalculations.grow_by_rate(
            self.lp_contribution, self.hurdle_rate
        )

    @property
    def hurdle_fraction(self) -> float:
        """Hurdle rate as a fraction (0.08 for 8%)."""
        return FinancialCalculations.percent_to_fraction(self.hurdle_rate)

    @property
    def carry_fraction(self) -> float:
        """Carry rate as a fraction (0.20 for 20%)."""
        return FinancialCalculations.percent_to_fraction(self.carry_rate)

    @property
    def has_partial_catchup(self) -> bool:
        """True when a catch-up below 100% was requested."""
        return self.catchup_rate != 100.0

    def __str__(self) -> str:
        return (
            f"Waterfall: ${self.total_proceeds:,.0f} proceeds, "
            f"${self.lp_contribution:,.0f} LP capital, "
            f"{self.hurdle_rate:g}% hurdle, {self.carry_rate:g}% carry"
        )


__all__ = ["WaterfallInputs"]
