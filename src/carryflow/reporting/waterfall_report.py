# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Waterfall Distribution Report

Tier-by-tier table and headline summary for a computed waterfall, in the
layout used by fund distribution notices: tiers as rows, LP and GP amounts as
columns, with a total row.
"""

from __future__ import annotations

from typing import Any, Dict

import pandas as pd

from .base import BaseReport
from .formatting import format_currency_millions, format_percentage

TIER_COLUMNS = ["LP", "GP", "Total", "Remaining"]


class WaterfallReport(BaseReport):
    """Distribution table and summary for one waterfall computation."""

    def generate(self, include_total: bool = True) -> pd.DataFrame:
        """
        Build the tier table.

        Args:
            include_total: Append a ``Total`` row summing each column
                (``Remaining`` is left empty on that row)

        Returns:
            DataFrame indexed by tier name with columns LP, GP, Total, Remaining
        """
        rows = [
            [tier.lp_amount, tier.gp_amount, tier.total, tier.remaining_after]
            for tier in self.results.tiers
        ]
        index = [tier.tier.value for tier in self.results.tiers]
        table = pd.DataFrame(
            rows, index=pd.Index(index, name="Tier"), columns=TIER_COLUMNS
        )

        if include_total:
            totals = table[["LP", "GP", "Total"]].sum()
            totals["Remaining"] = float("nan")
            table.loc["Total"] = totals

        return table

    def summary(self) -> Dict[str, Any]:
        """Headline numbers as plain floats."""
        results = self.results
        return {
            "net_proceeds": results.total_distribution,
            "lp_distribution": results.lp_distribution,
            "gp_distribution": results.gp_distribution,
            "lp_return": results.calculations.lp_return,
            "lp_equity_multiple": results.lp_equity_multiple,
            "gp_catchup": results.calculations.gp_catchup,
            "carry_distribution": results.calculations.carry_distribution,
            "catchup_threshold": results.catchup_threshold,
            "hurdle_rate": results.hurdle_rate,
            "carry_rate": results.carry_rate,
        }

    def formatted_summary(self) -> Dict[str, str]:
        """Headline numbers as display strings ("$46.4M", "16.0%")."""
        results = self.results
        decimals = self._settings.currency_decimals
        return {
            "LP Distribution": format_currency_millions(
                results.lp_distribution, decimals
            ),
            "LP Return": format_percentage(results.calculations.lp_return),
            "GP Distribution": format_currency_millions(
                results.gp_distribution, decimals
            ),
            "Carry Rate": format_percentage(results.carry_rate),
            "Net Proceeds": format_currency_millions(
                results.total_distribution, decimals
            ),
            "Catch-up Threshold": format_currency_millions(
                results.catchup_threshold, decimals
            ),
        }
