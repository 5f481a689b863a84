# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Financial calculation functions.

Contains static methods for the return metrics and rate conversions used by the
waterfall engine and reports. These functions are pure (math-only); other
modules delegate to them so each formula lives in one place.
"""

from __future__ import annotations

import math
from typing import Optional


class FinancialCalculations:
    """
    Pure mathematical functions for financial calculations.

    Rates cross the public boundary as whole-number percentages (8 means 8%)
    and are converted to fractions here when a formula needs them.
    """

    @staticmethod
    def percent_to_fraction(percent: float) -> float:
        """Convert a whole-number percentage to a fraction (8 -> 0.08)."""
        return percent / 100.0

    @staticmethod
    def fraction_to_percent(fraction: float) -> float:
        """Convert a fraction to a whole-number percentage (0.08 -> 8)."""
        return fraction * 100.0

    @staticmethod
    def grow_by_rate(amount: float, rate_percent: float) -> float:
        """
        Grow an amount by a single-period rate given as a whole percent.

        Example:
            ```python
            FinancialCalculations.grow_by_rate(40_000_000, 8)  # 43,200,000
            ```
        """
        return amount * (1 + rate_percent / 100.0)

    @staticmethod
    def total_return_percent(distributions: float, contribution: float) -> float:
        """
        Percentage gain of distributions over contributed capital.

        Args:
            distributions: Total amount received
            contribution: Capital contributed (must be non-zero)

        Returns:
            Total return as a whole percent (e.g. 16.0 for 16%)
        """
        return (distributions / contribution - 1) * 100

    @staticmethod
    def calculate_equity_multiple(
        distributions: float, contribution: float
    ) -> Optional[float]:
        """
        Calculate equity multiple (total distributions / total contribution).

        Returns:
            Multiple as float (e.g. 1.16 for 1.16x) or None when nothing was
            contributed
        """
        if contribution <= 0:
            return None
        return distributions / contribution

    @staticmethod
    def is_close(actual: float, expected: float, tolerance: float) -> bool:
        """
        Relative comparison with an absolute floor of ``tolerance``.

        The absolute floor keeps comparisons against zero meaningful (for
        example when net proceeds are exactly consumed by fees).
        """
        return math.isclose(actual, expected, rel_tol=tolerance, abs_tol=tolerance)
