# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Display formatting for waterfall figures."""

from __future__ import annotations


def format_currency_millions(amount: float, decimals: int = 1) -> str:
    """
    Format an amount in millions of dollars.

    Matches the dashboard's display: no thousands separators, and the minus
    sign follows the dollar sign.

    Example:
        ```python
        format_currency_millions(46_400_000)  # "$46.4M"
        format_currency_millions(2_500_000_000)  # "$2500.0M"
        format_currency_millions(-1_250_000, decimals=2)  # "$-1.25M"
        ```
    """
    return f"${amount / 1_000_000:.{decimals}f}M"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a whole-number percentage (16 -> "16.0%")."""
    return f"{value:.{decimals}f}%"
