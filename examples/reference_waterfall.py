#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
LP/GP Distribution Waterfall: Reference Deal

Runs the four-tier American waterfall on the reference deal and prints the
tier table, headline figures and a proceeds sensitivity:

- $50M gross proceeds, $2M management fees
- $40M LP capital
- 8% preferred return, 20% carried interest, full GP catch-up

Expected split: LP $46.4M (16.0% return), GP $1.6M.
"""

import logging

import pandas as pd

from carryflow.reporting import (
    WaterfallReport,
    generate_proceeds_range,
    proceeds_sensitivity,
)
from carryflow.waterfall import compute_waterfall, create_default_inputs


def main():
    """Compute and print the reference waterfall."""
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    pd.set_option("display.float_format", "{:,.0f}".format)

    inputs = create_default_inputs()
    print(inputs)
    print("=" * 80)

    results = compute_waterfall(inputs)
    report = WaterfallReport(results)

    print("DISTRIBUTION BY TIER")
    print(report.generate())
    print()

    print("HEADLINE")
    for label, value in report.formatted_summary().items():
        print(f"  {label:<20} {value}")
    print()

    print("PROCEEDS SENSITIVITY")
    values = generate_proceeds_range(inputs.total_proceeds, num_points=9, pct_range=0.4)
    print(proceeds_sensitivity(inputs, values))

    return results


if __name__ == "__main__":
    results = main()
