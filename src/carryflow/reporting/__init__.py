# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
carryflow Reporting

Presentation of computed waterfalls: tier tables, headline summaries,
display formatting and proceeds sensitivity.

Example:
    ```python
    from carryflow.reporting import WaterfallReport
    from carryflow.waterfall import compute_waterfall, create_default_inputs

    report = WaterfallReport(compute_waterfall(create_default_inputs()))
    table = report.generate()
    print(report.formatted_summary()["LP Distribution"])  # $46.4M
    ```
"""

from .base import BaseReport
from .formatting import format_currency_millions, format_percentage
from .sensitivity import generate_proceeds_range, proceeds_sensitivity
from .waterfall_report import WaterfallReport

__all__ = [
    "BaseReport",
    "WaterfallReport",
    "format_currency_millions",
    "format_percentage",
    "generate_proceeds_range",
    "proceeds_sensitivity",
]
