# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Waterfall Constructs - Input Builders

Builders that produce validated ``WaterfallInputs`` from common starting
points, so callers do not repeat reference defaults or rate conversions.

### `create_default_inputs()`
The reference deal ($50M proceeds, $40M LP capital, 8% hurdle, 20% carry,
$2M fees) with optional overrides.

### `create_inputs_from_fractions()`
Accepts rates as fractions (``0.08``), the convention used elsewhere in fund
models, and converts them to the whole-number percentages the engine uses.

```python
from carryflow.waterfall.constructs import create_inputs_from_fractions

inputs = create_inputs_from_fractions(
    total_proceeds=75_000_000,
    lp_contribution=50_000_000,
    hurdle_rate=0.08,
    carry_rate=0.20,
)
```
"""

from __future__ import annotations

from ..core.calculations import FinancialCalculations
from .inputs import WaterfallInputs


def create_default_inputs(**overrides) -> WaterfallInputs:
    """
    Create the reference waterfall inputs, optionally overriding fields.

    Args:
        **overrides: Any ``WaterfallInputs`` field (snake_case or camelCase)

    Returns:
        Validated WaterfallInputs
    """
    return WaterfallInputs.model_validate(overrides)


def create_inputs_from_fractions(
    total_proceeds: float,
    lp_contribution: float,
    hurdle_rate: float = 0.08,
    carry_rate: float = 0.20,
    catchup_rate: float = 1.0,
    management_fees: float = 0.0,
) -> WaterfallInputs:
    """
    Create waterfall inputs from fractional rates.

    Args:
        total_proceeds: Gross distributable proceeds
        lp_contribution: LP contributed capital
        hurdle_rate: Preferred return as a fraction (0.08 for 8%)
        carry_rate: Carried interest as a fraction (0.20 for 20%)
        catchup_rate: Catch-up as a fraction (1.0 for full catch-up)
        management_fees: Fees deducted before distribution

    Returns:
        Validated WaterfallInputs with rates as whole percentages
    """
    to_percent = FinancialCalculations.fraction_to_percent
    return WaterfallInputs(
        total_proceeds=total_proceeds,
        lp_contribution=lp_contribution,
        hurdle_rate=to_percent(hurdle_rate),
        carry_rate=to_percent(carry_rate),
        catchup_rate=to_percent(catchup_rate),
        management_fees=management_fees,
    )


__all__ = ["create_default_inputs", "create_inputs_from_fractions"]
