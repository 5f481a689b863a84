# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
carryflow - LP/GP Distribution Waterfall Calculator

Computes how a single pool of fund or deal proceeds is split between a
Limited Partner and a General Partner through a four-tier American waterfall:
return of capital, preferred return, GP catch-up and carried interest.

Key Entry Points:
- carryflow.compute_waterfall() - run the waterfall on validated inputs
- carryflow.WaterfallInputs - input parameters with validation
- carryflow.reporting - tier tables, display formatting, sensitivity

Example Usage:
    ```python
    from carryflow import WaterfallInputs, compute_waterfall

    results = compute_waterfall(
        WaterfallInputs(
            total_proceeds=50_000_000,
            lp_contribution=40_000_000,
            hurdle_rate=8,
            carry_rate=20,
            management_fees=2_000_000,
        )
    )
    print(f"GP carry: ${results.gp_distribution:,.0f}")  # GP carry: $1,600,000
    ```
"""

import importlib
import logging

from pydantic import ValidationError

from .core import CalculationSettings, WaterfallInvariantError, WaterfallTierEnum
from .waterfall import (
    TierDistribution,
    WaterfallCalculations,
    WaterfallEngine,
    WaterfallInputs,
    WaterfallResults,
    compute_waterfall,
    create_default_inputs,
    create_inputs_from_fractions,
)

__version__ = "0.1.0"

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface; subpackages not imported above load on first access
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "reporting",
    "waterfall",
    "CalculationSettings",
    "TierDistribution",
    "ValidationError",
    "WaterfallCalculations",
    "WaterfallEngine",
    "WaterfallInputs",
    "WaterfallInvariantError",
    "WaterfallResults",
    "WaterfallTierEnum",
    "compute_waterfall",
    "create_default_inputs",
    "create_inputs_from_fractions",
]


_LAZY_MODULES = {
    "reporting": "carryflow.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'carryflow' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
