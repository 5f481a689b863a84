# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
carryflow Core

Shared primitives, settings and pure financial calculations.
"""

from .calculations import FinancialCalculations
from .exceptions import WaterfallInvariantError
from .primitives import CalculationSettings, Model, WaterfallTierEnum

__all__ = [
    "CalculationSettings",
    "FinancialCalculations",
    "Model",
    "WaterfallInvariantError",
    "WaterfallTierEnum",
]
