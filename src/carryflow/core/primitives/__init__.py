# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
carryflow Core Primitives

Building blocks shared by the waterfall engine and reporting: the immutable
model base, constrained numeric types, enums and calculation settings.
"""

from .enums import WaterfallTierEnum
from .model import Model
from .settings import CalculationSettings
from .types import (
    CarryPercentage,
    FiniteFloat,
    NonNegativeFloat,
    NonNegativeInt,
    Percentage,
    PositiveFloat,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "CalculationSettings",
    # Enums
    "WaterfallTierEnum",
    # Types
    "CarryPercentage",
    "FiniteFloat",
    "NonNegativeFloat",
    "NonNegativeInt",
    "Percentage",
    "PositiveFloat",
]
