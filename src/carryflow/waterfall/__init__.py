# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
carryflow Waterfall
Public API for the carryflow.waterfall subpackage.

Inputs, engine and results for the four-tier American (deal-by-deal) LP/GP
distribution waterfall.
"""

from .constructs import create_default_inputs, create_inputs_from_fractions
from .engine import WaterfallEngine, compute_waterfall
from .inputs import WaterfallInputs
from .results import TierDistribution, WaterfallCalculations, WaterfallResults

__all__ = [
    # Inputs
    "WaterfallInputs",
    # Engine
    "WaterfallEngine",
    "compute_waterfall",
    # Results
    "WaterfallResults",
    "WaterfallCalculations",
    "TierDistribution",
    # Constructs
    "create_default_inputs",
    "create_inputs_from_fractions",
]
