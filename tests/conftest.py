# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test fixtures for carryflow testing.

Provides the reference waterfall inputs and engines with default and relaxed
settings so individual tests only state what they vary.
"""

from __future__ import annotations

import pytest

from carryflow.core.primitives import CalculationSettings
from carryflow.waterfall import WaterfallEngine, WaterfallInputs


@pytest.fixture
def reference_inputs() -> WaterfallInputs:
    """$50M proceeds, $40M LP capital, 8% hurdle, 20% carry, $2M fees."""
    return WaterfallInputs(
        total_proceeds=50_000_000,
        lp_contribution=40_000_000,
        hurdle_rate=8,
        carry_rate=20,
        catchup_rate=100,
        management_fees=2_000_000,
    )


@pytest.fixture
def engine() -> WaterfallEngine:
    return WaterfallEngine()


@pytest.fixture
def unchecked_engine() -> WaterfallEngine:
    """Engine that skips the conservation check (for unvalidated inputs)."""
    return WaterfallEngine(CalculationSettings(check_invariants=False))
