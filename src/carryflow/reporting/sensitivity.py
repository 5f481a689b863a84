# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Proceeds sensitivity for the waterfall.

Re-runs the waterfall across a range of total proceeds with every other input
held fixed, showing where each tier switches on and how the GP share grows.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from ..core.primitives import CalculationSettings
from ..waterfall.engine import WaterfallEngine
from ..waterfall.inputs import WaterfallInputs

logger = logging.getLogger(__name__)


def generate_proceeds_range(
    base_value: float, num_points: int = 5, pct_range: float = 0.20
) -> List[float]:
    """
    Evenly spaced proceeds values around a base case, floored at zero.

    Args:
        base_value: Center value
        num_points: Number of points in range
        pct_range: Percentage range (+/- from base) as a fraction
    """
    if num_points < 1:
        raise ValueError(f"num_points must be at least 1, got {num_points}")
    low = max(0.0, base_value * (1 - pct_range))
    high = base_value * (1 + pct_range)
    return [float(v) for v in np.linspace(low, high, num_points)]


def proceeds_sensitivity(
    inputs: WaterfallInputs,
    proceeds_values: Iterable[float],
    settings: Optional[CalculationSettings] = None,
) -> pd.DataFrame:
    """
    Compute the waterfall at each total proceeds value.

    Args:
        inputs: Base case; only ``total_proceeds`` is varied
        proceeds_values: Total proceeds to evaluate
        settings: Optional calculation settings

    Returns:
        DataFrame indexed by total proceeds with columns
        ``lp_distribution``, ``gp_distribution``, ``gp_catchup``,
        ``carry_distribution``, ``lp_return``

    Raises:
        pydantic.ValidationError: If a proceeds value is invalid (negative)
    """
    engine = WaterfallEngine(settings or CalculationSettings())
    values = sorted(float(v) for v in proceeds_values)
    logger.debug(f"Running proceeds sensitivity over {len(values)} points")

    records = []
    for proceeds in values:
        results = engine.compute(inputs.copy(updates={"total_proceeds": proceeds}))
        records.append(
            {
                "total_proceeds": proceeds,
                "lp_distribution": results.lp_distribution,
                "gp_distribution": results.gp_distribution,
                "gp_catchup": results.calculations.gp_catchup,
                "carry_distribution": results.calculations.carry_distribution,
                "lp_return": results.calculations.lp_return,
            }
        )

    columns = [
        "total_proceeds",
        "lp_distribution",
        "gp_distribution",
        "gp_catchup",
        "carry_distribution",
        "lp_return",
    ]
    return pd.DataFrame.from_records(records, columns=columns).set_index(
        "total_proceeds"
    )
