# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes.

Reports translate computed waterfall results into presentation formats
(DataFrames, display strings). They never perform distribution math.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..core.primitives import CalculationSettings
from ..waterfall.results import WaterfallResults


class BaseReport(ABC):
    """
    Abstract base class for all report formatters.

    Reports operate on final ``WaterfallResults`` objects and transform
    them into presentation-ready formats.
    """

    def __init__(
        self, results: WaterfallResults, settings: Optional[CalculationSettings] = None
    ):
        """
        Initialize report with computed results.

        Args:
            results: Output of ``compute_waterfall``
            settings: Optional settings controlling display precision
        """
        if not isinstance(results, WaterfallResults):
            raise TypeError(
                f"{type(self).__name__} requires a WaterfallResults object, "
                f"got {type(results).__name__}"
            )
        self._results = results
        self._settings = settings or CalculationSettings()

    @property
    def results(self) -> WaterfallResults:
        return self._results

    @abstractmethod
    def generate(self, **kwargs) -> Any:
        """Generate the formatted report output."""
