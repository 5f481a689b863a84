# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
American Waterfall Engine

Distributes a single pool of proceeds between an LP and a GP through four
sequential tiers. Each tier draws only from what the previous tiers left:

1. Return of Capital - LP receives its contribution back
2. Preferred Return - LP receives the hurdle return on its contribution
3. GP Catch-up - GP receives enough that it holds ``carry_rate`` percent of
   the profit paid in tiers 2 and 3 combined
4. Carried Interest - remaining proceeds split ``100 - carry`` / ``carry``

Example:
    ```python
    from carryflow.waterfall import WaterfallInputs, compute_waterfall

    results = compute_waterfall(WaterfallInputs())
    print(f"LP: ${results.lp_distribution:,.0f}")  # LP: $46,400,000
    print(f"GP: ${results.gp_distribution:,.0f}")  # GP: $1,600,000
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..core.calculations import FinancialCalculations
from ..core.exceptions import WaterfallInvariantError
from ..core.primitives import CalculationSettings, WaterfallTierEnum
from .inputs import WaterfallInputs
from .results import TierDistribution, WaterfallCalculations, WaterfallResults

logger = logging.getLogger(__name__)

WaterfallInputsLike = Union[WaterfallInputs, Mapping[str, Any]]


@dataclass
class WaterfallEngine:
    """
    Computes LP/GP distributions for one proceeds event.

    The engine holds only settings; every call to ``compute`` is independent
    and deterministic.

    Attributes:
        settings: Tolerance and invariant-check configuration; defaults are
            used when omitted or ``None``
    """

    settings: Optional[CalculationSettings] = None

    def __post_init__(self):
        if self.settings is None:
            self.settings = CalculationSettings()

    def compute(self, inputs: WaterfallInputsLike) -> WaterfallResults:
        """
        Run the four-tier waterfall.

        Args:
            inputs: ``WaterfallInputs`` or a mapping of its fields (snake_case
                or camelCase); mappings are validated first

        Returns:
            Immutable ``WaterfallResults``

        Raises:
            pydantic.ValidationError: If a mapping fails input validation
            WaterfallInvariantError: If LP + GP does not equal net proceeds
            TypeError: If ``inputs`` is neither a model nor a mapping
        """
        inputs = self._coerce_inputs(inputs)

        if inputs.has_partial_catchup:
            logger.warning(
                f"catchup_rate={inputs.catchup_rate:g}% ignored: partial catch-up "
                f"is not modeled, GP catches up fully to {inputs.carry_rate:g}% carry"
            )

        carry = inputs.carry_rate
        lp_contribution = inputs.lp_contribution

        # Net proceeds; no floor at zero
        net_proceeds = inputs.net_proceeds

        # Tier 1: Return of capital
        return_of_capital = min(net_proceeds, lp_contribution)
        remaining = net_proceeds - return_of_capital
        tier_1 = TierDistribution(
            tier=WaterfallTierEnum.RETURN_OF_CAPITAL,
            lp_amount=return_of_capital,
            gp_amount=0.0,
            remaining_after=remaining,
        )

        # Tier 2: Preferred return
        hurdle_amount = inputs.hurdle_amount
        preferred_return = max(0.0, min(remaining, hurdle_amount - lp_contribution))
        remaining -= preferred_return
        tier_2 = TierDistribution(
            tier=WaterfallTierEnum.PREFERRED_RETURN,
            lp_amount=preferred_return,
            gp_amount=0.0,
            remaining_after=remaining,
        )

        # Tier 3: GP catch-up (carry == 100 divides by zero; inputs forbid it)
        gp_catchup = min(remaining, preferred_return * carry / (100 - carry))
        remaining -= gp_catchup
        tier_3 = TierDistribution(
            tier=WaterfallTierEnum.GP_CATCH_UP,
            lp_amount=0.0,
            gp_amount=gp_catchup,
            remaining_after=remaining,
        )

        # Tier 4: Residual carry split
        lp_carry_share = remaining * ((100 - carry) / 100)
        gp_carry_share = remaining * (carry / 100)
        tier_4 = TierDistribution(
            tier=WaterfallTierEnum.CARRIED_INTEREST,
            lp_amount=lp_carry_share,
            gp_amount=gp_carry_share,
            remaining_after=0.0,
        )

        tiers = (tier_1, tier_2, tier_3, tier_4)
        for tier in tiers:
            logger.debug(
                f"{tier.tier.value}: LP ${tier.lp_amount:,.2f}, "
                f"GP ${tier.gp_amount:,.2f}, remaining ${tier.remaining_after:,.2f}"
            )

        lp_distribution = return_of_capital + preferred_return + lp_carry_share
        gp_distribution = gp_catchup + gp_carry_share

        if self.settings.check_invariants:
            self._check_conservation(net_proceeds, lp_distribution, gp_distribution)

        results = WaterfallResults(
            total_distribution=net_proceeds,
            lp_distribution=lp_distribution,
            gp_distribution=gp_distribution,
            carry_rate=carry,
            catchup_threshold=hurdle_amount,
            hurdle_rate=inputs.hurdle_rate,
            lp_contribution=lp_contribution,
            calculations=WaterfallCalculations(
                net_proceeds=net_proceeds,
                lp_return=FinancialCalculations.total_return_percent(
                    lp_distribution, lp_contribution
                ),
                gp_catchup=gp_catchup,
                carry_distribution=gp_carry_share,
            ),
            tiers=tiers,
        )

        logger.info(
            f"Waterfall distributed ${net_proceeds:,.0f}: "
            f"LP ${lp_distribution:,.0f}, GP ${gp_distribution:,.0f}"
        )
        return results

    def _coerce_inputs(self, inputs: WaterfallInputsLike) -> WaterfallInputs:
        if isinstance(inputs, WaterfallInputs):
            return inputs
        if isinstance(inputs, Mapping):
            return WaterfallInputs.model_validate(dict(inputs))
        raise TypeError(
            f"WaterfallEngine.compute requires WaterfallInputs or a mapping, "
            f"got {type(inputs).__name__}"
        )

    def _check_conservation(
        self, net_proceeds: float, lp_distribution: float, gp_distribution: float
    ) -> None:
        distributed = lp_distribution + gp_distribution
        if not FinancialCalculations.is_close(
            distributed, net_proceeds, self.settings.tolerance
        ):
            raise WaterfallInvariantError(
                f"Distributions (${distributed:,.2f}) do not equal net proceeds "
                f"(${net_proceeds:,.2f})",
                expected=net_proceeds,
                actual=distributed,
            )


def compute_waterfall(
    inputs: WaterfallInputsLike, settings: Optional[CalculationSettings] = None
) -> WaterfallResults:
    """
    Compute an American waterfall for a single proceeds event.

    Convenience wrapper around ``WaterfallEngine(settings).compute(inputs)``.

    Args:
        inputs: Waterfall parameters (model or mapping)
        settings: Optional calculation settings; defaults are used if omitted

    Returns:
        WaterfallResults with LP/GP totals and the tier breakdown
    """
    engine = WaterfallEngine(settings)
    return engine.compute(inputs)


__all__ = ["WaterfallEngine", "compute_waterfall"]
