# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model
from .types import NonNegativeInt, PositiveFloat


class CalculationSettings(Model):
    """Settings that control waterfall calculation and presentation.

    Attributes:
        tolerance: Relative tolerance for the conservation check
            (LP + GP distributions equal net proceeds).
        check_invariants: Verify conservation after every computation.
        currency_decimals: Decimal places used when formatting amounts in
            millions for display.
    """

    tolerance: PositiveFloat = Field(
        default=1e-6, description="Relative tolerance for invariant checks"
    )
    check_invariants: bool = Field(
        default=True, description="Verify LP + GP == net proceeds after computing"
    )
    currency_decimals: NonNegativeInt = Field(
        default=1, description="Decimal places for $M display formatting"
    )
