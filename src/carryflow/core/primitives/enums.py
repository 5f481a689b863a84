# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class WaterfallTierEnum(str, Enum):
    """Tiers of an American distribution waterfall, in payment order."""

    RETURN_OF_CAPITAL = "Return of Capital"
    PREFERRED_RETURN = "Preferred Return"
    GP_CATCH_UP = "GP Catch-up"
    CARRIED_INTEREST = "Carried Interest"

    @classmethod
    def ordered(cls) -> list["WaterfallTierEnum"]:
        """Tiers in the order proceeds flow through them."""
        return [
            cls.RETURN_OF_CAPITAL,
            cls.PREFERRED_RETURN,
            cls.GP_CATCH_UP,
            cls.CARRIED_INTEREST,
        ]
