# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Errors raised by carryflow calculations.

Input validation failures surface as ``pydantic.ValidationError`` from the
input models; this module only holds errors detected after a calculation.
"""

from __future__ import annotations


class WaterfallInvariantError(ValueError):
    """A computed waterfall failed a conservation check.

    Attributes:
        expected: Amount that should have been distributed
        actual: Amount the tiers actually distributed
    """

    def __init__(self, message: str, expected: float, actual: float):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
