# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Constrained numeric types shared by input and settings models."""

from __future__ import annotations

from pydantic import Field
from typing_extensions import Annotated

PositiveFloat = Annotated[float, Field(gt=0, allow_inf_nan=False)]
NonNegativeFloat = Annotated[float, Field(ge=0, allow_inf_nan=False)]
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]
NonNegativeInt = Annotated[int, Field(ge=0)]

# Whole-number percentages (8 means 8%)
Percentage = Annotated[float, Field(ge=0, le=100, allow_inf_nan=False)]
CarryPercentage = Annotated[float, Field(ge=0, lt=100, allow_inf_nan=False)]
