# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models for calculation inputs and outputs. Field names are
    snake_case in Python and accept camelCase aliases so payloads from the
    dashboard front end validate without translation.
    """

    model_config = ConfigDict(
        frozen=True,  # Immutable models; every calculation produces new objects
        extra="forbid",  # Catches typos and missing field definitions immediately
        alias_generator=to_camel,
        populate_by_name=True,
        loc_by_alias=False,  # Validation errors name the Python field
    )

    def copy(self, *, updates: dict = None) -> "Model":
        """
        Return a validated copy of the model with any specified updates.

        Unlike ``model_copy``, updates are run through validation so a copy
        can never hold values the constructor would reject.

        Args:
            updates: Optional dictionary of field values to update

        Returns:
            A new model instance
        """
        data = self.model_dump()
        data.update(updates or {})
        return type(self).model_validate(data)
