# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model for recordguard configuration objects.

    Immutable, slot-based models. Mutable record state (attribute maps, dirty
    tracking) lives on `Record` instances, never on these models.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        slots=True,
        extra="forbid",  # Catches typos in guard configuration immediately
    )
