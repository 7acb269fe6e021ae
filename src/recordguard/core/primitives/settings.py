# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Tuple

from pydantic import Field

from .enums import LifecycleEventEnum
from .model import Model


class ReadOnlySettings(Model):
    """
    Validated read-only configuration of a record type.

    Built from the class attributes of a `ReadOnlyBehaviour` record at
    bootstrap, so misspelled event names fail loudly before any listener is
    registered.

    Usage Examples:
        # Cancel deletes, freeze the creation timestamp
        settings = ReadOnlySettings(
            read_only_events=["deleting"],
            read_only_attributes=["created_at"],
        )

        # Only fillable attributes may be assigned
        settings = ReadOnlySettings(prevent_new_assignments=True)
    """

    read_only_events: Tuple[LifecycleEventEnum, ...] = Field(
        default=(),
        description="Lifecycle events cancelled for every instance of the type.",
    )
    read_only_attributes: Tuple[str, ...] = Field(
        default=(),
        description="Attribute names whose value cannot be changed through set_attribute.",
    )
    prevent_new_assignments: bool = Field(
        default=False,
        description="If True, only attributes listed in fillable can be assigned.",
    )

    @property
    def event_names(self) -> Tuple[str, ...]:
        return tuple(event.value for event in self.read_only_events)
