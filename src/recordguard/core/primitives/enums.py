# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
class LifecycleEventEnum(str, Enum):
    """
    Named phases of a record persistence operation.

    The "-ing" events fire before storage is touched and are dispatched in
    halting mode: a listener returning ``False`` cancels the operation. The
    "-ed" events fire after storage has been mutated and can only stop further
    listeners from running.
    """

    CREATING = "creating"
    CREATED = "created"
    UPDATING = "updating"
    UPDATED = "updated"
    SAVING = "saving"
    SAVED = "saved"
    DELETING = "deleting"
    DELETED = "deleted"
    RESTORING = "restoring"
    RESTORED = "restored"

    @property
    def is_halting(self) -> bool:
        return self.value.endswith("ing")
