# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .dispatcher import (
    Dispatcher,
    EventBus,
    event_identifier,
    type_identifier,
)
from .suppressor import halt, register_suppressions

__all__ = [
    "Dispatcher",
    "EventBus",
    "event_identifier",
    "halt",
    "register_suppressions",
    "type_identifier",
]
