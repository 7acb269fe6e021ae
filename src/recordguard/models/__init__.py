# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .behaviours import ReadOnlyBehaviour
from .connection import InMemoryConnection
from .record import Record

__all__ = [
    "InMemoryConnection",
    "ReadOnlyBehaviour",
    "Record",
]
