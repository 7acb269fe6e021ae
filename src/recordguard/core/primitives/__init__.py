# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .casing import casing_variants, declared_variants, is_protected
from .enums import LifecycleEventEnum
from .model import Model
from .settings import ReadOnlySettings

__all__ = [
    "LifecycleEventEnum",
    "Model",
    "ReadOnlySettings",
    "casing_variants",
    "declared_variants",
    "is_protected",
]
