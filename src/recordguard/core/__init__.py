# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
recordguard core

Attribute storage, the write guard and the configuration primitives shared by
the event and record layers.
"""

from . import primitives
from .attributes import AttributeStore, GuardedAttributeStore
from .primitives import (
    LifecycleEventEnum,
    Model,
    ReadOnlySettings,
    casing_variants,
    declared_variants,
    is_protected,
)

__all__ = [
    "AttributeStore",
    "GuardedAttributeStore",
    "LifecycleEventEnum",
    "Model",
    "ReadOnlySettings",
    "casing_variants",
    "declared_variants",
    "is_protected",
    "primitives",
]
