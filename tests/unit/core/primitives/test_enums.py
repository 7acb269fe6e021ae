# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from recordguard.core.primitives import LifecycleEventEnum


def test_enum_member_values():
    """Test that the lifecycle events match their string names."""
    assert LifecycleEventEnum.CREATING == "creating"
    assert LifecycleEventEnum.DELETED == "deleted"
    assert LifecycleEventEnum.RESTORING == "restoring"
    assert len(LifecycleEventEnum) == 10


def test_halting_events():
    halting = {event.value for event in LifecycleEventEnum if event.is_halting}
    assert halting == {"creating", "updating", "saving", "deleting", "restoring"}

