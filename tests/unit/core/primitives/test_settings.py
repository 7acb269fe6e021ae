# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recordguard.core.primitives import LifecycleEventEnum, ReadOnlySettings


def test_read_only_settings_defaults():
    settings = ReadOnlySettings()
    assert settings.read_only_events == ()
    assert settings.read_only_attributes == ()
    assert settings.prevent_new_assignments is False


def test_read_only_settings_coerces_event_names():
    settings = ReadOnlySettings(read_only_events=["deleting", "updating"])
    assert settings.read_only_events == (
        LifecycleEventEnum.DELETING,
        LifecycleEventEnum.UPDATING,
    )
    assert settings.event_names == ("deleting", "updating")


def test_read_only_settings_rejects_unknown_event():
    with pytest.raises(ValidationError):
        ReadOnlySettings(read_only_events=["archiving"])


def test_read_only_settings_rejects_extra_fields():
    with pytest.raises(ValidationError):
        ReadOnlySettings(read_only_fields=["name"])


def test_read_only_settings_is_frozen():
    settings = ReadOnlySettings(read_only_attributes=["created_at"])
    with pytest.raises(ValidationError):
        settings.prevent_new_assignments = True


def test_read_only_settings_rejects_bare_string_attributes():
    """A single name must be given as a list, not split into characters."""
    with pytest.raises(ValidationError):
        ReadOnlySettings(read_only_attributes="created_at")
