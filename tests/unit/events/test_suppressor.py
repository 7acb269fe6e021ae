# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from recordguard.events import Dispatcher, halt, register_suppressions


def test_halt_always_returns_false():
    assert halt() is False
    assert halt(object(), key="value") is False


def test_empty_event_list_registers_nothing(dispatcher: Dispatcher):
    assert register_suppressions([], "app.Invoice", dispatcher) == []
    assert dispatcher.events == []


def test_registers_scoped_identifiers(dispatcher: Dispatcher):
    identifiers = register_suppressions(["deleting", "updating"], "app.Invoice", dispatcher)

    assert identifiers == [
        "record.deleting: app.Invoice",
        "record.updating: app.Invoice",
    ]
    assert dispatcher.until("record.deleting: app.Invoice") is False
    assert dispatcher.until("record.updating: app.Invoice") is False


def test_suppression_is_scoped_to_type(dispatcher: Dispatcher):
    register_suppressions(["deleting"], "app.Invoice", dispatcher)

    assert not dispatcher.has_listeners("record.deleting: app.Customer")
    assert not dispatcher.has_listeners("record.saving: app.Invoice")


def test_unknown_event_name_raises(dispatcher: Dispatcher):
    with pytest.raises(ValueError):
        register_suppressions(["archiving"], "app.Invoice", dispatcher)
    assert dispatcher.events == []
