# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for recordguard tests.

Every test gets a fresh dispatcher and connection installed on `Record`, and
the booted record types are cleared afterwards so record classes defined in
one test never leak listeners into another.
"""

from __future__ import annotations

import pytest

from recordguard.events import Dispatcher
from recordguard.models import InMemoryConnection, Record


@pytest.fixture
def dispatcher() -> Dispatcher:
    return Dispatcher()


@pytest.fixture
def connection() -> InMemoryConnection:
    return InMemoryConnection()


@pytest.fixture(autouse=True)
def record_environment(dispatcher: Dispatcher, connection: InMemoryConnection):
    Record.set_event_dispatcher(dispatcher)
    Record.set_connection(connection)
    Record.clear_booted_records()
    yield
    Record.clear_booted_records()
    Record.unset_event_dispatcher()
    Record._connection = None
