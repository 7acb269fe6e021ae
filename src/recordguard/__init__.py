# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
recordguard - Read-only guards for persisted records

Two cooperating mechanisms attached to the `Record` base class:

- lifecycle event suppression: cancel selected events (updating, deleting,
  ...) of a record type so the operation never reaches storage;
- attribute guarding: silently drop writes to read-only attributes, or to any
  attribute outside the fillable allow-list, whatever naming convention the
  caller uses to address them.

Example Usage:
    ```python
    from recordguard.events import Dispatcher
    from recordguard.models import InMemoryConnection, ReadOnlyBehaviour, Record

    Record.set_connection(InMemoryConnection())
    Record.set_event_dispatcher(Dispatcher())

    class Invoice(ReadOnlyBehaviour, Record):
        read_only_events = ["deleting"]
        read_only_attributes = ["number"]

    invoice = Invoice(number="INV-1", total=100)  # number is dropped
    invoice.save()
    invoice.delete()  # False, the row stays
    ```
"""

import importlib
import logging

# Libraries should not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "events",
    "models",
]


_LAZY_MODULES = {
    "core": "recordguard.core",
    "events": "recordguard.events",
    "models": "recordguard.models",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'recordguard' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
