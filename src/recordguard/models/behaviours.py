# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Read-only behaviour for records.

Mix `ReadOnlyBehaviour` into a `Record` subclass to

- cancel selected lifecycle events for every instance of the type
  (``read_only_events``), and
- silently drop writes to protected attributes (``read_only_attributes``) or,
  with ``prevent_new_assignments``, to anything not listed in ``fillable``.

Attribute names match across conventions: declaring ``created_at`` read-only
also protects ``createdAt``, ``CreatedAt`` and ``CREATED_AT``.

Example:
    ```python
    class LedgerEntry(ReadOnlyBehaviour, Record):
        read_only_events = ["updating", "deleting"]
        read_only_attributes = ["created_at"]

    entry = LedgerEntry.find(1)   # created_at is loaded from storage
    entry.createdAt = later       # ignored
    entry.delete()                # False, the row stays
    ```
"""

from __future__ import annotations

from typing import ClassVar, Sequence

from typing_extensions import Self

from ..core.attributes import GuardedAttributeStore
from ..core.primitives import ReadOnlySettings, is_protected
from ..events.dispatcher import type_identifier
from ..events.suppressor import register_suppressions


class ReadOnlyBehaviour:
    """
    Mixin for `Record` subclasses; list it before `Record` in the bases.

    Class configuration:
        read_only_events: Lifecycle events cancelled for this type. Any of
            creating, created, updating, updated, saving, saved, deleting,
            deleted, restoring, restored.
        read_only_attributes: Default read-only names for new instances
        prevent_new_assignments: Default allow-list mode for new instances
    """

    read_only_events: ClassVar[Sequence[str]] = ()
    read_only_attributes: ClassVar[Sequence[str]] = ()
    prevent_new_assignments: ClassVar[bool] = False

    @classmethod
    def read_only_settings(cls) -> ReadOnlySettings:
        return ReadOnlySettings(
            read_only_events=cls.read_only_events,
            read_only_attributes=cls.read_only_attributes,
            prevent_new_assignments=cls.prevent_new_assignments,
        )

    @classmethod
    def boot_read_only_behaviour(cls) -> None:
        settings = cls.read_only_settings()
        if not settings.read_only_events:
            return

        dispatcher = cls.get_event_dispatcher()
        if dispatcher is None:
            raise RuntimeError(
                f"{cls.__name__} declares read_only_events but no event dispatcher is set"
            )

        register_suppressions(settings.event_names, type_identifier(cls), dispatcher)

    def initialize_read_only_behaviour(self) -> None:
        settings = type(self).read_only_settings()
        self._writer = GuardedAttributeStore(
            self._attributes,
            read_only_attributes=settings.read_only_attributes,
            prevent_new_assignments=settings.prevent_new_assignments,
            fillable=self.get_fillable,
        )

    def mark_read_only(self, *keys: str) -> Self:
        """Protect additional attributes on this instance only."""
        self._writer.read_only_attributes.extend(keys)
        return self

    def unmark_read_only(self, *keys: str) -> Self:
        """Drop every read-only declaration matching one of ``keys``, in any convention."""
        self._writer.read_only_attributes = [
            name for name in self._writer.read_only_attributes if not is_protected(name, keys)
        ]
        return self

    def prevent_assignments(self, enabled: bool = True) -> Self:
        """Toggle allow-list mode on this instance."""
        self._writer.prevent_new_assignments = enabled
        return self

    def get_read_only_attributes(self) -> Sequence[str]:
        return tuple(self._writer.read_only_attributes)

    def is_guarded(self, key: str) -> bool:
        """True if a write to ``key`` would currently be dropped."""
        return not self._writer.permits(key)
