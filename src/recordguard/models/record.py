# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Record base class.

A `Record` is an attribute bag bound to a table of an `InMemoryConnection`.
Every public attribute write (``record.title = ...``, ``record["title"] = ...``,
``Record(title=...)``) goes through `set_attribute`, and every persistence
operation fires lifecycle events through the process-wide dispatcher:

    save():    saving -> creating | updating -> (storage) -> created | updated -> saved
    delete():  deleting -> (storage) -> deleted
    restore(): restoring -> save() -> restored

A halting ("-ing") event answered with ``False`` cancels the operation before
storage is touched, and the operation returns False.

Mixins hook into the record lifecycle by naming convention, based on the
snake-case name of the mixin class:

- ``boot_<name>`` classmethods run once per concrete record type, on its first
  instantiation;
- ``initialize_<name>`` methods run on every new instance, before its
  attributes are filled.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Set

from pydantic.alias_generators import to_snake
from typing_extensions import Self

from ..core.attributes import AttributeStore
from ..core.primitives import LifecycleEventEnum
from ..events.dispatcher import EventBus, event_identifier, type_identifier
from .connection import InMemoryConnection

logger = logging.getLogger(__name__)


class Record:
    """
    Base class for persisted records.

    Class configuration:
        table: Table name, defaults to the snake-case class name plus "s"
        primary_key: Name of the key attribute
        fillable: Attribute names open to assignment (see `ReadOnlyBehaviour`)
        soft_deletes: If True, delete() stamps `deleted_at_column` instead of
            removing the row, and restore() becomes available

    Example:
        ```python
        Record.set_connection(InMemoryConnection())
        Record.set_event_dispatcher(Dispatcher())

        class Post(Record):
            fillable = ["title"]

        post = Post(title="Hello")
        post.save()
        Post.find(post.id).title  # "Hello"
        ```
    """

    table: ClassVar[Optional[str]] = None
    primary_key: ClassVar[str] = "id"
    fillable: ClassVar[Sequence[str]] = ()
    soft_deletes: ClassVar[bool] = False
    deleted_at_column: ClassVar[str] = "deleted_at"

    _dispatcher: ClassVar[Optional[EventBus]] = None
    _connection: ClassVar[Optional[InMemoryConnection]] = None
    _booted: ClassVar[Set[type]] = set()

    def __init__(self, **attributes: Any):
        self._boot_if_not_booted()

        self._attributes = AttributeStore()
        self._writer = self._attributes
        self._original: Dict[str, Any] = {}
        self._exists = False

        for hook in self._class_hooks("initialize"):
            getattr(self, hook)()

        self.fill(attributes)

    # --- Bootstrap -----------------------------------------------------------

    @classmethod
    def _class_hooks(cls, prefix: str) -> List[str]:
        hooks = []
        for base in reversed(cls.__mro__):
            name = f"{prefix}_{to_snake(base.__name__)}"
            if name in vars(base):
                hooks.append(name)
        return hooks

    @classmethod
    def _boot_if_not_booted(cls) -> None:
        if cls in Record._booted:
            return

        Record._booted.add(cls)
        try:
            cls.boot()
        except Exception:
            Record._booted.discard(cls)
            raise

    @classmethod
    def boot(cls) -> None:
        """Run every mixin ``boot_<name>`` hook for this record type."""
        for hook in cls._class_hooks("boot"):
            getattr(cls, hook)()
        logger.debug(f"Booted {type_identifier(cls)}")

    @classmethod
    def clear_booted_records(cls) -> None:
        Record._booted.clear()

    # --- Collaborators -------------------------------------------------------

    @classmethod
    def set_event_dispatcher(cls, dispatcher: EventBus) -> None:
        Record._dispatcher = dispatcher

    @classmethod
    def get_event_dispatcher(cls) -> Optional[EventBus]:
        return Record._dispatcher

    @classmethod
    def unset_event_dispatcher(cls) -> None:
        Record._dispatcher = None

    @classmethod
    def set_connection(cls, connection: InMemoryConnection) -> None:
        Record._connection = connection

    @classmethod
    def get_connection(cls) -> InMemoryConnection:
        if Record._connection is None:
            raise RuntimeError(
                f"No connection set for {cls.__name__}; call Record.set_connection() first"
            )
        return Record._connection

    @classmethod
    def get_table(cls) -> str:
        return cls.table or f"{to_snake(cls.__name__)}s"

    # --- Attributes ----------------------------------------------------------

    def get_fillable(self) -> List[str]:
        return list(type(self).fillable)

    def fill(self, attributes: Dict[str, Any]) -> Self:
        for key, value in attributes.items():
            self.set_attribute(key, value)
        return self

    def set_attribute(self, key: str, value: Any) -> Self:
        self._writer.set(key, value)
        return self

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def set_raw_attributes(self, attributes: Dict[str, Any], sync: bool = False) -> Self:
        """Replace the attribute map without going through `set_attribute`."""
        self._attributes.replace(attributes)
        if sync:
            self.sync_original()
        return self

    def to_dict(self) -> Dict[str, Any]:
        return self._attributes.all()

    def get_key(self) -> Any:
        return self._attributes.get(self.primary_key)

    def sync_original(self) -> Self:
        self._original = self._attributes.all()
        return self

    def get_original(self, key: Optional[str] = None, default: Any = None) -> Any:
        if key is None:
            return dict(self._original)
        return self._original.get(key, default)

    def get_dirty(self) -> Dict[str, Any]:
        dirty = {}
        for key, value in self._attributes.all().items():
            if key not in self._original or self._original[key] != value:
                dirty[key] = value
        return dirty

    def is_dirty(self, *keys: str) -> bool:
        dirty = self.get_dirty()
        if not keys:
            return bool(dirty)
        return any(key in dirty for key in keys)

    @property
    def exists(self) -> bool:
        return self._exists

    def __getattr__(self, name: str) -> Any:
        attributes = self.__dict__.get("_attributes")
        if name.startswith("_") or attributes is None or name not in attributes:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return attributes.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or isinstance(getattr(type(self), name, None), property):
            object.__setattr__(self, name, value)
        else:
            self.set_attribute(name, value)

    def __getitem__(self, key: str) -> Any:
        if key not in self._attributes:
            raise KeyError(key)
        return self._attributes.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_attribute(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes.all()!r})"

    # --- Events --------------------------------------------------------------

    def _fire_model_event(self, event: LifecycleEventEnum) -> Any:
        dispatcher = Record._dispatcher
        if dispatcher is None:
            return True

        identifier = event_identifier(event.value, type_identifier(type(self)))
        if not event.is_halting:
            return dispatcher.dispatch(identifier, self)

        result = dispatcher.until(identifier, self)
        if result is False:
            logger.debug(f"'{identifier}' halted by a listener")
        return result

    # --- Persistence ---------------------------------------------------------

    @classmethod
    def new_from_storage(cls, row: Dict[str, Any]) -> Self:
        record = cls()
        record.set_raw_attributes(row, sync=True)
        record._exists = True
        return record

    @classmethod
    def find(cls, key: Any) -> Optional[Self]:
        row = cls.get_connection().find(cls.get_table(), key)
        if row is None:
            return None
        return cls.new_from_storage(row)

    @classmethod
    def all(cls) -> List[Self]:
        records = [cls.new_from_storage(row) for row in cls.get_connection().select(cls.get_table())]
        if cls.soft_deletes:
            records = [record for record in records if not record.trashed()]
        return records

    def save(self) -> bool:
        connection = self.get_connection()

        if self._fire_model_event(LifecycleEventEnum.SAVING) is False:
            return False

        if self._exists:
            saved = self._perform_update(connection) if self.is_dirty() else True
        else:
            saved = self._perform_insert(connection)

        if saved:
            self._fire_model_event(LifecycleEventEnum.SAVED)
            self.sync_original()

        return saved

    def _perform_insert(self, connection: InMemoryConnection) -> bool:
        if self._fire_model_event(LifecycleEventEnum.CREATING) is False:
            return False

        key = connection.insert(self.get_table(), self._attributes.all(), self.primary_key)
        # Framework-managed column, never subject to the attribute guard
        self._attributes.set(self.primary_key, key)
        self._exists = True

        self._fire_model_event(LifecycleEventEnum.CREATED)
        return True

    def _perform_update(self, connection: InMemoryConnection) -> bool:
        if self._fire_model_event(LifecycleEventEnum.UPDATING) is False:
            return False

        connection.update(self.get_table(), self.get_key(), self.get_dirty())

        self._fire_model_event(LifecycleEventEnum.UPDATED)
        return True

    def delete(self) -> bool:
        if not self._exists:
            return False

        connection = self.get_connection()

        if self._fire_model_event(LifecycleEventEnum.DELETING) is False:
            return False

        if self.soft_deletes:
            self._run_soft_delete(connection)
        else:
            connection.delete(self.get_table(), self.get_key())
            self._exists = False

        self._fire_model_event(LifecycleEventEnum.DELETED)
        return True

    def _run_soft_delete(self, connection: InMemoryConnection) -> None:
        deleted_at = datetime.now(timezone.utc)
        self._attributes.set(self.deleted_at_column, deleted_at)
        connection.update(self.get_table(), self.get_key(), {self.deleted_at_column: deleted_at})
        self._original[self.deleted_at_column] = deleted_at

    def trashed(self) -> bool:
        return self.soft_deletes and self._attributes.get(self.deleted_at_column) is not None

    def restore(self) -> bool:
        if not self.soft_deletes:
            raise TypeError(f"{type(self).__name__} does not use soft deletes")

        if self._fire_model_event(LifecycleEventEnum.RESTORING) is False:
            return False

        self._attributes.set(self.deleted_at_column, None)
        self._exists = True
        result = self.save()

        self._fire_model_event(LifecycleEventEnum.RESTORED)
        return result
