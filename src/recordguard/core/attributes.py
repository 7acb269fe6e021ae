# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Attribute storage for records.

`AttributeStore` is the plain in-memory map of attribute names to values.
`GuardedAttributeStore` wraps one and filters writes through the read-only
and fillable rules before delegating. Rejected writes are silent no-ops: bulk
assignment such as ``Record(**payload)`` keeps working when some of the keys
are protected.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Union

from typing_extensions import Self

from .primitives.casing import casing_variants, declared_variants

logger = logging.getLogger(__name__)


class AttributeStore:
    """Plain key/value attribute map."""

    def __init__(self, attributes: Optional[Dict[str, Any]] = None):
        self._attributes: Dict[str, Any] = dict(attributes or {})

    def set(self, key: str, value: Any) -> Self:
        self._attributes[key] = value
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._attributes

    def all(self) -> Dict[str, Any]:
        """Return a shallow copy of the attribute map."""
        return dict(self._attributes)

    def replace(self, attributes: Dict[str, Any]) -> Self:
        self._attributes = dict(attributes)
        return self

    def __contains__(self, key: object) -> bool:
        return key in self._attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"


class GuardedAttributeStore:
    """
    Write filter in front of an `AttributeStore`.

    Reads and hydration go straight to the wrapped store; only `set` is
    filtered. A write passes when:

    - allow-list mode is off, or some casing variant of the key matches a
      fillable name, and
    - no casing variant of the key matches a read-only name.

    The allow-list check runs first and the two checks are independent, so a
    fillable attribute can still be blocked as read-only.

    Args:
        store: Store receiving the writes that pass the filters
        read_only_attributes: Names that can never be assigned
        prevent_new_assignments: If True, only fillable names can be assigned
        fillable: Allow-list, or a zero-argument callable returning it
    """

    def __init__(
        self,
        store: AttributeStore,
        read_only_attributes: Iterable[str] = (),
        prevent_new_assignments: bool = False,
        fillable: Union[Sequence[str], Callable[[], Sequence[str]]] = (),
    ):
        self.store = store
        self.read_only_attributes: List[str] = list(read_only_attributes)
        self.prevent_new_assignments = prevent_new_assignments
        self._fillable = fillable

    @property
    def fillable(self) -> List[str]:
        if callable(self._fillable):
            return list(self._fillable())
        return list(self._fillable)

    def permits(self, key: str) -> bool:
        """Return True if a write to ``key`` would reach the wrapped store."""
        if not self.prevent_new_assignments and not self.read_only_attributes:
            return True

        # Computed once and reused by both filters; non-string keys match by their str()
        checks = casing_variants(str(key))

        if self.prevent_new_assignments:
            if declared_variants(self.fillable).isdisjoint(checks):
                logger.debug(f"Rejected write to '{key}': not in fillable")
                return False

        if self.read_only_attributes:
            if not declared_variants(self.read_only_attributes).isdisjoint(checks):
                logger.debug(f"Rejected write to '{key}': attribute is read-only")
                return False

        return True

    def set(self, key: str, value: Any) -> Self:
        if self.permits(key):
            self.store.set(key, value)
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self.store.get(key, default)

    def has(self, key: str) -> bool:
        return self.store.has(key)

    def all(self) -> Dict[str, Any]:
        return self.store.all()

    def replace(self, attributes: Dict[str, Any]) -> Self:
        self.store.replace(attributes)
        return self

    def __contains__(self, key: object) -> bool:
        return key in self.store

    def __iter__(self) -> Iterator[str]:
        return iter(self.store)

    def __len__(self) -> int:
        return len(self.store)
