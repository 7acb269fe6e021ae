# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Process-wide lifecycle event dispatch.

Records fire events under scoped identifiers such as
``"record.deleting: app.models.Invoice"``. Listeners are plain callables that
receive the record; in halting mode the first non-None response wins, and a
``False`` response cancels the operation that fired the event.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, List, Protocol, Union

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]

EVENT_PREFIX = "record"


def type_identifier(record_cls: type) -> str:
    """Fully-qualified name of a record type, used to scope its events."""
    return f"{record_cls.__module__}.{record_cls.__qualname__}"


def event_identifier(event: str, type_id: str) -> str:
    """Build the scoped identifier of a lifecycle event for one record type."""
    return f"{EVENT_PREFIX}.{event}: {type_id}"


class EventBus(Protocol):
    """The dispatcher interface records and the suppressor depend on."""

    def listen(self, events: Union[str, Iterable[str]], listener: Listener) -> None: ...

    def has_listeners(self, event: str) -> bool: ...

    def dispatch(self, event: str, payload: Any = None, halt: bool = False) -> Any: ...

    def until(self, event: str, payload: Any = None) -> Any: ...

    def forget(self, event: str) -> None: ...


class Dispatcher:
    """
    In-memory `EventBus` implementation.

    Example:
        ```python
        dispatcher = Dispatcher()
        dispatcher.listen("record.saving: app.Post", lambda post: None)
        dispatcher.until("record.saving: app.Post", post)
        ```
    """

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def listen(self, events: Union[str, Iterable[str]], listener: Listener) -> None:
        if isinstance(events, str):
            events = [events]
        for event in events:
            self._listeners[event].append(listener)
            logger.debug(f"Registered listener for '{event}'")

    def has_listeners(self, event: str) -> bool:
        return bool(self._listeners.get(event))

    def get_listeners(self, event: str) -> List[Listener]:
        return list(self._listeners.get(event, ()))

    def dispatch(self, event: str, payload: Any = None, halt: bool = False) -> Any:
        """
        Call every listener of ``event`` in registration order.

        Args:
            event: Scoped event identifier
            payload: Passed to each listener (the record firing the event)
            halt: Stop at the first non-None response and return it

        Returns:
            In halting mode, the first non-None response or None. Otherwise the
            list of responses gathered before a listener returned False.
        """
        responses = []
        for listener in self.get_listeners(event):
            response = listener(payload)

            if halt and response is not None:
                return response

            if response is False:
                break

            responses.append(response)

        return None if halt else responses

    def until(self, event: str, payload: Any = None) -> Any:
        return self.dispatch(event, payload, halt=True)

    def forget(self, event: str) -> None:
        self._listeners.pop(event, None)

    def flush(self) -> None:
        """Drop every registered listener."""
        self._listeners.clear()

    @property
    def events(self) -> List[str]:
        return [event for event, listeners in self._listeners.items() if listeners]

