# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lifecycle event suppression.

Registers a listener that always answers ``False`` for selected lifecycle
events of one record type. Halting events ("saving", "deleting", ...) are
then cancelled before storage is touched, for every instance of that type.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List

from ..core.primitives import LifecycleEventEnum
from .dispatcher import EventBus, event_identifier

logger = logging.getLogger(__name__)


def halt(*args: Any, **kwargs: Any) -> bool:
    """Listener cancelling the event it is attached to."""
    return False


def register_suppressions(
    event_names: Iterable[str], type_id: str, bus: EventBus
) -> List[str]:
    """
    Cancel the given lifecycle events for a record type.

    Args:
        event_names: Lifecycle event names, members of `LifecycleEventEnum`
        type_id: Identifier of the concrete record type (see `type_identifier`)
        bus: Dispatcher receiving the listener registration

    Returns:
        The scoped event identifiers that were registered; empty when
        ``event_names`` is empty, in which case the bus is not touched.

    Raises:
        ValueError: If an event name is not a lifecycle event
    """
    events = [LifecycleEventEnum(name) for name in event_names]
    if not events:
        return []

    identifiers = [event_identifier(event.value, type_id) for event in events]
    bus.listen(identifiers, halt)

    logger.info(
        f"Suppressing {', '.join(event.value for event in events)} events for {type_id}"
    )
    return identifiers
