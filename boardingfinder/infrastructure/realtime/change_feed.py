"""In-process insert change-feed with explicit subscription handles."""

from __future__ import annotations

import itertools
import logging
from collections import defaultdict
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, DefaultDict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertEvent:
    """A row was inserted into ``table``."""

    table: str
    row: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SubscriptionHandle:
    id: int
    table: str


InsertListener = Callable[[InsertEvent], None]


class ChangeFeed:
    """Fan insert events out to listeners registered per table.

    Listeners run synchronously on the publishing thread (the event loop for
    every insert issued through the data service) and must not block; the
    usual listener just puts the event on a channel.
    """

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, dict[int, InsertListener]] = defaultdict(dict)
        self._ids = itertools.count(1)

    def subscribe_to_inserts(self, table: str, on_event: InsertListener) -> SubscriptionHandle:
        handle = SubscriptionHandle(id=next(self._ids), table=table)
        self._listeners[table][handle.id] = on_event
        logger.debug("Subscription %s registered for %s inserts", handle.id, table)
        return handle

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        """Release ``handle``; releasing twice is a no-op."""

        listeners = self._listeners.get(handle.table)
        if listeners is None:
            return
        listeners.pop(handle.id, None)
        if not listeners:
            self._listeners.pop(handle.table, None)
        logger.debug("Subscription %s released", handle.id)

    @contextmanager
    def subscription(self, table: str, on_event: InsertListener) -> Iterator[SubscriptionHandle]:
        """Hold a subscription for the duration of the ``with`` block."""

        handle = self.subscribe_to_inserts(table, on_event)
        try:
            yield handle
        finally:
            self.unsubscribe(handle)

    def publish(self, event: InsertEvent) -> None:
        for handle_id, listener in list(self._listeners.get(event.table, {}).items()):
            try:
                listener(event)
            except Exception:
                # One broken listener must not starve the others.
                logger.exception("Insert listener %s failed for %s", handle_id, event.table)

    def listener_count(self, table: str) -> int:
        return len(self._listeners.get(table, {}))


change_feed = ChangeFeed()


__all__ = ["ChangeFeed", "InsertEvent", "InsertListener", "SubscriptionHandle", "change_feed"]
