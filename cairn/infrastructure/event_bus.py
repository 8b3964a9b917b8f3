"""
Event Bus Infrastructure

Architectural Intent:
- In-memory event bus implementation for publishing domain events
- Handlers run synchronously, in subscription order, on the publishing thread
- Can be extended to use message queues
"""

import logging
from typing import Callable
from cairn.domain.events.event_base import DomainEvent

logger = logging.getLogger(__name__)


class EventBus:
    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[DomainEvent], None]]] = {}

    def publish(self, events: list[DomainEvent]) -> None:
        for event in events:
            for event_type, handlers in self._handlers.items():
                if not isinstance(event, event_type):
                    continue
                for handler in handlers:
                    logger.debug(
                        "Dispatching %s to %s", event.event_type, handler
                    )
                    handler(event)

    def subscribe(
        self, event_type: type, handler: Callable[[DomainEvent], None]
    ) -> None:
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)
