"""
Event Bus Port

Architectural Intent:
- Abstract interface for publishing domain events
- Allows decoupling of event producers from consumers
- Implementation is in-process and synchronous
"""

from typing import Protocol, Callable, runtime_checkable
from cairn.domain.events.event_base import DomainEvent


@runtime_checkable
class EventBusPort(Protocol):
    def publish(self, events: list[DomainEvent]) -> None: ...

    def subscribe(
        self, event_type: type, handler: Callable[[DomainEvent], None]
    ) -> None: ...
