"""
Domain Events Package

Architectural Intent:
- Contains domain events and event bus infrastructure
- Events are the primary mechanism for cross-boundary communication
"""

from cairn.domain.events.event_base import DomainEvent
from cairn.domain.events.state_store_events import (
    StateStoreStepStarted,
    StateStoreStepSkipped,
    StateStoreCredentialsAcquired,
    StateStoreCreated,
    StateStoreStepFailed,
    StateStoreCredentialsCompensated,
)

__all__ = [
    "DomainEvent",
    "StateStoreStepStarted",
    "StateStoreStepSkipped",
    "StateStoreCredentialsAcquired",
    "StateStoreCreated",
    "StateStoreStepFailed",
    "StateStoreCredentialsCompensated",
]
