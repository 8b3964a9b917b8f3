"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from cairn.domain.ports.cluster_store_port import ClusterStorePort
from cairn.domain.ports.object_storage_provider_port import ObjectStorageProviderPort
from cairn.domain.ports.event_bus_port import EventBusPort

__all__ = [
    "ClusterStorePort",
    "ObjectStorageProviderPort",
    "EventBusPort",
]
