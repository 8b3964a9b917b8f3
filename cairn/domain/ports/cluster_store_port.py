"""
Cluster Store Port

Architectural Intent:
- Port interface for the durable store holding one record per cluster
- Source of truth for checkpoint flags and provisioned state store metadata
- Implemented by in-memory and SQLite repositories

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- Mutation is field-at-a-time, mirroring the store's update protocol
- get_cluster raises ClusterNotFoundError; update_cluster raises PersistenceError
"""

from typing import Protocol, Any, runtime_checkable

from cairn.domain.entities.cluster_record import ClusterRecord


@runtime_checkable
class ClusterStorePort(Protocol):
    """Port for reading and updating cluster records."""

    def get_cluster(self, cluster_name: str) -> ClusterRecord:
        """Return a full snapshot of the named cluster."""
        ...

    def update_cluster(self, cluster_name: str, field_name: str, value: Any) -> None:
        """Persist a single named field on the cluster record."""
        ...

    def create_cluster(self, record: ClusterRecord) -> None:
        """Seed a new cluster record."""
        ...
