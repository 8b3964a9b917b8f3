"""
In-Memory Cluster Repository

Architectural Intent:
- ClusterStorePort implementation backed by a dict
- Used for local dry runs and as the test double for the cluster store
- Keeps an ordered log of every field update so callers can inspect the
  order in which a step persisted its outputs
"""

from __future__ import annotations
import logging
import threading
from typing import Any

from cairn.domain.entities.cluster_record import ClusterRecord, checkpoint_regression
from cairn.domain.errors import ClusterNotFoundError, PersistenceError

logger = logging.getLogger(__name__)


class InMemoryClusterRepository:
    """Cluster records held in process memory."""

    def __init__(self) -> None:
        self._records: dict[str, ClusterRecord] = {}
        self._lock = threading.Lock()
        self.updates: list[tuple[str, str, Any]] = []

    def close(self) -> None:
        """Nothing to release; present for parity with the SQLite repository."""

    def create_cluster(self, record: ClusterRecord) -> None:
        with self._lock:
            if record.cluster_name in self._records:
                raise PersistenceError(
                    record.cluster_name, "cluster_name", "cluster already exists"
                )
            self._records[record.cluster_name] = record
        logger.debug("Created cluster record %s", record.cluster_name)

    def get_cluster(self, cluster_name: str) -> ClusterRecord:
        with self._lock:
            record = self._records.get(cluster_name)
        if record is None:
            raise ClusterNotFoundError(cluster_name)
        return record

    def update_cluster(self, cluster_name: str, field_name: str, value: Any) -> None:
        with self._lock:
            record = self._records.get(cluster_name)
            if record is None:
                raise ClusterNotFoundError(cluster_name)
            if checkpoint_regression(record, field_name, value):
                raise PersistenceError(
                    cluster_name, field_name, "checkpoint flags cannot be reset"
                )
            try:
                self._records[cluster_name] = record.with_field(field_name, value)
            except KeyError:
                raise PersistenceError(
                    cluster_name, field_name, "unknown field"
                ) from None
            self.updates.append((cluster_name, field_name, value))
        logger.debug("Updated %s on cluster %s", field_name, cluster_name)
