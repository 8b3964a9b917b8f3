"""
Cluster record store implementations.
"""

from cairn.infrastructure.repositories.memory_cluster_repository import (
    InMemoryClusterRepository,
)
from cairn.infrastructure.repositories.sqlite_cluster_repository import (
    SQLiteClusterRepository,
)

__all__ = [
    "InMemoryClusterRepository",
    "SQLiteClusterRepository",
]
