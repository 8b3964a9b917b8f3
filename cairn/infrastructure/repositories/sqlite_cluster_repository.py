"""
SQLite Cluster Repository

Architectural Intent:
- Persistent ClusterStorePort backend using SQLite (stdlib, zero external deps)
- One row per cluster; nested state store values stored as JSON text
- Field updates are single-column UPDATEs committed immediately, so each
  named-field write is durable on return

Design Decisions:
- Single database file at configurable path (default: cairn.db)
- Auto-creates tables on first use
- Thread-safe via sqlite3's check_same_thread=False
- Timestamps stored as ISO 8601 strings
"""

from __future__ import annotations
import sqlite3
import json
import logging
from datetime import datetime, UTC
from typing import Any, Optional

from cairn.domain.entities.cluster_record import (
    ClusterRecord,
    STATE_STORE_CREDENTIALS,
    STATE_STORE_DETAILS,
    STATE_STORE_CREDS_CHECK,
    STATE_STORE_CREATE_CHECK,
    checkpoint_regression,
)
from cairn.domain.errors import ClusterNotFoundError, PersistenceError

logger = logging.getLogger(__name__)

_JSON_FIELDS = (STATE_STORE_CREDENTIALS, STATE_STORE_DETAILS)
_BOOL_FIELDS = (STATE_STORE_CREDS_CHECK, STATE_STORE_CREATE_CHECK)
_COLUMNS = (
    "cluster_name",
    "cloud_provider",
    "cloud_region",
    STATE_STORE_CREDS_CHECK,
    STATE_STORE_CREATE_CHECK,
    STATE_STORE_CREDENTIALS,
    STATE_STORE_DETAILS,
    "state_store_bucket_name",
    "artifacts_bucket_name",
    "aws_access_key_id",
    "aws_secret_access_key",
)


def _to_column(field_name: str, value: Any) -> Any:
    if field_name in _JSON_FIELDS:
        if hasattr(value, "to_dict"):
            value = value.to_dict()
        return json.dumps(value or {})
    if field_name in _BOOL_FIELDS:
        return int(bool(value))
    if hasattr(value, "value"):
        return value.value
    return value


class SQLiteClusterRepository:
    """Persistent cluster record storage using SQLite."""

    def __init__(self, db_path: str = "cairn.db"):
        self._db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None

    def connect(self) -> None:
        """Open database connection and create tables."""
        self._conn = sqlite3.connect(
            self._db_path,
            check_same_thread=False,
        )
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.row_factory = sqlite3.Row
        self._create_tables()
        logger.info("SQLite cluster repository connected: %s", self._db_path)

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self.connect()
        assert self._conn is not None
        return self._conn

    def _create_tables(self) -> None:
        """Create tables if they don't exist."""
        assert self._conn is not None
        self._conn.executescript("""
            CREATE TABLE IF NOT EXISTS clusters (
                cluster_name TEXT PRIMARY KEY,
                cloud_provider TEXT NOT NULL,
                cloud_region TEXT NOT NULL DEFAULT '',
                state_store_creds_check INTEGER NOT NULL DEFAULT 0,
                state_store_create_check INTEGER NOT NULL DEFAULT 0,
                state_store_credentials TEXT NOT NULL DEFAULT '{}',
                state_store_details TEXT NOT NULL DEFAULT '{}',
                state_store_bucket_name TEXT NOT NULL DEFAULT '',
                artifacts_bucket_name TEXT NOT NULL DEFAULT '',
                aws_access_key_id TEXT NOT NULL DEFAULT '',
                aws_secret_access_key TEXT NOT NULL DEFAULT '',
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
        """)

    # -- ClusterStorePort ----------------------------------------------------

    def create_cluster(self, record: ClusterRecord) -> None:
        """Insert a new cluster record."""
        conn = self._require_conn()
        data = record.to_dict()
        now = datetime.now(UTC).isoformat()
        values = [_to_column(col, data[col]) for col in _COLUMNS]
        placeholders = ", ".join("?" for _ in range(len(_COLUMNS) + 2))
        try:
            conn.execute(
                f"INSERT INTO clusters ({', '.join(_COLUMNS)}, created_at, updated_at)"
                f" VALUES ({placeholders})",
                (*values, now, now),
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            raise PersistenceError(record.cluster_name, "cluster_name", str(e)) from e

    def get_cluster(self, cluster_name: str) -> ClusterRecord:
        """Return the cluster record, or raise ClusterNotFoundError."""
        conn = self._require_conn()
        row = conn.execute(
            "SELECT * FROM clusters WHERE cluster_name = ?", (cluster_name,)
        ).fetchone()
        if row is None:
            raise ClusterNotFoundError(cluster_name)

        data = dict(row)
        for name in _JSON_FIELDS:
            data[name] = json.loads(data[name] or "{}")
        return ClusterRecord.from_dict(data)

    def update_cluster(self, cluster_name: str, field_name: str, value: Any) -> None:
        """Persist one named field."""
        if field_name not in _COLUMNS or field_name == "cluster_name":
            raise PersistenceError(cluster_name, field_name, "unknown field")

        if field_name in _BOOL_FIELDS and checkpoint_regression(
            self.get_cluster(cluster_name), field_name, value
        ):
            raise PersistenceError(
                cluster_name, field_name, "checkpoint flags cannot be reset"
            )

        conn = self._require_conn()
        try:
            cursor = conn.execute(
                f"UPDATE clusters SET {field_name} = ?, updated_at = ?"
                " WHERE cluster_name = ?",
                (
                    _to_column(field_name, value),
                    datetime.now(UTC).isoformat(),
                    cluster_name,
                ),
            )
            conn.commit()
        except sqlite3.Error as e:
            raise PersistenceError(cluster_name, field_name, str(e)) from e

        if cursor.rowcount == 0:
            raise ClusterNotFoundError(cluster_name)
        logger.debug("Updated %s on cluster %s", field_name, cluster_name)

    # -- Queries ---------------------------------------------------------------

    def list_clusters(self) -> list[str]:
        """Return all cluster names."""
        conn = self._require_conn()
        rows = conn.execute(
            "SELECT cluster_name FROM clusters ORDER BY cluster_name"
        ).fetchall()
        return [r["cluster_name"] for r in rows]
