"""
Cluster Record Module

Architectural Intent:
- Snapshot of one cluster as held by the cluster record store
- The state store steps read a full snapshot and mutate it only through
  named-field updates on the store; the snapshot itself is immutable
- Checkpoint flags are monotone: once True they are never written back to False

Persisted fields touched by the state store steps:
- state_store_credentials, state_store_details
- state_store_creds_check, state_store_create_check
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional

from cairn.domain.value_objects.cloud_provider import CloudProvider
from cairn.domain.value_objects.state_store import (
    StateStoreCredentials,
    StateStoreDetails,
)

STATE_STORE_CREDENTIALS = "state_store_credentials"
STATE_STORE_DETAILS = "state_store_details"
STATE_STORE_CREDS_CHECK = "state_store_creds_check"
STATE_STORE_CREATE_CHECK = "state_store_create_check"

CHECKPOINT_FIELDS = (STATE_STORE_CREDS_CHECK, STATE_STORE_CREATE_CHECK)


@dataclass(frozen=True)
class ClusterRecord:
    cluster_name: str
    cloud_provider: CloudProvider
    cloud_region: str
    state_store_creds_check: bool = False
    state_store_create_check: bool = False
    state_store_credentials: StateStoreCredentials = field(
        default_factory=StateStoreCredentials
    )
    state_store_details: StateStoreDetails = field(default_factory=StateStoreDetails)
    state_store_bucket_name: str = ""
    artifacts_bucket_name: str = ""
    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""

    def __post_init__(self) -> None:
        if not self.cluster_name:
            raise ValueError("cluster_name cannot be empty")

    @property
    def bucket_name(self) -> str:
        """Desired state store bucket name, defaulting to the cluster name."""
        return self.state_store_bucket_name or self.cluster_name

    @property
    def artifacts_bucket(self) -> str:
        return self.artifacts_bucket_name or f"{self.bucket_name}-artifacts"

    def with_field(self, field_name: str, value: Any) -> "ClusterRecord":
        """Return a copy with one persisted field replaced."""
        if field_name not in {f.name for f in fields(self)}:
            raise KeyError(field_name)
        if field_name == STATE_STORE_CREDENTIALS and isinstance(value, dict):
            value = StateStoreCredentials.from_dict(value)
        elif field_name == STATE_STORE_DETAILS and isinstance(value, dict):
            value = StateStoreDetails.from_dict(value)
        return replace(self, **{field_name: value})

    def to_dict(self) -> dict[str, Any]:
        return {
            "cluster_name": self.cluster_name,
            "cloud_provider": self.cloud_provider.value,
            "cloud_region": self.cloud_region,
            STATE_STORE_CREDS_CHECK: self.state_store_creds_check,
            STATE_STORE_CREATE_CHECK: self.state_store_create_check,
            STATE_STORE_CREDENTIALS: self.state_store_credentials.to_dict(),
            STATE_STORE_DETAILS: self.state_store_details.to_dict(),
            "state_store_bucket_name": self.state_store_bucket_name,
            "artifacts_bucket_name": self.artifacts_bucket_name,
            "aws_access_key_id": self.aws_access_key_id,
            "aws_secret_access_key": self.aws_secret_access_key,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "ClusterRecord":
        return ClusterRecord(
            cluster_name=data["cluster_name"],
            cloud_provider=CloudProvider.parse(data["cloud_provider"]),
            cloud_region=data.get("cloud_region", ""),
            state_store_creds_check=bool(data.get(STATE_STORE_CREDS_CHECK, False)),
            state_store_create_check=bool(data.get(STATE_STORE_CREATE_CHECK, False)),
            state_store_credentials=StateStoreCredentials.from_dict(
                data.get(STATE_STORE_CREDENTIALS)
            ),
            state_store_details=StateStoreDetails.from_dict(
                data.get(STATE_STORE_DETAILS)
            ),
            state_store_bucket_name=data.get("state_store_bucket_name", "") or "",
            artifacts_bucket_name=data.get("artifacts_bucket_name", "") or "",
            aws_access_key_id=data.get("aws_access_key_id", "") or "",
            aws_secret_access_key=data.get("aws_secret_access_key", "") or "",
        )

    def __repr__(self) -> str:
        return (
            f"ClusterRecord(cluster_name={self.cluster_name!r}, "
            f"cloud_provider={self.cloud_provider}, cloud_region={self.cloud_region!r}, "
            f"creds_check={self.state_store_creds_check}, "
            f"create_check={self.state_store_create_check})"
        )


def checkpoint_regression(
    record: Optional[ClusterRecord], field_name: str, value: Any
) -> bool:
    """True when writing value would reset an already-set checkpoint flag."""
    if record is None or field_name not in CHECKPOINT_FIELDS:
        return False
    return bool(getattr(record, field_name)) and not value
