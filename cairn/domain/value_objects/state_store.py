"""
State Store Value Objects

Architectural Intent:
- Canonical, provider-agnostic forms of what a state store step produces
- Stored on the cluster record regardless of the originating provider
- Immutable; a new bundle always replaces the previous one wholesale
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Optional


def _from_mapping(cls, data: Optional[dict[str, Any]]):
    if not data:
        return cls()
    valid = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in valid and v is not None})


@dataclass(frozen=True)
class StateStoreCredentials:
    """Access keys for the bucket holding a cluster's infrastructure state."""

    access_key_id: str = ""
    secret_access_key: str = ""
    name: str = ""
    id: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.access_key_id

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Optional[dict[str, Any]]) -> "StateStoreCredentials":
        return _from_mapping(StateStoreCredentials, data)

    def __repr__(self) -> str:
        # Never render the secret.
        return (
            f"StateStoreCredentials(access_key_id={self.access_key_id!r}, "
            f"name={self.name!r}, id={self.id!r})"
        )


@dataclass(frozen=True)
class StateStoreDetails:
    """Bucket or object storage container that holds the state."""

    name: str = ""
    id: str = ""
    hostname: str = ""
    aws_state_store_bucket: str = ""
    aws_artifacts_bucket: str = ""

    @property
    def is_empty(self) -> bool:
        return not any(asdict(self).values())

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Optional[dict[str, Any]]) -> "StateStoreDetails":
        return _from_mapping(StateStoreDetails, data)
