"""
State Store Variant Base

Architectural Intent:
- One variant per cloud provider, all exposing the same two operations
- A variant calls only its own provider adapter and turns the native results
  into canonical StateStoreCredentials / StateStoreDetails
- Variants never touch the cluster store; persistence and checkpointing belong
  to the use cases

Design Decisions:
- has_create_step is False for providers whose credential step already leaves
  a bucket behind; for them the create step has nothing to do
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from cairn.domain.entities.cluster_record import ClusterRecord
from cairn.domain.errors import StateStoreUsageError
from cairn.domain.ports.object_storage_provider_port import ObjectStorageProviderPort
from cairn.domain.value_objects.cloud_provider import CloudProvider
from cairn.domain.value_objects.state_store import (
    StateStoreCredentials,
    StateStoreDetails,
)


@dataclass(frozen=True)
class CredentialsOutcome:
    credentials: StateStoreCredentials
    details: Optional[StateStoreDetails] = None


class StateStoreVariant(ABC):
    provider: CloudProvider
    has_create_step: bool = False

    def __init__(self, adapter: ObjectStorageProviderPort) -> None:
        self.adapter = adapter

    @abstractmethod
    def acquire_credentials(self, record: ClusterRecord) -> CredentialsOutcome:
        """Obtain canonical credentials (and details, if the bucket now exists)."""

    def create_state_store(self, record: ClusterRecord) -> StateStoreDetails:
        """Create the bucket in a separate call. Only for has_create_step variants."""
        raise StateStoreUsageError(
            f"{self.provider} creates its state store while acquiring credentials"
        )
