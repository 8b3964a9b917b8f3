"""
Get State Store Status Use Case

Read-only view of where a cluster stands in the two state store steps.
"""

from cairn.application.dtos.state_store_dtos import StateStoreStatus
from cairn.application.orchestration.checkpoint import (
    CREATE_STEP,
    CREDENTIALS_STEP,
    StepState,
)
from cairn.application.provisioning.registry import VariantRegistry
from cairn.domain.ports.cluster_store_port import ClusterStorePort


class GetStateStoreStatus:
    def __init__(self, store: ClusterStorePort, variants: VariantRegistry):
        self.store = store
        self.variants = variants

    def execute(self, cluster_name: str) -> StateStoreStatus:
        record = self.store.get_cluster(cluster_name)
        variant = self.variants.for_provider(record.cloud_provider)
        return StateStoreStatus(
            cluster_name=record.cluster_name,
            provider=str(record.cloud_provider),
            region=record.cloud_region,
            credentials_done=CREDENTIALS_STEP.state_of(record) == StepState.DONE,
            create_done=CREATE_STEP.state_of(record) == StepState.DONE,
            create_step_required=variant.has_create_step,
            has_credentials=not record.state_store_credentials.is_empty,
            details=record.state_store_details,
        )
