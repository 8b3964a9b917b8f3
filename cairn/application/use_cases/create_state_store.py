"""
Create State Store Use Case

Architectural Intent:
- Second checkpointed state store step (StateStoreCreate)
- Only providers whose credential step leaves no bucket behind have work here;
  for the others the step is a no-op with no adapter calls and no writes
- Requires the credentials step to have populated an access key; calling it
  earlier fails fast with StateStoreUsageError
- StateStoreCreated is published after the checkpoint is set; a subscriber
  error there leaves the step complete
"""

import logging
from typing import Optional

from cairn.application.dtos.state_store_dtos import StateStoreStepResult
from cairn.application.orchestration.checkpoint import (
    CREATE_STEP,
    CheckpointWriter,
    StepAction,
    plan_step,
)
from cairn.application.provisioning.registry import VariantRegistry
from cairn.domain.entities.cluster_record import STATE_STORE_DETAILS
from cairn.domain.events.event_base import DomainEvent
from cairn.domain.events.state_store_events import (
    StateStoreCreated,
    StateStoreStepFailed,
    StateStoreStepSkipped,
    StateStoreStepStarted,
)
from cairn.domain.ports.cluster_store_port import ClusterStorePort
from cairn.domain.ports.event_bus_port import EventBusPort

logger = logging.getLogger(__name__)


class CreateStateStore:
    def __init__(
        self,
        store: ClusterStorePort,
        variants: VariantRegistry,
        event_bus: Optional[EventBusPort] = None,
    ):
        self.store = store
        self.variants = variants
        self.event_bus = event_bus
        self.writer = CheckpointWriter(store)

    def _publish(self, cluster_name: str, event: DomainEvent) -> None:
        if self.event_bus is not None:
            self.event_bus.publish([event.with_aggregate_id(cluster_name)])

    def execute(self, cluster_name: str) -> StateStoreStepResult:
        record = self.store.get_cluster(cluster_name)
        provider = str(record.cloud_provider)
        variant = self.variants.for_provider(record.cloud_provider)
        plan = plan_step(CREATE_STEP.state_of(record), variant.has_create_step)

        if not plan.should_run:
            reason = "checkpoint" if plan.action == StepAction.SKIP else "bundled"
            logger.debug(
                "%s not run for cluster %s (%s)", CREATE_STEP.name, cluster_name, reason
            )
            self._publish(
                cluster_name,
                StateStoreStepSkipped(
                    step=CREATE_STEP.name, provider=provider, reason=reason
                ),
            )
            return StateStoreStepResult(
                step=CREATE_STEP.name,
                cluster_name=cluster_name,
                provider=provider,
                action=plan.action,
                credentials=record.state_store_credentials,
                details=record.state_store_details,
            )

        self._publish(
            cluster_name, StateStoreStepStarted(step=CREATE_STEP.name, provider=provider)
        )

        try:
            details = variant.create_state_store(record)
            self.writer.commit(
                cluster_name, CREATE_STEP, [(STATE_STORE_DETAILS, details)]
            )
        except Exception as e:
            logger.error(
                "%s failed for cluster %s (%s): %s",
                CREATE_STEP.name,
                cluster_name,
                provider,
                e,
            )
            self._publish(
                cluster_name,
                StateStoreStepFailed(
                    step=CREATE_STEP.name, provider=provider, error_message=str(e)
                ),
            )
            raise

        logger.info("%s state store bucket created", provider)
        self._publish(
            cluster_name, StateStoreCreated(provider=provider, bucket_name=details.name)
        )
        return StateStoreStepResult(
            step=CREATE_STEP.name,
            cluster_name=cluster_name,
            provider=provider,
            action=plan.action,
            credentials=record.state_store_credentials,
            details=details,
        )
