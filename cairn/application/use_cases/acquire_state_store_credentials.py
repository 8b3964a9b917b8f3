"""
Acquire State Store Credentials Use Case

Architectural Intent:
- First of the two checkpointed state store steps (StateStoreCredentials)
- Skips entirely when the cluster's state_store_creds_check flag is set
- Otherwise dispatches to the cluster provider's variant, persists the
  canonical details and credentials, and sets the checkpoint last

Failure Semantics:
- Lookup, provider, validation and persistence errors propagate to the caller
  with the checkpoint still unset; re-invoking the step is always safe
- Success events are published after the checkpoint is set. A subscriber
  that raises there fails the call, but the step stays complete and the next
  invocation skips it
"""

import logging
from typing import Optional

from cairn.application.dtos.state_store_dtos import StateStoreStepResult
from cairn.application.orchestration.checkpoint import (
    CREDENTIALS_STEP,
    CheckpointWriter,
    plan_step,
)
from cairn.application.provisioning.registry import VariantRegistry
from cairn.domain.entities.cluster_record import (
    STATE_STORE_CREDENTIALS,
    STATE_STORE_DETAILS,
)
from cairn.domain.errors import CredentialValidationError
from cairn.domain.events.event_base import DomainEvent
from cairn.domain.events.state_store_events import (
    StateStoreCredentialsAcquired,
    StateStoreCredentialsCompensated,
    StateStoreStepFailed,
    StateStoreStepSkipped,
    StateStoreStepStarted,
)
from cairn.domain.ports.cluster_store_port import ClusterStorePort
from cairn.domain.ports.event_bus_port import EventBusPort

logger = logging.getLogger(__name__)


class AcquireStateStoreCredentials:
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
        plan = plan_step(CREDENTIALS_STEP.state_of(record))

        if not plan.should_run:
            logger.debug(
                "%s already done for cluster %s, skipping",
                CREDENTIALS_STEP.name,
                cluster_name,
            )
            self._publish(
                cluster_name,
                StateStoreStepSkipped(
                    step=CREDENTIALS_STEP.name, provider=provider, reason="checkpoint"
                ),
            )
            return StateStoreStepResult(
                step=CREDENTIALS_STEP.name,
                cluster_name=cluster_name,
                provider=provider,
                action=plan.action,
                credentials=record.state_store_credentials,
                details=record.state_store_details,
            )

        variant = self.variants.for_provider(record.cloud_provider)
        self._publish(
            cluster_name,
            StateStoreStepStarted(step=CREDENTIALS_STEP.name, provider=provider),
        )

        try:
            outcome = variant.acquire_credentials(record)

            writes = []
            if outcome.details is not None:
                writes.append((STATE_STORE_DETAILS, outcome.details))
            writes.append((STATE_STORE_CREDENTIALS, outcome.credentials))
            self.writer.commit(cluster_name, CREDENTIALS_STEP, writes)
        except CredentialValidationError as e:
            self._publish(
                cluster_name,
                StateStoreCredentialsCompensated(
                    provider=provider,
                    bucket_name=record.bucket_name,
                    missing_field=e.field,
                ),
            )
            self._fail(cluster_name, provider, e)
            raise
        except Exception as e:
            self._fail(cluster_name, provider, e)
            raise

        logger.info("%s object storage credentials created and set", provider)
        self._publish(
            cluster_name,
            StateStoreCredentialsAcquired(
                provider=provider, access_key_id=outcome.credentials.access_key_id
            ),
        )
        return StateStoreStepResult(
            step=CREDENTIALS_STEP.name,
            cluster_name=cluster_name,
            provider=provider,
            action=plan.action,
            credentials=outcome.credentials,
            details=outcome.details,
        )

    def _fail(self, cluster_name: str, provider: str, error: Exception) -> None:
        logger.error(
            "%s failed for cluster %s (%s): %s",
            CREDENTIALS_STEP.name,
            cluster_name,
            provider,
            error,
        )
        self._publish(
            cluster_name,
            StateStoreStepFailed(
                step=CREDENTIALS_STEP.name, provider=provider, error_message=str(error)
            ),
        )
