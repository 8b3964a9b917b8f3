"""
Checkpoint Orchestration Module

Architectural Intent:
- Each provisioning step is a two-state machine (NOT_DONE -> DONE) whose state
  lives in a persisted boolean on the cluster record
- Deciding whether a step runs is a pure function of that persisted state and
  of whether the cluster's provider has work for the step
- Committing a step writes its data fields first and the checkpoint flag last,
  so an observer never sees DONE before the data it vouches for

Failure Semantics:
- Any write failure aborts the commit; the checkpoint stays NOT_DONE and the
  whole step is safe to re-run
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Sequence

from cairn.domain.entities.cluster_record import (
    ClusterRecord,
    STATE_STORE_CREDS_CHECK,
    STATE_STORE_CREATE_CHECK,
)
from cairn.domain.ports.cluster_store_port import ClusterStorePort

logger = logging.getLogger(__name__)


class StepState(Enum):
    NOT_DONE = auto()
    DONE = auto()


class StepAction(Enum):
    RUN = auto()
    SKIP = auto()
    NOT_APPLICABLE = auto()


@dataclass(frozen=True)
class CheckpointStep:
    name: str
    checkpoint_field: str

    def state_of(self, record: ClusterRecord) -> StepState:
        if getattr(record, self.checkpoint_field):
            return StepState.DONE
        return StepState.NOT_DONE


CREDENTIALS_STEP = CheckpointStep("StateStoreCredentials", STATE_STORE_CREDS_CHECK)
CREATE_STEP = CheckpointStep("StateStoreCreate", STATE_STORE_CREATE_CHECK)


@dataclass(frozen=True)
class StepPlan:
    action: StepAction
    next_state: StepState

    @property
    def should_run(self) -> bool:
        return self.action == StepAction.RUN


def plan_step(state: StepState, applicable: bool = True) -> StepPlan:
    """Decide what a step does given its persisted state.

    A DONE step is always skipped. A NOT_DONE step runs when the provider
    has work for it and otherwise stays NOT_DONE without side effects.
    """
    if state == StepState.DONE:
        return StepPlan(StepAction.SKIP, StepState.DONE)
    if not applicable:
        return StepPlan(StepAction.NOT_APPLICABLE, StepState.NOT_DONE)
    return StepPlan(StepAction.RUN, StepState.DONE)


class CheckpointWriter:
    """Persists a step's outputs, then advances its checkpoint."""

    def __init__(self, store: ClusterStorePort) -> None:
        self.store = store

    def commit(
        self,
        cluster_name: str,
        step: CheckpointStep,
        writes: Sequence[tuple[str, Any]],
    ) -> None:
        for field_name, value in writes:
            logger.debug("Persisting %s for cluster %s", field_name, cluster_name)
            self.store.update_cluster(cluster_name, field_name, value)

        self.store.update_cluster(cluster_name, step.checkpoint_field, True)
        logger.debug(
            "Checkpoint %s set for cluster %s", step.checkpoint_field, cluster_name
        )
