"""
State Store DTOs

Architectural Intent:
- Data Transfer Objects for the state store use case boundaries
- Results carry the canonical entities back to the caller, so nothing needs to
  be stashed in process-wide state between steps
"""

from dataclasses import dataclass, field
from typing import Optional

from cairn.application.orchestration.checkpoint import StepAction
from cairn.domain.value_objects.state_store import (
    StateStoreCredentials,
    StateStoreDetails,
)


@dataclass(frozen=True)
class StateStoreStepResult:
    step: str
    cluster_name: str
    provider: str
    action: StepAction
    credentials: StateStoreCredentials = field(default_factory=StateStoreCredentials)
    details: Optional[StateStoreDetails] = None

    @property
    def performed(self) -> bool:
        return self.action == StepAction.RUN

    @property
    def hostname(self) -> str:
        return self.details.hostname if self.details else ""


@dataclass(frozen=True)
class ProvisionStateStoreResult:
    credentials_step: StateStoreStepResult
    create_step: StateStoreStepResult

    @property
    def details(self) -> Optional[StateStoreDetails]:
        return self.create_step.details or self.credentials_step.details


@dataclass(frozen=True)
class StateStoreStatus:
    cluster_name: str
    provider: str
    region: str
    credentials_done: bool
    create_done: bool
    create_step_required: bool
    has_credentials: bool
    details: StateStoreDetails

    @property
    def complete(self) -> bool:
        if not self.credentials_done:
            return False
        return self.create_done or not self.create_step_required
