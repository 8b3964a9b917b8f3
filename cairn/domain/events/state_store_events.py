"""
State Store Events

Published by the provisioning steps; aggregate_id is always the cluster name.
"""

from dataclasses import dataclass

from cairn.domain.events.event_base import DomainEvent


@dataclass(frozen=True)
class StateStoreStepStarted(DomainEvent):
    step: str = ""
    provider: str = ""


@dataclass(frozen=True)
class StateStoreStepSkipped(DomainEvent):
    step: str = ""
    provider: str = ""
    reason: str = ""


@dataclass(frozen=True)
class StateStoreCredentialsAcquired(DomainEvent):
    provider: str = ""
    access_key_id: str = ""


@dataclass(frozen=True)
class StateStoreCreated(DomainEvent):
    provider: str = ""
    bucket_name: str = ""


@dataclass(frozen=True)
class StateStoreStepFailed(DomainEvent):
    step: str = ""
    provider: str = ""
    error_message: str = ""


@dataclass(frozen=True)
class StateStoreCredentialsCompensated(DomainEvent):
    provider: str = ""
    bucket_name: str = ""
    missing_field: str = ""
