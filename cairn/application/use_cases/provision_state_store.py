"""
Provision State Store Use Case

Runs StateStoreCredentials then StateStoreCreate for one cluster. Each step
keeps its own checkpoint, so re-running after a failure resumes where the
previous attempt stopped.
"""

import logging

from cairn.application.dtos.state_store_dtos import ProvisionStateStoreResult
from cairn.application.use_cases.acquire_state_store_credentials import (
    AcquireStateStoreCredentials,
)
from cairn.application.use_cases.create_state_store import CreateStateStore

logger = logging.getLogger(__name__)


class ProvisionStateStore:
    def __init__(
        self,
        acquire_credentials: AcquireStateStoreCredentials,
        create_state_store: CreateStateStore,
    ):
        self.acquire_credentials = acquire_credentials
        self.create_state_store = create_state_store

    def execute(self, cluster_name: str) -> ProvisionStateStoreResult:
        credentials_step = self.acquire_credentials.execute(cluster_name)
        create_step = self.create_state_store.execute(cluster_name)
        logger.info("State store provisioned for cluster %s", cluster_name)
        return ProvisionStateStoreResult(
            credentials_step=credentials_step, create_step=create_step
        )
