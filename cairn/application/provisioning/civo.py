"""
Civo State Store Variant

Civo issues object store credentials and creates the bucket in two separate
calls. The credential call can succeed with blank fields, so its result is
validated and, on failure, the partial credential is deleted before the error
is raised.
"""

import logging

from cairn.application.provisioning.base import CredentialsOutcome, StateStoreVariant
from cairn.domain.entities.cluster_record import ClusterRecord
from cairn.domain.errors import StateStoreUsageError
from cairn.domain.ports.object_storage_provider_port import ObjectStorageProviderPort
from cairn.domain.services.credential_validation import (
    CredentialValidator,
    civo_credential_validator,
)
from cairn.domain.value_objects.cloud_provider import CloudProvider
from cairn.domain.value_objects.state_store import (
    StateStoreCredentials,
    StateStoreDetails,
)

logger = logging.getLogger(__name__)


class CivoStateStoreVariant(StateStoreVariant):
    provider = CloudProvider.CIVO
    has_create_step = True

    def __init__(
        self,
        adapter: ObjectStorageProviderPort,
        validator: CredentialValidator | None = None,
    ) -> None:
        super().__init__(adapter)
        self.validator = validator or civo_credential_validator()

    def acquire_credentials(self, record: ClusterRecord) -> CredentialsOutcome:
        bucket_name = record.bucket_name
        region = record.cloud_region

        creds = self.adapter.acquire_credentials(bucket_name, region)
        self.validator.validate(
            creds,
            compensate=lambda: self.adapter.delete_credentials(bucket_name, region),
            bucket_name=bucket_name,
        )

        return CredentialsOutcome(
            credentials=StateStoreCredentials(
                access_key_id=creds.access_key_id,
                secret_access_key=creds.secret_access_key_id,
                name=creds.name,
                id=creds.id,
            )
        )

    def create_state_store(self, record: ClusterRecord) -> StateStoreDetails:
        access_key_id = record.state_store_credentials.access_key_id
        if not access_key_id:
            raise StateStoreUsageError(
                f"state store credentials for cluster {record.cluster_name!r} have "
                "not been acquired yet; run the credentials step first"
            )

        logger.info("access key id %s", access_key_id)
        bucket = self.adapter.create_bucket(
            record.cloud_region, record.bucket_name, access_key_id=access_key_id
        )
        return StateStoreDetails(name=bucket.name, id=bucket.id)
