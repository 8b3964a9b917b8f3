"""Vultr: an object storage instance, then a bucket inside it using its keys."""

from cairn.application.provisioning.base import CredentialsOutcome, StateStoreVariant
from cairn.domain.entities.cluster_record import ClusterRecord
from cairn.domain.errors import ProviderError
from cairn.domain.value_objects.cloud_provider import CloudProvider
from cairn.domain.value_objects.provider_resources import VultrBucketCredentials
from cairn.domain.value_objects.state_store import (
    StateStoreCredentials,
    StateStoreDetails,
)


class VultrStateStoreVariant(StateStoreVariant):
    provider = CloudProvider.VULTR

    def acquire_credentials(self, record: ClusterRecord) -> CredentialsOutcome:
        objst = self.adapter.create_bucket(record.cloud_region, record.bucket_name)

        try:
            self.adapter.create_bucket_with_credentials(
                VultrBucketCredentials(
                    access_key=objst.s3_access_key,
                    secret_access_key=objst.s3_secret_key,
                    endpoint=objst.s3_hostname,
                ),
                record.bucket_name,
            )
        except ProviderError as e:
            raise ProviderError(
                str(self.provider), f"error creating vultr state storage bucket: {e}"
            ) from e

        return CredentialsOutcome(
            credentials=StateStoreCredentials(
                access_key_id=objst.s3_access_key,
                secret_access_key=objst.s3_secret_key,
                name=objst.label,
                id=objst.id,
            ),
            details=StateStoreDetails(
                name=objst.label, id=objst.id, hostname=objst.s3_hostname
            ),
        )
