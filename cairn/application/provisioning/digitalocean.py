"""DigitalOcean: a Spaces bucket created with account-level Spaces keys."""

from cairn.application.provisioning.base import CredentialsOutcome, StateStoreVariant
from cairn.domain.entities.cluster_record import ClusterRecord
from cairn.domain.errors import ProviderError
from cairn.domain.value_objects.cloud_provider import CloudProvider
from cairn.domain.value_objects.state_store import (
    StateStoreCredentials,
    StateStoreDetails,
)


class DigitaloceanStateStoreVariant(StateStoreVariant):
    provider = CloudProvider.DIGITALOCEAN

    def acquire_credentials(self, record: ClusterRecord) -> CredentialsOutcome:
        bucket_name = record.bucket_name
        creds = self.adapter.acquire_credentials(bucket_name, record.cloud_region)

        try:
            self.adapter.create_bucket_with_credentials(creds, bucket_name)
        except ProviderError as e:
            raise ProviderError(
                str(self.provider), f"error creating spaces bucket {bucket_name}: {e}"
            ) from e

        return CredentialsOutcome(
            credentials=StateStoreCredentials(
                access_key_id=creds.access_key,
                secret_access_key=creds.secret_access_key,
                name=bucket_name,
            ),
            details=StateStoreDetails(name=bucket_name, hostname=creds.endpoint),
        )
