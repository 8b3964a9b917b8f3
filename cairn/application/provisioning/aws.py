"""AWS: two S3 buckets (state store, artifacts) with the cluster's static keys."""

from cairn.application.provisioning.base import CredentialsOutcome, StateStoreVariant
from cairn.domain.entities.cluster_record import ClusterRecord
from cairn.domain.errors import StateStoreUsageError
from cairn.domain.value_objects.cloud_provider import CloudProvider
from cairn.domain.value_objects.state_store import (
    StateStoreCredentials,
    StateStoreDetails,
)


def _bucket_from_location(location: str) -> str:
    # S3 reports the location as "/bucket-name".
    return (location or "").replace("/", "")


class AwsStateStoreVariant(StateStoreVariant):
    provider = CloudProvider.AWS

    def acquire_credentials(self, record: ClusterRecord) -> CredentialsOutcome:
        if not record.aws_access_key_id or not record.aws_secret_access_key:
            raise StateStoreUsageError(
                f"cluster {record.cluster_name!r} has no AWS static access keys; "
                "register it with --aws-access-key-id and --aws-secret-access-key"
            )

        state_bucket = self.adapter.create_bucket(
            record.cloud_region, record.bucket_name
        )
        artifacts_bucket = self.adapter.create_bucket(
            record.cloud_region, record.artifacts_bucket
        )

        return CredentialsOutcome(
            credentials=StateStoreCredentials(
                access_key_id=record.aws_access_key_id,
                secret_access_key=record.aws_secret_access_key,
            ),
            details=StateStoreDetails(
                aws_state_store_bucket=_bucket_from_location(state_bucket.location),
                aws_artifacts_bucket=_bucket_from_location(artifacts_bucket.location),
            ),
        )
