"""Global test configuration.

Shared fixtures for building cluster records, provider adapter doubles and
wired use cases.
"""

from unittest.mock import MagicMock

import pytest

from cairn.application.provisioning import (
    AwsStateStoreVariant,
    CivoStateStoreVariant,
    DigitaloceanStateStoreVariant,
    VariantRegistry,
    VultrStateStoreVariant,
)
from cairn.domain.entities.cluster_record import ClusterRecord
from cairn.domain.value_objects.cloud_provider import CloudProvider
from cairn.domain.value_objects.provider_resources import (
    AwsBucket,
    CivoAccessCredentials,
    CivoBucket,
    SpacesCredentials,
    VultrObjectStorage,
)
from cairn.infrastructure.adapters.aws_adapter import AWSObjectStorageAdapter
from cairn.infrastructure.adapters.civo_adapter import CivoObjectStorageAdapter
from cairn.infrastructure.adapters.digitalocean_adapter import DigitalOceanSpacesAdapter
from cairn.infrastructure.adapters.vultr_adapter import VultrObjectStorageAdapter
from cairn.infrastructure.repositories.memory_cluster_repository import (
    InMemoryClusterRepository,
)


CIVO_CREDS = CivoAccessCredentials(
    id="cred-123",
    name="demo",
    access_key_id="AKCIVO123",
    secret_access_key_id="civo-secret",
)

AWS_ACCESS_KEY_ID = "AKIAEXAMPLE"
AWS_SECRET_ACCESS_KEY = "aws-secret"


def make_record(
    provider: str = "civo",
    cluster_name: str = "demo",
    region: str = "nyc1",
    **kwargs,
) -> ClusterRecord:
    """AWS records get static keys unless the caller overrides them."""
    if provider == "aws":
        kwargs.setdefault("aws_access_key_id", AWS_ACCESS_KEY_ID)
        kwargs.setdefault("aws_secret_access_key", AWS_SECRET_ACCESS_KEY)
    return ClusterRecord(
        cluster_name=cluster_name,
        cloud_provider=CloudProvider.parse(provider),
        cloud_region=region,
        **kwargs,
    )


def make_adapter_doubles() -> dict[CloudProvider, MagicMock]:
    """Spec'd adapter mocks returning realistic provider-native shapes."""
    aws = MagicMock(spec=AWSObjectStorageAdapter)
    aws.create_bucket.side_effect = lambda region, name, access_key_id=None: AwsBucket(
        name=name, location=f"/{name}"
    )

    civo = MagicMock(spec=CivoObjectStorageAdapter)
    civo.acquire_credentials.return_value = CIVO_CREDS
    civo.create_bucket.return_value = CivoBucket(id="bucket-1", name="demo", region="nyc1")

    digitalocean = MagicMock(spec=DigitalOceanSpacesAdapter)
    digitalocean.acquire_credentials.return_value = SpacesCredentials(
        access_key="DOKEY", secret_access_key="do-secret",
        endpoint="nyc3.digitaloceanspaces.com",
    )

    vultr = MagicMock(spec=VultrObjectStorageAdapter)
    vultr.create_bucket.return_value = VultrObjectStorage(
        id="objst-1", label="demo", region="ewr",
        s3_hostname="ewr1.vultrobjects.com",
        s3_access_key="VULTRKEY", s3_secret_key="vultr-secret",
    )

    return {
        CloudProvider.AWS: aws,
        CloudProvider.CIVO: civo,
        CloudProvider.DIGITALOCEAN: digitalocean,
        CloudProvider.VULTR: vultr,
    }


def make_registry(adapters: dict) -> VariantRegistry:
    return VariantRegistry([
        AwsStateStoreVariant(adapters[CloudProvider.AWS]),
        CivoStateStoreVariant(adapters[CloudProvider.CIVO]),
        DigitaloceanStateStoreVariant(adapters[CloudProvider.DIGITALOCEAN]),
        VultrStateStoreVariant(adapters[CloudProvider.VULTR]),
    ])


@pytest.fixture
def store():
    return InMemoryClusterRepository()


@pytest.fixture
def adapters():
    return make_adapter_doubles()


@pytest.fixture
def registry(adapters):
    return make_registry(adapters)
