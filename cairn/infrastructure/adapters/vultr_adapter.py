"""
Vultr Object Storage Adapter

Architectural Intent:
- Implements ObjectStorageProviderPort for Vultr object storage
- create_bucket provisions an object storage subscription (POST
  /v2/object-storage) in the region's cluster; its S3 keys and hostname are
  then used by create_bucket_with_credentials to create the actual bucket
- Simulated with an in-memory registry keyed by label

Design Decisions:
- Subscriptions are looked up by label before creation, so a repeated call
  returns the existing subscription instead of provisioning a second one
"""

import logging
import secrets
import uuid
from typing import Any, Optional

from cairn.domain.errors import ProviderError
from cairn.domain.ports.object_storage_provider_port import ObjectStorageProviderPort
from cairn.domain.value_objects.provider_resources import VultrObjectStorage

logger = logging.getLogger(__name__)


def _stub_create_object_storage(region: str, label: str) -> dict:
    """
    Simulate POST /v2/object-storage.

    The real request selects a cluster id for the region; the response
    carries the subscription and its S3 credentials.
    """
    return {
        "id": str(uuid.uuid4()),
        "label": label,
        "region": region,
        "status": "active",
        "s3_hostname": f"{region}.vultrobjects.com",
        "s3_access_key": secrets.token_hex(10).upper(),
        "s3_secret_key": secrets.token_urlsafe(30),
    }


class VultrObjectStorageAdapter(ObjectStorageProviderPort):
    def __init__(self, api_key: str = "") -> None:
        self.api_key = api_key
        self._subscriptions: dict[str, dict] = {}
        self._buckets: dict[tuple[str, str], dict] = {}

    @property
    def provider(self) -> str:
        return "vultr"

    def create_bucket(
        self, region: str, bucket_name: str, access_key_id: Optional[str] = None
    ) -> VultrObjectStorage:
        if not region:
            raise ProviderError(self.provider, "region is required for object storage")

        objst = self._subscriptions.get(bucket_name)
        if objst is None:
            logger.info("Vultr create object storage %s in %s", bucket_name, region)
            objst = _stub_create_object_storage(region, bucket_name)
            self._subscriptions[bucket_name] = objst
        else:
            logger.info("Vultr object storage %s already exists", bucket_name)

        return VultrObjectStorage(
            id=objst["id"],
            label=objst["label"],
            region=objst["region"],
            s3_hostname=objst["s3_hostname"],
            s3_access_key=objst["s3_access_key"],
            s3_secret_key=objst["s3_secret_key"],
        )

    def create_bucket_with_credentials(self, credentials: Any, bucket_name: str) -> None:
        owner = next(
            (s for s in self._subscriptions.values()
             if s["s3_access_key"] == credentials.access_key
             and s["s3_secret_key"] == credentials.secret_access_key),
            None,
        )
        if owner is None:
            raise ProviderError(self.provider, "InvalidAccessKeyId")

        key = (owner["id"], bucket_name)
        if key in self._buckets:
            logger.info("Vultr bucket %s already exists", bucket_name)
            return

        logger.info("Vultr create bucket %s at %s", bucket_name, credentials.endpoint)
        self._buckets[key] = {"endpoint": credentials.endpoint}

    def bucket_exists(self, bucket_name: str) -> bool:
        return any(name == bucket_name for _, name in self._buckets)
