"""
DigitalOcean Spaces Adapter

Architectural Intent:
- Implements ObjectStorageProviderPort for DigitalOcean Spaces
- Spaces keys are account-level and come from configuration
  (DO_SPACES_KEY / DO_SPACES_SECRET); acquire_credentials only packages them
  with the regional endpoint
- Bucket creation goes through the S3-compatible endpoint; simulated here
"""

import logging
from typing import Any

from cairn.domain.errors import ProviderError
from cairn.domain.ports.object_storage_provider_port import ObjectStorageProviderPort
from cairn.domain.value_objects.provider_resources import SpacesCredentials

logger = logging.getLogger(__name__)


class DigitalOceanSpacesAdapter(ObjectStorageProviderPort):
    def __init__(
        self,
        spaces_key: str = "",
        spaces_secret: str = "",
        spaces_region: str = "nyc3",
    ) -> None:
        self.spaces_key = spaces_key
        self.spaces_secret = spaces_secret
        self.spaces_region = spaces_region
        self._buckets: dict[str, dict] = {}

    @property
    def provider(self) -> str:
        return "digitalocean"

    @property
    def endpoint(self) -> str:
        return f"{self.spaces_region}.digitaloceanspaces.com"

    def acquire_credentials(self, bucket_name: str, region: str) -> SpacesCredentials:
        if not self.spaces_key or not self.spaces_secret:
            raise ProviderError(
                self.provider,
                "DigitalOcean Spaces keys are not configured "
                "(set DO_SPACES_KEY and DO_SPACES_SECRET)",
            )
        return SpacesCredentials(
            access_key=self.spaces_key,
            secret_access_key=self.spaces_secret,
            endpoint=self.endpoint,
        )

    def create_bucket_with_credentials(self, credentials: Any, bucket_name: str) -> None:
        if credentials.access_key != self.spaces_key:
            raise ProviderError(self.provider, "InvalidAccessKeyId")

        if bucket_name in self._buckets:
            logger.info("Spaces bucket %s already exists, reusing it", bucket_name)
            return

        logger.info("Spaces create_bucket: bucket=%s endpoint=%s",
                    bucket_name, credentials.endpoint)
        self._buckets[bucket_name] = {"endpoint": credentials.endpoint}

    def bucket_exists(self, bucket_name: str) -> bool:
        return bucket_name in self._buckets
