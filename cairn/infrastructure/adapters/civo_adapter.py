"""
Civo Object Store Adapter

Architectural Intent:
- Implements ObjectStorageProviderPort for Civo object stores
- Simulates the Civo v2 REST API (objectstore/credentials, objectstores)
  with an in-memory registry, so the state store flow runs without an API key

Design Decisions:
- Credentials and buckets are keyed by (name, region); repeating a create
  returns the existing resource
- create_bucket requires an access key previously issued by
  acquire_credentials, matching Civo's owner-key requirement
- delete_credentials is the compensation hook used after a partial credential
  response and is a no-op when nothing exists
"""

import logging
import secrets
import uuid
from typing import Optional

from cairn.domain.errors import ProviderError
from cairn.domain.ports.object_storage_provider_port import ObjectStorageProviderPort
from cairn.domain.value_objects.provider_resources import (
    CivoAccessCredentials,
    CivoBucket,
)

logger = logging.getLogger(__name__)


def _stub_create_credential(name: str, region: str) -> dict:
    """
    Simulate POST /v2/objectstore/credentials.

    The real request body is {"name": name, "region": region}; the response
    carries the generated key pair.
    """
    return {
        "id": str(uuid.uuid4()),
        "name": name,
        "access_key_id": "".join(secrets.choice("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
                                 for _ in range(20)),
        "secret_access_key_id": secrets.token_urlsafe(30),
        "region": region,
        "status": "ready",
    }


def _stub_create_objectstore(name: str, region: str, access_key_id: str) -> dict:
    """Simulate POST /v2/objectstores with an owner access key."""
    return {
        "id": str(uuid.uuid4()),
        "name": name,
        "max_size": 500,
        "owner_info": {"access_key_id": access_key_id},
        "objectstore_endpoint": f"objectstore.{region}.civo.com",
        "status": "ready",
    }


class CivoObjectStorageAdapter(ObjectStorageProviderPort):
    """Civo object store adapter backed by an in-memory registry."""

    def __init__(self, api_key: str = "") -> None:
        self.api_key = api_key
        self._credentials: dict[tuple[str, str], dict] = {}
        self._buckets: dict[tuple[str, str], dict] = {}

    @property
    def provider(self) -> str:
        return "civo"

    def acquire_credentials(self, bucket_name: str, region: str) -> CivoAccessCredentials:
        if not region:
            raise ProviderError(self.provider, "region is required for civo credentials")

        key = (bucket_name, region)
        credential = self._credentials.get(key)
        if credential is None:
            logger.info("Civo create object store credential %s in %s",
                        bucket_name, region)
            credential = _stub_create_credential(bucket_name, region)
            self._credentials[key] = credential
        else:
            logger.info("Civo object store credential %s already exists", bucket_name)

        return CivoAccessCredentials(
            id=credential["id"],
            name=credential["name"],
            access_key_id=credential["access_key_id"],
            secret_access_key_id=credential["secret_access_key_id"],
        )

    def delete_credentials(self, bucket_name: str, region: str) -> None:
        credential = self._credentials.pop((bucket_name, region), None)
        if credential is None:
            logger.debug("No civo credential %s in %s to delete", bucket_name, region)
            return
        logger.info("Deleted civo object store credential %s (%s)",
                    bucket_name, credential["id"])

    def create_bucket(
        self, region: str, bucket_name: str, access_key_id: Optional[str] = None
    ) -> CivoBucket:
        if not access_key_id:
            raise ProviderError(self.provider, "an owner access key is required")
        owners = {c["access_key_id"] for c in self._credentials.values()
                  if c["region"] == region}
        if access_key_id not in owners:
            raise ProviderError(
                self.provider,
                f"access key {access_key_id} is not a known credential in {region}",
            )

        key = (bucket_name, region)
        bucket = self._buckets.get(key)
        if bucket is None:
            logger.info("Civo create object store %s in %s", bucket_name, region)
            bucket = _stub_create_objectstore(bucket_name, region, access_key_id)
            self._buckets[key] = bucket

        return CivoBucket(id=bucket["id"], name=bucket["name"], region=region)

    def has_credentials(self, bucket_name: str, region: str) -> bool:
        return (bucket_name, region) in self._credentials
