"""
Object Storage Provider Port

Architectural Intent:
- Port interface for per-cloud object storage operations
- Each provider implements the capabilities its state store path needs;
  the rest raise UnsupportedOperationError
- Results are provider-native shapes; normalization happens in the
  application layer

Contract:
- Adapters translate SDK failures into ProviderError
- create_* calls must be safe to repeat: a duplicate create returns the
  existing resource instead of failing
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from cairn.domain.errors import UnsupportedOperationError


class ObjectStorageProviderPort(ABC):
    """
    Port interface for provider object storage (buckets, access keys).
    """

    @property
    @abstractmethod
    def provider(self) -> str:
        """Provider identifier, e.g. 'civo'."""

    def acquire_credentials(self, bucket_name: str, region: str) -> Any:
        """
        Obtain access credentials for the state store. Depending on the
        provider this may also create the bucket.
        """
        raise UnsupportedOperationError(self.provider, "acquire_credentials")

    def create_bucket(
        self, region: str, bucket_name: str, access_key_id: Optional[str] = None
    ) -> Any:
        """Create a bucket (or object storage instance) and describe it."""
        raise UnsupportedOperationError(self.provider, "create_bucket")

    def create_bucket_with_credentials(self, credentials: Any, bucket_name: str) -> None:
        """Create a bucket using freshly issued access keys."""
        raise UnsupportedOperationError(
            self.provider, "create_bucket_with_credentials"
        )

    def delete_credentials(self, bucket_name: str, region: str) -> None:
        """Remove credentials created for bucket_name in region."""
        raise UnsupportedOperationError(self.provider, "delete_credentials")
