"""
AWS S3 Object Storage Adapter

Architectural Intent:
- Implements ObjectStorageProviderPort for AWS S3
- Simulates boto3 SDK call patterns without importing the real SDK, enabling
  integration testing and local development with zero cloud credentials
- When the real boto3 library is available, replace the _stub_* helpers with
  actual boto3.client("s3") calls; the public method signatures remain stable

Design Decisions:
- AWS state stores use the cluster's static access keys, so the adapter only
  implements create_bucket; the other capabilities stay unsupported
- create_bucket is idempotent: a bucket already owned by this adapter is
  returned as-is, mirroring S3's BucketAlreadyOwnedByYou handling
- Bucket names are checked against the S3 naming rules before the call
"""

import logging
import re
import uuid
import datetime
from typing import Optional

from cairn.domain.errors import ProviderError
from cairn.domain.ports.object_storage_provider_port import ObjectStorageProviderPort
from cairn.domain.value_objects.provider_resources import AwsBucket

logger = logging.getLogger(__name__)

_BUCKET_NAME_RE = re.compile(r"^[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]$")


# ---------------------------------------------------------------------------
# Internal helpers that mimic the shape of real boto3 response payloads.
# ---------------------------------------------------------------------------

def _stub_create_bucket(region: str, bucket_name: str) -> dict:
    """
    Simulate a boto3 S3.create_bucket() response.

    The real call looks like:
        s3 = boto3.client("s3", region_name=region)
        response = s3.create_bucket(
            Bucket=bucket_name,
            CreateBucketConfiguration={"LocationConstraint": region},
        )

    us-east-1 rejects an explicit LocationConstraint, so it is omitted there.
    """
    return {
        "Location": f"/{bucket_name}",
        "ResponseMetadata": {
            "RequestId": uuid.uuid4().hex[:16].upper(),
            "HTTPStatusCode": 200,
            "HTTPHeaders": {},
        },
    }


# ---------------------------------------------------------------------------
# Public adapter
# ---------------------------------------------------------------------------

class AWSObjectStorageAdapter(ObjectStorageProviderPort):
    """
    AWS S3 object storage adapter.

    The in-memory bucket registry (_buckets) plays the role of the S3 backend.

    Configuration parameters
    ------------------------
    region : str
        Default AWS region (e.g. "us-east-1").
    profile : str | None
        AWS credentials profile name passed to boto3.Session. Ignored in
        stub mode.
    """

    def __init__(self, region: str = "us-east-1", profile: Optional[str] = None) -> None:
        self.region = region
        self.profile = profile
        self._buckets: dict[str, dict] = {}

        logger.debug("AWSObjectStorageAdapter initialised (region=%s, profile=%s)",
                     region, profile)

    @property
    def provider(self) -> str:
        return "aws"

    def create_bucket(
        self, region: str, bucket_name: str, access_key_id: Optional[str] = None
    ) -> AwsBucket:
        """
        Create an S3 bucket, or return it if this account already owns it.

        Raises
        ------
        ProviderError
            When the bucket name violates S3 naming rules.
        """
        effective_region = region or self.region
        if not _BUCKET_NAME_RE.match(bucket_name or ""):
            raise ProviderError(
                self.provider, f"invalid S3 bucket name: {bucket_name!r}"
            )

        existing = self._buckets.get(bucket_name)
        if existing is not None:
            logger.info("S3 bucket %s already exists, reusing it", bucket_name)
            return AwsBucket(name=bucket_name, location=existing["Location"])

        logger.info("AWS S3 create_bucket: bucket=%s region=%s",
                    bucket_name, effective_region)
        response = _stub_create_bucket(effective_region, bucket_name)

        self._buckets[bucket_name] = {
            "Location": response["Location"],
            "Region": effective_region,
            "CreationDate": datetime.datetime.now(datetime.UTC).isoformat(),
        }
        return AwsBucket(name=bucket_name, location=response["Location"])

    def bucket_exists(self, bucket_name: str) -> bool:
        return bucket_name in self._buckets
