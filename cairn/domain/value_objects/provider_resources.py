"""
Provider-Native Resource Shapes

Architectural Intent:
- The results object storage providers hand back, before normalization
- Adapters build these from SDK/API responses; variants translate them into
  StateStoreCredentials / StateStoreDetails
- Fields keep the provider's own vocabulary (e.g. civo's secret_access_key_id)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CivoAccessCredentials:
    """Civo object store credential. Any field may come back blank."""

    id: str = ""
    name: str = ""
    access_key_id: str = ""
    secret_access_key_id: str = ""


@dataclass(frozen=True)
class CivoBucket:
    id: str
    name: str
    region: str = ""


@dataclass(frozen=True)
class AwsBucket:
    name: str
    location: str


@dataclass(frozen=True)
class SpacesCredentials:
    """DigitalOcean Spaces access keys plus the endpoint they are valid for."""

    access_key: str
    secret_access_key: str
    endpoint: str


@dataclass(frozen=True)
class VultrObjectStorage:
    id: str
    label: str
    region: str
    s3_hostname: str
    s3_access_key: str
    s3_secret_key: str


@dataclass(frozen=True)
class VultrBucketCredentials:
    access_key: str
    secret_access_key: str
    endpoint: str
