"""
State Store Errors

Architectural Intent:
- One exception hierarchy for every failure a provisioning step can surface
- Callers branch on the exception class, never on provider-specific error shapes
- Adapters translate their SDK failures into ProviderError before they reach
  the application layer

Taxonomy:
- ClusterNotFoundError: the cluster record does not exist
- ProviderError: an object storage provider call failed
- CredentialValidationError: credentials came back incomplete
- CompensationError: removing partially created credentials failed
- PersistenceError: a field update on the cluster record failed
- StateStoreUsageError: a step was invoked before its prerequisites
"""

from typing import Optional


class StateStoreError(Exception):
    """Base class for all state store provisioning errors."""


class ClusterNotFoundError(StateStoreError):
    def __init__(self, cluster_name: str) -> None:
        super().__init__(f"cluster {cluster_name!r} not found")
        self.cluster_name = cluster_name


class UnsupportedProviderError(StateStoreError):
    def __init__(self, provider_id: str) -> None:
        super().__init__(f"unsupported cloud provider: {provider_id!r}")
        self.provider_id = provider_id


class ProviderError(StateStoreError):
    """A provider adapter call failed (network, auth, quota, ...)."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider


class UnsupportedOperationError(ProviderError):
    def __init__(self, provider: str, operation: str) -> None:
        super().__init__(
            provider, f"{provider} object storage does not support {operation}"
        )
        self.operation = operation


class CredentialValidationError(StateStoreError):
    def __init__(self, provider: str, field: str) -> None:
        super().__init__(
            f"when retrieving {provider} access credentials, {field} was empty"
            " - please retry your cluster creation"
        )
        self.provider = provider
        self.field = field


class CompensationError(StateStoreError):
    def __init__(self, provider: str, bucket_name: str, cause: Exception) -> None:
        super().__init__(
            f"failed to remove partial {provider} access credentials"
            f" for bucket {bucket_name}: {cause}"
        )
        self.provider = provider
        self.bucket_name = bucket_name


class PersistenceError(StateStoreError):
    def __init__(
        self, cluster_name: str, field_name: str, reason: Optional[str] = None
    ) -> None:
        message = f"failed to update {field_name} on cluster {cluster_name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.cluster_name = cluster_name
        self.field_name = field_name


class StateStoreUsageError(StateStoreError):
    """A step was called out of order, e.g. create before credentials."""
