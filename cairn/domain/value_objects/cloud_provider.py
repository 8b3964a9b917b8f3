"""
Cloud Provider Value Object

Architectural Intent:
- Closed set of cloud providers whose object storage can back a state store
- Parsing is the single entry point for untrusted provider identifiers
"""

from enum import Enum

from cairn.domain.errors import UnsupportedProviderError


class CloudProvider(Enum):
    AWS = "aws"
    CIVO = "civo"
    DIGITALOCEAN = "digitalocean"
    VULTR = "vultr"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def parse(provider_id: str) -> "CloudProvider":
        """Parse a provider id such as 'civo' (case-insensitive)."""
        normalized = (provider_id or "").strip().lower()
        for provider in CloudProvider:
            if provider.value == normalized:
                return provider
        raise UnsupportedProviderError(provider_id)
