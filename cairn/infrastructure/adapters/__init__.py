"""
Object storage provider adapters.
"""

from cairn.infrastructure.adapters.aws_adapter import AWSObjectStorageAdapter
from cairn.infrastructure.adapters.civo_adapter import CivoObjectStorageAdapter
from cairn.infrastructure.adapters.digitalocean_adapter import DigitalOceanSpacesAdapter
from cairn.infrastructure.adapters.vultr_adapter import VultrObjectStorageAdapter

__all__ = [
    "AWSObjectStorageAdapter",
    "CivoObjectStorageAdapter",
    "DigitalOceanSpacesAdapter",
    "VultrObjectStorageAdapter",
]
