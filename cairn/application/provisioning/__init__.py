"""
Provider variants for state store provisioning.
"""

from cairn.application.provisioning.base import CredentialsOutcome, StateStoreVariant
from cairn.application.provisioning.aws import AwsStateStoreVariant
from cairn.application.provisioning.civo import CivoStateStoreVariant
from cairn.application.provisioning.digitalocean import DigitaloceanStateStoreVariant
from cairn.application.provisioning.vultr import VultrStateStoreVariant
from cairn.application.provisioning.registry import VariantRegistry

__all__ = [
    "CredentialsOutcome",
    "StateStoreVariant",
    "AwsStateStoreVariant",
    "CivoStateStoreVariant",
    "DigitaloceanStateStoreVariant",
    "VultrStateStoreVariant",
    "VariantRegistry",
]
