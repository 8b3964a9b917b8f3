"""
Variant Registry

Architectural Intent:
- Closed mapping from CloudProvider to its StateStoreVariant
- The use cases dispatch through this registry only; adding a provider means
  registering a new variant, never editing the step logic
"""

from __future__ import annotations
from typing import Iterable

from cairn.application.provisioning.base import StateStoreVariant
from cairn.domain.errors import UnsupportedProviderError
from cairn.domain.value_objects.cloud_provider import CloudProvider


class VariantRegistry:
    def __init__(self, variants: Iterable[StateStoreVariant] = ()) -> None:
        self._variants: dict[CloudProvider, StateStoreVariant] = {}
        for variant in variants:
            self.register(variant)

    def register(self, variant: StateStoreVariant) -> None:
        if variant.provider in self._variants:
            raise ValueError(f"variant for {variant.provider} already registered")
        self._variants[variant.provider] = variant

    def for_provider(self, provider: CloudProvider) -> StateStoreVariant:
        try:
            return self._variants[provider]
        except KeyError:
            raise UnsupportedProviderError(str(provider)) from None

    @property
    def providers(self) -> list[CloudProvider]:
        return list(self._variants)
