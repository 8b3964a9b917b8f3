"""
Composition Root

Architectural Intent:
- Dependency injection composition root for the Cairn application
- Single place where all adapters and use cases are wired together
- No adapter instantiation should occur outside this module

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- Factory function creates and wires all dependencies from CairnConfig
- Telemetry stays in buffer-only mode unless an endpoint is configured
"""

from dataclasses import dataclass
from typing import Optional, Union

from cairn.application.provisioning import (
    AwsStateStoreVariant,
    CivoStateStoreVariant,
    DigitaloceanStateStoreVariant,
    VariantRegistry,
    VultrStateStoreVariant,
)
from cairn.application.use_cases.acquire_state_store_credentials import (
    AcquireStateStoreCredentials,
)
from cairn.application.use_cases.create_state_store import CreateStateStore
from cairn.application.use_cases.get_state_store_status import GetStateStoreStatus
from cairn.application.use_cases.provision_state_store import ProvisionStateStore
from cairn.infrastructure.adapters.aws_adapter import AWSObjectStorageAdapter
from cairn.infrastructure.adapters.civo_adapter import CivoObjectStorageAdapter
from cairn.infrastructure.adapters.digitalocean_adapter import DigitalOceanSpacesAdapter
from cairn.infrastructure.adapters.vultr_adapter import VultrObjectStorageAdapter
from cairn.infrastructure.config import CairnConfig
from cairn.infrastructure.event_bus import EventBus
from cairn.infrastructure.repositories.memory_cluster_repository import (
    InMemoryClusterRepository,
)
from cairn.infrastructure.repositories.sqlite_cluster_repository import (
    SQLiteClusterRepository,
)
from cairn.infrastructure.telemetry.otel_exporter import (
    OTELExporter,
    StateStoreTelemetry,
    create_exporter,
)


@dataclass
class CairnContainer:
    """DI container holding all wired dependencies."""

    cluster_store: Union[InMemoryClusterRepository, SQLiteClusterRepository]
    aws_adapter: AWSObjectStorageAdapter
    civo_adapter: CivoObjectStorageAdapter
    digitalocean_adapter: DigitalOceanSpacesAdapter
    vultr_adapter: VultrObjectStorageAdapter
    variants: VariantRegistry
    event_bus: EventBus
    telemetry: StateStoreTelemetry
    acquire_credentials: AcquireStateStoreCredentials
    create_state_store: CreateStateStore
    provision_state_store: ProvisionStateStore
    state_store_status: GetStateStoreStatus

    @property
    def exporter(self) -> OTELExporter:
        return self.telemetry.exporter


def _create_store(config: CairnConfig):
    if config.store.backend == "memory":
        return InMemoryClusterRepository()
    if config.store.backend == "sqlite":
        store = SQLiteClusterRepository(config.store.db_path)
        store.connect()
        return store
    raise ValueError(f"Unknown store backend: {config.store.backend!r}")


def create_container(config: Optional[CairnConfig] = None) -> CairnContainer:
    """Create and wire all dependencies."""
    config = config or CairnConfig()

    cluster_store = _create_store(config)
    aws_adapter = AWSObjectStorageAdapter(profile=config.aws.profile or None)
    civo_adapter = CivoObjectStorageAdapter(api_key=config.civo.api_key)
    digitalocean_adapter = DigitalOceanSpacesAdapter(
        spaces_key=config.digitalocean.spaces_key,
        spaces_secret=config.digitalocean.spaces_secret,
        spaces_region=config.digitalocean.spaces_region,
    )
    vultr_adapter = VultrObjectStorageAdapter(api_key=config.vultr.api_key)

    variants = VariantRegistry([
        AwsStateStoreVariant(aws_adapter),
        CivoStateStoreVariant(civo_adapter),
        DigitaloceanStateStoreVariant(digitalocean_adapter),
        VultrStateStoreVariant(vultr_adapter),
    ])

    event_bus = EventBus()
    telemetry = StateStoreTelemetry(
        create_exporter(
            endpoint=config.telemetry.endpoint,
            insecure=config.telemetry.insecure,
        )
    )
    telemetry.attach(event_bus)

    acquire_credentials = AcquireStateStoreCredentials(cluster_store, variants, event_bus)
    create_state_store = CreateStateStore(cluster_store, variants, event_bus)
    provision_state_store = ProvisionStateStore(acquire_credentials, create_state_store)
    state_store_status = GetStateStoreStatus(cluster_store, variants)

    return CairnContainer(
        cluster_store=cluster_store,
        aws_adapter=aws_adapter,
        civo_adapter=civo_adapter,
        digitalocean_adapter=digitalocean_adapter,
        vultr_adapter=vultr_adapter,
        variants=variants,
        event_bus=event_bus,
        telemetry=telemetry,
        acquire_credentials=acquire_credentials,
        create_state_store=create_state_store,
        provision_state_store=provision_state_store,
        state_store_status=state_store_status,
    )
