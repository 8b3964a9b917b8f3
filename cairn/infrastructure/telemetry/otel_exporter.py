"""
OpenTelemetry Exporter for Cairn

Architectural Intent:
- Exports state store step telemetry to OTLP-compatible backends
- Subscribes to state store domain events; the steps themselves never talk
  to telemetry directly
- Metrics are buffered locally when no endpoint is configured

Security:
- Endpoint defaults to empty string (must be explicitly configured)
- Non-localhost http:// endpoints rejected unless insecure=True
- Validation in __post_init__ prevents accidental plaintext export
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Any
from urllib.parse import urlparse
import logging
from datetime import datetime, UTC

from cairn.domain.events.event_base import DomainEvent
from cairn.domain.events.state_store_events import (
    StateStoreCreated,
    StateStoreCredentialsAcquired,
    StateStoreCredentialsCompensated,
    StateStoreStepFailed,
    StateStoreStepSkipped,
    StateStoreStepStarted,
)
from cairn.domain.ports.event_bus_port import EventBusPort

logger = logging.getLogger(__name__)

_STEP_METRIC_NAMES = {
    "StateStoreCredentials": "credentials",
    "StateStoreCreate": "create",
}


@dataclass
class OTELConfig:
    endpoint: str = ""
    service_name: str = "cairn"
    environment: str = "development"
    insecure: bool = False

    def __post_init__(self) -> None:
        if self.endpoint:
            parsed = urlparse(self.endpoint)
            is_localhost = parsed.hostname in ("localhost", "127.0.0.1", "::1")
            if parsed.scheme == "http" and not is_localhost and not self.insecure:
                raise ValueError(
                    f"Non-localhost HTTP endpoint '{self.endpoint}' requires "
                    "insecure=True or use https://. "
                    "Set insecure=True to explicitly allow plaintext export."
                )


class OTELExporter:
    """
    OpenTelemetry metrics exporter for state store steps.
    """

    def __init__(self, config: OTELConfig):
        self.config = config
        self._initialized = False
        self._metrics_buffer: list[dict[str, Any]] = []
        self._meter: Any = None
        self._counters: dict[str, Any] = {}
        self._provider: Any = None

    def initialize(self) -> None:
        """Initialize OpenTelemetry SDK and exporters."""
        if not self.config.endpoint:
            logger.info("OTEL endpoint not configured, telemetry disabled")
            return

        try:
            from opentelemetry import metrics
            from opentelemetry.sdk.metrics import MeterProvider
            from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
            from opentelemetry.sdk.resources import Resource, SERVICE_NAME
            from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import (
                OTLPMetricExporter,
            )
        except ImportError:
            logger.warning("OpenTelemetry SDK not installed, telemetry disabled")
            return

        resource = Resource(
            attributes={
                SERVICE_NAME: self.config.service_name,
                "environment": self.config.environment,
            }
        )
        metric_reader = PeriodicExportingMetricReader(
            OTLPMetricExporter(
                endpoint=self.config.endpoint, insecure=self.config.insecure
            )
        )
        self._provider = MeterProvider(resource=resource, metric_readers=[metric_reader])
        metrics.set_meter_provider(self._provider)
        self._meter = metrics.get_meter(__name__)
        self._initialized = True

    def _get_counter(self, name: str) -> Any:
        """Get or create a counter for a metric name."""
        if name not in self._counters and self._meter:
            self._counters[name] = self._meter.create_counter(name)
        return self._counters.get(name)

    def record_metric(
        self,
        name: str,
        value: float = 1.0,
        attributes: Optional[dict[str, str]] = None,
    ) -> None:
        """Record a counter increment."""
        self._metrics_buffer.append(
            {
                "name": name,
                "value": value,
                "attributes": attributes or {},
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

        if self._initialized:
            counter = self._get_counter(name)
            if counter:
                counter.add(value, attributes=attributes or {})

    def flush(self) -> None:
        """Force export of pending metrics and clear the local buffer."""
        if not self._initialized:
            return
        self._provider.force_flush()
        exported_count = len(self._metrics_buffer)
        self._metrics_buffer.clear()
        if exported_count:
            logger.debug("Flushed %d buffered metrics", exported_count)

    def shutdown(self) -> None:
        if self._initialized:
            self._provider.shutdown()
            self._initialized = False


class StateStoreTelemetry:
    """Translates state store domain events into metrics."""

    def __init__(self, exporter: OTELExporter):
        self.exporter = exporter

    def attach(self, event_bus: EventBusPort) -> None:
        event_bus.subscribe(StateStoreStepStarted, self.on_step_event)
        event_bus.subscribe(StateStoreStepSkipped, self.on_step_event)
        event_bus.subscribe(StateStoreStepFailed, self.on_step_event)
        event_bus.subscribe(StateStoreCredentialsAcquired, self.on_credentials_acquired)
        event_bus.subscribe(StateStoreCreated, self.on_created)
        event_bus.subscribe(StateStoreCredentialsCompensated, self.on_compensated)

    def _attributes(self, event: DomainEvent, provider: str) -> dict[str, str]:
        return {"cluster": event.aggregate_id, "provider": provider}

    def on_step_event(self, event: DomainEvent) -> None:
        outcome = {
            StateStoreStepStarted: "started",
            StateStoreStepSkipped: "skipped",
            StateStoreStepFailed: "failed",
        }[type(event)]
        step = _STEP_METRIC_NAMES.get(event.step, event.step.lower())
        self.exporter.record_metric(
            f"cairn.state_store.{step}.{outcome}",
            attributes=self._attributes(event, event.provider),
        )

    def on_credentials_acquired(self, event: StateStoreCredentialsAcquired) -> None:
        self.exporter.record_metric(
            "cairn.state_store.credentials.completed",
            attributes=self._attributes(event, event.provider),
        )

    def on_created(self, event: StateStoreCreated) -> None:
        self.exporter.record_metric(
            "cairn.state_store.create.completed",
            attributes=self._attributes(event, event.provider),
        )

    def on_compensated(self, event: StateStoreCredentialsCompensated) -> None:
        attributes = self._attributes(event, event.provider)
        attributes["missing_field"] = event.missing_field
        self.exporter.record_metric(
            "cairn.state_store.credentials.compensated", attributes=attributes
        )


def create_exporter(
    endpoint: Optional[str] = None,
    service_name: str = "cairn",
    insecure: bool = False,
) -> OTELExporter:
    """Factory function to create OTEL exporter."""
    config = OTELConfig(
        endpoint=endpoint or "",
        service_name=service_name,
        insecure=insecure,
    )
    exporter = OTELExporter(config)
    exporter.initialize()
    return exporter
