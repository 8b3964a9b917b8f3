"""
Cairn Telemetry Infrastructure

Architectural Intent:
- OpenTelemetry integration for observability
- State store step metrics derived from domain events
"""

from cairn.infrastructure.telemetry.otel_exporter import (
    OTELExporter,
    OTELConfig,
    StateStoreTelemetry,
    create_exporter,
)

__all__ = [
    "OTELExporter",
    "OTELConfig",
    "StateStoreTelemetry",
    "create_exporter",
]
