"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from JSON files
- Provides typed access to all Cairn settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- DigitalOcean Spaces keys also honour the conventional DO_SPACES_KEY /
  DO_SPACES_SECRET variables when not set otherwise
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import dataclasses
import json
import logging
import os

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreConfig:
    """Cluster record store configuration."""
    backend: str = "sqlite"  # "sqlite" or "memory"
    db_path: str = "cairn.db"


@dataclass(frozen=True)
class AWSConfig:
    """AWS S3 configuration."""
    profile: str = ""


@dataclass(frozen=True)
class CivoConfig:
    """Civo object store configuration."""
    api_key: str = ""


@dataclass(frozen=True)
class DigitalOceanConfig:
    """DigitalOcean Spaces configuration."""
    spaces_key: str = ""
    spaces_secret: str = ""
    spaces_region: str = "nyc3"


@dataclass(frozen=True)
class VultrConfig:
    """Vultr object storage configuration."""
    api_key: str = ""


@dataclass(frozen=True)
class TelemetryConfig:
    """OpenTelemetry configuration."""
    endpoint: str = ""
    insecure: bool = False


@dataclass(frozen=True)
class CairnConfig:
    """Root configuration for the Cairn application."""
    store: StoreConfig = field(default_factory=StoreConfig)
    aws: AWSConfig = field(default_factory=AWSConfig)
    civo: CivoConfig = field(default_factory=CivoConfig)
    digitalocean: DigitalOceanConfig = field(default_factory=DigitalOceanConfig)
    vultr: VultrConfig = field(default_factory=VultrConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    log_level: str = "WARNING"


def _env_override(data: dict, prefix: str = "CAIRN") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern CAIRN_SECTION_KEY.
    For example: CAIRN_STORE_DB_PATH=/var/lib/cairn.db, CAIRN_LOG_LEVEL=DEBUG
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        parts = name.split("_", 1)
        if len(parts) == 2 and parts[0] in _SECTIONS:
            section, field_name = parts
            if section not in data:
                data[section] = {}
            data[section][field_name] = value
        else:
            data[name] = value
    return data


def _spaces_env_fallback(data: dict) -> dict:
    """Fill DigitalOcean Spaces keys from DO_SPACES_KEY / DO_SPACES_SECRET."""
    section = data.setdefault("digitalocean", {})
    if not section.get("spaces_key") and os.environ.get("DO_SPACES_KEY"):
        section["spaces_key"] = os.environ["DO_SPACES_KEY"]
    if not section.get("spaces_secret") and os.environ.get("DO_SPACES_SECRET"):
        section["spaces_secret"] = os.environ["DO_SPACES_SECRET"]
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            return json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    # Convert string numbers to int/bool
    for f in dataclasses.fields(cls):
        if f.name in filtered and isinstance(filtered[f.name], str):
            if f.type == "int":
                filtered[f.name] = int(filtered[f.name])
            elif f.type == "bool":
                filtered[f.name] = filtered[f.name].lower() in ("true", "1", "yes")

    return cls(**filtered)


_SECTIONS = {
    "store": StoreConfig,
    "aws": AWSConfig,
    "civo": CivoConfig,
    "digitalocean": DigitalOceanConfig,
    "vultr": VultrConfig,
    "telemetry": TelemetryConfig,
}


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "CAIRN",
) -> CairnConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (CAIRN_SECTION_KEY)
    2. Config file values
    3. Conventional provider variables (DO_SPACES_KEY, DO_SPACES_SECRET)
    4. Defaults

    Args:
        path: Path to config file (JSON). Defaults to cairn.json in CWD.
        env_prefix: Environment variable prefix. Defaults to CAIRN.
    """
    config_path = Path(path) if path else Path("cairn.json")
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)
    data = _spaces_env_fallback(data)

    sections = {
        name: _build_sub_config(cls, data.get(name, {}))
        for name, cls in _SECTIONS.items()
    }
    return CairnConfig(log_level=data.get("log_level", "WARNING"), **sections)
