"""Tests for CLI module."""

import pytest
from unittest.mock import patch, MagicMock

from cairn.application.dtos.state_store_dtos import StateStoreStepResult
from cairn.application.orchestration.checkpoint import StepAction
from cairn.composition_root import create_container
from cairn.domain.errors import (
    ClusterNotFoundError,
    CredentialValidationError,
    StateStoreUsageError,
)
from cairn.domain.value_objects.state_store import StateStoreDetails
from cairn.infrastructure.config import CairnConfig, StoreConfig
from cairn.presentation.cli.cli import main


def _memory_container():
    return create_container(CairnConfig(store=StoreConfig(backend="memory")))


def _make_container(**overrides):
    """Create a mock container with sensible defaults."""
    container = MagicMock()
    for key, value in overrides.items():
        setattr(container, key, value)
    return container


def _step(action=StepAction.RUN, details=None, provider="civo"):
    return StateStoreStepResult(
        step="StateStoreCredentials",
        cluster_name="demo",
        provider=provider,
        action=action,
        details=details,
    )


class TestCLIHelp:
    def test_no_command_prints_help(self, capsys):
        main([])
        captured = capsys.readouterr()
        assert "checkpointed state store provisioning" in captured.out

    def test_help_flag(self):
        with pytest.raises(SystemExit, match="0"):
            main(["--help"])

    @pytest.mark.parametrize("command", [
        "register", "credentials", "create", "provision", "status",
    ])
    def test_subcommand_help(self, command):
        with pytest.raises(SystemExit, match="0"):
            main([command, "--help"])

    def test_unknown_provider_rejected(self):
        with pytest.raises(SystemExit, match="2"):
            main(["register", "demo", "--provider", "gcp", "--region", "x"])

    def test_register_aws_requires_static_keys(self, capsys):
        with patch("cairn.presentation.cli.cli.create_container") as factory, \
             pytest.raises(SystemExit, match="2"):
            main(["register", "demo", "--provider", "aws", "--region", "us-east-2",
                  "--aws-access-key-id", "AKIA"])
        assert "--aws-secret-access-key" in capsys.readouterr().err
        factory.assert_not_called()

    def test_verbose_flag(self):
        main(["--verbose"])

    def test_debug_flag(self):
        main(["--debug"])


class TestCommands:
    def test_register(self, capsys):
        container = _memory_container()
        with patch("cairn.presentation.cli.cli.create_container", return_value=container):
            main(["register", "demo", "--provider", "civo", "--region", "nyc1"])

        assert "[+] Registered cluster 'demo' (civo, nyc1)." in capsys.readouterr().out
        record = container.cluster_store.get_cluster("demo")
        assert record.cloud_region == "nyc1"

    def test_register_aws_with_keys(self):
        container = _memory_container()
        with patch("cairn.presentation.cli.cli.create_container", return_value=container):
            main(["register", "demo", "--provider", "aws", "--region", "us-east-2",
                  "--aws-access-key-id", "AKIA", "--aws-secret-access-key", "secret"])
            main(["credentials", "demo"])

        record = container.cluster_store.get_cluster("demo")
        assert record.state_store_creds_check is True
        assert record.state_store_credentials.secret_access_key == "secret"

    def test_credentials_performed(self, capsys):
        container = _make_container()
        container.acquire_credentials.execute.return_value = _step()
        with patch("cairn.presentation.cli.cli.create_container", return_value=container):
            main(["credentials", "demo"])

        assert "[+] civo state store credentials created and set." in capsys.readouterr().out
        container.acquire_credentials.execute.assert_called_once_with("demo")
        container.exporter.flush.assert_called_once()
        container.cluster_store.close.assert_called_once()

    def test_credentials_skipped(self, capsys):
        container = _make_container()
        container.acquire_credentials.execute.return_value = _step(StepAction.SKIP)
        with patch("cairn.presentation.cli.cli.create_container", return_value=container):
            main(["credentials", "demo"])

        assert "[*] State store credentials already set" in capsys.readouterr().out

    def test_create_prints_details(self, capsys):
        container = _make_container()
        container.create_state_store.execute.return_value = _step(
            details=StateStoreDetails(name="demo", id="bucket-1")
        )
        with patch("cairn.presentation.cli.cli.create_container", return_value=container):
            main(["create", "demo"])

        out = capsys.readouterr().out
        assert "[+] civo state store bucket created." in out
        assert "id: bucket-1" in out

    def test_provision_and_status(self, capsys):
        container = _memory_container()
        with patch("cairn.presentation.cli.cli.create_container", return_value=container):
            main(["register", "demo", "--provider", "vultr", "--region", "ewr"])
            main(["provision", "demo"])
            main(["status", "demo"])

        out = capsys.readouterr().out
        assert "[+] State store ready." in out
        assert "hostname: ewr.vultrobjects.com" in out
        assert "credentials: done" in out
        assert "create: not required" in out


class TestErrors:
    def test_missing_cluster(self, capsys):
        container = _make_container()
        container.state_store_status.execute.side_effect = ClusterNotFoundError("ghost")
        with patch("cairn.presentation.cli.cli.create_container", return_value=container), \
             pytest.raises(SystemExit, match="1"):
            main(["status", "ghost"])

        assert "[-] cluster 'ghost' not found" in capsys.readouterr().out
        container.cluster_store.close.assert_called_once()

    def test_create_before_credentials(self, capsys):
        container = _make_container()
        container.create_state_store.execute.side_effect = StateStoreUsageError(
            "run the credentials step first"
        )
        with patch("cairn.presentation.cli.cli.create_container", return_value=container), \
             pytest.raises(SystemExit, match="1"):
            main(["create", "demo"])

        assert "[-] run the credentials step first" in capsys.readouterr().out

    def test_step_failure(self, capsys):
        container = _make_container()
        container.acquire_credentials.execute.side_effect = CredentialValidationError(
            "civo", "Name"
        )
        with patch("cairn.presentation.cli.cli.create_container", return_value=container), \
             pytest.raises(SystemExit, match="1"):
            main(["credentials", "demo"])

        out = capsys.readouterr().out
        assert "[-] credentials failed:" in out
        assert "Name was empty" in out
