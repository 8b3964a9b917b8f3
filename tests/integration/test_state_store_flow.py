"""Integration tests for state store provisioning.

These tests wire real use cases with the simulated provider adapters and a
SQLite cluster store on disk, injecting failures only where noted.
"""

import pytest

from cairn.composition_root import create_container
from cairn.domain.entities.cluster_record import STATE_STORE_CREDENTIALS
from cairn.domain.errors import (
    CredentialValidationError,
    PersistenceError,
    ProviderError,
)
from cairn.domain.value_objects.provider_resources import CivoAccessCredentials
from cairn.infrastructure.config import CairnConfig, DigitalOceanConfig, StoreConfig

from conftest import make_record


@pytest.fixture
def container(tmp_path):
    config = CairnConfig(
        store=StoreConfig(backend="sqlite", db_path=str(tmp_path / "cairn.db")),
        digitalocean=DigitalOceanConfig(spaces_key="DOKEY", spaces_secret="do-secret"),
    )
    c = create_container(config)
    yield c
    c.cluster_store.close()


class TestProvisionFlow:
    def test_civo_end_to_end(self, container):
        container.cluster_store.create_cluster(make_record("civo", region="nyc1"))

        result = container.provision_state_store.execute("demo")

        record = container.cluster_store.get_cluster("demo")
        assert record.state_store_creds_check is True
        assert record.state_store_create_check is True
        assert record.state_store_details.name == "demo"
        assert record.state_store_details == result.details
        assert container.civo_adapter.has_credentials("demo", "nyc1")

    def test_aws_end_to_end(self, container):
        container.cluster_store.create_cluster(make_record(
            "aws", region="us-east-2", state_store_bucket_name="k1-demo",
            aws_access_key_id="AKIA", aws_secret_access_key="secret",
        ))

        container.provision_state_store.execute("demo")

        record = container.cluster_store.get_cluster("demo")
        assert record.state_store_details.aws_state_store_bucket == "k1-demo"
        assert record.state_store_details.aws_artifacts_bucket == "k1-demo-artifacts"
        assert container.aws_adapter.bucket_exists("k1-demo-artifacts")
        assert record.state_store_create_check is False

    def test_digitalocean_end_to_end(self, container):
        container.cluster_store.create_cluster(make_record("digitalocean", region="nyc3"))

        result = container.provision_state_store.execute("demo")

        assert result.details.hostname == "nyc3.digitaloceanspaces.com"
        assert container.digitalocean_adapter.bucket_exists("demo")

    def test_vultr_end_to_end(self, container):
        container.cluster_store.create_cluster(make_record("vultr", region="ewr"))

        result = container.provision_state_store.execute("demo")

        assert result.details.hostname == "ewr.vultrobjects.com"
        assert container.vultr_adapter.bucket_exists("demo")
        status = container.state_store_status.execute("demo")
        assert status.complete

    def test_repeat_provision_is_noop(self, container):
        container.cluster_store.create_cluster(make_record("civo"))
        container.provision_state_store.execute("demo")
        before = container.cluster_store.get_cluster("demo")

        result = container.provision_state_store.execute("demo")

        assert not result.credentials_step.performed
        assert not result.create_step.performed
        assert container.cluster_store.get_cluster("demo") == before


class TestFailureRecovery:
    def test_partial_civo_credentials_are_removed(self, container, monkeypatch):
        adapter = container.civo_adapter
        real_acquire = adapter.acquire_credentials

        def partial(bucket_name, region):
            creds = real_acquire(bucket_name, region)
            return CivoAccessCredentials(
                id=creds.id, name="", access_key_id=creds.access_key_id,
                secret_access_key_id=creds.secret_access_key_id,
            )

        monkeypatch.setattr(adapter, "acquire_credentials", partial)
        container.cluster_store.create_cluster(make_record("civo", region="nyc1"))

        with pytest.raises(CredentialValidationError, match="Name"):
            container.acquire_credentials.execute("demo")

        assert not adapter.has_credentials("demo", "nyc1")
        assert container.cluster_store.get_cluster("demo").state_store_creds_check is False

        monkeypatch.setattr(adapter, "acquire_credentials", real_acquire)
        container.provision_state_store.execute("demo")
        assert container.cluster_store.get_cluster("demo").state_store_create_check

    def test_persistence_failure_then_retry(self, container, monkeypatch):
        store = container.cluster_store
        real_update = store.update_cluster
        failures = []

        def flaky_update(cluster_name, field_name, value):
            if field_name == STATE_STORE_CREDENTIALS and not failures:
                failures.append(field_name)
                raise PersistenceError(cluster_name, field_name, "disk full")
            real_update(cluster_name, field_name, value)

        monkeypatch.setattr(store, "update_cluster", flaky_update)
        store.create_cluster(make_record("vultr", region="ewr"))

        with pytest.raises(PersistenceError):
            container.acquire_credentials.execute("demo")
        assert store.get_cluster("demo").state_store_creds_check is False

        container.acquire_credentials.execute("demo")

        record = store.get_cluster("demo")
        assert record.state_store_creds_check is True
        assert record.state_store_credentials.access_key_id

    def test_missing_spaces_keys_surface_as_provider_error(self):
        container = create_container(CairnConfig(store=StoreConfig(backend="memory")))
        container.cluster_store.create_cluster(make_record("digitalocean"))

        with pytest.raises(ProviderError, match="Spaces keys are not configured"):
            container.acquire_credentials.execute("demo")

        assert container.cluster_store.get_cluster("demo").state_store_creds_check is False
