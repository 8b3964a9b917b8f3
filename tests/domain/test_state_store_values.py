"""Tests for state store value objects and the CloudProvider enum."""

import pytest

from cairn.domain.errors import UnsupportedProviderError
from cairn.domain.value_objects.cloud_provider import CloudProvider
from cairn.domain.value_objects.state_store import (
    StateStoreCredentials,
    StateStoreDetails,
)


class TestCloudProvider:
    @pytest.mark.parametrize("raw,expected", [
        ("aws", CloudProvider.AWS),
        ("civo", CloudProvider.CIVO),
        ("DigitalOcean", CloudProvider.DIGITALOCEAN),
        (" vultr ", CloudProvider.VULTR),
    ])
    def test_parse(self, raw, expected):
        assert CloudProvider.parse(raw) is expected

    def test_unknown_provider(self):
        with pytest.raises(UnsupportedProviderError, match="gcp"):
            CloudProvider.parse("gcp")

    def test_str_is_provider_id(self):
        assert str(CloudProvider.DIGITALOCEAN) == "digitalocean"


class TestStateStoreCredentials:
    def test_empty_by_default(self):
        assert StateStoreCredentials().is_empty

    def test_not_empty_with_access_key(self):
        assert not StateStoreCredentials(access_key_id="AK").is_empty

    def test_from_dict_ignores_unknown_keys(self):
        creds = StateStoreCredentials.from_dict(
            {"access_key_id": "AK", "secret_access_key": "S", "extra": 1}
        )
        assert creds == StateStoreCredentials(access_key_id="AK", secret_access_key="S")

    def test_from_none(self):
        assert StateStoreCredentials.from_dict(None) == StateStoreCredentials()

    def test_repr_hides_secret(self):
        creds = StateStoreCredentials(access_key_id="AK", secret_access_key="hunter2")
        assert "hunter2" not in repr(creds)
        assert "AK" in repr(creds)


class TestStateStoreDetails:
    def test_empty_by_default(self):
        assert StateStoreDetails().is_empty

    def test_hostname_only_is_not_empty(self):
        assert not StateStoreDetails(hostname="ewr1.vultrobjects.com").is_empty

    def test_to_dict_keys(self):
        assert set(StateStoreDetails().to_dict()) == {
            "name",
            "id",
            "hostname",
            "aws_state_store_bucket",
            "aws_artifacts_bucket",
        }
