"""Tests for config source resolution."""

from types import SimpleNamespace

import pytest

from src.config import ConfigSource, MissingConfigSourceError, resolve_source


class TestLocalEnvironment:
    """Tests for the LOCAL development profile."""

    def test_local_env_returns_local_profile(self):
        """Test that LOCAL selects the fixed profile."""
        raw = resolve_source("LOCAL")

        assert raw.source == ConfigSource.LOCAL
        assert raw.get("aws.accountId") == "123456789012"

    @pytest.mark.parametrize("env", ["local", "Local", "LOCAL"])
    def test_local_env_is_case_insensitive(self, env):
        """Test that the LOCAL sentinel matches in any case."""
        assert resolve_source(env).source == ConfigSource.LOCAL

    def test_local_env_ignores_external_config(self):
        """Test that a supplied map is ignored in LOCAL mode."""
        raw = resolve_source("LOCAL", {"aws.accountId": "999999999999"})

        assert raw.source == ConfigSource.LOCAL
        assert raw.get("aws.accountId") == "123456789012"


class TestExternalEnvironment:
    """Tests for caller-supplied config maps."""

    def test_returns_supplied_map(self):
        """Test that a non-local env uses the supplied map."""
        raw = resolve_source("", {"aws.region": "us-east-2"})

        assert raw.source == ConfigSource.EXTERNAL
        assert raw.get("aws.region") == "us-east-2"

    def test_accepts_config_map_like_object(self):
        """Test that objects exposing a data mapping are accepted."""
        config_map = SimpleNamespace(data={"aws.region": "eu-west-1"})

        raw = resolve_source("prod", config_map)

        assert raw.get("aws.region") == "eu-west-1"

    def test_converts_non_string_values(self):
        """Test that non-string values are stored as strings."""
        raw = resolve_source("", {"iam.role.max.limit.per.namespace": 5})

        assert raw.get("iam.role.max.limit.per.namespace") == "5"

    def test_raw_config_is_read_only(self):
        """Test that resolved values cannot be modified."""
        raw = resolve_source("", {"aws.region": "us-east-2"})

        with pytest.raises(TypeError):
            raw.values["aws.region"] = "us-west-1"

    def test_copies_supplied_map(self):
        """Test that later changes to the caller's map do not leak in."""
        data = {"aws.region": "us-east-2"}
        raw = resolve_source("", data)

        data["aws.region"] = "us-west-1"

        assert raw.get("aws.region") == "us-east-2"


class TestMissingConfigSource:
    """Tests for the missing config map error."""

    def test_raises_when_not_supplied(self):
        """Test that omitting the map fails with the exact message."""
        with pytest.raises(MissingConfigSourceError) as exc_info:
            resolve_source("")

        assert str(exc_info.value) == "config map cannot be nil"

    def test_raises_when_none(self):
        """Test that an explicit None fails with the exact message."""
        with pytest.raises(MissingConfigSourceError) as exc_info:
            resolve_source("", None)

        assert str(exc_info.value) == "config map cannot be nil"

    def test_raises_when_empty(self):
        """Test that an empty map is treated as missing."""
        with pytest.raises(MissingConfigSourceError, match="config map cannot be nil"):
            resolve_source("dev", {})

    def test_raises_when_config_map_data_is_none(self):
        """Test that a ConfigMap without data is treated as missing."""
        with pytest.raises(MissingConfigSourceError, match="config map cannot be nil"):
            resolve_source("", SimpleNamespace(data=None))

    def test_error_is_a_value_error(self):
        """Test that config errors can be handled as ValueError."""
        with pytest.raises(ValueError):
            resolve_source(None)
