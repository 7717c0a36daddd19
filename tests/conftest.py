"""Shared fixtures for test suite."""

import pytest

from src.config import props


@pytest.fixture(autouse=True)
def reset_published_properties():
    """Start every test with nothing published to the process-wide handle."""
    props.reset()
    yield
    props.reset()


@pytest.fixture
def minimal_config_map():
    """ConfigMap data with only the keys that have no default."""
    return {
        "iam.managed.permission.boundary.policy": "iam-manager-permission-boundary",
        "aws.accountId": "123456789012",
    }
