"""Pytest fixtures for CDN invalidation tests."""

from unittest.mock import MagicMock

import pytest

from shared.models import CDNConfig, ProviderInvalidation


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep boto3 away from real credentials."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def cdn_config() -> CDNConfig:
    return CDNConfig(distribution_id="xxxxxxxxxxxxxx", base_path="/foo")


@pytest.fixture
def cloudfront() -> MagicMock:
    """Transport double answering with an in-progress invalidation."""
    transport = MagicMock()
    transport.create_invalidation.return_value = ProviderInvalidation(id="invalidation_id_42", status="InProgress")
    transport.get_invalidation.return_value = ProviderInvalidation(id="invalidation_id_42", status="Completed")
    return transport
