"""Shared pytest fixtures for azure-armrest unit tests."""

from unittest.mock import MagicMock

import httpx
import pytest

from azure_armrest.manager import ArmrestManager


@pytest.fixture
def mock_http_client():
    client = MagicMock(spec=httpx.Client)
    client.is_closed = False
    return client


@pytest.fixture
def manager(mock_http_client):
    """Unauthenticated manager with a fixed subscription and resource group."""
    return ArmrestManager(
        client_id="client-1",
        client_key="secret-1",
        tenant_id="tenant-1",
        subscription_id="sub1",
        resource_group="rg1",
        http_client=mock_http_client,
    )


@pytest.fixture
def authed_manager(manager):
    """Manager that already holds a token."""
    manager.token = "Bearer test-token"
    return manager
