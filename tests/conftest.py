"""Shared test fixtures for the Last.fm client."""

from unittest.mock import MagicMock

import pytest

from lastfm_client.client.api_client import ApiClient
from lastfm_client.client.connection import Connection
from lastfm_client.core.session import Session


@pytest.fixture
def mock_connection() -> MagicMock:
    """Mock connection returning an empty response."""
    connection = MagicMock(spec=Connection)
    connection.call.return_value = {}
    connection.get_page_body.return_value = ""
    return connection


@pytest.fixture
def api_client(mock_connection: MagicMock) -> ApiClient:
    """ApiClient wired to the mock connection."""
    return ApiClient(mock_connection, "test_api_key", "test_shared_secret")


@pytest.fixture
def mock_client() -> MagicMock:
    """Mock ApiClient for service tests."""
    client = MagicMock(spec=ApiClient)
    client.api_key = "test_api_key"
    client.signed_call.return_value = {}
    client.unsigned_call.return_value = {}
    return client


@pytest.fixture
def session() -> Session:
    """Sample user session."""
    return Session(name="testuser", key="session_key")
