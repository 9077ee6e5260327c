"""Shared fixtures for integration tests."""

import os
import uuid

import pytest
import pytest_asyncio

from evstore.client import ConnectionSettings, EventStoreHttpConnection

# Skip all integration tests unless RUN_EVSTORE_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_EVSTORE_NETWORK_TESTS") != "1",
    reason="Requires a running store. Set RUN_EVSTORE_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def endpoint() -> str:
    return os.environ.get("EVSTORE_ENDPOINT", "http://127.0.0.1:2113")


@pytest.fixture
def settings() -> ConnectionSettings:
    username = os.environ.get("EVSTORE_USERNAME", "admin")
    password = os.environ.get("EVSTORE_PASSWORD", "changeit")
    return ConnectionSettings(connection_name="integration").with_credentials(username, password)


@pytest.fixture
def stream_name() -> str:
    return f"it-{uuid.uuid4().hex}"


@pytest_asyncio.fixture
async def connection(endpoint, settings):
    async with EventStoreHttpConnection.create(endpoint, settings) as conn:
        yield conn
