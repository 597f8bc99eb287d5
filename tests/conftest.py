"""Pytest configuration and shared fixtures for polympics-client tests."""

import pytest

from polympics_client import ClientConfig, PolympicsClient
from polympics_client.testing import TEST_BASE_URL, RecordingTransport


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents a developer's real POLYMPICS_* settings from leaking into tests.
    """
    import os

    test_prefixes = ("TEST_", "POLYMPICS_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def transport():
    """A mock transport with no queued responses."""
    return RecordingTransport()


@pytest.fixture
async def client(transport):
    """An unauthenticated client wired to the mock transport."""
    async with PolympicsClient(ClientConfig(base_url=TEST_BASE_URL), transport=transport) as client:
        yield client
