import httpx
import pytest

from plot_inventory.utils.config import config


@pytest.fixture
def mock_mode(monkeypatch):
    monkeypatch.setattr(config, "USE_MOCK_DATA", True)


@pytest.fixture
def real_mode(monkeypatch):
    monkeypatch.setattr(config, "USE_MOCK_DATA", False)
    monkeypatch.setattr(config, "API_URL", "http://inventory.test/api/v1")
    monkeypatch.setattr(config, "API_TOKEN", None)


@pytest.fixture
def make_client():
    """Build an httpx.Client whose requests are answered by `handler`."""
    clients = []

    def factory(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
